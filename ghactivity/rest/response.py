"""Response metadata and error classification for REST calls."""

from __future__ import annotations

import dataclasses
import http
import typing as typ

import httpx
import msgspec

from ghactivity.common.time import from_unix_seconds

from .errors import (
    AbuseRateLimitError,
    AcceptedError,
    ErrorBody,
    GitHubAPIError,
    RateLimitError,
    TwoFactorAuthError,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    import datetime as dt

HEADER_RATE_LIMIT = "X-RateLimit-Limit"
HEADER_RATE_REMAINING = "X-RateLimit-Remaining"
HEADER_RATE_RESET = "X-RateLimit-Reset"
HEADER_OTP = "X-GitHub-OTP"

_ABUSE_RATE_LIMIT_DOCS = "https://developer.github.com/v3#abuse-rate-limits"
_RATE_LIMIT_MESSAGE_PREFIX = "API rate limit exceeded for "


class Rate(msgspec.Struct, kw_only=True):
    """Rate limit state for one category of endpoints.

    Attributes
    ----------
    limit
        Requests per hour the client is currently limited to.
    remaining
        Requests left in the current window.
    reset
        Epoch seconds at which the window resets; ``0`` when unknown.

    """

    limit: int = 0
    remaining: int = 0
    reset: int = 0

    @property
    def reset_at(self) -> dt.datetime | None:
        """Return the reset time as an aware UTC datetime, if known."""
        if not self.reset:
            return None
        return from_unix_seconds(self.reset)


class RateLimits(msgspec.Struct, kw_only=True):
    """Rate limits for core and search endpoints."""

    core: Rate | None = None
    search: Rate | None = None


def _header_int(headers: httpx.Headers, name: str) -> int:
    raw = headers.get(name, "")
    try:
        return int(raw)
    except ValueError:
        return 0


def parse_rate(headers: httpx.Headers) -> Rate:
    """Parse the rate limit headers; absent or garbled values become ``0``."""
    return Rate(
        limit=_header_int(headers, HEADER_RATE_LIMIT),
        remaining=_header_int(headers, HEADER_RATE_REMAINING),
        reset=_header_int(headers, HEADER_RATE_RESET),
    )


def _page_from_link(target: str) -> int | None:
    if not (target.startswith("<") and target.endswith(">")):
        return None
    try:
        url = httpx.URL(target[1:-1])
    except httpx.InvalidURL:
        return None
    page = url.params.get("page")
    if not page:
        return None
    try:
        return int(page)
    except ValueError:
        return 0


def parse_page_links(link_header: str | None) -> dict[str, int]:
    """Map ``rel`` names in a ``Link`` header to their ``page`` numbers.

    Links without a ``page`` query parameter, or that are not wrapped in angle
    brackets, are skipped.

    >>> parse_page_links('<https://api.github.com/events?page=2>; rel="next"')
    {'next': 2}

    """
    pages: dict[str, int] = {}
    if not link_header:
        return pages
    for link in link_header.split(","):
        segments = [segment.strip() for segment in link.strip().split(";")]
        if len(segments) < 2:  # noqa: PLR2004
            continue
        page = _page_from_link(segments[0])
        if page is None:
            continue
        for segment in segments[1:]:
            name, _, value = segment.partition("=")
            if name.strip() == "rel":
                pages[value.strip().strip('"')] = page
    return pages


@dataclasses.dataclass(frozen=True, slots=True)
class Response:
    """Metadata describing a GitHub REST response.

    The page attributes are ``0`` when the response is not part of a paginated
    set, or when there is no such page.
    """

    status_code: int
    headers: httpx.Headers
    next_page: int = 0
    prev_page: int = 0
    first_page: int = 0
    last_page: int = 0
    rate: Rate = dataclasses.field(default_factory=Rate)

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> Response:
        """Build metadata from an ``httpx`` response."""
        pages = parse_page_links(response.headers.get("Link"))
        return cls(
            status_code=response.status_code,
            headers=response.headers,
            next_page=pages.get("next", 0),
            prev_page=pages.get("prev", 0),
            first_page=pages.get("first", 0),
            last_page=pages.get("last", 0),
            rate=parse_rate(response.headers),
        )


def _decode_error_body(content: bytes) -> ErrorBody:
    # Bodies that are empty or do not match the documented shape are ignored.
    if not content:
        return ErrorBody()
    try:
        return msgspec.json.decode(content, type=ErrorBody)
    except msgspec.DecodeError:
        return ErrorBody()


def check_response(response: httpx.Response) -> None:
    """Raise the matching :class:`GitHubAPIError` for a failed response.

    A response is a failure when its status is outside the 2xx range or equals
    202 Accepted.

    Raises
    ------
    AcceptedError
        For 202 Accepted.
    TwoFactorAuthError
        For 401 responses that ask for a one-time password.
    RateLimitError
        For 403 responses reporting an exhausted rate limit.
    AbuseRateLimitError
        For 403 responses from abuse detection.
    GitHubAPIError
        For any other non-2xx response.

    """
    status = response.status_code
    if status == http.HTTPStatus.ACCEPTED:
        raise AcceptedError.scheduled(response)
    if response.is_success:
        return

    body = _decode_error_body(response.content)
    headers = response.headers
    if status == http.HTTPStatus.UNAUTHORIZED and headers.get(
        HEADER_OTP, ""
    ).startswith("required"):
        raise TwoFactorAuthError.http_error(response, body)
    if status == http.HTTPStatus.FORBIDDEN:
        if headers.get(HEADER_RATE_REMAINING) == "0" and body.message.startswith(
            _RATE_LIMIT_MESSAGE_PREFIX
        ):
            raise RateLimitError.exhausted(response, body, parse_rate(headers))
        if body.documentation_url == _ABUSE_RATE_LIMIT_DOCS:
            retry_after = headers.get("Retry-After")
            raise AbuseRateLimitError.throttled(
                response,
                body,
                int(retry_after) if retry_after and retry_after.isdigit() else None,
            )
    raise GitHubAPIError.http_error(response, body)


async def parse_bool_response(call: cabc.Awaitable[object]) -> bool:
    """Await ``call`` and map its outcome to a boolean.

    Several endpoints answer "does this exist" with a status code alone:
    2xx means ``True`` and 404 means ``False``.

    Parameters
    ----------
    call
        Awaitable performing the request.

    Returns
    -------
    bool
        ``True`` when the call succeeds, ``False`` when it fails with 404.

    Raises
    ------
    GitHubAPIError
        For failures with any other status. Transport errors and cancellation
        propagate unchanged.

    """
    try:
        await call
    except GitHubAPIError as exc:
        if exc.status_code == http.HTTPStatus.NOT_FOUND:
            return False
        raise
    return True
