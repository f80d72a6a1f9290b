"""Asynchronous transport for the GitHub REST API."""

from __future__ import annotations

import typing as typ

import httpx
import msgspec

from ghactivity.logging import (
    get_logger,
    log_debug,
    log_error,
    log_exception,
    log_warning,
)

from .config import GitHubClientConfig
from .errors import (
    AbuseRateLimitError,
    GitHubAPIError,
    GitHubConfigError,
    RateLimitError,
    ResponseDecodeError,
    sanitize_url,
)
from .options import encode_options
from .response import RateLimits, Response, check_response

if typ.TYPE_CHECKING:
    import types

logger = get_logger(__name__)

MEDIA_TYPE_V3 = "application/vnd.github.v3+json"


class _RateLimitResources(msgspec.Struct):
    resources: RateLimits | None = None


class GitHubRestClient:
    """Builds, sends and decodes GitHub REST API requests.

    Parameters
    ----------
    config
        Client configuration; defaults to anonymous access to api.github.com.
    http_client
        Optional ``httpx.AsyncClient`` for testing. If not provided, the
        instance creates and owns its own client.

    Examples
    --------
    >>> import asyncio
    >>> from ghactivity.rest import GitHubClientConfig, GitHubRestClient
    >>> client = GitHubRestClient(GitHubClientConfig(token="ghp_..."))
    >>> # events, response = asyncio.run(client.request("GET", "events"))
    >>> asyncio.run(client.aclose())

    """

    def __init__(
        self,
        config: GitHubClientConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialise the client with the provided API configuration."""
        config = config or GitHubClientConfig()
        if config.token is not None and not config.token.strip():
            raise GitHubConfigError.empty_token()

        self._config = config
        self._base_url = httpx.URL(config.base_url)
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=config.timeout_s)

    @property
    def config(self) -> GitHubClientConfig:
        """Return the configuration used to initialise this client."""
        return self._config

    async def aclose(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> GitHubRestClient:
        """Enter an ``async with`` block."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        """Close owned resources on exit."""
        await self.aclose()

    def _headers(self, *, has_body: bool) -> dict[str, str]:
        headers = {"Accept": MEDIA_TYPE_V3}
        if self._config.user_agent:
            headers["User-Agent"] = self._config.user_agent
        if self._config.token:
            headers["Authorization"] = f"Bearer {self._config.token}"
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    def new_request(
        self,
        method: str,
        url: str,
        body: object | None = None,
        *,
        params: dict[str, str | list[str]] | None = None,
    ) -> httpx.Request:
        """Create an API request.

        Parameters
        ----------
        method
            HTTP method.
        url
            Path relative to the configured base URL, without a leading slash.
            Absolute URLs are used as given.
        body
            Value to JSON-encode as the request body, if any.
        params
            Query parameters to append to the URL.

        Returns
        -------
        httpx.Request
            The request, ready for :meth:`do`.

        """
        content = msgspec.json.encode(body) if body is not None else None
        return self._client.build_request(
            method,
            self._base_url.join(url),
            params=params or None,
            content=content,
            headers=self._headers(has_body=content is not None),
        )

    async def do[T](
        self,
        request: httpx.Request,
        result_type: type[T] | None = None,
    ) -> tuple[T | None, Response]:
        """Send ``request`` and decode its body into ``result_type``.

        Parameters
        ----------
        request
            Request built by :meth:`new_request`.
        result_type
            Type to decode the JSON body into. When ``None``, or when the body
            is empty, no decoding happens and ``None`` is returned.

        Returns
        -------
        tuple[T | None, Response]
            The decoded body and the response metadata.

        Raises
        ------
        GitHubAPIError
            If the response status is outside the 2xx range or is 202.
        ResponseDecodeError
            If the body does not decode into ``result_type``.
        httpx.RequestError
            Propagated unchanged on transport failures.

        """
        raw = await self._client.send(request)
        log_debug(
            logger,
            "GitHub %s %s -> %d",
            request.method,
            sanitize_url(request.url),
            raw.status_code,
        )
        response = Response.from_httpx(raw)
        try:
            check_response(raw)
        except (RateLimitError, AbuseRateLimitError) as exc:
            log_warning(logger, "GitHub throttled the client: %s", exc)
            raise
        except GitHubAPIError as exc:
            if raw.is_server_error:
                log_error(logger, "GitHub server error: %s", exc)
            raise

        if result_type is None or not raw.content:
            return (None, response)
        try:
            value = msgspec.json.decode(raw.content, type=result_type)
        except msgspec.DecodeError as exc:
            error = ResponseDecodeError.unexpected_shape(result_type, str(exc))
            log_exception(
                logger,
                f"Undecodable body from {request.method} {sanitize_url(request.url)}",
                exc,
            )
            raise error from exc
        return (value, response)

    async def request[T](
        self,
        method: str,
        path: str,
        *,
        options: msgspec.Struct | None = None,
        body: object | None = None,
        result_type: type[T] | None = None,
    ) -> tuple[T | None, Response]:
        """Build and send a request in one call.

        ``options`` is encoded into query parameters with
        :func:`~ghactivity.rest.options.encode_options`.
        """
        http_request = self.new_request(
            method, path, body, params=encode_options(options)
        )
        return await self.do(http_request, result_type)

    async def rate_limits(self) -> tuple[RateLimits, Response]:
        """Return the current rate limits for the authenticated client."""
        envelope, response = await self.request(
            "GET", "rate_limit", result_type=_RateLimitResources
        )
        if envelope is None or envelope.resources is None:
            return (RateLimits(), response)
        return (envelope.resources, response)
