"""Errors raised by the GitHub REST transport."""

from __future__ import annotations

import datetime as dt
import typing as typ

import msgspec

from ghactivity.common.time import utcnow

if typ.TYPE_CHECKING:
    import httpx

    from .response import Rate


class GitHubError(Exception):
    """Base exception for all client errors."""


class ErrorDetail(msgspec.Struct, kw_only=True):
    """Details for a single validation failure in an error response.

    Attributes
    ----------
    resource
        Resource on which the error occurred.
    field
        Field on which the error occurred.
    code
        Validation error code such as ``missing`` or ``already_exists``.
    message
        Description of the error; always set when ``code`` is ``custom``.

    """

    resource: str = ""
    field: str = ""
    code: str = ""
    message: str = ""

    def __str__(self) -> str:
        """Render the detail the way the API documents it."""
        return (
            f"{self.code} error caused by {self.field} field "
            f"on {self.resource} resource"
        )


class ErrorBody(msgspec.Struct, kw_only=True):
    """JSON body GitHub sends alongside non-2xx responses."""

    message: str = ""
    errors: list[ErrorDetail] = msgspec.field(default_factory=list)
    documentation_url: str = ""


class GitHubAPIError(GitHubError):
    """Raised when GitHub returns an error response.

    Attributes
    ----------
    status_code
        HTTP status code of the failed response, if available.
    message
        Error message from the response body.
    errors
        Validation details from the response body.
    documentation_url
        Link to documentation describing the failure.
    response
        The failed HTTP response, kept for callers that want to inspect it.

    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: ErrorBody | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        """Initialise with a message, status code and decoded error body."""
        body = body or ErrorBody()
        self.status_code = status_code
        self.message = body.message
        self.errors = body.errors
        self.documentation_url = body.documentation_url
        self.response = response
        super().__init__(message)

    @classmethod
    def http_error(
        cls,
        response: httpx.Response,
        body: ErrorBody | None = None,
    ) -> typ.Self:
        """Return an error for a non-2xx HTTP response."""
        body = body or ErrorBody()
        request = response.request
        details = ", ".join(str(detail) for detail in body.errors)
        msg = (
            f"{request.method} {sanitize_url(request.url)}: "
            f"{response.status_code} {body.message} [{details}]"
        )
        return cls(msg, status_code=response.status_code, body=body, response=response)


class TwoFactorAuthError(GitHubAPIError):
    """Raised when basic auth needs a one-time password to proceed."""


class RateLimitError(GitHubAPIError):
    """Raised when the primary rate limit is exhausted."""

    rate: Rate | None = None

    @classmethod
    def exhausted(
        cls,
        response: httpx.Response,
        body: ErrorBody,
        rate: Rate,
    ) -> RateLimitError:
        """Return an error describing when the rate limit resets."""
        request = response.request
        reset_at = rate.reset_at
        reset_in = (reset_at - utcnow()) if reset_at else dt.timedelta(0)
        msg = (
            f"{request.method} {sanitize_url(request.url)}: "
            f"{response.status_code} {body.message}; rate reset in {reset_in}"
        )
        error = cls(msg, status_code=response.status_code, body=body, response=response)
        error.rate = rate
        return error


class AbuseRateLimitError(GitHubAPIError):
    """Raised when GitHub's abuse detection throttles the client."""

    retry_after: int | None = None

    @classmethod
    def throttled(
        cls,
        response: httpx.Response,
        body: ErrorBody,
        retry_after: int | None,
    ) -> AbuseRateLimitError:
        """Return an error carrying the advised ``Retry-After`` seconds."""
        error = cls.http_error(response, body)
        error.retry_after = retry_after
        return error


class AcceptedError(GitHubAPIError):
    """Raised for 202 Accepted: GitHub scheduled a job, try again later."""

    @classmethod
    def scheduled(cls, response: httpx.Response) -> AcceptedError:
        """Return an error for a 202 Accepted response."""
        return cls(
            "job scheduled on GitHub side; try again later",
            status_code=response.status_code,
            response=response,
        )


class GitHubConfigError(GitHubError):
    """Raised when client configuration is invalid."""

    @classmethod
    def empty_token(cls) -> GitHubConfigError:
        """Return an error when the provided token is empty."""
        return cls("GitHub token must be non-empty")

    @classmethod
    def invalid_base_url(cls, url: str) -> GitHubConfigError:
        """Return an error for a base URL without a trailing slash."""
        return cls(f"GitHub base URL must have a trailing slash: {url!r}")

    @classmethod
    def invalid_timeout(cls, value: str) -> GitHubConfigError:
        """Return an error for a non-positive or non-numeric timeout."""
        return cls(f"Invalid timeout '{value}'. Must be a positive number of seconds")


def sanitize_url(url: httpx.URL) -> httpx.URL:
    """Redact the ``client_secret`` query parameter from ``url``."""
    if url.params.get("client_secret"):
        return url.copy_set_param("client_secret", "REDACTED")
    return url


class ResponseDecodeError(GitHubError):
    """Raised when a successful response body does not match the expected type."""

    @classmethod
    def unexpected_shape(cls, target: object, detail: str) -> ResponseDecodeError:
        """Return an error naming the target type and the decoder's complaint."""
        return cls(f"GitHub response did not decode as {target}: {detail}")
