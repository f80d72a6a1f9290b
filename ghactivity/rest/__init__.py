"""Generic transport for the GitHub REST API."""

from __future__ import annotations

from .client import MEDIA_TYPE_V3, GitHubRestClient
from .config import GitHubClientConfig
from .errors import (
    AbuseRateLimitError,
    AcceptedError,
    ErrorBody,
    ErrorDetail,
    GitHubAPIError,
    GitHubConfigError,
    GitHubError,
    RateLimitError,
    ResponseDecodeError,
    TwoFactorAuthError,
)
from .options import ListOptions, encode_options
from .response import (
    Rate,
    RateLimits,
    Response,
    check_response,
    parse_bool_response,
    parse_page_links,
    parse_rate,
)

__all__ = [
    "MEDIA_TYPE_V3",
    "AbuseRateLimitError",
    "AcceptedError",
    "ErrorBody",
    "ErrorDetail",
    "GitHubAPIError",
    "GitHubClientConfig",
    "GitHubConfigError",
    "GitHubError",
    "GitHubRestClient",
    "ListOptions",
    "Rate",
    "RateLimitError",
    "RateLimits",
    "Response",
    "ResponseDecodeError",
    "TwoFactorAuthError",
    "check_response",
    "encode_options",
    "parse_bool_response",
    "parse_page_links",
    "parse_rate",
]
