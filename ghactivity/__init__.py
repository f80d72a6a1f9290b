"""Typed asynchronous client for GitHub activity events."""

from __future__ import annotations

from .activity import ActivityService
from .events import Event, PayloadDecodeError, decode_event, decode_events
from .orgs import OrganizationsService
from .rest import (
    GitHubAPIError,
    GitHubClientConfig,
    GitHubRestClient,
    ListOptions,
    Response,
    parse_bool_response,
)

__all__ = [
    "ActivityService",
    "Event",
    "GitHubAPIError",
    "GitHubClientConfig",
    "GitHubRestClient",
    "ListOptions",
    "OrganizationsService",
    "PayloadDecodeError",
    "Response",
    "decode_event",
    "decode_events",
    "parse_bool_response",
]
