"""Activity endpoints: event listings and starring checks."""

from __future__ import annotations

import typing as typ
from urllib.parse import quote

from ghactivity.events import Event
from ghactivity.rest import parse_bool_response

if typ.TYPE_CHECKING:
    from ghactivity.rest import GitHubRestClient, ListOptions, Response


def _segment(value: str) -> str:
    return quote(value, safe="")


class ActivityService:
    """Lists activity events through a :class:`GitHubRestClient`.

    Every listing returns the decoded envelopes and the response metadata,
    whose page attributes tell the caller where the next page starts.
    """

    def __init__(self, client: GitHubRestClient) -> None:
        """Bind the service to ``client``."""
        self._client = client

    async def _list(
        self, path: str, options: ListOptions | None
    ) -> tuple[list[Event], Response]:
        events, response = await self._client.request(
            "GET", path, options=options, result_type=list[Event]
        )
        return (events or [], response)

    async def list_events(
        self, options: ListOptions | None = None
    ) -> tuple[list[Event], Response]:
        """List public events across GitHub."""
        return await self._list("events", options)

    async def list_repository_events(
        self, owner: str, repo: str, options: ListOptions | None = None
    ) -> tuple[list[Event], Response]:
        """List events for a repository."""
        path = f"repos/{_segment(owner)}/{_segment(repo)}/events"
        return await self._list(path, options)

    async def list_events_for_repo_network(
        self, owner: str, repo: str, options: ListOptions | None = None
    ) -> tuple[list[Event], Response]:
        """List public events for a network of repositories."""
        path = f"networks/{_segment(owner)}/{_segment(repo)}/events"
        return await self._list(path, options)

    async def list_events_for_organization(
        self, org: str, options: ListOptions | None = None
    ) -> tuple[list[Event], Response]:
        """List public events for an organisation."""
        return await self._list(f"orgs/{_segment(org)}/events", options)

    async def list_events_performed_by_user(
        self,
        user: str,
        *,
        public_only: bool = False,
        options: ListOptions | None = None,
    ) -> tuple[list[Event], Response]:
        """List events performed by a user.

        Private events are included when the client is authenticated as
        ``user`` and ``public_only`` is false.
        """
        path = f"users/{_segment(user)}/events"
        if public_only:
            path = f"{path}/public"
        return await self._list(path, options)

    async def list_events_received_by_user(
        self,
        user: str,
        *,
        public_only: bool = False,
        options: ListOptions | None = None,
    ) -> tuple[list[Event], Response]:
        """List events received by a user through watching and following."""
        path = f"users/{_segment(user)}/received_events"
        if public_only:
            path = f"{path}/public"
        return await self._list(path, options)

    async def list_user_events_for_organization(
        self, org: str, user: str, options: ListOptions | None = None
    ) -> tuple[list[Event], Response]:
        """List an organisation's events as seen by the authenticated ``user``."""
        path = f"users/{_segment(user)}/events/orgs/{_segment(org)}"
        return await self._list(path, options)

    async def is_starred(self, owner: str, repo: str) -> bool:
        """Return whether the authenticated user has starred a repository.

        GitHub answers 204 when starred and 404 when not.
        """
        path = f"user/starred/{_segment(owner)}/{_segment(repo)}"
        return await parse_bool_response(self._client.request("GET", path))
