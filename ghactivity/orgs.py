"""Organisation membership checks."""

from __future__ import annotations

import typing as typ
from urllib.parse import quote

from ghactivity.rest import parse_bool_response

if typ.TYPE_CHECKING:
    from ghactivity.rest import GitHubRestClient


class OrganizationsService:
    """Organisation endpoints answered by status code alone."""

    def __init__(self, client: GitHubRestClient) -> None:
        """Bind the service to ``client``."""
        self._client = client

    async def is_member(self, org: str, user: str) -> bool:
        """Return whether ``user`` is a member of ``org``."""
        path = f"orgs/{quote(org, safe='')}/members/{quote(user, safe='')}"
        return await parse_bool_response(self._client.request("GET", path))

    async def is_public_member(self, org: str, user: str) -> bool:
        """Return whether ``user`` publicly shows membership of ``org``."""
        path = f"orgs/{quote(org, safe='')}/public_members/{quote(user, safe='')}"
        return await parse_bool_response(self._client.request("GET", path))
