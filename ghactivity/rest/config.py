"""Configuration for the GitHub REST client."""

from __future__ import annotations

import dataclasses
import os

from .errors import GitHubConfigError

_DEFAULT_BASE_URL = "https://api.github.com/"
_DEFAULT_TIMEOUT_S = 20.0
_DEFAULT_USER_AGENT = "ghactivity/0.1"


@dataclasses.dataclass(frozen=True, slots=True)
class GitHubClientConfig:
    """Configuration for :class:`~ghactivity.rest.client.GitHubRestClient`.

    Attributes
    ----------
    token
        Bearer token sent with every request; ``None`` for anonymous access.
    base_url
        API root that relative request paths resolve against. Must end with a
        slash.
    timeout_s
        Request timeout in seconds.
    user_agent
        Value of the ``User-Agent`` header.

    """

    token: str | None = None
    base_url: str = _DEFAULT_BASE_URL
    timeout_s: float = _DEFAULT_TIMEOUT_S
    user_agent: str = _DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        """Reject base URLs that would drop their last path segment."""
        if not self.base_url.endswith("/"):
            raise GitHubConfigError.invalid_base_url(self.base_url)

    @staticmethod
    def _parse_timeout_from_env() -> float:
        raw_timeout = os.environ.get("GHACTIVITY_GITHUB_TIMEOUT_S")
        if raw_timeout is None:
            return _DEFAULT_TIMEOUT_S

        try:
            timeout_s = float(raw_timeout)
        except ValueError as exc:
            raise GitHubConfigError.invalid_timeout(raw_timeout) from exc

        if timeout_s <= 0:
            raise GitHubConfigError.invalid_timeout(raw_timeout)
        return timeout_s

    @classmethod
    def from_env(cls) -> GitHubClientConfig:
        """Build configuration from environment variables.

        Reads the following environment variables:

        - ``GHACTIVITY_GITHUB_TOKEN``: Optional bearer token
        - ``GHACTIVITY_GITHUB_BASE_URL``: Optional API root override
        - ``GHACTIVITY_GITHUB_TIMEOUT_S``: Optional timeout (positive float)
        - ``GHACTIVITY_USER_AGENT``: Optional User-Agent override

        Raises
        ------
        GitHubConfigError
            If the base URL or timeout is invalid.

        """
        raw_token = os.environ.get("GHACTIVITY_GITHUB_TOKEN")
        token = raw_token.strip() if raw_token is not None else None
        return cls(
            token=token or None,
            base_url=os.environ.get("GHACTIVITY_GITHUB_BASE_URL", _DEFAULT_BASE_URL),
            timeout_s=cls._parse_timeout_from_env(),
            user_agent=os.environ.get("GHACTIVITY_USER_AGENT", _DEFAULT_USER_AGENT),
        )
