"""Common time utilities."""

from __future__ import annotations

import datetime as dt


def utcnow() -> dt.datetime:
    """Return an aware UTC timestamp."""
    return dt.datetime.now(dt.UTC)


def from_unix_seconds(value: int) -> dt.datetime:
    """Convert epoch seconds, as sent in rate limit headers, to aware UTC."""
    return dt.datetime.fromtimestamp(value, tz=dt.UTC)
