"""Query option structures and their encoding into URL parameters."""

from __future__ import annotations

import typing as typ

import msgspec


class ListOptions(msgspec.Struct, kw_only=True):
    """Pagination parameters accepted by list endpoints.

    Attributes
    ----------
    page
        Page of results to retrieve.
    per_page
        Number of results per page.

    """

    page: int = 0
    per_page: int = 0


def _encode_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_options(options: msgspec.Struct | None) -> dict[str, str | list[str]]:
    """Encode a Struct of query options into query parameters.

    Empty values (``0``, ``""``, ``None``, ``False`` and empty sequences) are
    omitted. Field renames declared on the Struct are honoured.

    >>> encode_options(ListOptions(page=2))
    {'page': '2'}

    """
    if options is None:
        return {}
    params: dict[str, str | list[str]] = {}
    raw = typ.cast("dict[str, object]", msgspec.to_builtins(options))
    for key, value in raw.items():
        if value in (None, "", 0, False, [], ()):
            continue
        if isinstance(value, list):
            params[key] = [_encode_value(item) for item in value]
        else:
            params[key] = _encode_value(value)
    return params
