"""Event envelope carrying a type discriminator and an undecoded payload."""

from __future__ import annotations

import datetime as dt  # noqa: TC003
import typing as typ

import msgspec

from .errors import EventDecodeError
from .registry import PAYLOAD_TYPES, decode_payload

if typ.TYPE_CHECKING:
    from .payloads import EventPayload
    from .registry import PayloadRegistry


class EventRepository(msgspec.Struct, kw_only=True):
    """Repository reference embedded in an event envelope."""

    id: int | None = None
    name: str | None = None
    url: str | None = None


class EventActor(msgspec.Struct, kw_only=True):
    """User or organisation reference embedded in an event envelope."""

    id: int | None = None
    login: str | None = None
    display_login: str | None = None
    gravatar_id: str | None = None
    url: str | None = None
    avatar_url: str | None = None


class Event(msgspec.Struct, kw_only=True):
    """Activity event as returned by the Events API.

    The payload is kept as the raw JSON bytes it arrived as. Call
    :meth:`parse_payload` to decode it into the shape matching ``type``.

    Attributes
    ----------
    type
        Event discriminator, e.g. ``"PushEvent"``.
    payload
        Undecoded payload JSON object.
    id
        Event identifier.
    actor
        User who triggered the event.
    repo
        Repository the event belongs to.
    org
        Organisation the event belongs to, when any.
    created_at
        When the event was created.
    public
        Whether the event is visible publicly.

    """

    type: str
    payload: msgspec.Raw
    id: str | None = None
    actor: EventActor | None = None
    repo: EventRepository | None = None
    org: EventActor | None = None
    created_at: dt.datetime | None = None
    public: bool | None = None

    def __post_init__(self) -> None:
        """Reject payloads that are not JSON objects."""
        if not bytes(self.payload).lstrip().startswith(b"{"):
            msg = "Expected `object` for `$.payload`"
            raise TypeError(msg)

    @property
    def raw_payload(self) -> bytes:
        """Return the payload bytes exactly as received."""
        return bytes(self.payload)

    def parse_payload(
        self,
        registry: PayloadRegistry = PAYLOAD_TYPES,
    ) -> EventPayload | msgspec.Struct | dict[str, typ.Any]:
        """Decode the payload into the shape registered for :attr:`type`.

        Each call decodes the stored bytes afresh and leaves the envelope
        unchanged. Unknown event types decode into a plain ``dict``.

        Raises
        ------
        PayloadDecodeError
            If the payload does not match the shape registered for the type.

        """
        return decode_payload(self.type, self.raw_payload, registry)


def decode_event(data: bytes | str) -> Event:
    """Decode a single event envelope, e.g. a stored or forwarded event.

    Raises
    ------
    EventDecodeError
        If ``data`` is not JSON, or ``type`` or ``payload`` is missing or of
        the wrong JSON kind.

    """
    try:
        return msgspec.json.decode(data, type=Event)
    except msgspec.DecodeError as exc:
        raise EventDecodeError.invalid_envelope(str(exc)) from exc


def decode_events(data: bytes | str) -> list[Event]:
    """Decode a JSON array of event envelopes, as sent by listing endpoints.

    Raises
    ------
    EventDecodeError
        If ``data`` is not a JSON array of valid envelopes.

    """
    try:
        return msgspec.json.decode(data, type=list[Event])
    except msgspec.DecodeError as exc:
        raise EventDecodeError.invalid_envelope(str(exc)) from exc
