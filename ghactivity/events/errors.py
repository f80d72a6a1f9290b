"""Errors raised while decoding event envelopes and payloads."""

from __future__ import annotations

from ghactivity.rest.errors import GitHubError


class EventDecodeError(GitHubError):
    """Raised when an event envelope is not valid JSON of the expected shape."""

    @classmethod
    def invalid_envelope(cls, detail: str) -> EventDecodeError:
        """Return an error wrapping the decoder's complaint."""
        return cls(f"Invalid event envelope: {detail}")


class PayloadDecodeError(GitHubError):
    """Raised when an event payload does not match its registered shape.

    Attributes
    ----------
    event_type
        Discriminator of the event whose payload failed to decode.

    """

    def __init__(self, message: str, *, event_type: str) -> None:
        """Initialise with a message and the failing discriminator."""
        self.event_type = event_type
        super().__init__(message)

    @classmethod
    def for_event_type(cls, event_type: str, detail: str) -> PayloadDecodeError:
        """Return an error naming the discriminator and the underlying cause."""
        return cls(
            f"Failed to decode {event_type} payload: {detail}",
            event_type=event_type,
        )
