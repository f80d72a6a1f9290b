"""Registry of payload shapes and the discriminator-driven payload decoder."""

from __future__ import annotations

import types
import typing as typ

import msgspec

from ghactivity.logging import get_logger, log_debug

from . import payloads
from .errors import PayloadDecodeError
from .models import Installation

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = get_logger(__name__)

type PayloadRegistry = cabc.Mapping[str, type[msgspec.Struct]]

PAYLOAD_TYPES: typ.Final[PayloadRegistry] = types.MappingProxyType(
    {
        "CommitCommentEvent": payloads.CommitCommentEvent,
        "CreateEvent": payloads.CreateEvent,
        "DeleteEvent": payloads.DeleteEvent,
        "DeploymentEvent": payloads.DeploymentEvent,
        "DeploymentStatusEvent": payloads.DeploymentStatusEvent,
        "ForkEvent": payloads.ForkEvent,
        "GollumEvent": payloads.GollumEvent,
        "IntegrationInstallationEvent": payloads.IntegrationInstallationEvent,
        "IntegrationInstallationRepositoriesEvent": (
            payloads.IntegrationInstallationRepositoriesEvent
        ),
        "IssueCommentEvent": payloads.IssueCommentEvent,
        "IssuesEvent": payloads.IssuesEvent,
        "LabelEvent": payloads.LabelEvent,
        "MemberEvent": payloads.MemberEvent,
        "MembershipEvent": payloads.MembershipEvent,
        "MilestoneEvent": payloads.MilestoneEvent,
        "PageBuildEvent": payloads.PageBuildEvent,
        "PingEvent": payloads.PingEvent,
        "PublicEvent": payloads.PublicEvent,
        "PullRequestEvent": payloads.PullRequestEvent,
        "PullRequestReviewEvent": payloads.PullRequestReviewEvent,
        "PullRequestReviewCommentEvent": payloads.PullRequestReviewCommentEvent,
        "PushEvent": payloads.PushEvent,
        "ReleaseEvent": payloads.ReleaseEvent,
        "RepositoryEvent": payloads.RepositoryEvent,
        "StatusEvent": payloads.StatusEvent,
        "TeamAddEvent": payloads.TeamAddEvent,
        "WatchEvent": payloads.WatchEvent,
    }
)

_INSTALLATION_FIELD = "installation"


class _InstallationProbe(msgspec.Struct):
    installation: Installation | None = None


def _attach_installation(payload: msgspec.Struct, raw: bytes) -> None:
    """Copy a nested ``installation`` object from ``raw`` into ``payload``.

    The value found here replaces whatever the primary decode stored. Missing
    or malformed installations leave ``payload`` untouched, as do frozen
    shapes, which have no assignable slot.
    """
    if _INSTALLATION_FIELD not in payload.__struct_fields__:
        return
    if payload.__struct_config__.frozen:
        log_debug(
            logger,
            "Skipping installation on frozen payload %s",
            type(payload).__name__,
        )
        return
    try:
        probe = msgspec.json.decode(raw, type=_InstallationProbe)
    except msgspec.DecodeError as exc:
        log_debug(logger, "Ignoring undecodable installation: %s", exc)
        return
    if probe.installation is not None:
        setattr(payload, _INSTALLATION_FIELD, probe.installation)


def decode_payload(
    event_type: str,
    raw: bytes,
    registry: PayloadRegistry = PAYLOAD_TYPES,
) -> payloads.EventPayload | msgspec.Struct | dict[str, typ.Any]:
    """Decode ``raw`` into the shape registered for ``event_type``.

    Parameters
    ----------
    event_type
        Event discriminator, e.g. ``"PushEvent"``.
    raw
        Undecoded JSON payload bytes.
    registry
        Mapping of discriminators to payload Struct types. Extend support for
        new event types by passing ``{**PAYLOAD_TYPES, "NewEvent": NewEvent}``.

    Returns
    -------
    EventPayload | msgspec.Struct | dict[str, Any]
        A fresh instance of the registered shape, or the payload's JSON object
        as a dict when ``event_type`` is not registered.

    Raises
    ------
    PayloadDecodeError
        If the payload does not match the registered shape, or if an
        unregistered event's payload is not a JSON object.

    """
    payload_type = registry.get(event_type)
    if payload_type is None:
        log_debug(logger, "No payload type registered for %s", event_type)
        try:
            return msgspec.json.decode(raw, type=dict[str, typ.Any])
        except msgspec.DecodeError as exc:
            raise PayloadDecodeError.for_event_type(event_type, str(exc)) from exc

    try:
        payload = msgspec.json.decode(raw, type=payload_type)
    except msgspec.DecodeError as exc:
        raise PayloadDecodeError.for_event_type(event_type, str(exc)) from exc
    _attach_installation(payload, raw)
    return payload
