"""Event envelopes and polymorphic payload decoding."""

from __future__ import annotations

from .envelope import Event, EventActor, EventRepository, decode_event, decode_events
from .errors import EventDecodeError, PayloadDecodeError
from .models import Installation
from .payloads import (
    CommitCommentEvent,
    CreateEvent,
    DeleteEvent,
    DeploymentEvent,
    DeploymentStatusEvent,
    EventPayload,
    ForkEvent,
    GollumEvent,
    IntegrationInstallationEvent,
    IntegrationInstallationRepositoriesEvent,
    IssueCommentEvent,
    IssuesEvent,
    LabelEvent,
    MemberEvent,
    MembershipEvent,
    MilestoneEvent,
    PageBuildEvent,
    PingEvent,
    PublicEvent,
    PullRequestEvent,
    PullRequestReviewCommentEvent,
    PullRequestReviewEvent,
    PushEvent,
    ReleaseEvent,
    RepositoryEvent,
    StatusEvent,
    TeamAddEvent,
    WatchEvent,
)
from .registry import PAYLOAD_TYPES, PayloadRegistry, decode_payload

__all__ = [
    "PAYLOAD_TYPES",
    "CommitCommentEvent",
    "CreateEvent",
    "DeleteEvent",
    "DeploymentEvent",
    "DeploymentStatusEvent",
    "Event",
    "EventActor",
    "EventDecodeError",
    "EventPayload",
    "EventRepository",
    "ForkEvent",
    "GollumEvent",
    "Installation",
    "IntegrationInstallationEvent",
    "IntegrationInstallationRepositoriesEvent",
    "IssueCommentEvent",
    "IssuesEvent",
    "LabelEvent",
    "MemberEvent",
    "MembershipEvent",
    "MilestoneEvent",
    "PageBuildEvent",
    "PayloadDecodeError",
    "PayloadRegistry",
    "PingEvent",
    "PublicEvent",
    "PullRequestEvent",
    "PullRequestReviewCommentEvent",
    "PullRequestReviewEvent",
    "PushEvent",
    "ReleaseEvent",
    "RepositoryEvent",
    "StatusEvent",
    "TeamAddEvent",
    "WatchEvent",
    "decode_event",
    "decode_events",
    "decode_payload",
]
