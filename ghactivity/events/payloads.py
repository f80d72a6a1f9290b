"""Concrete payload shapes, one per event type.

These shapes are shared by the Events API and webhook deliveries. Fields noted
as webhook-only stay ``None`` for events listed through the API.
"""

from __future__ import annotations

import msgspec

from .models import (
    Branch,
    Deployment,
    DeploymentStatus,
    EditChange,
    Hook,
    Installation,
    Issue,
    IssueComment,
    Label,
    Milestone,
    Organization,
    Page,
    PagesBuild,
    PullRequest,
    PullRequestComment,
    PullRequestReview,
    PushEventCommit,
    PushEventRepository,
    Repository,
    RepositoryComment,
    RepositoryRelease,
    Team,
    User,
)


class CommitCommentEvent(msgspec.Struct, kw_only=True):
    """A commit comment was created."""

    comment: RepositoryComment | None = None
    action: str | None = None
    repository: Repository | None = None
    sender: User | None = None
    installation: Installation | None = None


class CreateEvent(msgspec.Struct, kw_only=True):
    """A repository, branch or tag was created.

    Attributes
    ----------
    ref
        Name of the created ref; ``None`` for repositories.
    ref_type
        One of ``repository``, ``branch`` or ``tag``.

    """

    ref: str | None = None
    ref_type: str | None = None
    master_branch: str | None = None
    description: str | None = None
    pusher_type: str | None = None
    repository: Repository | None = None
    sender: User | None = None
    installation: Installation | None = None


class DeleteEvent(msgspec.Struct, kw_only=True):
    """A branch or tag was deleted."""

    ref: str | None = None
    ref_type: str | None = None
    pusher_type: str | None = None
    repository: Repository | None = None
    sender: User | None = None
    installation: Installation | None = None


class DeploymentEvent(msgspec.Struct, kw_only=True):
    """A deployment was requested. Only delivered to webhooks."""

    deployment: Deployment | None = None
    repository: Repository | None = None
    sender: User | None = None
    installation: Installation | None = None


class DeploymentStatusEvent(msgspec.Struct, kw_only=True):
    """A deployment changed state. Only delivered to webhooks."""

    deployment: Deployment | None = None
    deployment_status: DeploymentStatus | None = None
    repository: Repository | None = None
    sender: User | None = None
    installation: Installation | None = None


class ForkEvent(msgspec.Struct, kw_only=True):
    """A user forked a repository; ``forkee`` is the new repository."""

    forkee: Repository | None = None
    repository: Repository | None = None
    sender: User | None = None
    installation: Installation | None = None


class GollumEvent(msgspec.Struct, kw_only=True):
    """Wiki pages were created or updated."""

    pages: list[Page] = msgspec.field(default_factory=list)
    repository: Repository | None = None
    sender: User | None = None
    installation: Installation | None = None


class IntegrationInstallationEvent(msgspec.Struct, kw_only=True):
    """A GitHub App was installed (``created``) or uninstalled (``deleted``)."""

    action: str | None = None
    installation: Installation | None = None
    sender: User | None = None


class IntegrationInstallationRepositoriesEvent(msgspec.Struct, kw_only=True):
    """Repositories were ``added`` to or ``removed`` from an installation."""

    action: str | None = None
    installation: Installation | None = None
    repositories_added: list[Repository] = msgspec.field(default_factory=list)
    repositories_removed: list[Repository] = msgspec.field(default_factory=list)
    sender: User | None = None


class IssueCommentEvent(msgspec.Struct, kw_only=True):
    """A comment on an issue or pull request was created, edited or deleted."""

    action: str | None = None
    issue: Issue | None = None
    comment: IssueComment | None = None
    changes: EditChange | None = None
    repository: Repository | None = None
    sender: User | None = None
    installation: Installation | None = None


class IssuesEvent(msgspec.Struct, kw_only=True):
    """An issue was opened, closed, edited, assigned or labelled."""

    action: str | None = None
    issue: Issue | None = None
    assignee: User | None = None
    label: Label | None = None
    changes: EditChange | None = None
    repository: Repository | None = None
    sender: User | None = None
    installation: Installation | None = None


class LabelEvent(msgspec.Struct, kw_only=True):
    """A repository label was created, edited or deleted."""

    action: str | None = None
    label: Label | None = None
    changes: EditChange | None = None
    repository: Repository | None = None
    organization: Organization | None = None
    installation: Installation | None = None


class MemberEvent(msgspec.Struct, kw_only=True):
    """A user was added as a repository collaborator."""

    action: str | None = None
    member: User | None = None
    repository: Repository | None = None
    sender: User | None = None
    installation: Installation | None = None


class MembershipEvent(msgspec.Struct, kw_only=True):
    """A user was added to or removed from a team."""

    action: str | None = None
    scope: str | None = None
    member: User | None = None
    team: Team | None = None
    organization: Organization | None = None
    sender: User | None = None
    installation: Installation | None = None


class MilestoneEvent(msgspec.Struct, kw_only=True):
    """A milestone was created, closed, opened, edited or deleted."""

    action: str | None = None
    milestone: Milestone | None = None
    changes: EditChange | None = None
    repository: Repository | None = None
    sender: User | None = None
    organization: Organization | None = None
    installation: Installation | None = None


class PageBuildEvent(msgspec.Struct, kw_only=True):
    """A GitHub Pages build was attempted."""

    build: PagesBuild | None = None
    id: int | None = None
    repository: Repository | None = None
    sender: User | None = None
    installation: Installation | None = None


class PingEvent(msgspec.Struct, kw_only=True):
    """A webhook was added."""

    zen: str | None = None
    hook_id: int | None = None
    hook: Hook | None = None
    installation: Installation | None = None


class PublicEvent(msgspec.Struct, kw_only=True):
    """A private repository was made public."""

    repository: Repository | None = None
    sender: User | None = None
    installation: Installation | None = None


class PullRequestEvent(msgspec.Struct, kw_only=True):
    """A pull request changed.

    A ``closed`` action with ``pull_request.merged`` false means the pull
    request was closed with unmerged commits.
    """

    action: str | None = None
    number: int | None = None
    pull_request: PullRequest | None = None
    changes: EditChange | None = None
    repository: Repository | None = None
    sender: User | None = None
    installation: Installation | None = None


class PullRequestReviewEvent(msgspec.Struct, kw_only=True):
    """A review was submitted on a pull request."""

    action: str | None = None
    review: PullRequestReview | None = None
    pull_request: PullRequest | None = None
    repository: Repository | None = None
    sender: User | None = None
    organization: Organization | None = None
    installation: Installation | None = None


class PullRequestReviewCommentEvent(msgspec.Struct, kw_only=True):
    """A comment on a pull request diff was created, edited or deleted."""

    action: str | None = None
    pull_request: PullRequest | None = None
    comment: PullRequestComment | None = None
    changes: EditChange | None = None
    repository: Repository | None = None
    sender: User | None = None
    installation: Installation | None = None


class PushEvent(msgspec.Struct, kw_only=True):
    """Commits were pushed to a repository.

    Attributes
    ----------
    push_id
        Unique identifier of the push.
    head
        SHA of the most recent commit on ``ref`` after the push.
    ref
        Full git ref that was pushed, e.g. ``refs/heads/main``.
    size
        Number of commits in the push.
    commits
        Commits pushed; the Events API caps this list at 20 entries.
    before
        SHA of the most recent commit on ``ref`` before the push.
    distinct_size
        Number of distinct commits in the push.

    """

    push_id: int | None = None
    head: str | None = None
    ref: str | None = None
    size: int | None = None
    commits: list[PushEventCommit] = msgspec.field(default_factory=list)
    repository: PushEventRepository | None = None
    before: str | None = None
    distinct_size: int | None = None
    after: str | None = None
    created: bool | None = None
    deleted: bool | None = None
    forced: bool | None = None
    base_ref: str | None = None
    compare: str | None = None
    head_commit: PushEventCommit | None = None
    pusher: User | None = None
    sender: User | None = None
    installation: Installation | None = None


class ReleaseEvent(msgspec.Struct, kw_only=True):
    """A release was published."""

    action: str | None = None
    release: RepositoryRelease | None = None
    repository: Repository | None = None
    sender: User | None = None
    installation: Installation | None = None


class RepositoryEvent(msgspec.Struct, kw_only=True):
    """A repository was created, deleted, publicized or privatized."""

    action: str | None = None
    repository: Repository | None = None
    organization: Organization | None = None
    sender: User | None = None
    installation: Installation | None = None


class StatusEvent(msgspec.Struct, kw_only=True):
    """The status of a commit changed. Only delivered to webhooks."""

    sha: str | None = None
    state: str | None = None
    description: str | None = None
    target_url: str | None = None
    branches: list[Branch] = msgspec.field(default_factory=list)
    id: int | None = None
    name: str | None = None
    context: str | None = None
    commit: dict[str, object] | None = None
    created_at: str | None = None
    updated_at: str | None = None
    repository: Repository | None = None
    sender: User | None = None
    installation: Installation | None = None


class TeamAddEvent(msgspec.Struct, kw_only=True):
    """A repository was added to a team."""

    team: Team | None = None
    repository: Repository | None = None
    organization: Organization | None = None
    sender: User | None = None
    installation: Installation | None = None


class WatchEvent(msgspec.Struct, kw_only=True):
    """A user starred a repository. The only action is ``started``."""

    action: str | None = None
    repository: Repository | None = None
    sender: User | None = None
    installation: Installation | None = None


type EventPayload = (
    CommitCommentEvent
    | CreateEvent
    | DeleteEvent
    | DeploymentEvent
    | DeploymentStatusEvent
    | ForkEvent
    | GollumEvent
    | IntegrationInstallationEvent
    | IntegrationInstallationRepositoriesEvent
    | IssueCommentEvent
    | IssuesEvent
    | LabelEvent
    | MemberEvent
    | MembershipEvent
    | MilestoneEvent
    | PageBuildEvent
    | PingEvent
    | PublicEvent
    | PullRequestEvent
    | PullRequestReviewEvent
    | PullRequestReviewCommentEvent
    | PushEvent
    | ReleaseEvent
    | RepositoryEvent
    | StatusEvent
    | TeamAddEvent
    | WatchEvent
)
