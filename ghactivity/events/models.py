"""Resource shapes embedded in event payloads.

Every field is optional: the Events API and webhooks populate different
subsets of the same objects, and unknown keys are ignored on decode.
"""

from __future__ import annotations

import datetime as dt  # noqa: TC003

import msgspec


class User(msgspec.Struct, kw_only=True):
    """GitHub user or bot account."""

    login: str | None = None
    id: int | None = None
    avatar_url: str | None = None
    html_url: str | None = None
    url: str | None = None
    name: str | None = None
    email: str | None = None
    type: str | None = None
    site_admin: bool | None = None


class Organization(msgspec.Struct, kw_only=True):
    """GitHub organisation."""

    login: str | None = None
    id: int | None = None
    avatar_url: str | None = None
    html_url: str | None = None
    url: str | None = None
    name: str | None = None
    description: str | None = None


class Repository(msgspec.Struct, kw_only=True):
    """Repository as embedded in webhook payloads."""

    id: int | None = None
    owner: User | None = None
    name: str | None = None
    full_name: str | None = None
    description: str | None = None
    homepage: str | None = None
    default_branch: str | None = None
    created_at: dt.datetime | None = None
    pushed_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None
    html_url: str | None = None
    url: str | None = None
    language: str | None = None
    fork: bool | None = None
    private: bool | None = None
    forks_count: int | None = None
    stargazers_count: int | None = None
    watchers_count: int | None = None
    open_issues_count: int | None = None


class Installation(msgspec.Struct, kw_only=True):
    """Installation of a GitHub App (integration) on an account."""

    id: int | None = None
    account: User | None = None
    access_tokens_url: str | None = None
    repositories_url: str | None = None
    html_url: str | None = None


class Label(msgspec.Struct, kw_only=True):
    """Issue or pull request label."""

    id: int | None = None
    url: str | None = None
    name: str | None = None
    color: str | None = None


class Milestone(msgspec.Struct, kw_only=True):
    """Milestone grouping issues and pull requests."""

    id: int | None = None
    number: int | None = None
    title: str | None = None
    description: str | None = None
    state: str | None = None
    creator: User | None = None
    open_issues: int | None = None
    closed_issues: int | None = None
    html_url: str | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None
    closed_at: dt.datetime | None = None
    due_on: dt.datetime | None = None


class Issue(msgspec.Struct, kw_only=True):
    """Issue, or the issue view of a pull request."""

    id: int | None = None
    number: int | None = None
    state: str | None = None
    locked: bool | None = None
    title: str | None = None
    body: str | None = None
    user: User | None = None
    labels: list[Label] = msgspec.field(default_factory=list)
    assignee: User | None = None
    assignees: list[User] = msgspec.field(default_factory=list)
    milestone: Milestone | None = None
    comments: int | None = None
    closed_at: dt.datetime | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None
    url: str | None = None
    html_url: str | None = None


class IssueComment(msgspec.Struct, kw_only=True):
    """Comment on an issue or pull request conversation."""

    id: int | None = None
    body: str | None = None
    user: User | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None
    url: str | None = None
    html_url: str | None = None
    issue_url: str | None = None


class Team(msgspec.Struct, kw_only=True):
    """Organisation team."""

    id: int | None = None
    name: str | None = None
    description: str | None = None
    url: str | None = None
    slug: str | None = None
    permission: str | None = None
    privacy: str | None = None
    members_count: int | None = None
    repos_count: int | None = None
    organization: Organization | None = None


class PullRequestBranch(msgspec.Struct, kw_only=True):
    """Head or base reference of a pull request."""

    label: str | None = None
    ref: str | None = None
    sha: str | None = None
    repo: Repository | None = None
    user: User | None = None


class PullRequest(msgspec.Struct, kw_only=True):
    """Pull request."""

    id: int | None = None
    number: int | None = None
    state: str | None = None
    title: str | None = None
    body: str | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None
    closed_at: dt.datetime | None = None
    merged_at: dt.datetime | None = None
    user: User | None = None
    merged: bool | None = None
    mergeable: bool | None = None
    merged_by: User | None = None
    comments: int | None = None
    commits: int | None = None
    additions: int | None = None
    deletions: int | None = None
    changed_files: int | None = None
    url: str | None = None
    html_url: str | None = None
    assignee: User | None = None
    assignees: list[User] = msgspec.field(default_factory=list)
    milestone: Milestone | None = None
    maintainer_can_modify: bool | None = None
    head: PullRequestBranch | None = None
    base: PullRequestBranch | None = None


class PullRequestReview(msgspec.Struct, kw_only=True):
    """Review submitted on a pull request."""

    id: int | None = None
    user: User | None = None
    body: str | None = None
    submitted_at: dt.datetime | None = None
    commit_id: str | None = None
    html_url: str | None = None
    pull_request_url: str | None = None
    state: str | None = None


class PullRequestComment(msgspec.Struct, kw_only=True):
    """Comment on a line of a pull request diff."""

    id: int | None = None
    in_reply_to: int | None = None
    body: str | None = None
    path: str | None = None
    diff_hunk: str | None = None
    position: int | None = None
    original_position: int | None = None
    commit_id: str | None = None
    original_commit_id: str | None = None
    user: User | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None
    url: str | None = None
    html_url: str | None = None
    pull_request_url: str | None = None


class RepositoryComment(msgspec.Struct, kw_only=True):
    """Comment on a commit."""

    id: int | None = None
    commit_id: str | None = None
    user: User | None = None
    body: str | None = None
    path: str | None = None
    position: int | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None
    html_url: str | None = None
    url: str | None = None


class ReleaseAsset(msgspec.Struct, kw_only=True):
    """File attached to a release."""

    id: int | None = None
    name: str | None = None
    label: str | None = None
    state: str | None = None
    content_type: str | None = None
    size: int | None = None
    download_count: int | None = None
    browser_download_url: str | None = None


class RepositoryRelease(msgspec.Struct, kw_only=True):
    """Published or draft release."""

    id: int | None = None
    tag_name: str | None = None
    target_commitish: str | None = None
    name: str | None = None
    body: str | None = None
    draft: bool | None = None
    prerelease: bool | None = None
    created_at: dt.datetime | None = None
    published_at: dt.datetime | None = None
    url: str | None = None
    html_url: str | None = None
    author: User | None = None
    assets: list[ReleaseAsset] = msgspec.field(default_factory=list)


class Deployment(msgspec.Struct, kw_only=True):
    """Deployment request for a ref."""

    id: int | None = None
    url: str | None = None
    sha: str | None = None
    ref: str | None = None
    task: str | None = None
    environment: str | None = None
    description: str | None = None
    creator: User | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None


class DeploymentStatus(msgspec.Struct, kw_only=True):
    """State change of a deployment."""

    id: int | None = None
    state: str | None = None
    creator: User | None = None
    description: str | None = None
    target_url: str | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None


class PagesError(msgspec.Struct, kw_only=True):
    """Error reported by a GitHub Pages build."""

    message: str | None = None


class PagesBuild(msgspec.Struct, kw_only=True):
    """GitHub Pages build attempt."""

    url: str | None = None
    status: str | None = None
    error: PagesError | None = None
    pusher: User | None = None
    commit: str | None = None
    duration: int | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None


class Hook(msgspec.Struct, kw_only=True):
    """Repository or organisation webhook."""

    id: int | None = None
    name: str | None = None
    url: str | None = None
    events: list[str] = msgspec.field(default_factory=list)
    active: bool | None = None
    config: dict[str, object] = msgspec.field(default_factory=dict)
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None


class Page(msgspec.Struct, kw_only=True):
    """Single wiki page touched by a Gollum event."""

    page_name: str | None = None
    title: str | None = None
    summary: str | None = None
    action: str | None = None
    sha: str | None = None
    html_url: str | None = None


class EditFrom(msgspec.Struct, kw_only=True):
    """Previous value of an edited field."""

    from_: str | None = msgspec.field(default=None, name="from")


class EditChange(msgspec.Struct, kw_only=True):
    """Changes made when an issue, pull request or comment was edited."""

    title: EditFrom | None = None
    body: EditFrom | None = None


class Branch(msgspec.Struct, kw_only=True):
    """Branch name and head commit."""

    name: str | None = None
    commit: dict[str, object] | None = None
    protected: bool | None = None


class CommitAuthor(msgspec.Struct, kw_only=True):
    """Author or committer of a git commit."""

    name: str | None = None
    email: str | None = None
    date: dt.datetime | None = None
    username: str | None = None


class PushEventCommit(msgspec.Struct, kw_only=True):
    """Commit carried by a push event.

    ``sha`` is populated by the Events API; ``id`` and the file lists only by
    webhooks.
    """

    message: str | None = None
    author: CommitAuthor | None = None
    url: str | None = None
    distinct: bool | None = None
    sha: str | None = None
    id: str | None = None
    tree_id: str | None = None
    timestamp: dt.datetime | None = None
    committer: CommitAuthor | None = None
    added: list[str] = msgspec.field(default_factory=list)
    removed: list[str] = msgspec.field(default_factory=list)
    modified: list[str] = msgspec.field(default_factory=list)


class PushEventRepoOwner(msgspec.Struct, kw_only=True):
    """Owner of the repository in a push event."""

    name: str | None = None
    email: str | None = None


class PushEventRepository(msgspec.Struct, kw_only=True):
    """Repository object in a push event payload.

    Push webhooks send ``created_at`` and ``pushed_at`` as epoch seconds while
    other timestamps are RFC 3339 strings, so those two are kept as sent.
    """

    id: int | None = None
    name: str | None = None
    full_name: str | None = None
    owner: PushEventRepoOwner | None = None
    private: bool | None = None
    description: str | None = None
    fork: bool | None = None
    created_at: int | str | None = None
    pushed_at: int | str | None = None
    updated_at: dt.datetime | None = None
    homepage: str | None = None
    size: int | None = None
    stargazers_count: int | None = None
    watchers_count: int | None = None
    language: str | None = None
    has_issues: bool | None = None
    has_downloads: bool | None = None
    has_wiki: bool | None = None
    has_pages: bool | None = None
    forks_count: int | None = None
    open_issues_count: int | None = None
    default_branch: str | None = None
    master_branch: str | None = None
    organization: str | None = None
    url: str | None = None
    html_url: str | None = None
