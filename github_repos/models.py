"""Pydantic models for GitHub repository payloads.

A repository arrives from the API as one flat JSON object, but is modelled
in two phases: ``RepositoryBasic`` (always present) and ``RepositoryDetail``
(present only when the full repository was fetched). A fork's detail embeds
its parent as another complete ``Repository``.

The mapping between GitHub's snake_case wire keys and the model fields is
kept in explicit tables (``REPOSITORY_BASIC_KEYS``, ``REPOSITORY_DETAIL_KEYS``,
``CLONE_KEYS``) which drive the pydantic aliases. Decoding accepts either the
wire key or the field name; encoding with ``by_alias=True`` writes the wire
keys back out in the flat layout.

Example:
    >>> from github_repos.models import Repository
    >>> repo = Repository.decode(api_response)
    >>> print(repo.basic.full_name, repo.detail.stars_count)
    >>> if repo.forked_from:
    ...     print(f"fork of {repo.forked_from.basic.full_name}")

"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import datetime
from enum import Enum
from functools import lru_cache, total_ordering
from typing import Any, get_origin

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    TypeAdapter,
    ValidationError,
    model_serializer,
    model_validator,
)

from github_repos.exceptions import DecodeError

logger = logging.getLogger(__name__)


# =============================================================================
# Wire key tables (external key -> model field)
# =============================================================================

REPOSITORY_BASIC_KEYS: dict[str, str] = {
    "id": "id",
    "name": "name",
    "full_name": "full_name",
    "description": "description",
    "owner": "owner",
    "private": "is_private",
    "fork": "is_fork",
}

REPOSITORY_DETAIL_KEYS: dict[str, str] = {
    "homepage": "homepage",
    "language": "language",
    "default_branch": "default_branch",
    "parent": "parent",
    "size": "size",
    "forks_count": "forks_count",
    "stargazers_count": "stars_count",
    "watchers_count": "watchers_count",
    "open_issues_count": "open_issues_count",
    "has_issues": "has_issues",
    "has_wiki": "has_wiki",
    "has_pages": "has_pages",
    "has_downloads": "has_downloads",
    "created_at": "created",
    "updated_at": "updated",
    "pushed_at": "pushed",
}

CLONE_KEYS: dict[str, str] = {
    "clone_url": "http",
    "ssh_url": "ssh",
}


def wire_aliases(table: Mapping[str, str]) -> Callable[[str], str]:
    """Build a pydantic alias generator from a wire key table.

    Args:
        table: Mapping of external key to model field name.

    Returns:
        Function returning the wire key for a field name. Fields missing
        from the table keep their own name.

    """
    aliases = {field: key for key, field in table.items()}

    def alias_for(field_name: str) -> str:
        return aliases.get(field_name, field_name)

    return alias_for


class GitHubModel(BaseModel):
    """Base model for all GitHub API payloads.

    Provides common configuration for all models:
    - Ignores unknown fields (GitHub adds new fields over time)
    - Frozen: every instance is an immutable snapshot of one payload
    - Accepts both wire keys and field names

    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    @classmethod
    def decode(cls, payload: Any) -> Any:
        """Decode a payload into this model, raising DecodeError on failure."""
        return decode(cls, payload)


# =============================================================================
# User Models
# =============================================================================


@total_ordering
class Permission(Enum):
    """Repository access level, ordered ADMIN > PUSH > PULL.

    Example:
        >>> Permission.ADMIN > Permission.PULL
        True
        >>> Permission.highest({"admin": False, "push": True, "pull": True})
        <Permission.PUSH: 'push'>

    """

    ADMIN = "admin"
    PUSH = "push"
    PULL = "pull"

    @classmethod
    def ordered(cls) -> list[Permission]:
        """Return all permissions from most to least privileged."""
        return list(cls)

    @classmethod
    def highest(cls, flags: Mapping[str, bool] | None) -> Permission | None:
        """Return the strongest permission enabled in a GitHub flags mapping.

        Args:
            flags: The ``permissions`` object from a collaborator or
                repository payload. Keys GitHub adds beyond admin/push/pull
                (``maintain``, ``triage``) are ignored.

        Returns:
            The highest enabled Permission, or None if none is enabled.

        """
        if not flags:
            return None
        for permission in cls:
            if flags.get(permission.value):
                return permission
        return None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Permission):
            return NotImplemented
        members = list(Permission)
        return members.index(self) > members.index(other)


class Owner(GitHubModel):
    """Repository owner reference (user or organization)."""

    id: int
    login: str
    type: str | None = None
    avatar_url: str | None = None
    html_url: str | None = None

    def __str__(self) -> str:
        """Return a human-readable string representation."""
        return f"Owner({self.login})"


class User(GitHubModel):
    """GitHub user as listed by the collaborators endpoint.

    Attributes:
        id: Unique identifier for the user.
        login: Username (handle).
        type: Account type ("User" or "Organization").
        site_admin: Whether user is a GitHub staff member.
        permissions: Access flags on the repository (collaborators only).

    """

    id: int
    login: str
    type: str | None = None
    site_admin: bool = False
    avatar_url: str | None = None
    html_url: str | None = None
    permissions: dict[str, bool] | None = None

    @property
    def permission(self) -> Permission | None:
        """Highest permission this user holds on the repository."""
        return Permission.highest(self.permissions)

    def __str__(self) -> str:
        """Return a human-readable string representation."""
        return f"User({self.login})"


# =============================================================================
# Repository Models
# =============================================================================


class Clone(GitHubModel):
    """Transport URLs for cloning a repository."""

    model_config = ConfigDict(alias_generator=wire_aliases(CLONE_KEYS))

    http: str
    ssh: str


class RepositoryBasic(GitHubModel):
    """Summary fields present in every repository payload.

    Attributes:
        id: Unique identifier assigned by GitHub; never changes.
        name: Repository name (without owner).
        full_name: Full name including owner (e.g., "owner/repo").
        description: Repository description.
        owner: Repository owner.
        is_private: Whether the repository is private.
        is_fork: Whether this is a fork.

    """

    model_config = ConfigDict(alias_generator=wire_aliases(REPOSITORY_BASIC_KEYS))

    id: int
    name: str
    full_name: str
    description: str | None = None
    owner: Owner
    is_private: bool
    is_fork: bool


class RepositoryDetail(GitHubModel):
    """Fields present only when the full repository was fetched.

    Attributes:
        homepage: Project homepage URL.
        language: Primary programming language.
        default_branch: Default branch name.
        parent: The repository this one was forked from.
        size: Repository size in kilobytes.
        forks_count: Number of forks.
        stars_count: Number of stargazers.
        watchers_count: Number of watchers.
        open_issues_count: Number of open issues and pull requests.
        has_issues: Issues enabled.
        has_wiki: Wiki enabled.
        has_pages: GitHub Pages enabled.
        has_downloads: Downloads enabled.
        created: Creation timestamp.
        updated: Last update timestamp.
        pushed: Last push timestamp.
        clone: Clone URLs, when the payload carries them.

    """

    model_config = ConfigDict(alias_generator=wire_aliases(REPOSITORY_DETAIL_KEYS))

    homepage: str | None = None
    language: str | None = None
    default_branch: str | None = None
    parent: Repository | None = None
    size: int | None = None

    forks_count: int
    stars_count: int
    watchers_count: int
    open_issues_count: int

    has_issues: bool
    has_wiki: bool
    has_pages: bool
    has_downloads: bool

    created: datetime
    updated: datetime
    pushed: datetime

    clone: Clone | None = None

    @model_validator(mode="before")
    @classmethod
    def _collect_clone_urls(cls, data: Any) -> Any:
        if not isinstance(data, Mapping) or "clone" in data:
            return data
        # Wire keys from GitHub, or field names from a dump without by_alias
        for keys in (tuple(CLONE_KEYS), tuple(CLONE_KEYS.values())):
            if all(key in data for key in keys):
                urls = dict(zip(CLONE_KEYS.values(), (data[key] for key in keys)))
                return {**data, "clone": urls}
        return data

    @property
    def forked_from(self) -> Repository | None:
        """The parent repository, if this repository is a fork."""
        return self.parent


class Repository(GitHubModel):
    """GitHub repository: summary plus optional detail.

    Decoding takes the flat GitHub payload. Detail is decoded when any of its
    required keys (counts, feature flags, timestamps) is present, and must
    then be complete.

    Example:
        >>> repo = Repository.decode({"id": 1, "name": "x", "full_name": "o/x",
        ...                           "owner": {"id": 2, "login": "o"},
        ...                           "private": False, "fork": False})
        >>> repo.detail is None
        True

    """

    basic: RepositoryBasic
    detail: RepositoryDetail | None = None

    @model_validator(mode="before")
    @classmethod
    def _split_payload(cls, data: Any) -> Any:
        if not isinstance(data, Mapping) or "basic" in data:
            return data
        has_detail = any(key in data for key in _DETAIL_TRIGGER_KEYS)
        return {"basic": data, "detail": data if has_detail else None}

    @model_serializer(mode="wrap")
    def _flatten(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        payload = dict(data.get("basic") or {})
        detail = dict(data.get("detail") or {})
        clone = detail.pop("clone", None)
        payload.update(detail)
        if clone:
            payload.update(clone)
        return payload

    @property
    def id(self) -> int:
        """Shortcut for ``basic.id``."""
        return self.basic.id

    @property
    def full_name(self) -> str:
        """Shortcut for ``basic.full_name``."""
        return self.basic.full_name

    @property
    def forked_from(self) -> Repository | None:
        """The parent repository, if known and this repository is a fork."""
        if self.detail is None:
            return None
        return self.detail.forked_from

    def __str__(self) -> str:
        """Return a human-readable string representation."""
        return f"Repository({self.basic.full_name})"


RepositoryDetail.model_rebuild()
Repository.model_rebuild()

# Keys whose presence means the payload carries the detail phase
_DETAIL_TRIGGER_KEYS = frozenset(
    name
    for key, field in REPOSITORY_DETAIL_KEYS.items()
    if RepositoryDetail.model_fields[field].is_required()
    for name in (key, field)
)


# =============================================================================
# Branch and Commit Models
# =============================================================================


class BranchCommit(GitHubModel):
    """Commit a branch points to."""

    sha: str
    url: str | None = None


class Branch(GitHubModel):
    """Repository branch."""

    name: str
    commit: BranchCommit
    protected: bool = False

    def __str__(self) -> str:
        """Return a human-readable string representation."""
        return f"Branch({self.name})"


class CommitAuthor(GitHubModel):
    """Git author or committer identity."""

    name: str
    email: str | None = None
    date: datetime | None = None


class CommitDetail(GitHubModel):
    """Git-level commit data."""

    message: str
    author: CommitAuthor | None = None
    committer: CommitAuthor | None = None


class Commit(GitHubModel):
    """Commit as listed by the commits endpoint."""

    sha: str
    commit: CommitDetail
    html_url: str | None = None
    author: Owner | None = None

    def __str__(self) -> str:
        """Return short SHA and the first line of the message."""
        first_line = self.commit.message.split("\n", 1)[0]
        return f"Commit({self.sha[:7]}: {first_line})"


# =============================================================================
# Issue Models
# =============================================================================


class Label(GitHubModel):
    """Issue/PR label."""

    name: str
    id: int | None = None
    color: str | None = None
    description: str | None = None
    default: bool = False


class Milestone(GitHubModel):
    """Issue/PR milestone."""

    number: int
    title: str
    id: int | None = None
    state: str = "open"
    description: str | None = None
    open_issues: int = 0
    closed_issues: int = 0
    due_on: datetime | None = None


class Issue(GitHubModel):
    """GitHub issue.

    Pull requests are also listed as issues; they carry a ``pull_request``
    object.

    """

    number: int
    title: str
    id: int | None = None
    state: str = "open"
    body: str | None = None
    user: User | None = None
    labels: list[Label] = Field(default_factory=list)
    milestone: Milestone | None = None
    comments: int = 0
    pull_request: dict[str, Any] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None

    @property
    def is_pull_request(self) -> bool:
        """Check if this issue is actually a pull request."""
        return self.pull_request is not None

    def __str__(self) -> str:
        """Return a human-readable string representation."""
        return f"Issue(#{self.number}: {self.title})"


class IssueComment(GitHubModel):
    """Comment on an issue or pull request."""

    id: int
    body: str | None = None
    user: User | None = None
    html_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# =============================================================================
# Decoding
# =============================================================================


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def _type_name(target: Any) -> str:
    if get_origin(target) is not None:
        return repr(target).replace(f"{__name__}.", "")
    return getattr(target, "__name__", repr(target))


def decode(target: Any, payload: Any) -> Any:
    """Decode a JSON payload into ``target``.

    Args:
        target: A model class or a typing construct such as
            ``list[Label]`` or ``dict[str, int]``.
        payload: Parsed JSON (dict, list, ...).

    Returns:
        The decoded value.

    Raises:
        DecodeError: If a required field is missing or has the wrong type.

    Example:
        >>> labels = decode(list[Label], [{"name": "bug"}])
        >>> labels[0].name
        'bug'

    """
    try:
        return _adapter(target).validate_python(payload)
    except ValidationError as e:
        error = DecodeError.from_validation_error(e, _type_name(target), payload)
        logger.debug("Decode of %s failed at %r: %s", error.target, error.field_path, error.message)
        raise error from e
