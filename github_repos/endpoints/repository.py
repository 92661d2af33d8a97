"""Repository sub-resource endpoints.

Every sub-resource reachable from a repository is one case of the closed
``RepositoryEndpoint`` enum, which pairs the path template with the type the
response decodes into. ``RepositoryHandle`` exposes one coroutine per case.

API Reference: https://docs.github.com/en/rest/repos

"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any

from github_repos.endpoints.base import BaseEndpoint
from github_repos.models import (
    Branch,
    Commit,
    Issue,
    IssueComment,
    Label,
    Milestone,
    Repository,
    User,
)

if TYPE_CHECKING:
    from github_repos.config import ClientConfig
    from github_repos.utils.http import HTTPClient

logger = logging.getLogger(__name__)


class RepositoryEndpoint(Enum):
    """Sub-resources of a repository: (path template, result type)."""

    COLLABORATORS = ("collaborators", list[User])
    BRANCHES = ("branches", list[Branch])
    COMMITS = ("commits", list[Commit])
    LANGUAGES = ("languages", dict[str, int])
    ISSUES = ("issues", list[Issue])
    LABELS = ("labels", list[Label])
    MILESTONES = ("milestones", list[Milestone])
    COMMENTS = ("issues/comments", list[IssueComment])
    COMMENTS_ON_ISSUE = ("issues/{id}/comments", list[IssueComment])

    def __init__(self, template: str, result_type: Any) -> None:
        self.template = template
        self.result_type = result_type

    def path(self, **arguments: object) -> str:
        """Substitute ``{name}`` placeholders in the path template.

        Args:
            **arguments: Values for the placeholders, e.g. ``id=1347``.

        Returns:
            The sub-path relative to the repository.

        Raises:
            ValueError: If a placeholder has no matching argument.

        """
        try:
            return self.template.format(**arguments)
        except KeyError as e:
            raise ValueError(f"Missing path argument {e.args[0]!r} for {self.name}") from e


class RepositoryHandle(BaseEndpoint):
    """Accessors for one repository, identified by owner and name.

    Each accessor performs exactly one GET and one decode. Calls share no
    mutable state and may run concurrently.

    Example:
        >>> repo = client.repository("octocat", "Hello-World")
        >>> labels, branches = await asyncio.gather(repo.labels(), repo.branches())
        >>> for issue in await repo.issues():
        ...     comments = await repo.comments(on=issue)

    """

    __slots__ = ("_name", "_owner")

    def __init__(self, http: HTTPClient, config: ClientConfig, owner: str, name: str) -> None:
        """Initialize the handle.

        Args:
            http: The HTTP client for making requests.
            config: Client configuration.
            owner: Repository owner (user or organization).
            name: Repository name.

        Raises:
            ValueError: If owner or name is empty or contains a slash.

        """
        for part in (owner, name):
            if not part or "/" in part:
                raise ValueError(f"Invalid repository identifier: {owner!r}/{name!r}")
        super().__init__(http, config)
        self._owner = owner
        self._name = name

    @property
    def owner(self) -> str:
        """User or organization login that owns the repository."""
        return self._owner

    @property
    def name(self) -> str:
        """Repository name without the owner."""
        return self._name

    @property
    def full_name(self) -> str:
        """Return "owner/name"."""
        return f"{self._owner}/{self._name}"

    @property
    def url_path(self) -> str:
        """API path of the repository itself."""
        return f"/repos/{self._owner}/{self._name}"

    async def _request(self, endpoint: RepositoryEndpoint, **arguments: object) -> Any:
        path = f"{self.url_path}/{endpoint.path(**arguments)}"
        logger.debug("Fetching %s for %s", endpoint.name, self.full_name)
        return await self._get_decoded(path, endpoint.result_type)

    async def fetch(self) -> Repository:
        """Get the repository itself, with detail.

        Raises:
            NotFoundError: If the repository doesn't exist or is private.

        """
        return await self._get_decoded(self.url_path, Repository)

    async def collaborators(self) -> list[User]:
        """List collaborators; each User carries its ``permissions``.

        Raises:
            AuthorizationError: If the token lacks push access.

        """
        return await self._request(RepositoryEndpoint.COLLABORATORS)

    async def branches(self) -> list[Branch]:
        """List branches."""
        return await self._request(RepositoryEndpoint.BRANCHES)

    async def commits(self) -> list[Commit]:
        """List commits on the default branch."""
        return await self._request(RepositoryEndpoint.COMMITS)

    async def languages(self) -> dict[str, int]:
        """Get languages mapped to their byte counts.

        Example:
            >>> languages = await repo.languages()
            >>> for lang, bytes_ in sorted(languages.items(), key=lambda x: -x[1])[:5]:
            ...     print(f"{lang}: {bytes_:,} bytes")

        """
        return await self._request(RepositoryEndpoint.LANGUAGES)

    async def issues(self) -> list[Issue]:
        """List issues (pull requests included, see ``Issue.is_pull_request``)."""
        return await self._request(RepositoryEndpoint.ISSUES)

    async def comments(self, on: Issue | int | None = None) -> list[IssueComment]:
        """List issue comments.

        Args:
            on: An issue or issue number. When omitted, lists the comments on
                all issues of the repository.

        Returns:
            List of IssueComment objects.

        """
        if on is None:
            return await self._request(RepositoryEndpoint.COMMENTS)
        number = on.number if isinstance(on, Issue) else on
        return await self._request(RepositoryEndpoint.COMMENTS_ON_ISSUE, id=number)

    async def labels(self) -> list[Label]:
        """List labels."""
        return await self._request(RepositoryEndpoint.LABELS)

    async def milestones(self) -> list[Milestone]:
        """List milestones."""
        return await self._request(RepositoryEndpoint.MILESTONES)

    def __repr__(self) -> str:
        return f"RepositoryHandle({self.full_name})"
