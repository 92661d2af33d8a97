"""Main GitHub client class.

``GitHubClient`` owns the configuration and the asynchronous HTTP client and
hands out ``RepositoryHandle`` objects bound to a repository.

Example:
    >>> from github_repos import GitHubClient
    >>>
    >>> async with GitHubClient(token="ghp_xxx") as client:
    ...     repo = client.repository("octocat", "Hello-World")
    ...     details = await repo.fetch()
    ...     labels = await repo.labels()

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from github_repos.config import ClientConfig
from github_repos.endpoints.repository import RepositoryHandle
from github_repos.utils.http import HTTPClient

if TYPE_CHECKING:
    import httpx

    from github_repos.models import Repository


class GitHubClient:
    """Asynchronous GitHub API client for repository data.

    Context Manager:
        >>> async with GitHubClient() as client:
        ...     languages = await client.repository("python", "cpython").languages()

    """

    __slots__ = ("_config", "_http")

    def __init__(
        self,
        token: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the GitHub client.

        Args:
            token: GitHub personal access token. If not provided, uses
                   GITHUB_TOKEN environment variable or anonymous access.
            base_url: GitHub API base URL. Override for GitHub Enterprise.
            timeout: Request timeout in seconds. Default 30.
            config: Complete configuration; keyword overrides apply on top.
            transport: Custom httpx transport (used by tests).

        """
        overrides = {"token": token, "base_url": base_url, "timeout": timeout}
        if config is None:
            self._config = ClientConfig.from_env(**overrides)
        else:
            changes = {name: value for name, value in overrides.items() if value is not None}
            self._config = config.with_overrides(**changes) if changes else config

        self._http = HTTPClient(self._config, transport=transport)

    def repository(self, owner: str, name: str) -> RepositoryHandle:
        """Return accessors for the repository ``owner/name``.

        No request is made until one of the handle's coroutines is awaited.

        Example:
            >>> milestones = await client.repository("python", "cpython").milestones()

        """
        return RepositoryHandle(self._http, self._config, owner, name)

    def repository_for(self, repository: Repository) -> RepositoryHandle:
        """Return accessors for an already decoded repository."""
        owner, _, name = repository.basic.full_name.partition("/")
        return self.repository(owner, name)

    @property
    def config(self) -> ClientConfig:
        """Get the client configuration."""
        return self._config

    @property
    def is_authenticated(self) -> bool:
        """Check if a token is configured."""
        return self._config.is_authenticated

    async def aclose(self) -> None:
        """Close the client and release its connection pool."""
        await self._http.aclose()

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        """Return a string representation of the client."""
        auth_status = "authenticated" if self.is_authenticated else "anonymous"
        return f"GitHubClient(base_url={self._config.base_url!r}, {auth_status})"
