"""GitHub repositories client - typed models and async accessors.

Decodes GitHub repository payloads into immutable pydantic models and
fetches repository sub-resources (collaborators, branches, languages,
issues, comments, labels, milestones, commits).

Example:
    >>> from github_repos import GitHubClient
    >>> async with GitHubClient() as client:
    ...     repo = await client.repository("octocat", "Hello-World").fetch()
    ...     print(repo.basic.full_name, repo.detail.stars_count)

"""

from github_repos.client import GitHubClient
from github_repos.config import ClientConfig
from github_repos.endpoints import RepositoryEndpoint, RepositoryHandle
from github_repos.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    DecodeError,
    GitHubError,
    NetworkError,
    NotFoundError,
    ServerError,
    TransportError,
    UnprocessableEntityError,
)
from github_repos.models import (
    Branch,
    Clone,
    Commit,
    Issue,
    IssueComment,
    Label,
    Milestone,
    Owner,
    Permission,
    Repository,
    RepositoryBasic,
    RepositoryDetail,
    User,
    decode,
)

__version__ = "0.1.0"

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "Branch",
    "ClientConfig",
    "Clone",
    "Commit",
    "ConfigurationError",
    "DecodeError",
    "GitHubClient",
    "GitHubError",
    "Issue",
    "IssueComment",
    "Label",
    "Milestone",
    "NetworkError",
    "NotFoundError",
    "Owner",
    "Permission",
    "Repository",
    "RepositoryBasic",
    "RepositoryDetail",
    "RepositoryEndpoint",
    "RepositoryHandle",
    "ServerError",
    "TransportError",
    "UnprocessableEntityError",
    "User",
    "decode",
]
