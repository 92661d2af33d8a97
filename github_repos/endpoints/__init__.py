"""Endpoint modules for the GitHub API.

Available endpoint groups:
    - repository: repository sub-resources (collaborators, branches,
      languages, issues, comments, labels, milestones, commits)

"""

from github_repos.endpoints.base import BaseEndpoint
from github_repos.endpoints.repository import RepositoryEndpoint, RepositoryHandle

__all__ = [
    "BaseEndpoint",
    "RepositoryEndpoint",
    "RepositoryHandle",
]
