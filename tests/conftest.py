"""Test configuration and shared fixtures."""

from __future__ import annotations

import copy
from typing import Any

import httpx
import pytest

from github_repos import ClientConfig, GitHubClient

# =============================================================================
# Sample API Responses
# =============================================================================


@pytest.fixture
def sample_owner_response() -> dict[str, Any]:
    """Sample owner reference as embedded in repository payloads."""
    return {
        "login": "octocat",
        "id": 1,
        "node_id": "MDQ6VXNlcjE=",
        "avatar_url": "https://github.com/images/error/octocat_happy.gif",
        "url": "https://api.github.com/users/octocat",
        "html_url": "https://github.com/octocat",
        "type": "User",
        "site_admin": False,
    }


@pytest.fixture
def minimal_repo_response(sample_owner_response: dict[str, Any]) -> dict[str, Any]:
    """Repository summary without any detail fields."""
    return {
        "id": 1,
        "name": "x",
        "full_name": "o/x",
        "owner": sample_owner_response,
        "private": False,
        "fork": False,
    }


@pytest.fixture
def sample_repo_response(sample_owner_response: dict[str, Any]) -> dict[str, Any]:
    """Sample GitHub repository API response."""
    return {
        "id": 1296269,
        "node_id": "MDEwOlJlcG9zaXRvcnkxMjk2MjY5",
        "name": "Hello-World",
        "full_name": "octocat/Hello-World",
        "private": False,
        "owner": sample_owner_response,
        "html_url": "https://github.com/octocat/Hello-World",
        "description": "This your first repo!",
        "fork": False,
        "url": "https://api.github.com/repos/octocat/Hello-World",
        "clone_url": "https://github.com/octocat/Hello-World.git",
        "ssh_url": "git@github.com:octocat/Hello-World.git",
        "labels_url": "https://api.github.com/repos/octocat/Hello-World/labels{/name}",
        "created_at": "2011-01-26T19:01:12Z",
        "updated_at": "2022-06-10T12:42:47Z",
        "pushed_at": "2022-06-10T12:41:42Z",
        "homepage": "https://github.com",
        "size": 108,
        "stargazers_count": 80,
        "watchers_count": 80,
        "language": "C",
        "has_issues": True,
        "has_projects": True,
        "has_downloads": True,
        "has_wiki": True,
        "has_pages": False,
        "forks_count": 9,
        "archived": False,
        "open_issues_count": 0,
        "topics": ["octocat", "api"],
        "visibility": "public",
        "default_branch": "master",
    }


@pytest.fixture
def sample_fork_response(sample_repo_response: dict[str, Any]) -> dict[str, Any]:
    """A fork of Hello-World that embeds its parent."""
    fork = copy.deepcopy(sample_repo_response)
    fork.update(
        {
            "id": 4242,
            "full_name": "hubot/Hello-World",
            "fork": True,
            "owner": {"login": "hubot", "id": 2, "type": "User"},
            "description": None,
            "stargazers_count": 1,
            "watchers_count": 1,
            "forks_count": 0,
            "clone_url": "https://github.com/hubot/Hello-World.git",
            "ssh_url": "git@github.com:hubot/Hello-World.git",
            "parent": copy.deepcopy(sample_repo_response),
        }
    )
    return fork


@pytest.fixture
def sample_issue_response() -> dict[str, Any]:
    """Sample GitHub issue API response."""
    return {
        "id": 1,
        "node_id": "MDU6SXNzdWUx",
        "url": "https://api.github.com/repos/octocat/Hello-World/issues/1347",
        "number": 1347,
        "state": "open",
        "title": "Found a bug",
        "body": "I'm having a problem with this.",
        "user": {"login": "octocat", "id": 1, "type": "User", "site_admin": False},
        "labels": [
            {
                "id": 208045946,
                "node_id": "MDU6TGFiZWwyMDgwNDU5NDY=",
                "url": "https://api.github.com/repos/octocat/Hello-World/labels/bug",
                "name": "bug",
                "description": "Something isn't working",
                "color": "f29513",
                "default": True,
            }
        ],
        "assignee": None,
        "milestone": {
            "id": 1002604,
            "number": 1,
            "state": "open",
            "title": "v1.0",
            "description": "Tracking milestone for version 1.0",
            "open_issues": 4,
            "closed_issues": 8,
            "due_on": "2012-10-09T23:39:01Z",
        },
        "locked": False,
        "comments": 2,
        "pull_request": None,
        "closed_at": None,
        "created_at": "2011-04-22T13:33:48Z",
        "updated_at": "2011-04-22T13:33:48Z",
    }


@pytest.fixture
def sample_comment_response() -> dict[str, Any]:
    """Sample issue comment API response."""
    return {
        "id": 1,
        "node_id": "MDEyOklzc3VlQ29tbWVudDE=",
        "html_url": "https://github.com/octocat/Hello-World/issues/1347#issuecomment-1",
        "body": "Me too",
        "user": {"login": "octocat", "id": 1},
        "created_at": "2011-04-14T16:00:49Z",
        "updated_at": "2011-04-14T16:00:49Z",
    }


# =============================================================================
# Fake GitHub
# =============================================================================


class FakeGitHub:
    """Routes requests by URL path to canned JSON responses and records them."""

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, Any]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, path: str, body: Any, status: int = 200) -> None:
        self.routes[path] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get(request.url.path, (404, {"message": "Not Found"}))
        return httpx.Response(status, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_github() -> FakeGitHub:
    """Empty fake GitHub; tests register the routes they need."""
    return FakeGitHub()


# =============================================================================
# Client Fixtures
# =============================================================================


@pytest.fixture
def config() -> ClientConfig:
    """Create a test configuration."""
    return ClientConfig(
        base_url="https://api.github.com",
        token="test_token_12345",
        timeout=5.0,
    )


@pytest.fixture
def client(config: ClientConfig, fake_github: FakeGitHub) -> GitHubClient:
    """Client wired to the fake GitHub."""
    return GitHubClient(config=config, transport=fake_github.transport)
