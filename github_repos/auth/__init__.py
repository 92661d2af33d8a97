"""Bearer token authentication, plugged into httpx as an ``httpx.Auth`` flow.

GitHub accepts personal access tokens and fine-grained tokens the same way:
``Authorization: Bearer <token>``. Without a token the client sends no
credentials at all and GitHub serves public data only.

"""

from __future__ import annotations

from collections.abc import Generator
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from github_repos.config import ClientConfig


class BearerToken(httpx.Auth):
    """Adds the Authorization header to every outgoing request."""

    def __init__(self, token: str) -> None:
        token = token.strip()
        if not token:
            raise ValueError("token must not be blank")
        self._header = f"Bearer {token}"

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = self._header
        yield request

    def __repr__(self) -> str:
        return "BearerToken(<redacted>)"


def auth_for(config: ClientConfig) -> BearerToken | None:
    """Return the auth flow for ``config``, or None for anonymous access."""
    if config.token:
        return BearerToken(config.token)
    return None
