"""Connection settings for the GitHub repositories client.

``ClientConfig`` is a plain frozen value. ``ClientConfig.from_env`` builds one
from the process environment (after reading a ``.env`` file, if one is found
from the working directory upwards), letting explicit arguments win:

    GITHUB_BASE_URL   API root, e.g. https://github.example.com/api/v3
    GITHUB_TOKEN      token sent as ``Authorization: Bearer ...``
    GITHUB_TIMEOUT    seconds to wait for connect, read and write

Example:
    >>> config = ClientConfig.from_env(timeout=10.0)
    >>> enterprise = config.with_overrides(base_url="https://github.example.com/api/v3")

"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

import httpx
from dotenv import find_dotenv, load_dotenv

from github_repos.exceptions import ConfigurationError

# Field name -> environment variable read by ClientConfig.from_env
ENVIRONMENT: dict[str, str] = {
    "base_url": "GITHUB_BASE_URL",
    "token": "GITHUB_TOKEN",
    "timeout": "GITHUB_TIMEOUT",
}


@dataclass(frozen=True)
class ClientConfig:
    """Where the API lives, how to authenticate and how long to wait.

    Attributes:
        base_url: API root without a trailing slash.
        token: Bearer token, or None for anonymous access.
        timeout: Per-request timeout in seconds.
        user_agent: Value of the User-Agent header GitHub requires.

    """

    base_url: str = "https://api.github.com"
    token: str | None = None
    timeout: float = 30.0
    user_agent: str = "github-repos/0.1.0"

    def __post_init__(self) -> None:
        try:
            url = httpx.URL(self.base_url)
        except httpx.InvalidURL as e:
            raise ConfigurationError(f"Invalid base_url {self.base_url!r}: {e}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise ConfigurationError(
                f"Invalid base_url {self.base_url!r}: expected an absolute http(s) URL"
            )
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

        # A blank token means anonymous, not an empty Bearer credential
        token = self.token.strip() if self.token else ""
        object.__setattr__(self, "token", token or None)

        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be greater than zero, got {self.timeout}")
        if not self.user_agent.strip():
            raise ConfigurationError("user_agent must not be blank")

    @classmethod
    def from_env(cls, **overrides: object) -> ClientConfig:
        """Build a config from the environment; non-None overrides take precedence.

        Raises:
            ConfigurationError: If a value (from either source) is invalid.

        """
        load_dotenv(find_dotenv(usecwd=True))

        values: dict[str, object] = {}
        for name, variable in ENVIRONMENT.items():
            raw = os.environ.get(variable, "").strip()
            if raw:
                values[name] = raw
        if "timeout" in values:
            try:
                values["timeout"] = float(values["timeout"])  # type: ignore[arg-type]
            except ValueError as e:
                raise ConfigurationError(
                    f"GITHUB_TIMEOUT must be a number of seconds, got {values['timeout']!r}"
                ) from e

        values.update({name: value for name, value in overrides.items() if value is not None})
        return cls(**values)  # type: ignore[arg-type]

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def with_overrides(self, **changes: object) -> ClientConfig:
        """Return a copy with ``changes`` applied and validated again."""
        return replace(self, **changes)  # type: ignore[arg-type]
