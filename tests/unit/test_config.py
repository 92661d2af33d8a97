"""Unit tests for ClientConfig."""

from __future__ import annotations

import os
from dataclasses import FrozenInstanceError
from unittest.mock import patch

import pytest

from github_repos.config import ClientConfig
from github_repos.exceptions import ConfigurationError


@pytest.fixture
def no_dotenv(tmp_path, monkeypatch):
    """Run from an empty directory so no stray .env file is picked up."""
    monkeypatch.chdir(tmp_path)


class TestClientConfigValues:
    """Tests for constructing and validating a config directly."""

    def test_defaults_ignore_environment(self):
        """Direct construction never reads GITHUB_* variables."""
        with patch.dict(os.environ, {"GITHUB_TOKEN": "env_token"}):
            config = ClientConfig()

        assert config.base_url == "https://api.github.com"
        assert config.token is None
        assert config.timeout == 30.0
        assert config.user_agent.startswith("github-repos/")
        assert config.is_authenticated is False

    def test_trailing_slashes_removed(self):
        config = ClientConfig(base_url="https://github.example.com/api/v3//")
        assert config.base_url == "https://github.example.com/api/v3"

    @pytest.mark.parametrize("token", ["", "   "])
    def test_blank_token_is_anonymous(self, token):
        config = ClientConfig(token=token)
        assert config.token is None
        assert config.is_authenticated is False

    def test_token_whitespace_stripped(self):
        assert ClientConfig(token=" ghp_x \n").token == "ghp_x"

    @pytest.mark.parametrize(
        "base_url",
        ["", "api.github.com", "ftp://api.github.com", "https://", "/repos"],
    )
    def test_rejects_non_http_base_url(self, base_url):
        with pytest.raises(ConfigurationError, match="base_url"):
            ClientConfig(base_url=base_url)

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_rejects_non_positive_timeout(self, timeout):
        with pytest.raises(ConfigurationError, match="timeout"):
            ClientConfig(timeout=timeout)

    def test_rejects_blank_user_agent(self):
        with pytest.raises(ConfigurationError, match="user_agent"):
            ClientConfig(user_agent=" ")

    def test_frozen(self):
        config = ClientConfig(token="t")
        with pytest.raises(FrozenInstanceError):
            config.token = "other"  # type: ignore[misc]

    def test_with_overrides_revalidates(self):
        original = ClientConfig(token="t", timeout=5.0)

        enterprise = original.with_overrides(base_url="https://ghe.example.com/api/v3/")

        assert enterprise.base_url == "https://ghe.example.com/api/v3"
        assert enterprise.token == "t"
        assert original.base_url == "https://api.github.com"
        with pytest.raises(ConfigurationError):
            original.with_overrides(timeout=0)


@pytest.mark.usefixtures("no_dotenv")
class TestClientConfigFromEnv:
    """Tests for reading configuration from the environment."""

    def test_reads_variables(self):
        env = {
            "GITHUB_BASE_URL": "https://ghe.example.com/api/v3",
            "GITHUB_TOKEN": "env_token",
            "GITHUB_TIMEOUT": "12.5",
        }
        with patch.dict(os.environ, env, clear=True):
            config = ClientConfig.from_env()

        assert config == ClientConfig(
            base_url="https://ghe.example.com/api/v3", token="env_token", timeout=12.5
        )

    def test_empty_environment_gives_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            assert ClientConfig.from_env() == ClientConfig()

    def test_blank_variables_are_unset(self):
        with patch.dict(os.environ, {"GITHUB_TOKEN": " ", "GITHUB_TIMEOUT": ""}, clear=True):
            config = ClientConfig.from_env()

        assert config.token is None
        assert config.timeout == 30.0

    def test_overrides_win_over_environment(self):
        with patch.dict(os.environ, {"GITHUB_TOKEN": "env_token", "GITHUB_TIMEOUT": "9"}, clear=True):
            config = ClientConfig.from_env(token="explicit", timeout=None)

        assert config.token == "explicit"
        assert config.timeout == 9.0

    def test_non_numeric_timeout(self):
        with patch.dict(os.environ, {"GITHUB_TIMEOUT": "soon"}, clear=True):
            with pytest.raises(ConfigurationError, match="GITHUB_TIMEOUT"):
                ClientConfig.from_env()

    def test_dotenv_file_loaded(self, tmp_path):
        (tmp_path / ".env").write_text("GITHUB_TOKEN=from_dotenv\n")

        with patch.dict(os.environ, {}, clear=True):
            config = ClientConfig.from_env()

        assert config.token == "from_dotenv"
