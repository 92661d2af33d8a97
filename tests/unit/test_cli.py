"""Unit tests for the command-line interface."""

from __future__ import annotations

import json
import logging

import pytest

from github_repos import GitHubClient
from github_repos.cli import COMMAND_HELP, COMMANDS, create_parser, main

REPO = "/repos/octocat/Hello-World"


class TestParser:
    """Tests for argument parsing."""

    def test_every_command_has_a_handler(self):
        assert set(COMMANDS) == set(COMMAND_HELP)

    def test_global_options(self):
        args = create_parser().parse_args(["--json", "-t", "tok", "labels", "octocat", "Hello-World"])
        assert args.json is True
        assert args.token == "tok"
        assert args.command == "labels"
        assert (args.owner, args.name) == ("octocat", "Hello-World")

    def test_comments_issue_option(self):
        args = create_parser().parse_args(["comments", "octocat", "Hello-World", "-i", "1347"])
        assert args.issue == 1347


class TestMain:
    """Tests for running commands end to end against the fake GitHub."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "github-repos" in capsys.readouterr().out

    def test_labels_json(self, client, fake_github, capsys):
        fake_github.add(f"{REPO}/labels", [{"name": "bug", "color": "f29513"}])

        exit_code = main(["--json", "labels", "octocat", "Hello-World"], client=client)

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output[0]["name"] == "bug"
        assert output[0]["color"] == "f29513"

    def test_repo_text(self, client, fake_github, sample_repo_response, capsys):
        fake_github.add(REPO, sample_repo_response)

        assert main(["repo", "octocat", "Hello-World"], client=client) == 0

        out = capsys.readouterr().out
        assert "Repository: octocat/Hello-World" in out
        assert "Stars:        80" in out
        assert "git@github.com:octocat/Hello-World.git" in out

    def test_repo_json_is_wire_shaped(self, client, fake_github, sample_repo_response, capsys):
        fake_github.add(REPO, sample_repo_response)

        assert main(["--json", "repo", "octocat", "Hello-World"], client=client) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["full_name"] == "octocat/Hello-World"
        assert output["stargazers_count"] == 80
        assert output["private"] is False

    def test_languages_text(self, client, fake_github, capsys):
        fake_github.add(f"{REPO}/languages", {"C": 300, "Python": 100})

        assert main(["languages", "octocat", "Hello-World"], client=client) == 0

        out = capsys.readouterr().out
        assert out.index("C ") < out.index("Python")
        assert "75.0%" in out

    def test_comments_on_issue(self, client, fake_github, sample_comment_response, capsys):
        fake_github.add(f"{REPO}/issues/1347/comments", [sample_comment_response])

        assert main(["comments", "octocat", "Hello-World", "--issue", "1347"], client=client) == 0

        assert fake_github.requests[0].url.path == f"{REPO}/issues/1347/comments"
        out = capsys.readouterr().out
        assert "Comments on #1347" in out
        assert "Me too" in out

    def test_not_found(self, client, capsys):
        exit_code = main(["branches", "octocat", "missing"], client=client)

        assert exit_code == 1
        assert "Repository 'octocat/missing' not found" in capsys.readouterr().err

    def test_decode_error(self, client, fake_github, capsys):
        fake_github.add(f"{REPO}/milestones", [{"title": "v1.0"}])

        assert main(["milestones", "octocat", "Hello-World"], client=client) == 1
        assert "[0].number" in capsys.readouterr().err

    def test_verbose_leaves_logger_as_found(self, config, fake_github, capsys):
        """Repeated --verbose runs do not stack log handlers."""
        fake_github.add(f"{REPO}/labels", [])
        library_logger = logging.getLogger("github_repos")
        handlers_before = list(library_logger.handlers)
        level_before = library_logger.level

        for _ in range(2):
            client = GitHubClient(config=config, transport=fake_github.transport)
            assert main(["--verbose", "labels", "octocat", "Hello-World"], client=client) == 0

        assert library_logger.handlers == handlers_before
        assert library_logger.level == level_before
        assert capsys.readouterr().err.count("Request: GET") == 2

    @pytest.mark.parametrize("owner", ["", "a/b"])
    def test_invalid_identifier(self, client, capsys, owner):
        assert main(["labels", owner, "Hello-World"], client=client) == 1
        assert "Invalid repository identifier" in capsys.readouterr().err
