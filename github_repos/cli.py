"""Command-line interface for the GitHub repositories client.

Usage:
    github-repos repo python cpython
    github-repos languages python cpython
    github-repos comments octocat Hello-World --issue 1347
    github-repos --json labels octocat Hello-World
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Awaitable, Callable
from typing import Any

from github_repos.client import GitHubClient
from github_repos.endpoints.repository import RepositoryHandle
from github_repos.exceptions import GitHubError, NotFoundError
from github_repos.utils.logger import configure_logging

# ============================================================================
# Display Utilities
# ============================================================================


def format_header(text: str) -> str:
    """Format a header string."""
    return f"\n{'=' * 60}\n  {text}\n{'=' * 60}"


def format_json(data: Any) -> str:
    """Format data as JSON."""
    return json.dumps(data, indent=2, default=str)


def dump_items(items: list[Any]) -> list[dict[str, Any]]:
    """Serialize a list of models to wire-shaped dicts."""
    return [item.model_dump(mode="json", by_alias=True) for item in items]


# ============================================================================
# Command Handlers
# ============================================================================


async def cmd_repo(handle: RepositoryHandle, args: argparse.Namespace) -> int:
    """Fetch and display repository info."""
    repository = await handle.fetch()
    if args.json:
        print(format_json(repository.model_dump(mode="json", by_alias=True)))
        return 0

    basic, detail = repository.basic, repository.detail
    print(format_header(f"Repository: {basic.full_name}"))
    print(f"  Description:  {basic.description or 'N/A'}")
    print(f"  Owner:        {basic.owner.login}")
    print(f"  Private:      {'yes' if basic.is_private else 'no'}")
    if repository.forked_from:
        print(f"  Forked from:  {repository.forked_from.basic.full_name}")
    if detail:
        print(f"  Language:     {detail.language or 'N/A'}")
        print(f"  Stars:        {detail.stars_count:,}")
        print(f"  Forks:        {detail.forks_count:,}")
        print(f"  Open Issues:  {detail.open_issues_count:,}")
        print(f"  Pushed:       {detail.pushed:%Y-%m-%d %H:%M}")
        if detail.clone:
            print(f"  Clone (http): {detail.clone.http}")
            print(f"  Clone (ssh):  {detail.clone.ssh}")
    return 0


async def cmd_collaborators(handle: RepositoryHandle, args: argparse.Namespace) -> int:
    """List collaborators with their permission."""
    users = await handle.collaborators()
    if args.json:
        print(format_json(dump_items(users)))
        return 0
    print(format_header(f"Collaborators: {handle.full_name}"))
    for user in users:
        permission = user.permission.value if user.permission else "-"
        print(f"  {user.login:30} {permission}")
    return 0


async def cmd_branches(handle: RepositoryHandle, args: argparse.Namespace) -> int:
    """List branches."""
    branches = await handle.branches()
    if args.json:
        print(format_json(dump_items(branches)))
        return 0
    print(format_header(f"Branches: {handle.full_name}"))
    for branch in branches:
        marker = " (protected)" if branch.protected else ""
        print(f"  {branch.commit.sha[:7]}  {branch.name}{marker}")
    return 0


async def cmd_commits(handle: RepositoryHandle, args: argparse.Namespace) -> int:
    """List recent commits."""
    commits = await handle.commits()
    if args.json:
        print(format_json(dump_items(commits)))
        return 0
    print(format_header(f"Commits: {handle.full_name}"))
    for commit in commits:
        summary = commit.commit.message.splitlines()[0] if commit.commit.message else ""
        print(f"  {commit.sha[:7]}  {summary}")
    return 0


async def cmd_languages(handle: RepositoryHandle, args: argparse.Namespace) -> int:
    """Show the language breakdown."""
    languages = await handle.languages()
    if args.json:
        print(format_json(languages))
        return 0
    print(format_header(f"Languages: {handle.full_name}"))
    total = sum(languages.values()) or 1
    for language, size in sorted(languages.items(), key=lambda x: -x[1]):
        print(f"  {language:20} {size:>12,} bytes  {size / total:6.1%}")
    return 0


async def cmd_issues(handle: RepositoryHandle, args: argparse.Namespace) -> int:
    """List issues."""
    issues = await handle.issues()
    if args.json:
        print(format_json(dump_items(issues)))
        return 0
    print(format_header(f"Issues: {handle.full_name}"))
    for issue in issues:
        kind = "PR" if issue.is_pull_request else "  "
        labels = ", ".join(label.name for label in issue.labels)
        suffix = f" [{labels}]" if labels else ""
        print(f"  {kind} #{issue.number:<6} {issue.title}{suffix}")
    return 0


async def cmd_comments(handle: RepositoryHandle, args: argparse.Namespace) -> int:
    """List issue comments, optionally for a single issue."""
    comments = await handle.comments(on=args.issue)
    if args.json:
        print(format_json(dump_items(comments)))
        return 0
    scope = f"#{args.issue}" if args.issue is not None else "all issues"
    print(format_header(f"Comments on {scope}: {handle.full_name}"))
    for comment in comments:
        author = comment.user.login if comment.user else "ghost"
        body = (comment.body or "").strip().replace("\n", " ")
        if len(body) > 60:
            body = body[:57] + "..."
        print(f"  {author:20} {body}")
    return 0


async def cmd_labels(handle: RepositoryHandle, args: argparse.Namespace) -> int:
    """List labels."""
    labels = await handle.labels()
    if args.json:
        print(format_json(dump_items(labels)))
        return 0
    print(format_header(f"Labels: {handle.full_name}"))
    for label in labels:
        color = f"#{label.color}" if label.color else ""
        print(f"  {label.name:30} {color}")
    return 0


async def cmd_milestones(handle: RepositoryHandle, args: argparse.Namespace) -> int:
    """List milestones."""
    milestones = await handle.milestones()
    if args.json:
        print(format_json(dump_items(milestones)))
        return 0
    print(format_header(f"Milestones: {handle.full_name}"))
    for milestone in milestones:
        done = milestone.closed_issues
        total = milestone.open_issues + milestone.closed_issues
        print(f"  {milestone.number:>4}. {milestone.title} ({milestone.state}, {done}/{total} closed)")
    return 0


# ============================================================================
# Argument Parser
# ============================================================================


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="github-repos",
        description="Query GitHub repository data from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  github-repos repo python cpython                   Repository info
  github-repos languages python cpython              Language breakdown
  github-repos comments octocat Hello-World -i 1347  Comments on an issue
  github-repos --json labels octocat Hello-World     Labels as JSON
        """,
    )

    parser.add_argument("--token", "-t", help="GitHub token (or set GITHUB_TOKEN)")
    parser.add_argument("--json", "-j", action="store_true", help="Output as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log HTTP traffic")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    for command, help_text in COMMAND_HELP.items():
        p = subparsers.add_parser(command, help=help_text)
        p.add_argument("owner", help="Repository owner")
        p.add_argument("name", help="Repository name")
        if command == "comments":
            p.add_argument("--issue", "-i", type=int, help="Only comments on this issue number")

    return parser


# ============================================================================
# Main Entry Point
# ============================================================================

CommandHandler = Callable[[RepositoryHandle, argparse.Namespace], Awaitable[int]]

COMMANDS: dict[str, CommandHandler] = {
    "repo": cmd_repo,
    "collaborators": cmd_collaborators,
    "branches": cmd_branches,
    "commits": cmd_commits,
    "languages": cmd_languages,
    "issues": cmd_issues,
    "comments": cmd_comments,
    "labels": cmd_labels,
    "milestones": cmd_milestones,
}

COMMAND_HELP: dict[str, str] = {
    "repo": "Get repository info",
    "collaborators": "List collaborators",
    "branches": "List branches",
    "commits": "List recent commits",
    "languages": "Show language breakdown",
    "issues": "List issues",
    "comments": "List issue comments",
    "labels": "List labels",
    "milestones": "List milestones",
}


async def run(args: argparse.Namespace, client: GitHubClient) -> int:
    """Run one command against ``client`` and close it afterwards."""
    async with client:
        try:
            handle = client.repository(args.owner, args.name)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        try:
            return await COMMANDS[args.command](handle, args)
        except NotFoundError:
            print(f"Error: Repository '{args.owner}/{args.name}' not found", file=sys.stderr)
            return 1
        except GitHubError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            return 1


def main(argv: list[str] | None = None, client: GitHubClient | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    library_logger = logging.getLogger("github_repos")
    previous_level = library_logger.level
    handler = configure_logging(level=logging.DEBUG) if args.verbose else None

    try:
        if client is None:
            client = GitHubClient(token=args.token)
        return asyncio.run(run(args, client))
    except GitHubError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130
    finally:
        if handler is not None:
            library_logger.removeHandler(handler)
            library_logger.setLevel(previous_level)


if __name__ == "__main__":
    sys.exit(main())
