#!/usr/bin/env python
"""Basic usage examples for the github-repos library.

Fetches a repository and a handful of its sub-resources concurrently.
No authentication required for public data (collaborators need push access
and are skipped without a token).

Run: python examples/basic_usage.py
"""

import asyncio

from github_repos import GitHubClient
from github_repos.exceptions import AuthenticationError, AuthorizationError, NotFoundError


async def main() -> None:
    """Demonstrate the repository accessors."""
    async with GitHubClient() as client:
        repo = client.repository("octocat", "Hello-World")

        print("=" * 50)
        print("github-repos - Basic Usage Examples")
        print("=" * 50)

        # --- Repository ---
        print("\n📁 Fetching a repository...")
        repository = await repo.fetch()
        print(f"  Full name: {repository.basic.full_name}")
        if repository.detail:
            print(f"  Stars: {repository.detail.stars_count:,}")
            print(f"  Language: {repository.detail.language}")
            if repository.detail.clone:
                print(f"  Clone: {repository.detail.clone.ssh}")

        # --- Sub-resources, concurrently ---
        print("\n🔀 Branches, labels and languages...")
        branches, labels, languages = await asyncio.gather(
            repo.branches(), repo.labels(), repo.languages()
        )
        print(f"  Branches: {', '.join(b.name for b in branches[:5])}")
        print(f"  Labels: {', '.join(label.name for label in labels[:5])}")
        print(f"  Languages: {', '.join(languages)}")

        # --- Issues and their comments ---
        print("\n🐛 Issues...")
        issues = await repo.issues()
        for issue in issues[:3]:
            comments = await repo.comments(on=issue)
            print(f"  #{issue.number} {issue.title} ({len(comments)} comments)")

        # --- Forks ---
        print("\n🍴 Forks...")
        try:
            fork = await client.repository("octocat", "Spoon-Knife").fetch()
            parent = fork.forked_from
            print(f"  Spoon-Knife forked from: {parent.full_name if parent else 'nothing'}")
        except NotFoundError:
            print("  Spoon-Knife not found")

        # --- Collaborators ---
        try:
            collaborators = await repo.collaborators()
            print(f"\n👥 Collaborators: {len(collaborators)}")
        except (AuthenticationError, AuthorizationError):
            print("\n👥 Collaborators need push access (set GITHUB_TOKEN)")

    print("\n✅ Done!")


if __name__ == "__main__":
    asyncio.run(main())
