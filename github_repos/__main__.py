"""Entry point for running as a module: python -m github_repos."""

import sys

from github_repos.cli import main

if __name__ == "__main__":
    sys.exit(main())
