"""Utility modules for the GitHub repositories client.

- http: asynchronous HTTP client wrapper
- logger: library logger configuration

"""

from github_repos.utils.http import HTTPClient, HTTPResponse
from github_repos.utils.logger import configure_logging

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "configure_logging",
]
