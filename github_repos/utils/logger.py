"""Logging configuration for the GitHub repositories client.

The library logs under the ``github_repos`` logger and stays silent unless
the application configures logging.

Example:
    >>> import logging
    >>> logging.getLogger("github_repos").setLevel(logging.DEBUG)

"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

logger = logging.getLogger("github_repos")

logger.setLevel(logging.WARNING)

# Add a null handler to prevent "No handler found" warnings
logger.addHandler(logging.NullHandler())


def configure_logging(
    level: int = logging.INFO,
    format_string: str | None = None,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Attach a stream handler to the library logger.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO).
        format_string: Custom format string for log messages.
        stream: Output stream (defaults to sys.stderr).

    Returns:
        The handler that was added, so callers can remove it again.

    Example:
        >>> from github_repos.utils.logger import configure_logging
        >>> configure_logging(level=logging.DEBUG)

    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    if stream is None:
        stream = sys.stderr

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(format_string))

    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
