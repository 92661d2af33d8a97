"""Exception hierarchy for the GitHub repositories client.

Two kinds of failure reach callers: a payload that does not match the
expected shape (``DecodeError``) and a request that the transport could
not complete (``TransportError`` and its status-specific subclasses).
Neither is retried or recovered inside the library.

Exception Hierarchy:
    GitHubError (base)
    ├── ConfigurationError           - Invalid client configuration
    ├── DecodeError                  - Missing or mistyped field in a payload
    └── TransportError               - Request failed
        ├── AuthenticationError      - 401, invalid/expired token
        ├── AuthorizationError       - 403, insufficient permissions
        ├── NotFoundError            - 404, resource doesn't exist
        ├── UnprocessableEntityError - 422, request rejected
        ├── ServerError              - 5xx server errors
        └── NetworkError             - Connection failures, timeouts

Example:
    >>> try:
    ...     labels = await client.repository("octocat", "Hello-World").labels()
    ... except NotFoundError:
    ...     print("No such repository")
    ... except DecodeError as e:
    ...     print(f"Unexpected payload at {e.field_path}")

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pydantic import ValidationError


class GitHubError(Exception):
    """Base exception for all errors raised by this library.

    Attributes:
        message: Human-readable error description.
        response_data: Raw response data from the API, if available.

    """

    def __init__(
        self,
        message: str,
        response_data: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            response_data: Raw response data from the API.

        """
        self.message = message
        self.response_data = response_data or {}
        super().__init__(message)

    def __repr__(self) -> str:
        """Return a detailed representation for debugging."""
        return f"{self.__class__.__name__}(message={self.message!r})"


class ConfigurationError(GitHubError):
    """Raised when client configuration is invalid.

    Example:
        >>> ClientConfig(base_url="not-a-url")
        ConfigurationError: Invalid base_url 'not-a-url': expected an absolute http(s) URL

    """


# =============================================================================
# Decoding
# =============================================================================

# Segments that exist only in the Python model tree, not in the wire payload
_STRUCTURAL_SEGMENTS = frozenset({"basic", "detail", "clone"})


def format_field_path(loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as a wire-level field path.

    Args:
        loc: Location tuple from a pydantic error entry.

    Returns:
        Dot-separated path with list indices as ``[i]``, e.g. ``parent.id``
        or ``[0].user.login``.

    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif segment in _STRUCTURAL_SEGMENTS:
            continue
        else:
            path = f"{path}.{segment}" if path else str(segment)
    return path


class DecodeError(GitHubError):
    """Raised when a payload cannot be decoded into the requested type.

    Attributes:
        field_path: Wire path of the first offending field (empty when the
            payload itself has the wrong shape).
        target: Name of the type being decoded.
        errors: Every error reported by the validator.

    Example:
        >>> decode(Repository, {"name": "x"})
        DecodeError: Cannot decode Repository: id: Field required

    """

    def __init__(
        self,
        message: str,
        field_path: str = "",
        target: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        response_data: dict[str, Any] | None = None,
    ) -> None:
        """Initialize decode error.

        Args:
            message: Human-readable error description.
            field_path: Wire path of the offending field.
            target: Name of the type being decoded.
            errors: Full validator error list.
            response_data: The payload that failed to decode, if a dict.

        """
        self.field_path = field_path
        self.target = target
        self.errors = errors or []
        super().__init__(message, response_data)

    @classmethod
    def from_validation_error(
        cls,
        error: ValidationError,
        target: str,
        payload: Any = None,
    ) -> DecodeError:
        """Build a DecodeError from a pydantic ValidationError.

        Args:
            error: The pydantic validation failure.
            target: Name of the type being decoded.
            payload: The raw payload, kept when it is a dict.

        Returns:
            DecodeError describing the first offending field.

        """
        details = error.errors(include_url=False)
        first = details[0] if details else {}
        field_path = format_field_path(tuple(first.get("loc", ())))
        reason = first.get("msg", "invalid payload")
        where = field_path or "<root>"
        return cls(
            message=f"Cannot decode {target}: {where}: {reason}",
            field_path=field_path,
            target=target,
            errors=[dict(item) for item in details],
            response_data=payload if isinstance(payload, dict) else None,
        )


# =============================================================================
# Transport
# =============================================================================


class TransportError(GitHubError):
    """Raised when a request fails at the HTTP level.

    Attributes:
        status_code: HTTP status code, or None when no response arrived.

    """

    status_code: int | None = None

    def __init__(
        self,
        message: str = "Request failed",
        response_data: dict[str, Any] | None = None,
        status_code: int | None = None,
    ) -> None:
        """Initialize transport error.

        Args:
            message: Human-readable error description.
            response_data: Raw response data from the API.
            status_code: HTTP status code, overriding the class default.

        """
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message, response_data)


class AuthenticationError(TransportError):
    """Raised when authentication fails (HTTP 401)."""

    status_code: int | None = 401

    def __init__(
        self,
        message: str = "Authentication failed",
        response_data: dict[str, Any] | None = None,
    ) -> None:
        """Initialize authentication error."""
        super().__init__(message, response_data)


class AuthorizationError(TransportError):
    """Raised when the token lacks permission (HTTP 403).

    GitHub also answers 403 when listing collaborators without push access.

    """

    status_code: int | None = 403

    def __init__(
        self,
        message: str = "Permission denied",
        response_data: dict[str, Any] | None = None,
    ) -> None:
        """Initialize authorization error."""
        super().__init__(message, response_data)


class NotFoundError(TransportError):
    """Raised when a resource doesn't exist (HTTP 404).

    Note: GitHub returns 404 for private repositories the caller can't see,
    not just for repositories that don't exist.

    """

    status_code: int | None = 404

    def __init__(
        self,
        message: str = "Resource not found",
        response_data: dict[str, Any] | None = None,
    ) -> None:
        """Initialize not found error."""
        super().__init__(message, response_data)


class UnprocessableEntityError(TransportError):
    """Raised when GitHub rejects the request parameters (HTTP 422).

    Attributes:
        errors: List of field-level errors from GitHub.

    """

    status_code: int | None = 422

    def __init__(
        self,
        message: str = "Validation failed",
        response_data: dict[str, Any] | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        """Initialize unprocessable entity error.

        Args:
            message: Human-readable error description.
            response_data: Raw response data from the API.
            errors: List of field-level errors.

        """
        self.errors = errors or []
        super().__init__(message, response_data)

    @property
    def field_errors(self) -> dict[str, str]:
        """Return a mapping of field names to error messages."""
        return {
            error.get("field", "unknown"): error.get("message", "invalid") for error in self.errors
        }


class ServerError(TransportError):
    """Raised when GitHub returns a server error (HTTP 5xx)."""

    def __init__(
        self,
        message: str = "GitHub server error",
        response_data: dict[str, Any] | None = None,
        status_code: int = 500,
    ) -> None:
        """Initialize server error.

        Args:
            message: Human-readable error description.
            response_data: Raw response data from the API.
            status_code: The HTTP status code (5xx).

        """
        super().__init__(message, response_data, status_code=status_code)


class NetworkError(TransportError):
    """Raised when no HTTP response was received.

    This includes connection failures, DNS resolution errors,
    timeouts, and SSL/TLS errors.

    Attributes:
        original_error: The underlying httpx exception.

    """

    def __init__(
        self,
        message: str = "Network error",
        original_error: Exception | None = None,
    ) -> None:
        """Initialize network error.

        Args:
            message: Human-readable error description.
            original_error: The underlying exception.

        """
        self.original_error = original_error
        super().__init__(message, response_data=None)


# =============================================================================
# Exception Factory
# =============================================================================


def exception_from_response(
    status_code: int,
    response_data: dict[str, Any],
) -> TransportError:
    """Create the appropriate exception from an HTTP error response.

    Args:
        status_code: HTTP status code (>= 400).
        response_data: Parsed JSON response body.

    Returns:
        The matching TransportError subclass.

    """
    message = response_data.get("message", f"HTTP {status_code}")

    if 500 <= status_code < 600:
        return ServerError(
            message=message,
            response_data=response_data,
            status_code=status_code,
        )

    exception_map: dict[int, type[TransportError]] = {
        401: AuthenticationError,
        403: AuthorizationError,
        404: NotFoundError,
    }

    if status_code in exception_map:
        return exception_map[status_code](message=message, response_data=response_data)

    if status_code == 422:
        errors = response_data.get("errors", [])
        return UnprocessableEntityError(message=message, response_data=response_data, errors=errors)

    return TransportError(
        message=f"HTTP {status_code}: {message}",
        response_data=response_data,
        status_code=status_code,
    )
