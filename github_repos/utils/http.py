"""Asynchronous HTTP client wrapper for the GitHub API.

This module provides a thin wrapper around ``httpx.AsyncClient`` that
handles:
- Base URL and headers configuration
- Authentication injection
- JSON response parsing
- Mapping of error statuses and connection failures to TransportError

Each call is exactly one round trip. There is no retry, caching or rate
limit handling; failures propagate to the caller unchanged.

The HTTPClient is an internal implementation detail. Use GitHubClient
instead.

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from github_repos.auth import auth_for
from github_repos.exceptions import DecodeError, NetworkError, exception_from_response

if TYPE_CHECKING:
    from github_repos.config import ClientConfig

logger = logging.getLogger(__name__)


class HTTPClient:
    """Low-level asynchronous HTTP client for GitHub API requests.

    The underlying ``httpx.AsyncClient`` keeps no per-request state, so one
    instance may serve any number of concurrent calls.

    Note:
        This is an internal class. Use GitHubClient for the public API.

    """

    __slots__ = ("_client", "_config")

    ACCEPT_HEADER = "application/vnd.github+json"
    API_VERSION_HEADER = "2022-11-28"

    def __init__(
        self,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            config: Client configuration; its token, if any, is sent as a
                Bearer credential on every request.
            transport: Optional httpx transport (e.g. ``httpx.MockTransport``
                in tests).

        """
        self._config = config
        self._client = self._create_client(transport)

    def _create_client(self, transport: httpx.AsyncBaseTransport | None) -> httpx.AsyncClient:
        """Create and configure the httpx client."""
        return httpx.AsyncClient(
            base_url=self._config.base_url,
            timeout=httpx.Timeout(self._config.timeout),
            headers={
                "Accept": self.ACCEPT_HEADER,
                "X-GitHub-Api-Version": self.API_VERSION_HEADER,
                "User-Agent": self._config.user_agent,
            },
            auth=auth_for(self._config),
            follow_redirects=True,
            transport=transport,
        )

    @property
    def is_closed(self) -> bool:
        """Check whether the underlying connection pool was closed."""
        return self._client.is_closed

    async def get(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> HTTPResponse:
        """Make a GET request to the GitHub API.

        Args:
            endpoint: API endpoint path (e.g., "/repos/octocat/Hello-World").
            params: Query parameters.

        Returns:
            HTTPResponse containing the parsed data and metadata.

        Raises:
            TransportError: For error statuses (4xx, 5xx).
            NetworkError: For connection failures and timeouts.

        """
        request = self._client.build_request("GET", endpoint, params=params)

        logger.debug("Request: GET %s", request.url)

        try:
            response = await self._client.send(request)
        except httpx.TimeoutException as e:
            raise NetworkError(f"Request timed out: {e}", original_error=e) from e
        except httpx.ConnectError as e:
            raise NetworkError(f"Connection failed: {e}", original_error=e) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"HTTP error: {e}", original_error=e) from e

        return self._process_response(response)

    def _process_response(self, response: httpx.Response) -> HTTPResponse:
        """Parse the body and raise for error statuses.

        Args:
            response: The httpx response object.

        Returns:
            HTTPResponse with parsed data.

        Raises:
            TransportError: If the response indicates an error.
            DecodeError: If a successful response carries malformed JSON.

        """
        headers = dict(response.headers)
        failed = response.status_code >= 400

        if response.status_code == 204:
            data: dict[str, Any] | list[Any] = {}
        elif response.headers.get("content-type", "").startswith("application/json"):
            try:
                data = response.json()
            except ValueError as e:
                if not failed:
                    raise DecodeError(
                        f"Cannot decode response from {response.request.url}: invalid JSON: {e}"
                    ) from e
                # Gateways answer 5xx with HTML under a JSON content type
                data = {"message": response.text}
        else:
            data = {}

        logger.debug("Response: %d %s", response.status_code, response.reason_phrase)

        if failed:
            error_data = data if isinstance(data, dict) else {"message": str(data)}
            raise exception_from_response(
                status_code=response.status_code,
                response_data=error_data,
            )

        return HTTPResponse(
            data=data,
            status_code=response.status_code,
            headers=headers,
        )

    async def aclose(self) -> None:
        """Close the HTTP client and release resources."""
        await self._client.aclose()

    async def __aenter__(self) -> HTTPClient:
        """Enter async context manager."""
        return self

    async def __aexit__(self, *args: object) -> None:
        """Exit async context manager and close client."""
        await self.aclose()


class HTTPResponse:
    """Container for HTTP response data and metadata.

    Attributes:
        data: Parsed JSON response body.
        status_code: HTTP status code.
        headers: Response headers.

    """

    __slots__ = ("data", "headers", "status_code")

    def __init__(
        self,
        data: dict[str, Any] | list[Any],
        status_code: int,
        headers: dict[str, str],
    ) -> None:
        self.data = data
        self.status_code = status_code
        self.headers = headers

    def __repr__(self) -> str:
        """Return a representation of the response."""
        return f"HTTPResponse(status={self.status_code}, data_type={type(self.data).__name__})"
