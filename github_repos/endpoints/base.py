"""Base class for API endpoints.

Endpoint objects hold the shared HTTP client and configuration and turn
one GET into one decoded value.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from github_repos.models import decode

if TYPE_CHECKING:
    from github_repos.config import ClientConfig
    from github_repos.utils.http import HTTPClient


class BaseEndpoint:
    """Base class for API endpoint groups.

    Attributes:
        _http: The HTTP client for making requests.
        _config: Client configuration.

    """

    __slots__ = ("_config", "_http")

    def __init__(self, http: HTTPClient, config: ClientConfig) -> None:
        """Initialize the endpoint with HTTP client and config.

        Args:
            http: The HTTP client for making requests.
            config: Client configuration.

        """
        self._http = http
        self._config = config

    async def _get_decoded(self, endpoint: str, result_type: Any) -> Any:
        """GET ``endpoint`` and decode the body into ``result_type``.

        Args:
            endpoint: API endpoint path.
            result_type: Model class or typing construct to decode into.

        Returns:
            The decoded response body.

        Raises:
            TransportError: If the request fails.
            DecodeError: If the body does not match ``result_type``.

        """
        response = await self._http.get(endpoint)
        return decode(result_type, response.data)
