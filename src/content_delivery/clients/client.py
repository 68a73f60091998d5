"""Base client for the content delivery REST API."""

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from schemas.api import ErrorDetail

from .exceptions import (
    APIError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
)

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = "v1.1"


class Client(ABC):
    """Base class for delivery API clients.

    Provides a lazy-initialized httpx.Client with context manager support,
    configured from a dict. Each request is attempted once; transport
    failures are raised as ConnectionError.

    Config keys:
        base_url (required): Server URL, e.g. "https://example.cec.ocp.oraclecloud.com"
        timeout: Request timeout in seconds (default: 30)
        headers: Additional headers to include in requests
        channel_token: Publishing channel token, sent as the channelToken
            query parameter
        auth_token: Bearer token for channels that require authentication
        api_version: Delivery API version (default: "v1.1")
    """

    def __init__(self, config: dict):
        if "base_url" not in config:
            raise ValueError("config must include 'base_url'")

        self._config = config
        self._client: httpx.Client | None = None

    @property
    def base_url(self) -> str:
        return str(self._config["base_url"])

    @property
    def timeout(self) -> float:
        return float(self._config.get("timeout", 30))

    @property
    def channel_token(self) -> str | None:
        return self._config.get("channel_token")

    @property
    def api_version(self) -> str:
        return str(self._config.get("api_version", DEFAULT_API_VERSION))

    @property
    def api_path(self) -> str:
        return f"/content/published/api/{self.api_version}"

    @property
    def headers(self) -> dict[str, str]:
        headers = dict(self._config.get("headers", {}))
        auth_token = self._config.get("auth_token")
        if auth_token:
            headers["Authorization"] = f"Bearer {auth_token}"
        return headers

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialized httpx client."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.headers,
            )
        return self._client

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def _error_detail(self, response: httpx.Response) -> ErrorDetail | None:
        try:
            return ErrorDetail.model_validate(response.json())
        except (ValueError, PydanticValidationError):
            return None

    def _handle_response(self, response: httpx.Response) -> httpx.Response:
        """Map HTTP errors to exceptions.

        Args:
            response: The HTTP response to check

        Returns:
            The response if successful

        Raises:
            NotFoundError: For 404 responses
            RateLimitError: For 429 responses
            APIError: For other non-2xx responses
        """
        if response.is_success:
            return response

        status_code = response.status_code
        detail = self._error_detail(response)

        if status_code == 404:
            raise NotFoundError(f"Resource not found: {response.url}", detail=detail)
        elif status_code == 429:
            raise RateLimitError(f"Rate limit exceeded: {response.url}", detail=detail)
        else:
            message = f"API error {status_code}: {response.url}"
            if detail is not None and detail.title:
                message = f"{message} ({detail.title})"
            raise APIError(message, status_code=status_code, detail=detail)

    def _request(
        self,
        method: str,
        path: str,
        **kwargs,
    ) -> httpx.Response:
        """Make a single request.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: URL path (appended to base_url)
            **kwargs: Additional arguments passed to httpx.request

        Returns:
            The HTTP response

        Raises:
            ConnectionError: If the request fails at the transport level
            APIError: If the API returns a non-2xx response
        """
        try:
            response = self.client.request(method, path, **kwargs)
        except httpx.TransportError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise ConnectionError(f"Request to {path} failed: {e}") from e
        return self._handle_response(response)

    def get(self, path: str, params: dict[str, Any] | None = None, **kwargs) -> httpx.Response:
        """GET a path, adding the channel token and dropping unset parameters.

        Args:
            path: URL path (appended to base_url)
            params: Query parameters; None values are left out
            **kwargs: Additional arguments passed to httpx.request

        Returns:
            The HTTP response
        """
        query = {key: value for key, value in (params or {}).items() if value is not None}
        if self.channel_token:
            query["channelToken"] = self.channel_token
        return self._request("GET", path, params=query, **kwargs)

    @abstractmethod
    def fetch(self, path: str, **params) -> Any:
        """Fetch and decode a JSON resource. Must be implemented by subclasses."""
        pass
