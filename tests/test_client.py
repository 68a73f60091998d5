"""Tests for the base Client class."""

from unittest.mock import MagicMock

import httpx
import pytest

from content_delivery.clients import (
    APIError,
    Client,
    ConnectionError,
    NotFoundError,
    RateLimitError,
)


class ConcreteClient(Client):
    """Concrete implementation of Client for testing."""

    def fetch(self, path, **params):
        return self.get(path, params=params).json()


def error_response(status_code, body=None):
    response = MagicMock()
    response.is_success = False
    response.status_code = status_code
    response.url = "https://api.example.com/test"
    if body is None:
        response.json.side_effect = ValueError("No JSON")
    else:
        response.json.return_value = body
    return response


class TestClientConfiguration:
    """Tests for Client configuration."""

    def test_requires_base_url(self):
        """Client raises ValueError if base_url is missing."""
        with pytest.raises(ValueError, match="base_url"):
            ConcreteClient({})

    def test_base_url_from_config(self):
        """Client stores base_url from config."""
        client = ConcreteClient({"base_url": "https://api.example.com"})

        assert client.base_url == "https://api.example.com"

    def test_default_timeout(self):
        """Client has default timeout of 30 seconds."""
        client = ConcreteClient({"base_url": "https://api.example.com"})

        assert client.timeout == 30

    def test_custom_timeout(self):
        """Client accepts custom timeout."""
        client = ConcreteClient({"base_url": "https://api.example.com", "timeout": 60})

        assert client.timeout == 60

    def test_default_api_path(self):
        """Client targets the v1.1 delivery API by default."""
        client = ConcreteClient({"base_url": "https://api.example.com"})

        assert client.api_version == "v1.1"
        assert client.api_path == "/content/published/api/v1.1"

    def test_custom_api_version(self):
        """Client accepts another API version."""
        client = ConcreteClient({"base_url": "https://api.example.com", "api_version": "v1"})

        assert client.api_path == "/content/published/api/v1"

    def test_default_headers(self):
        """Client has empty default headers."""
        client = ConcreteClient({"base_url": "https://api.example.com"})

        assert client.headers == {}

    def test_custom_headers(self):
        """Client accepts custom headers."""
        headers = {"User-Agent": "test"}
        client = ConcreteClient({"base_url": "https://api.example.com", "headers": headers})

        assert client.headers == headers

    def test_auth_token_adds_bearer_header(self):
        """auth_token is sent as a bearer Authorization header."""
        client = ConcreteClient({
            "base_url": "https://api.example.com",
            "headers": {"User-Agent": "test"},
            "auth_token": "secret",
        })

        assert client.headers == {
            "User-Agent": "test",
            "Authorization": "Bearer secret",
        }


class TestClientLifecycle:
    """Tests for Client lifecycle management."""

    def test_lazy_client_initialization(self):
        """httpx.Client is not created until accessed."""
        client = ConcreteClient({"base_url": "https://api.example.com"})

        assert client._client is None

    def test_client_initialized_on_access(self):
        """httpx.Client is created when client property is accessed."""
        client = ConcreteClient({"base_url": "https://api.example.com"})

        _ = client.client

        assert client._client is not None
        assert isinstance(client._client, httpx.Client)

        client.close()

    def test_context_manager_closes_client(self):
        """Context manager closes the httpx client on exit."""
        with ConcreteClient({"base_url": "https://api.example.com"}) as client:
            _ = client.client
            assert client._client is not None

        assert client._client is None

    def test_close_when_not_initialized(self):
        """Calling close when client not initialized is safe."""
        client = ConcreteClient({"base_url": "https://api.example.com"})
        client.close()

        assert client._client is None


class TestClientErrorHandling:
    """Tests for Client error handling."""

    def test_404_raises_not_found_error(self):
        """404 response raises NotFoundError."""
        client = ConcreteClient({"base_url": "https://api.example.com"})

        with pytest.raises(NotFoundError) as exc_info:
            client._handle_response(error_response(404))

        assert exc_info.value.status_code == 404
        assert exc_info.value.detail is None

    def test_429_raises_rate_limit_error(self):
        """429 response raises RateLimitError."""
        client = ConcreteClient({"base_url": "https://api.example.com"})

        with pytest.raises(RateLimitError) as exc_info:
            client._handle_response(error_response(429))

        assert exc_info.value.status_code == 429

    def test_500_raises_api_error(self):
        """5xx response raises APIError."""
        client = ConcreteClient({"base_url": "https://api.example.com"})

        with pytest.raises(APIError) as exc_info:
            client._handle_response(error_response(500))

        assert exc_info.value.status_code == 500

    def test_error_body_is_parsed(self):
        """A JSON error body is attached to the exception."""
        client = ConcreteClient({"base_url": "https://api.example.com"})
        body = {
            "title": "Invalid channel token",
            "status": 403,
            "o:errorCode": "OCE-DELIVERY-001",
        }

        with pytest.raises(APIError) as exc_info:
            client._handle_response(error_response(403, body))

        assert exc_info.value.detail.title == "Invalid channel token"
        assert exc_info.value.detail.error_code == "OCE-DELIVERY-001"
        assert "Invalid channel token" in exc_info.value.message

    def test_success_returns_response(self):
        """Successful response is returned as-is."""
        client = ConcreteClient({"base_url": "https://api.example.com"})
        response = MagicMock()
        response.is_success = True

        result = client._handle_response(response)

        assert result is response


class TestClientRequests:
    """Tests for Client request handling."""

    def test_transport_error_raises_connection_error(self):
        """Transport failures are raised as ConnectionError after one attempt."""
        client = ConcreteClient({"base_url": "https://api.example.com"})

        mock_http_client = MagicMock()
        mock_http_client.request.side_effect = httpx.ConnectError("Connection refused")
        client._client = mock_http_client

        with pytest.raises(ConnectionError) as exc_info:
            client.get("/test")

        assert "Connection refused" in str(exc_info.value)
        assert mock_http_client.request.call_count == 1

    def test_timeout_raises_connection_error(self):
        """Timeouts are raised as ConnectionError."""
        client = ConcreteClient({"base_url": "https://api.example.com"})

        mock_http_client = MagicMock()
        mock_http_client.request.side_effect = httpx.ReadTimeout("Request timed out")
        client._client = mock_http_client

        with pytest.raises(ConnectionError):
            client.get("/test")

    def test_api_error_is_not_retried(self):
        """An error response is raised after a single request."""
        client = ConcreteClient({"base_url": "https://api.example.com"})

        mock_http_client = MagicMock()
        mock_http_client.request.return_value = error_response(400)
        client._client = mock_http_client

        with pytest.raises(APIError):
            client.get("/test")

        assert mock_http_client.request.call_count == 1

    def test_get_drops_unset_params(self):
        """None-valued parameters are left out of the query string."""
        client = ConcreteClient({"base_url": "https://api.example.com"})

        success_response = MagicMock()
        success_response.is_success = True
        mock_http_client = MagicMock()
        mock_http_client.request.return_value = success_response
        client._client = mock_http_client

        client.get("/items", params={"q": 'type eq "Article"', "limit": None})

        mock_http_client.request.assert_called_once_with(
            "GET", "/items", params={"q": 'type eq "Article"'}
        )

    def test_get_adds_channel_token(self):
        """The configured channel token is sent with every request."""
        client = ConcreteClient({
            "base_url": "https://api.example.com",
            "channel_token": "abc123",
        })

        success_response = MagicMock()
        success_response.is_success = True
        mock_http_client = MagicMock()
        mock_http_client.request.return_value = success_response
        client._client = mock_http_client

        client.get("/items")

        mock_http_client.request.assert_called_once_with(
            "GET", "/items", params={"channelToken": "abc123"}
        )


class TestClientAbstractMethods:
    """Tests for Client abstract methods."""

    def test_fetch_must_be_implemented(self):
        """Subclasses must implement fetch method."""

        class IncompleteClient(Client):
            pass

        with pytest.raises(TypeError, match="fetch"):
            IncompleteClient({"base_url": "https://api.example.com"})
