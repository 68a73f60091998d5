"""Exceptions raised by the delivery API clients."""

from typing import Any


class ClientError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConnectionError(ClientError):
    """Raised when the server cannot be reached or does not answer in time."""

    pass


class APIError(ClientError):
    """Raised when the delivery API returns a non-2xx response.

    Attributes:
        status_code: HTTP status of the response
        detail: Parsed error body (schemas.api.ErrorDetail), if the
            server sent one
    """

    def __init__(self, message: str, status_code: int, detail: Any = None):
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)


class RateLimitError(APIError):
    """Raised when the delivery API returns a 429 response."""

    def __init__(self, message: str = "Rate limit exceeded", detail: Any = None):
        super().__init__(message, status_code=429, detail=detail)


class NotFoundError(APIError):
    """Raised when the requested item, asset or taxonomy does not exist."""

    def __init__(self, message: str = "Resource not found", detail: Any = None):
        super().__init__(message, status_code=404, detail=detail)


class ValidationError(ClientError):
    """Raised when a response body does not match the expected schema."""

    def __init__(self, message: str, errors: list | None = None, *args, **kwargs):
        self.errors = errors or []
        super().__init__(message, *args, **kwargs)
