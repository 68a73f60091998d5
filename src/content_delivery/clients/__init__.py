"""HTTP clients for the content delivery REST API."""

from .client import Client
from .delivery_client import EXPAND_ALL, DeliveryClient
from .exceptions import (
    APIError,
    ClientError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)

__all__ = [
    "EXPAND_ALL",
    "Client",
    "DeliveryClient",
    "ClientError",
    "ConnectionError",
    "APIError",
    "RateLimitError",
    "NotFoundError",
    "ValidationError",
]
