"""REST clients for source and target sites."""

from .client import Client
from .exceptions import (
    APIError,
    AuthenticationError,
    ClientError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
)
from .site_client import SiteClient, SiteContext

__all__ = [
    "Client",
    "SiteClient",
    "SiteContext",
    "ClientError",
    "ConnectionError",
    "APIError",
    "AuthenticationError",
    "RateLimitError",
    "NotFoundError",
]
