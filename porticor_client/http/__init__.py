from .client import ApplianceHTTPClient
from .exceptions import (
    TransportError,
    ServiceUnavailableError,
    ServiceTimeoutError,
    AuthenticationError,
    NotFoundError,
    ApplianceHTTPError,
    InvalidResponseError,
)

__all__ = [
    "ApplianceHTTPClient",
    "TransportError",
    "ServiceUnavailableError",
    "ServiceTimeoutError",
    "AuthenticationError",
    "NotFoundError",
    "ApplianceHTTPError",
    "InvalidResponseError",
]
