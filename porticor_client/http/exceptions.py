"""
Transport Exceptions
====================
Errors raised by the appliance HTTP client, one per failure class.
"""

from typing import Any, Optional


class TransportError(Exception):
    """Base exception for appliance transport failures."""

    def __init__(
        self,
        message: str,
        service: str = "appliance",
        status_code: Optional[int] = None,
        details: Any = None,
        body: Any = None,
    ):
        self.message = message
        self.service = service
        self.status_code = status_code
        self.details = details
        # Decoded JSON body of an error response, if any
        self.body = body
        super().__init__(f"[{service}] {message} (Status: {status_code})")


class ServiceUnavailableError(TransportError):
    """The appliance is unreachable or answered with a 5xx. Retried."""


class ServiceTimeoutError(ServiceUnavailableError):
    """The request timed out. Retried."""


class AuthenticationError(TransportError):
    """The appliance rejected the credential (401/403)."""


class NotFoundError(TransportError):
    """The requested path does not exist on the appliance (404)."""


class ApplianceHTTPError(TransportError):
    """Any other non-success HTTP status."""


class InvalidResponseError(TransportError):
    """The body is not a JSON object or does not match the expected fields."""
