"""
Porticor Client Exceptions
==========================
Error taxonomy for configuration, signing and appliance failures.
"""

from typing import Optional


class PorticorError(Exception):
    """Base exception for all porticor_client errors."""
    pass


class InvalidConfiguration(PorticorError):
    """Raised at construction when a required setting is missing."""

    def __init__(self, option: str):
        self.option = option
        super().__init__(f"You must specify your Porticor {option}.")


class InvalidKeySource(PorticorError):
    """Raised when a key is requested from an unknown resolution tier."""
    pass


class UnsupportedSignatureVersion(PorticorError):
    """Raised when a credential request is signed with an unknown protocol version."""
    pass


class DuplicateItemError(PorticorError):
    """Raised when the appliance already holds an item with the requested name."""
    pass


class ApplianceError(PorticorError):
    """Raised when the appliance reports a failure with an error code."""

    def __init__(self, error_code: Optional[str], message: Optional[str] = None):
        self.error_code = error_code
        self.message = message
        super().__init__(error_code or message or "Unknown appliance error")
