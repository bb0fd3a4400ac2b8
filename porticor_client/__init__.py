"""
Porticor Client Library
=======================
Encryption key lookup and creation against a Porticor key-management appliance.
"""

__version__ = "0.1.0"

# Client
from porticor_client.client import (
    PorticorClient,
    get_client,
    reset_client,
    fetch_encryption_key,
    find_or_create_encryption_key,
)

# Configuration
from porticor_client.config import ApplianceConfig

# Errors
from porticor_client.exceptions import (
    PorticorError,
    InvalidConfiguration,
    InvalidKeySource,
    UnsupportedSignatureVersion,
    DuplicateItemError,
    ApplianceError,
)

# Signing
from porticor_client.signing import (
    Signer,
    SignedCredentialRequest,
    generate_nonce,
    sign_credential_request,
    verify_credential_signature,
)

# Credentials
from porticor_client.credentials import CredentialCache

# Gateway
from porticor_client.gateway import ApplianceGateway

# Resolution
from porticor_client.resolver import (
    KeyResolver,
    ResolutionTier,
    Found,
    NotAvailable,
    Failed,
)

# Logging
from porticor_client.logging_config import setup_logging

__all__ = [
    # Client
    "PorticorClient",
    "get_client",
    "reset_client",
    "fetch_encryption_key",
    "find_or_create_encryption_key",
    # Configuration
    "ApplianceConfig",
    # Errors
    "PorticorError",
    "InvalidConfiguration",
    "InvalidKeySource",
    "UnsupportedSignatureVersion",
    "DuplicateItemError",
    "ApplianceError",
    # Signing
    "Signer",
    "SignedCredentialRequest",
    "generate_nonce",
    "sign_credential_request",
    "verify_credential_signature",
    # Credentials
    "CredentialCache",
    # Gateway
    "ApplianceGateway",
    # Resolution
    "KeyResolver",
    "ResolutionTier",
    "Found",
    "NotAvailable",
    "Failed",
    # Logging
    "setup_logging",
]
