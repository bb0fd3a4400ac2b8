"""
Credential Request Signing
==========================
HMAC-SHA256 signing and nonce generation for appliance credentials.
"""

from .models import SignedCredentialRequest
from .nonce import generate_nonce, NONCE_BYTES
from .signature import (
    string_to_sign,
    sign_credential_request,
    verify_credential_signature,
    SIGNATURE_ALGORITHM,
    SIGNATURE_PREFIX,
    SIGNATURE_VERSION,
)
from .signer import Signer

__all__ = [
    # Models
    "SignedCredentialRequest",
    # Nonce
    "generate_nonce",
    "NONCE_BYTES",
    # Signature
    "string_to_sign",
    "sign_credential_request",
    "verify_credential_signature",
    "SIGNATURE_ALGORITHM",
    "SIGNATURE_PREFIX",
    "SIGNATURE_VERSION",
    # Signer
    "Signer",
]
