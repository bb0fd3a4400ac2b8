"""
Signature Functions
===================
HMAC signature computation for temporary credential requests.
"""

import hashlib
import hmac
from typing import Union

from ..exceptions import UnsupportedSignatureVersion

# Configuration
SIGNATURE_ALGORITHM = "sha256"
SIGNATURE_PREFIX = "hmac-sha256:"
SIGNATURE_VERSION = "v1"
SUPPORTED_VERSIONS = (SIGNATURE_VERSION,)

CREDENTIAL_ENDPOINT = "get_temporary_credential"


def string_to_sign(
    api_key_id: str,
    nonce: str,
    time: Union[int, str],
    version: str = SIGNATURE_VERSION,
) -> str:
    """
    Build the canonical string for a credential request.

    Args:
        api_key_id: Account API key ID
        nonce: One-time random token
        time: Appliance time returned by get_time
        version: Signing protocol version

    Returns:
        Canonical string covered by the signature

    Raises:
        UnsupportedSignatureVersion: If version is not known
    """
    if version not in SUPPORTED_VERSIONS:
        raise UnsupportedSignatureVersion(f"Unsupported signature version: {version}")
    return f"{CREDENTIAL_ENDPOINT}?api_key_id={api_key_id}&nonce={nonce}&time={time}"


def sign_credential_request(
    secret: str,
    api_key_id: str,
    nonce: str,
    time: Union[int, str],
    version: str = SIGNATURE_VERSION,
) -> str:
    """
    Compute the HMAC-SHA256 signature for a credential request.

    Args:
        secret: Account API secret
        api_key_id: Account API key ID
        nonce: One-time random token
        time: Appliance time returned by get_time
        version: Signing protocol version

    Returns:
        Hex digest prefixed with "hmac-sha256:"
    """
    message = string_to_sign(api_key_id, nonce, time, version)
    digest = hmac.new(
        secret.encode(),
        message.encode(),
        hashlib.sha256,
    ).hexdigest()
    return SIGNATURE_PREFIX + digest


def verify_credential_signature(
    secret: str,
    api_key_id: str,
    nonce: str,
    time: Union[int, str],
    provided_signature: str,
    version: str = SIGNATURE_VERSION,
) -> bool:
    """Verify a credential request signature using constant-time comparison."""
    expected_signature = sign_credential_request(secret, api_key_id, nonce, time, version)
    return hmac.compare_digest(expected_signature, provided_signature)
