"""
Nonce Generation
================
Random one-time tokens for replay protection.
"""

import secrets

NONCE_BYTES = 8


def generate_nonce() -> str:
    """Generate a 16 character lowercase hex nonce from a CSPRNG."""
    return secrets.token_hex(NONCE_BYTES)
