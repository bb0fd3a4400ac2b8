"""
Signing Models
==============
Data models for signed credential requests.
"""

from dataclasses import dataclass
from typing import Dict, Union


@dataclass(frozen=True)
class SignedCredentialRequest:
    """A get_temporary_credential request with its HMAC signature."""
    api_key_id: str
    nonce: str
    time: Union[int, str]
    signature: str

    def as_params(self) -> Dict[str, str]:
        """Query parameters expected by the credential endpoint."""
        return {
            "api_key_id": self.api_key_id,
            "time": str(self.time),
            "nonce": self.nonce,
            "api_signature": self.signature,
        }
