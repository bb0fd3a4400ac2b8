"""
Credential Request Signer
=========================
Binds account credentials to the signing functions.
"""

from typing import Callable, Optional, Union
import structlog

from .models import SignedCredentialRequest
from .nonce import generate_nonce
from .signature import SIGNATURE_VERSION, sign_credential_request

logger = structlog.get_logger(__name__)


class Signer:
    """Signs temporary credential requests for one appliance account."""

    def __init__(
        self,
        api_key_id: str,
        api_secret: str,
        version: str = SIGNATURE_VERSION,
        nonce_factory: Optional[Callable[[], str]] = None,
    ):
        self.api_key_id = api_key_id
        self._api_secret = api_secret
        self.version = version
        self._nonce_factory = nonce_factory or generate_nonce

    def __repr__(self) -> str:
        return f"Signer(api_key_id={self.api_key_id!r}, version={self.version!r})"

    def sign(self, nonce: str, time: Union[int, str]) -> str:
        """Return the prefixed signature for the given nonce and appliance time."""
        return sign_credential_request(
            self._api_secret, self.api_key_id, nonce, time, self.version
        )

    def build_request(self, time: Union[int, str]) -> SignedCredentialRequest:
        """
        Create a freshly signed credential request.

        A new nonce is drawn for every call.

        Args:
            time: Appliance time returned by get_time

        Returns:
            SignedCredentialRequest ready to send
        """
        nonce = self._nonce_factory()
        signature = self.sign(nonce, time)
        logger.debug("Signed credential request", nonce=nonce[:4], version=self.version)
        return SignedCredentialRequest(
            api_key_id=self.api_key_id,
            nonce=nonce,
            time=time,
            signature=signature,
        )
