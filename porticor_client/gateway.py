"""
Appliance Gateway
=================
Signed request/response layer over the appliance HTTP API.

Usage:
    gateway = ApplianceGateway(http_client, signer, CredentialCache())

    key = gateway.get_protected_item("billing-master")
"""

import logging
from typing import Any, Callable, Dict, Optional, Type, TypeVar, Union
from urllib.parse import quote

from .credentials import CredentialCache
from .exceptions import ApplianceError, DuplicateItemError
from .http import (
    ApplianceHTTPClient,
    AuthenticationError,
    InvalidResponseError,
    NotFoundError,
    TransportError,
)
from .models import ApplianceResponse, CredentialResponse, ProtectedItemResponse, TimeResponse
from .signing import Signer

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=ApplianceResponse)

TIME_PATH = "/api/creds/get_time"
CREDENTIAL_PATH = "/api/creds/get_temporary_credential"
PROTECTED_ITEM_PATH = "/api/protected_items/{name}"


def protected_item_path(name: str) -> str:
    """Path for a protected item with the name fully percent-encoded."""
    return PROTECTED_ITEM_PATH.format(name=quote(name, safe=""))


class ApplianceGateway:
    """Translates key operations into signed appliance calls."""

    def __init__(
        self,
        http_client: ApplianceHTTPClient,
        signer: Signer,
        credential_cache: Optional[CredentialCache] = None,
    ):
        self.http = http_client
        self.signer = signer
        self.credential_cache = credential_cache or CredentialCache()

    def _call(
        self,
        send: Callable[..., Dict[str, Any]],
        path: str,
        response_model: Type[R],
        **kwargs,
    ) -> R:
        """
        Issue a request and decode the body into response_model.

        HTTP error statuses yield a non-ok response; a JSON object body is
        decoded so the caller can inspect error and error_code. Network
        failures and undecodable bodies propagate.
        """
        try:
            body = send(path, **kwargs)
        except InvalidResponseError:
            raise
        except TransportError as e:
            if e.status_code is None:
                raise
            if isinstance(e, AuthenticationError):
                logger.warning(f"Appliance rejected credentials for {path} (HTTP {e.status_code}), dropping cached credential")
                self.credential_cache.invalidate()
            elif isinstance(e, NotFoundError):
                logger.info(f"Appliance has nothing at {path}")
            else:
                logger.warning(f"Appliance returned HTTP {e.status_code} for {path}")
            body = e.body if isinstance(e.body, dict) else {}
            return response_model.from_body(body, status_code=e.status_code)
        return response_model.from_body(body)

    def get_time(self) -> Optional[Union[int, float, str]]:
        """Return the appliance's clock, or None on a non-success response."""
        response = self._call(self.http.get, TIME_PATH, TimeResponse)
        if not response.ok:
            logger.warning(f"get_time failed: {response.error}")
            return None
        return response.time

    def get_temporary_credential(self) -> Optional[Union[str, int, float]]:
        """
        Request a fresh temporary credential.

        Signs with the appliance's own time so local clock skew does not
        invalidate the request.

        Returns:
            The credential, or None if time or credential could not be obtained
        """
        appliance_time = self.get_time()
        if appliance_time is None:
            return None

        signed = self.signer.build_request(appliance_time)
        response = self._call(self.http.get, CREDENTIAL_PATH, CredentialResponse, params=signed.as_params())
        if not response.ok:
            logger.warning(f"get_temporary_credential failed: {response.error}")
            return None
        return response.credential

    def credential(self) -> Optional[Union[str, int, float]]:
        """Cached temporary credential, fetched on first use."""
        return self.credential_cache.get_or_fetch(self.get_temporary_credential)

    def get_protected_item(self, name: str) -> Optional[Any]:
        """Fetch key material for name, or None on a non-success response."""
        response = self._call(
            self.http.get,
            protected_item_path(name),
            ProtectedItemResponse,
            params={"api_cred": self.credential()},
        )
        if not response.ok:
            logger.warning(f"get_protected_item failed for {name}: {response.error}")
            return None
        return response.item

    def create_protected_item(self, name: str, algorithm: str = "RSA2048", export: bool = True) -> Any:
        """
        Create a protected item on the appliance.

        Args:
            name: Unique key name
            algorithm: Key algorithm, e.g. "RSA2048"
            export: Whether the key material may be exported

        Returns:
            Key material of the created item

        Raises:
            DuplicateItemError: If an item with this name already exists
            ApplianceError: For any other appliance-reported failure
        """
        payload: Dict[str, Any] = {
            "algorithm": algorithm,
            "exportable": export,
            "api_cred": self.credential(),
        }
        response = self._call(self.http.put, protected_item_path(name), ProtectedItemResponse, json=payload)
        if response.ok:
            return response.item

        if response.is_duplicate:
            raise DuplicateItemError(str(response.error or f"Protected item {name} already exists"))
        raise ApplianceError(
            str(response.error_code) if response.error_code is not None else None,
            message=str(response.error) if response.error else None,
        )
