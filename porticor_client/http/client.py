import logging
import httpx
from typing import Optional, Any, Dict
from tenacity import Retrying, stop_after_attempt, wait_exponential, retry_if_exception_type, before_sleep_log

from .exceptions import (
    TransportError,
    ServiceUnavailableError,
    ServiceTimeoutError,
    AuthenticationError,
    NotFoundError,
    ApplianceHTTPError,
    InvalidResponseError,
)

logger = logging.getLogger(__name__)


def _decode_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


class ApplianceHTTPClient:
    """
    Blocking HTTP client for the appliance's JSON API.

    Features:
    - Automatic retries on network errors, timeouts and 5xx responses.
    - Connection pooling (via httpx.Client).
    - Standardized exception mapping; error bodies are decoded and attached.
    """

    def __init__(
        self,
        base_url: str,
        service_name: str = "appliance",
        timeout: float = 10.0,
        verify_ssl: bool = True,
        max_attempts: int = 3,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.service_name = service_name
        self.timeout = timeout
        self.max_attempts = max(1, max_attempts)

        headers = {
            "User-Agent": "porticor-client",
            "Accept": "application/json",
        }

        self.client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers=headers,
            verify=verify_ssl,
            transport=transport,
        )

    def close(self):
        """Close the underlying HTTP client."""
        self.client.close()

    def _map_exception(self, exc: Exception) -> Exception:
        """Map httpx exceptions to transport exceptions."""
        if isinstance(exc, httpx.TimeoutException):
            return ServiceTimeoutError("Request timed out", service=self.service_name)
        if isinstance(exc, (httpx.ConnectError, httpx.NetworkError)):
            return ServiceUnavailableError(f"Failed to connect: {str(exc)}", service=self.service_name)
        if isinstance(exc, httpx.HTTPStatusError):
            status = exc.response.status_code
            text = exc.response.text
            body = _decode_body(exc.response)
            if status == 401:
                return AuthenticationError("Unauthorized", service=self.service_name, status_code=status, body=body)
            if status == 403:
                return AuthenticationError("Forbidden", service=self.service_name, status_code=status, body=body)
            if status == 404:
                return NotFoundError("Resource not found", service=self.service_name, status_code=status, body=body)
            if status >= 500:
                return ServiceUnavailableError("Server error", service=self.service_name, status_code=status, details=text, body=body)

            return ApplianceHTTPError(f"HTTP {status} Error", service=self.service_name, status_code=status, details=text, body=body)

        return TransportError(f"Unexpected error: {str(exc)}", service=self.service_name)

    def _send(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        """Execute a single request attempt and decode the JSON body."""
        try:
            response = self.client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise self._map_exception(e)

        if response.status_code == 204 or not response.content:
            return {}

        body = _decode_body(response)
        if not isinstance(body, dict):
            raise InvalidResponseError(
                "Response body is not a JSON object",
                service=self.service_name,
                status_code=response.status_code,
                details=response.text[:200],
            )
        return body

    def request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        """Execute request with retries and error handling."""
        retrying = Retrying(
            retry=retry_if_exception_type(ServiceUnavailableError),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        return retrying(self._send, method, path, **kwargs)

    def get(self, path: str, params: Optional[Dict] = None) -> Dict[str, Any]:
        return self.request("GET", path, params=params)

    def put(self, path: str, json: Any = None) -> Dict[str, Any]:
        return self.request("PUT", path, json=json)
