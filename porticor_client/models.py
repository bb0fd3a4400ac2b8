"""
Appliance Response Models
=========================
Typed response bodies for each appliance endpoint.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, PrivateAttr, ValidationError

from .http import InvalidResponseError

DUPLICATE_ERROR_CODE = "CreateDuplicate"


class ApplianceResponse(BaseModel):
    """Fields shared by every appliance response."""
    model_config = ConfigDict(extra="ignore")

    error: Optional[Any] = None
    error_code: Optional[Union[str, int, float]] = None

    _status_code: int = PrivateAttr(default=200)

    @classmethod
    def from_body(cls, body: dict, status_code: int = 200):
        """Decode body; raises InvalidResponseError if a field has the wrong shape."""
        try:
            response = cls.model_validate(body)
        except ValidationError as e:
            raise InvalidResponseError(
                f"Unexpected {cls.__name__} body",
                status_code=status_code,
                details=str(e),
                body=body,
            ) from e
        response._status_code = status_code
        return response

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def ok(self) -> bool:
        """Transport success and an empty error field."""
        return 200 <= self._status_code < 300 and not self.error

    @property
    def is_duplicate(self) -> bool:
        return self.error_code is not None and str(self.error_code) == DUPLICATE_ERROR_CODE


class TimeResponse(ApplianceResponse):
    """GET /api/creds/get_time"""
    time: Optional[Union[int, float, str]] = None


class CredentialResponse(ApplianceResponse):
    """GET /api/creds/get_temporary_credential"""
    credential: Optional[Union[str, int, float]] = None


class ProtectedItemResponse(ApplianceResponse):
    """GET and PUT /api/protected_items/{name}"""
    item: Optional[Any] = None
