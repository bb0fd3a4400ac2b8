"""
Resolution Tiers
================
Tier ordering and the tagged results each tier returns.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from ..exceptions import InvalidKeySource


class ResolutionTier(str, Enum):
    """Key sources, listed in escalation order."""
    CACHE = "cache"
    FILE_SYSTEM = "file_system"
    APPLIANCE = "appliance"

    @classmethod
    def parse(cls, value: Union["ResolutionTier", str]) -> "ResolutionTier":
        try:
            return cls(value)
        except ValueError:
            raise InvalidKeySource(f"Invalid encryption_key source: {value!r}") from None

    @classmethod
    def escalation_from(cls, start: "ResolutionTier") -> List["ResolutionTier"]:
        """Tiers from start onwards, in escalation order."""
        order = list(cls)
        return order[order.index(start):]


@dataclass(frozen=True)
class Found:
    """The tier produced key material."""
    key: str


@dataclass(frozen=True)
class NotAvailable:
    """The tier cannot serve this key; escalate to the next one."""
    reason: str


@dataclass(frozen=True)
class Failed:
    """The tier hit an error; resolution stops."""
    error: Exception


TierResult = Union[Found, NotAvailable, Failed]
