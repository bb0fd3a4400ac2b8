"""
Key Sources
===========
One lookup strategy per resolution tier.
"""

import os
from pathlib import Path
from typing import Optional, Protocol, Union
import structlog

from ..gateway import ApplianceGateway
from .tiers import Failed, Found, NotAvailable, TierResult

logger = structlog.get_logger(__name__)

KEY_FILE_SUFFIX = ".pem"


class KeyCache(Protocol):
    """Anything that can look a key up by name, returning None on a miss."""

    def get(self, name: str) -> Optional[str]:
        ...


class CacheSource:
    """Cache tier. With no backing cache every lookup escalates."""

    def __init__(self, backend: Optional[KeyCache] = None):
        self.backend = backend

    def lookup(self, name: str) -> TierResult:
        if self.backend is None:
            return NotAvailable("Requested key_pair not available in Cache.")
        try:
            key = self.backend.get(name)
        except Exception as e:
            return Failed(e)
        if key is None:
            return NotAvailable("Requested key_pair not available in Cache.")
        return Found(key)


class FileSystemSource:
    """
    File system tier.

    Reads {storage_path}/{name}.pem. A missing file and an unreadable one
    are treated the same: both escalate.
    """

    def __init__(self, storage_path: Optional[Union[str, Path]] = None):
        self.storage_path = Path(storage_path) if storage_path else None

    def key_path(self, name: str) -> Optional[Path]:
        """
        Path for name, or None if it falls outside the storage root.

        ".." segments are collapsed lexically; symlinks inside the root are
        left alone so they are followed when the file is read.
        """
        root = Path(os.path.abspath(self.storage_path))
        path = Path(os.path.normpath(root / f"{name}{KEY_FILE_SUFFIX}"))
        if root not in path.parents:
            return None
        return path

    def lookup(self, name: str) -> TierResult:
        unavailable = NotAvailable("Requested key_pair not available in FileSystem.")
        if self.storage_path is None:
            return unavailable

        try:
            path = self.key_path(name)
            if path is None:
                logger.warning("Key name escapes storage root", name=name)
                return unavailable
            return Found(path.read_text())
        except (OSError, ValueError):
            return unavailable


class ApplianceSource:
    """Appliance tier. Terminal: nothing escalates past it."""

    def __init__(self, gateway: ApplianceGateway):
        self.gateway = gateway

    def lookup(self, name: str) -> TierResult:
        try:
            key = self.gateway.get_protected_item(name)
        except Exception as e:
            return Failed(e)
        if key is None:
            return NotAvailable("Requested key_pair not available on the Appliance.")
        return Found(key)
