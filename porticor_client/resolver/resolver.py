"""
Key Resolver
============
Walks the resolution tiers for a key and runs the create-or-fetch flow.
"""

from typing import Dict, Optional, Union
import structlog

from ..exceptions import DuplicateItemError, InvalidKeySource
from ..gateway import ApplianceGateway
from .sources import ApplianceSource, CacheSource, FileSystemSource
from .tiers import Failed, Found, NotAvailable, ResolutionTier

logger = structlog.get_logger(__name__)


class KeyResolver:
    """
    Resolves encryption keys across cache, file system and appliance.

    Only a NotAvailable result moves resolution to the next tier. A Failed
    result ends the lookup with None.
    """

    def __init__(
        self,
        gateway: ApplianceGateway,
        cache: Optional[CacheSource] = None,
        file_system: Optional[FileSystemSource] = None,
    ):
        self.gateway = gateway
        self.sources: Dict[ResolutionTier, object] = {
            ResolutionTier.CACHE: cache or CacheSource(),
            ResolutionTier.FILE_SYSTEM: file_system or FileSystemSource(),
            ResolutionTier.APPLIANCE: ApplianceSource(gateway),
        }

    def fetch_key(
        self,
        name: str,
        start_tier: Union[ResolutionTier, str] = ResolutionTier.CACHE,
    ) -> Optional[str]:
        """
        Fetch a key, starting at start_tier and escalating as needed.

        Args:
            name: Key name
            start_tier: First tier to try ("cache", "file_system" or "appliance")

        Returns:
            Key material, or None if no tier produced it or a tier failed
        """
        try:
            start = ResolutionTier.parse(start_tier)
        except InvalidKeySource as e:
            logger.warning(str(e), name=name)
            return None

        for tier in ResolutionTier.escalation_from(start):
            result = self.sources[tier].lookup(name)

            if isinstance(result, Found):
                return result.key
            if isinstance(result, NotAvailable):
                logger.info(result.reason, name=name, tier=tier.value)
                continue
            if isinstance(result, Failed):
                logger.warning(
                    "Key lookup failed",
                    name=name,
                    tier=tier.value,
                    error=str(result.error),
                )
                return None

        return None

    def create_key(self, name: str, algorithm: str = "RSA2048", export: bool = True) -> str:
        """
        Create a key on the appliance.

        Raises:
            DuplicateItemError: If the appliance already holds this name
            ApplianceError: For any other appliance-reported failure
        """
        return self.gateway.create_protected_item(name, algorithm, export)

    def find_or_create_key(
        self,
        name: str,
        algorithm: str = "RSA2048",
        export: bool = True,
    ) -> Optional[str]:
        """Create a key, or fetch the existing one if the name is taken."""
        try:
            return self.create_key(name, algorithm, export)
        except DuplicateItemError:
            logger.info("Key already exists, fetching", name=name)
            return self.fetch_key(name)
        except Exception as e:
            logger.warning("Key creation failed", name=name, error=str(e))
            return None
