"""
Key Resolution
==============
Tiered key lookup (cache, file system, appliance) and create-or-fetch.
"""

from .tiers import ResolutionTier, Found, NotAvailable, Failed, TierResult
from .sources import KeyCache, CacheSource, FileSystemSource, ApplianceSource
from .resolver import KeyResolver

__all__ = [
    # Tiers
    "ResolutionTier",
    "Found",
    "NotAvailable",
    "Failed",
    "TierResult",
    # Sources
    "KeyCache",
    "CacheSource",
    "FileSystemSource",
    "ApplianceSource",
    # Resolver
    "KeyResolver",
]
