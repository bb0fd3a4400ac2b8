"""
Porticor Appliance Client
=========================

Usage:
    from porticor_client import PorticorClient

    client = PorticorClient()

    # Look a key up (cache -> file system -> appliance)
    key = client.fetch_encryption_key("billing-master")

    # Create it unless it already exists
    key = client.find_or_create_encryption_key("billing-master", "RSA2048")
"""

from typing import Optional, Union

import httpx

from .config import ApplianceConfig
from .credentials import CredentialCache
from .gateway import ApplianceGateway
from .http import ApplianceHTTPClient
from .resolver import CacheSource, FileSystemSource, KeyCache, KeyResolver, ResolutionTier
from .signing import Signer


class PorticorClient:
    """Client for the Porticor key-management appliance."""

    def __init__(
        self,
        config: Optional[ApplianceConfig] = None,
        key_cache: Optional[KeyCache] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = config or ApplianceConfig()
        self.config.validate()

        self.http = ApplianceHTTPClient(
            base_url=self.config.api_url,
            timeout=self.config.timeout,
            verify_ssl=self.config.verify_ssl,
            max_attempts=self.config.max_attempts,
            transport=transport,
        )
        self.credential_cache = CredentialCache(
            ttl_seconds=self.config.credential_ttl_seconds,
            cache_failures=self.config.cache_failed_credentials,
        )
        self.gateway = ApplianceGateway(
            self.http,
            Signer(self.config.api_key, self.config.api_secret),
            self.credential_cache,
        )
        self.resolver = KeyResolver(
            self.gateway,
            cache=CacheSource(key_cache),
            file_system=FileSystemSource(self.config.storage_path),
        )

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self):
        self.http.close()

    def fetch_encryption_key(
        self,
        name: str,
        source: Union[ResolutionTier, str] = ResolutionTier.CACHE,
    ) -> Optional[str]:
        """
        Fetch an encryption key by name.

        Args:
            name: Key name
            source: Tier to start from ("cache", "file_system" or "appliance")

        Returns:
            Key material, or None if it could not be resolved
        """
        return self.resolver.fetch_key(name, source)

    def find_or_create_encryption_key(
        self,
        name: str,
        algorithm: str = "RSA2048",
        export: bool = True,
    ) -> Optional[str]:
        """Create an encryption key, or fetch it if it already exists."""
        return self.resolver.find_or_create_key(name, algorithm, export)

    def create_encryption_key(self, name: str, algorithm: str = "RSA2048", export: bool = True) -> str:
        """Create an encryption key; raises DuplicateItemError or ApplianceError on failure."""
        return self.resolver.create_key(name, algorithm, export)

    def reset_credential(self) -> None:
        """Drop the cached temporary credential."""
        self.credential_cache.invalidate()


# Singleton instance for convenience
_client_instance: Optional[PorticorClient] = None


def get_client() -> PorticorClient:
    """Get the global client instance, configured from the environment."""
    global _client_instance
    if _client_instance is None:
        _client_instance = PorticorClient()
    return _client_instance


def reset_client() -> None:
    """Close and discard the global client instance."""
    global _client_instance
    if _client_instance is not None:
        _client_instance.close()
        _client_instance = None


# Convenience functions
def fetch_encryption_key(name: str, source: str = "cache") -> Optional[str]:
    """Fetch an encryption key with the global client."""
    return get_client().fetch_encryption_key(name, source)


def find_or_create_encryption_key(
    name: str,
    algorithm: str = "RSA2048",
    export: bool = True,
) -> Optional[str]:
    """Find or create an encryption key with the global client."""
    return get_client().find_or_create_encryption_key(name, algorithm, export)
