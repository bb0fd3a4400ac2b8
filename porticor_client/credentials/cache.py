"""
Credential Cache
================
Single-slot cache for the appliance's temporary credential.
"""

import time
from typing import Callable, Optional
import structlog

logger = structlog.get_logger(__name__)

_EMPTY = object()


class CredentialCache:
    """
    Holds at most one temporary credential.

    The slot is filled lazily by the first get_or_fetch call and reused
    until invalidate() is called or the optional TTL runs out. A fetch
    that raises leaves the slot empty.
    """

    def __init__(
        self,
        ttl_seconds: Optional[float] = None,
        cache_failures: bool = False,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self.cache_failures = cache_failures
        self._clock = clock
        self._value = _EMPTY
        self._stored_at = 0.0

    @property
    def is_populated(self) -> bool:
        """True while the slot holds a usable value."""
        if self._value is _EMPTY:
            return False
        if self.ttl_seconds is not None and self._clock() - self._stored_at >= self.ttl_seconds:
            logger.info("Temporary credential expired", ttl_seconds=self.ttl_seconds)
            self.invalidate()
            return False
        return True

    def get_or_fetch(self, fetch_fn: Callable[[], Optional[str]]) -> Optional[str]:
        """
        Return the cached credential, fetching it on first use.

        Args:
            fetch_fn: Performs the full get_time, sign and request sequence

        Returns:
            The credential, or None if the appliance refused to issue one
        """
        if self.is_populated:
            return self._value

        credential = fetch_fn()
        if credential is None and not self.cache_failures:
            logger.warning("Temporary credential unavailable, not caching")
            return None

        self._value = credential
        self._stored_at = self._clock()
        return credential

    def invalidate(self) -> None:
        """Empty the slot so the next call fetches again."""
        self._value = _EMPTY
        self._stored_at = 0.0
