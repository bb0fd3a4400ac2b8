"""
Tests for the single-slot credential cache.
"""

import pytest

from porticor_client.credentials import CredentialCache


class TestCredentialCache:
    """Tests for CredentialCache."""

    def test_fetches_once(self):
        """First call fetches; later calls reuse the value even with another fetch_fn."""
        calls = []

        def fetch():
            calls.append(1)
            return "cred-1"

        def other_fetch():
            calls.append(2)
            return "cred-2"

        cache = CredentialCache()

        assert cache.get_or_fetch(fetch) == "cred-1"
        assert cache.get_or_fetch(fetch) == "cred-1"
        assert cache.get_or_fetch(other_fetch) == "cred-1"
        assert calls == [1]

    def test_failed_fetch_not_cached_by_default(self):
        """A None result should leave the slot empty so the next call retries."""
        results = iter([None, "cred-1"])
        cache = CredentialCache()

        assert cache.get_or_fetch(lambda: next(results)) is None
        assert cache.is_populated is False
        assert cache.get_or_fetch(lambda: next(results)) == "cred-1"

    def test_failed_fetch_pinned_when_configured(self):
        """With cache_failures the None result occupies the slot."""
        calls = []

        def fetch():
            calls.append(1)
            return None

        cache = CredentialCache(cache_failures=True)

        assert cache.get_or_fetch(fetch) is None
        assert cache.get_or_fetch(lambda: "cred-1") is None
        assert calls == [1]

    def test_exception_leaves_slot_empty(self):
        """A raising fetch should propagate and not populate the cache."""
        cache = CredentialCache()

        def boom():
            raise RuntimeError("network down")

        with pytest.raises(RuntimeError):
            cache.get_or_fetch(boom)

        assert cache.get_or_fetch(lambda: "cred-1") == "cred-1"

    def test_invalidate(self):
        """invalidate() should force the next call to fetch."""
        cache = CredentialCache()
        cache.get_or_fetch(lambda: "cred-1")

        cache.invalidate()

        assert cache.get_or_fetch(lambda: "cred-2") == "cred-2"

    def test_ttl_expiry(self):
        """An expired credential should be refetched."""
        now = [1000.0]
        cache = CredentialCache(ttl_seconds=60, clock=lambda: now[0])

        assert cache.get_or_fetch(lambda: "cred-1") == "cred-1"
        now[0] += 30
        assert cache.get_or_fetch(lambda: "cred-2") == "cred-1"
        now[0] += 31
        assert cache.get_or_fetch(lambda: "cred-2") == "cred-2"

    def test_instances_do_not_share_state(self):
        """Two caches should hold independent credentials."""
        first = CredentialCache()
        second = CredentialCache()

        first.get_or_fetch(lambda: "cred-a")

        assert second.get_or_fetch(lambda: "cred-b") == "cred-b"
        assert first.get_or_fetch(lambda: "cred-c") == "cred-a"
