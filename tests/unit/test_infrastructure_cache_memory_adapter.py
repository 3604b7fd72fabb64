"""Unit tests for InMemoryMetadataCache.

Tests cover:
- get/set/delete Result values
- TTL expiry with an injected clock
- Stored payloads are isolated from caller mutation
"""

import pytest

from resource_voter.core.result import Success
from resource_voter.infrastructure.cache import InMemoryMetadataCache


class _Clock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> _Clock:
    return _Clock()


@pytest.fixture
def cache(clock) -> InMemoryMetadataCache:
    return InMemoryMetadataCache(clock=clock)


@pytest.mark.unit
class TestInMemoryMetadataCache:
    """Test the in-process cache."""

    def test_miss(self, cache):
        assert cache.get("missing") == Success(value=None)

    def test_set_then_get(self, cache):
        assert cache.set("k", {"protected": True}) == Success(value=None)

        assert cache.get("k") == Success(value={"protected": True})

    def test_entry_expires(self, cache, clock):
        cache.set("k", {"protected": True}, ttl=10)

        clock.now += 9
        assert cache.get("k") == Success(value={"protected": True})

        clock.now += 1
        assert cache.get("k") == Success(value=None)
        assert len(cache) == 0

    def test_no_ttl_never_expires(self, cache, clock):
        cache.set("k", {"protected": False})
        clock.now += 10**9

        assert cache.get("k") == Success(value={"protected": False})

    def test_delete(self, cache):
        cache.set("k", {})

        assert cache.delete("k") == Success(value=True)
        assert cache.delete("k") == Success(value=False)

    def test_payload_isolated(self, cache):
        payload = {"prefix": "article"}
        cache.set("k", payload)
        payload["prefix"] = "changed"

        assert cache.get("k").value == {"prefix": "article"}

    def test_clear(self, cache):
        cache.set("a", {})
        cache.set("b", {})

        cache.clear()

        assert len(cache) == 0
