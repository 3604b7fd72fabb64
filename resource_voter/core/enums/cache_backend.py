"""Metadata cache backend selection."""

from enum import Enum


class CacheBackend(str, Enum):
    """Which cache adapter backs resource metadata resolution.

    String Enum:
        Values match the ``RESOURCE_VOTER_CACHE_BACKEND`` environment variable.
    """

    MEMORY = "memory"
    """Process-local dictionary with TTL."""

    REDIS = "redis"
    """Shared Redis instance (requires redis_url)."""

    NONE = "none"
    """No memoization, metadata is recomputed on every call."""
