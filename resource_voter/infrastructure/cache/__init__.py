"""Metadata cache adapters.

Both adapters implement MetadataCacheProtocol structurally.
"""

from resource_voter.infrastructure.cache.memory_adapter import InMemoryMetadataCache
from resource_voter.infrastructure.cache.redis_adapter import RedisMetadataCache

__all__ = ["InMemoryMetadataCache", "RedisMetadataCache"]
