"""Metadata cache protocol.

Defines the cache interface ResourceAccessMetadataResolver needs, without
knowing about any specific implementation. Infrastructure adapters
(in-memory, Redis) implement this protocol structurally.

Architecture:
- Protocol-based - uses structural typing
- Synchronous: an authorization check has no suspension points
- All operations return Result types
- Fail-open strategy: cache failures count as misses, never as denials
"""

from typing import Any, Protocol

from resource_voter.core.errors import DomainError
from resource_voter.core.result import Result


class MetadataCacheProtocol(Protocol):
    """Cache protocol - what metadata resolution needs from a cache.

    Values are JSON-compatible dicts. Implementations MUST be safe for
    concurrent get/set from request threads.
    """

    def get(self, key: str) -> Result[dict[str, Any] | None, DomainError]:
        """Get a cached payload.

        Args:
            key: Cache key.

        Returns:
            Result with the payload if found, None on a miss, or CacheError.

        Example:
            match cache.get(key):
                case Success(value=dict() as payload):
                    ...  # hit
                case Success(value=None):
                    ...  # miss
                case Failure(error=err):
                    logger.warning("metadata_cache_error", error=str(err))
        """
        ...

    def set(
        self,
        key: str,
        value: dict[str, Any],
        ttl: int | None = None,
    ) -> Result[None, DomainError]:
        """Store a payload.

        Args:
            key: Cache key.
            value: JSON-compatible dict.
            ttl: Time to live in seconds (None = no expiration).

        Returns:
            Result with None on success, or CacheError.
        """
        ...

    def delete(self, key: str) -> Result[bool, DomainError]:
        """Delete a cached payload.

        Args:
            key: Cache key.

        Returns:
            Result with True if the key existed, False if not, or CacheError.
        """
        ...
