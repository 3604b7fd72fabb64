"""Resource access metadata resolution with optional memoization.

Resolution order:
    1. Cache lookup (key derived from the marker table fingerprint and the
       resource type's qualified name)
    2. Marker registry lookup on a miss
    3. Store the result with the configured TTL

Cache failures (Failure results, raised client errors, malformed payloads)
are treated as misses and logged as warnings. Metadata resolution never
fails because the cache is down.

Usage:
    resolver = ResourceAccessMetadataResolver(
        markers,
        cache=InMemoryMetadataCache(),
        ttl=3600,
        logger=get_logger(),
    )
    metadata = resolver.resolve(Article)
    if metadata.protected:
        attribute = mapper.map(operation, metadata.prefix)
"""

import hashlib

from resource_voter.core.result import Failure, Success
from resource_voter.domain.protocols import LoggerProtocol, MetadataCacheProtocol
from resource_voter.domain.resources.markers import ResourceMarkerRegistry
from resource_voter.domain.value_objects import ResourceAccessMetadata

CACHE_KEY_PREFIX = "resource_voter.metadata."


def metadata_cache_key(resource_type: type, fingerprint: str = "") -> str:
    """Cache key for one resource type under one marker table.

    Hashing keeps keys a fixed length and free of characters some cache
    backends reject.

    Args:
        resource_type: Resource class.
        fingerprint: Marker registry fingerprint. Resolvers over different
            marker tables never share entries.

    Returns:
        str: "resource_voter.metadata.<sha256 of fingerprint:module.qualname>".
    """
    qualified = f"{resource_type.__module__}.{resource_type.__qualname__}"
    qualified = f"{fingerprint}:{qualified}"
    return CACHE_KEY_PREFIX + hashlib.sha256(qualified.encode("utf-8")).hexdigest()


class ResourceAccessMetadataResolver:
    """Resolves ResourceAccessMetadata from the marker registry.

    Attributes:
        markers: Immutable resource marker table.
        cache: Optional metadata cache. None disables memoization.
        ttl: Cache TTL in seconds. None stores without expiry; 0 disables
            memoization.
    """

    def __init__(
        self,
        markers: ResourceMarkerRegistry,
        *,
        logger: LoggerProtocol,
        cache: MetadataCacheProtocol | None = None,
        ttl: int | None = None,
    ) -> None:
        self.markers = markers
        self.cache = cache if ttl != 0 else None
        self.ttl = ttl
        self._logger = logger

    def resolve(self, resource_type: type) -> ResourceAccessMetadata:
        """Resolve metadata for a resource type.

        Args:
            resource_type: Resource class.

        Returns:
            ResourceAccessMetadata: Protected metadata (with prefix and
            optional voter) for marked types, unprotected otherwise.
        """
        key = metadata_cache_key(resource_type, self.markers.fingerprint)

        cached = self._cache_get(key, resource_type)
        if cached is not None:
            return cached

        metadata = self._inspect(resource_type)
        self._cache_set(key, metadata, resource_type)
        return metadata

    def invalidate(self, resource_type: type) -> bool:
        """Drop the cached metadata of a resource type.

        Returns:
            bool: True if an entry was removed.
        """
        if self.cache is None:
            return False
        key = metadata_cache_key(resource_type, self.markers.fingerprint)
        match self.cache.delete(key):
            case Success(value=removed):
                return bool(removed)
            case Failure(error=error):
                self._logger.warning(
                    "metadata_cache_error",
                    action="delete",
                    resource_type=resource_type.__qualname__,
                    error=str(error),
                )
                return False

    def _inspect(self, resource_type: type) -> ResourceAccessMetadata:
        marker = self.markers.lookup(resource_type)
        if marker is None:
            return ResourceAccessMetadata.unprotected()
        return ResourceAccessMetadata(
            protected=True,
            prefix=marker.prefix or resource_type.__name__.lower(),
            voter=marker.voter,
        )

    def _cache_get(
        self, key: str, resource_type: type
    ) -> ResourceAccessMetadata | None:
        if self.cache is None:
            return None

        try:
            result = self.cache.get(key)
        except Exception as e:
            self._logger.warning(
                "metadata_cache_error",
                action="get",
                resource_type=resource_type.__qualname__,
                error=str(e),
            )
            return None

        match result:
            case Success(value=None):
                return None
            case Success(value=payload):
                metadata = ResourceAccessMetadata.from_dict(payload)
                if metadata is None:
                    self._logger.warning(
                        "metadata_cache_entry_invalid",
                        resource_type=resource_type.__qualname__,
                    )
                return metadata
            case Failure(error=error):
                self._logger.warning(
                    "metadata_cache_error",
                    action="get",
                    resource_type=resource_type.__qualname__,
                    error=str(error),
                )
                return None

    def _cache_set(
        self, key: str, metadata: ResourceAccessMetadata, resource_type: type
    ) -> None:
        if self.cache is None:
            return

        try:
            result = self.cache.set(key, metadata.to_dict(), ttl=self.ttl)
        except Exception as e:
            result = Failure(error=e)

        if isinstance(result, Failure):
            self._logger.warning(
                "metadata_cache_error",
                action="set",
                resource_type=resource_type.__qualname__,
                error=str(result.error),
            )
