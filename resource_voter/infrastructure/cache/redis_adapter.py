"""Redis metadata cache.

Shares resolved metadata across processes. Payloads are stored as JSON.

Architecture:
- Implements MetadataCacheProtocol without inheritance (structural typing)
- Uses the synchronous redis client: an authorization check never suspends
- Maps Redis exceptions to CacheError with InfrastructureErrorCode
- Returns Result types for all operations (fail-open at the caller)
"""

import json
from typing import Any

from redis import Redis
from redis.exceptions import RedisError

from resource_voter.core.enums import ErrorCode
from resource_voter.core.result import Failure, Result, Success
from resource_voter.infrastructure.enums import InfrastructureErrorCode
from resource_voter.infrastructure.errors import CacheError


class RedisMetadataCache:
    """Redis implementation of MetadataCacheProtocol.

    Attributes:
        _redis: Redis client instance.
    """

    def __init__(self, redis_client: Redis) -> None:
        """Initialize Redis metadata cache.

        Args:
            redis_client: Synchronous Redis client.
        """
        self._redis = redis_client

    @classmethod
    def from_url(cls, url: str) -> "RedisMetadataCache":
        """Build from a connection URL (redis://host:port/db)."""
        return cls(
            Redis.from_url(
                url,
                decode_responses=False,
                socket_connect_timeout=5,
                socket_timeout=5,
                retry_on_timeout=True,
            )
        )

    def get(self, key: str) -> Result[dict[str, Any] | None, CacheError]:
        """Get a JSON payload.

        Args:
            key: Cache key.

        Returns:
            Result with the parsed dict, None on a miss, or CacheError.
        """
        try:
            raw = self._redis.get(key)
        except RedisError as e:
            return Failure(
                error=_cache_error(InfrastructureErrorCode.CACHE_GET_ERROR, key, e)
            )

        if raw is None:
            return Success(value=None)

        try:
            decoded = raw.decode("utf-8") if isinstance(raw, bytes) else raw
            value = json.loads(decoded)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            return Failure(
                error=_cache_error(
                    InfrastructureErrorCode.CACHE_DECODE_ERROR,
                    key,
                    e,
                    code=ErrorCode.CACHE_ENTRY_INVALID,
                )
            )
        return Success(value=value)

    def set(
        self,
        key: str,
        value: dict[str, Any],
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        """Store a JSON payload.

        Args:
            key: Cache key.
            value: JSON-compatible dict.
            ttl: Time to live in seconds (None = no expiration).

        Returns:
            Result with None on success, or CacheError.
        """
        payload = json.dumps(value)
        try:
            if ttl:
                self._redis.setex(key, ttl, payload)
            else:
                self._redis.set(key, payload)
        except RedisError as e:
            return Failure(
                error=_cache_error(InfrastructureErrorCode.CACHE_SET_ERROR, key, e)
            )
        return Success(value=None)

    def delete(self, key: str) -> Result[bool, CacheError]:
        """Delete a payload.

        Returns:
            Result with True if the key existed, or CacheError.
        """
        try:
            deleted = self._redis.delete(key)
        except RedisError as e:
            return Failure(
                error=_cache_error(InfrastructureErrorCode.CACHE_DELETE_ERROR, key, e)
            )
        return Success(value=bool(deleted))


def _cache_error(
    infrastructure_code: InfrastructureErrorCode,
    key: str,
    error: Exception,
    *,
    code: ErrorCode = ErrorCode.CACHE_UNAVAILABLE,
) -> CacheError:
    return CacheError(
        code=code,
        infrastructure_code=infrastructure_code,
        message=f"Metadata cache operation failed for key '{key}'",
        details={"key": key, "error": str(error), "type": type(error).__name__},
    )
