"""In-process metadata cache.

Default cache backend. Entries expire lazily on read. Thread-safe: every
operation holds one lock, so request threads can share a single instance.
"""

import threading
import time
from collections.abc import Callable
from typing import Any

from resource_voter.core.result import Result, Success
from resource_voter.infrastructure.errors import CacheError


class InMemoryMetadataCache:
    """Dict-backed implementation of MetadataCacheProtocol.

    Args:
        clock: Monotonic time source in seconds (injectable for tests).
    """

    def __init__(self, *, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: dict[str, tuple[dict[str, Any], float | None]] = {}

    def get(self, key: str) -> Result[dict[str, Any] | None, CacheError]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return Success(value=None)
            value, expires_at = entry
            if expires_at is not None and self._clock() >= expires_at:
                del self._entries[key]
                return Success(value=None)
            return Success(value=dict(value))

    def set(
        self,
        key: str,
        value: dict[str, Any],
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        expires_at = self._clock() + ttl if ttl else None
        with self._lock:
            self._entries[key] = (dict(value), expires_at)
        return Success(value=None)

    def delete(self, key: str) -> Result[bool, CacheError]:
        with self._lock:
            return Success(value=self._entries.pop(key, None) is not None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
