"""Result types for cache adapters.

Adapters return Success or Failure instead of raising, so metadata
resolution can treat a failing cache as a miss.

Fields are keyword-only: match with keyword patterns.

Usage:
    match cache.get(key):
        case Success(value=None):
            ...  # miss
        case Success(value=payload):
            metadata = ResourceAccessMetadata.from_dict(payload)
        case Failure(error=error):
            logger.warning("metadata_cache_error", error=str(error))
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
