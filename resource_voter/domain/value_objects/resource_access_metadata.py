"""Resource access metadata value object.

Answers three questions about a resource type: is it protected, under what
attribute prefix, and which voter (if any) is bound to it. Computed once per
type by ResourceAccessMetadataResolver and cached as a plain dict.
"""

from dataclasses import dataclass
from typing import Any

_CACHE_FIELDS = ("protected", "prefix", "voter")


@dataclass(frozen=True, slots=True, kw_only=True)
class ResourceAccessMetadata:
    """Authorization metadata for one resource type.

    Attributes:
        protected: Whether the type carries a resource marker.
        prefix: Attribute prefix (None when unprotected).
        voter: Identity of the explicitly bound voter, if any.
    """

    protected: bool
    prefix: str | None = None
    voter: str | None = None

    @classmethod
    def unprotected(cls) -> "ResourceAccessMetadata":
        """Metadata for a type without a marker."""
        return cls(protected=False)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for cache storage.

        Returns:
            dict[str, Any]: {"protected", "prefix", "voter"}.
        """
        return {
            "protected": self.protected,
            "prefix": self.prefix,
            "voter": self.voter,
        }

    @classmethod
    def from_dict(cls, value: Any) -> "ResourceAccessMetadata | None":
        """Rebuild metadata from a cached payload.

        Args:
            value: Payload previously produced by to_dict().

        Returns:
            ResourceAccessMetadata | None: None if the payload is not a dict
            carrying every field (treated as a cache miss by callers).
        """
        if not isinstance(value, dict) or not all(k in value for k in _CACHE_FIELDS):
            return None
        return cls(
            protected=bool(value["protected"]),
            prefix=value["prefix"],
            voter=value["voter"],
        )
