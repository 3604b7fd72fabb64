"""Resource Marker Registry - which resource types are protected.

A resource type is protected when it carries a marker. The marker optionally
overrides the attribute prefix (default: lowercase class name) and binds an
explicit voter. Markers are recorded in an explicit table at startup instead
of being discovered on the classes at request time.

Registry Structure:
    - ResourceMarker: prefix/voter pair for one resource type
    - ResourceMarkerRegistryBuilder: mutable, used during composition only
    - ResourceMarkerRegistry: immutable snapshot used while serving requests

Usage:
    markers = ResourceMarkerRegistryBuilder()

    @markers.resource(prefix="article")
    class Article:
        ...

    markers.mark(Comment, voter=CommentVoter)
    registry = markers.build()

    registry.lookup(Article)   # ResourceMarker(prefix="article", voter=None)
    registry.lookup(Tag)       # None (unprotected)
"""

import hashlib
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, TypeVar

from resource_voter.core.enums import ErrorCode
from resource_voter.core.errors import ConfigurationError
from resource_voter.domain.value_objects import validate_prefix, voter_identity

T = TypeVar("T", bound=type)


@dataclass(frozen=True, slots=True, kw_only=True)
class ResourceMarker:
    """Declarative authorization marker for one resource type.

    Attributes:
        prefix: Attribute prefix override. None means lowercase class name.
        voter: Identity of the voter bound to the type. None means any voter
            supporting the attribute may decide.
    """

    prefix: str | None = None
    voter: str | None = None


class ResourceMarkerRegistryBuilder:
    """Collects resource markers during single-threaded composition."""

    def __init__(self) -> None:
        self._markers: dict[type, ResourceMarker] = {}

    def mark(
        self,
        resource_type: type,
        *,
        prefix: str | None = None,
        voter: Any = None,
    ) -> ResourceMarker:
        """Mark a resource type as protected.

        Args:
            resource_type: Resource class.
            prefix: Optional attribute prefix override.
            voter: Optional voter class, instance or identity string.

        Returns:
            ResourceMarker: The recorded marker.

        Raises:
            ConfigurationError: If resource_type is not a class, the prefix is
                invalid, or the type was already marked.
        """
        if not isinstance(resource_type, type):
            raise ConfigurationError(
                f"Resource marker target must be a class, got {resource_type!r}",
                code=ErrorCode.INVALID_RESOURCE_TYPE,
            )
        if prefix is not None:
            validate_prefix(prefix)
        if resource_type in self._markers:
            raise ConfigurationError(
                f"Resource type {resource_type.__qualname__} is already marked",
                code=ErrorCode.CONFIGURATION_INVALID,
                details={"resource_type": resource_type.__qualname__},
            )

        marker = ResourceMarker(
            prefix=prefix,
            voter=voter_identity(voter) if voter is not None else None,
        )
        self._markers[resource_type] = marker
        return marker

    def resource(
        self,
        *,
        prefix: str | None = None,
        voter: Any = None,
    ) -> Callable[[T], T]:
        """Class decorator form of mark().

        Returns:
            Callable: Decorator returning the class unchanged.
        """

        def decorator(resource_type: T) -> T:
            self.mark(resource_type, prefix=prefix, voter=voter)
            return resource_type

        return decorator

    def build(self) -> "ResourceMarkerRegistry":
        """Freeze the collected markers.

        Returns:
            ResourceMarkerRegistry: Immutable snapshot.
        """
        return ResourceMarkerRegistry(self._markers)


class ResourceMarkerRegistry:
    """Immutable resource type -> marker table.

    Safe for concurrent reads: the underlying mapping is a read-only proxy
    over a private copy.

    Attributes:
        fingerprint: Stable digest of the marker table. Two registries with the
            same markers share it, in every process.
    """

    def __init__(self, markers: Mapping[type, ResourceMarker] | None = None) -> None:
        self._markers: Mapping[type, ResourceMarker] = MappingProxyType(
            dict(markers or {})
        )
        self.fingerprint = _fingerprint(self._markers)

    def lookup(self, resource_type: type) -> ResourceMarker | None:
        """Get the marker of an exact resource type.

        Args:
            resource_type: Resource class.

        Returns:
            ResourceMarker | None: Marker, or None for unprotected types.
        """
        return self._markers.get(resource_type)

    def __contains__(self, resource_type: object) -> bool:
        return resource_type in self._markers

    def __iter__(self) -> Iterator[type]:
        return iter(self._markers)

    def __len__(self) -> int:
        return len(self._markers)


def _fingerprint(markers: Mapping[type, ResourceMarker]) -> str:
    entries = sorted(
        f"{t.__module__}.{t.__qualname__}={m.prefix or ''}|{m.voter or ''}"
        for t, m in markers.items()
    )
    return hashlib.sha256("\n".join(entries).encode("utf-8")).hexdigest()[:16]
