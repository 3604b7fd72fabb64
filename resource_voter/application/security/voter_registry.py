"""Voter -> resource type registry.

Two-phase lifecycle:

1. Configuration: the composition root calls register() for every voter
   bound to a resource type. Registrations are serialized by a lock.
2. Serving: lock() freezes the table into read-only views. After that,
   lookups need no synchronization and register() raises.

Usage:
    registry = VoterRegistry()
    registry.register(ArticleVoter, Article)
    registry.lock()

    registry.resource_type_of(ArticleVoter)  # Article
    registry.voter_of(Article)               # "app.voters.ArticleVoter"
"""

import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from resource_voter.core.enums import ErrorCode
from resource_voter.core.errors import ConfigurationError
from resource_voter.domain.value_objects import voter_identity


class VoterRegistry:
    """Binds voter identities to resource types."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._locked = False
        self._bindings: Mapping[str, type] = {}
        self._reverse: Mapping[type, str] = {}

    @property
    def is_locked(self) -> bool:
        """Whether the configuration phase is over."""
        return self._locked

    def register(self, voter: Any, resource_type: type) -> None:
        """Bind a voter to a resource type.

        Re-registering the same voter with the same type is a no-op.

        Args:
            voter: Voter class, instance or identity string.
            resource_type: Resource class the voter decides for.

        Raises:
            ConfigurationError: If the registry is locked, resource_type is
                not a class, or the voter is already bound to another type.
        """
        if not isinstance(resource_type, type):
            raise ConfigurationError(
                f"Voter resource type must be a class, got {resource_type!r}",
                code=ErrorCode.INVALID_RESOURCE_TYPE,
            )

        identity = voter_identity(voter)
        with self._lock:
            if self._locked:
                raise ConfigurationError(
                    f"Cannot register voter {identity}: registry is locked",
                    code=ErrorCode.REGISTRY_LOCKED,
                    details={"voter": identity},
                )

            bound = self._bindings.get(identity)
            if bound is resource_type:
                return
            if bound is not None:
                raise ConfigurationError(
                    f"Voter {identity} is already bound to {bound.__qualname__}",
                    code=ErrorCode.VOTER_BINDING_CONFLICT,
                    details={
                        "voter": identity,
                        "bound_to": bound.__qualname__,
                        "requested": resource_type.__qualname__,
                    },
                )

            self._bindings[identity] = resource_type
            self._reverse.setdefault(resource_type, identity)

    def lock(self) -> "VoterRegistry":
        """Freeze the registry. Idempotent.

        Returns:
            VoterRegistry: self, for chaining at the composition root.
        """
        with self._lock:
            if not self._locked:
                self._bindings = MappingProxyType(dict(self._bindings))
                self._reverse = MappingProxyType(dict(self._reverse))
                self._locked = True
        return self

    def resource_type_of(self, voter: Any) -> type | None:
        """Resource type bound to a voter, or None."""
        return self._bindings.get(voter_identity(voter))

    def voter_of(self, resource_type: type) -> str | None:
        """First voter registered for a resource type, or None."""
        return self._reverse.get(resource_type)

    def has_voter(self, voter: Any) -> bool:
        return voter_identity(voter) in self._bindings

    def has_resource(self, resource_type: type) -> bool:
        return resource_type in self._reverse

    def mappings(self) -> Mapping[str, type]:
        """Snapshot of all identity -> resource type bindings."""
        return MappingProxyType(dict(self._bindings))

    def __len__(self) -> int:
        return len(self._bindings)
