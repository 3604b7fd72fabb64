"""Self-configuring CRUD voter.

An AutoConfiguredVoter needs no constructor wiring beyond the registries.
On its first supports() call it:

1. Looks up its resource type in the VoterRegistry, unless types were
   bound explicitly with set_resource_types().
2. Derives its prefix from the resource marker (or the lowercase class name),
   unless a prefix was set explicitly.
3. Registers every ``can_<operation>`` method other than the CRUD hooks as
   a custom operation handler (``can_publish_article`` -> "publish-article").

Configuration runs exactly once, under a lock, even when the first checks
arrive concurrently.

Usage:
    class ArticleVoter(AutoConfiguredVoter):
        def can_publish(self, obj, previous) -> bool:
            return obj.author_id == current_user().id

    registry.register(ArticleVoter, Article)
    voter = ArticleVoter(registry=registry, markers=markers)
"""

import threading
from typing import Any

from resource_voter.application.security.naming import (
    handler_name_to_operation,
    operation_to_handler_name,
)
from resource_voter.application.security.voter_registry import VoterRegistry
from resource_voter.application.voters.crud_voter import CrudVoter
from resource_voter.core.enums import ErrorCode
from resource_voter.core.errors import ConfigurationError
from resource_voter.domain.protocols import CrudCapability, LoggerProtocol
from resource_voter.domain.resources.markers import ResourceMarkerRegistry

HANDLER_PREFIX = "can_"
# The five CRUD hooks and can_custom_operation
RESERVED_HOOKS = frozenset(
    name for name in vars(CrudCapability) if name.startswith(HANDLER_PREFIX)
)


class AutoConfiguredVoter(CrudVoter):
    """CrudVoter that binds itself from the VoterRegistry on first use."""

    def __init__(
        self,
        *,
        registry: VoterRegistry | None = None,
        markers: ResourceMarkerRegistry | None = None,
        prefix: str | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        super().__init__(prefix=prefix, logger=logger)
        self._registry = registry
        self._markers = markers
        self._configured = False
        self._configure_lock = threading.Lock()

    def set_voter_registry(self, registry: VoterRegistry) -> None:
        self._registry = registry

    def set_marker_registry(self, markers: ResourceMarkerRegistry) -> None:
        self._markers = markers

    @property
    def is_configured(self) -> bool:
        return self._configured

    def supports(self, attribute: str, subject: Any) -> bool:
        if not self._configured:
            self.configure()
        return super().supports(attribute, subject)

    def configure(self) -> None:
        """Bind resource type, prefix and custom operations. Idempotent.

        Raises:
            ConfigurationError: If no registry is available, or the voter is
                not registered and has no resource types bound explicitly.
        """
        with self._configure_lock:
            if self._configured:
                return

            if not self.resource_types:
                resource_type = self._lookup_resource_type()
                self.set_resource_types(resource_type)
                if self._prefix is None:
                    self.set_prefix(self._prefix_for(resource_type))
            self._discover_operations()

            self._configured = True

        if self._logger is not None:
            self._logger.info(
                "voter_auto_configured",
                voter=self.identity,
                prefix=self.prefix,
                resource_types=[t.__qualname__ for t in self.resource_types],
                operations=list(self.custom_operations),
            )

    def _lookup_resource_type(self) -> type:
        if self._registry is None:
            raise ConfigurationError(
                f"Voter {self.identity}: VoterRegistry not injected",
                code=ErrorCode.VOTER_NOT_REGISTERED,
                details={"voter": self.identity},
            )
        resource_type = self._registry.resource_type_of(self)
        if resource_type is None:
            raise ConfigurationError(
                f"Voter {self.identity} is not registered for any resource type",
                code=ErrorCode.VOTER_NOT_REGISTERED,
                details={"voter": self.identity},
            )
        return resource_type

    def _prefix_for(self, resource_type: type) -> str:
        marker = self._markers.lookup(resource_type) if self._markers else None
        if marker is not None and marker.prefix:
            return marker.prefix
        return resource_type.__name__.lower()

    def _discover_operations(self) -> None:
        # Explicit registrations win over discovered handlers
        registered = set(self._operations)
        for name in sorted(dir(type(self))):
            if not name.startswith(HANDLER_PREFIX) or name in RESERVED_HOOKS:
                continue
            suffix = name[len(HANDLER_PREFIX) :]
            if not suffix or not callable(getattr(type(self), name)):
                continue
            key = operation_to_handler_name(suffix)
            if key in registered:
                continue
            token = handler_name_to_operation(key)
            self.register_operation(token, getattr(self, name))
