"""Resource access metadata resolver protocol."""

from typing import Protocol

from resource_voter.domain.value_objects import ResourceAccessMetadata


class MetadataResolverProtocol(Protocol):
    """Resource type -> ResourceAccessMetadata."""

    def resolve(self, resource_type: type) -> ResourceAccessMetadata:
        """Resolve (and possibly cache) metadata for a resource type."""
        ...
