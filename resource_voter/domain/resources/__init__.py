"""Resource marker registry.

Usage:
    from resource_voter.domain.resources import (
        ResourceMarker,
        ResourceMarkerRegistry,
        ResourceMarkerRegistryBuilder,
    )
"""

from resource_voter.domain.resources.markers import (
    ResourceMarker,
    ResourceMarkerRegistry,
    ResourceMarkerRegistryBuilder,
)

__all__ = ["ResourceMarker", "ResourceMarkerRegistry", "ResourceMarkerRegistryBuilder"]
