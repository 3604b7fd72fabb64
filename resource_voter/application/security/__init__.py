"""Authorization pipeline components.

Usage:
    from resource_voter.application.security import (
        AuthorizationGateway,
        ChainSubjectResolver,
        OperationAttributeMapper,
        ResourceAccessMetadataResolver,
        VoterRegistry,
    )
"""

from resource_voter.application.security.attribute_mapper import (
    OperationAttributeMapper,
    last_uri_segment,
)
from resource_voter.application.security.gateway import AuthorizationGateway
from resource_voter.application.security.metadata_resolver import (
    CACHE_KEY_PREFIX,
    ResourceAccessMetadataResolver,
    metadata_cache_key,
)
from resource_voter.application.security.naming import (
    apply_naming_convention,
    handler_name_to_operation,
    operation_to_handler_name,
)
from resource_voter.application.security.subject_resolver import (
    PREVIOUS_DATA_KEY,
    PREVIOUS_OBJECT_KEY,
    RESOURCE_CLASS_KEY,
    ChainSubjectResolver,
    CollectionSubjectStrategy,
    DefaultSubjectStrategy,
    UpdateSubjectStrategy,
)
from resource_voter.application.security.voter_registry import VoterRegistry

__all__ = [
    "CACHE_KEY_PREFIX",
    "PREVIOUS_DATA_KEY",
    "PREVIOUS_OBJECT_KEY",
    "RESOURCE_CLASS_KEY",
    "AuthorizationGateway",
    "ChainSubjectResolver",
    "CollectionSubjectStrategy",
    "DefaultSubjectStrategy",
    "OperationAttributeMapper",
    "ResourceAccessMetadataResolver",
    "UpdateSubjectStrategy",
    "VoterRegistry",
    "apply_naming_convention",
    "handler_name_to_operation",
    "last_uri_segment",
    "metadata_cache_key",
    "operation_to_handler_name",
]
