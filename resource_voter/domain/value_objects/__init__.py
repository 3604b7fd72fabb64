"""Domain value objects.

Immutable types describing one authorization check.

Usage:
    from resource_voter.domain.value_objects import (
        Operation,
        PermissionAttribute,
        ResourceAccessMetadata,
        TargetedSubject,
        UpdateSubject,
    )
"""

from resource_voter.domain.value_objects.operation import Operation
from resource_voter.domain.value_objects.permission_attribute import (
    ATTRIBUTE_DELIMITER,
    PermissionAttribute,
    is_valid_token,
    validate_prefix,
)
from resource_voter.domain.value_objects.resource_access_metadata import (
    ResourceAccessMetadata,
)
from resource_voter.domain.value_objects.subject import (
    TargetedSubject,
    UpdateSubject,
    describe_subject,
    main_object,
    split_subject,
    unwrap_subject,
)
from resource_voter.domain.value_objects.voter_identity import voter_identity

__all__ = [
    "ATTRIBUTE_DELIMITER",
    "Operation",
    "PermissionAttribute",
    "ResourceAccessMetadata",
    "TargetedSubject",
    "UpdateSubject",
    "describe_subject",
    "is_valid_token",
    "main_object",
    "split_subject",
    "unwrap_subject",
    "validate_prefix",
    "voter_identity",
]
