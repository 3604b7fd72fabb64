"""Machine-readable error codes.

Error codes follow ENTITY_ACTION_REASON naming convention.
Used by raised ResourceVoterError subclasses and by DomainError values
carried in Result types.

Categories:
- Configuration errors (startup-time, fatal)
- Authorization errors (per-request)
- Cache errors (treated as cache misses)
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes.

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Configuration errors
    CONFIGURATION_INVALID = "configuration_invalid"
    REGISTRY_LOCKED = "registry_locked"
    VOTER_NOT_REGISTERED = "voter_not_registered"
    VOTER_BINDING_CONFLICT = "voter_binding_conflict"
    OPERATION_NAME_COLLISION = "operation_name_collision"
    INVALID_PREFIX = "invalid_prefix"
    INVALID_RESOURCE_TYPE = "invalid_resource_type"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    NO_APPLICABLE_VOTER = "no_applicable_voter"

    # Cache errors
    CACHE_UNAVAILABLE = "cache_unavailable"
    CACHE_ENTRY_INVALID = "cache_entry_invalid"
