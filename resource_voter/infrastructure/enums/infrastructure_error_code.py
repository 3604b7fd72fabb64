"""Infrastructure-specific error codes.

Internal codes for tracking cache backend failures. CacheError values carry
both this code and a domain ErrorCode.
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Cache backend failure codes."""

    CACHE_CONNECTION_ERROR = "cache_connection_error"
    CACHE_GET_ERROR = "cache_get_error"
    CACHE_SET_ERROR = "cache_set_error"
    CACHE_DELETE_ERROR = "cache_delete_error"
    CACHE_DECODE_ERROR = "cache_decode_error"
