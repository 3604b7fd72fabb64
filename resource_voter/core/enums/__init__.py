"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from resource_voter.core.enums import ErrorCode, Environment
"""

from resource_voter.core.enums.cache_backend import CacheBackend
from resource_voter.core.enums.environment import Environment
from resource_voter.core.enums.error_code import ErrorCode
from resource_voter.core.enums.naming_convention import NamingConvention

__all__ = ["CacheBackend", "Environment", "ErrorCode", "NamingConvention"]
