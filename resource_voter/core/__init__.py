"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Error classes (raised exceptions and Result error values)
- Settings and the composition root (container)

The core module has NO dependencies on the application layer.
"""

from resource_voter.core.errors import (
    AccessDeniedError,
    ConfigurationError,
    DomainError,
    NoApplicableVoterError,
    ResourceVoterError,
)
from resource_voter.core.result import Failure, Result, Success

__all__ = [
    "AccessDeniedError",
    "ConfigurationError",
    "DomainError",
    "Failure",
    "NoApplicableVoterError",
    "ResourceVoterError",
    "Result",
    "Success",
]
