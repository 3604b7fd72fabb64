"""Core errors package.

Two families of errors live here:

- DomainError: dataclass error VALUES returned inside Failure results
  (cache adapters). Never raised.
- ResourceVoterError: raised exceptions for startup misconfiguration and
  per-request access denial.

Usage:
    from resource_voter.core.errors import AccessDeniedError, ConfigurationError
"""

from resource_voter.core.errors.authorization_errors import (
    AccessDeniedError,
    ConfigurationError,
    NoApplicableVoterError,
    ResourceVoterError,
)
from resource_voter.core.errors.domain_error import DomainError

__all__ = [
    "AccessDeniedError",
    "ConfigurationError",
    "DomainError",
    "NoApplicableVoterError",
    "ResourceVoterError",
]
