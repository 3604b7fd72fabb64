"""Infrastructure layer error types.

Adapters catch backend exceptions and return them as error values inside
Failure results. Metadata resolution treats any such Failure as a cache miss.
"""

from dataclasses import dataclass

from resource_voter.core.errors import DomainError
from resource_voter.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        infrastructure_code: Backend-specific error code.
        details: Additional context.
    """

    infrastructure_code: InfrastructureErrorCode | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheError(InfrastructureError):
    """Metadata cache failure (key, operation and original error in details)."""
