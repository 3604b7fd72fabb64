"""Raised errors for authorization configuration and enforcement.

Error Types:
- ConfigurationError: Startup-time misconfiguration. Fatal, never retried.
  Raised when registering voters after the registry is locked, when a voter
  cannot be bound to a resource type, or when two custom operation tokens
  collapse to the same handler name.
- AccessDeniedError: Per-request denial. Always surfaced to the caller and
  carries the attribute, resource type and operation kind that were checked.
- NoApplicableVoterError: Strict-mode denial where no voter claimed the
  attribute at all ("nobody decided" as opposed to "explicitly forbidden").

Usage:
    from resource_voter.core.errors import AccessDeniedError

    try:
        gateway.authorize(operation, data, context)
    except NoApplicableVoterError:
        ...  # misconfigured voter set
    except AccessDeniedError as e:
        logger.warning("denied", attribute=e.attribute)
"""

from typing import Any

from resource_voter.core.enums import ErrorCode


class ResourceVoterError(Exception):
    """Base class for all raised resource-voter errors.

    Mirrors the DomainError shape (code, message, details) so presentation
    code can render either family the same way.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable message.
        details: Additional context.
    """

    default_code: ErrorCode = ErrorCode.CONFIGURATION_INVALID

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code or self.default_code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"


class ConfigurationError(ResourceVoterError):
    """Invalid authorization wiring detected at startup or first use."""

    default_code = ErrorCode.CONFIGURATION_INVALID


class AccessDeniedError(ResourceVoterError):
    """The decision manager denied an attribute for a resource.

    Attributes:
        attribute: Permission attribute that was denied (e.g. "article:list").
        resource_type: Resource type name the operation targeted.
        operation_kind: Operation kind value (e.g. "list", "update").
    """

    default_code = ErrorCode.PERMISSION_DENIED

    def __init__(
        self,
        *,
        attribute: str,
        resource_type: str,
        operation_kind: str,
        message: str | None = None,
        code: ErrorCode | None = None,
    ) -> None:
        self.attribute = attribute
        self.resource_type = resource_type
        self.operation_kind = operation_kind
        super().__init__(
            message
            or (
                f'Access denied for attribute "{attribute}" on resource '
                f'"{resource_type}" (operation "{operation_kind}").'
            ),
            code=code,
            details={
                "attribute": attribute,
                "resource_type": resource_type,
                "operation_kind": operation_kind,
            },
        )


class NoApplicableVoterError(AccessDeniedError):
    """Strict mode: no voter supports the attribute for this subject."""

    default_code = ErrorCode.NO_APPLICABLE_VOTER

    def __init__(
        self,
        *,
        attribute: str,
        resource_type: str,
        operation_kind: str,
        subject_type: str,
    ) -> None:
        self.subject_type = subject_type
        super().__init__(
            attribute=attribute,
            resource_type=resource_type,
            operation_kind=operation_kind,
            message=(
                f'No voter found to handle attribute "{attribute}" for subject '
                f'of type "{subject_type}". Disable strict_mode to deny silently.'
            ),
        )
        self.details["subject_type"] = subject_type
