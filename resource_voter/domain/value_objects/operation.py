"""Operation descriptor value object.

Describes the action attempted on a resource for one request. Built by the
host framework (router, view, command handler) and discarded after the check.

Usage:
    >>> op = Operation(kind=OperationKind.READ, resource_type=Article)
    >>> publish = Operation(
    ...     kind=OperationKind.CUSTOM,
    ...     uri_template="/articles/{id}/publish",
    ...     resource_type=Article,
    ... )
"""

from dataclasses import dataclass

from resource_voter.domain.enums import OperationKind


@dataclass(frozen=True, slots=True, kw_only=True)
class Operation:
    """Immutable description of one attempted operation.

    Attributes:
        kind: Category of the action.
        name: Explicit operation name (e.g. "publish" or a framework-generated
            "_api_/articles/{id}{._format}_get"). Optional.
        uri_template: Routing template (e.g. "/articles/{id}/publish"). Optional.
        resource_type: Resource class the operation is bound to. Optional.
    """

    kind: OperationKind
    name: str | None = None
    uri_template: str | None = None
    resource_type: type | None = None

    @property
    def label(self) -> str:
        """Short description used in logs and error payloads."""
        return self.name or self.kind.value
