"""Subject resolution protocols."""

from collections.abc import Mapping
from typing import Any, Protocol

from resource_voter.domain.value_objects import Operation


class SubjectResolverStrategyProtocol(Protocol):
    """One subject resolution rule.

    Attributes:
        priority: Higher values are tried first.
    """

    priority: int

    def supports(self, operation: Operation) -> bool:
        """Whether this strategy handles the operation."""
        ...

    def resolve(
        self,
        operation: Operation,
        data: Any,
        context: Mapping[str, Any],
    ) -> Any:
        """Build the subject for the operation."""
        ...


class SubjectResolverProtocol(Protocol):
    """Operation + payload + context -> subject."""

    def resolve(
        self,
        operation: Operation,
        data: Any,
        context: Mapping[str, Any],
    ) -> Any:
        """Build the subject for the operation."""
        ...
