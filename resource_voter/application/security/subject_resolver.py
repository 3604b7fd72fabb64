"""Subject resolution strategies.

The subject is what voters inspect. Strategies are tried in descending
priority and the first one that supports the operation builds the subject:

    UpdateSubjectStrategy      (90)   UPDATE/PATCH -> (payload, previous)
    CollectionSubjectStrategy  (80)   LIST -> resource type
    DefaultSubjectStrategy     (-100) anything -> payload

Context keys:
    previous_object: Object state before the update (preferred).
    previous_data:   Fallback for previous_object.
    resource_class:  Resource type of a collection operation.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from resource_voter.domain.enums import OperationKind
from resource_voter.domain.protocols import SubjectResolverStrategyProtocol
from resource_voter.domain.value_objects import Operation, UpdateSubject

PREVIOUS_OBJECT_KEY = "previous_object"
PREVIOUS_DATA_KEY = "previous_data"
RESOURCE_CLASS_KEY = "resource_class"


class UpdateSubjectStrategy:
    """Pairs the incoming payload with the pre-update object."""

    priority = 90

    def supports(self, operation: Operation) -> bool:
        return operation.kind.is_update_style

    def resolve(
        self,
        operation: Operation,
        data: Any,
        context: Mapping[str, Any],
    ) -> UpdateSubject:
        previous = context.get(PREVIOUS_OBJECT_KEY)
        if previous is None:
            previous = context.get(PREVIOUS_DATA_KEY)
        return UpdateSubject(data, previous)


class CollectionSubjectStrategy:
    """Uses the resource type itself as the subject of LIST operations."""

    priority = 80

    def supports(self, operation: Operation) -> bool:
        return operation.kind is OperationKind.LIST

    def resolve(
        self,
        operation: Operation,
        data: Any,
        context: Mapping[str, Any],
    ) -> Any:
        resource_class = context.get(RESOURCE_CLASS_KEY)
        if resource_class is not None:
            return resource_class
        if operation.resource_type is not None:
            return operation.resource_type
        return data


class DefaultSubjectStrategy:
    """Fallback: the payload is the subject."""

    priority = -100

    def supports(self, operation: Operation) -> bool:
        return True

    def resolve(
        self,
        operation: Operation,
        data: Any,
        context: Mapping[str, Any],
    ) -> Any:
        return data


class ChainSubjectResolver:
    """Tries strategies in descending priority.

    Strategies are sorted once at construction. Equal priorities keep their
    registration order. When no strategy supports the operation, the payload
    itself is the subject.

    Usage:
        resolver = ChainSubjectResolver.default()
        subject = resolver.resolve(operation, data, context)
    """

    def __init__(self, strategies: Iterable[SubjectResolverStrategyProtocol]) -> None:
        self._strategies: tuple[SubjectResolverStrategyProtocol, ...] = tuple(
            sorted(strategies, key=lambda s: s.priority, reverse=True)
        )

    @classmethod
    def default(
        cls, *extra: SubjectResolverStrategyProtocol
    ) -> "ChainSubjectResolver":
        """Chain with the built-in strategies plus any extra ones."""
        return cls(
            [
                UpdateSubjectStrategy(),
                CollectionSubjectStrategy(),
                DefaultSubjectStrategy(),
                *extra,
            ]
        )

    @property
    def strategies(self) -> tuple[SubjectResolverStrategyProtocol, ...]:
        """Strategies in the order they are tried."""
        return self._strategies

    def resolve(
        self,
        operation: Operation,
        data: Any,
        context: Mapping[str, Any],
    ) -> Any:
        for strategy in self._strategies:
            if strategy.supports(operation):
                return strategy.resolve(operation, data, context)
        return data
