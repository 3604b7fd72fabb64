"""Unit tests for subject resolution strategies.

Tests cover:
- Update strategy: (payload, previous) pairs and context key fallback
- Collection strategy: resource type as subject
- Default strategy and chain ordering (priority, stable ties)
"""

from typing import Any

import pytest

from resource_voter.application.security import (
    ChainSubjectResolver,
    CollectionSubjectStrategy,
    DefaultSubjectStrategy,
    UpdateSubjectStrategy,
)
from resource_voter.domain.enums import OperationKind
from resource_voter.domain.value_objects import Operation, UpdateSubject
from tests.utils.voting import Article


class _FixedStrategy:
    """Strategy returning a constant, for ordering tests."""

    def __init__(self, priority: int, result: Any) -> None:
        self.priority = priority
        self.result = result

    def supports(self, operation: Operation) -> bool:
        return True

    def resolve(self, operation, data, context) -> Any:
        return self.result


@pytest.fixture
def resolver() -> ChainSubjectResolver:
    return ChainSubjectResolver.default()


@pytest.mark.unit
class TestUpdateSubject:
    """Test update-style operations."""

    @pytest.mark.parametrize("kind", [OperationKind.UPDATE, OperationKind.PATCH])
    def test_pairs_with_previous_object(self, resolver, kind: OperationKind):
        payload = Article(id=5, author_id=9)
        previous = Article(id=5, author_id=7)

        subject = resolver.resolve(
            Operation(kind=kind), payload, {"previous_object": previous}
        )

        assert subject == UpdateSubject(payload, previous)

    def test_falls_back_to_previous_data(self, resolver):
        payload = Article(id=5, author_id=9)
        previous = Article(id=5, author_id=7)

        subject = resolver.resolve(
            Operation(kind=OperationKind.UPDATE),
            payload,
            {"previous_object": None, "previous_data": previous},
        )

        assert subject == UpdateSubject(payload, previous)

    def test_without_previous(self, resolver):
        """Test an update with empty context resolves to (payload, None)."""
        payload = Article(id=5, author_id=9)

        subject = resolver.resolve(Operation(kind=OperationKind.UPDATE), payload, {})

        assert subject == (payload, None)


@pytest.mark.unit
class TestCollectionSubject:
    """Test LIST operations."""

    def test_context_resource_class_first(self, resolver):
        subject = resolver.resolve(
            Operation(kind=OperationKind.LIST, resource_type=object),
            [],
            {"resource_class": Article},
        )

        assert subject is Article

    def test_operation_resource_type(self, resolver):
        subject = resolver.resolve(
            Operation(kind=OperationKind.LIST, resource_type=Article), [], {}
        )

        assert subject is Article

    def test_falls_back_to_data(self, resolver):
        data = [Article(id=1, author_id=1)]

        assert resolver.resolve(Operation(kind=OperationKind.LIST), data, {}) is data


@pytest.mark.unit
class TestDefaultSubject:
    """Test the fallback strategy."""

    @pytest.mark.parametrize(
        "kind", [OperationKind.READ, OperationKind.DELETE, OperationKind.CUSTOM]
    )
    def test_payload_is_subject(self, resolver, kind: OperationKind):
        article = Article(id=1, author_id=1)

        assert resolver.resolve(Operation(kind=kind), article, {}) is article


@pytest.mark.unit
class TestChainOrdering:
    """Test strategy ordering."""

    def test_sorted_by_descending_priority(self):
        chain = ChainSubjectResolver(
            [DefaultSubjectStrategy(), UpdateSubjectStrategy(), CollectionSubjectStrategy()]
        )

        assert [s.priority for s in chain.strategies] == [90, 80, -100]

    def test_equal_priorities_keep_registration_order(self):
        chain = ChainSubjectResolver(
            [_FixedStrategy(10, "first"), _FixedStrategy(10, "second")]
        )

        assert chain.resolve(Operation(kind=OperationKind.READ), None, {}) == "first"

    def test_extra_strategy_outranks_builtins(self):
        chain = ChainSubjectResolver.default(_FixedStrategy(100, "custom"))

        assert chain.resolve(Operation(kind=OperationKind.UPDATE), None, {}) == "custom"

    def test_no_strategy_returns_data(self):
        chain = ChainSubjectResolver([])

        assert chain.resolve(Operation(kind=OperationKind.READ), "payload", {}) == (
            "payload"
        )
