"""Domain enums package.

Usage:
    from resource_voter.domain.enums import Decision, OperationKind
"""

from resource_voter.domain.enums.decision import Decision
from resource_voter.domain.enums.operation_kind import CRUD_TOKENS, OperationKind

__all__ = ["CRUD_TOKENS", "Decision", "OperationKind"]
