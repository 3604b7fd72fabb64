"""Authorization decision events.

Emitted by AuthorizationGateway after every check that reached the decision
manager. Consumed by DecisionSinkProtocol implementations (audit, metrics,
debug). Events never carry the subject itself, only a short description.
"""

from dataclasses import dataclass, field
from typing import Any

from resource_voter.domain.enums import Decision
from resource_voter.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class AuthorizationDecided(DomainEvent):
    """The gateway decided one permission attribute.

    Attributes:
        attribute: Permission attribute checked (e.g. "article:update").
        subject_description: Log-safe subject summary (type name, target voter).
        decision: GRANT or DENY.
        context: Operation kind, resource type and URI variables.
    """

    attribute: str
    subject_description: str
    decision: Decision
    context: dict[str, Any] = field(default_factory=dict)

    @property
    def granted(self) -> bool:
        """True when the decision is GRANT."""
        return self.decision is Decision.GRANT
