"""Decision sink protocol.

Sinks observe every gateway decision (audit trails, metrics, debug panels).
They are purely observational: a sink can never change the outcome, and a
failing sink is logged and ignored.
"""

from typing import Protocol

from resource_voter.domain.events import AuthorizationDecided


class DecisionSinkProtocol(Protocol):
    """Receives one event per authorization check."""

    def record(self, event: AuthorizationDecided) -> None:
        """Record a decision event.

        Args:
            event: Decision made by the gateway.
        """
        ...
