"""Decision sink writing one structured log entry per decision.

Grants are logged at info, denials at warning, so a deployment running at
WARNING still keeps an audit trail of every denial.
"""

from resource_voter.domain.events import AuthorizationDecided
from resource_voter.domain.protocols import LoggerProtocol


class LoggingDecisionSink:
    """DecisionSinkProtocol implementation backed by LoggerProtocol."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def record(self, event: AuthorizationDecided) -> None:
        context = {
            "event_id": str(event.event_id),
            "occurred_at": event.occurred_at.isoformat(),
            "attribute": event.attribute,
            "subject": event.subject_description,
            "decision": event.decision.value,
            **event.context,
        }
        if event.granted:
            self._logger.info("authorization_decided", **context)
        else:
            self._logger.warning("authorization_decided", **context)
