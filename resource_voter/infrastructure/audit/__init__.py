"""Decision sinks."""

from resource_voter.infrastructure.audit.logging_decision_sink import (
    LoggingDecisionSink,
)

__all__ = ["LoggingDecisionSink"]
