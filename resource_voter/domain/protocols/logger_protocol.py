"""LoggerProtocol - structured logging port for the authorization pipeline.

Events are snake_case names with key-value context, never formatted strings.

Events by level:
    - DEBUG: authorization_skipped, voter_decision
    - INFO: authorization_granted, authorization_decided (grants),
      voter_auto_configured
    - WARNING: authorization_denied, authorization_decided (denials),
      metadata_cache_error,
      metadata_cache_entry_invalid
    - ERROR: decision_sink_error, authorization_configuration_error

Subjects are logged through describe_subject(), never verbatim.

Usage:
    logger: LoggerProtocol = get_logger()
    logger.warning("authorization_denied", attribute="article:update")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger used by the gateway, resolvers, voters and sinks."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failure.

        Args:
            message: Event name.
            error: Exception to flatten into error_type/error_message.
            **context: Structured context fields.
        """
        ...
