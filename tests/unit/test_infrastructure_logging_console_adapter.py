"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods
- Exception flattening on error
- Level filtering configuration

Architecture:
- Unit tests with mocked structlog
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from resource_voter.infrastructure.logging import ConsoleAdapter

STRUCTLOG = "resource_voter.infrastructure.logging.console_adapter.structlog"


@pytest.fixture
def structlog_logger():
    """Patch structlog and return the logger ConsoleAdapter writes to."""
    with patch(STRUCTLOG) as mock_structlog:
        logger = MagicMock()
        mock_structlog.get_logger.return_value.bind.return_value = logger
        yield mock_structlog, logger


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_logs_message_with_context(self, structlog_logger, level: str):
        _, logger = structlog_logger
        adapter = ConsoleAdapter()

        getattr(adapter, level)("authorization_granted", attribute="article:read")

        getattr(logger, level).assert_called_once_with(
            "authorization_granted", attribute="article:read"
        )

    def test_flattens_exception(self, structlog_logger):
        _, logger = structlog_logger
        adapter = ConsoleAdapter()

        adapter.error("decision_sink_error", error=RuntimeError("boom"), sink="S")

        logger.error.assert_called_once_with(
            "decision_sink_error",
            sink="S",
            error_type="RuntimeError",
            error_message="boom",
        )

    def test_error_without_exception(self, structlog_logger):
        _, logger = structlog_logger

        ConsoleAdapter().error("failed", code="x")

        logger.error.assert_called_once_with("failed", code="x")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test structlog configuration."""

    def test_binds_logger_name(self, structlog_logger):
        mock_structlog, _ = structlog_logger

        ConsoleAdapter(logger_name="blog")

        mock_structlog.get_logger.return_value.bind.assert_called_once_with(
            logger="blog"
        )

    def test_level_filter(self, structlog_logger):
        mock_structlog, _ = structlog_logger

        ConsoleAdapter(level="warning")

        mock_structlog.make_filtering_bound_logger.assert_called_once_with(
            logging.WARNING
        )

    def test_json_renderer(self, structlog_logger):
        mock_structlog, _ = structlog_logger

        ConsoleAdapter(use_json=True)

        mock_structlog.processors.JSONRenderer.assert_called_once()
        mock_structlog.dev.ConsoleRenderer.assert_not_called()
