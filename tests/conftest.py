"""Pytest configuration and shared fixtures.

Fixtures build a small blog domain (Article, Comment, Tag) wired the way a
host application would wire it at startup:

- Article: marked, prefix "article", decided by ArticleVoter
- Comment: marked, decided by the self-configuring CommentVoter
- Tag: not marked (never checked)
"""

from unittest.mock import MagicMock

import pytest

from resource_voter.application.security import VoterRegistry
from resource_voter.domain.resources.markers import (
    ResourceMarkerRegistry,
    ResourceMarkerRegistryBuilder,
)
from tests.utils.voting import Article, Comment, CommentVoter


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: End-to-end tests through the full pipeline"
    )


@pytest.fixture
def mock_logger() -> MagicMock:
    """LoggerProtocol double recording every call."""
    return MagicMock()


@pytest.fixture
def markers() -> ResourceMarkerRegistry:
    """Marker registry: Article ("article") and Comment (default prefix)."""
    builder = ResourceMarkerRegistryBuilder()
    builder.mark(Article, prefix="article")
    builder.mark(Comment)
    return builder.build()


@pytest.fixture
def voter_registry() -> VoterRegistry:
    """Locked registry binding CommentVoter to Comment."""
    registry = VoterRegistry()
    registry.register(CommentVoter, Comment)
    return registry.lock()
