"""Unit tests for ResourceAccessMetadataResolver.

Tests cover:
- Marker lookup (protected/unprotected, prefix default, voter binding)
- Memoization: one marker lookup per type with a cache
- No cache / TTL 0: lookup on every call
- Cache failures treated as misses (Failure, raised errors, bad payloads)
- Invalidation
"""

from unittest.mock import MagicMock

import pytest

from resource_voter.application.security import (
    CACHE_KEY_PREFIX,
    ResourceAccessMetadataResolver,
    metadata_cache_key,
)
from resource_voter.core.enums import ErrorCode
from resource_voter.core.result import Failure, Success
from resource_voter.domain.resources.markers import (
    ResourceMarkerRegistry,
    ResourceMarkerRegistryBuilder,
)
from resource_voter.domain.value_objects import ResourceAccessMetadata, voter_identity
from resource_voter.infrastructure.cache import InMemoryMetadataCache
from resource_voter.infrastructure.errors import CacheError
from tests.utils.voting import Article, ArticleVoter, Comment, Tag


@pytest.fixture
def spy_markers(markers) -> ResourceMarkerRegistry:
    """Marker registry whose lookup() is a spy counting calls."""
    markers.lookup = MagicMock(wraps=markers.lookup)
    return markers


def _cache_error() -> CacheError:
    return CacheError(code=ErrorCode.CACHE_UNAVAILABLE, message="down")


# =============================================================================
# Resolution
# =============================================================================


@pytest.mark.unit
class TestResolve:
    """Test metadata derived from markers."""

    def test_marked_type_with_prefix(self, markers, mock_logger):
        resolver = ResourceAccessMetadataResolver(markers, logger=mock_logger)

        assert resolver.resolve(Article) == ResourceAccessMetadata(
            protected=True, prefix="article"
        )

    def test_prefix_defaults_to_lowercase_name(self, markers, mock_logger):
        resolver = ResourceAccessMetadataResolver(markers, logger=mock_logger)

        assert resolver.resolve(Comment).prefix == "comment"

    def test_unmarked_type_unprotected(self, markers, mock_logger):
        resolver = ResourceAccessMetadataResolver(markers, logger=mock_logger)

        assert resolver.resolve(Tag) == ResourceAccessMetadata.unprotected()

    def test_bound_voter_carried(self, mock_logger):
        builder = ResourceMarkerRegistryBuilder()
        builder.mark(Article, voter=ArticleVoter)
        resolver = ResourceAccessMetadataResolver(builder.build(), logger=mock_logger)

        assert resolver.resolve(Article).voter == voter_identity(ArticleVoter)


# =============================================================================
# Memoization
# =============================================================================


@pytest.mark.unit
class TestMemoization:
    """Test cache behavior."""

    def test_cache_key_shape(self):
        key = metadata_cache_key(Article)

        assert key.startswith(CACHE_KEY_PREFIX)
        assert len(key) == len(CACHE_KEY_PREFIX) + 64
        assert key != metadata_cache_key(Comment)
        assert key != metadata_cache_key(Article, "other-markers")

    def test_marker_tables_do_not_share_entries(self, markers, mock_logger):
        cache = InMemoryMetadataCache()
        builder = ResourceMarkerRegistryBuilder()
        builder.mark(Article, prefix="post")
        first = ResourceAccessMetadataResolver(
            markers, cache=cache, ttl=60, logger=mock_logger
        )
        second = ResourceAccessMetadataResolver(
            builder.build(), cache=cache, ttl=60, logger=mock_logger
        )

        assert first.resolve(Article).prefix == "article"
        assert second.resolve(Article).prefix == "post"
        assert len(cache) == 2

    def test_second_resolve_hits_cache(self, spy_markers, mock_logger):
        """Test the marker registry is consulted once per type."""
        resolver = ResourceAccessMetadataResolver(
            spy_markers, cache=InMemoryMetadataCache(), ttl=60, logger=mock_logger
        )

        first = resolver.resolve(Article)
        second = resolver.resolve(Article)

        assert first == second
        assert spy_markers.lookup.call_count == 1

    def test_unprotected_result_cached(self, spy_markers, mock_logger):
        resolver = ResourceAccessMetadataResolver(
            spy_markers, cache=InMemoryMetadataCache(), ttl=60, logger=mock_logger
        )

        resolver.resolve(Tag)
        resolver.resolve(Tag)

        assert spy_markers.lookup.call_count == 1

    def test_without_cache_looks_up_every_time(self, spy_markers, mock_logger):
        resolver = ResourceAccessMetadataResolver(spy_markers, logger=mock_logger)

        resolver.resolve(Article)
        resolver.resolve(Article)

        assert spy_markers.lookup.call_count == 2

    def test_zero_ttl_disables_cache(self, spy_markers, mock_logger):
        cache = MagicMock()
        resolver = ResourceAccessMetadataResolver(
            spy_markers, cache=cache, ttl=0, logger=mock_logger
        )

        resolver.resolve(Article)
        resolver.resolve(Article)

        assert spy_markers.lookup.call_count == 2
        cache.get.assert_not_called()
        cache.set.assert_not_called()

    def test_stores_with_ttl(self, markers, mock_logger):
        cache = MagicMock()
        cache.get.return_value = Success(value=None)
        cache.set.return_value = Success(value=None)
        resolver = ResourceAccessMetadataResolver(
            markers, cache=cache, ttl=120, logger=mock_logger
        )

        resolver.resolve(Article)

        cache.set.assert_called_once_with(
            metadata_cache_key(Article, markers.fingerprint),
            {"protected": True, "prefix": "article", "voter": None},
            ttl=120,
        )


# =============================================================================
# Cache failures
# =============================================================================


@pytest.mark.unit
class TestCacheFailures:
    """Test fail-open behavior."""

    def test_get_failure_is_miss(self, spy_markers, mock_logger):
        cache = MagicMock()
        cache.get.return_value = Failure(error=_cache_error())
        cache.set.return_value = Success(value=None)
        resolver = ResourceAccessMetadataResolver(
            spy_markers, cache=cache, ttl=60, logger=mock_logger
        )

        metadata = resolver.resolve(Article)

        assert metadata.prefix == "article"
        assert spy_markers.lookup.call_count == 1
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.args[0] == "metadata_cache_error"

    def test_raised_error_is_miss(self, markers, mock_logger):
        cache = MagicMock()
        cache.get.side_effect = ConnectionError("refused")
        cache.set.side_effect = ConnectionError("refused")
        resolver = ResourceAccessMetadataResolver(
            markers, cache=cache, ttl=60, logger=mock_logger
        )

        assert resolver.resolve(Article).protected is True
        assert mock_logger.warning.call_count == 2

    def test_set_failure_logged(self, markers, mock_logger):
        cache = MagicMock()
        cache.get.return_value = Success(value=None)
        cache.set.return_value = Failure(error=_cache_error())
        resolver = ResourceAccessMetadataResolver(
            markers, cache=cache, ttl=60, logger=mock_logger
        )

        assert resolver.resolve(Article).protected is True
        assert mock_logger.warning.call_args.kwargs["action"] == "set"

    def test_malformed_payload_is_miss(self, spy_markers, mock_logger):
        cache = MagicMock()
        cache.get.return_value = Success(value={"prefix": "article"})
        cache.set.return_value = Success(value=None)
        resolver = ResourceAccessMetadataResolver(
            spy_markers, cache=cache, ttl=60, logger=mock_logger
        )

        assert resolver.resolve(Article).protected is True
        assert spy_markers.lookup.call_count == 1
        assert mock_logger.warning.call_args.args[0] == "metadata_cache_entry_invalid"


@pytest.mark.unit
class TestInvalidate:
    """Test invalidate()."""

    def test_invalidate_forces_lookup(self, spy_markers, mock_logger):
        resolver = ResourceAccessMetadataResolver(
            spy_markers, cache=InMemoryMetadataCache(), ttl=60, logger=mock_logger
        )
        resolver.resolve(Article)

        assert resolver.invalidate(Article) is True
        resolver.resolve(Article)

        assert spy_markers.lookup.call_count == 2

    def test_invalidate_without_cache(self, markers, mock_logger):
        resolver = ResourceAccessMetadataResolver(markers, logger=mock_logger)

        assert resolver.invalidate(Article) is False
