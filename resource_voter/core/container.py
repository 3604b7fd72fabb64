"""Composition root - builds the authorization pipeline from settings.

App-scoped singletons (settings, logger, metadata cache) use @lru_cache.
Pipeline builders are plain functions: the host calls them once at startup
with its own marker registry, decision manager and voters.

Usage:
    from resource_voter.core.container import build_gateway

    markers = builder.build()
    registry.lock()
    gateway = build_gateway(markers, decision_manager, voters=voters)

    # FastAPI
    from fastapi import Depends
    logger: LoggerProtocol = Depends(get_logger)
"""

from collections.abc import Sequence
from functools import lru_cache
from typing import TYPE_CHECKING

from resource_voter.core.config import Settings, get_settings
from resource_voter.core.enums import CacheBackend, Environment

if TYPE_CHECKING:
    from resource_voter.application.security import (
        AuthorizationGateway,
        ChainSubjectResolver,
        OperationAttributeMapper,
        ResourceAccessMetadataResolver,
    )
    from resource_voter.domain.protocols import (
        DataProcessorProtocol,
        DataProviderProtocol,
        DecisionManagerProtocol,
        DecisionSinkProtocol,
        LoggerProtocol,
        MetadataCacheProtocol,
        SubjectResolverStrategyProtocol,
        VoterProtocol,
    )
    from resource_voter.domain.resources.markers import ResourceMarkerRegistry

__all__ = [
    "build_attribute_mapper",
    "build_gateway",
    "build_metadata_resolver",
    "build_subject_resolver",
    "get_logger",
    "get_metadata_cache",
    "get_settings",
]


@lru_cache
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection:
    - development: ConsoleAdapter (human-readable) unless log_json is set
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from resource_voter.infrastructure.logging import ConsoleAdapter

    settings = get_settings()
    use_json = settings.log_json or settings.environment != Environment.DEVELOPMENT
    level = "DEBUG" if settings.debug else settings.log_level
    return ConsoleAdapter(use_json=use_json, level=level)


@lru_cache
def get_metadata_cache() -> "MetadataCacheProtocol | None":
    """Return the metadata cache singleton, or None when memoization is off.

    Returns:
        MetadataCacheProtocol | None: InMemoryMetadataCache, RedisMetadataCache,
        or None (cache_backend "none" or cache_ttl 0).
    """
    settings = get_settings()
    if not settings.memoization_enabled:
        return None

    if settings.cache_backend == CacheBackend.REDIS:
        from resource_voter.infrastructure.cache import RedisMetadataCache

        assert settings.redis_url is not None
        return RedisMetadataCache.from_url(settings.redis_url)

    from resource_voter.infrastructure.cache import InMemoryMetadataCache

    return InMemoryMetadataCache()


def build_attribute_mapper(
    settings: Settings | None = None,
) -> "OperationAttributeMapper":
    """Attribute mapper configured from settings."""
    from resource_voter.application.security import OperationAttributeMapper

    settings = settings or get_settings()
    return OperationAttributeMapper(
        enforce_collection_list=settings.enforce_collection_list,
        internal_prefixes=settings.internal_operation_prefixes,
        naming=settings.operation_naming,
        normalize_names=settings.normalize_operation_names,
    )


def build_subject_resolver(
    *extra: "SubjectResolverStrategyProtocol",
) -> "ChainSubjectResolver":
    """Subject resolver with the built-in strategies plus extra ones."""
    from resource_voter.application.security import ChainSubjectResolver

    return ChainSubjectResolver.default(*extra)


def build_metadata_resolver(
    markers: "ResourceMarkerRegistry",
    *,
    settings: Settings | None = None,
    cache: "MetadataCacheProtocol | None" = None,
    logger: "LoggerProtocol | None" = None,
) -> "ResourceAccessMetadataResolver":
    """Metadata resolver memoized according to settings.

    Args:
        markers: Frozen resource marker registry.
        settings: Settings override (defaults to get_settings()).
        cache: Cache override (defaults to get_metadata_cache() when
            memoization is enabled).
        logger: Logger override.
    """
    from resource_voter.application.security import ResourceAccessMetadataResolver

    settings = settings or get_settings()
    if cache is None and settings.memoization_enabled:
        cache = get_metadata_cache()

    return ResourceAccessMetadataResolver(
        markers,
        cache=cache if settings.memoization_enabled else None,
        ttl=settings.cache_ttl,
        logger=logger or get_logger(),
    )


def build_gateway(
    markers: "ResourceMarkerRegistry",
    decision_manager: "DecisionManagerProtocol",
    *,
    voters: "Sequence[VoterProtocol]" = (),
    sinks: "Sequence[DecisionSinkProtocol] | None" = None,
    provider: "DataProviderProtocol | None" = None,
    processor: "DataProcessorProtocol | None" = None,
    settings: Settings | None = None,
    cache: "MetadataCacheProtocol | None" = None,
    logger: "LoggerProtocol | None" = None,
) -> "AuthorizationGateway":
    """Wire the full authorization pipeline.

    Args:
        markers: Frozen resource marker registry.
        decision_manager: Host decision manager polling the voters.
        voters: Voters known to the decision manager. Required when
            settings.strict_mode is on.
        sinks: Decision sinks. Defaults to a LoggingDecisionSink when
            settings.debug is on, none otherwise.
        provider: Read-path data provider.
        processor: Write-path data processor.
        settings: Settings override.
        cache: Metadata cache override.
        logger: Logger override.

    Returns:
        AuthorizationGateway: Ready-to-use gateway.
    """
    from resource_voter.application.security import AuthorizationGateway
    from resource_voter.infrastructure.audit import LoggingDecisionSink

    settings = settings or get_settings()
    logger = logger or get_logger()
    if sinks is None:
        sinks = (LoggingDecisionSink(logger),) if settings.debug else ()

    return AuthorizationGateway(
        mapper=build_attribute_mapper(settings),
        metadata_resolver=build_metadata_resolver(
            markers, settings=settings, cache=cache, logger=logger
        ),
        subject_resolver=build_subject_resolver(),
        decision_manager=decision_manager,
        logger=logger,
        enabled=settings.enabled,
        strict_mode=settings.strict_mode,
        voters=voters,
        sinks=sinks,
        provider=provider,
        processor=processor,
    )
