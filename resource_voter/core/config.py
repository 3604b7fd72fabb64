"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Every variable is prefixed with ``RESOURCE_VOTER_``.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Every field has a safe default, so the package works unconfigured

Usage:
    from resource_voter.core.config import settings

    if settings.enabled and settings.strict_mode:
        ...

    # Environment detection
    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from resource_voter.core.enums import CacheBackend, Environment, NamingConvention

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Authorization layer settings (flat structure).

    Loads configuration from environment variables prefixed with
    ``RESOURCE_VOTER_`` (e.g. ``RESOURCE_VOTER_STRICT_MODE=true``).

    Returns:
        Settings: Configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Enforcement switches
    enabled: bool = Field(
        default=True,
        description="Enable/disable voter-based authorization globally",
    )
    enforce_collection_list: bool = Field(
        default=True,
        description="Enforce authorization checks for collection list operations",
    )
    strict_mode: bool = Field(
        default=False,
        description="Raise NoApplicableVoterError if no voter supports the attribute "
        "(instead of a plain access denial)",
    )
    debug: bool = Field(
        default=False,
        description="Log skipped checks and every decision at debug level",
    )

    # Metadata cache
    cache_backend: CacheBackend = Field(
        default=CacheBackend.MEMORY,
        description="Metadata cache backend (memory, redis, none)",
    )
    cache_ttl: int = Field(
        default=3600,
        ge=0,
        description="Cache TTL in seconds for metadata resolution (0 to disable)",
    )
    redis_url: str | None = Field(
        default=None,
        description="Redis connection URL (e.g., redis://host:port/db), required "
        "when cache_backend is redis",
    )

    # Operation naming
    internal_operation_prefixes: list[str] = Field(
        default_factory=lambda: ["_api_"],
        description="Operation names starting with these prefixes are framework-"
        "generated and never used as permission tokens",
    )
    operation_naming: NamingConvention = Field(
        default=NamingConvention.PRESERVE,
        description="Naming convention for custom operation tokens",
    )
    normalize_operation_names: bool = Field(
        default=False,
        description="Lowercase custom operation tokens before applying the convention",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON (CI/production) instead of console output",
    )

    # HTTP integration
    problem_base_url: str = Field(
        default="https://resource-voter.local",
        description="Base URL for RFC 9457 problem 'type' URIs",
    )

    model_config = SettingsConfigDict(
        env_prefix="RESOURCE_VOTER_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate and normalize the log level name.

        Args:
            v: Log level name.

        Returns:
            str: Upper-cased log level.

        Raises:
            ValueError: If the level is not a standard level name.
        """
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @field_validator("problem_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Strip trailing slash from base URL."""
        return v.rstrip("/")

    @model_validator(mode="after")
    def validate_cache_backend(self) -> "Settings":
        """
        Require a Redis URL when the Redis backend is selected.

        Returns:
            Settings: Validated settings.

        Raises:
            ValueError: If cache_backend is redis and redis_url is missing.
        """
        if self.cache_backend == CacheBackend.REDIS and not self.redis_url:
            raise ValueError("redis_url is required when cache_backend is 'redis'")
        return self

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is development.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is testing.
        """
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is production.
        """
        return self.environment == Environment.PRODUCTION

    @property
    def memoization_enabled(self) -> bool:
        """Whether metadata resolution should use a cache at all."""
        return self.cache_backend != CacheBackend.NONE and self.cache_ttl > 0


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
