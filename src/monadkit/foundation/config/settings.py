"""Environment-based configuration using pydantic-settings.

Settings only shape diagnostics (log output, rendered error payloads).
Container semantics never depend on configuration.

Example:
    >>> from monadkit.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.render.max_length
    200
    >>> settings.logging.level
    'WARNING'

    # Or with environment variables:
    # MONADKIT_LOG_LEVEL=DEBUG
    # MONADKIT_RENDER_MAX_LENGTH=80
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveInt, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="MONADKIT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: str = "%(levelname)s %(name)s: %(message)s"
    capture_attempts: bool = Field(default=True, description="Log exceptions captured by attempt() at DEBUG")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v


class RenderSettings(BaseSettings):
    """How Err payloads are rendered inside unwrap failure messages."""

    model_config = SettingsConfigDict(
        env_prefix="MONADKIT_RENDER_",
        extra="ignore",
    )

    max_length: PositiveInt = Field(default=200, description="Truncate rendered payloads beyond this length")
    fallback: str = Field(default="Err", description="Marker used when a payload has no text form")


class MonadkitSettings(BaseSettings):
    """Root settings for monadkit.

    Loads configuration from environment variables with MONADKIT_ prefix.
    Supports nested configuration and .env files.

    Example environment variables:
        MONADKIT_DEBUG=true
        MONADKIT_LOG_LEVEL=DEBUG
        MONADKIT_LOG_CAPTURE_ATTEMPTS=false
        MONADKIT_RENDER_MAX_LENGTH=80
    """

    model_config = SettingsConfigDict(
        env_prefix="MONADKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    # Nested settings (loaded with MONADKIT_LOG_, MONADKIT_RENDER_)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    render: RenderSettings = Field(default_factory=RenderSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise the configured level."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> MonadkitSettings:
    """Get the global settings instance (cached).

    Example:
        >>> settings = get_settings()
        >>> settings.debug
        False
    """
    return MonadkitSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
