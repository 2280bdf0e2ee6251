"""Configuration management using pydantic-settings.

Provides environment-based configuration with type safety and validation.
"""

from .settings import (
    LoggingSettings,
    MonadkitSettings,
    RenderSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "LoggingSettings",
    "MonadkitSettings",
    "RenderSettings",
    "clear_settings_cache",
    "get_settings",
]
