"""Foundation layer: configuration shared by every container module."""

from .config import MonadkitSettings, clear_settings_cache, get_settings

__all__ = ["MonadkitSettings", "clear_settings_cache", "get_settings"]
