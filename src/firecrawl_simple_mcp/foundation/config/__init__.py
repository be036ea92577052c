"""Configuration management using pydantic-settings.

Provides environment-based configuration with type safety and validation.
"""

from .settings import (
    DEFAULT_API_URL,
    ApiSettings,
    ServerSettings,
    Settings,
    clear_settings_cache,
    get_settings,
    load_settings,
)

__all__ = [
    "DEFAULT_API_URL",
    "ApiSettings",
    "ServerSettings",
    "Settings",
    "clear_settings_cache",
    "get_settings",
    "load_settings",
]
