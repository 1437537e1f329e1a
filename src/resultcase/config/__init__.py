"""Configuration management using pydantic-settings.

Provides environment-based configuration with type safety and validation.
"""

from .settings import (
    DEFAULT_VALIDATION_MESSAGE,
    LoggingSettings,
    ResultcaseSettings,
    ValidationSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "DEFAULT_VALIDATION_MESSAGE",
    "LoggingSettings",
    "ResultcaseSettings",
    "ValidationSettings",
    "clear_settings_cache",
    "get_settings",
]
