"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files and nested configuration.

Example:
    >>> from resultcase.config import get_settings
    >>> settings = get_settings()
    >>> settings.validation.dedupe_messages
    True
    >>> settings.logging.level
    'WARNING'

    # Or with environment variables:
    # RESULTCASE_LOG_LEVEL=DEBUG
    # RESULTCASE_VALIDATION_DEDUPE_MESSAGES=false
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_VALIDATION_MESSAGE = "One or more validation errors occurred."


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RESULTCASE_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "text"] = "text"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class ValidationSettings(BaseSettings):
    """Validation error behavior."""

    model_config = SettingsConfigDict(
        env_prefix="RESULTCASE_VALIDATION_",
        extra="ignore",
    )

    message: Annotated[str, Field(min_length=1)] = Field(
        default=DEFAULT_VALIDATION_MESSAGE,
        description="Summary message carried by every ValidationError",
    )
    dedupe_messages: bool = Field(
        default=True,
        description="Drop repeated messages under the same key when errors merge",
    )


class ResultcaseSettings(BaseSettings):
    """Root settings for resultcase.

    Loads configuration from environment variables with RESULTCASE_ prefix.

    Example environment variables:
        RESULTCASE_DEBUG=true
        RESULTCASE_LOG_LEVEL=DEBUG
        RESULTCASE_LOG_FORMAT=json
        RESULTCASE_VALIDATION_MESSAGE="Invalid request."
    """

    model_config = SettingsConfigDict(
        env_prefix="RESULTCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    # Nested settings (loaded with RESULTCASE_LOG_, RESULTCASE_VALIDATION_)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    validation: ValidationSettings = Field(default_factory=ValidationSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug override."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> ResultcaseSettings:
    """Get the global settings instance (cached).

    Example:
        >>> get_settings().debug
        False
    """
    return ResultcaseSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    The next get_settings() call reloads configuration from the environment.
    """
    get_settings.cache_clear()
