"""Configuration management for ReadSelf.

Centralised configuration using pydantic-settings, supporting
environment variables, .env files, and runtime overrides.

Example:
    >>> from readself.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.app_name)
    'ReadSelf'

Environment Variables:
    READSELF_DEBUG: Enable debug mode
    READSELF_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    READSELF_LOG_JSON_FORMAT: Emit JSON log lines
    READSELF_LOG_LOG_FILE: Optional log file path
    READSELF_COMPANION_NEUTRAL_COLOR: Avatar color for an empty library
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from readself.core.exceptions import ConfigurationError


HEX_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")


class LoggingSettings(BaseSettings):
    """Configuration for log output.

    Attributes:
        json_format: Emit JSON log lines instead of console output.
        log_file: Optional path to an additional log file.
    """

    model_config = SettingsConfigDict(
        env_prefix="READSELF_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    json_format: bool = Field(
        default=False,
        description="Emit JSON log lines",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file path",
    )


class CompanionSettings(BaseSettings):
    """Configuration for avatar presentation defaults.

    Attributes:
        neutral_color: Dominant avatar color shown for an empty library.
    """

    model_config = SettingsConfigDict(
        env_prefix="READSELF_COMPANION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    neutral_color: str = Field(
        default="#D4D0C8",
        description="Avatar color for an empty library",
    )

    @field_validator("neutral_color", mode="after")
    @classmethod
    def validate_hex_color(cls, value: str) -> str:
        """Ensure the neutral color is a #RRGGBB hex string.

        Raises:
            ConfigurationError: If the value is not a hex color.
        """
        if not HEX_COLOR_PATTERN.match(value):
            raise ConfigurationError(
                f"neutral_color must be a #RRGGBB hex color, got {value!r}",
                config_key="neutral_color",
            )
        return value.upper()


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        logging: Log output settings.
        companion: Avatar and pet presentation settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="READSELF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="ReadSelf",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    companion: CompanionSettings = Field(default_factory=CompanionSettings)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access.

    Example:
        >>> clear_settings_cache()
        >>> settings = get_settings()  # Reloads from environment
    """
    get_settings.cache_clear()


__all__ = [
    "LoggingSettings",
    "CompanionSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
