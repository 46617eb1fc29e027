"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        ReadSelfError: Base exception for all library errors.
        EngineError: Engine precondition violations.
        ConfigurationError: Configuration-related errors.
        ValidationError: Data validation errors.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        configure_from_settings: Set up logging from settings.
        get_logger: Get a configured logger instance.
"""

from __future__ import annotations

from readself.core.config import (
    CompanionSettings,
    LoggingSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from readself.core.exceptions import (
    BookNotFoundError,
    ConfigurationError,
    EngineError,
    InvalidSeedError,
    InvalidSessionError,
    ReadSelfError,
    UnknownAttributeError,
    UnknownGenreError,
    ValidationError,
)
from readself.core.logging import (
    configure_from_settings,
    configure_logging,
    get_logger,
    mask_seed,
)


__all__ = [
    # Base exception
    "ReadSelfError",
    # Engine exceptions
    "EngineError",
    "InvalidSeedError",
    "UnknownGenreError",
    "UnknownAttributeError",
    "BookNotFoundError",
    "InvalidSessionError",
    # Configuration exceptions
    "ConfigurationError",
    "ValidationError",
    # Configuration
    "Settings",
    "LoggingSettings",
    "CompanionSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "mask_seed",
]
