"""Structured logging for the ReadSelf engine.

Engine modules log through structlog. Call ``configure_logging`` (or
``configure_from_settings``) once at startup; until then structlog's
defaults apply.

Seeds are the only identity a reader has, so every event passes through
``mask_seed``, which shortens a ``seed`` field to a short prefix.

Example:
    >>> from readself.core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Book logged", genre="Fantasy", total_books=4)
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from pathlib import Path

    from structlog.types import EventDict, WrappedLogger


SEED_PREFIX_LENGTH = 6
STDLIB_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def mask_seed(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Replace a full ``seed`` value with its first few characters."""
    seed = event_dict.get("seed")
    if isinstance(seed, str) and len(seed) > SEED_PREFIX_LENGTH:
        event_dict["seed"] = f"{seed[:SEED_PREFIX_LENGTH]}..."
    return event_dict


def _build_processors(json_format: bool) -> list[Processor]:
    processors: list[Processor] = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        mask_seed,
        structlog.processors.StackInfoRenderer(),
    ]
    if json_format:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(sort_keys=True),
        ]
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(exception_formatter=structlog.dev.plain_traceback)
        )
    return processors


def configure_logging(
    *,
    level: str = "INFO",
    json_format: bool = False,
    log_file: str | Path | None = None,
) -> None:
    """Configure engine logging.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: Emit one JSON object per line instead of console output.
        log_file: Also write standard library log records to this file.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    structlog.configure(
        processors=_build_processors(json_format),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(format=STDLIB_FORMAT, level=numeric_level, handlers=handlers, force=True)


def configure_from_settings() -> None:
    """Configure logging from the cached application settings.

    Debug mode forces the DEBUG level regardless of ``log_level``.
    """
    from readself.core.config import get_settings

    settings = get_settings()
    configure_logging(
        level="DEBUG" if settings.debug else settings.log_level,
        json_format=settings.logging.json_format,
        log_file=settings.logging.log_file,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger, typically with ``__name__``."""
    return structlog.get_logger(name)


__all__ = [
    "mask_seed",
    "configure_logging",
    "configure_from_settings",
    "get_logger",
]
