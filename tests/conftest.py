"""Pytest configuration and shared fixtures.

This module provides common fixtures for all tests in the ReadSelf
test suite.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator

    from readself.models import Book, CharacterState, Genre


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from readself.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "READSELF_DEBUG": "true",
        "READSELF_LOG_LEVEL": "DEBUG",
        "READSELF_COMPANION_NEUTRAL_COLOR": "#abcdef",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def seed() -> str:
    """A fixed identity seed."""
    return "abc123"


@pytest.fixture
def base_time() -> datetime:
    """A fixed reference timestamp."""
    return datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def make_book(base_time: datetime) -> Callable[..., Book]:
    """Factory building books one minute apart, oldest first.

    Returns:
        Callable taking a genre and optional overrides.
    """
    from readself.models import Book

    counter = {"n": 0}

    def _make(genre: Genre | str, **overrides: object) -> Book:
        counter["n"] += 1
        fields: dict[str, object] = {
            "id": f"book-{counter['n']}",
            "title": f"Book {counter['n']}",
            "author": "Test Author",
            "genre": genre,
            "date_added": base_time + timedelta(minutes=counter["n"]),
        }
        fields.update(overrides)
        return Book(**fields)

    return _make


@pytest.fixture
def fresh_character() -> CharacterState:
    """A newly initialized character."""
    from readself.engine.character import initialize_character

    return initialize_character()


@pytest.fixture
def character_at_level() -> Callable[[int], CharacterState]:
    """Factory for a character reporting an arbitrary level."""
    from readself.engine.character import initialize_character

    def _make(level: int) -> CharacterState:
        return initialize_character().model_copy(update={"current_level": level})

    return _make
