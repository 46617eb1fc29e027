"""Enumeration types for ReadSelf.

Genres, attribute kinds, equipment slots, pet stages and auras. The
string values are the exact display and persistence values.
"""

from __future__ import annotations

from enum import StrEnum


class Genre(StrEnum):
    """The closed set of book genres, including the ``Other`` fallback."""

    FICTION = "Fiction"
    NON_FICTION = "Non-Fiction"
    MYSTERY = "Mystery"
    SCIENCE_FICTION = "Science Fiction"
    FANTASY = "Fantasy"
    BIOGRAPHY = "Biography"
    HISTORY = "History"
    SELF_HELP = "Self-Help"
    PHILOSOPHY = "Philosophy"
    POETRY = "Poetry"
    ROMANCE = "Romance"
    THRILLER = "Thriller"
    OTHER = "Other"


class AttributeKind(StrEnum):
    """The seven character attributes developed by reading.

    Member order is the canonical iteration order used for tie-breaks.
    """

    WISDOM = "wisdom"
    CURIOSITY = "curiosity"
    EMPATHY = "empathy"
    IMAGINATION = "imagination"
    FOCUS = "focus"
    CREATIVITY = "creativity"
    RESILIENCE = "resilience"

    @property
    def display_name(self) -> str:
        """Get the capitalised attribute name.

        Returns:
            Display name (e.g., 'Wisdom').
        """
        return self.value.capitalize()


class EquipmentSlot(StrEnum):
    """Avatar equipment slots a genre can occupy."""

    HAT = "hat"
    CLOAK = "cloak"
    HELD = "held"
    COMPANION = "companion"
    AURA = "aura"
    FACE = "face"


class PetStage(StrEnum):
    """Pet life-cycle stages."""

    EGG = "egg"
    HATCHLING = "hatchling"
    ADULT = "adult"


class Aura(StrEnum):
    """Character aura, escalating with character level."""

    NONE = "none"
    SOFT_GLOW = "soft-glow"
    RADIANT = "radiant"
    ETHEREAL = "ethereal"


__all__ = [
    "Genre",
    "AttributeKind",
    "EquipmentSlot",
    "PetStage",
    "Aura",
]
