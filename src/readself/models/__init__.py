"""Pydantic V2 schemas for ReadSelf.

Submodules:
    enums: Genre, AttributeKind, EquipmentSlot, PetStage, Aura.
    reading: Attributes, character state, books, sessions, journal entries.
    avatar: Seed geometry, humanoid traits and equipment layers.
    pet: Pet traits and the pet companion.

Example:
    >>> from readself.models import Book, Genre
    >>> book = Book(title="The Hobbit", author="J.R.R. Tolkien", genre=Genre.FANTASY)
"""

from __future__ import annotations

from readself.models.avatar import (
    AvatarCharacterTraits,
    BaseTraits,
    CharacterLayers,
    EquipmentLayer,
    GenreCount,
    GenreVisual,
)
from readself.models.enums import AttributeKind, Aura, EquipmentSlot, Genre, PetStage
from readself.models.pet import Pet, PetTraits
from readself.models.reading import (
    ATTRIBUTE_MAX_VALUE,
    DEFAULT_BASE_COLOR,
    Attribute,
    Book,
    BookResult,
    CharacterState,
    JournalEntry,
    ReadingSession,
    VisualTraits,
    attribute_level,
    character_level,
)


__all__ = [
    # Enumerations
    "Genre",
    "AttributeKind",
    "EquipmentSlot",
    "PetStage",
    "Aura",
    # Reading
    "ATTRIBUTE_MAX_VALUE",
    "DEFAULT_BASE_COLOR",
    "Attribute",
    "VisualTraits",
    "CharacterState",
    "Book",
    "BookResult",
    "ReadingSession",
    "JournalEntry",
    "attribute_level",
    "character_level",
    # Avatar
    "BaseTraits",
    "AvatarCharacterTraits",
    "GenreVisual",
    "GenreCount",
    "EquipmentLayer",
    "CharacterLayers",
    # Pet
    "PetTraits",
    "Pet",
]
