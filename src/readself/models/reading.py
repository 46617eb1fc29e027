"""Reading-domain models: attributes, character state, books and sessions.

All models are frozen. Engine operations never mutate a model in place;
they build a replacement with ``model_copy(update=...)``.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated
from uuid import uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
    model_validator,
)

from readself.core.exceptions import UnknownAttributeError
from readself.models.enums import AttributeKind, Aura, Genre


# =============================================================================
# Constants and Type Definitions
# =============================================================================

ATTRIBUTE_MAX_VALUE = 100
ATTRIBUTE_LEVEL_STEP = 20
CHARACTER_LEVEL_STEP = 100
DEFAULT_BASE_COLOR = "#FFDAB9"

AttributePoints = Annotated[int, Field(ge=0, le=ATTRIBUTE_MAX_VALUE)]


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _new_id() -> str:
    return str(uuid4())


def _assume_utc(value: datetime) -> datetime:
    # Naive timestamps from storage are read as UTC
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def attribute_level(value: int) -> int:
    """Calculate the level of a single attribute.

    Example:
        >>> attribute_level(0)
        1
        >>> attribute_level(45)
        3
    """
    return value // ATTRIBUTE_LEVEL_STEP + 1


def character_level(total_points: int) -> int:
    """Calculate the overall character level from summed attribute values.

    Example:
        >>> character_level(92)
        1
        >>> character_level(115)
        2
    """
    return total_points // CHARACTER_LEVEL_STEP + 1


# =============================================================================
# Attributes
# =============================================================================


class Attribute(BaseModel):
    """A single attribute's accumulated points.

    Attributes:
        kind: Which of the seven attributes this is.
        value: Accumulated points, clamped to ``max_value``.
        max_value: Upper bound for ``value``.
        color: Presentation color.
        icon: Presentation icon.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    kind: AttributeKind
    value: AttributePoints = 0
    max_value: int = Field(default=ATTRIBUTE_MAX_VALUE, ge=1)
    color: str = "#B5B5B8"
    icon: str = ""

    @computed_field(description="floor(value / 20) + 1")
    @property
    def level(self) -> int:
        """Level of this attribute."""
        return attribute_level(self.value)

    @model_validator(mode="after")
    def validate_value_within_max(self) -> Attribute:
        """Ensure value does not exceed max_value."""
        if self.value > self.max_value:
            msg = f"{self.kind} value {self.value} exceeds max {self.max_value}"
            raise ValueError(msg)
        return self

    def with_points_added(self, points: int) -> Attribute:
        """Return a copy with ``points`` added, clamped to ``max_value``."""
        return self.model_copy(update={"value": min(self.value + points, self.max_value)})


class VisualTraits(BaseModel):
    """Level-driven visual unlocks of a character.

    Attributes:
        base_color: Base body color.
        accessories: Unlocked accessories in unlock order.
        aura: Current aura.
    """

    model_config = ConfigDict(frozen=True)

    base_color: str = DEFAULT_BASE_COLOR
    accessories: tuple[str, ...] = ()
    aura: Aura = Aura.NONE


class CharacterState(BaseModel):
    """Aggregate character state accumulated from reading.

    Attributes:
        attributes: One Attribute per AttributeKind.
        total_books_read: Number of books applied.
        total_reading_time_seconds: Summed reading session durations.
        current_level: floor(sum(values) / 100) + 1.
        visual_traits: Accessories and aura unlocked by level.
    """

    model_config = ConfigDict(frozen=True)

    attributes: dict[AttributeKind, Attribute]
    total_books_read: int = Field(default=0, ge=0)
    total_reading_time_seconds: int = Field(default=0, ge=0)
    current_level: int = Field(default=1, ge=1)
    visual_traits: VisualTraits = Field(default_factory=VisualTraits)

    @field_validator("attributes", mode="after")
    @classmethod
    def validate_all_kinds_present(
        cls, value: dict[AttributeKind, Attribute]
    ) -> dict[AttributeKind, Attribute]:
        """Ensure every attribute kind is present, in canonical order."""
        missing = [kind for kind in AttributeKind if kind not in value]
        if missing:
            msg = f"Missing attributes: {', '.join(missing)}"
            raise ValueError(msg)
        return {kind: value[kind] for kind in AttributeKind}

    @computed_field(description="Sum of all attribute values")
    @property
    def total_attribute_points(self) -> int:
        """Sum of all attribute values."""
        return sum(attr.value for attr in self.attributes.values())

    def attribute(self, kind: AttributeKind | str) -> Attribute:
        """Look up an attribute by kind or by its string value.

        Raises:
            UnknownAttributeError: If ``kind`` is not one of the seven kinds.
        """
        try:
            return self.attributes[AttributeKind(kind)]
        except ValueError as exc:
            raise UnknownAttributeError(
                f"Unknown attribute: {kind!r}", attribute=str(kind)
            ) from exc

    def attribute_values(self) -> dict[AttributeKind, int]:
        """Map each attribute kind to its current value."""
        return {kind: attr.value for kind, attr in self.attributes.items()}


# =============================================================================
# Books and Sessions
# =============================================================================


class Book(BaseModel):
    """A book logged in a user's library.

    Attributes:
        id: Stable book identifier.
        title: Book title.
        author: Book author.
        genre: Genre driving attribute gains and visuals.
        cover_reference: Optional cover id or URL.
        themes: Free-form themes.
        date_added: When the book was logged; defines replay order.
        attribute_impact: Points this book added when it was logged.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    title: str
    author: str = "Unknown Author"
    genre: Genre
    cover_reference: str | None = None
    themes: tuple[str, ...] = ()
    date_added: datetime = Field(default_factory=_utcnow)
    attribute_impact: dict[AttributeKind, int] = Field(default_factory=dict)

    @field_validator("date_added", mode="after")
    @classmethod
    def validate_date_added_aware(cls, value: datetime) -> datetime:
        """Treat a naive timestamp as UTC so libraries always sort."""
        return _assume_utc(value)


class BookResult(BaseModel):
    """A candidate book returned by an external catalog search."""

    model_config = ConfigDict(frozen=True)

    key: str
    title: str
    author: str = "Unknown Author"
    cover_reference: str | None = None
    first_publish_year: int | None = None
    genre: Genre = Genre.OTHER
    subjects: tuple[str, ...] = ()


class ReadingSession(BaseModel):
    """A completed timed reading session.

    Attributes:
        id: Session identifier.
        duration_seconds: Length of the session.
        completed_at: When the session was completed.
        attribute_gains: Points actually gained per attribute.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    duration_seconds: int = Field(ge=0)
    completed_at: datetime = Field(default_factory=_utcnow)
    attribute_gains: dict[AttributeKind, int] = Field(default_factory=dict)

    @field_validator("completed_at", mode="after")
    @classmethod
    def validate_completed_at_aware(cls, value: datetime) -> datetime:
        """Treat a naive timestamp as UTC."""
        return _assume_utc(value)


class JournalEntry(BaseModel):
    """A narrative journal line recorded after a reading event."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    date: datetime = Field(default_factory=_utcnow)
    description: str
    trigger_book_id: str | None = None
    attribute_change: AttributeKind | None = None
    evolution_level: int | None = None


__all__ = [
    "ATTRIBUTE_MAX_VALUE",
    "DEFAULT_BASE_COLOR",
    "AttributePoints",
    "attribute_level",
    "character_level",
    "Attribute",
    "VisualTraits",
    "CharacterState",
    "Book",
    "BookResult",
    "ReadingSession",
    "JournalEntry",
]
