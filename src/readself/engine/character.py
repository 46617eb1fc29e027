"""Attribute and leveling engine.

Books and reading sessions add points to seven attributes. Each
attribute is clamped to 100 and has its own level; the character level
is floor(sum of values / 100) + 1. Every operation here is pure: it
returns a new CharacterState and leaves its input untouched.

Removing a book has no inverse operation. Rebuild the state from the
remaining books with ``rebuild_character`` instead.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from functools import reduce
from types import MappingProxyType

from readself.core.exceptions import InvalidSessionError
from readself.core.logging import get_logger
from readself.engine.genres import coerce_genre
from readself.models.enums import AttributeKind, Aura, Genre
from readself.models.reading import (
    Attribute,
    Book,
    CharacterState,
    VisualTraits,
    character_level,
)


logger = get_logger(__name__)


# =============================================================================
# Genre Impact Table
# =============================================================================

GENRE_ATTRIBUTE_IMPACT: Mapping[Genre, Mapping[AttributeKind, int]] = MappingProxyType({
    Genre.FICTION: MappingProxyType({
        AttributeKind.IMAGINATION: 8, AttributeKind.EMPATHY: 6, AttributeKind.CREATIVITY: 5,
    }),
    Genre.NON_FICTION: MappingProxyType({
        AttributeKind.WISDOM: 10, AttributeKind.CURIOSITY: 7, AttributeKind.FOCUS: 5,
    }),
    Genre.MYSTERY: MappingProxyType({
        AttributeKind.FOCUS: 9, AttributeKind.CURIOSITY: 7, AttributeKind.WISDOM: 4,
    }),
    Genre.SCIENCE_FICTION: MappingProxyType({
        AttributeKind.IMAGINATION: 9, AttributeKind.CURIOSITY: 8, AttributeKind.CREATIVITY: 6,
    }),
    Genre.FANTASY: MappingProxyType({
        AttributeKind.IMAGINATION: 10, AttributeKind.CREATIVITY: 8, AttributeKind.EMPATHY: 5,
    }),
    Genre.BIOGRAPHY: MappingProxyType({
        AttributeKind.WISDOM: 8, AttributeKind.EMPATHY: 7, AttributeKind.RESILIENCE: 6,
    }),
    Genre.HISTORY: MappingProxyType({
        AttributeKind.WISDOM: 9, AttributeKind.CURIOSITY: 6, AttributeKind.FOCUS: 5,
    }),
    Genre.SELF_HELP: MappingProxyType({
        AttributeKind.WISDOM: 7, AttributeKind.RESILIENCE: 9, AttributeKind.FOCUS: 6,
    }),
    Genre.PHILOSOPHY: MappingProxyType({
        AttributeKind.WISDOM: 10, AttributeKind.CURIOSITY: 8, AttributeKind.FOCUS: 7,
    }),
    Genre.POETRY: MappingProxyType({
        AttributeKind.CREATIVITY: 10, AttributeKind.EMPATHY: 8, AttributeKind.IMAGINATION: 7,
    }),
    Genre.ROMANCE: MappingProxyType({
        AttributeKind.EMPATHY: 10, AttributeKind.IMAGINATION: 6, AttributeKind.CREATIVITY: 5,
    }),
    Genre.THRILLER: MappingProxyType({
        AttributeKind.FOCUS: 9, AttributeKind.RESILIENCE: 7, AttributeKind.CURIOSITY: 6,
    }),
    Genre.OTHER: MappingProxyType({
        AttributeKind.WISDOM: 5, AttributeKind.CURIOSITY: 5, AttributeKind.FOCUS: 5,
    }),
})

ATTRIBUTE_COLORS: Mapping[AttributeKind, str] = MappingProxyType({
    AttributeKind.WISDOM: "#9B7EBD",
    AttributeKind.CURIOSITY: "#A8D8EA",
    AttributeKind.EMPATHY: "#D8A7B1",
    AttributeKind.IMAGINATION: "#E8B86D",
    AttributeKind.FOCUS: "#A8C5A0",
    AttributeKind.CREATIVITY: "#F4A6D7",
    AttributeKind.RESILIENCE: "#C9A9E0",
})

ATTRIBUTE_ICONS: Mapping[AttributeKind, str] = MappingProxyType({
    AttributeKind.WISDOM: "\N{OWL}",
    AttributeKind.CURIOSITY: "\N{LEFT-POINTING MAGNIFYING GLASS}",
    AttributeKind.EMPATHY: "\N{SPARKLING HEART}",
    AttributeKind.IMAGINATION: "\N{SPARKLES}",
    AttributeKind.FOCUS: "\N{DIRECT HIT}",
    AttributeKind.CREATIVITY: "\N{ARTIST PALETTE}",
    AttributeKind.RESILIENCE: "\N{SHIELD}",
})

# Level-gated accessory unlocks, in unlock order
ACCESSORY_UNLOCKS: tuple[tuple[int, str], ...] = (
    (5, "hat"),
    (10, "book"),
    (15, "glasses"),
)

# Highest threshold first
AURA_THRESHOLDS: tuple[tuple[int, Aura], ...] = (
    (25, Aura.ETHEREAL),
    (16, Aura.RADIANT),
    (8, Aura.SOFT_GLOW),
)

SESSION_POINTS_PER_MINUTE = 0.5
RECOMMENDATION_MIN_WEIGHT = 7
RECOMMENDATION_LIMIT = 3


# =============================================================================
# Character Lifecycle
# =============================================================================


def initialize_character() -> CharacterState:
    """Create a fresh level 1 character with every attribute at 0."""
    attributes = {
        kind: Attribute(kind=kind, color=ATTRIBUTE_COLORS[kind], icon=ATTRIBUTE_ICONS[kind])
        for kind in AttributeKind
    }
    return CharacterState(attributes=attributes)


def genre_impact(genre: Genre | str) -> Mapping[AttributeKind, int]:
    """Get the attribute points one book of ``genre`` grants.

    Raises:
        UnknownGenreError: If ``genre`` is not one of the 13 genres.
    """
    return GENRE_ATTRIBUTE_IMPACT[coerce_genre(genre)]


def compute_visual_traits(current: VisualTraits, level: int) -> VisualTraits:
    """Recompute level-gated visual traits.

    Accessories are append-only: one already unlocked is kept even if
    ``level`` is now below its threshold. The aura follows ``level``.
    """
    accessories = list(current.accessories)
    for threshold, accessory in ACCESSORY_UNLOCKS:
        if level >= threshold and accessory not in accessories:
            accessories.append(accessory)

    aura = Aura.NONE
    for threshold, candidate in AURA_THRESHOLDS:
        if level >= threshold:
            aura = candidate
            break

    return current.model_copy(update={"accessories": tuple(accessories), "aura": aura})


def _add_points(
    state: CharacterState,
    points: Mapping[AttributeKind, int],
    **updates: object,
) -> CharacterState:
    attributes = dict(state.attributes)
    for kind, amount in points.items():
        attributes[kind] = attributes[kind].with_points_added(amount)

    level = character_level(sum(attr.value for attr in attributes.values()))
    if level > state.current_level:
        logger.info("Character leveled up", old_level=state.current_level, new_level=level)

    return state.model_copy(
        update={
            "attributes": attributes,
            "current_level": level,
            "visual_traits": compute_visual_traits(state.visual_traits, level),
            **updates,
        }
    )


def apply_book(state: CharacterState, book: Book) -> CharacterState:
    """Apply one logged book to a character.

    Args:
        state: Character before the book.
        book: The book; only its genre matters.

    Returns:
        New character state with the genre's points added and
        ``total_books_read`` incremented.
    """
    impact = genre_impact(book.genre)
    logger.debug("Applying book", book_id=book.id, genre=book.genre)
    return _add_points(state, impact, total_books_read=state.total_books_read + 1)


def session_points_per_attribute(duration_seconds: int) -> int:
    """Points each attribute gains from a session of ``duration_seconds``.

    Half a point per minute in total, split evenly over the seven
    attributes with the remainder dropped. A 10 minute session earns 5
    points in total and therefore 0 per attribute.

    Raises:
        InvalidSessionError: If the duration is negative.
    """
    if duration_seconds < 0:
        raise InvalidSessionError(
            "Reading session duration cannot be negative",
            duration_seconds=duration_seconds,
        )
    total_points = int((duration_seconds / 60) * SESSION_POINTS_PER_MINUTE)
    return total_points // len(AttributeKind)


def apply_reading_session(state: CharacterState, duration_seconds: int) -> CharacterState:
    """Apply a completed timed reading session to a character.

    Raises:
        InvalidSessionError: If the duration is negative.
    """
    per_attribute = session_points_per_attribute(duration_seconds)
    logger.debug(
        "Applying reading session",
        duration_seconds=duration_seconds,
        points_per_attribute=per_attribute,
    )
    return _add_points(
        state,
        {kind: per_attribute for kind in AttributeKind},
        total_reading_time_seconds=state.total_reading_time_seconds + duration_seconds,
    )


def attribute_gains(before: CharacterState, after: CharacterState) -> dict[AttributeKind, int]:
    """Positive per-attribute differences between two states."""
    gains: dict[AttributeKind, int] = {}
    for kind in AttributeKind:
        delta = after.attributes[kind].value - before.attributes[kind].value
        if delta > 0:
            gains[kind] = delta
    return gains


# =============================================================================
# Rebuild From History
# =============================================================================


def rebuild_character_ordered(books: Iterable[Book]) -> CharacterState:
    """Fold ``apply_book`` over books that are already oldest-first."""
    return reduce(apply_book, books, initialize_character())


def rebuild_character(books: Iterable[Book]) -> CharacterState:
    """Rebuild a character from a library in any order.

    Books are replayed oldest-first by ``date_added``; books sharing a
    timestamp keep their relative input order.
    """
    ordered = sorted(books, key=lambda book: book.date_added)
    logger.debug("Rebuilding character", book_count=len(ordered))
    return rebuild_character_ordered(ordered)


# =============================================================================
# Recommendations
# =============================================================================


def weakest_attribute(state: CharacterState) -> AttributeKind:
    """The lowest-valued attribute; ties go to the earliest kind."""
    return min(AttributeKind, key=lambda kind: state.attributes[kind].value)


def recommend_genres(state: CharacterState, *, limit: int = RECOMMENDATION_LIMIT) -> list[Genre]:
    """Suggest genres that develop the character's weakest attribute.

    Returns:
        Up to ``limit`` genres, in registry order, whose impact on the
        weakest attribute is at least 7.
    """
    weakest = weakest_attribute(state)
    recommended = [
        genre
        for genre, impact in GENRE_ATTRIBUTE_IMPACT.items()
        if impact.get(weakest, 0) >= RECOMMENDATION_MIN_WEIGHT
    ]
    return recommended[:limit]


__all__ = [
    "GENRE_ATTRIBUTE_IMPACT",
    "ATTRIBUTE_COLORS",
    "ATTRIBUTE_ICONS",
    "ACCESSORY_UNLOCKS",
    "AURA_THRESHOLDS",
    "initialize_character",
    "genre_impact",
    "compute_visual_traits",
    "apply_book",
    "session_points_per_attribute",
    "apply_reading_session",
    "attribute_gains",
    "rebuild_character_ordered",
    "rebuild_character",
    "weakest_attribute",
    "recommend_genres",
]
