"""Genre visual registry and library genre statistics.

This module contains the static reference data shared by avatar and pet
derivation:
- The color, equipment slot and label of every genre
- The subject keyword table used to infer a genre from catalog subjects

These tables are read-only. Changing them changes every avatar and pet
derived afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING

from readself.core.exceptions import UnknownGenreError
from readself.models.avatar import GenreCount, GenreVisual
from readself.models.enums import EquipmentSlot, Genre


if TYPE_CHECKING:
    from readself.models.reading import Book


# =============================================================================
# Genre Visuals
# =============================================================================

GENRE_VISUALS: MappingProxyType[Genre, GenreVisual] = MappingProxyType({
    Genre.FICTION: GenreVisual(color="#9B7EBD", slot=EquipmentSlot.CLOAK, label="Story Cloak"),
    Genre.NON_FICTION: GenreVisual(color="#7BA3B8", slot=EquipmentSlot.HELD, label="Tome"),
    Genre.MYSTERY: GenreVisual(color="#6B6B8D", slot=EquipmentSlot.HAT, label="Detective Hat"),
    Genre.SCIENCE_FICTION: GenreVisual(color="#A8D8EA", slot=EquipmentSlot.FACE, label="Tech Visor"),
    Genre.FANTASY: GenreVisual(color="#E8B86D", slot=EquipmentSlot.HAT, label="Wizard Hat"),
    Genre.BIOGRAPHY: GenreVisual(color="#C9A9E0", slot=EquipmentSlot.HELD, label="Quill"),
    Genre.HISTORY: GenreVisual(color="#A8C5A0", slot=EquipmentSlot.CLOAK, label="Scholar Robe"),
    Genre.SELF_HELP: GenreVisual(color="#8BC5A7", slot=EquipmentSlot.AURA, label="Growth Aura"),
    Genre.PHILOSOPHY: GenreVisual(color="#B8A9D4", slot=EquipmentSlot.COMPANION, label="Owl"),
    Genre.POETRY: GenreVisual(color="#F4A6D7", slot=EquipmentSlot.HAT, label="Flower Crown"),
    Genre.ROMANCE: GenreVisual(color="#D8A7B1", slot=EquipmentSlot.COMPANION, label="Heart"),
    Genre.THRILLER: GenreVisual(color="#C97070", slot=EquipmentSlot.FACE, label="Scar"),
    Genre.OTHER: GenreVisual(color="#B5B5B8", slot=EquipmentSlot.HELD, label="Scroll"),
})

_GENRE_RANK: MappingProxyType[Genre, int] = MappingProxyType(
    {genre: rank for rank, genre in enumerate(Genre)}
)


def coerce_genre(genre: Genre | str) -> Genre:
    """Convert a genre value to the Genre enum.

    Raises:
        UnknownGenreError: If ``genre`` is not one of the 13 genres.
    """
    try:
        return Genre(genre)
    except ValueError as exc:
        raise UnknownGenreError(f"Unknown genre: {genre!r}", genre=str(genre)) from exc


def get_genre_visual(genre: Genre | str) -> GenreVisual:
    """Get the registry entry for a genre."""
    return GENRE_VISUALS[coerce_genre(genre)]


# =============================================================================
# Genre Distribution
# =============================================================================


def compute_genre_distribution(books: Sequence[Book]) -> list[GenreCount]:
    """Count books per genre, most common first.

    Ties are broken by Genre declaration order, so the result depends
    only on the multiset of genres, never on the order of ``books``.

    Args:
        books: The library.

    Returns:
        One GenreCount per distinct genre; empty for an empty library.
    """
    if not books:
        return []

    counts: dict[Genre, int] = {}
    for book in books:
        counts[book.genre] = counts.get(book.genre, 0) + 1

    total = len(books)
    distribution = [
        GenreCount(genre=genre, count=count, ratio=count / total, visual=GENRE_VISUALS[genre])
        for genre, count in counts.items()
    ]
    return sorted(distribution, key=lambda entry: (-entry.count, _GENRE_RANK[entry.genre]))


def get_dominant_genre(books: Sequence[Book]) -> Genre | None:
    """Get the most common genre of a library, or None if it is empty."""
    distribution = compute_genre_distribution(books)
    return distribution[0].genre if distribution else None


# =============================================================================
# Genre Inference from Catalog Subjects
# =============================================================================

# Checked in order; the first keyword contained in a subject wins.
GENRE_KEYWORDS: tuple[tuple[str, Genre], ...] = (
    ("fiction", Genre.FICTION),
    ("novel", Genre.FICTION),
    ("non-fiction", Genre.NON_FICTION),
    ("nonfiction", Genre.NON_FICTION),
    ("mystery", Genre.MYSTERY),
    ("detective", Genre.MYSTERY),
    ("science fiction", Genre.SCIENCE_FICTION),
    ("sci-fi", Genre.SCIENCE_FICTION),
    ("fantasy", Genre.FANTASY),
    ("biography", Genre.BIOGRAPHY),
    ("autobiography", Genre.BIOGRAPHY),
    ("memoir", Genre.BIOGRAPHY),
    ("history", Genre.HISTORY),
    ("historical", Genre.HISTORY),
    ("self-help", Genre.SELF_HELP),
    ("self help", Genre.SELF_HELP),
    ("philosophy", Genre.PHILOSOPHY),
    ("poetry", Genre.POETRY),
    ("poems", Genre.POETRY),
    ("romance", Genre.ROMANCE),
    ("love", Genre.ROMANCE),
    ("thriller", Genre.THRILLER),
    ("suspense", Genre.THRILLER),
)


def infer_genre(subjects: Iterable[str]) -> Genre:
    """Infer a genre from free-text catalog subjects.

    Subjects are scanned in order; within a subject the keyword table is
    scanned in order. Because "fiction" precedes "science fiction", a
    subject like "Science fiction" infers Fiction.

    Example:
        >>> infer_genre(["Dragons", "Fantasy fiction"])
        <Genre.FICTION: 'Fiction'>
        >>> infer_genre(["Cooking"])
        <Genre.OTHER: 'Other'>
    """
    for subject in subjects:
        lowered = subject.lower()
        for keyword, genre in GENRE_KEYWORDS:
            if keyword in lowered:
                return genre
    return Genre.OTHER


__all__ = [
    "GENRE_VISUALS",
    "GENRE_KEYWORDS",
    "coerce_genre",
    "get_genre_visual",
    "compute_genre_distribution",
    "get_dominant_genre",
    "infer_genre",
]
