"""Reading log orchestration.

A ReadingLog bundles everything the engine derives for one user: the
seed, the library, the character and the pet. The transitions below
are what a view layer calls when the user logs a book, removes one,
finishes a timed session or renames the pet. Each returns a new log
and re-syncs the pet, leaving persistence to the caller.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict

from readself.core.exceptions import BookNotFoundError, ValidationError
from readself.core.logging import get_logger
from readself.engine.avatar import compute_character_layers, derive_base_traits
from readself.engine.character import (
    apply_book,
    apply_reading_session,
    attribute_gains,
    rebuild_character,
)
from readself.engine.genres import coerce_genre
from readself.engine.journal import compose_journal_entry
from readself.engine.pet import create_initial_pet, evolve_pet_if_needed, update_pet_name
from readself.engine.seed import require_seed
from readself.models.avatar import CharacterLayers
from readself.models.enums import Genre
from readself.models.pet import Pet
from readself.models.reading import (
    Book,
    CharacterState,
    JournalEntry,
    ReadingSession,
)


logger = get_logger(__name__)


class ReadingLog(BaseModel):
    """Everything derived for one user.

    Attributes:
        seed: Identity seed.
        books: The library, newest first.
        character: Character state consistent with ``books`` and sessions.
        pet: The user's pet.
    """

    model_config = ConfigDict(frozen=True)

    seed: str
    books: tuple[Book, ...] = ()
    character: CharacterState
    pet: Pet


@dataclass(frozen=True)
class BookLogResult:
    """Outcome of logging a single book against a character."""

    book: Book
    character: CharacterState
    leveled_up: bool


@dataclass(frozen=True)
class LogUpdate:
    """Outcome of a ReadingLog transition.

    Attributes:
        log: The updated reading log.
        leveled_up: Whether the character level increased.
        pet_evolved: Whether the pet's stage or traits changed.
        book: Book added or removed, if any.
        session: Session completed, if any.
        journal_entry: Journal line for the event, if one was written.
    """

    log: ReadingLog
    leveled_up: bool
    pet_evolved: bool
    book: Book | None = None
    session: ReadingSession | None = None
    journal_entry: JournalEntry | None = None


def log_book(
    character: CharacterState,
    *,
    title: str,
    genre: Genre | str,
    author: str = "Unknown Author",
    cover_reference: str | None = None,
    themes: Iterable[str] = (),
    book_id: str | None = None,
    date_added: datetime | None = None,
) -> BookLogResult:
    """Create a book and apply it, freezing its attribute impact.

    The book's ``attribute_impact`` records the points it actually
    added, which is less than the genre table when an attribute is
    near its cap.

    Raises:
        UnknownGenreError: If ``genre`` is not one of the 13 genres.
    """
    fields: dict[str, object] = {
        "title": title,
        "author": author,
        "genre": coerce_genre(genre),
        "cover_reference": cover_reference,
        "themes": tuple(themes),
        "date_added": date_added or datetime.now(UTC),
    }
    if book_id is not None:
        fields["id"] = book_id
    book = Book(**fields)

    updated = apply_book(character, book)
    book = book.model_copy(update={"attribute_impact": attribute_gains(character, updated)})
    return BookLogResult(
        book=book,
        character=updated,
        leveled_up=updated.current_level > character.current_level,
    )


def start_reading_log(
    seed: str,
    books: Sequence[Book] = (),
    *,
    pet_id: str | None = None,
    now: datetime | None = None,
) -> ReadingLog:
    """Build a reading log from a seed and an existing library.

    The character is rebuilt from ``books`` oldest-first and a new pet
    is hatched for it.

    Raises:
        InvalidSeedError: If the seed is empty.
    """
    require_seed(seed)
    ordered = tuple(sorted(books, key=lambda book: book.date_added, reverse=True))
    character = rebuild_character(books)
    pet = create_initial_pet(seed, character, ordered, pet_id, now=now)
    return ReadingLog(seed=seed, books=ordered, character=character, pet=pet)


def add_book(
    log: ReadingLog,
    *,
    title: str,
    genre: Genre | str,
    author: str = "Unknown Author",
    cover_reference: str | None = None,
    themes: Iterable[str] = (),
    book_id: str | None = None,
    now: datetime | None = None,
) -> LogUpdate:
    """Log a new book, apply it and re-sync the pet."""
    timestamp = now or datetime.now(UTC)
    result = log_book(
        log.character,
        title=title,
        genre=genre,
        author=author,
        cover_reference=cover_reference,
        themes=themes,
        book_id=book_id,
        date_added=timestamp,
    )
    books = (result.book, *log.books)
    pet, pet_evolved = evolve_pet_if_needed(log.pet, result.character, books, now=timestamp)
    logger.info(
        "Book added",
        book_id=result.book.id,
        genre=result.book.genre,
        total_books=len(books),
        level=result.character.current_level,
    )
    return LogUpdate(
        log=log.model_copy(update={"books": books, "character": result.character, "pet": pet}),
        leveled_up=result.leveled_up,
        pet_evolved=pet_evolved,
        book=result.book,
        journal_entry=compose_journal_entry(
            log.seed, result.book, character=result.character, now=timestamp
        ),
    )


def remove_book(log: ReadingLog, book_id: str, *, now: datetime | None = None) -> LogUpdate:
    """Remove a book and rebuild the character from the remaining ones.

    Only books are replayed, so reading session gains and reading time
    are not carried into the rebuilt character.

    Raises:
        BookNotFoundError: If no book has ``book_id``.
    """
    removed = next((book for book in log.books if book.id == book_id), None)
    if removed is None:
        raise BookNotFoundError("Book is not in the library", book_id=book_id)

    books = tuple(book for book in log.books if book.id != book_id)
    character = rebuild_character(books)
    pet, pet_evolved = evolve_pet_if_needed(log.pet, character, books, now=now)
    logger.info(
        "Book removed",
        book_id=book_id,
        total_books=len(books),
        level=character.current_level,
    )
    return LogUpdate(
        log=log.model_copy(update={"books": books, "character": character, "pet": pet}),
        leveled_up=False,
        pet_evolved=pet_evolved,
        book=removed,
    )


def complete_session(
    log: ReadingLog,
    duration_seconds: int,
    *,
    now: datetime | None = None,
) -> LogUpdate:
    """Apply a finished reading session and re-sync the pet.

    Raises:
        InvalidSessionError: If the duration is negative.
    """
    timestamp = now or datetime.now(UTC)
    character = apply_reading_session(log.character, duration_seconds)
    session = ReadingSession(
        duration_seconds=duration_seconds,
        completed_at=timestamp,
        attribute_gains=attribute_gains(log.character, character),
    )
    pet, pet_evolved = evolve_pet_if_needed(log.pet, character, log.books, now=timestamp)
    return LogUpdate(
        log=log.model_copy(update={"character": character, "pet": pet}),
        leveled_up=character.current_level > log.character.current_level,
        pet_evolved=pet_evolved,
        session=session,
    )


def rename_pet(log: ReadingLog, name: str) -> ReadingLog:
    """Rename the pet.

    Raises:
        ValidationError: If the name is blank after trimming.
    """
    trimmed = name.strip()
    if not trimmed:
        raise ValidationError("Pet name cannot be blank", field_name="name", invalid_value=name)
    return log.model_copy(update={"pet": update_pet_name(log.pet, trimmed)})


def character_layers(log: ReadingLog) -> CharacterLayers:
    """Compute the layered avatar for a reading log."""
    return compute_character_layers(log.seed, derive_base_traits(log.seed), log.books)


__all__ = [
    "ReadingLog",
    "BookLogResult",
    "LogUpdate",
    "log_book",
    "start_reading_log",
    "add_book",
    "remove_book",
    "complete_session",
    "rename_pet",
    "character_layers",
]
