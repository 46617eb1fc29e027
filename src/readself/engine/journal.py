"""Narrative journal lines recorded after reading events."""

from __future__ import annotations

from datetime import UTC, datetime

from readself.engine.seed import require_seed, seed_index
from readself.models.enums import AttributeKind
from readself.models.reading import Book, CharacterState, JournalEntry


JOURNAL_TEMPLATES: tuple[str, ...] = (
    "Your character's {topic} has deepened their understanding of the world.",
    "Through the pages, your character discovered new facets of themselves.",
    "The story resonated deeply, leaving lasting impressions on your character's soul.",
    "Your character emerged from this reading experience transformed.",
    "Each word absorbed has woven itself into your character's essence.",
)


def largest_gain(book: Book) -> AttributeKind | None:
    """The attribute this book raised most, or None if it raised none.

    Ties go to the attribute declared first in AttributeKind.
    """
    best: AttributeKind | None = None
    for kind in AttributeKind:
        gain = book.attribute_impact.get(kind, 0)
        if gain > 0 and (best is None or gain > book.attribute_impact[best]):
            best = kind
    return best


def compose_journal_entry(
    seed: str,
    book: Book | None = None,
    *,
    character: CharacterState | None = None,
    now: datetime | None = None,
) -> JournalEntry:
    """Write a journal line for a reading event.

    The line is chosen from the seed and the book id, so replaying the
    same history yields the same journal.
    """
    key = f"journal:{book.id}" if book else "journal"
    template = JOURNAL_TEMPLATES[seed_index(require_seed(seed), key, len(JOURNAL_TEMPLATES))]
    topic = book.genre.value if book else "reading journey"

    return JournalEntry(
        date=now or datetime.now(UTC),
        description=template.format(topic=topic),
        trigger_book_id=book.id if book else None,
        attribute_change=largest_gain(book) if book else None,
        evolution_level=character.current_level if character else None,
    )


__all__ = [
    "JOURNAL_TEMPLATES",
    "largest_gain",
    "compose_journal_entry",
]
