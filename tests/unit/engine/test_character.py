"""Tests for the attribute and leveling engine."""

from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from readself.core.exceptions import InvalidSessionError, UnknownGenreError
from readself.engine.character import (
    GENRE_ATTRIBUTE_IMPACT,
    apply_book,
    apply_reading_session,
    attribute_gains,
    compute_visual_traits,
    genre_impact,
    initialize_character,
    rebuild_character,
    rebuild_character_ordered,
    recommend_genres,
    session_points_per_attribute,
    weakest_attribute,
)
from readself.models import AttributeKind, Aura, Book, CharacterState, Genre, VisualTraits


def _apply_all(books: list[Book]) -> CharacterState:
    state = initialize_character()
    for book in books:
        state = apply_book(state, book)
    return state


class TestInitializeCharacter:
    """Tests for initialize_character."""

    def test_fresh_character(self, fresh_character: CharacterState) -> None:
        """All attributes start at 0 with level 1."""
        assert list(fresh_character.attributes) == list(AttributeKind)
        for attr in fresh_character.attributes.values():
            assert attr.value == 0
            assert attr.max_value == 100
            assert attr.level == 1
            assert attr.color.startswith("#")
            assert attr.icon
        assert fresh_character.current_level == 1
        assert fresh_character.total_books_read == 0
        assert fresh_character.total_reading_time_seconds == 0
        assert fresh_character.visual_traits.accessories == ()
        assert fresh_character.visual_traits.aura == Aura.NONE


class TestGenreImpact:
    """Tests for the genre impact table."""

    def test_every_genre_has_impact(self) -> None:
        """Each genre develops two or three attributes with weights 4-10."""
        assert set(GENRE_ATTRIBUTE_IMPACT) == set(Genre)
        for impact in GENRE_ATTRIBUTE_IMPACT.values():
            assert 2 <= len(impact) <= 3
            assert all(4 <= points <= 10 for points in impact.values())

    def test_other_is_flat_default(self) -> None:
        """Other gives a flat low weight to three attributes."""
        assert dict(genre_impact(Genre.OTHER)) == {
            AttributeKind.WISDOM: 5,
            AttributeKind.CURIOSITY: 5,
            AttributeKind.FOCUS: 5,
        }

    def test_accepts_string_genre(self) -> None:
        """String genre values are accepted."""
        assert genre_impact("Fantasy") is GENRE_ATTRIBUTE_IMPACT[Genre.FANTASY]

    def test_unknown_genre_rejected(self) -> None:
        """Unknown genres fail fast."""
        with pytest.raises(UnknownGenreError):
            genre_impact("Cookbooks")


class TestApplyBook:
    """Tests for apply_book."""

    def test_single_fantasy_book(self, make_book: Callable[..., Book]) -> None:
        """One Fantasy book grants imagination, creativity and empathy."""
        state = apply_book(initialize_character(), make_book(Genre.FANTASY))
        values = state.attribute_values()

        assert values[AttributeKind.IMAGINATION] == 10
        assert values[AttributeKind.CREATIVITY] == 8
        assert values[AttributeKind.EMPATHY] == 5
        assert values[AttributeKind.WISDOM] == 0
        assert values[AttributeKind.CURIOSITY] == 0
        assert values[AttributeKind.FOCUS] == 0
        assert values[AttributeKind.RESILIENCE] == 0
        assert state.current_level == 1
        assert state.total_books_read == 1

    def test_does_not_mutate_input(
        self, fresh_character: CharacterState, make_book: Callable[..., Book]
    ) -> None:
        """The input state is left untouched."""
        apply_book(fresh_character, make_book(Genre.FANTASY))
        assert fresh_character.total_attribute_points == 0
        assert fresh_character.total_books_read == 0

    def test_four_then_five_fantasy_books(self, make_book: Callable[..., Book]) -> None:
        """Level 2 is reached when the attribute sum passes 100."""
        four = _apply_all([make_book(Genre.FANTASY) for _ in range(4)])
        assert four.attribute(AttributeKind.IMAGINATION).value == 40
        assert four.attribute(AttributeKind.CREATIVITY).value == 32
        assert four.attribute(AttributeKind.EMPATHY).value == 20
        assert four.total_attribute_points == 92
        assert four.current_level == 1

        five = apply_book(four, make_book(Genre.FANTASY))
        assert five.attribute(AttributeKind.IMAGINATION).value == 50
        assert five.attribute(AttributeKind.CREATIVITY).value == 40
        assert five.attribute(AttributeKind.EMPATHY).value == 25
        assert five.total_attribute_points == 115
        assert five.current_level == 2

    def test_attribute_levels(self, make_book: Callable[..., Book]) -> None:
        """Attribute level is floor(value / 20) + 1."""
        state = _apply_all([make_book(Genre.FANTASY) for _ in range(5)])
        assert state.attribute(AttributeKind.IMAGINATION).level == 3
        assert state.attribute(AttributeKind.CREATIVITY).level == 3
        assert state.attribute(AttributeKind.EMPATHY).level == 2

    def test_values_clamp_at_100(self, make_book: Callable[..., Book]) -> None:
        """Values never exceed 100."""
        state = _apply_all([make_book(Genre.FANTASY) for _ in range(15)])
        assert state.attribute(AttributeKind.IMAGINATION).value == 100
        assert state.attribute(AttributeKind.CREATIVITY).value == 100
        assert state.attribute(AttributeKind.EMPATHY).value == 75
        assert state.current_level == 3

    def test_twenty_fantasy_books_reach_level_four(self, make_book: Callable[..., Book]) -> None:
        """Three capped attributes sum to 300, which is level 4."""
        state = _apply_all([make_book(Genre.FANTASY) for _ in range(20)])
        assert state.total_attribute_points == 300
        assert state.current_level == 4

    def test_level_formula_holds_after_every_event(self, make_book: Callable[..., Book]) -> None:
        """current_level == sum // 100 + 1 after every apply."""
        rng = random.Random(7)
        genres = list(Genre)
        state = initialize_character()
        for _ in range(60):
            if rng.random() < 0.8:
                state = apply_book(state, make_book(rng.choice(genres)))
            else:
                state = apply_reading_session(state, rng.randint(0, 7200))
            assert state.current_level == state.total_attribute_points // 100 + 1
            for attr in state.attributes.values():
                assert 0 <= attr.value <= 100


class TestReadingSession:
    """Tests for apply_reading_session."""

    def test_ten_minutes_rounds_to_nothing(self, fresh_character: CharacterState) -> None:
        """5 points over 7 attributes is 0 each; the remainder is dropped."""
        state = apply_reading_session(fresh_character, 600)

        assert state.total_attribute_points == 0
        assert state.total_reading_time_seconds == 600
        assert state.current_level == 1

    def test_two_hours(self, fresh_character: CharacterState) -> None:
        """60 points over 7 attributes is 8 each."""
        state = apply_reading_session(fresh_character, 7200)

        assert all(value == 8 for value in state.attribute_values().values())
        assert state.total_attribute_points == 56
        assert state.total_books_read == 0

    def test_zero_duration_is_noop(self, fresh_character: CharacterState) -> None:
        """A zero-length session changes nothing but is not an error."""
        state = apply_reading_session(fresh_character, 0)
        assert state.attribute_values() == fresh_character.attribute_values()

    def test_negative_duration_rejected(self, fresh_character: CharacterState) -> None:
        """Negative durations fail fast."""
        with pytest.raises(InvalidSessionError):
            apply_reading_session(fresh_character, -60)

    @pytest.mark.parametrize(
        "seconds,expected",
        [(0, 0), (600, 0), (839, 0), (840, 1), (7200, 8), (84000, 100)],
    )
    def test_points_per_attribute(self, seconds: int, expected: int) -> None:
        """Per-attribute points from session length."""
        assert session_points_per_attribute(seconds) == expected

    def test_long_session_caps_and_unlocks(self, fresh_character: CharacterState) -> None:
        """1400 minutes caps every attribute: level 8 with a soft glow."""
        state = apply_reading_session(fresh_character, 84000)

        assert all(value == 100 for value in state.attribute_values().values())
        assert state.current_level == 8
        assert state.visual_traits.accessories == ("hat",)
        assert state.visual_traits.aura == Aura.SOFT_GLOW

    def test_session_at_cap_is_noop(self, fresh_character: CharacterState) -> None:
        """Further sessions at the cap leave values at 100."""
        capped = apply_reading_session(fresh_character, 84000)
        again = apply_reading_session(capped, 84000)
        assert again.attribute_values() == capped.attribute_values()
        assert again.total_reading_time_seconds == 168000


class TestVisualTraits:
    """Tests for compute_visual_traits."""

    @pytest.mark.parametrize(
        "level,accessories,aura",
        [
            (1, (), Aura.NONE),
            (5, ("hat",), Aura.NONE),
            (8, ("hat",), Aura.SOFT_GLOW),
            (10, ("hat", "book"), Aura.SOFT_GLOW),
            (15, ("hat", "book", "glasses"), Aura.SOFT_GLOW),
            (16, ("hat", "book", "glasses"), Aura.RADIANT),
            (25, ("hat", "book", "glasses"), Aura.ETHEREAL),
        ],
    )
    def test_thresholds(self, level: int, accessories: tuple[str, ...], aura: Aura) -> None:
        """Accessories and aura unlock at their levels."""
        traits = compute_visual_traits(VisualTraits(), level)
        assert traits.accessories == accessories
        assert traits.aura == aura

    def test_accessories_are_append_only(self) -> None:
        """Already unlocked accessories are kept at a lower level."""
        traits = compute_visual_traits(VisualTraits(accessories=("hat",)), 1)
        assert traits.accessories == ("hat",)
        assert traits.aura == Aura.NONE


class TestRebuild:
    """Tests for rebuild-from-history."""

    def test_rebuild_matches_incremental(self, make_book: Callable[..., Book]) -> None:
        """Rebuilding equals applying the same books one by one."""
        books = [make_book(genre) for genre in (Genre.FANTASY, Genre.HISTORY, Genre.POETRY)]
        assert rebuild_character(books) == _apply_all(books)

    def test_rebuild_is_stable(self, make_book: Callable[..., Book]) -> None:
        """Rebuilding twice gives identical state."""
        books = [make_book(genre) for genre in Genre]
        assert rebuild_character(books) == rebuild_character(books)

    def test_rebuild_sorts_oldest_first(self, make_book: Callable[..., Book]) -> None:
        """Input order does not matter; dates do."""
        books = [make_book(Genre.FANTASY) for _ in range(12)] + [make_book(Genre.POETRY)]
        shuffled = list(books)
        random.Random(3).shuffle(shuffled)

        assert rebuild_character(shuffled) == rebuild_character_ordered(books)

    def test_rebuild_of_empty_library(self) -> None:
        """An empty history is a fresh character."""
        assert rebuild_character([]) == initialize_character()


class TestAttributeGains:
    """Tests for attribute_gains."""

    def test_gains_only_positive(self, make_book: Callable[..., Book]) -> None:
        """Unchanged attributes are omitted."""
        before = initialize_character()
        after = apply_book(before, make_book(Genre.MYSTERY))
        assert attribute_gains(before, after) == {
            AttributeKind.FOCUS: 9,
            AttributeKind.CURIOSITY: 7,
            AttributeKind.WISDOM: 4,
        }


class TestRecommendations:
    """Tests for recommend_genres."""

    def test_fresh_character_targets_wisdom(self, fresh_character: CharacterState) -> None:
        """All ties resolve to wisdom, the first attribute."""
        assert weakest_attribute(fresh_character) == AttributeKind.WISDOM
        assert recommend_genres(fresh_character) == [
            Genre.NON_FICTION,
            Genre.BIOGRAPHY,
            Genre.HISTORY,
        ]

    def test_targets_lowest_attribute(self, make_book: Callable[..., Book]) -> None:
        """After Philosophy, empathy is the first zero attribute."""
        state = apply_book(initialize_character(), make_book(Genre.PHILOSOPHY))

        assert weakest_attribute(state) == AttributeKind.EMPATHY
        assert recommend_genres(state) == [Genre.BIOGRAPHY, Genre.POETRY, Genre.ROMANCE]

    def test_limit(self, fresh_character: CharacterState) -> None:
        """The number of suggestions can be capped."""
        assert recommend_genres(fresh_character, limit=1) == [Genre.NON_FICTION]
