"""Avatar trait derivation.

Two avatar styles are derived from the same seed:
- The geometric "constellation" style uses ``derive_base_traits``
- The humanoid style uses ``derive_character_traits`` plus one
  equipment layer per genre in the library

Appearance (skin, hair, eyes, shapes) depends on the seed only and
never changes. Equipment and level depend on the library.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from readself.core.config import get_settings
from readself.core.logging import get_logger
from readself.engine.genres import compute_genre_distribution
from readself.engine.seed import require_seed, seed_index, seed_value
from readself.models.avatar import (
    AvatarCharacterTraits,
    BaseTraits,
    CharacterLayers,
    EquipmentLayer,
    GenreCount,
)
from readself.models.reading import Book


logger = get_logger(__name__)


# =============================================================================
# Palettes
# =============================================================================

SKIN_TONES: tuple[str, ...] = (
    "#FDDCB5", "#F5C7A1", "#E8B48A", "#D49B6A", "#C48558",
    "#A66E47", "#8B5E3C", "#6B4226", "#F5D6C3", "#F0E0D0",
)

HAIR_COLORS: tuple[str, ...] = (
    "#2C1810", "#4A3222", "#8B6240", "#D4A76A", "#F2D49B",
    "#C94A2A", "#9B4DCA", "#3D5A99", "#1E7B4E", "#E8E0D0",
)

EYE_COLORS: tuple[str, ...] = (
    "#4A3222", "#2E5A3E", "#3D5A99", "#7B5CB0", "#8B6240",
    "#1A1A2E",
)

HEAD_SHAPES = 3
HAIR_STYLES = 5
EYE_STYLES = 4
MOUTH_STYLES = 3

BOOKS_FOR_FULL_INTENSITY = 5
MAX_AVATAR_LEVEL = 20
LEVEL_CURVE_FACTOR = 3.5


# =============================================================================
# Seed-Only Traits
# =============================================================================


def derive_base_traits(seed: str) -> BaseTraits:
    """Derive the constellation-style geometry from a seed.

    Raises:
        InvalidSeedError: If the seed is empty.
    """
    require_seed(seed)
    return BaseTraits(
        core_vertices=3 + seed_index(seed, "vertices", 6),
        base_rotation=seed_value(seed, "rotation") * 360,
        hue_shift=(seed_value(seed, "hue") - 0.5) * 40,
        inner_scale=0.6 + seed_value(seed, "scale") * 0.4,
        pattern_angle=seed_value(seed, "pattern") * 180,
    )


def derive_character_traits(
    seed: str,
    base_traits: BaseTraits | None = None,
) -> AvatarCharacterTraits:
    """Derive the humanoid appearance from a seed.

    ``base_traits`` is accepted so both avatar styles are derived from
    the same inputs; the humanoid appearance reads the seed directly.

    Raises:
        InvalidSeedError: If the seed is empty.
    """
    require_seed(seed)
    return AvatarCharacterTraits(
        skin_tone=SKIN_TONES[seed_index(seed, "skin", len(SKIN_TONES))],
        hair_color=HAIR_COLORS[seed_index(seed, "hair", len(HAIR_COLORS))],
        eye_color=EYE_COLORS[seed_index(seed, "eyes", len(EYE_COLORS))],
        head_shape=seed_index(seed, "headshape", HEAD_SHAPES),
        hair_style=seed_index(seed, "hairstyle", HAIR_STYLES),
        eye_style=seed_index(seed, "eyestyle", EYE_STYLES),
        mouth_style=seed_index(seed, "mouth", MOUTH_STYLES),
    )


# =============================================================================
# Book-Derived Layers
# =============================================================================


def avatar_level(book_count: int) -> int:
    """Avatar level on a logarithmic curve over the number of books.

    Returns 0 for an empty library, meaning "no avatar yet".

    Example:
        >>> [avatar_level(n) for n in (0, 1, 5, 10, 20, 50)]
        [0, 3, 9, 12, 15, 19]
    """
    if book_count <= 0:
        return 0
    level = math.floor(math.log2(book_count + 1) * LEVEL_CURVE_FACTOR)
    return min(max(level, 1), MAX_AVATAR_LEVEL)


def build_equipment(distribution: Sequence[GenreCount]) -> list[EquipmentLayer]:
    """One equipment layer per genre, in distribution order."""
    return [
        EquipmentLayer(
            slot=entry.visual.slot,
            genre=entry.genre,
            color=entry.visual.color,
            label=entry.visual.label,
            intensity=min(entry.count / BOOKS_FOR_FULL_INTENSITY, 1.0),
        )
        for entry in distribution
    ]


def resolve_visible_equipment(equipment: Sequence[EquipmentLayer]) -> list[EquipmentLayer]:
    """Keep one layer per slot.

    ``equipment`` must be ordered most common genre first, so the first
    layer seen for a slot belongs to the genre with the highest count.
    """
    visible: dict[str, EquipmentLayer] = {}
    for layer in equipment:
        visible.setdefault(layer.slot, layer)
    return list(visible.values())


def compute_character_layers(
    seed: str,
    base_traits: BaseTraits | None,
    books: Sequence[Book],
    *,
    neutral_color: str | None = None,
) -> CharacterLayers:
    """Compute the full layered avatar for a seed and library.

    Args:
        seed: Identity seed.
        base_traits: Constellation geometry derived from the same seed.
        books: The library, in any order.
        neutral_color: Dominant color for an empty library. Defaults to
            the configured companion neutral color.

    Returns:
        Appearance, equipment, dominant genre and color, and level.

    Raises:
        InvalidSeedError: If the seed is empty.
    """
    character = derive_character_traits(seed, base_traits)
    distribution = compute_genre_distribution(books)
    equipment = build_equipment(distribution)

    if distribution:
        dominant_genre = distribution[0].genre
        dominant_color = distribution[0].visual.color
    else:
        dominant_genre = None
        dominant_color = neutral_color or get_settings().companion.neutral_color

    layers = CharacterLayers(
        character=character,
        equipment=tuple(equipment),
        visible_equipment=tuple(resolve_visible_equipment(equipment)),
        dominant_genre=dominant_genre,
        dominant_color=dominant_color,
        book_count=len(books),
        level=avatar_level(len(books)),
    )
    logger.debug(
        "Character layers computed",
        book_count=layers.book_count,
        level=layers.level,
        equipment=len(layers.equipment),
    )
    return layers


__all__ = [
    "SKIN_TONES",
    "HAIR_COLORS",
    "EYE_COLORS",
    "derive_base_traits",
    "derive_character_traits",
    "avatar_level",
    "build_equipment",
    "resolve_visible_equipment",
    "compute_character_layers",
]
