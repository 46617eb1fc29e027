"""Pet evolution engine.

A pet's stage follows the character level (egg, hatchling at level 4,
adult at level 8). Its look is drawn from the seed and tinted by the
library's dominant genre. Character level is recomputed rather than
accumulated, so a pet can move back to an earlier stage after a book
is removed.

``evolve_pet_if_needed`` is the single entry point that keeps a stored
pet in sync and is safe to call after every reading event.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime
from uuid import uuid4

from readself.core.logging import get_logger
from readself.engine.genres import GENRE_VISUALS, get_dominant_genre
from readself.engine.seed import require_seed, seed_index
from readself.models.enums import EquipmentSlot, Genre, PetStage
from readself.models.pet import Pet, PetTraits
from readself.models.reading import Book, CharacterState


logger = get_logger(__name__)


# =============================================================================
# Stage Thresholds
# =============================================================================

# Lowest threshold first
STAGE_LEVELS: tuple[tuple[PetStage, int], ...] = (
    (PetStage.EGG, 1),
    (PetStage.HATCHLING, 4),
    (PetStage.ADULT, 8),
)


def get_pet_stage(character: CharacterState) -> PetStage:
    """The highest stage whose minimum level the character has reached."""
    stage = PetStage.EGG
    for candidate, min_level in STAGE_LEVELS:
        if character.current_level >= min_level:
            stage = candidate
    return stage


# =============================================================================
# Traits
# =============================================================================

PET_PRIMARY_COLORS: tuple[str, ...] = (
    "#9B7EBD", "#A8D8EA", "#D8A7B1", "#E8B86D", "#A8C5A0",
    "#F4A6D7", "#C9A9E0", "#7BA3B8", "#8BC5A7", "#B8A9D4",
)

PET_SECONDARY_COLORS: tuple[str, ...] = (
    "#F5EADB", "#E8F4F8", "#FCE8EC", "#FDF3E0", "#E8F0E8",
    "#FDE8F4", "#EDE0F4", "#E0EEF2", "#E0F0E4", "#EDE8F4",
)

PET_NAMES: tuple[str, ...] = (
    "Spark", "Ember", "Page", "Ink", "Tome",
    "Nimbus", "Whisper", "Glint", "Rune", "Fable",
)

BODY_TYPES = 3
MARKING_STYLES = 3
EYE_STYLES = 4
MOUTH_STYLES = 3

ACCESSORY_MIN_BOOKS = 2


def pet_accessory(dominant_genre: Genre | None, book_count: int) -> str | None:
    """Accessory granted by the dominant genre.

    Only hat-slot genres (hat), cloak-slot genres (scarf) and Philosophy
    (glasses) grant one, and only once the library has two books.
    """
    if dominant_genre is None or book_count < ACCESSORY_MIN_BOOKS:
        return None
    slot = GENRE_VISUALS[dominant_genre].slot
    if slot == EquipmentSlot.HAT:
        return "hat"
    if slot == EquipmentSlot.CLOAK:
        return "scarf"
    if dominant_genre == Genre.PHILOSOPHY:
        return "glasses"
    return None


def compute_pet_traits(
    seed: str,
    books: Sequence[Book],
    character: CharacterState | None = None,
) -> PetTraits:
    """Derive a pet's look from its seed and the library.

    ``character`` does not currently influence the look; it is accepted
    so trait derivation receives the same inputs as stage derivation.

    Raises:
        InvalidSeedError: If the seed is empty.
    """
    require_seed(seed)
    dominant_genre = get_dominant_genre(books)

    if dominant_genre is not None:
        primary_color = GENRE_VISUALS[dominant_genre].color
    else:
        primary_color = PET_PRIMARY_COLORS[seed_index(seed, "pet_primary", len(PET_PRIMARY_COLORS))]

    return PetTraits(
        body_type=seed_index(seed, "pet_body", BODY_TYPES),
        primary_color=primary_color,
        secondary_color=PET_SECONDARY_COLORS[
            seed_index(seed, "pet_secondary", len(PET_SECONDARY_COLORS))
        ],
        marking_style=seed_index(seed, "pet_markings", MARKING_STYLES),
        eye_style=seed_index(seed, "pet_eyes", EYE_STYLES),
        mouth_style=seed_index(seed, "pet_mouth", MOUTH_STYLES),
        accessory=pet_accessory(dominant_genre, len(books)),
    )


def default_pet_name(seed: str) -> str:
    """Pick the pet's starting name from the seed."""
    return PET_NAMES[seed_index(require_seed(seed), "pet_name", len(PET_NAMES))]


# =============================================================================
# Create / Evolve
# =============================================================================


def create_initial_pet(
    seed: str,
    character: CharacterState,
    books: Sequence[Book],
    id: str | None = None,
    *,
    now: datetime | None = None,
) -> Pet:
    """Hatch a user's pet from their seed, character and library.

    Raises:
        InvalidSeedError: If the seed is empty.
    """
    timestamp = now or datetime.now(UTC)
    pet = Pet(
        id=id or str(uuid4()),
        seed=require_seed(seed),
        name=default_pet_name(seed),
        stage=get_pet_stage(character),
        traits=compute_pet_traits(seed, books, character),
        created_at=timestamp,
        last_evolved_at=timestamp,
    )
    logger.info("Pet created", pet_id=pet.id, name=pet.name, stage=pet.stage)
    return pet


def evolve_pet_if_needed(
    pet: Pet,
    character: CharacterState,
    books: Sequence[Book],
    *,
    now: datetime | None = None,
) -> tuple[Pet, bool]:
    """Re-derive a pet's stage and traits, replacing them if they changed.

    Stage may move backwards when the character level drops.

    Returns:
        ``(pet, did_evolve)``. When nothing changed, ``pet`` is the very
        object passed in and ``did_evolve`` is False.
    """
    new_stage = get_pet_stage(character)
    new_traits = compute_pet_traits(pet.seed, books, character)

    stage_changed = new_stage != pet.stage
    traits_changed = new_traits.differs_from(pet.traits)
    if not stage_changed and not traits_changed:
        return pet, False

    evolved = pet.model_copy(
        update={
            "stage": new_stage,
            "traits": new_traits,
            "last_evolved_at": now or datetime.now(UTC),
        }
    )
    logger.info(
        "Pet evolved",
        pet_id=pet.id,
        old_stage=pet.stage,
        new_stage=new_stage,
        traits_changed=traits_changed,
    )
    return evolved, True


def update_pet_name(pet: Pet, new_name: str) -> Pet:
    """Rename a pet. Callers reject blank names before calling this."""
    return pet.model_copy(update={"name": new_name})


__all__ = [
    "STAGE_LEVELS",
    "PET_PRIMARY_COLORS",
    "PET_SECONDARY_COLORS",
    "PET_NAMES",
    "get_pet_stage",
    "pet_accessory",
    "compute_pet_traits",
    "default_pet_name",
    "create_initial_pet",
    "evolve_pet_if_needed",
    "update_pet_name",
]
