"""ReadSelf - reading habit companion engine.

Logged books and reading sessions grow a character's seven attributes.
A per-user seed plus the library deterministically produce a layered
avatar and a pet that hatches and grows with the character's level.

Example:
    >>> from readself import InMemorySeedStore, add_book, ensure_seed, start_reading_log
    >>>
    >>> seed = ensure_seed(InMemorySeedStore())
    >>> log = start_reading_log(seed)
    >>> update = add_book(log, title="The Hobbit", genre="Fantasy")
    >>> update.log.character.current_level
    1
    >>> update.log.pet.stage
    <PetStage.EGG: 'egg'>

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 schemas.
    engine: Seed hashing, attributes, avatar and pet derivation.
"""

from __future__ import annotations

# Core
from readself.core.config import Settings, get_settings
from readself.core.exceptions import ReadSelfError
from readself.core.logging import configure_logging, get_logger

# Engine
from readself.engine import (
    InMemorySeedStore,
    LogUpdate,
    ReadingLog,
    SeedStore,
    add_book,
    apply_book,
    apply_reading_session,
    character_layers,
    complete_session,
    compute_character_layers,
    compute_pet_traits,
    create_initial_pet,
    ensure_seed,
    evolve_pet_if_needed,
    generate_seed,
    get_pet_stage,
    initialize_character,
    rebuild_character,
    remove_book,
    rename_pet,
    start_reading_log,
)

# Models
from readself.models import (
    AttributeKind,
    Book,
    CharacterState,
    Genre,
    Pet,
    PetStage,
    PetTraits,
)


__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core
    "Settings",
    "get_settings",
    "ReadSelfError",
    "configure_logging",
    "get_logger",
    # Models
    "AttributeKind",
    "Book",
    "CharacterState",
    "Genre",
    "Pet",
    "PetStage",
    "PetTraits",
    # Engine
    "SeedStore",
    "InMemorySeedStore",
    "ensure_seed",
    "generate_seed",
    "initialize_character",
    "apply_book",
    "apply_reading_session",
    "rebuild_character",
    "compute_character_layers",
    "get_pet_stage",
    "compute_pet_traits",
    "create_initial_pet",
    "evolve_pet_if_needed",
    "ReadingLog",
    "LogUpdate",
    "start_reading_log",
    "add_book",
    "remove_book",
    "complete_session",
    "rename_pet",
    "character_layers",
]
