"""Deterministic generation and evolution engine.

Submodules:
    seed: Identity seeds, seed hashing and the seed store collaborator.
    genres: Genre visual registry, genre distribution and genre inference.
    character: Attribute and leveling engine.
    avatar: Seed and library derived avatar traits.
    pet: Pet stage and trait evolution.
    journal: Deterministic journal lines.
    library: ReadingLog transitions for add, remove, session and rename.
"""

from __future__ import annotations

from readself.engine.avatar import (
    avatar_level,
    compute_character_layers,
    derive_base_traits,
    derive_character_traits,
    resolve_visible_equipment,
)
from readself.engine.character import (
    GENRE_ATTRIBUTE_IMPACT,
    apply_book,
    apply_reading_session,
    genre_impact,
    initialize_character,
    rebuild_character,
    rebuild_character_ordered,
    recommend_genres,
)
from readself.engine.genres import (
    GENRE_VISUALS,
    compute_genre_distribution,
    get_dominant_genre,
    infer_genre,
)
from readself.engine.journal import compose_journal_entry, largest_gain
from readself.engine.library import (
    LogUpdate,
    ReadingLog,
    add_book,
    character_layers,
    complete_session,
    log_book,
    remove_book,
    rename_pet,
    start_reading_log,
)
from readself.engine.pet import (
    compute_pet_traits,
    create_initial_pet,
    evolve_pet_if_needed,
    get_pet_stage,
    update_pet_name,
)
from readself.engine.seed import (
    InMemorySeedStore,
    SeedStore,
    ensure_seed,
    generate_seed,
    hash_to_number,
    reset_seed,
    seed_value,
)


__all__ = [
    # Seed
    "generate_seed",
    "hash_to_number",
    "seed_value",
    "SeedStore",
    "InMemorySeedStore",
    "ensure_seed",
    "reset_seed",
    # Genres
    "GENRE_VISUALS",
    "compute_genre_distribution",
    "get_dominant_genre",
    "infer_genre",
    # Character
    "GENRE_ATTRIBUTE_IMPACT",
    "initialize_character",
    "genre_impact",
    "apply_book",
    "apply_reading_session",
    "rebuild_character",
    "rebuild_character_ordered",
    "recommend_genres",
    # Avatar
    "derive_base_traits",
    "derive_character_traits",
    "avatar_level",
    "resolve_visible_equipment",
    "compute_character_layers",
    # Pet
    "get_pet_stage",
    "compute_pet_traits",
    "create_initial_pet",
    "evolve_pet_if_needed",
    "update_pet_name",
    # Journal
    "compose_journal_entry",
    "largest_gain",
    # Library
    "ReadingLog",
    "LogUpdate",
    "log_book",
    "start_reading_log",
    "add_book",
    "remove_book",
    "complete_session",
    "rename_pet",
    "character_layers",
]
