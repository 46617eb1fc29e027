"""Identity seeds and deterministic seed-derived numbers.

A seed is a 32-character lowercase hex token generated once per user.
Every visual trait is drawn from ``seed_value(seed, key)``, so the same
seed and inputs always produce the same avatar and pet.

The seed's persistence is a collaborator (``SeedStore``) handed in by
the caller; this module keeps no module-level seed state.
"""

from __future__ import annotations

import secrets
from typing import Protocol, runtime_checkable

from readself.core.exceptions import InvalidSeedError
from readself.core.logging import get_logger


logger = get_logger(__name__)

SEED_BYTES = 16

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193
UINT32_MASK = 0xFFFFFFFF
UINT32_RANGE = 1 << 32


def generate_seed() -> str:
    """Generate a fresh 128-bit identity seed as lowercase hex."""
    seed = secrets.token_hex(SEED_BYTES)
    logger.info("Seed generated", seed=seed)
    return seed


def require_seed(seed: str | None) -> str:
    """Validate that a seed is usable for derivation.

    Args:
        seed: Candidate seed.

    Returns:
        The seed unchanged.

    Raises:
        InvalidSeedError: If the seed is None, empty or whitespace.
    """
    if not seed or not seed.strip():
        raise InvalidSeedError(seed=seed)
    return seed


def _utf16_code_units(value: str) -> list[int]:
    data = value.encode("utf-16-le")
    return [int.from_bytes(data[i : i + 2], "little") for i in range(0, len(data), 2)]


def hash_to_number(value: str) -> float:
    """Hash a string to a float in [0, 1).

    FNV-1a over the string's UTF-16 code units, kept to 32 unsigned
    bits, then divided by 2**32.

    Example:
        >>> hash_to_number("abc123:skin") == hash_to_number("abc123:skin")
        True
    """
    hash_value = FNV_OFFSET_BASIS
    for unit in _utf16_code_units(value):
        hash_value ^= unit
        hash_value = (hash_value * FNV_PRIME) & UINT32_MASK
    return hash_value / UINT32_RANGE


def seed_value(seed: str, key: str) -> float:
    """Derive an independent-looking value in [0, 1) from a seed and key."""
    return hash_to_number(f"{seed}:{key}")


def seed_index(seed: str, key: str, count: int) -> int:
    """Pick an index in ``range(count)`` from a seed and key.

    Example:
        >>> 0 <= seed_index("abc123", "pet_body", 3) < 3
        True
    """
    return int(seed_value(seed, key) * count)


# =============================================================================
# Seed Persistence Collaborator
# =============================================================================


@runtime_checkable
class SeedStore(Protocol):
    """Read/write access to the persisted identity seed."""

    def get(self) -> str | None:
        """Return the stored seed, or None if none was stored yet."""
        ...

    def set(self, seed: str) -> None:
        """Persist ``seed``, replacing any previous one."""
        ...


class InMemorySeedStore:
    """SeedStore kept in process memory."""

    def __init__(self, seed: str | None = None) -> None:
        self._seed = seed

    def get(self) -> str | None:
        return self._seed

    def set(self, seed: str) -> None:
        self._seed = require_seed(seed)


def ensure_seed(store: SeedStore) -> str:
    """Return the stored seed, generating and persisting one on first use."""
    seed = store.get()
    if seed:
        return seed
    seed = generate_seed()
    store.set(seed)
    return seed


def reset_seed(store: SeedStore) -> str:
    """Replace the stored seed with a freshly generated one.

    This changes every seed-derived trait of the avatar and pet.
    """
    seed = generate_seed()
    store.set(seed)
    logger.info("Seed reset", seed=seed)
    return seed


__all__ = [
    "generate_seed",
    "require_seed",
    "hash_to_number",
    "seed_value",
    "seed_index",
    "SeedStore",
    "InMemorySeedStore",
    "ensure_seed",
    "reset_seed",
]
