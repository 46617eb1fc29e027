"""Pet companion models."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from readself.models.enums import PetStage


class PetTraits(BaseModel):
    """Derived look of a pet. Always recomputed, never patched.

    Attributes:
        body_type: 0=blob, 1=quadruped, 2=winged.
        primary_color: Dominant genre color, or a seed color for an empty library.
        secondary_color: Seed-derived accent color.
        marking_style: 0=none, 1=spots, 2=stripes.
        eye_style: 0=dot, 1=wide, 2=closed happy, 3=sparkle.
        mouth_style: 0=smile, 1=open, 2=cat.
        accessory: Accessory granted by the dominant genre, if any.
    """

    model_config = ConfigDict(frozen=True)

    body_type: int = Field(ge=0, le=2)
    primary_color: str
    secondary_color: str
    marking_style: int = Field(ge=0, le=2)
    eye_style: int = Field(ge=0, le=3)
    mouth_style: int = Field(ge=0, le=2)
    accessory: str | None = None

    def differs_from(self, other: PetTraits) -> bool:
        """Compare field by field against another trait set."""
        return any(
            getattr(self, name) != getattr(other, name)
            for name in type(self).model_fields
        )


class Pet(BaseModel):
    """A user's reading companion.

    ``name`` is the only caller-settable field. ``stage`` and ``traits``
    are replaced wholesale on evolution.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    seed: str = Field(min_length=1)
    name: str
    stage: PetStage = PetStage.EGG
    traits: PetTraits
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    last_evolved_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


__all__ = [
    "PetTraits",
    "Pet",
]
