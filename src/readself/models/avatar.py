"""Avatar models: seed geometry, humanoid traits and equipment layers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from readself.models.enums import EquipmentSlot, Genre


class BaseTraits(BaseModel):
    """Seed-only geometry parameters for the constellation avatar style.

    Attributes:
        core_vertices: Vertices of the core polygon (3-8).
        base_rotation: Rotation offset in degrees [0, 360).
        hue_shift: Hue shift applied to genre colors [-20, 20).
        inner_scale: Scale of the inner pattern [0.6, 1.0).
        pattern_angle: Line pattern angle offset [0, 180).
    """

    model_config = ConfigDict(frozen=True)

    core_vertices: int = Field(ge=3, le=8)
    base_rotation: float = Field(ge=0, le=360)
    hue_shift: float = Field(ge=-20, le=20)
    inner_scale: float = Field(ge=0.6, le=1.0)
    pattern_angle: float = Field(ge=0, le=180)


class AvatarCharacterTraits(BaseModel):
    """Seed-only humanoid appearance, independent of the library.

    Attributes:
        skin_tone: Skin color from the skin palette.
        hair_color: Hair color from the hair palette.
        eye_color: Eye color from the eye palette.
        head_shape: 0=round, 1=oval, 2=square-ish.
        hair_style: Hair style index 0-4.
        eye_style: Eye style index 0-3.
        mouth_style: Mouth style index 0-2.
    """

    model_config = ConfigDict(frozen=True)

    skin_tone: str
    hair_color: str
    eye_color: str
    head_shape: int = Field(ge=0, le=2)
    hair_style: int = Field(ge=0, le=4)
    eye_style: int = Field(ge=0, le=3)
    mouth_style: int = Field(ge=0, le=2)


class GenreVisual(BaseModel):
    """Registry entry describing how a genre is drawn."""

    model_config = ConfigDict(frozen=True)

    color: str
    slot: EquipmentSlot
    label: str


class GenreCount(BaseModel):
    """One row of a library's genre distribution."""

    model_config = ConfigDict(frozen=True)

    genre: Genre
    count: int = Field(ge=1)
    ratio: float = Field(gt=0, le=1)
    visual: GenreVisual


class EquipmentLayer(BaseModel):
    """A genre-derived piece of avatar equipment.

    Attributes:
        slot: Slot the equipment occupies.
        genre: Genre that grants it.
        color: Genre color.
        label: Display label.
        intensity: min(count / 5, 1).
    """

    model_config = ConfigDict(frozen=True)

    slot: EquipmentSlot
    genre: Genre
    color: str
    label: str
    intensity: float = Field(ge=0, le=1)


class CharacterLayers(BaseModel):
    """Full layered avatar description handed to the renderer.

    ``equipment`` holds one layer per genre in the library, strongest
    first. ``visible_equipment`` keeps only the winning layer of each
    slot. ``level`` is 0 for an empty library.
    """

    model_config = ConfigDict(frozen=True)

    character: AvatarCharacterTraits
    equipment: tuple[EquipmentLayer, ...] = ()
    visible_equipment: tuple[EquipmentLayer, ...] = ()
    dominant_genre: Genre | None = None
    dominant_color: str
    book_count: int = Field(ge=0)
    level: int = Field(ge=0, le=20)

    def layer_for(self, slot: EquipmentSlot) -> EquipmentLayer | None:
        """Return the visible layer occupying ``slot``, if any."""
        for layer in self.visible_equipment:
            if layer.slot == slot:
                return layer
        return None


__all__ = [
    "BaseTraits",
    "AvatarCharacterTraits",
    "GenreVisual",
    "GenreCount",
    "EquipmentLayer",
    "CharacterLayers",
]
