"""Per-building color palette keyed by material group."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from voxel_builder.models.elements import MaterialGroup


class PaletteColor(BaseModel):
    """A sampled color: normalized RGB channels plus the source hex string."""

    model_config = ConfigDict(frozen=True)

    r: float = Field(ge=0, le=1)
    g: float = Field(ge=0, le=1)
    b: float = Field(ge=0, le=1)
    hex: str

    @property
    def rgb(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)


class Palette(BaseModel):
    """One color per material group, fixed for the life of a building."""

    model_config = ConfigDict(frozen=True)

    colors: dict[MaterialGroup, PaletteColor] = Field(default_factory=dict)

    def color_for(self, group: MaterialGroup) -> PaletteColor | None:
        """Color assigned to a material group, or None if the group is unpainted."""
        return self.colors.get(group)

    def to_hex_map(self) -> dict[str, str]:
        return {group.value: color.hex for group, color in self.colors.items()}
