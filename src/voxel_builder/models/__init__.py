"""Generation data models."""

from voxel_builder.models.spec import BuildingSpec
from voxel_builder.models.voxel import HORIZONTAL, Direction, Neighbors, Voxel
from voxel_builder.models.elements import (
    PLAIN_WALLS,
    Decoration,
    MaterialGroup,
    PieceKind,
    PlacedElement,
    Vec3,
)
from voxel_builder.models.palette import Palette, PaletteColor
from voxel_builder.models.building import GeneratedBuilding

__all__ = [
    "BuildingSpec",
    "HORIZONTAL",
    "Direction",
    "Neighbors",
    "Voxel",
    "PLAIN_WALLS",
    "Decoration",
    "MaterialGroup",
    "PieceKind",
    "PlacedElement",
    "Vec3",
    "Palette",
    "PaletteColor",
    "GeneratedBuilding",
]
