"""Placed structural elements: the renderer-agnostic generation output.

Each element names a piece kind from a closed catalog, a position local to
the building origin, a yaw in quarter turns and a material group used for
coloring.
"""

from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PieceKind(str, Enum):
    """Catalog of structural pieces the assembler can emit."""

    ROAD_PLATE = "road_plate"
    FLOOR_PLATE = "floor_plate"
    ROOF_POINT = "roof_point"
    ROOF_STRAIGHT = "roof_straight"
    ROOF_SLANT = "roof_slant"
    ROOF_FLAT = "roof_flat"
    WALL_PLAIN = "wall_plain"
    WALL_CROSS = "wall_cross"
    WALL_DOUBLE_CROSS = "wall_double_cross"
    WALL_DOOR = "wall_door"
    WALL_WINDOW = "wall_window"
    PILLAR = "pillar"
    BANNER = "banner"
    SHIELD = "shield"

    @property
    def category(self) -> str:
        """Rule category: floor, roof, wall, pillar or decoration."""
        return _CATEGORIES[self]


_CATEGORIES: dict[PieceKind, str] = {
    PieceKind.ROAD_PLATE: "floor",
    PieceKind.FLOOR_PLATE: "floor",
    PieceKind.ROOF_POINT: "roof",
    PieceKind.ROOF_STRAIGHT: "roof",
    PieceKind.ROOF_SLANT: "roof",
    PieceKind.ROOF_FLAT: "roof",
    PieceKind.WALL_PLAIN: "wall",
    PieceKind.WALL_CROSS: "wall",
    PieceKind.WALL_DOUBLE_CROSS: "wall",
    PieceKind.WALL_DOOR: "wall",
    PieceKind.WALL_WINDOW: "wall",
    PieceKind.PILLAR: "pillar",
    PieceKind.BANNER: "decoration",
    PieceKind.SHIELD: "decoration",
}

PLAIN_WALLS = (PieceKind.WALL_PLAIN, PieceKind.WALL_DOUBLE_CROSS, PieceKind.WALL_CROSS)


class MaterialGroup(str, Enum):
    """Named material groups sharing one sampled color per building."""

    WOOD = "Wood"
    GREEN_ROOF = "Green_Roof"
    DARK_STONE = "Dark_Stone"


class Vec3(BaseModel):
    """3D position in world units (Y up)."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def isclose(self, other: Vec3, abs_tol: float = 1e-6) -> bool:
        return (
            math.isclose(self.x, other.x, abs_tol=abs_tol)
            and math.isclose(self.y, other.y, abs_tol=abs_tol)
            and math.isclose(self.z, other.z, abs_tol=abs_tol)
        )


class Decoration(BaseModel):
    """A banner or shield attached to a wall, relative to the wall's origin."""

    model_config = ConfigDict(frozen=True)

    kind: PieceKind
    offset: Vec3
    quarter_turns: int = Field(default=0, ge=0, le=3, description="Yaw relative to the wall")
    material: MaterialGroup = MaterialGroup.GREEN_ROOF

    @property
    def yaw(self) -> float:
        """Relative yaw in radians."""
        return self.quarter_turns * math.pi / 2


class PlacedElement(BaseModel):
    """One structural piece ready for a rendering collaborator.

    ``cell`` is the voxel that produced the element; ``position`` is local
    to the building origin.
    """

    model_config = ConfigDict(frozen=True)

    kind: PieceKind
    cell: tuple[int, int, int]
    position: Vec3
    quarter_turns: int = Field(default=0, ge=0, le=3, description="Yaw in multiples of 90°")
    material: MaterialGroup
    decoration: Decoration | None = None

    @property
    def yaw(self) -> float:
        """Yaw about the vertical axis in radians."""
        return self.quarter_turns * math.pi / 2

    @property
    def yaw_degrees(self) -> int:
        return self.quarter_turns * 90

    def world_position(self, origin_x: float, origin_y: float) -> Vec3:
        """Absolute position given the building origin on the ground plane."""
        return self.position + Vec3(x=origin_x, y=0.0, z=origin_y)
