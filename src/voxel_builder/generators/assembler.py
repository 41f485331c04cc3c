"""Structure assembly: turns classified voxels into placed elements.

Four independent rule sets run per voxel (floor, roof, walls, pillars).
None of them mutates the voxel or looks at another voxel's output.
"""

from __future__ import annotations

import numpy as np

from voxel_builder.generators.rules import (
    WALL_QUARTER_TURNS,
    decide_floor,
    decide_roof,
    decide_wall,
    open_sides,
    pillar_corners,
)
from voxel_builder.models.elements import (
    Decoration,
    MaterialGroup,
    PieceKind,
    PlacedElement,
    Vec3,
)
from voxel_builder.models.spec import BuildingSpec
from voxel_builder.models.voxel import Voxel

# Cell spacing in world units
CELL_X = 3.0
CELL_Y = 2.5
CELL_Z = 3.0

FLOOR_DROP = -1.25
ROOF_RISE = 1.2
WALL_OFFSET = 1.25
WALL_DROP = -0.95
PILLAR_OFFSET = 1.2
PILLAR_DROP = -1.25

DECORATIONS: dict[PieceKind, Decoration] = {
    PieceKind.BANNER: Decoration(
        kind=PieceKind.BANNER,
        offset=Vec3(x=-0.2, y=0.1, z=0.0),
        quarter_turns=3,
        material=MaterialGroup.GREEN_ROOF,
    ),
    PieceKind.SHIELD: Decoration(
        kind=PieceKind.SHIELD,
        offset=Vec3(x=-0.2, y=0.8, z=0.0),
        quarter_turns=2,
        material=MaterialGroup.DARK_STONE,
    ),
}

MATERIALS: dict[PieceKind, MaterialGroup] = {
    PieceKind.ROAD_PLATE: MaterialGroup.DARK_STONE,
    PieceKind.FLOOR_PLATE: MaterialGroup.WOOD,
    PieceKind.ROOF_POINT: MaterialGroup.GREEN_ROOF,
    PieceKind.ROOF_STRAIGHT: MaterialGroup.GREEN_ROOF,
    PieceKind.ROOF_SLANT: MaterialGroup.GREEN_ROOF,
    PieceKind.ROOF_FLAT: MaterialGroup.GREEN_ROOF,
    PieceKind.WALL_PLAIN: MaterialGroup.WOOD,
    PieceKind.WALL_CROSS: MaterialGroup.WOOD,
    PieceKind.WALL_DOUBLE_CROSS: MaterialGroup.WOOD,
    PieceKind.WALL_DOOR: MaterialGroup.WOOD,
    PieceKind.WALL_WINDOW: MaterialGroup.WOOD,
    PieceKind.PILLAR: MaterialGroup.WOOD,
}


def cell_center(voxel: Voxel) -> Vec3:
    """Local position of a voxel's base point."""
    return Vec3(x=voxel.x * CELL_X, y=voxel.y * CELL_Y, z=voxel.z * CELL_Z)


def emit(
    kind: PieceKind,
    voxel: Voxel,
    offset: Vec3,
    quarter_turns: int = 0,
    decoration: PieceKind | None = None,
) -> PlacedElement:
    """Build one element record at ``offset`` from the voxel's base point."""
    return PlacedElement(
        kind=kind,
        cell=(voxel.x, voxel.y, voxel.z),
        position=cell_center(voxel) + offset,
        quarter_turns=quarter_turns,
        material=MATERIALS[kind],
        decoration=DECORATIONS[decoration] if decoration is not None else None,
    )


class StructureAssembler:
    """Applies the floor, roof, wall and pillar rules to voxels.

    Holds the spec's chances and the random generator shared by every
    decision of one generation run.
    """

    def __init__(self, spec: BuildingSpec, rng: np.random.Generator) -> None:
        self.spec = spec
        self.rng = rng

    def assemble(self, voxel: Voxel) -> list[PlacedElement]:
        """All elements for one voxel, in rule order."""
        return [
            *self.floor(voxel),
            *self.roof(voxel),
            *self.walls(voxel),
            *self.pillars(voxel),
        ]

    def floor(self, voxel: Voxel) -> list[PlacedElement]:
        kind = decide_floor(voxel)
        if kind is None:
            return []
        return [emit(kind, voxel, Vec3(x=0.0, y=FLOOR_DROP, z=0.0))]

    def roof(self, voxel: Voxel) -> list[PlacedElement]:
        choice = decide_roof(voxel, self.rng, self.spec.roof_point_chance)
        if choice is None:
            return []
        return [
            emit(choice.kind, voxel, Vec3(x=0.0, y=ROOF_RISE, z=0.0), choice.quarter_turns)
        ]

    def walls(self, voxel: Voxel) -> list[PlacedElement]:
        placed = []
        for side in open_sides(voxel):
            choice = decide_wall(voxel.y, self.rng, self.spec)
            dx, _, dz = side.offset
            offset = Vec3(x=WALL_OFFSET * dx, y=WALL_DROP, z=WALL_OFFSET * dz)
            placed.append(
                emit(choice.kind, voxel, offset, WALL_QUARTER_TURNS[side], choice.decoration)
            )
        return placed

    def pillars(self, voxel: Voxel) -> list[PlacedElement]:
        placed = []
        for corner in pillar_corners(voxel):
            sx, sz = corner.sign
            offset = Vec3(x=PILLAR_OFFSET * sx, y=PILLAR_DROP, z=PILLAR_OFFSET * sz)
            placed.append(emit(PieceKind.PILLAR, voxel, offset))
        return placed
