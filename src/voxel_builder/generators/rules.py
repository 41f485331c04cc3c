"""Decision tables mapping a voxel's neighbor pattern to piece kinds.

Each ``decide_*`` function reads only the voxel's own flags and returns a
choice from the closed :class:`PieceKind` catalog (or nothing). Placement
geometry lives in :mod:`voxel_builder.generators.assembler`.

Randomized branches draw from the supplied ``numpy.random.Generator``, one
independent draw per decision point.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

import numpy as np

from voxel_builder.models.elements import PLAIN_WALLS, PieceKind
from voxel_builder.models.spec import BuildingSpec
from voxel_builder.models.voxel import Direction, Voxel


# ── Floor ─────────────────────────────────────────────────────────────


def decide_floor(voxel: Voxel) -> PieceKind | None:
    """Floor plate under a voxel.

    Solid voxels get a wood plate at any height; empty ground-level voxels
    get a road plate; empty voxels above ground get nothing.
    """
    if voxel.solid:
        return PieceKind.FLOOR_PLATE
    if voxel.y == 0:
        return PieceKind.ROAD_PLATE
    return None


# ── Roof ──────────────────────────────────────────────────────────────


class RoofChoice(NamedTuple):
    kind: PieceKind
    quarter_turns: int = 0


def needs_roof(voxel: Voxel) -> bool:
    """A solid voxel with nothing solid on top gets exactly one roof piece."""
    return voxel.solid and not voxel.up


def decide_roof(
    voxel: Voxel, rng: np.random.Generator, roof_point_chance: float
) -> RoofChoice | None:
    """Roof piece for a voxel, by horizontal neighbor pattern.

    Priority:
    1. isolated: pointed cap (``roof_point_chance``) or ridge on a random axis
    2. neighbors on the east/west axis only: ridge at 90°
    3. neighbors on the north/south axis only: ridge at 0°
    4. open to the south: slant at 0°
    5. open to the north: slant at 180°
    6. otherwise: flat cap
    """
    if not needs_roof(voxel):
        return None

    north, south, east, west = voxel.north, voxel.south, voxel.east, voxel.west

    if not (north or south or east or west):
        if rng.random() < roof_point_chance:
            return RoofChoice(PieceKind.ROOF_POINT)
        return RoofChoice(PieceKind.ROOF_STRAIGHT, 1 if rng.random() > 0.5 else 0)
    if not north and not south:
        return RoofChoice(PieceKind.ROOF_STRAIGHT, 1)
    if not east and not west:
        return RoofChoice(PieceKind.ROOF_STRAIGHT, 0)
    if not south:
        return RoofChoice(PieceKind.ROOF_SLANT, 0)
    if not north:
        return RoofChoice(PieceKind.ROOF_SLANT, 2)
    return RoofChoice(PieceKind.ROOF_FLAT)


# ── Walls ─────────────────────────────────────────────────────────────


class WallChoice(NamedTuple):
    kind: PieceKind
    decoration: PieceKind | None = None


# Outward-facing yaw of the wall on each side.
WALL_QUARTER_TURNS: dict[Direction, int] = {
    Direction.NORTH: 0,
    Direction.SOUTH: 2,
    Direction.WEST: 3,
    Direction.EAST: 1,
}


def open_sides(voxel: Voxel) -> list[Direction]:
    """Horizontal sides of a solid voxel that need a wall."""
    if not voxel.solid:
        return []
    return [side for side in WALL_QUARTER_TURNS if not voxel.neighbors[side]]


def decide_wall(y: int, rng: np.random.Generator, spec: BuildingSpec) -> WallChoice:
    """Treatment for one open wall side.

    Doors only on the ground layer. Plain walls pick a variant uniformly and
    may carry one banner or, failing that, one shield.
    """
    if y == 0 and rng.random() < spec.door_chance:
        return WallChoice(PieceKind.WALL_DOOR)
    if rng.random() < spec.window_chance:
        return WallChoice(PieceKind.WALL_WINDOW)

    kind = PLAIN_WALLS[int(rng.integers(len(PLAIN_WALLS)))]
    if rng.random() < spec.banner_chance:
        return WallChoice(kind, PieceKind.BANNER)
    if rng.random() < spec.shield_chance:
        return WallChoice(kind, PieceKind.SHIELD)
    return WallChoice(kind)


# ── Pillars ───────────────────────────────────────────────────────────


class Corner(Enum):
    """Diagonal corners of a cell, with the two sides that form each."""

    NORTH_WEST = (Direction.NORTH, Direction.WEST)
    NORTH_EAST = (Direction.NORTH, Direction.EAST)
    SOUTH_WEST = (Direction.SOUTH, Direction.WEST)
    SOUTH_EAST = (Direction.SOUTH, Direction.EAST)

    @property
    def sides(self) -> tuple[Direction, Direction]:
        return self.value

    @property
    def sign(self) -> tuple[int, int]:
        """(x, z) unit signs pointing toward the corner."""
        ns, ew = self.value
        return ns.offset[0], ew.offset[2]


def pillar_corners(voxel: Voxel) -> list[Corner]:
    """Corners of a ceiling voxel that need a pillar.

    A corner is skipped only when both sides forming it are solid, since
    walls already meet there.
    """
    if voxel.solid or not voxel.ceiling:
        return []
    return [
        corner
        for corner in Corner
        if not (voxel.neighbors[corner.sides[0]] and voxel.neighbors[corner.sides[1]])
    ]
