"""Per-cell classification records.

Axis convention: north/south run along X (north is -X), west/east run
along Z (west is -Z), up/down run along Y.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(str, Enum):
    """The six face-adjacent directions of a grid cell."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    UP = "up"
    DOWN = "down"

    @property
    def offset(self) -> tuple[int, int, int]:
        """Unit (dx, dy, dz) step toward this neighbor."""
        return _OFFSETS[self]

    @property
    def is_horizontal(self) -> bool:
        return self not in (Direction.UP, Direction.DOWN)


_OFFSETS: dict[Direction, tuple[int, int, int]] = {
    Direction.NORTH: (-1, 0, 0),
    Direction.SOUTH: (1, 0, 0),
    Direction.WEST: (0, 0, -1),
    Direction.EAST: (0, 0, 1),
    Direction.UP: (0, 1, 0),
    Direction.DOWN: (0, -1, 0),
}

HORIZONTAL = (Direction.NORTH, Direction.SOUTH, Direction.WEST, Direction.EAST)


@dataclass(frozen=True, slots=True)
class Neighbors:
    """Solidity of the six face-adjacent cells."""

    north: bool = False
    south: bool = False
    east: bool = False
    west: bool = False
    up: bool = False
    down: bool = False

    def __getitem__(self, direction: Direction) -> bool:
        return getattr(self, direction.value)

    @property
    def any_horizontal(self) -> bool:
        return self.north or self.south or self.east or self.west


@dataclass(frozen=True, slots=True)
class Voxel:
    """Classification of one grid cell.

    ``ceiling`` marks an empty cell with a solid cell directly above it,
    i.e. open space under an overhang.
    """

    x: int
    y: int
    z: int
    solid: bool
    neighbors: Neighbors = Neighbors()

    @property
    def ceiling(self) -> bool:
        return not self.solid and self.neighbors.up

    # Shorthand so rule code reads like the decision tables.
    @property
    def north(self) -> bool:
        return self.neighbors.north

    @property
    def south(self) -> bool:
        return self.neighbors.south

    @property
    def east(self) -> bool:
        return self.neighbors.east

    @property
    def west(self) -> bool:
        return self.neighbors.west

    @property
    def up(self) -> bool:
        return self.neighbors.up

    @property
    def down(self) -> bool:
        return self.neighbors.down
