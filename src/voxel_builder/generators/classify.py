"""Voxel classification: a cell's own solidity plus its six neighbors.

Every voxel is computed from oracle queries only, so traversal order never
changes any classification.
"""

from __future__ import annotations

from typing import Iterator

from voxel_builder.generators.occupancy import OccupancyOracle
from voxel_builder.models.voxel import Direction, Neighbors, Voxel


def classify_voxel(oracle: OccupancyOracle, x: int, y: int, z: int) -> Voxel:
    """Classify one cell against the oracle."""
    flags = {}
    for direction in Direction:
        dx, dy, dz = direction.offset
        flags[direction.value] = oracle.is_solid(x + dx, y + dy, z + dz)
    return Voxel(
        x=x,
        y=y,
        z=z,
        solid=oracle.is_solid(x, y, z),
        neighbors=Neighbors(**flags),
    )


def iter_voxels(oracle: OccupancyOracle) -> Iterator[Voxel]:
    """Yield a voxel for every cell of the oracle's grid.

    Order is X outermost, then Y, then Z.
    """
    spec = oracle.spec
    for x in spec.x_range:
        for y in spec.y_range:
            for z in spec.z_range:
                yield classify_voxel(oracle, x, y, z)


def classify_grid(oracle: OccupancyOracle) -> list[Voxel]:
    """All voxels of the grid as a list."""
    return list(iter_voxels(oracle))
