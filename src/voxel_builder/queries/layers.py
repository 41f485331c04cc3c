"""Text views of the occupancy grid, one layer at a time.

Rows run north to south (increasing X), columns west to east (increasing Z).
Symbols: ``#`` solid, ``^`` empty under a solid cell, ``.`` empty.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from voxel_builder.generators.classify import classify_voxel
from voxel_builder.generators.occupancy import OccupancyOracle

SOLID = "#"
CEILING = "^"
EMPTY = "."


@dataclass
class LayerSlice:
    """Occupancy summary for one Y layer."""

    y: int
    rows: list[str] = field(default_factory=list)
    solid: int = 0
    ceiling: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain dict for JSON serialization."""
        return {
            "y": self.y,
            "solid": self.solid,
            "ceiling": self.ceiling,
            "rows": self.rows,
        }

    def summary(self) -> str:
        """Human-readable map with a header line."""
        lines = [f"Layer {self.y}: {self.solid} solid, {self.ceiling} under overhang"]
        lines.extend(self.rows)
        return "\n".join(lines)


def render_layer(oracle: OccupancyOracle, y: int) -> LayerSlice:
    """Text map of one layer.

    Raises:
        ValueError: If ``y`` is outside the grid.
    """
    spec = oracle.spec
    if y not in spec.y_range:
        raise ValueError(f"Layer {y} outside grid (0..{spec.height - 1})")

    layer = LayerSlice(y=y)
    for x in spec.x_range:
        row = []
        for z in spec.z_range:
            voxel = classify_voxel(oracle, x, y, z)
            if voxel.solid:
                row.append(SOLID)
                layer.solid += 1
            elif voxel.ceiling:
                row.append(CEILING)
                layer.ceiling += 1
            else:
                row.append(EMPTY)
        layer.rows.append("".join(row))
    return layer


def render_layers(oracle: OccupancyOracle) -> list[LayerSlice]:
    """Text maps of every layer, bottom up."""
    return [render_layer(oracle, y) for y in oracle.spec.y_range]
