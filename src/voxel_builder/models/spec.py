"""Generation input: grid dimensions, noise parameters and rule chances.

All lengths are in grid cells. Width and depth are centered on the origin,
height grows upward from layer 0.
"""

from __future__ import annotations

import math
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class BuildingSpec(BaseModel):
    """Immutable description of one building to generate."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    origin_x: float = Field(default=0.0, description="World X of the grid center")
    origin_y: float = Field(default=0.0, description="World Z of the grid center (ground plane Y)")
    width: int = Field(gt=0, description="Cells along X, centered on the origin")
    height: int = Field(gt=0, description="Layers, from 0 upward")
    depth: int = Field(gt=0, description="Cells along Z, centered on the origin")

    amplitude: float = Field(default=1.0, gt=0, description="Peak noise magnitude")
    frequency: float = Field(default=0.08, gt=0, description="Base noise frequency")
    octaves: int = Field(default=16, ge=1, le=32, description="fBm octave count")
    persistence: float = Field(default=0.5, gt=0, description="Per-octave amplitude factor")
    height_dampener: float = Field(
        default=4.0, gt=0, description="Layers per unit of noise subtracted with height"
    )

    roof_point_chance: float = Field(default=0.6, ge=0, le=1)
    window_chance: float = Field(default=0.3, ge=0, le=1)
    door_chance: float = Field(default=0.1, ge=0, le=1)
    banner_chance: float = Field(default=0.1, ge=0, le=1)
    shield_chance: float = Field(default=0.1, ge=0, le=1)

    # ── Grid extents ──────────────────────────────────────────────────

    @property
    def x_range(self) -> range:
        """Integer X cells inside [-width/2, width/2)."""
        return range(math.ceil(-self.width / 2), math.ceil(self.width / 2))

    @property
    def y_range(self) -> range:
        return range(0, self.height)

    @property
    def z_range(self) -> range:
        """Integer Z cells inside [-depth/2, depth/2)."""
        return range(math.ceil(-self.depth / 2), math.ceil(self.depth / 2))

    @property
    def cell_count(self) -> int:
        return self.width * self.height * self.depth

    def contains(self, x: int, y: int, z: int) -> bool:
        """True if the cell lies inside the grid bounds."""
        if x < -self.width / 2 or x >= self.width / 2:
            return False
        if z < -self.depth / 2 or z >= self.depth / 2:
            return False
        return 0 <= y < self.height

    # ── File I/O ──────────────────────────────────────────────────────

    @classmethod
    def load(cls, path: str | Path) -> BuildingSpec:
        """Load a spec from a JSON file."""
        path = Path(path)
        return cls.model_validate_json(path.read_text())

    def save(self, path: str | Path) -> Path:
        """Save the spec to a JSON file. Creates parent dirs if needed."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2))
        return path
