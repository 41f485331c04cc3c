"""Solid/empty decision for grid coordinates.

A cell is solid when it lies inside the grid and
``noise(x, y, z) - y / height_dampener > 0``. The height term makes upper
layers progressively harder to fill, so buildings taper toward the top.
"""

from __future__ import annotations

import logging

import numpy as np

from voxel_builder.models.spec import BuildingSpec

logger = logging.getLogger(__name__)


class OccupancyOracle:
    """Bounds-checked solidity predicate over one building's grid.

    The noise is evaluated once for the whole grid at construction; queries
    are pure lookups afterwards. ``noise`` is anything with a
    ``sample_grid(xs, ys, zs)`` method returning an ``[x, y, z]`` array,
    normally a :class:`~voxel_builder.generators.noise.NoiseField`.
    """

    def __init__(self, spec: BuildingSpec, noise) -> None:
        self.spec = spec
        self._x0 = spec.x_range.start
        self._z0 = spec.z_range.start

        xs = np.array(spec.x_range)
        ys = np.array(spec.y_range)
        zs = np.array(spec.z_range)
        values = np.asarray(noise.sample_grid(xs, ys, zs), dtype=np.float64)
        expected = (len(xs), len(ys), len(zs))
        if values.shape != expected:
            raise ValueError(f"Noise grid has shape {values.shape}, expected {expected}")

        damping = ys.astype(np.float64) / spec.height_dampener
        self._mask = (values - damping[np.newaxis, :, np.newaxis]) > 0
        self._mask.flags.writeable = False
        logger.debug(
            "Occupancy grid %s: %d of %d cells solid",
            expected, int(self._mask.sum()), self._mask.size,
        )

    @property
    def mask(self) -> np.ndarray:
        """Read-only solidity array indexed ``[x - x_min, y, z - z_min]``."""
        return self._mask

    @property
    def solid_count(self) -> int:
        return int(self._mask.sum())

    def is_solid(self, x: int, y: int, z: int) -> bool:
        """True iff the cell is inside the grid and the damped noise is positive."""
        if not self.spec.contains(x, y, z):
            return False
        return bool(self._mask[x - self._x0, y, z - self._z0])
