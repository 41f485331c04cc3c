"""Shared fixtures: deterministic noise sources for the occupancy oracle."""

import numpy as np
import pytest

from voxel_builder.generators.occupancy import OccupancyOracle
from voxel_builder.models.spec import BuildingSpec


class CellNoise:
    """Noise that is strongly positive on listed cells, ``default`` elsewhere."""

    def __init__(self, cells=(), default: float = -100.0, solid: float = 100.0):
        self.cells = {tuple(int(c) for c in cell) for cell in cells}
        self.default = default
        self.solid = solid
        self.calls = 0

    def sample(self, x, y, z) -> float:
        self.calls += 1
        return self.solid if (int(x), int(y), int(z)) in self.cells else self.default

    def sample_grid(self, xs, ys, zs) -> np.ndarray:
        return np.array(
            [[[self.sample(x, y, z) for z in zs] for y in ys] for x in xs],
            dtype=float,
        )


class ConstantNoise(CellNoise):
    """Same value everywhere."""

    def __init__(self, value: float):
        super().__init__(cells=(), default=value)


@pytest.fixture
def cell_noise():
    """The CellNoise class, for tests that inspect the noise source."""
    return CellNoise


@pytest.fixture
def make_oracle():
    """Factory: oracle over ``spec`` that is solid exactly on ``cells``."""

    def _make(spec: BuildingSpec, cells=()) -> OccupancyOracle:
        return OccupancyOracle(spec, CellNoise(cells))

    return _make


@pytest.fixture
def constant_oracle():
    """Factory: oracle over ``spec`` fed by a constant noise value."""

    def _make(spec: BuildingSpec, value: float) -> OccupancyOracle:
        return OccupancyOracle(spec, ConstantNoise(value))

    return _make
