"""Seeded fractal (fBm) coherent noise over 3D space.

Octave i is sampled at ``frequency * 2**i`` and weighted by
``persistence**i``. The weighted sum is normalized by the total weight and
scaled by ``amplitude``, so samples stay within [-amplitude, amplitude].
"""

from __future__ import annotations

import numpy as np
from opensimplex import OpenSimplex

from voxel_builder.models.spec import BuildingSpec


class NoiseField:
    """Deterministic fBm noise for a given seed and parameter set."""

    def __init__(
        self,
        seed: int,
        amplitude: float = 1.0,
        frequency: float = 0.08,
        octaves: int = 16,
        persistence: float = 0.5,
    ) -> None:
        if octaves < 1:
            raise ValueError(f"octaves must be >= 1, got {octaves}")
        self.seed = seed
        self.amplitude = amplitude
        self.frequency = frequency
        self.octaves = octaves
        self.persistence = persistence
        self._simplex = OpenSimplex(seed=seed)

        self._weights = [persistence**i for i in range(octaves)]
        self._frequencies = [frequency * 2**i for i in range(octaves)]
        self._total_weight = sum(self._weights)

    @classmethod
    def from_spec(cls, spec: BuildingSpec, seed: int) -> NoiseField:
        return cls(
            seed=seed,
            amplitude=spec.amplitude,
            frequency=spec.frequency,
            octaves=spec.octaves,
            persistence=spec.persistence,
        )

    def sample(self, x: float, y: float, z: float) -> float:
        """Noise value at a single point."""
        total = 0.0
        for weight, freq in zip(self._weights, self._frequencies):
            total += weight * self._simplex.noise3(x * freq, y * freq, z * freq)
        return self.amplitude * total / self._total_weight

    def sample_grid(self, xs, ys, zs) -> np.ndarray:
        """Noise over the lattice ``xs × ys × zs``, indexed ``[ix, iy, iz]``."""
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)
        zs = np.asarray(zs, dtype=np.float64)
        total = np.zeros((xs.size, ys.size, zs.size))
        for weight, freq in zip(self._weights, self._frequencies):
            # noise3array returns [z, y, x]
            layer = self._simplex.noise3array(xs * freq, ys * freq, zs * freq)
            total += weight * layer.transpose(2, 1, 0)
        return self.amplitude * total / self._total_weight
