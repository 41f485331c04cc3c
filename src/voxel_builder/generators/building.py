"""Top-level generation: spec + seed → placed elements + palette.

Pipeline: noise field → occupancy oracle → voxel classification →
structure assembly → palette. Every call rebuilds everything from scratch.
"""

from __future__ import annotations

import logging

import numpy as np

from voxel_builder.generators.assembler import StructureAssembler
from voxel_builder.generators.classify import iter_voxels
from voxel_builder.generators.noise import NoiseField
from voxel_builder.generators.occupancy import OccupancyOracle
from voxel_builder.generators.palette import assign_palette
from voxel_builder.models.building import GeneratedBuilding
from voxel_builder.models.spec import BuildingSpec

logger = logging.getLogger(__name__)

_MAX_NOISE_SEED = 2**31 - 1


def build_oracle(spec: BuildingSpec, rng: np.random.Generator) -> OccupancyOracle:
    """Fresh noise field and oracle, seeded from ``rng``."""
    noise_seed = int(rng.integers(0, _MAX_NOISE_SEED))
    return OccupancyOracle(spec, NoiseField.from_spec(spec, noise_seed))


def generate_building(
    spec: BuildingSpec,
    seed: int | None = None,
    oracle: OccupancyOracle | None = None,
) -> GeneratedBuilding:
    """Generate a building.

    Args:
        spec: Validated generation input.
        seed: Seed for every random draw. Same spec and seed give the same
            building; None gives a fresh one each call.
        oracle: Use this occupancy oracle instead of building one from noise.

    Returns:
        GeneratedBuilding with the ordered element list and palette.
    """
    rng = np.random.default_rng(seed)
    if oracle is None:
        oracle = build_oracle(spec, rng)
    elif oracle.spec != spec:
        raise ValueError("Oracle was built for a different spec")

    assembler = StructureAssembler(spec, rng)
    elements = []
    for voxel in iter_voxels(oracle):
        elements.extend(assembler.assemble(voxel))

    palette = assign_palette(rng)

    logger.info(
        "Generated %dx%dx%d building (seed=%s): %d solid cells, %d elements",
        spec.width, spec.height, spec.depth, seed, oracle.solid_count, len(elements),
    )
    return GeneratedBuilding(spec=spec, seed=seed, elements=elements, palette=palette)


def rebuild_oracle(building: GeneratedBuilding) -> OccupancyOracle:
    """Recreate the occupancy oracle of a seeded generation run."""
    if building.seed is None:
        raise ValueError("Building was generated without a seed; occupancy cannot be rebuilt")
    rng = np.random.default_rng(building.seed)
    return build_oracle(building.spec, rng)
