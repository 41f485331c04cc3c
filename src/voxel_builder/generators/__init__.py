"""Building generation pipeline.

- noise: seeded fBm noise field
- occupancy: solid/empty oracle over the grid
- classify: per-voxel neighbor classification
- rules / assembler: decision tables and element emission
- palette: per-building material colors
- building: the full pipeline
"""

from voxel_builder.generators.noise import NoiseField
from voxel_builder.generators.occupancy import OccupancyOracle
from voxel_builder.generators.classify import classify_grid, classify_voxel, iter_voxels
from voxel_builder.generators.assembler import StructureAssembler
from voxel_builder.generators.palette import assign_palette
from voxel_builder.generators.building import generate_building, rebuild_oracle

__all__ = [
    "NoiseField",
    "OccupancyOracle",
    "classify_grid",
    "classify_voxel",
    "iter_voxels",
    "StructureAssembler",
    "assign_palette",
    "generate_building",
    "rebuild_oracle",
]
