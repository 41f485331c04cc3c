"""Hand-off of generated buildings to rendering collaborators."""

from voxel_builder.export.placements import (
    PieceResolutionError,
    Placement,
    catalog_resolver,
    element_placement,
    resolve_placements,
)

__all__ = [
    "PieceResolutionError",
    "Placement",
    "catalog_resolver",
    "element_placement",
    "resolve_placements",
]
