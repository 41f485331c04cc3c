"""Post-generation validation.

- structure: roof/wall/floor/pillar consistency of a generated building
"""

from voxel_builder.validators.structure import StructureIssue, validate_structure

__all__ = ["StructureIssue", "validate_structure"]
