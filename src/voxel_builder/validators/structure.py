"""Consistency checks on a generated building.

Solid cells are recovered from the output itself (every solid voxel gets
exactly one wood floor plate), so these checks need no access to the noise
that produced the building:
- roofs: exactly one per solid cell with nothing solid above, none elsewhere
- walls: one per open horizontal side of a solid cell, doors only at y=0
- decorations: only on plain walls
- floors: road plates only on empty ground cells
- pillars: only under a solid cell, at most four per cell
"""

from __future__ import annotations

from collections import Counter, defaultdict
from dataclasses import dataclass

from voxel_builder.models.building import GeneratedBuilding
from voxel_builder.models.elements import PLAIN_WALLS, PieceKind, PlacedElement
from voxel_builder.models.voxel import HORIZONTAL

Cell = tuple[int, int, int]


@dataclass
class StructureIssue:
    """A single consistency issue."""

    severity: str  # "error" | "warning"
    element_kind: str
    cell: Cell
    message: str


def validate_structure(building: GeneratedBuilding) -> list[StructureIssue]:
    """Run all structure checks. Returns list of issues."""
    by_cell: dict[Cell, list[PlacedElement]] = defaultdict(list)
    for element in building.elements:
        by_cell[element.cell].append(element)
    solid = {
        cell for cell, items in by_cell.items()
        if any(e.kind == PieceKind.FLOOR_PLATE for e in items)
    }

    issues: list[StructureIssue] = []
    issues.extend(validate_floors(by_cell))
    issues.extend(validate_roofs(by_cell, solid))
    issues.extend(validate_walls(by_cell, solid))
    issues.extend(validate_pillars(by_cell, solid))
    return issues


def validate_floors(by_cell: dict[Cell, list[PlacedElement]]) -> list[StructureIssue]:
    """At most one floor plate per cell; road plates only on empty ground."""
    issues: list[StructureIssue] = []
    for cell, items in by_cell.items():
        floors = [e for e in items if e.kind.category == "floor"]
        if len(floors) > 1:
            issues.append(StructureIssue(
                severity="error",
                element_kind="floor",
                cell=cell,
                message=f"{len(floors)} floor plates at {cell}, expected at most 1",
            ))
        for floor in floors:
            if floor.kind == PieceKind.ROAD_PLATE and cell[1] != 0:
                issues.append(StructureIssue(
                    severity="error",
                    element_kind=floor.kind.value,
                    cell=cell,
                    message=f"Road plate above ground at {cell}",
                ))
    return issues


def validate_roofs(
    by_cell: dict[Cell, list[PlacedElement]], solid: set[Cell]
) -> list[StructureIssue]:
    """Exactly one roof on every exposed solid top, none anywhere else."""
    issues: list[StructureIssue] = []
    cells = set(by_cell) | solid
    for cell in cells:
        x, y, z = cell
        roofs = [e for e in by_cell.get(cell, []) if e.kind.category == "roof"]
        exposed = cell in solid and (x, y + 1, z) not in solid
        expected = 1 if exposed else 0
        if len(roofs) != expected:
            issues.append(StructureIssue(
                severity="error",
                element_kind="roof",
                cell=cell,
                message=(
                    f"{len(roofs)} roof pieces at {cell}, expected {expected} "
                    f"({'exposed top' if exposed else 'covered or empty'})"
                ),
            ))
    return issues


def validate_walls(
    by_cell: dict[Cell, list[PlacedElement]], solid: set[Cell]
) -> list[StructureIssue]:
    """Wall count matches open sides; doors on the ground; plain walls decorated once."""
    issues: list[StructureIssue] = []
    for cell, items in by_cell.items():
        x, y, z = cell
        walls = [e for e in items if e.kind.category == "wall"]
        if cell in solid:
            open_count = sum(
                1 for d in HORIZONTAL
                if (x + d.offset[0], y, z + d.offset[2]) not in solid
            )
        else:
            open_count = 0
        if len(walls) != open_count:
            issues.append(StructureIssue(
                severity="error",
                element_kind="wall",
                cell=cell,
                message=f"{len(walls)} walls at {cell}, expected {open_count} open sides",
            ))

        turns = Counter(w.quarter_turns for w in walls)
        for quarter_turns, count in turns.items():
            if count > 1:
                issues.append(StructureIssue(
                    severity="error",
                    element_kind="wall",
                    cell=cell,
                    message=f"{count} walls facing {quarter_turns * 90}° at {cell}",
                ))

        for wall in walls:
            if wall.kind == PieceKind.WALL_DOOR and y != 0:
                issues.append(StructureIssue(
                    severity="error",
                    element_kind=wall.kind.value,
                    cell=cell,
                    message=f"Door above ground level at {cell}",
                ))
            if wall.decoration is not None and wall.kind not in PLAIN_WALLS:
                issues.append(StructureIssue(
                    severity="warning",
                    element_kind=wall.kind.value,
                    cell=cell,
                    message=(
                        f"{wall.decoration.kind.value} attached to "
                        f"{wall.kind.value} at {cell}; only plain walls carry decorations"
                    ),
                ))
    return issues


def validate_pillars(
    by_cell: dict[Cell, list[PlacedElement]], solid: set[Cell]
) -> list[StructureIssue]:
    """Pillars stand only in empty cells under a solid cell."""
    issues: list[StructureIssue] = []
    for cell, items in by_cell.items():
        x, y, z = cell
        pillars = [e for e in items if e.kind == PieceKind.PILLAR]
        if not pillars:
            continue
        if cell in solid or (x, y + 1, z) not in solid:
            issues.append(StructureIssue(
                severity="error",
                element_kind="pillar",
                cell=cell,
                message=f"Pillar at {cell} is not under an overhang",
            ))
        if len(pillars) > 4:
            issues.append(StructureIssue(
                severity="error",
                element_kind="pillar",
                cell=cell,
                message=f"{len(pillars)} pillars at {cell}, expected at most 4",
            ))
    return issues
