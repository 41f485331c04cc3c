"""Hand-off to a rendering collaborator.

The collaborator supplies a resolver mapping piece kinds to whatever it
renders (prefab handles, asset paths, mesh factories). This module pairs
every element with its resolved prefab and palette color. Nothing here
touches a scene graph.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from voxel_builder.models.building import GeneratedBuilding
from voxel_builder.models.elements import Decoration, PieceKind, PlacedElement, Vec3
from voxel_builder.models.palette import PaletteColor

Resolver = Callable[[PieceKind], Any]


class PieceResolutionError(LookupError):
    """A resolver could not map a piece kind to a prefab."""

    def __init__(self, kind: PieceKind, cell: tuple[int, int, int]) -> None:
        super().__init__(f"No prefab for piece '{kind.value}' (cell {cell})")
        self.kind = kind
        self.cell = cell


@dataclass
class Placement:
    """One prefab to instantiate, with its transform and color.

    ``children`` holds decorations attached relative to this placement.
    """

    prefab: Any
    kind: PieceKind
    position: Vec3
    yaw: float
    color: PaletteColor | None = None
    children: list[Placement] = field(default_factory=list)


def catalog_resolver(catalog: Mapping[PieceKind, Any]) -> Resolver:
    """Resolver backed by a plain mapping; unknown kinds resolve to None."""
    return catalog.get


def _resolve(resolver: Resolver, kind: PieceKind, cell: tuple[int, int, int]) -> Any:
    try:
        prefab = resolver(kind)
    except KeyError as exc:
        raise PieceResolutionError(kind, cell) from exc
    if prefab is None:
        raise PieceResolutionError(kind, cell)
    return prefab


def _decoration_placement(
    building: GeneratedBuilding,
    decoration: Decoration,
    resolver: Resolver,
    cell: tuple[int, int, int],
) -> Placement:
    return Placement(
        prefab=_resolve(resolver, decoration.kind, cell),
        kind=decoration.kind,
        position=decoration.offset,
        yaw=decoration.yaw,
        color=building.palette.color_for(decoration.material),
    )


def element_placement(
    building: GeneratedBuilding,
    element: PlacedElement,
    resolver: Resolver,
    world: bool = False,
) -> Placement:
    """Resolve one element (and its decoration) into a placement.

    Args:
        building: Building the element belongs to (palette and origin).
        element: Element to place.
        resolver: Piece kind → prefab.
        world: Absolute coordinates instead of origin-local ones.

    Raises:
        PieceResolutionError: If any piece kind cannot be resolved.
    """
    position = element.position
    if world:
        position = element.world_position(building.spec.origin_x, building.spec.origin_y)
    placement = Placement(
        prefab=_resolve(resolver, element.kind, element.cell),
        kind=element.kind,
        position=position,
        yaw=element.yaw,
        color=building.palette.color_for(element.material),
    )
    if element.decoration is not None:
        placement.children.append(
            _decoration_placement(building, element.decoration, resolver, element.cell)
        )
    return placement


def resolve_placements(
    building: GeneratedBuilding,
    resolver: Resolver,
    world: bool = False,
) -> list[Placement]:
    """Placements for every element, in generation order.

    Fails on the first unresolvable piece; a building with dropped pieces
    would be structurally inconsistent.
    """
    return [
        element_placement(building, element, resolver, world=world)
        for element in building.elements
    ]
