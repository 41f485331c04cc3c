"""Generation result: the spec, the placed elements and the palette.

This is the only artifact that outlives a generation run. Ownership passes
to whichever rendering collaborator instantiates the pieces.
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Iterator

from pydantic import BaseModel, Field

from voxel_builder.models.elements import Decoration, PieceKind, PlacedElement
from voxel_builder.models.palette import Palette, PaletteColor
from voxel_builder.models.spec import BuildingSpec


class GeneratedBuilding(BaseModel):
    """Ordered element list plus palette for one generated building."""

    spec: BuildingSpec
    seed: int | None = Field(
        default=None, description="Seed that reproduces this building, if one was given"
    )
    elements: list[PlacedElement] = Field(default_factory=list)
    palette: Palette = Field(default_factory=Palette)

    # ── File I/O ──────────────────────────────────────────────────────

    @classmethod
    def load(cls, path: str | Path) -> GeneratedBuilding:
        """Load a generated building from a JSON file."""
        path = Path(path)
        return cls.model_validate_json(path.read_text())

    def save(self, path: str | Path) -> Path:
        """Save to a JSON file. Creates parent dirs if needed."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2))
        return path

    # ── Lookups ───────────────────────────────────────────────────────

    def of_kind(self, *kinds: PieceKind) -> list[PlacedElement]:
        """Elements whose kind is any of ``kinds``."""
        return [e for e in self.elements if e.kind in kinds]

    def in_category(self, category: str) -> list[PlacedElement]:
        """Elements in a rule category (floor, roof, wall, pillar)."""
        return [e for e in self.elements if e.kind.category == category]

    def at_cell(self, x: int, y: int, z: int) -> list[PlacedElement]:
        """Elements emitted for one voxel."""
        return [e for e in self.elements if e.cell == (x, y, z)]

    def decorations(self) -> list[Decoration]:
        return [e.decoration for e in self.elements if e.decoration is not None]

    def count_by_kind(self) -> dict[str, int]:
        """Element counts keyed by piece kind, decorations included."""
        counts: Counter[str] = Counter(e.kind.value for e in self.elements)
        counts.update(d.kind.value for d in self.decorations())
        return dict(sorted(counts.items()))

    def colored_elements(
        self,
    ) -> Iterator[tuple[PlacedElement | Decoration, PaletteColor | None]]:
        """Pair every element and nested decoration with its palette color."""
        for element in self.elements:
            yield element, self.palette.color_for(element.material)
            if element.decoration is not None:
                decoration = element.decoration
                yield decoration, self.palette.color_for(decoration.material)
