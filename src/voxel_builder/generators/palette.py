"""Per-building color sampling for material groups."""

from __future__ import annotations

import numpy as np
from matplotlib.colors import to_rgb

from voxel_builder.models.elements import MaterialGroup
from voxel_builder.models.palette import Palette, PaletteColor

CANDIDATE_COLORS: dict[MaterialGroup, tuple[str, ...]] = {
    MaterialGroup.WOOD: ("#4C3A1E", "#403019", "#332714"),
    MaterialGroup.GREEN_ROOF: ("#B7CE82", "#D9C37E", "#759B8A", "#A78765", "#CE6A58"),
    MaterialGroup.DARK_STONE: ("#767D85", "#6A6B5F", "#838577"),
}


def palette_color(hex_color: str) -> PaletteColor:
    """Normalized RGB for a hex string, keeping the original hex."""
    r, g, b = to_rgb(hex_color)
    return PaletteColor(r=r, g=g, b=b, hex=hex_color)


def assign_palette(
    rng: np.random.Generator,
    candidates: dict[MaterialGroup, tuple[str, ...]] = CANDIDATE_COLORS,
) -> Palette:
    """Sample one color per material group."""
    colors = {}
    for group, options in candidates.items():
        if not options:
            raise ValueError(f"No candidate colors for material group '{group.value}'")
        colors[group] = palette_color(options[int(rng.integers(len(options)))])
    return Palette(colors=colors)
