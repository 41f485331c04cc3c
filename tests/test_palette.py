"""Tests for palette sampling."""

import numpy as np
import pytest

from voxel_builder.generators.palette import CANDIDATE_COLORS, assign_palette, palette_color
from voxel_builder.models.elements import MaterialGroup


class TestPaletteColor:
    def test_normalized_channels(self):
        color = palette_color("#4C3A1E")
        assert color.r == pytest.approx(0x4C / 255)
        assert color.g == pytest.approx(0x3A / 255)
        assert color.b == pytest.approx(0x1E / 255)
        assert color.hex == "#4C3A1E"

    def test_invalid_hex(self):
        with pytest.raises(ValueError):
            palette_color("#nothex")


class TestAssignPalette:
    def test_one_color_per_group(self):
        palette = assign_palette(np.random.default_rng(0))
        assert set(palette.colors) == set(MaterialGroup)
        for group, color in palette.colors.items():
            assert color.hex in CANDIDATE_COLORS[group]

    def test_deterministic_for_seed(self):
        a = assign_palette(np.random.default_rng(8))
        b = assign_palette(np.random.default_rng(8))
        assert a == b

    def test_samples_every_candidate(self):
        seen = {
            assign_palette(np.random.default_rng(seed)).color_for(MaterialGroup.GREEN_ROOF).hex
            for seed in range(200)
        }
        assert seen == set(CANDIDATE_COLORS[MaterialGroup.GREEN_ROOF])

    def test_custom_candidates(self):
        palette = assign_palette(
            np.random.default_rng(1), {MaterialGroup.WOOD: ("#000000",)}
        )
        assert palette.to_hex_map() == {"Wood": "#000000"}
        assert palette.color_for(MaterialGroup.WOOD).rgb == (0.0, 0.0, 0.0)
        assert palette.color_for(MaterialGroup.DARK_STONE) is None

    def test_empty_candidates(self):
        with pytest.raises(ValueError, match="No candidate colors"):
            assign_palette(np.random.default_rng(1), {MaterialGroup.WOOD: ()})
