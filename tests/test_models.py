"""Tests for generation data models."""

import math

import pytest
from pydantic import ValidationError

from voxel_builder.models import (
    BuildingSpec,
    Decoration,
    Direction,
    GeneratedBuilding,
    MaterialGroup,
    Neighbors,
    Palette,
    PaletteColor,
    PieceKind,
    PlacedElement,
    Vec3,
    Voxel,
)


class TestBuildingSpec:
    def test_defaults(self):
        spec = BuildingSpec(width=8, height=4, depth=6)
        assert spec.frequency == 0.08
        assert spec.octaves == 16
        assert spec.persistence == 0.5
        assert spec.height_dampener == 4.0
        assert spec.roof_point_chance == 0.6
        assert spec.window_chance == 0.3
        assert spec.door_chance == 0.1

    @pytest.mark.parametrize("field", ["width", "height", "depth"])
    def test_zero_dimension_rejected(self, field):
        kwargs = {"width": 4, "height": 4, "depth": 4, field: 0}
        with pytest.raises(ValueError):
            BuildingSpec(**kwargs)

    def test_negative_dimension_rejected(self):
        with pytest.raises(ValidationError):
            BuildingSpec(width=-2, height=4, depth=4)

    def test_chance_above_one_rejected(self):
        with pytest.raises(ValidationError):
            BuildingSpec(width=4, height=4, depth=4, window_chance=1.5)

    def test_negative_chance_rejected(self):
        with pytest.raises(ValidationError):
            BuildingSpec(width=4, height=4, depth=4, shield_chance=-0.1)

    def test_non_finite_noise_rejected(self):
        with pytest.raises(ValidationError):
            BuildingSpec(width=4, height=4, depth=4, frequency=math.inf)
        with pytest.raises(ValidationError):
            BuildingSpec(width=4, height=4, depth=4, amplitude=math.nan)

    def test_zero_octaves_rejected(self):
        with pytest.raises(ValidationError):
            BuildingSpec(width=4, height=4, depth=4, octaves=0)

    def test_zero_dampener_rejected(self):
        with pytest.raises(ValidationError):
            BuildingSpec(width=4, height=4, depth=4, height_dampener=0)

    def test_frozen(self):
        spec = BuildingSpec(width=4, height=4, depth=4)
        with pytest.raises(ValidationError):
            spec.width = 10

    def test_even_ranges_centered(self):
        spec = BuildingSpec(width=4, height=3, depth=6)
        assert list(spec.x_range) == [-2, -1, 0, 1]
        assert list(spec.y_range) == [0, 1, 2]
        assert list(spec.z_range) == [-3, -2, -1, 0, 1, 2]

    def test_odd_ranges(self):
        spec = BuildingSpec(width=5, height=1, depth=1)
        assert list(spec.x_range) == [-2, -1, 0, 1, 2]
        assert list(spec.z_range) == [0]

    def test_cell_count(self):
        assert BuildingSpec(width=4, height=3, depth=5).cell_count == 60

    def test_contains(self):
        spec = BuildingSpec(width=4, height=2, depth=4)
        assert spec.contains(-2, 0, -2)
        assert spec.contains(1, 1, 1)
        assert not spec.contains(2, 0, 0)
        assert not spec.contains(-3, 0, 0)
        assert not spec.contains(0, 2, 0)
        assert not spec.contains(0, -1, 0)
        assert not spec.contains(0, 0, 2)

    def test_save_load(self, tmp_path):
        spec = BuildingSpec(origin_x=10, origin_y=-5, width=6, height=3, depth=4, octaves=4)
        path = spec.save(tmp_path / "specs" / "spec.json")
        assert BuildingSpec.load(path) == spec


class TestVoxel:
    def test_direction_offsets(self):
        assert Direction.NORTH.offset == (-1, 0, 0)
        assert Direction.SOUTH.offset == (1, 0, 0)
        assert Direction.WEST.offset == (0, 0, -1)
        assert Direction.EAST.offset == (0, 0, 1)
        assert Direction.UP.offset == (0, 1, 0)
        assert Direction.DOWN.offset == (0, -1, 0)

    def test_horizontal(self):
        assert Direction.NORTH.is_horizontal
        assert not Direction.UP.is_horizontal

    def test_neighbors_lookup(self):
        n = Neighbors(north=True, up=True)
        assert n[Direction.NORTH] is True
        assert n[Direction.SOUTH] is False
        assert n[Direction.UP] is True
        assert n.any_horizontal

    def test_ceiling_when_empty_under_solid(self):
        v = Voxel(x=0, y=0, z=0, solid=False, neighbors=Neighbors(up=True))
        assert v.ceiling

    def test_no_ceiling_when_solid(self):
        v = Voxel(x=0, y=0, z=0, solid=True, neighbors=Neighbors(up=True))
        assert not v.ceiling

    def test_no_ceiling_when_nothing_above(self):
        v = Voxel(x=0, y=0, z=0, solid=False, neighbors=Neighbors(north=True))
        assert not v.ceiling

    def test_immutable(self):
        v = Voxel(x=0, y=0, z=0, solid=True)
        with pytest.raises(AttributeError):
            v.solid = False


class TestPlacedElement:
    def test_yaw(self):
        e = PlacedElement(
            kind=PieceKind.WALL_PLAIN,
            cell=(0, 0, 0),
            position=Vec3(x=0, y=0, z=0),
            quarter_turns=3,
            material=MaterialGroup.WOOD,
        )
        assert e.yaw == pytest.approx(3 * math.pi / 2)
        assert e.yaw_degrees == 270

    def test_quarter_turns_bounded(self):
        with pytest.raises(ValidationError):
            PlacedElement(
                kind=PieceKind.PILLAR,
                cell=(0, 0, 0),
                position=Vec3(x=0, y=0, z=0),
                quarter_turns=4,
                material=MaterialGroup.WOOD,
            )

    def test_world_position(self):
        e = PlacedElement(
            kind=PieceKind.PILLAR,
            cell=(1, 0, 1),
            position=Vec3(x=1.0, y=-1.25, z=2.0),
            material=MaterialGroup.WOOD,
        )
        assert e.world_position(10, 20).isclose(Vec3(x=11.0, y=-1.25, z=22.0))

    def test_categories(self):
        assert PieceKind.ROAD_PLATE.category == "floor"
        assert PieceKind.ROOF_SLANT.category == "roof"
        assert PieceKind.WALL_DOOR.category == "wall"
        assert PieceKind.PILLAR.category == "pillar"
        assert PieceKind.BANNER.category == "decoration"


class TestGeneratedBuilding:
    def _building(self):
        wall = PlacedElement(
            kind=PieceKind.WALL_CROSS,
            cell=(0, 0, 0),
            position=Vec3(x=-1.25, y=-0.95, z=0),
            material=MaterialGroup.WOOD,
            decoration=Decoration(
                kind=PieceKind.SHIELD,
                offset=Vec3(x=-0.2, y=0.8, z=0),
                quarter_turns=2,
                material=MaterialGroup.DARK_STONE,
            ),
        )
        floor = PlacedElement(
            kind=PieceKind.FLOOR_PLATE,
            cell=(0, 0, 0),
            position=Vec3(x=0, y=-1.25, z=0),
            material=MaterialGroup.WOOD,
        )
        palette = Palette(colors={
            MaterialGroup.WOOD: PaletteColor(r=0.3, g=0.2, b=0.1, hex="#4C3A1E"),
        })
        return GeneratedBuilding(
            spec=BuildingSpec(width=1, height=1, depth=1),
            seed=3,
            elements=[floor, wall],
            palette=palette,
        )

    def test_count_by_kind_includes_decorations(self):
        counts = self._building().count_by_kind()
        assert counts == {"floor_plate": 1, "shield": 1, "wall_cross": 1}

    def test_lookups(self):
        b = self._building()
        assert len(b.at_cell(0, 0, 0)) == 2
        assert b.at_cell(1, 0, 0) == []
        assert [e.kind for e in b.in_category("wall")] == [PieceKind.WALL_CROSS]
        assert len(b.of_kind(PieceKind.FLOOR_PLATE, PieceKind.WALL_CROSS)) == 2

    def test_colored_elements(self):
        pairs = list(self._building().colored_elements())
        assert len(pairs) == 3
        assert pairs[0][1].hex == "#4C3A1E"
        # decoration's group has no color in this palette
        assert pairs[2][0].kind == PieceKind.SHIELD
        assert pairs[2][1] is None

    def test_save_load(self, tmp_path):
        b = self._building()
        loaded = GeneratedBuilding.load(b.save(tmp_path / "b.json"))
        assert loaded == b
        assert loaded.elements[1].decoration.kind == PieceKind.SHIELD
        assert loaded.elements[0].cell == (0, 0, 0)
