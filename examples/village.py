"""Small village — three buildings side by side.

Generates three seeded buildings along the X axis, validates each one and
prints the placement list a renderer would consume.

   Z
   ↑
   |
   +--- X

   [A]    [B]    [C]
  x=-30   x=0   x=30
"""

from pathlib import Path

from voxel_builder.export.placements import catalog_resolver, resolve_placements
from voxel_builder.generators.building import generate_building
from voxel_builder.models import BuildingSpec, PieceKind
from voxel_builder.validators.structure import validate_structure

# Stand-in prefab catalog; a real renderer maps these to its own assets.
CATALOG = {kind: f"prefabs/{kind.value}" for kind in PieceKind}


def main() -> None:
    out_dir = Path(__file__).parent / "output"
    resolver = catalog_resolver(CATALOG)

    for i, origin_x in enumerate((-30.0, 0.0, 30.0)):
        spec = BuildingSpec(origin_x=origin_x, width=6, height=4, depth=6)
        building = generate_building(spec, seed=100 + i)

        issues = validate_structure(building)
        print(f"Building {i}: {len(building.elements)} elements, {len(issues)} issues")
        for kind, count in building.count_by_kind().items():
            print(f"  {kind:20s} {count}")

        placements = resolve_placements(building, resolver, world=True)
        first = placements[0]
        print(
            f"  first: {first.prefab} at ({first.position.x:.2f}, "
            f"{first.position.y:.2f}, {first.position.z:.2f})"
        )
        print(f"  palette: {building.palette.to_hex_map()}")

        building.save(out_dir / f"building_{i}.json")


if __name__ == "__main__":
    main()
