"""Voxel Builder CLI.

Usage:
    python -m voxel_builder <command> [options]

Every command prints JSON to stdout. Failures print {"ok": false, ...}
and exit with status 1.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from pydantic import ValidationError

from voxel_builder.generators.building import generate_building, rebuild_oracle
from voxel_builder.models.building import GeneratedBuilding
from voxel_builder.models.spec import BuildingSpec
from voxel_builder.queries.layers import render_layer, render_layers
from voxel_builder.validators.structure import validate_structure

app = typer.Typer(
    name="voxel_builder",
    help="Voxel Builder — procedural voxel building generation.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _fail(message: str) -> NoReturn:
    _output({"ok": False, "error": message})
    raise typer.Exit(1)


def _load_building(path: Path) -> GeneratedBuilding:
    """Load a saved generation result."""
    if not path.exists():
        _fail(f"File not found: {path}")
    try:
        return GeneratedBuilding.load(path)
    except ValidationError as exc:
        _fail(f"Invalid building file {path}: {exc.error_count()} errors")


def _validate_json(building: GeneratedBuilding) -> dict:
    """Run structure checks and return structured results."""
    issues = validate_structure(building)
    return {
        "errors": sum(1 for i in issues if i.severity == "error"),
        "warnings": sum(1 for i in issues if i.severity == "warning"),
        "details": [
            {
                "severity": i.severity,
                "element_kind": i.element_kind,
                "cell": list(i.cell),
                "message": i.message,
            }
            for i in issues
        ],
    }


def _summary(building: GeneratedBuilding) -> dict:
    spec = building.spec
    return {
        "dimensions": {"width": spec.width, "height": spec.height, "depth": spec.depth},
        "origin": [spec.origin_x, spec.origin_y],
        "seed": building.seed,
        "elements": len(building.elements),
        "counts": building.count_by_kind(),
        "palette": building.palette.to_hex_map(),
    }


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
):
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------

@app.command()
def generate(
    width: int = typer.Option(8, "--width", "-w", help="Cells along X"),
    height: int = typer.Option(4, "--height", help="Layers"),
    depth: int = typer.Option(8, "--depth", "-d", help="Cells along Z"),
    x: float = typer.Option(0.0, "--x", help="Origin X"),
    y: float = typer.Option(0.0, "--y", help="Origin Y (world Z)"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    spec_file: Optional[Path] = typer.Option(
        None, "--spec", help="JSON BuildingSpec (overrides dimension options)"
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Save result JSON"),
):
    """Generate a building and print its summary."""
    try:
        if spec_file is not None:
            if not spec_file.exists():
                _fail(f"Spec file not found: {spec_file}")
            spec = BuildingSpec.load(spec_file)
        else:
            spec = BuildingSpec(origin_x=x, origin_y=y, width=width, height=height, depth=depth)
    except ValidationError as exc:
        _fail(f"Invalid spec: {exc.errors()[0]['loc']} {exc.errors()[0]['msg']}")

    building = generate_building(spec, seed=seed)
    result = {"ok": True, **_summary(building), "validation": _validate_json(building)}
    if output is not None:
        result["saved"] = str(building.save(output))
    _output(result)


# ---------------------------------------------------------------------------
# Read-only commands
# ---------------------------------------------------------------------------

@app.command()
def inspect(path: Path = typer.Argument(..., help="Saved building JSON")):
    """Summarize a saved building."""
    building = _load_building(path)
    _output({"ok": True, **_summary(building)})


@app.command()
def validate(path: Path = typer.Argument(..., help="Saved building JSON")):
    """Run structure checks on a saved building."""
    building = _load_building(path)
    _output({"ok": True, "validation": _validate_json(building)})


@app.command()
def layers(
    path: Path = typer.Argument(..., help="Saved building JSON"),
    layer: Optional[int] = typer.Option(None, "--layer", "-l", help="Only this layer"),
):
    """Text occupancy maps, regenerated from the stored spec and seed."""
    building = _load_building(path)
    try:
        oracle = rebuild_oracle(building)
        slices = [render_layer(oracle, layer)] if layer is not None else render_layers(oracle)
    except ValueError as exc:
        _fail(str(exc))
    _output({"ok": True, "layers": [s.to_dict() for s in slices]})


@app.command()
def version() -> None:
    """Show version."""
    from voxel_builder import __version__

    _output({"ok": True, "version": __version__})


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    app()
