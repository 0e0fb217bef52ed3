"""shapekit CLI.

Usage:
    python -m shapekit <command> [options]

Shape collections are JSON files written by ShapeAnalyzer.save().
Every command prints a JSON object with an "ok" flag to stdout.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from shapekit.analysis.analyzer import ShapeAnalyzer
from shapekit.errors import ShapeError
from shapekit.models.geometry import Point
from shapekit.models.shapes import (
    Quadrilateral,
    Shape,
    Triangle,
    quadrilateral,
    rectangle,
    rhombus,
    segment,
    square,
    triangle,
)

app = typer.Typer(
    name="shapekit",
    help="Perimeter, area, classification and extremal search for 2D shapes.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _fail(message: str) -> None:
    _output({"ok": False, "error": message})
    raise typer.Exit(1)


def _load_analyzer(path: Path) -> ShapeAnalyzer:
    """Load a shape collection, exiting with a JSON error on failure."""
    if not path.exists():
        _fail(f"File not found: {path}")
    try:
        return ShapeAnalyzer.load(path)
    except ValidationError as e:
        _fail(f"Invalid shape file {path}: {e.error_count()} error(s): {e.errors()[0]['msg']}")
    except UnicodeDecodeError as e:
        _fail(f"Invalid shape file {path}: not UTF-8 text ({e.reason})")
    except OSError as e:
        _fail(f"Cannot read {path}: {e.strerror or e}")


def _shape_summary(shape: Shape) -> dict:
    return {
        "kind": shape.kind,
        "label": shape.label,
        "area": shape.area,
        "perimeter": shape.perimeter,
        "description": shape.description,
    }


def _shape_details(shape: Shape) -> dict:
    info = _shape_summary(shape)
    info["vertices"] = [[p.x, p.y] for p in shape.vertices]
    if isinstance(shape, Triangle):
        info["angle_type"] = shape.angle_type.value
        info["side_type"] = shape.side_type.value
    elif isinstance(shape, Quadrilateral):
        info["quad_type"] = shape.quad_type.value
    return info


def _extremes_json(analyzer: ShapeAnalyzer) -> dict:
    try:
        metric = analyzer.extremal_by_metric()
        text = analyzer.extremal_by_description()
    except ShapeError as e:
        _fail(str(e))
    return {
        "ok": True,
        "count": len(analyzer.shapes),
        "metric": {
            "min_area": _shape_summary(metric.min_area),
            "max_area": _shape_summary(metric.max_area),
            "min_perimeter": _shape_summary(metric.min_perimeter),
            "max_perimeter": _shape_summary(metric.max_perimeter),
        },
        "description": {
            "longest": _shape_summary(text.longest),
            "shortest": _shape_summary(text.shortest),
            "largest": _shape_summary(text.largest),
            "smallest": _shape_summary(text.smallest),
        },
    }


def demo_analyzer() -> ShapeAnalyzer:
    """The six sample shapes: one of every kind."""
    origin = Point(x=0, y=0)
    return ShapeAnalyzer.from_shapes([
        segment(origin, Point(x=3, y=0)),
        triangle(origin, Point(x=3, y=0), Point(x=0, y=4)),
        quadrilateral(origin, Point(x=4, y=0), Point(x=4, y=3), Point(x=0, y=3)),
        rhombus(origin, width=4, height=2),
        rectangle(origin, width=5, height=3),
        square(origin, side=4),
    ])


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command()
def version() -> None:
    """Show version."""
    from shapekit import __version__

    _output({"ok": True, "version": __version__})


@app.command()
def describe(path: Path = typer.Argument(..., help="Shape collection JSON file")):
    """Geometry and classification of every shape in a collection."""
    analyzer = _load_analyzer(path)
    _output({
        "ok": True,
        "count": len(analyzer.shapes),
        "shapes": [_shape_details(s) for s in analyzer.shapes],
    })


@app.command()
def extremes(path: Path = typer.Argument(..., help="Shape collection JSON file")):
    """Min/max area and perimeter, and description extremes."""
    analyzer = _load_analyzer(path)
    _output(_extremes_json(analyzer))


@app.command()
def demo(
    save: Optional[Path] = typer.Option(None, "--save", help="Also write the sample collection here"),
):
    """Run the extremal queries on the sample shapes."""
    analyzer = demo_analyzer()
    if save is not None:
        analyzer.save(save)
    _output(_extremes_json(analyzer))


if __name__ == "__main__":
    app()
