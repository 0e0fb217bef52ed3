"""Shape data models."""

from shapekit.models.geometry import (
    Point,
    Vector,
    angle_degrees,
    distance,
    dot,
    magnitude,
)
from shapekit.models.shapes import (
    Quadrilateral,
    Segment,
    Shape,
    ShapeBase,
    ShapeKind,
    Triangle,
    quadrilateral,
    rectangle,
    rhombus,
    segment,
    square,
    triangle,
)

__all__ = [
    "Point",
    "Vector",
    "distance",
    "magnitude",
    "dot",
    "angle_degrees",
    "ShapeBase",
    "ShapeKind",
    "Shape",
    "Segment",
    "Triangle",
    "Quadrilateral",
    "segment",
    "triangle",
    "quadrilateral",
    "rhombus",
    "rectangle",
    "square",
]
