"""shapekit: perimeter, area and classification for a fixed family of 2D shapes."""

from shapekit.analysis import (
    DescriptionExtremes,
    DescriptionListener,
    MetricExtremes,
    ShapeAnalyzer,
)
from shapekit.classifiers import AngleType, QuadType, SideType
from shapekit.errors import (
    DegenerateShapeError,
    DegenerateVectorError,
    EmptyCollectionError,
    InvalidDimensionError,
    ShapeError,
)
from shapekit.models import (
    Point,
    Quadrilateral,
    Segment,
    Shape,
    ShapeKind,
    Triangle,
    Vector,
    quadrilateral,
    rectangle,
    rhombus,
    segment,
    square,
    triangle,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Point",
    "Vector",
    "Shape",
    "ShapeKind",
    "Segment",
    "Triangle",
    "Quadrilateral",
    "segment",
    "triangle",
    "quadrilateral",
    "rhombus",
    "rectangle",
    "square",
    "AngleType",
    "SideType",
    "QuadType",
    "ShapeAnalyzer",
    "MetricExtremes",
    "DescriptionExtremes",
    "DescriptionListener",
    "ShapeError",
    "EmptyCollectionError",
    "DegenerateVectorError",
    "DegenerateShapeError",
    "InvalidDimensionError",
]
