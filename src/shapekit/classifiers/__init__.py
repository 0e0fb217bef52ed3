"""Pure classification of triangles and quadrilaterals from their lengths."""

from shapekit.classifiers.quadrilateral import QuadType, classify_quadrilateral
from shapekit.classifiers.tolerance import ABS_TOL, REL_TOL, is_close
from shapekit.classifiers.triangle import (
    AngleType,
    SideType,
    classify_angle,
    classify_sides,
)

__all__ = [
    "ABS_TOL",
    "REL_TOL",
    "is_close",
    "AngleType",
    "SideType",
    "QuadType",
    "classify_angle",
    "classify_sides",
    "classify_quadrilateral",
]
