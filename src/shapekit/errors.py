"""Error types raised by shapekit.

All of them are local, recoverable conditions: each query either fully
succeeds or raises one of these to its immediate caller.
"""

from __future__ import annotations


class ShapeError(Exception):
    """Base class for shapekit errors."""


class EmptyCollectionError(ShapeError, LookupError):
    """An analyzer query was made against an empty shape collection."""


class DegenerateVectorError(ShapeError, ValueError):
    """An angle was requested for a zero-magnitude vector."""


class DegenerateShapeError(ShapeError, ValueError):
    """Heron's formula hit a negative radicand (near-collinear triangle)."""


class InvalidDimensionError(ShapeError, ValueError):
    """A construction recipe got a non-positive width, height or side."""
