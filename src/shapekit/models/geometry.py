"""Geometric primitives: points and vectors in the plane.

Coordinates must be finite: NaN and infinities fail validation.
Point equality is exact, so it always agrees with the hash; callers
that need a tolerance compare distances instead.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict

from shapekit.errors import DegenerateVectorError


class Point(BaseModel):
    """Immutable 2D point with finite coordinates."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.sqrt((other.x - self.x) ** 2 + (other.y - self.y) ** 2)


class Vector(BaseModel):
    """Immutable 2D displacement (dx, dy)."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    dx: float
    dy: float

    @classmethod
    def between(cls, start: Point, end: Point) -> Vector:
        """Vector pointing from start to end."""
        return cls(dx=end.x - start.x, dy=end.y - start.y)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.dx * self.dx + self.dy * self.dy)

    def dot(self, other: Vector) -> float:
        return self.dx * other.dx + self.dy * other.dy

    def angle_to(self, other: Vector) -> float:
        """Angle between the two vectors in degrees, in [0, 180].

        Raises DegenerateVectorError if either vector has zero length,
        since the angle is undefined there.
        """
        magnitudes = self.magnitude * other.magnitude
        if magnitudes == 0:
            raise DegenerateVectorError(
                f"Angle undefined for zero-length vector "
                f"({self.dx}, {self.dy}) / ({other.dx}, {other.dy})"
            )
        cosine = self.dot(other) / magnitudes
        # Round-off can push |cos| slightly past 1 for parallel vectors
        cosine = max(-1.0, min(1.0, cosine))
        return math.degrees(math.acos(cosine))


def distance(p: Point, q: Point) -> float:
    """Euclidean distance between two points."""
    return p.distance_to(q)


def magnitude(v: Vector) -> float:
    return v.magnitude


def dot(v1: Vector, v2: Vector) -> float:
    return v1.dot(v2)


def angle_degrees(v1: Vector, v2: Vector) -> float:
    """Angle between two vectors in degrees. See Vector.angle_to."""
    return v1.angle_to(v2)
