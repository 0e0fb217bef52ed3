"""Shape models: segment, triangle, quadrilateral and its construction recipes.

The shape family is closed. ``Shape`` is a discriminated union over the
``kind`` field, so a serialized shape always comes back as the right class:

- Segment: kind "segment", 2 vertices
- Triangle: kind "triangle", 3 vertices
- Quadrilateral: kind "quadrilateral", "rhombus", "rectangle" or "square", 4 vertices

Rhombus, rectangle and square are not separate classes. They are recipes
(``rhombus()``, ``rectangle()``, ``square()``) that compute the four
vertices and tag the resulting Quadrilateral with their kind and label.
All geometry treats the four-vertex kinds identically.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Annotated, Any, ClassVar, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from shapekit.classifiers import (
    AngleType,
    QuadType,
    SideType,
    classify_angle,
    classify_quadrilateral,
    classify_sides,
)
from shapekit.errors import DegenerateShapeError, InvalidDimensionError
from shapekit.models.geometry import Point, Vector

logger = logging.getLogger(__name__)


class ShapeKind(str, Enum):
    """Tag of the shape variant."""

    SEGMENT = "segment"
    TRIANGLE = "triangle"
    QUADRILATERAL = "quadrilateral"
    RHOMBUS = "rhombus"
    RECTANGLE = "rectangle"
    SQUARE = "square"


class ShapeBase(BaseModel):
    """Common contract for all shapes.

    Without specialized geometry both perimeter and area are 0.
    """

    model_config = ConfigDict(frozen=True)

    vertex_count: ClassVar[int] = 0
    default_kind: ClassVar[str] = ""

    label: str = Field(default="", description="Display label, defaults to the kind")
    vertices: tuple[Point, ...]

    @model_validator(mode="before")
    @classmethod
    def default_label(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("label"):
            kind = data.get("kind") or cls.default_kind
            if kind:
                data = {**data, "label": ShapeKind(kind).value}
        return data

    @field_validator("vertices")
    @classmethod
    def exact_vertex_count(cls, v: tuple[Point, ...]) -> tuple[Point, ...]:
        if len(v) != cls.vertex_count:
            raise ValueError(
                f"{cls.__name__} must have exactly {cls.vertex_count} vertices, got {len(v)}"
            )
        return v

    @property
    def perimeter(self) -> float:
        return 0.0

    @property
    def area(self) -> float:
        return 0.0

    @property
    def description(self) -> str:
        """One-line report: label, vertex count, area and perimeter."""
        return (
            f"{self.label} with {len(self.vertices)} points, "
            f"area {self.area} and perimeter {self.perimeter}"
        )


class Segment(ShapeBase):
    """A straight segment from start to end. Its area is 0 by definition."""

    vertex_count: ClassVar[int] = 2
    default_kind: ClassVar[str] = ShapeKind.SEGMENT.value

    kind: Literal["segment"] = "segment"

    @property
    def start(self) -> Point:
        return self.vertices[0]

    @property
    def end(self) -> Point:
        return self.vertices[1]

    @property
    def vector(self) -> Vector:
        """Direction vector from start to end."""
        return Vector.between(self.start, self.end)

    @property
    def perimeter(self) -> float:
        """Segment length."""
        return self.start.distance_to(self.end)

    @property
    def description(self) -> str:
        return (
            f"{self.label} with 2 points, length {self.perimeter} "
            f"from ({self.start.x}, {self.start.y}) to ({self.end.x}, {self.end.y}), "
            f"area {self.area} and perimeter {self.perimeter}"
        )

    def angle_between(self, other: Segment) -> float:
        """Angle between the direction vectors of two segments, in degrees.

        Raises DegenerateVectorError if either segment has zero length.
        """
        return self.vector.angle_to(other.vector)


class Triangle(ShapeBase):
    """Triangle with vertices a, b, c."""

    vertex_count: ClassVar[int] = 3
    default_kind: ClassVar[str] = ShapeKind.TRIANGLE.value

    kind: Literal["triangle"] = "triangle"

    @property
    def a(self) -> Point:
        return self.vertices[0]

    @property
    def b(self) -> Point:
        return self.vertices[1]

    @property
    def c(self) -> Point:
        return self.vertices[2]

    @property
    def ab(self) -> float:
        return self.a.distance_to(self.b)

    @property
    def bc(self) -> float:
        return self.b.distance_to(self.c)

    @property
    def ca(self) -> float:
        return self.c.distance_to(self.a)

    @property
    def sides(self) -> tuple[float, float, float]:
        return (self.ab, self.bc, self.ca)

    @property
    def perimeter(self) -> float:
        return self.ab + self.bc + self.ca

    def heron_area(self, strict: bool = False) -> float:
        """Area by Heron's formula.

        Near-collinear vertices can make the radicand slightly negative
        through round-off. By default that is clamped to 0; with
        strict=True a DegenerateShapeError is raised instead.
        """
        ab, bc, ca = self.sides
        s = (ab + bc + ca) / 2
        radicand = s * (s - ab) * (s - bc) * (s - ca)
        if radicand < 0:
            if strict:
                raise DegenerateShapeError(
                    f"Heron radicand is negative ({radicand}) for {self.label}"
                )
            logger.debug("Clamping negative Heron radicand %s to 0", radicand)
            return 0.0
        return math.sqrt(radicand)

    @property
    def area(self) -> float:
        return self.heron_area()

    @property
    def angle_type(self) -> AngleType:
        return classify_angle(self.sides)

    @property
    def side_type(self) -> SideType:
        return classify_sides(self.sides)

    @property
    def description(self) -> str:
        return (
            f"{self.label} ({self.side_type.value}, {self.angle_type.value}) "
            f"with 3 points, area {self.area} and perimeter {self.perimeter}"
        )


class Quadrilateral(ShapeBase):
    """Quadrilateral with vertices a, b, c, d in traversal order.

    The vertex order is significant: sides are ab, bc, cd, da and the
    shoelace area is taken over the vertices exactly as given.
    """

    vertex_count: ClassVar[int] = 4
    default_kind: ClassVar[str] = ShapeKind.QUADRILATERAL.value

    kind: Literal["quadrilateral", "rhombus", "rectangle", "square"] = "quadrilateral"

    @property
    def a(self) -> Point:
        return self.vertices[0]

    @property
    def b(self) -> Point:
        return self.vertices[1]

    @property
    def c(self) -> Point:
        return self.vertices[2]

    @property
    def d(self) -> Point:
        return self.vertices[3]

    @property
    def sides(self) -> tuple[float, float, float, float]:
        """Side lengths (ab, bc, cd, da)."""
        return (
            self.a.distance_to(self.b),
            self.b.distance_to(self.c),
            self.c.distance_to(self.d),
            self.d.distance_to(self.a),
        )

    @property
    def diagonals(self) -> tuple[float, float]:
        """Diagonal lengths (ac, bd)."""
        return (self.a.distance_to(self.c), self.b.distance_to(self.d))

    @property
    def perimeter(self) -> float:
        return sum(self.sides)

    @property
    def signed_area(self) -> float:
        """Shoelace area before the absolute value. Positive when counter-clockwise."""
        n = len(self.vertices)
        total = 0.0
        for i in range(n):
            j = (i + 1) % n
            total += self.vertices[i].x * self.vertices[j].y
            total -= self.vertices[i].y * self.vertices[j].x
        return total / 2.0

    @property
    def area(self) -> float:
        return abs(self.signed_area)

    @property
    def quad_type(self) -> QuadType:
        return classify_quadrilateral(self.sides, self.diagonals)

    @property
    def description(self) -> str:
        return (
            f"{self.label} ({self.quad_type.value}) with 4 points, "
            f"area {self.area} and perimeter {self.perimeter}"
        )


Shape = Annotated[Union[Segment, Triangle, Quadrilateral], Field(discriminator="kind")]


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------

def _require_positive(**dimensions: float) -> None:
    for name, value in dimensions.items():
        if not value > 0:
            raise InvalidDimensionError(f"{name} must be positive, got {value}")


def segment(start: Point, end: Point, label: Optional[str] = None) -> Segment:
    return Segment(vertices=(start, end), label=label or "")


def triangle(a: Point, b: Point, c: Point, label: Optional[str] = None) -> Triangle:
    return Triangle(vertices=(a, b, c), label=label or "")


def quadrilateral(
    a: Point, b: Point, c: Point, d: Point, label: Optional[str] = None
) -> Quadrilateral:
    return Quadrilateral(vertices=(a, b, c, d), label=label or "")


def rhombus(
    center: Point, width: float, height: float, label: Optional[str] = None
) -> Quadrilateral:
    """Rhombus centred on `center`, with diagonals `width` (x) and `height` (y).

    Vertices run top, right, bottom, left.
    """
    _require_positive(width=width, height=height)
    cx, cy = center.x, center.y
    return Quadrilateral(
        kind=ShapeKind.RHOMBUS.value,
        label=label or "",
        vertices=(
            Point(x=cx, y=cy + height / 2),
            Point(x=cx + width / 2, y=cy),
            Point(x=cx, y=cy - height / 2),
            Point(x=cx - width / 2, y=cy),
        ),
    )


def _axis_aligned_box(origin: Point, width: float, height: float) -> tuple[Point, ...]:
    ox, oy = origin.x, origin.y
    return (
        origin,
        Point(x=ox + width, y=oy),
        Point(x=ox + width, y=oy + height),
        Point(x=ox, y=oy + height),
    )


def rectangle(
    origin: Point, width: float, height: float, label: Optional[str] = None
) -> Quadrilateral:
    """Axis-aligned rectangle with its first vertex at `origin`."""
    _require_positive(width=width, height=height)
    return Quadrilateral(
        kind=ShapeKind.RECTANGLE.value,
        label=label or "",
        vertices=_axis_aligned_box(origin, width, height),
    )


def square(origin: Point, side: float, label: Optional[str] = None) -> Quadrilateral:
    """Axis-aligned square: the rectangle recipe with width == height."""
    _require_positive(side=side)
    return Quadrilateral(
        kind=ShapeKind.SQUARE.value,
        label=label or "",
        vertices=_axis_aligned_box(origin, side, side),
    )
