"""Triangle classification by angle and by side lengths."""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from shapekit.classifiers.tolerance import is_close


class AngleType(str, Enum):
    """Triangle classification by its largest angle."""

    ACUTE = "acute"
    RIGHT = "right"
    OBTUSE = "obtuse"


class SideType(str, Enum):
    """Triangle classification by how many sides are equal."""

    EQUILATERAL = "equilateral"
    ISOSCELES = "isosceles"
    SCALENE = "scalene"


def _check_three(sides: Sequence[float]) -> None:
    if len(sides) != 3:
        raise ValueError(f"A triangle has 3 sides, got {len(sides)}")


def classify_angle(sides: Sequence[float]) -> AngleType:
    """Classify a triangle by comparing s0² + s1² with s2² (sides sorted ascending).

    Args:
        sides: The three side lengths, in any order.

    Returns:
        RIGHT when the two are equal within tolerance, ACUTE when the sum
        is larger, OBTUSE otherwise.
    """
    _check_three(sides)
    s0, s1, s2 = sorted(sides)
    legs = s0 * s0 + s1 * s1
    hypotenuse = s2 * s2

    if is_close(legs, hypotenuse):
        return AngleType.RIGHT
    if legs > hypotenuse:
        return AngleType.ACUTE
    return AngleType.OBTUSE


def classify_sides(sides: Sequence[float]) -> SideType:
    """Classify a triangle as equilateral, isosceles or scalene."""
    _check_three(sides)
    ab, bc, ca = sides
    if is_close(ab, bc) and is_close(bc, ca):
        return SideType.EQUILATERAL
    if is_close(ab, bc) or is_close(bc, ca) or is_close(ca, ab):
        return SideType.ISOSCELES
    return SideType.SCALENE
