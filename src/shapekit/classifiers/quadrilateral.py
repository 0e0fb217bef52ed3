"""Quadrilateral classification from side and diagonal lengths."""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from shapekit.classifiers.tolerance import is_close


class QuadType(str, Enum):
    """Structural type of a quadrilateral."""

    SQUARE = "square"
    RHOMBUS = "rhombus"
    RECTANGLE = "rectangle"
    OTHER = "other"


def classify_quadrilateral(
    sides: Sequence[float], diagonals: Sequence[float]
) -> QuadType:
    """Classify a quadrilateral.

    Checks run in priority order and the first match wins:

    1. all four sides equal and both diagonals equal -> SQUARE
    2. all four sides equal -> RHOMBUS
    3. ab == cd, bc == da and both diagonals equal -> RECTANGLE
    4. anything else -> OTHER

    Args:
        sides: Side lengths (ab, bc, cd, da) in traversal order.
        diagonals: Diagonal lengths (ac, bd).
    """
    if len(sides) != 4 or len(diagonals) != 2:
        raise ValueError(
            f"Expected 4 sides and 2 diagonals, got {len(sides)} and {len(diagonals)}"
        )
    ab, bc, cd, da = sides
    ac, bd = diagonals

    all_sides_equal = all(is_close(s, ab) for s in sides)
    diagonals_equal = is_close(ac, bd)

    if all_sides_equal and diagonals_equal:
        return QuadType.SQUARE
    if all_sides_equal:
        return QuadType.RHOMBUS
    if is_close(ab, cd) and is_close(bc, da) and diagonals_equal:
        return QuadType.RECTANGLE
    return QuadType.OTHER
