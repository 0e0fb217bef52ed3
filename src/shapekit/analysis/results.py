"""Result types returned by the shape analyzer."""

from __future__ import annotations

from dataclasses import dataclass

from shapekit.models.shapes import Shape


@dataclass(frozen=True)
class MetricExtremes:
    """Shapes with the smallest/largest area and perimeter."""

    min_area: Shape
    max_area: Shape
    min_perimeter: Shape
    max_perimeter: Shape


@dataclass(frozen=True)
class DescriptionExtremes:
    """Shapes with extreme description strings.

    longest/shortest compare description length, largest/smallest
    compare descriptions lexicographically.
    """

    longest: Shape
    shortest: Shape
    largest: Shape
    smallest: Shape
