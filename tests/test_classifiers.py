"""Tests for the triangle and quadrilateral classifiers."""

import math

import pytest

from shapekit.classifiers import (
    AngleType,
    QuadType,
    SideType,
    classify_angle,
    classify_quadrilateral,
    classify_sides,
    is_close,
)


class TestTolerance:
    def test_close(self):
        assert is_close(1.0, 1.0 + 1e-12)

    def test_not_close(self):
        assert not is_close(1.0, 1.0 + 1e-6)

    def test_zero(self):
        assert is_close(0.0, 1e-13)


class TestAngleType:
    def test_right(self):
        assert classify_angle([3, 4, 5]) == AngleType.RIGHT

    def test_order_does_not_matter(self):
        assert classify_angle([5, 3, 4]) == AngleType.RIGHT

    def test_right_within_tolerance(self):
        # sqrt(2) legs: exact float equality would miss 1² + 1² == sqrt(2)²
        assert classify_angle([1.0, 1.0, math.sqrt(2)]) == AngleType.RIGHT

    def test_acute(self):
        assert classify_angle([2, 2, 2]) == AngleType.ACUTE

    def test_obtuse(self):
        assert classify_angle([2, 2, 3.5]) == AngleType.OBTUSE

    def test_wrong_count(self):
        with pytest.raises(ValueError, match="3 sides"):
            classify_angle([1, 2])


class TestSideType:
    def test_equilateral(self):
        assert classify_sides([2, 2, 2]) == SideType.EQUILATERAL

    def test_equilateral_within_tolerance(self):
        assert classify_sides([2.0, 1.9999999999999998, 2.0]) == SideType.EQUILATERAL

    @pytest.mark.parametrize("sides", [[2, 2, 3], [3, 2, 2], [2, 3, 2]])
    def test_isosceles_any_pair(self, sides):
        assert classify_sides(sides) == SideType.ISOSCELES

    def test_scalene(self):
        assert classify_sides([3, 4, 5]) == SideType.SCALENE


class TestQuadType:
    def test_square(self):
        assert classify_quadrilateral([4, 4, 4, 4], [5.657, 5.657]) == QuadType.SQUARE

    def test_rhombus(self):
        assert classify_quadrilateral([5, 5, 5, 5], [6, 8]) == QuadType.RHOMBUS

    def test_rectangle(self):
        assert classify_quadrilateral([5, 3, 5, 3], [34 ** 0.5, 34 ** 0.5]) == QuadType.RECTANGLE

    def test_parallelogram_is_other(self):
        # opposite sides equal but diagonals differ
        assert classify_quadrilateral([5, 3, 5, 3], [7, 4]) == QuadType.OTHER

    def test_other(self):
        assert classify_quadrilateral([1, 2, 3, 4], [3, 3]) == QuadType.OTHER

    def test_square_checked_before_rhombus(self):
        # equal sides and equal diagonals satisfy both; square has priority
        result = classify_quadrilateral([1, 1, 1, 1], [math.sqrt(2), math.sqrt(2)])
        assert result == QuadType.SQUARE

    def test_wrong_counts(self):
        with pytest.raises(ValueError):
            classify_quadrilateral([1, 1, 1], [1, 1])

    def test_enum_values(self):
        assert QuadType.OTHER.value == "other"
        assert AngleType.RIGHT == "right"
