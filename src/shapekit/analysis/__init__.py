"""Extremal search over collections of shapes."""

from shapekit.analysis.analyzer import ShapeAnalyzer, max_by, min_by
from shapekit.analysis.listeners import (
    DescriptionCallback,
    DescriptionListener,
    deliver,
    notify_listener,
)
from shapekit.analysis.results import DescriptionExtremes, MetricExtremes

__all__ = [
    "ShapeAnalyzer",
    "min_by",
    "max_by",
    "MetricExtremes",
    "DescriptionExtremes",
    "DescriptionCallback",
    "DescriptionListener",
    "deliver",
    "notify_listener",
]
