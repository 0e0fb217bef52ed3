"""Synchronous delivery of description extremes to callers.

The analyzer returns its result directly. These helpers hand the same
result to a callback or listener object right away; nothing keeps a
reference to the receiver after the call.
"""

from __future__ import annotations

from typing import Callable, Protocol

from shapekit.analysis.results import DescriptionExtremes
from shapekit.models.shapes import Shape

DescriptionCallback = Callable[[Shape, Shape, Shape, Shape], None]


class DescriptionListener(Protocol):
    """Receives each description extreme through its own method."""

    def on_longest(self, shape: Shape) -> None: ...

    def on_shortest(self, shape: Shape) -> None: ...

    def on_largest(self, shape: Shape) -> None: ...

    def on_smallest(self, shape: Shape) -> None: ...


def deliver(extremes: DescriptionExtremes, callback: DescriptionCallback) -> None:
    """Call callback(longest, shortest, largest, smallest)."""
    callback(extremes.longest, extremes.shortest, extremes.largest, extremes.smallest)


def notify_listener(extremes: DescriptionExtremes, listener: DescriptionListener) -> None:
    """Notify a listener of each extreme, in longest/shortest/largest/smallest order."""
    listener.on_longest(extremes.longest)
    listener.on_shortest(extremes.shortest)
    listener.on_largest(extremes.largest)
    listener.on_smallest(extremes.smallest)
