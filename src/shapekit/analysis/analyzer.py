"""ShapeAnalyzer: an ordered shape collection with extremal queries.

Tie-breaking follows a sequential scan in insertion order, replacing the
current best only when the comparison says so:

- metric extremes (area, perimeter): strict improvement only, so the
  first-inserted shape wins ties for both min and max
- description extremes: shortest/smallest keep the first on ties,
  longest/largest take the last
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence, TypeVar

from pydantic import BaseModel, Field

from shapekit.analysis.listeners import (
    DescriptionCallback,
    DescriptionListener,
    deliver,
    notify_listener,
)
from shapekit.analysis.results import DescriptionExtremes, MetricExtremes
from shapekit.errors import EmptyCollectionError
from shapekit.models.shapes import Shape

logger = logging.getLogger(__name__)

T = TypeVar("T")


def min_by(items: Sequence[T], key: Callable[[T], object]) -> T:
    """First item with the smallest key (replaces only on key < best)."""
    if not items:
        raise EmptyCollectionError("min_by() of an empty sequence")
    best = items[0]
    best_key = key(best)
    for item in items[1:]:
        k = key(item)
        if k < best_key:
            best, best_key = item, k
    return best


def max_by(items: Sequence[T], key: Callable[[T], object], last_wins: bool = False) -> T:
    """Item with the largest key.

    With last_wins=False the best is replaced only on best < key, so the
    first of equal items wins. With last_wins=True it is replaced unless
    key < best, so the last of equal items wins.
    """
    if not items:
        raise EmptyCollectionError("max_by() of an empty sequence")
    best = items[0]
    best_key = key(best)
    for item in items[1:]:
        k = key(item)
        if best_key < k or (last_wins and not k < best_key):
            best, best_key = item, k
    return best


class ShapeAnalyzer(BaseModel):
    """Ordered, append-only collection of shapes.

    Not synchronized: callers sharing one analyzer across threads must
    serialize add_shape against the queries themselves.
    """

    shapes: list[Shape] = Field(default_factory=list)

    @classmethod
    def from_shapes(cls, shapes: Iterable[Shape]) -> ShapeAnalyzer:
        return cls(shapes=list(shapes))

    # ── Persistence ───────────────────────────────────────────────────

    @classmethod
    def load(cls, path: str | Path) -> ShapeAnalyzer:
        """Load a shape collection from a JSON file."""
        path = Path(path)
        analyzer = cls.model_validate_json(path.read_text())
        logger.info("Loaded %d shapes from %s", len(analyzer.shapes), path)
        return analyzer

    def save(self, path: str | Path) -> Path:
        """Save the collection to a JSON file. Creates parent dirs if needed."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2))
        logger.info("Saved %d shapes to %s", len(self.shapes), path)
        return path

    # ── Collection ────────────────────────────────────────────────────

    def add_shape(self, shape: Shape) -> None:
        self.shapes.append(shape)
        logger.debug("Added %s (%d shapes)", shape.label, len(self.shapes))

    def __len__(self) -> int:
        return len(self.shapes)

    def _require_shapes(self, query: str) -> list[Shape]:
        if not self.shapes:
            logger.warning("%s called on an empty shape collection", query)
            raise EmptyCollectionError(f"{query}: no shapes to analyze")
        return self.shapes

    # ── Queries ───────────────────────────────────────────────────────

    def extremal_by_metric(self) -> MetricExtremes:
        """Shapes with the smallest and largest area and perimeter.

        Raises:
            EmptyCollectionError: if the collection is empty.
        """
        shapes = self._require_shapes("extremal_by_metric")
        result = MetricExtremes(
            min_area=min_by(shapes, lambda s: s.area),
            max_area=max_by(shapes, lambda s: s.area),
            min_perimeter=min_by(shapes, lambda s: s.perimeter),
            max_perimeter=max_by(shapes, lambda s: s.perimeter),
        )
        logger.debug(
            "Metric extremes over %d shapes: area %s..%s, perimeter %s..%s",
            len(shapes),
            result.min_area.label,
            result.max_area.label,
            result.min_perimeter.label,
            result.max_perimeter.label,
        )
        return result

    def extremal_by_description(self) -> DescriptionExtremes:
        """Shapes with the longest, shortest, lexicographically largest and
        smallest description.

        Raises:
            EmptyCollectionError: if the collection is empty.
        """
        shapes = self._require_shapes("extremal_by_description")
        # Descriptions are derived on every access; compute each once.
        described = [(shape, shape.description) for shape in shapes]

        def length(pair: tuple[Shape, str]) -> int:
            return len(pair[1])

        def text(pair: tuple[Shape, str]) -> str:
            return pair[1]

        result = DescriptionExtremes(
            longest=max_by(described, length, last_wins=True)[0],
            shortest=min_by(described, length)[0],
            largest=max_by(described, text, last_wins=True)[0],
            smallest=min_by(described, text)[0],
        )
        logger.debug("Description extremes over %d shapes", len(shapes))
        return result

    def find_descriptions(
        self,
        callback: Optional[DescriptionCallback] = None,
        listener: Optional[DescriptionListener] = None,
    ) -> DescriptionExtremes:
        """Compute description extremes and hand them to callback and/or listener.

        Delivery happens synchronously before returning. The result is
        returned either way.
        """
        extremes = self.extremal_by_description()
        if callback is not None:
            deliver(extremes, callback)
        if listener is not None:
            notify_listener(extremes, listener)
        return extremes
