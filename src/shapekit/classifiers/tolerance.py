"""Tolerance-based float equality used by the classifiers.

Classification compares side lengths and squared sides for equality.
Exact float equality misses e.g. the 3-4-5 triangle built from rotated
vertices, so equality here means "within REL_TOL of each other"
(with ABS_TOL as a floor near zero).
"""

from __future__ import annotations

import math

REL_TOL = 1e-9
ABS_TOL = 1e-12


def is_close(a: float, b: float) -> bool:
    """True if a and b are equal within the classifier tolerance."""
    return math.isclose(a, b, rel_tol=REL_TOL, abs_tol=ABS_TOL)
