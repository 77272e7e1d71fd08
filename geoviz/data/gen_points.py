"""Random point sets for demos and tests.

Sampling goes through an explicit ``random.Random`` so that a seed reproduces
the same point set, and therefore the same trace.
"""

from __future__ import annotations

import random
from typing import List, Sequence, Tuple

from geoviz.algs.geometry import Point, by_x, to_points
from geoviz.common.constants import MAX_X, MAX_Y


def random_points(
    rng: random.Random,
    n: int,
    *,
    max_x: float = MAX_X,
    max_y: float = MAX_Y,
) -> Tuple[Point, ...]:
    if n < 0:
        raise ValueError("n must be non-negative")
    if max_x <= 0.0 or max_y <= 0.0:
        raise ValueError("scene extents must be positive")
    return tuple(Point(rng.uniform(0.0, max_x), rng.uniform(0.0, max_y)) for _ in range(n))


def random_grid_points(
    rng: random.Random,
    n: int,
    *,
    size: int = 10,
) -> Tuple[Point, ...]:
    """Integer-valued points; small grids produce duplicates and collinear runs."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return tuple(Point(float(rng.randint(0, size)), float(rng.randint(0, size))) for _ in range(n))


def interleave_for_segments(points: Sequence[Sequence[float]]) -> Tuple[Point, ...]:
    """Sort by x, then swap every even slot with the one three places on.

    Pairing the result gives segments that overlap in x instead of a row of
    disjoint neighbours.
    """
    pts: List[Point] = sorted(to_points(points), key=by_x)
    for i in range(0, len(pts), 2):
        j = min(i + 3, len(pts) - 1)
        pts[i], pts[j] = pts[j], pts[i]
    return tuple(pts)


__all__ = [
    "random_points",
    "random_grid_points",
    "interleave_for_segments",
]
