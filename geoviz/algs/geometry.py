from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, NamedTuple, Sequence, Tuple

VERBOSE: bool = False
EPS: float = 1e-9


def log(*args, **kwargs) -> None:  # pragma: no cover
    if VERBOSE:
        print(*args, **kwargs)


class Point(NamedTuple):
    """Point with double-precision coordinates.

    Near-degenerate inputs (almost collinear triples, almost touching segments)
    can be classified differently than under single-precision arithmetic.
    """

    x: float
    y: float


def to_points(raw: Iterable[Sequence[float]]) -> Tuple[Point, ...]:
    """Convert ``[(x, y), ...]`` into points, rejecting malformed or non-finite entries."""
    points = []
    for idx, entry in enumerate(raw):
        try:
            if len(entry) != 2:
                raise ValueError(f"expected two coordinates, got {len(entry)}")
            x, y = float(entry[0]), float(entry[1])
        except (TypeError, ValueError) as exc:
            raise ValueError(f"point #{idx} is malformed ({entry!r}): {exc}") from exc
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"point #{idx} has a non-finite coordinate: ({x}, {y})")
        points.append(Point(x, y))
    return tuple(points)


def rotation(a: Point, b: Point, c: Point) -> float:
    return a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y)


def by_x(p: Point) -> Tuple[float, float]:
    return p.x, p.y


def by_y(p: Point) -> Tuple[float, float]:
    return p.y, p.x


def square_dist(a: Point, b: Point) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


@dataclass(frozen=True, slots=True)
class Pair:
    """Closest-pair candidate."""

    a: Point
    b: Point

    @classmethod
    def inf(cls) -> "Pair":
        return cls(Point(0.0, 0.0), Point(math.inf, math.inf))

    @property
    def square_len(self) -> float:
        return square_dist(self.a, self.b)

    @property
    def is_inf(self) -> bool:
        return math.isinf(self.square_len)


@dataclass(frozen=True, slots=True)
class Segment:
    """Input segment, stored with ``a <= b`` in ``(x, y)`` order."""

    a: Point
    b: Point

    def __post_init__(self) -> None:
        a, b = to_points((self.a, self.b))
        if b < a:
            a, b = b, a
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)

    def y_at(self, x: float) -> float:
        if self.a.x == self.b.x:
            return self.a.y
        return self.a.y + (self.b.y - self.a.y) * (x - self.a.x) / (self.b.x - self.a.x)


@dataclass(frozen=True, slots=True)
class IndexBorders:
    """Half-open index range ``[l, r)`` over a points array."""

    l: int
    r: int

    @property
    def size(self) -> int:
        return self.r - self.l

    def left(self) -> "IndexBorders":
        return IndexBorders(self.l, (self.l + self.r) // 2)

    def right(self) -> "IndexBorders":
        return IndexBorders((self.l + self.r) // 2, self.r)


@dataclass(frozen=True, slots=True)
class HorBorders:
    """Closed x-range ``[l, r]``."""

    l: float
    r: float

    @classmethod
    def of(cls, points: Iterable[Point]) -> "HorBorders":
        xs = [p.x for p in points]
        if not xs:
            raise ValueError("HorBorders.of requires at least one point")
        return cls(min(xs), max(xs))


__all__ = [
    "VERBOSE",
    "EPS",
    "log",
    "Point",
    "to_points",
    "rotation",
    "by_x",
    "by_y",
    "square_dist",
    "Pair",
    "Segment",
    "IndexBorders",
    "HorBorders",
]
