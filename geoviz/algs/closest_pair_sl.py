"""Closest pair by sweep line over x-sorted points."""

from __future__ import annotations

import bisect
import math
from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence, Tuple

from geoviz.algs.geometry import Pair, Point, by_x, by_y, to_points
from geoviz.algs.stepper import Stepper


@dataclass(frozen=True, slots=True)
class State:
    points: Tuple[Point, ...]
    # Window points ordered by (y, x).
    active: Tuple[Point, ...]
    left: int
    right: int
    nearest: Pair

    @property
    def best(self) -> Optional[Pair]:
        return None if self.nearest.is_inf else self.nearest


@dataclass(frozen=True, slots=True)
class Scan:
    kind: ClassVar[str] = "scan"

    point: Point
    h: float
    candidates: Tuple[Point, ...]


Action = Scan


def _remove(active: Tuple[Point, ...], p: Point) -> Tuple[Point, ...]:
    idx = bisect.bisect_left(active, by_y(p), key=by_y)
    return active[:idx] + active[idx + 1:]


def _insert(active: Tuple[Point, ...], p: Point) -> Tuple[Point, ...]:
    idx = bisect.bisect_right(active, by_y(p), key=by_y)
    return active[:idx] + (p,) + active[idx:]


class ClosestPairSweepLine(Stepper[State, Action]):
    name = "closest_pair_sl"

    def first_state(self, points: Sequence[Sequence[float]]) -> State:
        pts = tuple(sorted(to_points(points), key=by_x))
        # A single point has nothing to pair with.
        cursor = 0 if len(pts) >= 2 else len(pts)
        return State(points=pts, active=(), left=cursor, right=cursor, nearest=Pair.inf())

    def next_state(self, state: State) -> Tuple[State, Action]:
        self._ensure_not_final(state)
        points = state.points
        active = state.active
        left = state.left
        nearest = state.nearest
        h = math.sqrt(nearest.square_len)
        p = points[state.right]

        while left < state.right and p.x - points[left].x > h:
            active = _remove(active, points[left])
            left += 1

        lo = bisect.bisect_left(active, (p.y - h, p.x - h), key=by_y)
        hi = bisect.bisect_right(active, (p.y + h, p.x), key=by_y)
        candidates = active[lo:hi]
        for other in candidates:
            cur = Pair(other, p)
            if cur.square_len < nearest.square_len:
                nearest = cur

        active = _insert(active, p)
        next_state = State(points, active, left, state.right + 1, nearest)
        return next_state, Scan(point=p, h=h, candidates=candidates)

    def is_final(self, state: State) -> bool:
        return state.right >= len(state.points)


__all__ = ["ClosestPairSweepLine", "State", "Scan"]
