"""Graham scan: polar-angle order around the lowest-leftmost point."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Sequence, Tuple

from geoviz.algs.geometry import Point, rotation, square_dist, to_points
from geoviz.algs.graham_common import Action, scan_step
from geoviz.algs.stepper import Stepper


@dataclass(frozen=True, slots=True)
class State:
    pending: Tuple[Point, ...]
    hull: Tuple[Point, ...]


def _is_convex(a: Point, b: Point, c: Point) -> bool:
    return rotation(a, b, c) > 0


def polar_order(pivot: Point, points: Sequence[Point]) -> Tuple[Point, ...]:
    """Counter-clockwise angular order around ``pivot``, nearer points first on ties."""

    def compare(a: Point, b: Point) -> int:
        rot = rotation(pivot, a, b)
        if rot > 0:
            return -1
        if rot < 0:
            return 1
        da, db = square_dist(pivot, a), square_dist(pivot, b)
        return (da > db) - (da < db)

    return tuple(sorted(points, key=functools.cmp_to_key(compare)))


class Graham(Stepper[State, Action]):
    name = "graham"

    def first_state(self, points: Sequence[Sequence[float]]) -> State:
        unique = sorted(set(to_points(points)))
        if not unique:
            return State(pending=(), hull=())
        pivot = unique[0]
        return State(pending=(pivot,) + polar_order(pivot, unique[1:]), hull=())

    def next_state(self, state: State) -> Tuple[State, Action]:
        self._ensure_not_final(state)
        pending, hull, action = scan_step(state.pending, state.hull, _is_convex)
        return State(pending, hull), action

    def is_final(self, state: State) -> bool:
        return not state.pending


__all__ = ["Graham", "State", "polar_order"]
