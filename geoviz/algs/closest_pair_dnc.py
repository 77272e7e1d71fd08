"""Closest pair by divide and conquer, with the recursion kept on an explicit stack."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence, Tuple, Union

from geoviz.algs.divide_conquer import Divide, Frame, Stage, initial_stack, push_left, push_right
from geoviz.algs.geometry import HorBorders, IndexBorders, Pair, Point, by_x, by_y, to_points
from geoviz.algs.stepper import Stepper

PRIMITIVE_SIZE = 3


@dataclass(frozen=True, slots=True)
class State:
    points: Tuple[Point, ...]
    result: Tuple[Pair, ...]
    stack: Tuple[Frame, ...]

    @property
    def best(self) -> Optional[Pair]:
        """Closest pair found so far for the whole input, once the stack is empty."""
        if self.stack or not self.result or self.result[-1].is_inf:
            return None
        return self.result[-1]


@dataclass(frozen=True, slots=True)
class PrimitiveSolve:
    kind: ClassVar[str] = "primitive_solve"

    borders: HorBorders
    best: Pair


@dataclass(frozen=True, slots=True)
class Conquer:
    kind: ClassVar[str] = "conquer"

    best: Pair
    left_best: Pair
    right_best: Pair
    borders: HorBorders
    strip: HorBorders


Action = Union[Divide, PrimitiveSolve, Conquer]


def brute_force(points: Sequence[Point]) -> Pair:
    best = Pair.inf()
    for i in range(len(points)):
        for j in range(i):
            cur = Pair(points[i], points[j])
            if cur.square_len < best.square_len:
                best = cur
    return best


def _sort_range_by_y(points: Tuple[Point, ...], borders: IndexBorders) -> Tuple[Point, ...]:
    # A merge of the two y-sorted halves would do; a full re-sort keeps it simple.
    chunk = sorted(points[borders.l:borders.r], key=by_y)
    return points[:borders.l] + tuple(chunk) + points[borders.r:]


def strip_search(
    points: Sequence[Point],
    midx: float,
    best: Pair,
) -> Pair:
    """Scan y-sorted ``points`` for a pair closer than ``best`` across ``midx``."""
    h = math.sqrt(best.square_len)
    strip = []
    for cur in points:
        if abs(cur.x - midx) >= h:
            continue
        for other in reversed(strip):
            if cur.y - other.y > h:
                break
            candidate = Pair(cur, other)
            if candidate.square_len < best.square_len:
                best = candidate
        strip.append(cur)
    return best


class ClosestPairDivideAndConquer(Stepper[State, Action]):
    name = "closest_pair_dnc"

    def first_state(self, points: Sequence[Sequence[float]]) -> State:
        pts = tuple(sorted(to_points(points), key=by_x))
        return State(points=pts, result=(), stack=initial_stack(len(pts), minimum=2))

    def next_state(self, state: State) -> Tuple[State, Action]:
        self._ensure_not_final(state)
        frame = state.stack[-1]
        stack = state.stack[:-1]
        borders = frame.borders
        points = state.points

        if frame.stage is Stage.LEFT_DIVIDE and borders.size <= PRIMITIVE_SIZE:
            chunk = points[borders.l:borders.r]
            best = brute_force(chunk)
            action = PrimitiveSolve(HorBorders.of(chunk), best)
            points = _sort_range_by_y(points, borders)
            return State(points, state.result + (best,), stack), action

        if frame.stage is Stage.LEFT_DIVIDE:
            stack, action = push_left(stack, frame, points)
            return State(points, state.result, stack), action

        if frame.stage is Stage.RIGHT_DIVIDE:
            stack, action = push_right(stack, frame, points)
            return State(points, state.result, stack), action

        left_best, right_best = state.result[-2], state.result[-1]
        best = left_best if left_best.square_len < right_best.square_len else right_best
        midx = frame.midx
        h = math.sqrt(best.square_len)
        points = _sort_range_by_y(points, borders)
        chunk = points[borders.l:borders.r]
        best = strip_search(chunk, midx, best)
        action = Conquer(
            best=best,
            left_best=left_best,
            right_best=right_best,
            borders=HorBorders.of(chunk),
            strip=HorBorders(midx - h, midx + h),
        )
        return State(points, state.result[:-2] + (best,), stack), action

    def is_final(self, state: State) -> bool:
        return not state.stack


__all__ = [
    "ClosestPairDivideAndConquer",
    "State",
    "PrimitiveSolve",
    "Conquer",
    "Divide",
    "brute_force",
    "strip_search",
    "PRIMITIVE_SIZE",
]
