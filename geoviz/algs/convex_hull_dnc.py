"""Convex hull by divide and conquer, merging sub-hulls through their tangents.

Hulls are tuples of vertices in counter-clockwise order without collinear or
repeated vertices. Degenerate hulls have one or two vertices.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import ClassVar, List, Sequence, Tuple, Union

from geoviz.algs.divide_conquer import Divide, Frame, Stage, initial_stack, push_left, push_right
from geoviz.algs.geometry import Pair, Point, rotation, square_dist, to_points
from geoviz.algs.stepper import Stepper

PRIMITIVE_SIZE = 5

Hull = Tuple[Point, ...]


@dataclass(frozen=True, slots=True)
class State:
    points: Tuple[Point, ...]
    result: Tuple[Hull, ...]
    stack: Tuple[Frame, ...]

    @property
    def hull(self) -> Hull:
        if self.stack or not self.result:
            return ()
        return self.result[-1]


@dataclass(frozen=True, slots=True)
class PrimitiveSolve:
    kind: ClassVar[str] = "primitive_solve"

    hull: Hull


@dataclass(frozen=True, slots=True)
class Conquer:
    kind: ClassVar[str] = "conquer"

    left: Hull
    right: Hull
    upper: Pair
    lower: Pair


Action = Union[Divide, PrimitiveSolve, Conquer]


def _between(a: Point, b: Point, p: Point) -> bool:
    """True when ``p`` lies strictly inside the segment ``ab`` (collinearity assumed)."""
    return (p.x - a.x) * (p.x - b.x) + (p.y - a.y) * (p.y - b.y) < 0


def _cmp_around(center: Point):
    def half(p: Point) -> int:
        if p.y > center.y or (p.y == center.y and p.x > center.x):
            return 0
        return 1

    def compare(a: Point, b: Point) -> int:
        ha, hb = half(a), half(b)
        if ha != hb:
            return ha - hb
        rot = rotation(center, a, b)
        if rot > 0:
            return -1
        if rot < 0:
            return 1
        return 0

    return compare


def sort_around_centroid(vertices: Sequence[Point]) -> Hull:
    if len(vertices) < 2:
        return tuple(vertices)
    cx = sum(p.x for p in vertices) / len(vertices)
    cy = sum(p.y for p in vertices) / len(vertices)
    return tuple(sorted(vertices, key=functools.cmp_to_key(_cmp_around(Point(cx, cy)))))


def brute_force(points: Sequence[Point]) -> Hull:
    """O(n^3) hull of a handful of distinct points."""
    n = len(points)
    if n < 3:
        return tuple(sorted(points))
    candidates: List[Point] = []
    for i in range(n):
        for j in range(i + 1, n):
            rots = [rotation(points[i], points[j], points[k]) for k in range(n)]
            if all(r >= 0 for r in rots) or all(r <= 0 for r in rots):
                for p in (points[i], points[j]):
                    if p not in candidates:
                        candidates.append(p)

    vertices = [
        p
        for p in candidates
        if not any(
            a != p and b != p and rotation(a, b, p) == 0 and _between(a, b, p)
            for a in candidates
            for b in candidates
        )
    ]
    return sort_around_centroid(vertices)


def _advance(
    hull: Hull,
    idx: int,
    step: int,
    anchor: Point,
    sign: int,
    line_from_anchor: bool,
) -> int:
    """Move ``idx`` around ``hull`` while the next vertex lies outside the current tangent."""
    n = len(hull)
    while True:
        cur = hull[idx]
        nxt = hull[(idx + step) % n]
        if line_from_anchor:
            side = rotation(anchor, cur, nxt)
        else:
            side = rotation(cur, anchor, nxt)
        side *= sign
        if side > 0 or (side == 0 and square_dist(nxt, anchor) > square_dist(cur, anchor)):
            idx = (idx + step) % n
        else:
            return idx


def find_tangent(left: Hull, right: Hull, li: int, ri: int, upper: bool) -> Tuple[int, int]:
    """Walk both pointers until the line ``left[li]``-``right[ri]`` supports both hulls.

    The upper tangent moves the left pointer counter-clockwise and the right
    pointer clockwise; the lower tangent does the opposite.
    """
    sign = 1 if upper else -1
    done = False
    while not done:
        new_li = _advance(left, li, sign, right[ri], sign, line_from_anchor=False)
        new_ri = _advance(right, ri, -sign, left[new_li], sign, line_from_anchor=True)
        done = new_li == li and new_ri == ri
        li, ri = new_li, new_ri
    return li, ri


def _arc(hull: Hull, start: int, end: int) -> Hull:
    """Vertices from ``start`` to ``end`` inclusive, counter-clockwise with wraparound."""
    if start <= end:
        return hull[start:end + 1]
    return hull[start:] + hull[:end + 1]


def merge_hulls(left: Hull, right: Hull) -> Tuple[Hull, Pair, Pair]:
    rightmost_in_left = max(range(len(left)), key=lambda i: left[i])
    leftmost_in_right = min(range(len(right)), key=lambda i: right[i])

    left_upper, right_upper = find_tangent(left, right, rightmost_in_left, leftmost_in_right, upper=True)
    left_lower, right_lower = find_tangent(left, right, rightmost_in_left, leftmost_in_right, upper=False)

    merged = _arc(left, left_upper, left_lower) + _arc(right, right_lower, right_upper)
    upper = Pair(left[left_upper], right[right_upper])
    lower = Pair(left[left_lower], right[right_lower])
    return merged, upper, lower


class ConvexHullDivideAndConquer(Stepper[State, Action]):
    name = "convex_hull_dnc"

    def first_state(self, points: Sequence[Sequence[float]]) -> State:
        pts = tuple(sorted(set(to_points(points))))
        return State(points=pts, result=(), stack=initial_stack(len(pts)))

    def next_state(self, state: State) -> Tuple[State, Action]:
        self._ensure_not_final(state)
        frame = state.stack[-1]
        stack = state.stack[:-1]
        borders = frame.borders

        if frame.stage is Stage.LEFT_DIVIDE and borders.size <= PRIMITIVE_SIZE:
            hull = brute_force(state.points[borders.l:borders.r])
            return State(state.points, state.result + (hull,), stack), PrimitiveSolve(hull)

        if frame.stage is Stage.LEFT_DIVIDE:
            stack, action = push_left(stack, frame, state.points)
            return State(state.points, state.result, stack), action

        if frame.stage is Stage.RIGHT_DIVIDE:
            stack, action = push_right(stack, frame, state.points)
            return State(state.points, state.result, stack), action

        left, right = state.result[-2], state.result[-1]
        merged, upper, lower = merge_hulls(left, right)
        action = Conquer(left=left, right=right, upper=upper, lower=lower)
        return State(state.points, state.result[:-2] + (merged,), stack), action

    def is_final(self, state: State) -> bool:
        return not state.stack


__all__ = [
    "ConvexHullDivideAndConquer",
    "State",
    "PrimitiveSolve",
    "Conquer",
    "Divide",
    "brute_force",
    "find_tangent",
    "merge_hulls",
    "sort_around_centroid",
    "PRIMITIVE_SIZE",
]
