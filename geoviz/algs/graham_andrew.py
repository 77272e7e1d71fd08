"""Andrew's monotone chain: upper and lower chains over x-sorted points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from geoviz.algs.geometry import Point, rotation, to_points
from geoviz.algs.graham_common import Action, scan_step
from geoviz.algs.stepper import Stepper


@dataclass(frozen=True, slots=True)
class State:
    upper_pending: Tuple[Point, ...]
    lower_pending: Tuple[Point, ...]
    upper: Tuple[Point, ...]
    lower: Tuple[Point, ...]

    @property
    def hull(self) -> Tuple[Point, ...]:
        """Counter-clockwise hull: the lower chain, then the upper chain walked back."""
        if self.upper_pending or self.lower_pending:
            return ()
        return self.lower + self.upper[-2:0:-1]


def _upper_convex(a: Point, b: Point, c: Point) -> bool:
    return rotation(a, b, c) < 0


def _lower_convex(a: Point, b: Point, c: Point) -> bool:
    return rotation(a, b, c) > 0


class GrahamAndrew(Stepper[State, Action]):
    name = "graham_andrew"

    def first_state(self, points: Sequence[Sequence[float]]) -> State:
        ordered = tuple(sorted(set(to_points(points))))
        return State(upper_pending=ordered, lower_pending=ordered, upper=(), lower=())

    def next_state(self, state: State) -> Tuple[State, Action]:
        self._ensure_not_final(state)
        if state.upper_pending:
            pending, upper, action = scan_step(state.upper_pending, state.upper, _upper_convex)
            return State(pending, state.lower_pending, upper, state.lower), action
        pending, lower, action = scan_step(state.lower_pending, state.lower, _lower_convex)
        return State(state.upper_pending, pending, state.upper, lower), action

    def is_final(self, state: State) -> bool:
        return not state.upper_pending and not state.lower_pending


__all__ = ["GrahamAndrew", "State"]
