"""Shamos-Hoey sweep: does any pair of segments intersect?"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence, Tuple

from geoviz.algs.geometry import Segment, rotation, to_points
from geoviz.algs.stepper import Stepper

SegmentPair = Tuple[Segment, Segment]


@dataclass(frozen=True, slots=True)
class Event:
    x: float
    segment_id: int
    is_start: bool

    def sort_key(self) -> Tuple[float, int, int]:
        return self.x, 0 if self.is_start else 1, self.segment_id


@dataclass(frozen=True, slots=True)
class State:
    segments: Tuple[Segment, ...]
    # Active segments ordered bottom to top at the sweep position.
    active: Tuple[Segment, ...]
    events: Tuple[Event, ...]
    result: Optional[SegmentPair]


@dataclass(frozen=True, slots=True)
class Scan:
    kind: ClassVar[str] = "scan"

    segment: Segment
    found: Optional[SegmentPair]
    x: float
    is_start: bool


Action = Scan


def _intersect_1d(a1: float, a2: float, b1: float, b2: float) -> bool:
    if a1 > a2:
        a1, a2 = a2, a1
    if b1 > b2:
        b1, b2 = b2, b1
    return max(a1, b1) <= min(a2, b2)


def intersects(first: Segment, second: Segment) -> bool:
    """Closed-segment intersection: bounding boxes overlap and endpoints straddle both lines."""
    return (
        _intersect_1d(first.a.x, first.b.x, second.a.x, second.b.x)
        and _intersect_1d(first.a.y, first.b.y, second.a.y, second.b.y)
        and rotation(first.a, first.b, second.a) * rotation(first.a, first.b, second.b) <= 0
        and rotation(second.a, second.b, first.a) * rotation(second.a, second.b, first.b) <= 0
    )


def compare_segments(s: Segment, o: Segment) -> int:
    """Order by y at the later of the two start points, then by coordinates."""
    x = max(s.a.x, o.a.x)
    lhs = (s.y_at(x), s.a.x, s.a.y, s.b.x, s.b.y)
    rhs = (o.y_at(x), o.a.x, o.a.y, o.b.x, o.b.y)
    return (lhs > rhs) - (lhs < rhs)


def _insert_position(active: Sequence[Segment], segment: Segment) -> int:
    lo, hi = 0, len(active)
    while lo < hi:
        mid = (lo + hi) // 2
        if compare_segments(active[mid], segment) < 0:
            lo = mid + 1
        else:
            hi = mid
    return lo


def _neighbour_hit(active: Sequence[Segment], idx: int) -> Optional[SegmentPair]:
    """Test the freshly inserted ``active[idx]`` against the segments below and above it."""
    current = active[idx]
    if idx > 0 and intersects(active[idx - 1], current):
        return current, active[idx - 1]
    if idx + 1 < len(active) and intersects(active[idx + 1], current):
        return current, active[idx + 1]
    return None


def segments_from_points(points: Sequence[Sequence[float]]) -> Tuple[Segment, ...]:
    """Pair consecutive points into segments; a trailing odd point is ignored."""
    pts = to_points(points)
    return tuple(Segment(pts[i], pts[i + 1]) for i in range(0, len(pts) - 1, 2))


def build_events(segments: Sequence[Segment]) -> Tuple[Event, ...]:
    events = [Event(seg.a.x, idx, True) for idx, seg in enumerate(segments)]
    events += [Event(seg.b.x, idx, False) for idx, seg in enumerate(segments)]
    return tuple(sorted(events, key=Event.sort_key))


class ShamosHoey(Stepper[State, Action]):
    name = "shamos_hoey"

    def first_state(self, points: Sequence[Sequence[float]]) -> State:
        return self.first_state_from_segments(segments_from_points(points))

    def first_state_from_segments(
        self,
        segments: Sequence[Segment | Tuple[Sequence[float], Sequence[float]]],
    ) -> State:
        segs = []
        for seg in segments:
            if isinstance(seg, Segment):
                segs.append(seg)
            else:
                a, b = to_points(seg)
                segs.append(Segment(a, b))
        segs = tuple(segs)
        return State(segments=segs, active=(), events=build_events(segs), result=None)

    def next_state(self, state: State) -> Tuple[State, Action]:
        self._ensure_not_final(state)
        event = state.events[0]
        events = state.events[1:]
        segment = state.segments[event.segment_id]
        active = state.active

        if event.is_start:
            idx = _insert_position(active, segment)
            active = active[:idx] + (segment,) + active[idx:]
            found = _neighbour_hit(active, idx)
        else:
            idx = active.index(segment)
            active = active[:idx] + active[idx + 1:]
            found = None
            if 0 < idx < len(active) and intersects(active[idx - 1], active[idx]):
                found = active[idx - 1], active[idx]

        action = Scan(segment=segment, found=found, x=event.x, is_start=event.is_start)
        if found is not None:
            return State(state.segments, (), (), found), action
        return State(state.segments, active, events, None), action

    def is_final(self, state: State) -> bool:
        return not state.events


def brute_force(segments: Sequence[Segment]) -> Optional[SegmentPair]:
    for i in range(len(segments)):
        for j in range(i):
            if intersects(segments[i], segments[j]):
                return segments[i], segments[j]
    return None


__all__ = [
    "ShamosHoey",
    "State",
    "Scan",
    "Event",
    "intersects",
    "compare_segments",
    "build_events",
    "segments_from_points",
    "brute_force",
]
