"""Adapters converting algorithm traces into renderer-friendly events."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from geoviz.algs import get_algorithm, run
from geoviz.algs.geometry import to_points

from . import closest_pair_adapter, hull_adapter, shamos_hoey_adapter
from .common import ShapeFn, build_frame_events, build_scene_events

SHAPE_BUILDERS: Dict[str, Tuple[ShapeFn, ShapeFn]] = {
    "closest_pair_dnc": (closest_pair_adapter.dnc_state_shapes, closest_pair_adapter.dnc_action_shapes),
    "closest_pair_sl": (closest_pair_adapter.sl_state_shapes, closest_pair_adapter.sl_action_shapes),
    "convex_hull_dnc": (hull_adapter.dnc_state_shapes, hull_adapter.dnc_action_shapes),
    "graham": (hull_adapter.graham_state_shapes, hull_adapter.scan_action_shapes),
    "graham_andrew": (hull_adapter.andrew_state_shapes, hull_adapter.scan_action_shapes),
    "shamos_hoey": (shamos_hoey_adapter.state_shapes, shamos_hoey_adapter.action_shapes),
}


def build_trace_events(
    name: str,
    points: Sequence[Sequence[float]],
    *,
    case: Optional[str] = None,
) -> List[dict]:
    """Run ``name`` over ``points`` and turn the whole trace into an event stream."""
    stepper = get_algorithm(name)
    pts = to_points(points)
    state_shapes, action_shapes = SHAPE_BUILDERS[name]

    events: List[dict] = build_scene_events(pts, name, case=case)
    events.extend(build_frame_events(run(stepper, pts), state_shapes, action_shapes))
    return events


__all__ = ["SHAPE_BUILDERS", "build_trace_events", "build_scene_events", "build_frame_events"]
