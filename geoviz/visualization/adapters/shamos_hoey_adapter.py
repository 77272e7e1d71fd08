from __future__ import annotations

from typing import List

from geoviz.algs import shamos_hoey

from .common import line_shape, vline_shape


def state_shapes(state: shamos_hoey.State) -> List[dict]:
    shapes = [line_shape(seg.a, seg.b, "white") for seg in state.segments]
    shapes.extend(line_shape(seg.a, seg.b, "blue") for seg in state.active)
    if state.result is not None:
        shapes.extend(line_shape(seg.a, seg.b, "green") for seg in state.result)
    return shapes


def action_shapes(action: shamos_hoey.Scan) -> List[dict]:
    shapes = [
        vline_shape(action.x, "blue"),
        line_shape(action.segment.a, action.segment.b, "yellow"),
    ]
    if action.found is not None:
        shapes.extend(line_shape(seg.a, seg.b, "red") for seg in action.found)
    return shapes


__all__ = ["state_shapes", "action_shapes"]
