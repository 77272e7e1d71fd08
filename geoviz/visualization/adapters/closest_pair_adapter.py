from __future__ import annotations

import math
from typing import List

from geoviz.algs import closest_pair_dnc, closest_pair_sl
from geoviz.algs.divide_conquer import Divide
from geoviz.algs.geometry import HorBorders, Point

from .common import band_shape, pair_shapes, point_shape, points_shapes, rect_shape, vline_shape


def dnc_state_shapes(state: closest_pair_dnc.State) -> List[dict]:
    shapes = points_shapes(state.points)
    for pair in state.result:
        shapes.extend(pair_shapes(pair, "green"))
    return shapes


def divide_shapes(action: Divide) -> List[dict]:
    return [vline_shape(action.x, "yellow"), band_shape(action.borders, "green")]


def dnc_action_shapes(action: closest_pair_dnc.Action) -> List[dict]:
    if isinstance(action, Divide):
        return divide_shapes(action)
    if isinstance(action, closest_pair_dnc.PrimitiveSolve):
        return [band_shape(action.borders, "green"), *pair_shapes(action.best, "blue")]
    visible = HorBorders(
        max(action.strip.l, action.borders.l),
        min(action.strip.r, action.borders.r),
    )
    shapes = [
        band_shape(visible, "green"),
        vline_shape(action.borders.l, "yellow"),
        vline_shape(action.borders.r, "yellow"),
    ]
    shapes.extend(pair_shapes(action.left_best, "red"))
    shapes.extend(pair_shapes(action.right_best, "red"))
    shapes.extend(pair_shapes(action.best, "blue"))
    return shapes


def sl_state_shapes(state: closest_pair_sl.State) -> List[dict]:
    shapes = points_shapes(state.points)
    shapes.extend(pair_shapes(state.nearest, "blue"))
    return shapes


def sl_action_shapes(action: closest_pair_sl.Scan) -> List[dict]:
    p, h = action.point, action.h
    shapes: List[dict] = []
    if math.isfinite(h):
        shapes.append(rect_shape(Point(p.x - h, p.y - h), Point(p.x, p.y + h), "green"))
    shapes.append(vline_shape(p.x, "yellow"))
    shapes.extend(points_shapes(action.candidates, "yellow"))
    shapes.append(point_shape(p, "red"))
    return shapes


__all__ = [
    "dnc_state_shapes",
    "dnc_action_shapes",
    "divide_shapes",
    "sl_state_shapes",
    "sl_action_shapes",
]
