from __future__ import annotations

from typing import List, Sequence

from geoviz.algs import convex_hull_dnc, graham, graham_andrew
from geoviz.algs.divide_conquer import Divide
from geoviz.algs.geometry import Point
from geoviz.algs.graham_common import AcceptLine, AcceptPoint, Action as ScanAction, RejectPoint

from .closest_pair_adapter import divide_shapes
from .common import pair_shapes, path_shape, point_shape, points_shapes


def hull_shapes(hull: Sequence[Point], color: str = "blue") -> List[dict]:
    if len(hull) == 1:
        return [point_shape(hull[0], color)]
    return [path_shape(hull, color, closed=True)]


def dnc_state_shapes(state: convex_hull_dnc.State) -> List[dict]:
    shapes = points_shapes(state.points)
    for hull in state.result:
        shapes.extend(hull_shapes(hull))
    return shapes


def dnc_action_shapes(action: convex_hull_dnc.Action) -> List[dict]:
    if isinstance(action, Divide):
        return divide_shapes(action)
    if isinstance(action, convex_hull_dnc.PrimitiveSolve):
        return hull_shapes(action.hull)
    shapes = hull_shapes(action.left) + hull_shapes(action.right)
    shapes.extend(pair_shapes(action.upper, "green"))
    shapes.extend(pair_shapes(action.lower, "green"))
    return shapes


def chain_shapes(pending: Sequence[Point], chain: Sequence[Point], *, closed: bool = False) -> List[dict]:
    shapes = points_shapes(pending)
    if chain:
        shapes.append(path_shape(chain, "blue", closed=closed))
    return shapes


def graham_state_shapes(state: graham.State) -> List[dict]:
    return chain_shapes(state.pending, state.hull, closed=not state.pending)


def andrew_state_shapes(state: graham_andrew.State) -> List[dict]:
    shapes = chain_shapes(state.upper_pending, state.upper)
    if not state.upper_pending:
        shapes.extend(chain_shapes(state.lower_pending, state.lower))
    return shapes


def scan_action_shapes(action: ScanAction) -> List[dict]:
    if isinstance(action, AcceptPoint):
        return [point_shape(action.point, "green")]
    if isinstance(action, RejectPoint):
        return [point_shape(action.point, "red")]
    color = "green" if isinstance(action, AcceptLine) else "red"
    return [path_shape([action.a, action.b, action.c], color)]


__all__ = [
    "hull_shapes",
    "dnc_state_shapes",
    "dnc_action_shapes",
    "chain_shapes",
    "graham_state_shapes",
    "andrew_state_shapes",
    "scan_action_shapes",
]
