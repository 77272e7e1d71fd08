from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Sequence

from geoviz.algs.geometry import HorBorders, Pair, Point
from geoviz.algs.stepper import Trace
from geoviz.visualization.events import (
    AlgoInfoEvent,
    BandShape,
    Color,
    DoneEvent,
    FrameEvent,
    LineShape,
    PathShape,
    PointShape,
    RectShape,
    SetSceneEvent,
    VerticalLineShape,
    compute_scene_bounds,
)

SCENE_MARGIN = 0.05
BAND_PAD = 0.1

ShapeFn = Callable[[object], List[dict]]


def point_shape(p: Point, color: Color) -> PointShape:
    return PointShape(type="point", x=float(p.x), y=float(p.y), color=color)


def line_shape(a: Point, b: Point, color: Color) -> LineShape:
    return LineShape(
        type="line",
        x1=float(a.x),
        y1=float(a.y),
        x2=float(b.x),
        y2=float(b.y),
        color=color,
    )


def pair_shapes(pair: Pair, color: Color) -> List[dict]:
    """The sentinel infinite pair has nothing to draw."""
    if pair.is_inf:
        return []
    return [line_shape(pair.a, pair.b, color)]


def path_shape(points: Sequence[Point], color: Color, *, closed: bool = False) -> PathShape:
    return PathShape(
        type="path",
        points=[(float(p.x), float(p.y)) for p in points],
        closed=bool(closed),
        color=color,
    )


def vline_shape(x: float, color: Color) -> VerticalLineShape:
    return VerticalLineShape(type="vline", x=float(x), color=color)


def band_shape(borders: HorBorders, color: Color, *, pad: float = BAND_PAD) -> BandShape:
    return BandShape(type="band", x1=float(borders.l - pad), x2=float(borders.r + pad), color=color)


def rect_shape(lb: Point, rt: Point, color: Color) -> RectShape:
    return RectShape(
        type="rect",
        x1=float(lb.x),
        y1=float(lb.y),
        x2=float(rt.x),
        y2=float(rt.y),
        color=color,
    )


def points_shapes(points: Iterable[Point], color: Color = "white") -> List[dict]:
    return [point_shape(p, color) for p in points]


def build_scene_events(
    points: Iterable[Point],
    name: str,
    *,
    case: Optional[str] = None,
    margin: float = SCENE_MARGIN,
) -> List[dict]:
    x_min, x_max, y_min, y_max = compute_scene_bounds(points, margin=margin)
    return [
        SetSceneEvent(
            type="set_scene",
            x_min=float(x_min),
            x_max=float(x_max),
            y_min=float(y_min),
            y_max=float(y_max),
        ),
        AlgoInfoEvent(type="algo_info", name=name, case=case),
    ]


def build_frame_events(
    trace: Trace,
    state_shapes: ShapeFn,
    action_shapes: ShapeFn,
) -> List[dict]:
    """Alternate state frames with state-plus-action frames, then close with ``done``."""
    frames: List[dict] = []
    for step, state in enumerate(trace.states):
        base = state_shapes(state)
        frames.append(
            FrameEvent(type="frame", index=len(frames), step=step, kind="state", label="state", shapes=base)
        )
        if step < len(trace.actions):
            action = trace.actions[step]
            frames.append(
                FrameEvent(
                    type="frame",
                    index=len(frames),
                    step=step,
                    kind="action",
                    label=action.kind,
                    shapes=base + action_shapes(action),
                )
            )
    frames.append(DoneEvent(type="done"))
    return frames


__all__ = [
    "SCENE_MARGIN",
    "BAND_PAD",
    "point_shape",
    "line_shape",
    "pair_shapes",
    "path_shape",
    "vline_shape",
    "band_shape",
    "rect_shape",
    "points_shapes",
    "build_scene_events",
    "build_frame_events",
]
