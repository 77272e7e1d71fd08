"""Shared event schema for stepwise geometry visualizations.

A trace becomes ``set_scene``, ``algo_info``, one ``frame`` per playback
position and a closing ``done``. Frames are self-contained lists of shapes, so a
renderer can jump to any frame without replaying the ones before it.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Literal, Optional, Sequence, Tuple, TypedDict

Color = Literal["white", "blue", "green", "yellow", "red"]


class SetSceneEvent(TypedDict):
    type: Literal["set_scene"]
    x_min: float
    x_max: float
    y_min: float
    y_max: float


class AlgoInfoEvent(TypedDict):
    type: Literal["algo_info"]
    name: str
    case: Optional[str]


class PointShape(TypedDict):
    type: Literal["point"]
    x: float
    y: float
    color: Color


class LineShape(TypedDict):
    type: Literal["line"]
    x1: float
    y1: float
    x2: float
    y2: float
    color: Color


class PathShape(TypedDict):
    type: Literal["path"]
    points: List[Tuple[float, float]]
    closed: bool
    color: Color


class VerticalLineShape(TypedDict):
    type: Literal["vline"]
    x: float
    color: Color


class BandShape(TypedDict):
    type: Literal["band"]
    x1: float
    x2: float
    color: Color


class RectShape(TypedDict):
    type: Literal["rect"]
    x1: float
    y1: float
    x2: float
    y2: float
    color: Color


class FrameEvent(TypedDict):
    type: Literal["frame"]
    index: int
    step: int
    kind: Literal["state", "action"]
    label: str
    shapes: List[Dict[str, object]]


class ErrorEvent(TypedDict):
    type: Literal["error"]
    text: str


class DoneEvent(TypedDict):
    type: Literal["done"]


EventDict = Dict[str, object]


def compute_scene_bounds(
    points: Iterable[Sequence[float]],
    margin: float = 0.05,
) -> Tuple[float, float, float, float]:
    """Bounding box of the points with a fractional margin; unit box when empty."""
    pts = list(points)
    if not pts:
        return 0.0, 1.0, 0.0, 1.0

    xs = [float(p[0]) for p in pts]
    ys = [float(p[1]) for p in pts]
    span = max(max(xs) - min(xs), max(ys) - min(ys), 1e-6)
    pad = max(span * margin, 0.5)
    return min(xs) - pad, max(xs) + pad, min(ys) - pad, max(ys) + pad


__all__ = [
    "Color",
    "EventDict",
    "SetSceneEvent",
    "AlgoInfoEvent",
    "PointShape",
    "LineShape",
    "PathShape",
    "VerticalLineShape",
    "BandShape",
    "RectShape",
    "FrameEvent",
    "ErrorEvent",
    "DoneEvent",
    "compute_scene_bounds",
]
