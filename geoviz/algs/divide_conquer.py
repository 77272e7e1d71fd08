"""Explicit-stack frames shared by the divide-and-conquer steppers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Sequence, Tuple

from geoviz.algs.geometry import HorBorders, IndexBorders, Point


class Stage(Enum):
    LEFT_DIVIDE = "left_divide"
    RIGHT_DIVIDE = "right_divide"
    CONQUER = "conquer"


@dataclass(frozen=True, slots=True)
class Frame:
    """One pending sub-problem; ``midx`` is saved for the conquer stage."""

    borders: IndexBorders
    stage: Stage
    midx: Optional[float] = None


@dataclass(frozen=True, slots=True)
class Divide:
    kind: ClassVar[str] = "divide"

    borders: HorBorders
    x: float


def initial_stack(n: int, minimum: int = 1) -> Tuple[Frame, ...]:
    if n < minimum:
        return ()
    return (Frame(IndexBorders(0, n), Stage.LEFT_DIVIDE),)


def push_left(
    stack: Tuple[Frame, ...],
    frame: Frame,
    points: Sequence[Point],
) -> Tuple[Tuple[Frame, ...], Divide]:
    """Resume later with the right half, recurse into the left half now.

    The divide line sits on the far (right) edge of the whole range.
    """
    borders = frame.borders
    left = borders.left()
    edge = HorBorders.of(points[borders.l:borders.r]).r
    stack = stack + (
        Frame(borders, Stage.RIGHT_DIVIDE),
        Frame(left, Stage.LEFT_DIVIDE),
    )
    return stack, Divide(HorBorders.of(points[left.l:left.r]), edge)


def push_right(
    stack: Tuple[Frame, ...],
    frame: Frame,
    points: Sequence[Point],
) -> Tuple[Tuple[Frame, ...], Divide]:
    """Resume later with the conquer step, recurse into the right half now.

    The divide line sits on the left edge of the whole range; ``midx`` is kept
    for the conquer stage.
    """
    borders = frame.borders
    right = borders.right()
    midx = points[right.l].x
    edge = HorBorders.of(points[borders.l:borders.r]).l
    stack = stack + (
        Frame(borders, Stage.CONQUER, midx),
        Frame(right, Stage.LEFT_DIVIDE),
    )
    return stack, Divide(HorBorders.of(points[right.l:right.r]), edge)


__all__ = ["Stage", "Frame", "Divide", "initial_stack", "push_left", "push_right"]
