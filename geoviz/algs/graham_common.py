from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Tuple, Union

from geoviz.algs.geometry import Point


@dataclass(frozen=True, slots=True)
class AcceptPoint:
    kind: ClassVar[str] = "accept_point"

    point: Point


@dataclass(frozen=True, slots=True)
class RejectPoint:
    kind: ClassVar[str] = "reject_point"

    point: Point


@dataclass(frozen=True, slots=True)
class AcceptLine:
    kind: ClassVar[str] = "accept_line"

    a: Point
    b: Point
    c: Point


@dataclass(frozen=True, slots=True)
class RejectLine:
    kind: ClassVar[str] = "reject_line"

    a: Point
    b: Point
    c: Point


Action = Union[AcceptPoint, RejectPoint, AcceptLine, RejectLine]

Convexity = Callable[[Point, Point, Point], bool]


def scan_step(
    pending: Tuple[Point, ...],
    chain: Tuple[Point, ...],
    is_convex: Convexity,
) -> Tuple[Tuple[Point, ...], Tuple[Point, ...], Action]:
    """Try ``pending[0]`` against the tail of ``chain``.

    ``pending`` is in processing order, so ``pending[-1]`` is the last point the
    chain will reach. A rejected line pops one chain vertex and leaves the
    candidate pending, so pops cascade over consecutive steps.
    """
    candidate = pending[0]
    if chain and len(pending) > 1 and not is_convex(chain[0], candidate, pending[-1]):
        return pending[1:], chain, RejectPoint(candidate)
    if len(chain) < 2:
        return pending[1:], chain + (candidate,), AcceptPoint(candidate)
    if not is_convex(chain[-2], chain[-1], candidate):
        return pending, chain[:-1], RejectLine(chain[-2], chain[-1], candidate)
    return pending[1:], chain + (candidate,), AcceptLine(chain[-2], chain[-1], candidate)


__all__ = [
    "AcceptPoint",
    "RejectPoint",
    "AcceptLine",
    "RejectLine",
    "Action",
    "scan_step",
]
