"""Stepwise geometric algorithms, selectable by identifier."""

from __future__ import annotations

from typing import Dict, Sequence, Type

from geoviz.algs.closest_pair_dnc import ClosestPairDivideAndConquer
from geoviz.algs.closest_pair_sl import ClosestPairSweepLine
from geoviz.algs.convex_hull_dnc import ConvexHullDivideAndConquer
from geoviz.algs.graham import Graham
from geoviz.algs.graham_andrew import GrahamAndrew
from geoviz.algs.shamos_hoey import ShamosHoey
from geoviz.algs.stepper import Stepper, Trace, iter_steps, run

ALGORITHMS: Dict[str, Type[Stepper]] = {
    cls.name: cls
    for cls in (
        ClosestPairDivideAndConquer,
        ClosestPairSweepLine,
        ConvexHullDivideAndConquer,
        Graham,
        GrahamAndrew,
        ShamosHoey,
    )
}


def get_algorithm(name: str) -> Stepper:
    try:
        return ALGORITHMS[name]()
    except KeyError:
        valid = ", ".join(sorted(ALGORITHMS))
        raise ValueError(f"Unknown algorithm {name!r}; expected one of: {valid}") from None


def solve(name: str, points: Sequence[Sequence[float]]) -> Trace:
    return run(get_algorithm(name), points)


__all__ = [
    "ALGORITHMS",
    "get_algorithm",
    "solve",
    "Stepper",
    "Trace",
    "iter_steps",
    "run",
    "ClosestPairDivideAndConquer",
    "ClosestPairSweepLine",
    "ConvexHullDivideAndConquer",
    "Graham",
    "GrahamAndrew",
    "ShamosHoey",
]
