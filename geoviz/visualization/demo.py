from __future__ import annotations

import argparse
import random
from typing import Iterable, List, Sequence

import geoviz.algs.geometry as geometry
from geoviz.algs import ALGORITHMS, get_algorithm, run
from geoviz.algs.geometry import Point
from geoviz.common.constants import MAX_X, MAX_Y, RNG_SEEDS, seed_everywhere
from geoviz.data.gen_points import interleave_for_segments, random_points
from geoviz.data.io_utils import read_points
from geoviz.visualization.adapters import build_trace_events

PRESETS = {
    "square": [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 4.0), (2.0, 2.0), (1.0, 3.0)],
    "line": [(float(i), float(i)) for i in range(8)],
    "crossing": [(0.0, 0.0), (4.0, 4.0), (0.0, 4.0), (4.0, 0.0)],
}


def describe_result(name: str, state: object) -> str:
    if name in ("closest_pair_dnc", "closest_pair_sl"):
        best = state.best
        if best is None:
            return "closest pair: none"
        return f"closest pair: {tuple(best.a)} {tuple(best.b)} dist^2={best.square_len:g}"
    if name == "shamos_hoey":
        if state.result is None:
            return "intersection: none"
        first, second = state.result
        return f"intersection: {first} x {second}"
    hull = state.hull
    return f"hull ({len(hull)} vertices): " + " ".join(str(tuple(p)) for p in hull)


def print_trace(name: str, points: Sequence[Point]) -> None:
    """Text rendition of a run: one line per action, then the result."""
    trace = run(get_algorithm(name), points)
    print(f"{name}: {len(points)} points, {len(trace)} steps")
    for idx, action in enumerate(trace.actions, start=1):
        print(f"  {idx:4d} {action.kind:<16} {action}")
    print(describe_result(name, trace.final))


def load_points(args: argparse.Namespace) -> List[Point]:
    if args.input:
        return list(read_points(args.input))
    if args.random is not None:
        seed = args.seed if args.seed is not None else RNG_SEEDS["demo"]
        seed_everywhere(seed)
        points = random_points(random.Random(seed), args.random, max_x=MAX_X, max_y=MAX_Y)
        if args.algo == "shamos_hoey":
            points = interleave_for_segments(points)
        return list(points)
    return list(PRESETS[args.preset])


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Stepwise computational geometry visualization demo")
    parser.add_argument("--algo", choices=sorted(ALGORITHMS), default="graham")
    parser.add_argument("--preset", choices=PRESETS.keys(), default="square")
    parser.add_argument("--input", type=str, help="Point file: one 'x y' pair per line")
    parser.add_argument("--random", type=int, metavar="N", help="Use N random points instead of a preset")
    parser.add_argument("--seed", type=int, help="Seed for --random")
    parser.add_argument("--manual", action="store_true", help="Start with autoplay disabled")
    parser.add_argument("--print", dest="print_only", action="store_true", help="Print the trace instead of opening a window")
    parser.add_argument("--verbose", action="store_true", help="Log every step")
    args = parser.parse_args(list(argv) if argv is not None else None)

    geometry.VERBOSE = args.verbose
    points = load_points(args)

    if args.print_only:
        print_trace(args.algo, points)
        return

    # pygame is only needed once a window opens.
    from geoviz.visualization.render import PygameRenderer

    if args.input:
        case = args.input
    elif args.random is not None:
        case = f"random {args.random}"
    else:
        case = args.preset
    events = build_trace_events(args.algo, points, case=case)
    renderer = PygameRenderer()
    renderer.load_events(events)
    renderer.run(autoplay=not args.manual)


if __name__ == "__main__":
    main()
