from __future__ import annotations

import math
from pathlib import Path
from typing import Iterable, Sequence, Tuple

from geoviz.algs.geometry import Point, log, to_points


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def parse_points(lines: Iterable[str]) -> Tuple[Point, ...]:
    """Parse ``x y`` lines into points; blank lines are skipped, anything malformed is fatal."""
    raw = []
    for lineno, line in enumerate(lines, start=1):
        fields = line.split()
        if not fields:
            continue
        if len(fields) != 2:
            raise ValueError(f"line {lineno}: expected two coordinates, got {len(fields)}")
        try:
            x, y = float(fields[0]), float(fields[1])
        except ValueError as exc:
            raise ValueError(f"line {lineno}: cannot parse {line.strip()!r} as a point") from exc
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"line {lineno}: non-finite coordinate in {line.strip()!r}")
        raw.append((x, y))
    return to_points(raw)


def read_points(path: str | Path) -> Tuple[Point, ...]:
    source = Path(path)
    with source.open("r", encoding="utf-8") as handle:
        points = parse_points(handle)
    log(f"[io] loaded {len(points)} points from {source}")
    return points


def write_points(path: str | Path, points: Sequence[Sequence[float]]) -> None:
    target = Path(path)
    _ensure_parent(target)
    with target.open("w", encoding="utf-8") as handle:
        for p in to_points(points):
            handle.write(f"{p.x!r} {p.y!r}\n")


__all__ = ["parse_points", "read_points", "write_points"]
