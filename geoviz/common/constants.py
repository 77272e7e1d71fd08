from __future__ import annotations

import random
from typing import Dict

# Geometry tolerance: retain source of truth from the geometry module.
from geoviz.algs.geometry import EPS as _GEOM_EPS

EPS_GEOM: float = _GEOM_EPS
DEFAULT_SEED: int = 1337

# Extents of generated point sets and of the default scene.
MAX_X: float = 30.0
MAX_Y: float = 30.0

RNG_SEEDS: Dict[str, int] = {
    "tests": DEFAULT_SEED,
    "demo": 4242,
}


def seed_everywhere(seed: int) -> None:
    """Seed the module-level ``random`` generator."""
    random.seed(seed)


__all__ = [
    "EPS_GEOM",
    "DEFAULT_SEED",
    "MAX_X",
    "MAX_Y",
    "RNG_SEEDS",
    "seed_everywhere",
]
