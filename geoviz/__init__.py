# Stepwise algorithms - default exports
from .algs import (
    ALGORITHMS,
    get_algorithm,
    solve,
    run,
    iter_steps,
    Stepper,
    Trace,
)

# Geometry & constants
from .algs.geometry import Point, Pair, Segment, rotation, VERBOSE
from .common.constants import (
    DEFAULT_SEED,
    EPS_GEOM,
    RNG_SEEDS,
    seed_everywhere,
)

__all__ = [
    # geometry
    "Point",
    "Pair",
    "Segment",
    "rotation",
    "VERBOSE",
    "EPS_GEOM",
    "DEFAULT_SEED",
    "RNG_SEEDS",
    "seed_everywhere",
    # steppers
    "ALGORITHMS",
    "get_algorithm",
    "solve",
    "run",
    "iter_steps",
    "Stepper",
    "Trace",
]
