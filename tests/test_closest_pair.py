from __future__ import annotations

import math

import pytest

try:
    from hypothesis import given, settings, strategies as st

    HAVE_HYPOTHESIS = True
except ImportError:  # pragma: no cover
    HAVE_HYPOTHESIS = False
    given = settings = None  # type: ignore[assignment]
    st = None  # type: ignore[assignment]

from geoviz.algs import get_algorithm, run
from geoviz.algs.closest_pair_dnc import (
    Conquer,
    PrimitiveSolve,
    brute_force,
    strip_search,
)
from geoviz.algs.closest_pair_sl import Scan
from geoviz.algs.divide_conquer import Divide, Stage
from geoviz.algs.geometry import Pair, Point, by_y, square_dist
from tests.test_utils import (
    gen_grid_points,
    gen_uniform_points,
    oracle_closest_square_dist,
    rng,
)

CLOSEST_PAIR = ["closest_pair_dnc", "closest_pair_sl"]


def _best(name, points):
    return run(get_algorithm(name), points).final.best


# ---------------------------------------------------------------------------
#  Unit tests
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("name", CLOSEST_PAIR)
def test_square_with_center(name: str, square_with_center) -> None:
    best = _best(name, square_with_center)
    # Every corner is at squared distance 2 from the centre.
    assert best.square_len == 2.0
    assert Point(1.0, 1.0) in (best.a, best.b)


@pytest.mark.parametrize("name", CLOSEST_PAIR)
@pytest.mark.parametrize("points", [[], [(4.0, 4.0)]])
def test_fewer_than_two_points(name: str, points) -> None:
    stepper = get_algorithm(name)
    state = stepper.first_state(points)
    assert stepper.is_final(state)
    assert state.best is None


@pytest.mark.parametrize("name", CLOSEST_PAIR)
def test_duplicates_give_zero_distance(name: str) -> None:
    points = [(5.0, 1.0), (0.0, 0.0), (9.0, 9.0), (5.0, 1.0), (3.0, 7.0), (8.0, 2.0)]
    best = _best(name, points)
    assert best.square_len == 0.0
    assert best.a == best.b == Point(5.0, 1.0)


@pytest.mark.parametrize("name", CLOSEST_PAIR)
def test_vertical_column(name: str) -> None:
    points = [(2.0, float(y * y)) for y in range(9)]
    best = _best(name, points)
    assert best.square_len == 1.0


def test_dnc_primitive_only_for_small_inputs() -> None:
    trace = run(get_algorithm("closest_pair_dnc"), [(0, 0), (3, 4), (1, 1)])
    assert len(trace.actions) == 1
    (action,) = trace.actions
    assert isinstance(action, PrimitiveSolve)
    assert action.best.square_len == 2.0
    assert action.borders.l == 0.0 and action.borders.r == 3.0


def test_dnc_action_sequence_for_four_points() -> None:
    points = [(0.0, 0.0), (1.0, 5.0), (2.0, 0.0), (3.0, 5.0)]
    trace = run(get_algorithm("closest_pair_dnc"), points)
    kinds = [a.kind for a in trace.actions]
    assert kinds == ["divide", "primitive_solve", "divide", "primitive_solve", "conquer"]

    left_divide, _, right_divide, _, conquer = trace.actions
    # Divide lines sit on the opposite edge of the range being split.
    assert isinstance(left_divide, Divide) and left_divide.x == 3.0
    assert left_divide.borders.l == 0.0 and left_divide.borders.r == 1.0
    assert isinstance(right_divide, Divide) and right_divide.x == 0.0
    assert right_divide.borders.l == 2.0 and right_divide.borders.r == 3.0
    assert isinstance(conquer, Conquer)
    assert conquer.left_best.square_len == 26.0
    assert conquer.right_best.square_len == 26.0
    # Across the split (1, 5)-(3, 5) and (0, 0)-(2, 0) tie at 4.
    assert conquer.best.square_len == 4.0
    assert conquer.strip.l < 2.0 < conquer.strip.r


def test_dnc_stack_frames_follow_recursion() -> None:
    stepper = get_algorithm("closest_pair_dnc")
    state = stepper.first_state(gen_grid_points(rng(2), 8, size=50))
    assert [f.stage for f in state.stack] == [Stage.LEFT_DIVIDE]
    state, _ = stepper.next_state(state)
    assert [f.stage for f in state.stack] == [Stage.RIGHT_DIVIDE, Stage.LEFT_DIVIDE]


def test_dnc_final_points_sorted_by_y() -> None:
    trace = run(get_algorithm("closest_pair_dnc"), gen_uniform_points(rng(4), 25))
    final_points = trace.final.points
    assert list(final_points) == sorted(final_points, key=by_y)


def test_brute_force_and_strip_search() -> None:
    pts = [Point(0.0, 0.0), Point(10.0, 0.0), Point(4.0, 3.0)]
    assert brute_force(pts).square_len == 25.0
    assert brute_force(pts[:1]).is_inf

    column = sorted([Point(4.9, 0.0), Point(5.1, 0.1), Point(0.0, 50.0)], key=by_y)
    best = strip_search(column, 5.0, Pair(Point(0.0, 0.0), Point(3.0, 0.0)))
    assert math.isclose(best.square_len, square_dist(Point(4.9, 0.0), Point(5.1, 0.1)))


def test_sl_scan_actions() -> None:
    points = [(0.0, 0.0), (1.0, 0.0), (5.0, 5.0)]
    trace = run(get_algorithm("closest_pair_sl"), points)
    assert all(isinstance(a, Scan) for a in trace.actions)
    assert [a.point for a in trace.actions] == [Point(0.0, 0.0), Point(1.0, 0.0), Point(5.0, 5.0)]
    first, second, third = trace.actions
    assert math.isinf(first.h) and first.candidates == ()
    assert second.candidates == (Point(0.0, 0.0),)
    assert third.h == 1.0 and third.candidates == ()
    assert trace.final.best.square_len == 1.0


def test_sl_window_evicts_far_points() -> None:
    points = [(0.0, 0.0), (0.5, 0.0), (10.0, 0.0), (10.2, 0.0)]
    trace = run(get_algorithm("closest_pair_sl"), points)
    final = trace.final
    assert final.left == 2
    assert final.active == (Point(10.0, 0.0), Point(10.2, 0.0))
    assert math.isclose(final.best.square_len, 0.04)


@pytest.mark.parametrize("name", CLOSEST_PAIR)
def test_seeded_uniform_points_match_oracle(name: str) -> None:
    rnd = rng(2024)
    for _ in range(60):
        points = gen_uniform_points(rnd, rnd.randint(2, 40))
        assert _best(name, points).square_len == oracle_closest_square_dist(points)


def test_both_variants_agree_on_distance() -> None:
    rnd = rng(77)
    for _ in range(40):
        points = gen_grid_points(rnd, rnd.randint(2, 30), size=20)
        dnc = _best("closest_pair_dnc", points)
        sl = _best("closest_pair_sl", points)
        assert dnc.square_len == sl.square_len


# ---------------------------------------------------------------------------
#  Hypothesis properties
# ---------------------------------------------------------------------------
if HAVE_HYPOTHESIS:

    grid_points = st.lists(
        st.tuples(st.integers(-12, 12), st.integers(-12, 12)),
        min_size=2,
        max_size=40,
    )

    @settings(max_examples=80)
    @given(grid_points)
    def test_dnc_matches_brute_force(points) -> None:
        best = _best("closest_pair_dnc", points)
        assert best.square_len == oracle_closest_square_dist(points)
        assert best.a in set(map(tuple, points)) and best.b in set(map(tuple, points))

    @settings(max_examples=80)
    @given(grid_points)
    def test_sl_matches_brute_force(points) -> None:
        best = _best("closest_pair_sl", points)
        assert best.square_len == oracle_closest_square_dist(points)
        assert best.a in set(map(tuple, points)) and best.b in set(map(tuple, points))

else:  # pragma: no cover

    @pytest.mark.skip(reason="Hypothesis not installed")
    def test_dnc_matches_brute_force() -> None:  # type: ignore[ref-assign]
        pytest.skip("Hypothesis not installed")

    @pytest.mark.skip(reason="Hypothesis not installed")
    def test_sl_matches_brute_force() -> None:  # type: ignore[ref-assign]
        pytest.skip("Hypothesis not installed")
