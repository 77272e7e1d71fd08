from __future__ import annotations

import pytest

try:
    from hypothesis import given, settings, strategies as st

    HAVE_HYPOTHESIS = True
except ImportError:  # pragma: no cover
    HAVE_HYPOTHESIS = False
    given = settings = None  # type: ignore[assignment]
    st = None  # type: ignore[assignment]

from geoviz.algs import get_algorithm, run
from geoviz.algs.geometry import Point, Segment
from geoviz.algs.shamos_hoey import (
    ShamosHoey,
    build_events,
    compare_segments,
    intersects,
    segments_from_points,
)
from geoviz.algs.stepper import iter_steps
from tests.test_utils import gen_segments, oracle_any_intersection, rng


def seg(ax, ay, bx, by) -> Segment:
    return Segment(Point(float(ax), float(ay)), Point(float(bx), float(by)))


def sweep(segments):
    """Run the sweep over explicit segments and return ``(final_state, actions)``."""
    stepper = ShamosHoey()
    state = stepper.first_state_from_segments(segments)
    actions = []
    for state, action in iter_steps(stepper, state):
        actions.append(action)
    return state, actions


# ---------------------------------------------------------------------------
#  Intersection predicate
# ---------------------------------------------------------------------------
@pytest.mark.parametrize(
    "first, second, expected",
    [
        (seg(0, 0, 2, 2), seg(0, 2, 2, 0), True),
        (seg(0, 0, 1, 0), seg(2, 0, 3, 0), False),
        (seg(0, 0, 1, 1), seg(1, 1, 2, 0), True),
        (seg(0, 0, 2, 0), seg(1, 0, 3, 0), True),
        (seg(0, 0, 2, 2), seg(1, 1, 1, 1), True),
        (seg(0, 0, 2, 2), seg(1, 2, 1, 2), False),
        (seg(0, 1, 4, 1), seg(2, 0, 2, 3), True),
        (seg(0, 0, 4, 0), seg(1, 1, 3, 5), False),
        # Overlapping boxes without a crossing.
        (seg(0, 0, 4, 4), seg(0, 3, 1, 4), False),
    ],
)
def test_intersects(first, second, expected) -> None:
    assert intersects(first, second) is expected
    assert intersects(second, first) is expected


def test_compare_segments_orders_by_height() -> None:
    low, high = seg(0, 0, 10, 0), seg(2, 5, 8, 5)
    assert compare_segments(low, high) < 0
    assert compare_segments(high, low) > 0
    assert compare_segments(low, low) == 0
    # Equal heights fall back to coordinates.
    assert compare_segments(seg(0, 0, 1, 1), seg(1, 1, 2, 0)) < 0


def test_events_start_before_end_at_same_x() -> None:
    segments = (seg(0, 0, 2, 0), seg(2, -1, 2, 1))
    events = build_events(segments)
    assert [(e.x, e.segment_id, e.is_start) for e in events] == [
        (0.0, 0, True),
        (2.0, 1, True),
        (2.0, 0, False),
        (2.0, 1, False),
    ]


def test_segments_from_points_pairs_consecutive_points() -> None:
    segments = segments_from_points([(0, 0), (2, 2), (3, 1), (1, 0), (9, 9)])
    assert segments == (seg(0, 0, 2, 2), seg(1, 0, 3, 1))


# ---------------------------------------------------------------------------
#  Sweep scenarios
# ---------------------------------------------------------------------------
def test_crossing_pair_from_points() -> None:
    trace = run(get_algorithm("shamos_hoey"), [(0, 0), (2, 2), (0, 2), (2, 0)])
    final = trace.final
    assert final.result is not None
    assert set(final.result) == {seg(0, 0, 2, 2), seg(0, 2, 2, 0)}
    assert final.active == () and final.events == ()
    assert trace.actions[-1].found == final.result


def test_disjoint_collinear_pair() -> None:
    final, actions = sweep([((0, 0), (1, 0)), ((2, 0), (3, 0))])
    assert final.result is None
    assert len(actions) == 4
    assert [a.is_start for a in actions] == [True, False, True, False]
    assert [a.x for a in actions] == [0.0, 1.0, 2.0, 3.0]


def test_touching_endpoints() -> None:
    final, _ = sweep([seg(0, 0, 1, 1), seg(1, 1, 2, 0)])
    assert final.result is not None


def test_vertical_segment_crossing() -> None:
    final, _ = sweep([seg(0, 1, 4, 1), seg(2, 0, 2, 3)])
    assert set(final.result) == {seg(0, 1, 4, 1), seg(2, 0, 2, 3)}


def test_vertical_segment_clear() -> None:
    final, actions = sweep([seg(0, 1, 4, 1), seg(2, 2, 2, 3)])
    assert final.result is None
    assert len(actions) == 4


def test_zero_length_segments() -> None:
    hit, _ = sweep([seg(0, 0, 2, 2), seg(1, 1, 1, 1)])
    assert hit.result is not None
    miss, _ = sweep([seg(0, 0, 2, 2), seg(1, 2, 1, 2)])
    assert miss.result is None


def test_overlapping_collinear_segments() -> None:
    final, _ = sweep([seg(0, 0, 2, 0), seg(1, 0, 3, 0)])
    assert final.result is not None


def test_removal_exposes_new_neighbours() -> None:
    bottom = seg(0, 0, 10, 0)
    middle = seg(0.5, 1, 3, 1)
    top = seg(1, 3, 10, -1)
    final, actions = sweep([bottom, middle, top])
    assert set(final.result) == {bottom, top}
    last = actions[-1]
    assert last.segment == middle and not last.is_start
    assert [a.found is None for a in actions] == [True, True, True, False]


def test_non_finite_segments_rejected() -> None:
    stepper = ShamosHoey()
    nan = float("nan")
    with pytest.raises(ValueError):
        stepper.first_state_from_segments([seg(0, 0, 2, 2), Segment(Point(nan, 2.0), Point(2.0, 0.0))])
    with pytest.raises(ValueError):
        stepper.first_state_from_segments([((0.0, 0.0), (2.0, 2.0)), ((nan, 2.0), (2.0, 0.0))])


def test_no_segments() -> None:
    stepper = get_algorithm("shamos_hoey")
    for points in ([], [(1.0, 1.0)]):
        state = stepper.first_state(points)
        assert stepper.is_final(state)
        assert state.result is None


def test_seeded_segments_match_pairwise_check() -> None:
    rnd = rng(5150)
    found = 0
    for _ in range(300):
        segments = gen_segments(rnd, rnd.randint(2, 10))
        final, _ = sweep(segments)
        expected = oracle_any_intersection(segments)
        assert (final.result is not None) is expected
        if final.result is not None:
            found += 1
            assert intersects(*final.result)
    assert 0 < found < 300


# ---------------------------------------------------------------------------
#  Hypothesis properties
# ---------------------------------------------------------------------------
if HAVE_HYPOTHESIS:

    @settings(max_examples=80)
    @given(
        st.integers(min_value=0, max_value=999999),
        st.integers(min_value=1, max_value=14),
        st.floats(min_value=1.0, max_value=15.0),
    )
    def test_sweep_matches_pairwise_check(seed: int, k: int, max_len: float) -> None:
        segments = gen_segments(rng(seed), k, max_len=max_len)
        final, actions = sweep(segments)
        assert (final.result is not None) is oracle_any_intersection(segments)
        if final.result is None:
            assert len(actions) == 2 * len(segments)

else:  # pragma: no cover

    @pytest.mark.skip(reason="Hypothesis not installed")
    def test_sweep_matches_pairwise_check() -> None:  # type: ignore[ref-assign]
        pytest.skip("Hypothesis not installed")
