from __future__ import annotations

import pytest

from geoviz.algs.geometry import Point
from geoviz.data.io_utils import parse_points, read_points, write_points


def test_parse_points_skips_blank_lines() -> None:
    lines = ["1 2\n", "\n", "   \n", "-3.5\t4e1\n"]
    assert parse_points(lines) == (Point(1.0, 2.0), Point(-3.5, 40.0))


@pytest.mark.parametrize(
    "line, fragment",
    [
        ("1 2 3", "expected two coordinates"),
        ("7", "expected two coordinates"),
        ("1 abc", "cannot parse"),
        ("nan 1", "non-finite"),
        ("1 inf", "non-finite"),
    ],
)
def test_parse_points_malformed_line_is_fatal(line: str, fragment: str) -> None:
    with pytest.raises(ValueError) as exc_info:
        parse_points(["0 0", line])
    message = str(exc_info.value)
    assert message.startswith("line 2:")
    assert fragment in message


def test_round_trip_through_file(tmp_path) -> None:
    points = [(0.1, 0.2), (1e-300, -7.0), (12345.678, 3.0)]
    target = tmp_path / "nested" / "points.txt"
    write_points(target, points)
    assert target.exists()
    assert read_points(target) == tuple(Point(x, y) for x, y in points)


def test_read_points_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        read_points(tmp_path / "absent.txt")
