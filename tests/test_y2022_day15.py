import pytest

from aocpuzzles.y2022_day15 import parse_coords, solve, solve2

SAMPLE = """Sensor at x=2, y=18: closest beacon is at x=-2, y=15
Sensor at x=9, y=16: closest beacon is at x=10, y=16
Sensor at x=13, y=2: closest beacon is at x=15, y=3
Sensor at x=12, y=14: closest beacon is at x=10, y=16
Sensor at x=10, y=20: closest beacon is at x=10, y=16
Sensor at x=14, y=17: closest beacon is at x=10, y=16
Sensor at x=8, y=7: closest beacon is at x=2, y=10
Sensor at x=2, y=0: closest beacon is at x=2, y=10
Sensor at x=0, y=11: closest beacon is at x=2, y=10
Sensor at x=20, y=14: closest beacon is at x=25, y=17
Sensor at x=17, y=20: closest beacon is at x=21, y=22
Sensor at x=16, y=7: closest beacon is at x=15, y=3
Sensor at x=14, y=3: closest beacon is at x=15, y=3
Sensor at x=20, y=1: closest beacon is at x=15, y=3
"""


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "sample"
    path.write_text(SAMPLE)
    return path


def test_parse_coords():
    assert parse_coords(SAMPLE.splitlines()[0]) == [2, 18, -2, 15]


def test_solve_sample(sample):
    assert solve(sample, 10) == 26


def test_solve_row_out_of_reach(sample):
    assert solve(sample, 1000) == 0


def test_solve2_sample(sample):
    assert solve2(sample, 20) == 56000011


def test_solve2_fully_covered(tmp_path):
    path = tmp_path / "covered"
    path.write_text("Sensor at x=0, y=0: closest beacon is at x=10, y=0\n")
    with pytest.raises(ValueError):
        solve2(path, 3)