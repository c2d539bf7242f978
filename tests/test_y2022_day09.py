import pytest

from aocpuzzles.y2022_day09 import move_tail, solve, solve2

SAMPLE = """R 4
U 4
L 3
D 1
R 4
D 1
L 5
R 2
"""

SAMPLE2 = """R 5
U 8
L 8
D 3
R 17
D 10
L 25
U 20
"""


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_solve_sample(tmp_path):
    assert solve(_write(tmp_path, "sample", SAMPLE)) == 13


def test_solve_sample_extended(tmp_path):
    assert solve(_write(tmp_path, "sample2", SAMPLE2)) == 88


@pytest.mark.parametrize(
    "head, expected",
    [
        ((1, 0), (0, 0)),
        ((1, 1), (0, 0)),
        ((0, 1), (0, 0)),
        ((-1, 1), (0, 0)),
        ((-1, 0), (0, 0)),
        ((-1, -1), (0, 0)),
        ((0, -1), (0, 0)),
        ((2, 0), (1, 0)),
        ((2, 1), (1, 1)),
        ((2, 2), (1, 1)),
        ((1, 2), (1, 1)),
        ((0, 2), (0, 1)),
        ((-1, 2), (-1, 1)),
        ((-2, 2), (-1, 1)),
        ((-2, 1), (-1, 1)),
        ((-2, 0), (-1, 0)),
        ((0, -2), (0, -1)),
        ((1, -2), (1, -1)),
        ((2, -2), (1, -1)),
        ((2, -1), (1, -1)),
    ],
)
def test_move_tail(head, expected):
    assert move_tail((0, 0), head) == expected


def test_solve_sample_part2(tmp_path):
    assert solve2(_write(tmp_path, "sample", SAMPLE)) == 1


def test_solve_sample_extended_part2(tmp_path):
    assert solve2(_write(tmp_path, "sample2", SAMPLE2)) == 36


def test_unknown_direction_fails(tmp_path):
    with pytest.raises(ValueError):
        solve(_write(tmp_path, "bad", "X 3\n"))