import json

import pytest

from aocpuzzles.y2022_day13 import compare, solve, solve2

SAMPLE = """[1,1,3,1,1]
[1,1,5,1,1]

[[1],[2,3,4]]
[[1],4]

[9]
[[8,7,6]]

[[4,4],4,4]
[[4,4],4,4,4]

[7,7,7,7]
[7,7,7]

[]
[3]

[[[]]]
[[]]

[1,[2,[3,[4,[5,6,7]]]],8,9]
[1,[2,[3,[4,[5,6,0]]]],8,9]
"""


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "sample"
    path.write_text(SAMPLE)
    return path


@pytest.mark.parametrize(
    "first, in_order",
    [(0, True), (3, True), (6, False), (9, True), (12, False), (15, True), (18, False), (21, False)],
)
def test_compare_sample_pairs(first, in_order):
    lines = SAMPLE.splitlines()
    result = compare(json.loads(lines[first]), json.loads(lines[first + 1]))
    assert (result > 0) is in_order


def test_compare_equal_values():
    assert compare(1, [1]) == 0
    assert compare([[2]], [[2]]) == 0


def test_compare_integers():
    assert compare(1, 2) == 1
    assert compare(3, 2) == -1


def test_solve_sample(sample):
    assert solve(sample) == 13


def test_solve2_sample(sample):
    assert solve2(sample) == 140