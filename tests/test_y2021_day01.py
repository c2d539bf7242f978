import pytest

from aocpuzzles.y2021_day01 import (
    count_increases,
    parse_data,
    sliding_sums,
    solve1,
    solve2,
)

SAMPLE = "199\n200\n208\n210\n200\n207\n240\n269\n260\n263\n"


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "test"
    path.write_text(SAMPLE)
    return path


def test_it_should_read_the_testfile(sample):
    assert len(parse_data(sample)) == 10


def test_it_should_solve_testdata_for_part_1(sample):
    assert solve1(sample) == 7


def test_it_should_solve_testdata_for_part_2(sample):
    assert solve2(sample) == 5


def test_sliding_sums():
    assert sliding_sums([1, 2, 3, 4]) == [6, 9]
    assert sliding_sums([1, 2]) == []


def test_count_increases_edge_cases():
    assert count_increases([]) == 0
    assert count_increases([5, 5, 6]) == 1