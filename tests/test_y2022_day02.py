import pytest

from aocpuzzles.y2022_day02 import solve1, solve2, solve3


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "guide"
    path.write_text("A Y\nB X\nC Z\n")
    return path


def test_solves_sample(sample):
    assert solve1(sample) == 15


def test_solves_sample_part2(sample):
    assert solve2(sample) == 12


def test_solve3_matches_part2(sample):
    assert solve3(sample) == 12


def test_unknown_round_is_an_error(tmp_path):
    path = tmp_path / "guide"
    path.write_text("A Q\n")
    with pytest.raises(ValueError):
        solve1(path)