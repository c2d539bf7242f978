import pytest

from aocpuzzles.y2022_day17 import solve

SAMPLE_JETS = ">>><<><>><<<>><>>><<<>>><<<><<<>><>><<>>"


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "sample"
    path.write_text(SAMPLE_JETS + "\n")
    return path


@pytest.mark.parametrize(
    ("pieces", "height"),
    [(0, 0), (1, 1), (2, 4), (3, 6)],
)
def test_height_after_first_rocks(sample, pieces, height):
    assert solve(sample, pieces) == height


def test_height_grows_monotonically(sample):
    heights = [solve(sample, n) for n in range(6)]
    assert heights == sorted(heights)
    assert all(h <= 4 * n for n, h in enumerate(heights))


def test_unknown_jet_raises(tmp_path):
    path = tmp_path / "bad"
    path.write_text(">x<\n")
    with pytest.raises(ValueError):
        solve(path, 3)


def test_empty_pattern_raises(tmp_path):
    path = tmp_path / "empty"
    path.write_text("")
    with pytest.raises(ValueError):
        solve(path, 1)