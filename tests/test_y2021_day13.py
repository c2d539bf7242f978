import pytest

from aocpuzzles.y2021_day13 import Fold, Instructions, fold, parse_data, solve1

DOTS = """6,10
0,14
9,10
0,3
10,4
4,11
6,0
6,12
4,1
0,13
10,12
3,4
3,0
8,4
1,10
2,14
8,10
9,0
"""

SAMPLE = DOTS + "\nfold along y=7\nfold along x=5\n"
SAMPLE_ONE_FOLD = DOTS + "\nfold along y=7\n"


@pytest.fixture
def write(tmp_path):
    def _write(content):
        path = tmp_path / "sheet"
        path.write_text(content)
        return path

    return _write


def test_parses_data(write):
    expected = Instructions(
        points=[
            (6, 10), (0, 14), (9, 10), (0, 3), (10, 4), (4, 11),
            (6, 0), (6, 12), (4, 1), (0, 13), (10, 12), (3, 4),
            (3, 0), (8, 4), (1, 10), (2, 14), (8, 10), (9, 0),
        ],
        folds=[Fold("y", 7), Fold("x", 5)],
    )
    assert parse_data(write(SAMPLE)) == expected


def test_solves_sample(write):
    assert solve1(write(SAMPLE)) == 16


def test_solves_sample_with_one_fold(write):
    assert solve1(write(SAMPLE_ONE_FOLD)) == 17


def test_fold_reflects_and_merges():
    assert fold([(0, 14), (0, 0), (3, 2)], Fold("y", 7)) == [(0, 0), (3, 2)]
    assert fold([(10, 4), (1, 1)], Fold("x", 5)) == [(0, 4), (1, 1)]


def test_missing_blank_line_is_an_error(write):
    with pytest.raises(ValueError):
        parse_data(write(DOTS))