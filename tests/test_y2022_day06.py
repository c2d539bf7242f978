import pytest

from aocpuzzles.y2022_day06 import solve


@pytest.mark.parametrize(
    "stream, expected",
    [
        ("bvwbjplbgvbhsrlpgdmjqwftvncz", 5),
        ("nppdvjthqldpwncqszvftbrmjlhg", 6),
        ("nznrnfrfntjfmvfwmzdfjlvtqnbhcprsg", 10),
        ("zcfzfwzzqfrljwzlrfnpqdbhtmscgvjw", 11),
    ],
)
def test_solve_sample(stream, expected):
    assert solve(stream, 4) == expected


@pytest.mark.parametrize(
    "stream, expected",
    [
        ("mjqjpqmgbljsphdztnvjfqwrcgsmlb", 19),
        ("bvwbjplbgvbhsrlpgdmjqwftvncz", 23),
        ("nppdvjthqldpwncqszvftbrmjlhg", 23),
        ("nznrnfrfntjfmvfwmzdfjlvtqnbhcprsg", 29),
    ],
)
def test_solve_sample_part2(stream, expected):
    assert solve(list(stream), 14) == expected


def test_no_marker_raises():
    with pytest.raises(ValueError):
        solve("aaaaaaa", 4)


def test_too_short_stream_raises():
    with pytest.raises(ValueError):
        solve("abc", 4)


def test_zero_length_raises():
    with pytest.raises(ValueError):
        solve("abcd", 0)