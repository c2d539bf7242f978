import pytest

from aocpuzzles.y2021_day12 import (
    count_paths,
    count_paths_with_revisit,
    parse_caves,
    solve1,
    solve2,
)

SMALL = """start-A
start-b
A-c
A-b
b-d
A-end
b-end
"""

MEDIUM = """dc-end
HN-start
start-kj
dc-start
dc-HN
LN-dc
HN-end
kj-sj
kj-HN
kj-dc
"""

LARGE = """fs-end
he-DX
fs-he
start-DX
pj-DX
end-zg
zg-sl
zg-pj
pj-he
RW-he
fs-DX
pj-RW
zg-RW
start-pj
he-WI
zg-he
pj-fs
start-RW
"""


@pytest.fixture
def write(tmp_path):
    def _write(content):
        path = tmp_path / "caves"
        path.write_text(content)
        return path

    return _write


def test_parses_data(write):
    caves = parse_caves(write(SMALL))
    assert "A" in caves["start"]
    assert "b" in caves["start"]
    for cave in ("start", "end", "b", "c"):
        assert cave in caves["A"]


@pytest.mark.parametrize(
    "content, expected", [(SMALL, 10), (MEDIUM, 19), (LARGE, 226)]
)
def test_solves_part1(write, content, expected):
    assert solve1(write(content)) == expected


@pytest.mark.parametrize(
    "content, expected", [(SMALL, 36), (MEDIUM, 103), (LARGE, 3509)]
)
def test_solves_part2(write, content, expected):
    assert solve2(write(content)) == expected


def test_missing_cave_has_no_paths():
    assert count_paths({"start": ["a"]}) == 0


def test_revisit_allows_more_paths():
    caves = {"start": ["A"], "A": ["start", "b", "end"], "b": ["A"], "end": ["A"]}
    assert count_paths(caves) == 2
    assert count_paths_with_revisit(caves) == 3