"""Camp cleanup: compare pairs of section assignments."""

from __future__ import annotations

import os
from collections.abc import Iterable

from aocpuzzles.common import read_lines, split_lines


def to_range(text: str) -> range:
    """Turn "start-end" into the inclusive range of sections it covers."""
    start, end, *_ = text.split("-")
    return range(int(start), int(end) + 1)


def to_ranges(pair: Iterable[str]) -> list[range]:
    """Turn every assignment of a pair into a range."""
    return [to_range(text) for text in pair]


def is_range_in_range(container: range, target: range) -> bool:
    """Tell whether both ends of the target lie within the container."""
    return target.start in container and target.stop - 1 in container


def is_range_intersecting_range(container: range, target: range) -> bool:
    """Tell whether either end of the target lies within the container."""
    return target.start in container or target.stop - 1 in container


def is_included_in_range(a: range, b: range) -> bool:
    """Tell whether one of the two ranges holds the other."""
    return is_range_in_range(a, b) or is_range_in_range(b, a)


def _pairs(filename: str | os.PathLike) -> list[list[range]]:
    return [to_ranges(pair) for pair in split_lines(read_lines(filename), ",")]


def solve1(filename: str | os.PathLike) -> int:
    """Count pairs where one assignment fully holds the other."""
    return sum(is_included_in_range(ranges[0], ranges[1]) for ranges in _pairs(filename))


def solve2(filename: str | os.PathLike) -> int:
    """Count pairs whose second assignment has an end inside the first."""
    return sum(
        is_range_intersecting_range(ranges[0], ranges[1]) for ranges in _pairs(filename)
    )