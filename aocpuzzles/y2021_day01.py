"""Sonar sweep: count increases in depth measurements."""

from __future__ import annotations

import os
from collections.abc import Sequence

from aocpuzzles.common import lines_to_int, read_lines


def parse_data(filename: str | os.PathLike) -> list[int]:
    """Read the depth measurements from a file."""
    return lines_to_int(read_lines(filename))


def count_increases(depths: Sequence[int]) -> int:
    """Count how often a depth is larger than the one before it."""
    return sum(1 for prev, cur in zip(depths, depths[1:]) if prev < cur)


def sliding_sums(depths: Sequence[int]) -> list[int]:
    """Return the sums of every window of three consecutive depths."""
    return [a + b + c for a, b, c in zip(depths, depths[1:], depths[2:])]


def solve1(filename: str | os.PathLike) -> int:
    return count_increases(parse_data(filename))


def solve2(filename: str | os.PathLike) -> int:
    return count_increases(sliding_sums(parse_data(filename)))