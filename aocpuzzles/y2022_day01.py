"""Calorie counting: find the elves carrying the most calories."""

from __future__ import annotations

import os

from aocpuzzles.common import read_lines


def calorie_sums(filename: str | os.PathLike) -> list[int]:
    """Sum each group of lines; a group counts only once a blank line ends it."""
    sums = []
    current = 0
    for line in read_lines(filename):
        if not line:
            sums.append(current)
            current = 0
        else:
            current += int(line)
    return sums


def solve1(filename: str | os.PathLike) -> int:
    return max(calorie_sums(filename))


def solve2(filename: str | os.PathLike) -> int:
    return sum(sorted(calorie_sums(filename), reverse=True)[:3])