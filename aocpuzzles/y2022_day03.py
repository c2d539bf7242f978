"""Rucksack reorganization: find shared item types."""

from __future__ import annotations

import os
from collections.abc import Sequence

from aocpuzzles.common import read_lines

_GROUP_SIZE = 3


def char_to_score(c: str) -> int:
    """Priority of an item: a-z are 1-26, A-Z are 27-52."""
    return ord(c) - (38 if c.isupper() else 96)


def backpack_score(backpack: str) -> int:
    """Priority of the item found in both compartments."""
    half = len(backpack) // 2
    first = set(backpack[:half])
    for c in backpack[half:]:
        if c in first:
            return char_to_score(c)
    raise ValueError(f"no shared item in {backpack!r}")


def badge_score(backpacks: Sequence[str]) -> int:
    """Priority of the item common to a group of three backpacks."""
    if len(backpacks) != _GROUP_SIZE:
        raise ValueError("a group holds exactly three backpacks")
    first, second, third = backpacks
    common = set(first) & set(second)
    for c in third:
        if c in common:
            return char_to_score(c)
    raise ValueError("no badge shared by the group")


def solve1(filename: str | os.PathLike) -> int:
    return sum(backpack_score(line) for line in read_lines(filename))


def solve2(filename: str | os.PathLike) -> int:
    lines = read_lines(filename)
    groups = (lines[start:start + _GROUP_SIZE] for start in range(0, len(lines), _GROUP_SIZE))
    return sum(badge_score(group) for group in groups)