"""Passage pathing: count routes through a cave system."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence

from aocpuzzles.common import read_lines, split_lines

START = "start"
END = "end"

Caves = dict[str, list[str]]


def parse_caves(filename: str | os.PathLike) -> Caves:
    """Read the connections into an adjacency list covering both directions."""
    connections = split_lines(read_lines(filename), "-")
    caves: Caves = {}
    for origin, destination, *_ in connections:
        caves.setdefault(origin, []).append(destination)
    for origin, destination, *_ in connections:
        caves.setdefault(destination, []).append(origin)
    return caves


def _is_big(cave: str) -> bool:
    return cave[:1].isupper()


def _count(
    caves: Mapping[str, Sequence[str]],
    cave: str,
    visited: frozenset[str],
    revisit_used: bool,
) -> int:
    if cave == END:
        return 1
    if not _is_big(cave):
        visited = visited | {cave}
    total = 0
    for neighbour in caves.get(cave, ()):
        if neighbour == START:
            continue
        if neighbour in visited:
            if not revisit_used:
                total += _count(caves, neighbour, visited, True)
        else:
            total += _count(caves, neighbour, visited, revisit_used)
    return total


def count_paths(caves: Mapping[str, Sequence[str]]) -> int:
    """Count paths from start to end visiting small caves at most once."""
    return _count(caves, START, frozenset(), True)


def count_paths_with_revisit(caves: Mapping[str, Sequence[str]]) -> int:
    """Count paths where a single small cave may be visited twice."""
    return _count(caves, START, frozenset(), False)


def solve1(filename: str | os.PathLike) -> int:
    return count_paths(parse_caves(filename))


def solve2(filename: str | os.PathLike) -> int:
    return count_paths_with_revisit(parse_caves(filename))