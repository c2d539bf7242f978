"""Regolith reservoir: pour sand into a cave of rock paths."""

from __future__ import annotations

import os

from aocpuzzles.common import read_lines, split_lines

Point = tuple[int, int]

_SOURCE: Point = (500, 0)
_MAX_STEPS = 1_000_000
_FLOOR_WIDTH = 10_000


def _point(text: str) -> Point:
    x, y, *_ = text.split(",")
    return int(x), int(y)


def parse_rocks(filename: str | os.PathLike) -> tuple[int, set[Point]]:
    """Read the rock paths; return the lowest segment start and the rock cells."""
    max_y = 0
    rocks: set[Point] = set()
    for path in split_lines(read_lines(filename), " -> "):
        x, y = _point(path[0])
        for corner in path[1:]:
            new_x, new_y = _point(corner)
            if x == new_x:
                rocks.update((x, j) for j in range(min(y, new_y), max(y, new_y) + 1))
            if y == new_y:
                rocks.update((j, y) for j in range(min(x, new_x), max(x, new_x) + 1))
            max_y = max(max_y, y)
            x, y = new_x, new_y
    return max_y, rocks


def _fall(blocked: set[Point], sand: Point) -> Point | None:
    x, y = sand
    for candidate in ((x, y + 1), (x - 1, y + 1), (x + 1, y + 1)):
        if candidate not in blocked:
            return candidate
    return None


def solve(filename: str | os.PathLike) -> int:
    """Grains of sand that come to rest before sand falls into the abyss."""
    max_y, blocked = parse_rocks(filename)
    score = 0
    sand = _SOURCE
    for _ in range(1, _MAX_STEPS):
        moved = _fall(blocked, sand)
        if moved is None:
            blocked.add(sand)
            score += 1
            sand = _SOURCE
        else:
            sand = moved
        if sand[1] > max_y:
            return score
    return 0


def solve2(filename: str | os.PathLike) -> int:
    """Grains of sand that rest on a floor until the source is blocked."""
    max_y, blocked = parse_rocks(filename)
    blocked.update((x, max_y + 2) for x in range(_FLOOR_WIDTH))
    score = 0
    sand = _SOURCE
    while sand not in blocked:
        moved = _fall(blocked, sand)
        if moved is None:
            blocked.add(sand)
            score += 1
            sand = _SOURCE
        else:
            sand = moved
    return score