"""Blizzard basin: cross a valley of moving blizzards."""

from __future__ import annotations

import os
from collections import deque
from collections.abc import Mapping

from aocpuzzles.common import read_lines

Point = tuple[int, int]

_DIRECTIONS: dict[str, Point] = {
    ">": (1, 0),
    "v": (0, -1),
    "<": (-1, 0),
    "^": (0, 1),
}
_MOVES: tuple[Point, ...] = ((0, 0), (1, 0), (0, -1), (-1, 0), (0, 1))


def parse(
    filename: str | os.PathLike,
) -> tuple[dict[Point, str], int, int, Point, Point]:
    """Read the valley: blizzards, inner width and height, start and finish.

    Inner cells run from (0, 0) at the bottom left; y grows upwards.
    """
    lines = read_lines(filename)
    if len(lines) < 3:
        raise ValueError("the valley is too small")
    height = len(lines) - 2
    width = len(lines[0]) - 2
    finish = (width - 1, -1)
    start = (0, height)
    blizzards = {
        (x - 1, y - 1): char
        for y, line in enumerate(reversed(lines))
        for x, char in enumerate(line)
        if char in _DIRECTIONS
    }
    return blizzards, width, height, start, finish


def blizzards_at(
    blizzards: Mapping[Point, str], width: int, height: int, time: int
) -> dict[Point, str]:
    """Blizzard positions after the given number of minutes, wrapping around."""
    moved = {}
    for (x, y), char in blizzards.items():
        dx, dy = _DIRECTIONS[char]
        moved[((x + dx * time) % width, (y + dy * time) % height)] = char
    return moved


def solve(filename: str | os.PathLike, trips: int) -> int:
    """Minutes needed to cross the valley the given number of times."""
    if trips < 1:
        raise ValueError("at least one trip is needed")
    blizzards, width, height, start, end = parse(filename)
    period = width * height
    occupied_cache: dict[int, set[Point]] = {}

    def occupied(time: int) -> set[Point]:
        key = time % period
        if key not in occupied_cache:
            occupied_cache[key] = set(blizzards_at(blizzards, width, height, key))
        return occupied_cache[key]

    queue: deque[tuple[Point, int]] = deque([(start, 0)])
    visited: set[tuple[Point, int]] = set()
    trip = 1
    while queue:
        pos, time = queue.popleft()
        key = (pos, time % period)
        if key in visited:
            continue
        visited.add(key)
        if pos == end:
            if trip == trips:
                return time - 1
            start, end = end, start
            queue = deque([(pos, time)])
            visited = set()
            trip += 1
            continue
        blocked = occupied(time)
        for dx, dy in _MOVES:
            option = (pos[0] + dx, pos[1] + dy)
            if option in blocked:
                continue
            inside = 0 <= option[0] < width and 0 <= option[1] < height
            if inside or option == start or option == end:
                queue.append((option, time + 1))
    raise ValueError("the valley cannot be crossed")