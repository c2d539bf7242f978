"""Unstable diffusion: spread out elves on an open grid."""

from __future__ import annotations

import os

from aocpuzzles.common import read_lines

Point = tuple[int, int]

# Each entry: cells that must be free, then the step taken (north, south, west, east).
_RULES: tuple[tuple[tuple[Point, Point, Point], Point], ...] = (
    (((-1, 1), (0, 1), (1, 1)), (0, 1)),
    (((-1, -1), (0, -1), (1, -1)), (0, -1)),
    (((-1, -1), (-1, 0), (-1, 1)), (-1, 0)),
    (((1, 1), (1, 0), (1, -1)), (1, 0)),
)
_ADJACENT: tuple[Point, ...] = (
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
)
_ROUNDS = 10
_MAX_ROUNDS = 1000


def parse(filename: str | os.PathLike) -> set[Point]:
    """Read elf positions; y grows upwards from the last line."""
    return {
        (x, y)
        for y, line in enumerate(reversed(read_lines(filename)))
        for x, char in enumerate(line)
        if char == "#"
    }


def _is_free(elves: set[Point], elf: Point, offsets) -> bool:
    return all((elf[0] + dx, elf[1] + dy) not in elves for dx, dy in offsets)


def _play_round(elves: set[Point], round_index: int) -> bool:
    """Move the elves in place; tell whether any of them moved."""
    proposals: dict[Point, tuple[Point, int]] = {}
    for elf in elves:
        if _is_free(elves, elf, _ADJACENT):
            continue
        for c in range(len(_RULES)):
            checks, (dx, dy) = _RULES[(round_index + c) % len(_RULES)]
            if _is_free(elves, elf, checks):
                target = (elf[0] + dx, elf[1] + dy)
                _, count = proposals.get(target, (elf, 0))
                proposals[target] = (elf, count + 1)
                break
    moves = [(target, elf) for target, (elf, count) in proposals.items() if count == 1]
    for target, elf in moves:
        elves.discard(elf)
        elves.add(target)
    return bool(moves)


def solve(filename: str | os.PathLike) -> int:
    """Empty ground in the bounding rectangle after ten rounds."""
    elves = parse(filename)
    if not elves:
        raise ValueError("no elves on the map")
    for round_index in range(_ROUNDS):
        _play_round(elves, round_index)
    xs = [x for x, _ in elves]
    ys = [y for _, y in elves]
    area = (max(xs) - min(xs) + 1) * (max(ys) - min(ys) + 1)
    return area - len(elves)


def solve2(filename: str | os.PathLike) -> int:
    """Number of the first round in which no elf moves."""
    elves = parse(filename)
    for round_index in range(_MAX_ROUNDS):
        if not _play_round(elves, round_index):
            return round_index + 1
    raise ValueError("the elves keep moving")