"""Rope bridge: follow the knots of a rope pulled by its head."""

from __future__ import annotations

import os

from aocpuzzles.common import read_lines, split_lines

Position = tuple[int, int]

_STEPS: dict[str, Position] = {
    "R": (0, 1),
    "L": (0, -1),
    "U": (-1, 0),
    "D": (1, 0),
}


def _sign(value: int) -> int:
    return max(-1, min(1, value))


def move_tail(tail: Position, head: Position) -> Position:
    """Move a knot one step towards the knot ahead unless they touch."""
    d_row, d_col = head[0] - tail[0], head[1] - tail[1]
    if abs(d_row) <= 1 and abs(d_col) <= 1:
        return tail
    return tail[0] + _sign(d_row), tail[1] + _sign(d_col)


def _simulate(filename: str | os.PathLike, followers: int) -> int:
    rope: list[Position] = [(0, 0)] * (followers + 1)
    visited = {rope[-1]}
    for direction, amount, *_ in split_lines(read_lines(filename), " "):
        steps = int(amount)
        step = _STEPS.get(direction)
        if step is None and steps > 0:
            raise ValueError(f"unknown direction: {direction!r}")
        for _ in range(steps):
            head = (rope[0][0] + step[0], rope[0][1] + step[1])
            moved = [head]
            for knot in rope[1:]:
                moved.append(move_tail(knot, moved[-1]))
            rope = moved
            visited.add(rope[-1])
    return len(visited)


def solve(filename: str | os.PathLike) -> int:
    """Positions visited by the tail of a two-knot rope."""
    return _simulate(filename, 1)


def solve2(filename: str | os.PathLike) -> int:
    """Positions visited by the tail of a ten-knot rope."""
    return _simulate(filename, 9)