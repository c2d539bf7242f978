"""Hill climbing: shortest climb on a height map."""

from __future__ import annotations

import os
from collections.abc import Sequence

from aocpuzzles.common import read_lines, split_lines_no_empty_strings

Position = tuple[int, int]
Grid = Sequence[Sequence[str]]

_START = "S"
_END = "E"


def parse_height_map(filename: str | os.PathLike) -> list[list[str]]:
    """Read the map as rows of single characters."""
    return split_lines_no_empty_strings(read_lines(filename), "")


def find_start(grid: Grid) -> Position:
    """Position of the start marker."""
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == _START:
                return i, j
    raise ValueError("the map has no start")


def neighbours(position: Position, max_row: int, max_col: int) -> list[Position]:
    """Orthogonal neighbours within the inclusive bounds."""
    i, j = position
    result = []
    if i > 0:
        result.append((i - 1, j))
    if j > 0:
        result.append((i, j - 1))
    if i < max_row:
        result.append((i + 1, j))
    if j < max_col:
        result.append((i, j + 1))
    return result


def elevation(cell: str) -> int:
    """Height of a cell: 'a' and the start are 1, 'z' and the end are 26."""
    if cell == _START:
        cell = "a"
    elif cell == _END:
        cell = "z"
    return ord(cell[0]) - 96


def shortest_path(grid: Grid, start: Position, limit: int | None = None) -> int:
    """Steps from start to the end marker, giving up at the limit.

    With a limit, the limit is returned once reached or once no path is left;
    without one, an unreachable end raises ValueError.
    """
    max_row = len(grid) - 1
    max_col = len(grid[0]) - 1
    visited: set[Position] = set()
    frontier = [start]
    steps = 0
    while True:
        if limit is not None and steps >= limit:
            return steps
        if not frontier:
            if limit is None:
                raise ValueError("the end cannot be reached")
            return limit
        next_frontier = []
        for row, col in frontier:
            current = elevation(grid[row][col])
            for cell in neighbours((row, col), max_row, max_col):
                point = grid[cell[0]][cell[1]]
                if cell not in visited and elevation(point) - current <= 1:
                    visited.add(cell)
                    if point == _END:
                        return steps + 1
                    next_frontier.append(cell)
        frontier = next_frontier
        steps += 1


def solve(filename: str | os.PathLike) -> int:
    grid = parse_height_map(filename)
    return shortest_path(grid, find_start(grid))


def solve2(filename: str | os.PathLike) -> int:
    """Fewest steps from any lowest cell to the end."""
    grid = parse_height_map(filename)
    best: int | None = None
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell not in (_START, "a"):
                continue
            try:
                distance = shortest_path(grid, (i, j), best)
            except ValueError:
                continue
            best = distance if best is None else min(best, distance)
    if best is None:
        raise ValueError("the end cannot be reached")
    return best