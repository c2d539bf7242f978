"""Treetop tree house: visibility and scenic scores on a height grid."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence

from aocpuzzles.common import read_lines, split_lines_no_empty_strings

Grid = Sequence[Sequence[int]]


def parse(filename: str | os.PathLike) -> list[list[int]]:
    """Read a grid of single-digit tree heights."""
    rows = split_lines_no_empty_strings(read_lines(filename), "")
    return [[int(digit) for digit in row] for row in rows]


def count_visible(grid: Grid) -> int:
    """Count trees visible from outside the grid along a row or column."""
    visible: set[tuple[int, int]] = set()

    def scan(cells: Iterable[tuple[tuple[int, int], int]]) -> None:
        tallest = -1
        for position, height in cells:
            if height > tallest:
                visible.add(position)
                tallest = height

    for i, row in enumerate(grid):
        cells = [((i, j), height) for j, height in enumerate(row)]
        scan(cells)
        scan(reversed(cells))
    width = len(grid[0]) if grid else 0
    for j in range(width):
        cells = [((i, j), row[j]) for i, row in enumerate(grid)]
        scan(cells)
        scan(reversed(cells))
    return len(visible)


def _viewing_distance(height: int, trees: Iterable[int]) -> int:
    distance = 0
    for tree in trees:
        distance += 1
        if tree >= height:
            break
    return distance


def scenic_score(grid: Grid, i: int, j: int) -> int:
    """Product of the viewing distances in the four directions."""
    height = grid[i][j]
    up = [row[j] for row in grid[:i]][::-1]
    down = [row[j] for row in grid[i + 1:]]
    left = list(grid[i][:j])[::-1]
    right = grid[i][j + 1:]
    score = 1
    for trees in (up, down, left, right):
        score *= _viewing_distance(height, trees)
    return score


def solve(filename: str | os.PathLike) -> int:
    return count_visible(parse(filename))


def solve2(filename: str | os.PathLike) -> int:
    grid = parse(filename)
    return max(
        (scenic_score(grid, i, j) for i, row in enumerate(grid) for j in range(len(row))),
        default=0,
    )