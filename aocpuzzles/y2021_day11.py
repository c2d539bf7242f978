"""Dumbo octopus: simulate flashing octopuses on an energy grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

Grid = list[list[int]]

_FLASH_LEVEL = 10

_SAMPLE_ROWS = """
5483143223
2745854711
5264556173
6141336146
6357385478
4167524645
2176841721
6882881134
4846848554
5283751526
"""

_PUZZLE_ROWS = """
4764745784
4643457176
8322628477
7617152546
6137518165
1556723176
2187861886
2553422625
4817584638
3754285662
"""


def _grid_from_text(text: str) -> Grid:
    return [[int(digit) for digit in line] for line in text.split()]


def sample_grid() -> Grid:
    """Return the example energy grid."""
    return _grid_from_text(_SAMPLE_ROWS)


def puzzle_grid() -> Grid:
    """Return the puzzle energy grid."""
    return _grid_from_text(_PUZZLE_ROWS)


def _neighbours(grid: Grid, i: int, j: int) -> Iterator[tuple[int, int]]:
    for di in (-1, 0, 1):
        for dj in (-1, 0, 1):
            ni, nj = i + di, j + dj
            if (di or dj) and 0 <= ni < len(grid) and 0 <= nj < len(grid[ni]):
                yield ni, nj


def _is_discharging(grid: Iterable[Iterable[int]]) -> bool:
    return any(level >= _FLASH_LEVEL for row in grid for level in row)


def run_step(grid: Sequence[Sequence[int]]) -> tuple[Grid, int]:
    """Advance one step; return the new grid and the number of flashes."""
    current = [[level + 1 for level in row] for row in grid]
    flashes = 0
    while _is_discharging(current):
        for i, row in enumerate(current):
            for j, level in enumerate(row):
                if row[j] < _FLASH_LEVEL:
                    continue
                row[j] = 0
                flashes += 1
                for ni, nj in _neighbours(current, i, j):
                    if current[ni][nj] != 0:
                        current[ni][nj] += 1
    return current, flashes


def is_synchronized(grid: Sequence[Sequence[int]]) -> bool:
    """Tell whether every octopus flashed in the same step."""
    return all(level == 0 for row in grid for level in row)


def solve1(steps: int) -> int:
    """Total flashes of the example grid after the given number of steps."""
    grid = sample_grid()
    total = 0
    for _ in range(steps):
        grid, flashes = run_step(grid)
        total += flashes
    return total


def solve2() -> int:
    """First step at which the whole puzzle grid flashes at once."""
    grid = puzzle_grid()
    step = 0
    while not is_synchronized(grid):
        grid, _ = run_step(grid)
        step += 1
    return step