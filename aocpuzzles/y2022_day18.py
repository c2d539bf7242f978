"""Boiling boulders: measure the surface of a droplet made of unit cubes."""

from __future__ import annotations

import os

from aocpuzzles.common import read_lines

Point = tuple[int, int, int]

_DIRECTIONS: tuple[Point, ...] = (
    (1, 0, 0),
    (-1, 0, 0),
    (0, 1, 0),
    (0, -1, 0),
    (0, 0, 1),
    (0, 0, -1),
)
_LOWER_LIMIT = -1


def parse_cubes(filename: str | os.PathLike) -> tuple[set[Point], int]:
    """Read the cubes; return them with the largest coordinate seen."""
    cubes: set[Point] = set()
    size = 0
    for line in read_lines(filename):
        x, y, z, *_ = (int(part) for part in line.split(","))
        cubes.add((x, y, z))
        size = max(size, x, y, z)
    return cubes, size


def _out_of_bounds(point: Point, size: int, lower_limit: int) -> bool:
    return any(coordinate > size + 1 or coordinate < lower_limit for coordinate in point)


def neighbours(point: Point, size: int, lower_limit: int) -> list[Point]:
    """Face neighbours of a cube that lie within [lower_limit, size + 1]."""
    x, y, z = point
    candidates = ((x + dx, y + dy, z + dz) for dx, dy, dz in _DIRECTIONS)
    return [
        candidate
        for candidate in candidates
        if not _out_of_bounds(candidate, size, lower_limit)
    ]


def solve(filename: str | os.PathLike) -> int:
    """Count cube faces not touching another cube."""
    cubes, size = parse_cubes(filename)
    return sum(
        1
        for cube in cubes
        for neighbour in neighbours(cube, size, _LOWER_LIMIT)
        if neighbour not in cubes
    )


def solve2(filename: str | os.PathLike) -> int:
    """Count cube faces reachable from the outside air."""
    cubes, size = parse_cubes(filename)
    open_sides = 0
    visited: set[Point] = set()
    stack: list[Point] = [(0, 0, 0)]
    while stack:
        point = stack.pop()
        if point in visited:
            continue
        visited.add(point)
        for neighbour in neighbours(point, size, _LOWER_LIMIT):
            if neighbour in cubes:
                open_sides += 1
            else:
                stack.append(neighbour)
    return open_sides