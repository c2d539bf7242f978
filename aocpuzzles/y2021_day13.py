"""Transparent origami: fold a sheet of dots."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

from aocpuzzles.common import read_lines

Point = tuple[int, int]

_DIRECTION_INDEX = len("fold along ")


@dataclass(frozen=True)
class Fold:
    direction: str
    position: int


@dataclass
class Instructions:
    points: list[Point]
    folds: list[Fold]


def parse_data(filename: str | os.PathLike) -> Instructions:
    """Read the dots, then the fold instructions after the blank line."""
    lines = read_lines(filename)
    try:
        blank = lines.index("")
    except ValueError:
        raise ValueError("missing blank line between dots and folds") from None
    points = []
    for line in lines[:blank]:
        x, y, *_ = line.split(",")
        points.append((int(x), int(y)))
    folds = [
        Fold(direction=line[_DIRECTION_INDEX], position=int(line.split("=")[1]))
        for line in lines[blank:]
        if line
    ]
    return Instructions(points=points, folds=folds)


def _reflect(value: int, position: int) -> int:
    return position - (value - position) if value > position else value


def fold(points: Iterable[Point], fold: Fold) -> list[Point]:
    """Fold the dots along a line; overlapping dots are merged, order kept."""
    if fold.direction == "y":
        moved = [(x, _reflect(y, fold.position)) for x, y in points]
    elif fold.direction == "x":
        moved = [(_reflect(x, fold.position), y) for x, y in points]
    else:
        moved = list(points)
    return list(dict.fromkeys(moved))


def solve1(filename: str | os.PathLike) -> int:
    """Number of visible dots after applying every fold."""
    instructions = parse_data(filename)
    points = instructions.points
    for step in instructions.folds:
        points = fold(points, step)
    return len(points)