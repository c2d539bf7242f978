"""Rock paper scissors: score a strategy guide."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

from aocpuzzles.common import read_lines

_AS_SHAPES = {
    "A X": 1 + 3,
    "A Y": 2 + 6,
    "A Z": 3 + 0,
    "B X": 1 + 0,
    "B Y": 2 + 3,
    "B Z": 3 + 6,
    "C X": 1 + 6,
    "C Y": 2 + 0,
    "C Z": 3 + 3,
}

_AS_OUTCOMES = {
    "A X": 3 + 0,
    "A Y": 1 + 3,
    "A Z": 2 + 6,
    "B X": 1 + 0,
    "B Y": 2 + 3,
    "B Z": 3 + 6,
    "C X": 2 + 0,
    "C Y": 3 + 3,
    "C Z": 1 + 6,
}


def _score(scoring: Mapping[str, int], rounds: Iterable[str]) -> int:
    total = 0
    for round_ in rounds:
        try:
            total += scoring[round_]
        except KeyError:
            raise ValueError(f"unknown round: {round_!r}") from None
    return total


def solve1(filename: str | os.PathLike) -> int:
    """Score reading the second column as the shape to play."""
    return _score(_AS_SHAPES, read_lines(filename))


def solve2(filename: str | os.PathLike) -> int:
    """Score reading the second column as the outcome to reach."""
    return _score(_AS_OUTCOMES, read_lines(filename))


def solve3(filename: str | os.PathLike) -> int:
    """Same scoring as solve2, applied round by round."""
    return sum(_score(_AS_OUTCOMES, [round_]) for round_ in read_lines(filename))