"""Cathode-ray tube: run a tiny CPU and draw with its register."""

from __future__ import annotations

import os
from collections.abc import Sequence

from aocpuzzles.common import read_lines, split_lines

_SCREEN_WIDTH = 40
_FIRST_SIGNAL = 19


def register_values(filename: str | os.PathLike) -> list[int]:
    """Register value during every cycle, starting with the initial value 1."""
    values = [1]
    for parts in split_lines(read_lines(filename), " "):
        instruction = parts[0]
        if instruction == "addx":
            values.append(values[-1])
            values.append(values[-1] + int(parts[1]))
        elif instruction == "noop":
            values.append(values[-1])
        else:
            raise ValueError(f"unknown instruction: {instruction!r}")
    return values


def render_screen(values: Sequence[int]) -> str:
    """Draw the sprite positions as rows of '#' and '.' characters."""
    rows: list[list[str]] = [[]]
    for index, value in enumerate(values):
        if index % _SCREEN_WIDTH == 0 and index >= _SCREEN_WIDTH:
            rows.append([])
        distance = value - index % _SCREEN_WIDTH
        rows[-1].append("#" if -1 <= distance <= 1 else ".")
    return "\n".join("".join(row) for row in rows)


def solve(filename: str | os.PathLike) -> int:
    """Sum of the signal strengths at cycles 20, 60, 100, ..."""
    return sum(
        value * (index + 1)
        for index, value in enumerate(register_values(filename))
        if index >= _FIRST_SIGNAL and (index - _FIRST_SIGNAL) % _SCREEN_WIDTH == 0
    )


def solve2(filename: str | os.PathLike) -> int:
    """Print the screen; the letters it shows are read by eye."""
    print(render_screen(register_values(filename)))
    return 1