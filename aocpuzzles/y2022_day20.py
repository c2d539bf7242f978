"""Grove positioning system: mix an encrypted list of numbers."""

from __future__ import annotations

import os
from collections.abc import Sequence

from aocpuzzles.common import read_lines

Entry = tuple[int, int]

_DECRYPTION_KEY = 811589153
_MIX_ROUNDS = 10
_OFFSETS = (1000, 2000, 3000)


def parse(filename: str | os.PathLike) -> list[Entry]:
    """Read the numbers, each paired with its original position."""
    return [(index, int(line)) for index, line in enumerate(read_lines(filename))]


def rotate(code: list[Entry], index: int) -> None:
    """Move the entry that started at the given position by its value, in place."""
    for position, entry in enumerate(code):
        if entry[0] == index:
            break
    else:
        raise ValueError(f"no entry started at position {index}")
    size = len(code) - 1
    if size == 0:
        raise ValueError("a single number cannot be moved")
    del code[position]
    target = (position + entry[1]) % size
    if target <= 0:
        target += size
    code.insert(target, entry)


def _grove_sum(code: Sequence[Entry]) -> int:
    for position, (_, value) in enumerate(code):
        if value == 0:
            return sum(code[(position + offset) % len(code)][1] for offset in _OFFSETS)
    raise ValueError("the list holds no zero")


def solve(filename: str | os.PathLike) -> int:
    """Grove coordinate sum after mixing once."""
    code = parse(filename)
    for index in range(len(code)):
        rotate(code, index)
    return _grove_sum(code)


def solve2(filename: str | os.PathLike) -> int:
    """Grove coordinate sum after applying the key and mixing ten times."""
    code = [(index, value * _DECRYPTION_KEY) for index, value in parse(filename)]
    for _ in range(_MIX_ROUNDS):
        for index in range(len(code)):
            rotate(code, index)
    return _grove_sum(code)