"""Helpers for reading puzzle input files and handling binary digits."""

from __future__ import annotations

import os
from collections.abc import Iterable


def read_lines(filename: str | os.PathLike) -> list[str]:
    """Return the lines of a text file without their line endings."""
    with open(filename, encoding="utf-8", newline="") as handle:
        content = handle.read()
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def lines_to_int(lines: Iterable[str]) -> list[int]:
    """Parse every non-empty line as an integer."""
    return [int(line) for line in lines if line]


def _split(line: str, delimiter: str) -> list[str]:
    # An empty delimiter matches at every boundary, including both ends.
    if delimiter == "":
        return ["", *line, ""]
    return line.split(delimiter)


def split_lines(lines: Iterable[str], delimiter: str) -> list[list[str]]:
    """Split every line on the delimiter."""
    return [_split(line, delimiter) for line in lines]


def split_lines_no_empty_strings(
    lines: Iterable[str], delimiter: str
) -> list[list[str]]:
    """Split every line on the delimiter, dropping empty parts."""
    return [[part for part in _split(line, delimiter) if part] for line in lines]


def get_bit(number: int, position: int) -> bool:
    """Tell whether the bit at the given position is set."""
    return bool((number >> position) & 1)


def binary_string_to_int(digits: str) -> int:
    """Read a string of binary digits; any character but '1' counts as 0."""
    return sum(1 << index for index, char in enumerate(reversed(digits)) if char == "1")