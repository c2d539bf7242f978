"""No space left on device: total up directory sizes from a terminal log."""

from __future__ import annotations

import os
from collections.abc import Iterable

from aocpuzzles.common import read_lines

Path = tuple[str, ...]

_ROOT: Path = ("/",)
_SMALL_LIMIT = 100_000
_DISK_SIZE = 70_000_000
_SPACE_NEEDED = 30_000_000


def directory_sizes(lines: Iterable[str]) -> dict[Path, int]:
    """Map every directory path seen in the log to the size of its files."""
    sizes: dict[Path, int] = {_ROOT: 0}
    current: list[str] = []
    for line in lines:
        if line == "$ ls":
            continue
        parts = line.replace("$ ", "").split(" ")
        here = tuple(current)
        if parts[0] == "dir":
            sizes.setdefault(here + (parts[1],), 0)
        elif parts[0] == "cd":
            if parts[1] == "..":
                if current:
                    current.pop()
            else:
                sizes.setdefault(here, 0)
                current.append(parts[1])
        else:
            size = int(parts[0])
            for depth in range(1, len(current) + 1):
                prefix = tuple(current[:depth])
                if prefix not in sizes:
                    raise ValueError(f"directory {'/'.join(prefix)!r} was never listed")
                sizes[prefix] += size
    return sizes


def solve(filename: str | os.PathLike) -> int:
    """Sum of the sizes of all directories of at most 100000."""
    sizes = directory_sizes(read_lines(filename))
    return sum(size for size in sizes.values() if size <= _SMALL_LIMIT)


def solve2(filename: str | os.PathLike) -> int:
    """Size of the smallest directory whose removal frees enough space."""
    sizes = directory_sizes(read_lines(filename))
    free = _DISK_SIZE - sizes[_ROOT]
    missing = _SPACE_NEEDED - free
    return min(size for size in sizes.values() if size >= missing)