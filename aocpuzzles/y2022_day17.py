"""Pyroclastic flow: stack falling rocks pushed by jets of gas."""

from __future__ import annotations

import os
from collections.abc import Sequence

from aocpuzzles.common import read_lines

Point = tuple[int, int]

_PIECES: tuple[tuple[Point, ...], ...] = (
    ((0, 0), (1, 0), (2, 0), (3, 0)),
    ((0, 1), (1, 0), (1, 1), (1, 2), (2, 1)),
    ((0, 0), (1, 0), (2, 0), (2, 1), (2, 2)),
    ((0, 0), (0, 1), (0, 2), (0, 3)),
    ((0, 0), (0, 1), (1, 0), (1, 1)),
)
_LEFT_WALL = 0
_RIGHT_WALL = 8
_FLOOR = 0
_START_X = 3
_DROP_HEIGHT = 4
_JETS = {">": 1, "<": -1}


def _blocked(settled: set[Point], point: Point) -> bool:
    x, y = point
    return x <= _LEFT_WALL or x >= _RIGHT_WALL or y <= _FLOOR or point in settled


def _collides(settled: set[Point], piece: Sequence[Point], ox: int, oy: int) -> bool:
    return any(_blocked(settled, (x + ox, y + oy)) for x, y in piece)


def _find_peak(settled: set[Point], last_peak: int) -> int:
    for y in range(last_peak + _DROP_HEIGHT, last_peak - 1, -1):
        if y == _FLOOR or any((x, y) in settled for x in range(1, _RIGHT_WALL)):
            return y
    raise ValueError("the tower has no peak near the last one")


def solve(filename: str | os.PathLike, piece_count: int) -> int:
    """Height of the tower after the given number of rocks have settled.

    Once the jet pattern has been run through twice, the height gained in
    that last round is assumed to repeat, and whole rounds are skipped.
    """
    lines = read_lines(filename)
    if not lines or not lines[0]:
        raise ValueError("no jet pattern")
    jets = lines[0]
    total_moves = len(jets)
    settled: set[Point] = set()
    peak = 0
    current_move = 0
    i = 0
    prev_i = 0
    prev_peak = 0
    height_mod = 0
    skip = True
    while i <= piece_count:
        piece = _PIECES[i % len(_PIECES)]
        peak = _find_peak(settled, peak)
        ox, oy = _START_X, peak + _DROP_HEIGHT
        while True:
            jet = jets[current_move % total_moves]
            if skip and current_move % total_moves == 0 and current_move != 0:
                if prev_peak != 0:
                    period = i - prev_i
                    if period <= 0:
                        raise ValueError("no rock fell during a full jet cycle")
                    skipped = (piece_count - i) // period * period
                    height_mod = (peak - prev_peak) * (skipped // period)
                    i += skipped
                    skip = False
                prev_peak = peak
                prev_i = i
            current_move += 1
            try:
                dx = _JETS[jet]
            except KeyError:
                raise ValueError(f"unknown jet: {jet!r}") from None
            if not _collides(settled, piece, ox + dx, oy):
                ox += dx
            if _collides(settled, piece, ox, oy - 1):
                settled.update((x + ox, y + oy) for x, y in piece)
                break
            oy -= 1
        i += 1
    return peak + height_mod