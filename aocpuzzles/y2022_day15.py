"""Beacon exclusion zone: reason about sensors and their nearest beacons."""

from __future__ import annotations

import os
import re

from aocpuzzles.common import read_lines

_NUMBER = re.compile(r"-?\d+")
_TUNING_FACTOR = 4_000_000

Sensor = list[int]


def parse_coords(line: str) -> list[int]:
    """All integers in a line, in order."""
    return [int(match) for match in _NUMBER.findall(line)]


def _sensors(filename: str | os.PathLike) -> list[Sensor]:
    return [parse_coords(line) for line in read_lines(filename)]


def _range(sensor: Sensor) -> int:
    sx, sy, bx, by = sensor[:4]
    return abs(bx - sx) + abs(by - sy)


def solve(filename: str | os.PathLike, row: int) -> int:
    """Positions on a row where no beacon can be."""
    sensors = _sensors(filename)
    intervals = []
    for sensor in sensors:
        reach = _range(sensor) - abs(row - sensor[1])
        if reach >= 0:
            intervals.append((sensor[0] - reach, sensor[0] + reach))
    intervals.sort()
    merged: list[list[int]] = []
    for low, high in intervals:
        if merged and low <= merged[-1][1] + 1:
            merged[-1][1] = max(merged[-1][1], high)
        else:
            merged.append([low, high])
    covered = sum(high - low + 1 for low, high in merged)
    beacons = {bx for _, _, bx, by, *_ in sensors if by == row}
    covered -= sum(
        1 for bx in beacons if any(low <= bx <= high for low, high in merged)
    )
    return covered


def solve2(filename: str | os.PathLike, limit: int) -> int:
    """Tuning frequency of the one spot within the limits no sensor covers."""
    sensors = [(sensor, _range(sensor)) for sensor in _sensors(filename)]
    for y in range(limit + 1):
        x = 0
        while x <= limit:
            for sensor, reach in sensors:
                if abs(sensor[0] - x) + abs(sensor[1] - y) <= reach:
                    x = sensor[0] + reach - abs(sensor[1] - y)
                    break
            else:
                return x * _TUNING_FACTOR + y
            x += 1
    raise ValueError("every position within the limits is covered")