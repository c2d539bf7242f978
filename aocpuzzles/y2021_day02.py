"""Dive: steer a submarine by a list of commands."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

from aocpuzzles.common import read_lines, split_lines


@dataclass(frozen=True)
class Submarine:
    depth: int = 0
    distance: int = 0
    aim: int = 0

    def travel(self, direction: str, distance: int) -> Submarine:
        """Move directly: up and down change the depth."""
        if distance == 0:
            return self
        if direction == "forward":
            return replace(self, distance=self.distance + distance)
        if direction == "up":
            return replace(self, depth=self.depth - distance)
        if direction == "down":
            return replace(self, depth=self.depth + distance)
        return self

    def aim_and_travel(self, direction: str, distance: int) -> Submarine:
        """Move using aim: up and down change the aim, forward dives."""
        if distance == 0:
            return self
        if direction == "forward":
            return replace(
                self,
                distance=self.distance + distance,
                depth=self.depth + self.aim * distance,
            )
        if direction == "up":
            return replace(self, aim=self.aim - distance)
        if direction == "down":
            return replace(self, aim=self.aim + distance)
        return self


def parse_data(filename: str | os.PathLike) -> list[list[str]]:
    """Read the commands, each split into direction and amount."""
    return split_lines(read_lines(filename), " ")


def solve1(filename: str | os.PathLike) -> int:
    submarine = Submarine()
    for direction, amount, *_ in parse_data(filename):
        submarine = submarine.travel(direction, int(amount))
    return submarine.depth * submarine.distance


def solve2(filename: str | os.PathLike) -> int:
    submarine = Submarine()
    for direction, amount, *_ in parse_data(filename):
        submarine = submarine.aim_and_travel(direction, int(amount))
    return submarine.depth * submarine.distance