"""Not enough minerals: plan robot construction to crack geodes."""

from __future__ import annotations

import math
import os
import re
from collections.abc import Sequence
from dataclasses import dataclass

from aocpuzzles.common import read_lines

_NUMBER = re.compile(r"[0-9]+")
_GEODE = 3
_FIRST_MINUTES = 24
_SECOND_MINUTES = 32
_SECOND_BLUEPRINTS = 3

Costs = tuple[int, int, int, int]


@dataclass(frozen=True)
class Blueprint:
    """Cost of each robot kind (ore, clay, obsidian, geode) in each resource."""

    costs: tuple[Costs, Costs, Costs, Costs]


def _affordable(income: Sequence[int], needed: Sequence[int], time: int) -> bool:
    return all(need + rate * time >= 0 for need, rate in zip(needed, income))


def _minutes_until_affordable(income: Sequence[int], needed: Sequence[int]) -> int:
    # Smallest t with need + rate * t >= 0 for every resource that has income.
    return max(-(need // rate) for need, rate in zip(needed, income) if rate > 0)


@dataclass(frozen=True, order=True, slots=True)
class Resources:
    """Robots per resource, stock per resource and minutes left."""

    income: tuple[int, ...]
    amount: tuple[int, ...]
    time: int

    def possible_robots(self, blueprint: Blueprint) -> list[Resources]:
        """States reached by waiting for and building each useful robot."""
        robots: list[Resources] = []
        costs = blueprint.costs
        for index in reversed(range(len(costs))):
            cost = costs[index]
            if index != _GEODE and all(
                self.income[index] >= other[index] for other in costs
            ):
                continue
            needed = [have - price for have, price in zip(self.amount, cost)]
            can_build_now = all(value >= 0 for value in needed)
            time_to_build = 1
            if not can_build_now:
                if not _affordable(self.income, needed, self.time - 1):
                    continue
                # One minute to build, one to move on to the next minute.
                time_to_build = _minutes_until_affordable(self.income, needed) + 1
            income = list(self.income)
            income[index] += 1
            amount = tuple(
                have + rate * time_to_build - price
                for have, rate, price in zip(self.amount, self.income, cost)
            )
            robots.append(Resources(tuple(income), amount, self.time - time_to_build))
            if index == _GEODE and can_build_now:
                return robots
        return robots


def parse(filename: str | os.PathLike) -> list[Blueprint]:
    """Read one blueprint per line."""
    blueprints = []
    for line in read_lines(filename):
        numbers = [int(number) for number in _NUMBER.findall(line)]
        if len(numbers) < 7:
            raise ValueError(f"malformed blueprint: {line!r}")
        blueprints.append(
            Blueprint(
                costs=(
                    (numbers[1], 0, 0, 0),
                    (numbers[2], 0, 0, 0),
                    (numbers[3], numbers[4], 0, 0),
                    (numbers[5], 0, numbers[6], 0),
                )
            )
        )
    return blueprints


def max_geodes(blueprint: Blueprint, minutes: int) -> int:
    """Most geodes a blueprint can open within the given minutes."""
    start = Resources(income=(1, 0, 0, 0), amount=(0, 0, 0, 0), time=minutes)
    stack = [start]
    seen = {start}
    best = 0
    while stack:
        state = stack.pop()
        if state.time <= 0:
            best = max(best, state.amount[_GEODE])
            continue
        for successor in state.possible_robots(blueprint):
            if successor not in seen:
                seen.add(successor)
                stack.append(successor)
    return best


def solve(filename: str | os.PathLike) -> int:
    """Sum of blueprint number times geodes opened in 24 minutes."""
    return sum(
        number * max_geodes(blueprint, _FIRST_MINUTES)
        for number, blueprint in enumerate(parse(filename), start=1)
    )


def solve2(filename: str | os.PathLike) -> int:
    """Product of the geodes opened by the first three blueprints in 32 minutes."""
    blueprints = parse(filename)[:_SECOND_BLUEPRINTS]
    if len(blueprints) < _SECOND_BLUEPRINTS:
        raise ValueError("at least three blueprints are needed")
    return math.prod(max_geodes(blueprint, _SECOND_MINUTES) for blueprint in blueprints)