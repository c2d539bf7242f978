"""Binary diagnostic: power consumption and life support ratings."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

from aocpuzzles.common import binary_string_to_int, get_bit, read_lines

_WIDTH = 32
_MASK = (1 << _WIDTH) - 1


@dataclass
class BinariesSet:
    binaries: list[int]
    length: int


def parse_data(filename: str | os.PathLike) -> BinariesSet:
    """Read the report; the digit count comes from the first line."""
    lines = read_lines(filename)
    return BinariesSet(
        binaries=[binary_string_to_int(line) for line in lines],
        length=len(lines[0]),
    )


def count_set_bits(binaries: Iterable[int]) -> list[int]:
    """Count set bits per position; index 0 holds bit 31, index 31 bit 0."""
    values = list(binaries)
    totals = [sum(get_bit(value, bit) for value in values) for bit in range(_WIDTH)]
    return totals[::-1]


def gamma_rate(totals: list[int], count: int) -> int:
    """Build the number from the bits set in more than half of the values."""
    return sum(
        1 << (_WIDTH - 1 - index)
        for index, total in enumerate(totals)
        if total > count // 2
    )


def epsilon_rate(gamma: int, length: int) -> int:
    """Invert the gamma rate within the given number of digits."""
    unused = sum(1 << bit for bit in range(length, _WIDTH))
    return ~(gamma + unused) & _MASK


def power_consumption(binaries_set: BinariesSet) -> int:
    totals = count_set_bits(binaries_set.binaries)
    gamma = gamma_rate(totals, len(binaries_set.binaries))
    return gamma * epsilon_rate(gamma, binaries_set.length)


def _rating(binaries_set: BinariesSet, keep_common: bool) -> int:
    current = list(binaries_set.binaries)
    for bit in reversed(range(binaries_set.length)):
        ones = sum(get_bit(value, bit) for value in current)
        most_common_is_one = ones * 2 >= len(current)
        wanted = most_common_is_one if keep_common else not most_common_is_one
        current = [value for value in current if get_bit(value, bit) == wanted]
        if len(current) == 1:
            break
    return current[0]


def oxygen_rating(binaries_set: BinariesSet) -> int:
    """Keep values with the most common bit, preferring 1 on ties."""
    return _rating(binaries_set, keep_common=True)


def co2_rating(binaries_set: BinariesSet) -> int:
    """Keep values with the least common bit, preferring 0 on ties."""
    return _rating(binaries_set, keep_common=False)


def solve1(filename: str | os.PathLike) -> int:
    return power_consumption(parse_data(filename))


def solve2(filename: str | os.PathLike) -> int:
    binaries_set = parse_data(filename)
    return co2_rating(binaries_set) * oxygen_rating(binaries_set)