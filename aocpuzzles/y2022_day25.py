"""Full of hot air: add numbers written in balanced base five."""

from __future__ import annotations

import os

from aocpuzzles.common import read_lines

_DIGITS = {"=": -2, "-": -1, "0": 0, "1": 1, "2": 2}
_SYMBOLS = {value: symbol for symbol, value in _DIGITS.items()}


def snafu_to_decimal(snafu: str) -> int:
    """Value of a balanced base-five number; the empty string is zero."""
    value = 0
    for char in snafu:
        try:
            value = value * 5 + _DIGITS[char]
        except KeyError:
            raise ValueError(f"not a snafu digit: {char!r}") from None
    return value


def _div_towards_zero(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def decimal_to_snafu(value: int) -> str:
    """Balanced base-five digits of a number; zero gives the empty string."""
    digits = []
    quotient = value
    while quotient != 0:
        remainder = (quotient + 2) % 5 - 2
        quotient = _div_towards_zero(quotient + 2, 5)
        digits.append(_SYMBOLS[remainder])
    return "".join(reversed(digits))


def solve(filename: str | os.PathLike) -> str:
    """Sum of all numbers in the file, written in balanced base five."""
    return decimal_to_snafu(sum(snafu_to_decimal(line) for line in read_lines(filename)))