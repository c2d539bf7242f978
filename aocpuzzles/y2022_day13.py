"""Distress signal: order nested packet lists."""

from __future__ import annotations

import json
import os
from functools import cmp_to_key
from typing import Any

from aocpuzzles.common import read_lines

_DIVIDERS = ("[[2]]", "[[6]]")


def compare(a: Any, b: Any) -> int:
    """1 if a comes before b, -1 if after, 0 if neither decides."""
    a_is_list = isinstance(a, list)
    b_is_list = isinstance(b, list)
    if not a_is_list and not b_is_list:
        diff = b - a
        return (diff > 0) - (diff < 0)
    list_a = a if a_is_list else [a]
    list_b = b if b_is_list else [b]
    for left, right in zip(list_a, list_b):
        result = compare(left, right)
        if result:
            return result
    if len(list_a) > len(list_b):
        return -1
    if len(list_a) < len(list_b):
        return 1
    return 0


def solve(filename: str | os.PathLike) -> int:
    """Sum of the 1-based indices of the pairs already in the right order."""
    lines = read_lines(filename)
    return sum(
        number
        for number, i in enumerate(range(1, len(lines) - 1, 3), start=1)
        if compare(json.loads(lines[i - 1]), json.loads(lines[i])) > 0
    )


def solve2(filename: str | os.PathLike) -> int:
    """Product of the positions of the divider packets after sorting."""
    texts = [line for line in read_lines(filename) if line]
    texts.extend(_DIVIDERS)
    packets = [(json.loads(text), text) for text in texts]
    packets.sort(
        key=cmp_to_key(lambda x, y: -1 if compare(x[0], y[0]) > 0 else 1)
    )
    product = 1
    for position, (_, text) in enumerate(packets, start=1):
        if text in _DIVIDERS:
            product *= position
    return product