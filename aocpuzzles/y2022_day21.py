"""Monkey math: evaluate a tree of shouting monkeys and solve for one."""

from __future__ import annotations

import os

from aocpuzzles.common import read_lines

Job = tuple[str, str, str, str]

_ROOT = "root"
_HUMAN = "humn"


def _div(a: int, b: int) -> int:
    """Integer division rounding towards zero."""
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _apply(op: str, a: int, b: int) -> int:
    if op == "*":
        return a * b
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "/":
        return _div(a, b)
    raise ValueError(f"unknown operation: {op!r}")


def parse(filename: str | os.PathLike) -> tuple[dict[str, int], list[Job]]:
    """Split monkeys into known numbers and jobs (name, left, right, op)."""
    known: dict[str, int] = {}
    unknown: list[Job] = []
    for line in read_lines(filename):
        name, _, job = line.partition(": ")
        parts = job.split(" ")
        if len(parts) == 3:
            left, op, right = parts
            unknown.append((name, left, right, op))
        elif len(parts) == 1:
            known[name] = int(parts[0])
        else:
            raise ValueError(f"malformed monkey: {line!r}")
    return known, unknown


def _resolve(known: dict[str, int], jobs: list[Job]) -> list[Job]:
    """Evaluate every job whose inputs are known; return the rest."""
    pending = list(jobs)
    while True:
        remaining = []
        for job in pending:
            name, left, right, op = job
            if left in known and right in known:
                known[name] = _apply(op, known[left], known[right])
            else:
                remaining.append(job)
        if len(remaining) == len(pending):
            return remaining
        pending = remaining


def solve(filename: str | os.PathLike) -> int:
    """Number the root monkey yells."""
    known, unknown = parse(filename)
    _resolve(known, unknown)
    if _ROOT not in known:
        raise ValueError("the root monkey cannot be evaluated")
    return known[_ROOT]


def _solve_right(op: str, result: int, left: int) -> int:
    if op == "*":
        return _div(result, left)
    if op == "+":
        return result - left
    if op == "-":
        return left - result
    if op == "/":
        return _div(result, left)
    raise ValueError(f"unknown operation: {op!r}")


def _solve_left(op: str, result: int, right: int) -> int:
    if op == "*":
        return _div(result, right)
    if op == "+":
        return result - right
    if op == "-":
        return result + right
    if op == "/":
        return result * right
    raise ValueError(f"unknown operation: {op!r}")


def solve2(filename: str | os.PathLike) -> int:
    """Number the human must yell for both sides of root to match."""
    known, unknown = parse(filename)
    known.pop(_HUMAN, None)
    remaining = {
        name: (left, right, op) for name, left, right, op in _resolve(known, unknown)
    }
    if _ROOT not in remaining:
        raise ValueError("the root monkey does not depend on the human")
    root_left, root_right, _ = remaining[_ROOT]
    if root_right in known:
        known[root_left] = known[root_right]
    elif root_left in known:
        known[root_right] = known[root_left]
    else:
        raise ValueError("both sides of root depend on the human")
    while _HUMAN not in known:
        progress = False
        for name, (left, right, op) in remaining.items():
            if name not in known:
                continue
            if left in known:
                target, value = right, _solve_right(op, known[name], known[left])
            elif right in known:
                target, value = left, _solve_left(op, known[name], known[right])
            else:
                continue
            if target not in known:
                progress = True
            known[target] = value
        if not progress and _HUMAN not in known:
            raise ValueError("the human's number cannot be determined")
    return known[_HUMAN]