"""Supply stacks: move crates between stacks with a crane."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

from aocpuzzles.common import read_lines, split_lines

Stacks = list[list[str]]


@dataclass(frozen=True)
class CraneMove:
    amount: int
    origin: int
    target: int


def parse(filename: str | os.PathLike) -> list[CraneMove]:
    """Read lines of the form "move N from A to B"."""
    moves = []
    for parts in split_lines(read_lines(filename), " "):
        if len(parts) < 6:
            raise ValueError(f"malformed move: {' '.join(parts)!r}")
        moves.append(
            CraneMove(amount=int(parts[1]), origin=int(parts[3]), target=int(parts[5]))
        )
    return moves


def sample_stacks() -> Stacks:
    """Return the stacks of the example, bottom crate first."""
    return [["Z", "N"], ["M", "C", "D"], ["P"]]


def puzzle_stacks() -> Stacks:
    """Return the stacks of the puzzle, bottom crate first."""
    return [
        ["G", "T", "R", "W"],
        ["G", "C", "H", "P", "M", "S", "V", "W"],
        ["C", "L", "T", "S", "G", "M"],
        ["J", "H", "D", "M", "W", "R", "F"],
        ["P", "Q", "L", "H", "S", "W", "F", "J"],
        ["P", "J", "D", "N", "F", "M", "S"],
        ["Z", "B", "D", "F", "G", "C", "S", "J"],
        ["R", "T", "B"],
        ["H", "N", "W", "L", "C"],
    ]


def _stack(stacks: Stacks, number: int) -> list[str]:
    if not 1 <= number <= len(stacks):
        raise ValueError(f"no stack number {number}")
    return stacks[number - 1]


def _tops(stacks: Stacks) -> str:
    if any(not stack for stack in stacks):
        raise ValueError("an empty stack has no top crate")
    return "".join(stack[-1] for stack in stacks)


def _source_and_target(stacks: Stacks, move: CraneMove) -> tuple[list[str], list[str]]:
    source = _stack(stacks, move.origin)
    target = _stack(stacks, move.target)
    if move.amount > len(source):
        raise ValueError(f"stack {move.origin} holds fewer than {move.amount} crates")
    return source, target


def solve1(filename: str | os.PathLike, stacks: Sequence[Sequence[str]]) -> str:
    """Move crates one at a time; return the top crate of every stack."""
    current = [list(stack) for stack in stacks]
    for move in parse(filename):
        source, target = _source_and_target(current, move)
        for _ in range(move.amount):
            target.append(source.pop())
    return _tops(current)


def solve2(filename: str | os.PathLike, stacks: Sequence[Sequence[str]]) -> str:
    """Move crates several at a time, keeping their order."""
    current = [list(stack) for stack in stacks]
    for move in parse(filename):
        source, target = _source_and_target(current, move)
        cut = len(source) - move.amount
        lifted = source[cut:]
        del source[cut:]
        target.extend(lifted)
    return _tops(current)