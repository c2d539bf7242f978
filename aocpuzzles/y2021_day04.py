"""Giant squid: play bingo against a set of boards."""

from __future__ import annotations

import os
from dataclasses import dataclass

from aocpuzzles.common import read_lines, split_lines

BOARD_SIZE = 5


@dataclass
class BingoBoard:
    horizontal_rows: list[list[int]]
    vertical_rows: list[list[int]]

    def score(self) -> int:
        """Sum of the numbers not yet drawn."""
        return sum(sum(row) for row in self.horizontal_rows)

    def update(self, number: int) -> BingoBoard:
        """Return a board with the drawn number struck out."""
        return BingoBoard(
            horizontal_rows=[[n for n in row if n != number] for row in self.horizontal_rows],
            vertical_rows=[[n for n in row if n != number] for row in self.vertical_rows],
        )

    def is_bingo(self) -> bool:
        """A board wins once any row or column has been fully struck out."""
        return any(not row for row in self.horizontal_rows) or any(
            not row for row in self.vertical_rows
        )


def read_draws(filename: str | os.PathLike) -> list[int]:
    """Read the drawn numbers from the first line."""
    return [int(part) for part in split_lines(read_lines(filename), ",")[0]]


def _boards_data(filename: str | os.PathLike) -> list[list[list[int]]]:
    lines = read_lines(filename)[1:]
    rows = [
        [int(part) for part in parts if part]
        for parts in split_lines(lines, " ")
        if len(parts) > 2
    ]
    return [rows[start:start + BOARD_SIZE] for start in range(0, len(rows) - BOARD_SIZE + 1, BOARD_SIZE)]


def parse_boards(filename: str | os.PathLike) -> list[BingoBoard]:
    """Read the boards that follow the line of draws."""
    return [
        BingoBoard(
            horizontal_rows=rows,
            vertical_rows=[list(column) for column in zip(*rows)],
        )
        for rows in _boards_data(filename)
    ]


def solve1(filename: str | os.PathLike) -> int:
    """Score of the first board to win."""
    boards = parse_boards(filename)
    for draw in read_draws(filename):
        for index, board in enumerate(boards):
            boards[index] = board = board.update(draw)
            if board.is_bingo():
                return board.score() * draw
    raise ValueError("no board wins")


def solve2(filename: str | os.PathLike) -> int:
    """Score of the last board to win."""
    boards = parse_boards(filename)
    won: set[int] = set()
    for draw in read_draws(filename):
        for index, board in enumerate(boards):
            boards[index] = board = board.update(draw)
            if board.is_bingo():
                won.add(index)
                if len(won) == len(boards):
                    return board.score() * draw
    raise ValueError("not every board wins")