"""Tuning trouble: find the first marker in a datastream."""

from __future__ import annotations

from collections.abc import Sequence


def solve(datastream: Sequence[str], sequence_len: int) -> int:
    """Number of characters read once the last window of distinct ones ends."""
    if sequence_len < 1:
        raise ValueError("sequence length must be positive")
    windows = (
        datastream[start:start + sequence_len]
        for start in range(len(datastream) - sequence_len + 1)
    )
    for position, window in enumerate(windows):
        if len(set(window)) == sequence_len:
            return position + sequence_len
    raise ValueError("no marker in the datastream")