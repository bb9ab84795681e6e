"""
Backtrack pointers recorded per matrix cell.
"""

from enum import IntEnum
from typing import Tuple


class Backtrack(IntEnum):
    """
    Source of a cell's chosen maximum.

    STOP marks the matrix origin (global) or a cell floored to zero (local).
    """
    STOP = 0
    DIAGONAL = 1
    UP = 2
    LEFT = 3

    @property
    def delta(self) -> Tuple[int, int]:
        """(row, col) step taken when walking this pointer backwards."""
        return _DELTAS[self]


_DELTAS = {
    Backtrack.STOP: (0, 0),
    Backtrack.DIAGONAL: (1, 1),
    Backtrack.UP: (1, 0),
    Backtrack.LEFT: (0, 1),
}


def choose(diagonal: int, up: int, left: int) -> Tuple[int, Backtrack]:
    """
    Pick the best of three candidate scores.

    Ties are broken in the fixed order DIAGONAL > UP > LEFT.

    Returns:
        Tuple of (best_score, pointer)
    """
    if diagonal >= up and diagonal >= left:
        return diagonal, Backtrack.DIAGONAL
    if up >= left:
        return up, Backtrack.UP
    return left, Backtrack.LEFT


def floor_at_zero(score: int, pointer: Backtrack) -> Tuple[int, Backtrack]:
    """Local alignment floor: non-positive scores become 0 and STOP."""
    if score <= 0:
        return 0, Backtrack.STOP
    return score, pointer


__all__ = ['Backtrack', 'choose', 'floor_at_zero']
