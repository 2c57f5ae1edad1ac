from __future__ import annotations

from typing import Callable

# Nobody knows the true minimum for a random deal without running the solver,
# so every level is scored against this fixed target.
MIN_MOVES = 18

Scorer = Callable[[int, int], int]


def star_rating(moves_taken: int, min_moves: int = MIN_MOVES) -> int:
    """Stars earned for finishing in moves_taken moves: 3, 2, 1 or 0."""
    if moves_taken <= min_moves:
        return 3
    if moves_taken <= min_moves * 1.5:
        return 2
    if moves_taken <= min_moves * 2:
        return 1
    return 0
