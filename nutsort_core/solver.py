"""Memoized branch-and-bound depth-first solver.

The search runs on private clones of the board's bolts and only ever expands
strict moves (whole top runs that fit, never a finished bolt into an empty
one). A memo maps each state key to the shortest path length it has been
reached at during this run; revisits that are no shorter are dropped, and any
path already as long as the best solution found so far is cut.

Results are best-effort: the returned solution is short but not proven
minimal, and bolt permutations are not treated as equivalent states.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple, Union

from .board import Board, Move, clone_bolts, is_solved
from .bolt import Bolt, move
from .errors import SolveCancelled
from .hashkey import state_key
from .moves import iter_moves

logger = logging.getLogger(__name__)

INTERRUPT_POLL_MASK = 0xFF


@dataclass(frozen=True)
class SolveResult:
    solvable: bool
    moves: Tuple[Move, ...]
    states_explored: int
    elapsed_ms: int


@dataclass
class _SearchContext:
    memo: Dict[str, int] = field(default_factory=dict)
    best: Optional[Tuple[Move, ...]] = None
    should_stop: Optional[Callable[[], bool]] = None
    expansions: int = 0

    def poll(self) -> None:
        self.expansions += 1
        if self.should_stop is not None and ((self.expansions - 1) & INTERRUPT_POLL_MASK) == 0:
            if self.should_stop():
                raise SolveCancelled(
                    f'search stopped after {self.expansions} expansions, '
                    f'{len(self.memo)} states'
                )


@dataclass
class _Frame:
    bolts: List[Bolt]
    children: Iterator[Move]
    solved: bool = False


def _enter(ctx: _SearchContext, bolts: List[Bolt], path: List[Move]) -> Union[bool, _Frame]:
    """Visits a state. Returns a frame to expand, or whether this leaf is solved."""
    depth = len(path)
    key = state_key(bolts)
    seen = ctx.memo.get(key)
    if seen is not None and seen <= depth:
        return False
    ctx.memo[key] = depth
    if ctx.best is not None and depth >= len(ctx.best):
        return False
    if is_solved(bolts):
        if ctx.best is None or depth < len(ctx.best):
            logger.debug('New best: %s -> %d moves.', None if ctx.best is None else len(ctx.best), depth)
            ctx.best = tuple(path)
        return True
    return _Frame(bolts, iter_moves(bolts, strict=True))


def _search(ctx: _SearchContext, bolts: List[Bolt]) -> bool:
    """Depth-first search driven by an explicit stack of frames.

    Each frame is one state on the current path; path[k] is the move that led
    from stack[k] to stack[k + 1]. Returns whether any solved state was reached.
    """
    path: List[Move] = []
    root = _enter(ctx, bolts, path)
    if not isinstance(root, _Frame):
        return root
    stack: List[_Frame] = [root]
    while stack:
        frame = stack[-1]
        step = next(frame.children, None)
        if step is None:
            stack.pop()
            if not stack:
                return frame.solved
            path.pop()
            stack[-1].solved = stack[-1].solved or frame.solved
            continue
        ctx.poll()
        i, j = step
        child = clone_bolts(frame.bolts)
        move(child[i], child[j])
        path.append(step)
        outcome = _enter(ctx, child, path)
        if isinstance(outcome, _Frame):
            stack.append(outcome)
        else:
            frame.solved = frame.solved or outcome
            path.pop()
    return False


def solve(board: Board, should_stop: Optional[Callable[[], bool]] = None) -> SolveResult:
    """Searches for a short solution of board without touching it.

    should_stop is polled periodically; when it returns True the search raises
    SolveCancelled.
    """
    start = time.perf_counter()
    ctx = _SearchContext(should_stop=should_stop)
    bolts = board.clone_bolts()
    _search(ctx, bolts)
    elapsed_ms = int((time.perf_counter() - start) * 1000)
    if ctx.best is None:
        logger.info('Unsolvable after %d states (%d ms).', len(ctx.memo), elapsed_ms)
        return SolveResult(False, (), len(ctx.memo), elapsed_ms)
    logger.info(
        'Found %d-move solution over %d states (%d ms): %s',
        len(ctx.best), len(ctx.memo), elapsed_ms, list(ctx.best),
    )
    return SolveResult(True, ctx.best, len(ctx.memo), elapsed_ms)


def solveable(board: Board) -> bool:
    return solve(board).solvable


def apply_solution(bolts: Sequence[Bolt], moves: Sequence[Move]) -> bool:
    """Replays moves on clones of bolts; True when every move moves and the end is solved."""
    work = clone_bolts(bolts)
    for i, j in moves:
        if not move(work[i], work[j]):
            return False
    return is_solved(work)
