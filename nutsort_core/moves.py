from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence

from .board import Board, Move
from .bolt import Bolt, can_move
from .scoring import MIN_MOVES, Scorer, star_rating
from .state import IDLE, InteractionResult, Selection

logger = logging.getLogger(__name__)


def iter_moves(bolts: Sequence[Bolt], strict: bool = False) -> Iterator[Move]:
    """Lazily yields the (source, destination) pairs allowed by can_move, in index order."""
    for i, src in enumerate(bolts):
        for j, dest in enumerate(bolts):
            if can_move(src, dest, strict):
                yield (i, j)


def legal_moves(bolts: Sequence[Bolt], strict: bool = False) -> List[Move]:
    return list(iter_moves(bolts, strict))


def _result(board: Board, moved: bool = False, won: bool = False, stars: Optional[int] = None) -> InteractionResult:
    return InteractionResult(
        selected=board.selection.index,
        highlighted=board.selection.highlighted,
        move_count=board.move_count,
        moved=moved,
        won=won,
        stars=stars,
    )


def handle_bolt_interaction(
    board: Board,
    bolt_index: int,
    scorer: Scorer = star_rating,
    min_moves: int = MIN_MOVES,
) -> InteractionResult:
    """Applies one click on bolt_index to the board's selection state machine.

    Idle: select the bolt unless it is empty or already complete.
    Selected(i), click i: deselect.
    Selected(i), click j: try to move i onto j, then go back to idle.
    """
    clicked = board.bolt(bolt_index)
    selected = board.selection.index

    if selected is None:
        if clicked.is_empty() or clicked.is_complete():
            logger.debug('Not selecting bolt %d: empty or complete.', bolt_index)
            return _result(board)
        board.selection = Selection(bolt_index, clicked.top_run_length())
        logger.debug('Selected bolt %d %s.', bolt_index, clicked)
        return _result(board)

    if selected == bolt_index:
        board.selection = IDLE
        logger.debug('Deselected bolt %d.', bolt_index)
        return _result(board)

    moved = board.apply_move(selected, bolt_index)
    board.selection = IDLE
    if not moved:
        logger.debug('Move %d -> %d not possible.', selected, bolt_index)
        return _result(board)
    if board.is_won():
        stars = scorer(board.move_count, min_moves)
        logger.info('Won in %d moves: %d star(s).', board.move_count, stars)
        return _result(board, moved=True, won=True, stars=stars)
    return _result(board, moved=True)


def undo(board: Board) -> bool:
    """Reverts the last successful move, if any. move_count is left as is."""
    return board.undo()
