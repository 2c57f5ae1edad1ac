from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .bolt import Bolt, move
from .errors import ConsistencyError, InvalidBoltError
from .hashkey import state_key
from .nut import Colour
from .state import IDLE, Selection

logger = logging.getLogger(__name__)

Move = Tuple[int, int]  # (source index, destination index)
Snapshot = Tuple[Tuple[int, Tuple[Colour, ...]], ...]  # (capacity, colours) per bolt


def is_solved(bolts: Iterable[Bolt]) -> bool:
    """A position is won when every bolt is empty or complete."""
    return all(bolt.is_empty() or bolt.is_complete() for bolt in bolts)


def clone_bolts(bolts: Iterable[Bolt]) -> List[Bolt]:
    return [bolt.clone() for bolt in bolts]


def colour_counts(bolts: Iterable[Bolt]) -> Dict[Colour, int]:
    counts: Counter = Counter()
    for bolt in bolts:
        counts.update(bolt.colours())
    return dict(counts)


class Board:
    """Live puzzle state: bolts, move counter, undo history and selection overlay.

    Equality and snapshots only look at the bolts; the move counter, history
    and selection are session state.
    """

    def __init__(self, bolts: Sequence[Bolt], move_count: int = 0) -> None:
        self.bolts: List[Bolt] = list(bolts)
        self.move_count = move_count
        self.undo_history: List[List[Bolt]] = []
        self.selection: Selection = IDLE

    @classmethod
    def from_colours(cls, capacity: int, stacks: Iterable[Iterable[Colour]]) -> 'Board':
        """Builds a board from per-bolt colour lists, each top to bottom."""
        return cls([Bolt.from_colours(capacity, stack) for stack in stacks])

    def __len__(self) -> int:
        return len(self.bolts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    __hash__ = None  # type: ignore[assignment]

    def bolt(self, index: int) -> Bolt:
        if not 0 <= index < len(self.bolts):
            raise InvalidBoltError(f'bolt index {index} outside 0..{len(self.bolts) - 1}')
        return self.bolts[index]

    def is_won(self) -> bool:
        return is_solved(self.bolts)

    def snapshot(self) -> Snapshot:
        """Stable structural snapshot without any overlay state."""
        return tuple((bolt.capacity, bolt.colours()) for bolt in self.bolts)

    def state_key(self) -> str:
        return state_key(self.bolts)

    def clone_bolts(self) -> List[Bolt]:
        return clone_bolts(self.bolts)

    def colour_counts(self) -> Dict[Colour, int]:
        return colour_counts(self.bolts)

    def apply_move(self, src: int, dest: int) -> bool:
        """Moves the top run of bolt src onto bolt dest, recording undo history.

        Returns False, leaving everything untouched, when nothing could move.
        """
        src_bolt = self.bolt(src)
        dest_bolt = self.bolt(dest)
        before = self.clone_bolts()
        if not move(src_bolt, dest_bolt):
            logger.debug('No move from bolt %d to bolt %d.', src, dest)
            return False
        self.undo_history.append(before)
        self.move_count += 1
        logger.debug('Moved %d -> %d (move %d): %s', src, dest, self.move_count, self.state_key())
        if self.is_won():
            logger.info('Board solved in %d moves: %s', self.move_count, self.state_key())
            self.undo_history.clear()
        return True

    def can_undo(self) -> bool:
        return bool(self.undo_history)

    def undo(self) -> bool:
        """Restores the bolts from the last snapshot. The move counter is kept."""
        if not self.undo_history:
            logger.warning('Undo requested with empty history; ignoring.')
            return False
        expected = self.colour_counts()
        previous = self.undo_history.pop()
        if len(previous) != len(self.bolts):
            raise ConsistencyError(
                f'undo snapshot has {len(previous)} bolts, board has {len(self.bolts)}'
            )
        for bolt, saved in zip(self.bolts, previous):
            bolt.restore(saved)
        if self.colour_counts() != expected:
            raise ConsistencyError('undo changed the number of nuts of some colour')
        self.selection = IDLE
        logger.debug('Undo: %s (%d snapshots left)', self.state_key(), len(self.undo_history))
        return True

    def pretty(self, selection: Optional[Selection] = None) -> str:
        """Text rendering, one bolt per line, bottom of the stack on the left."""
        sel = self.selection if selection is None else selection
        lines: List[str] = []
        width = len(str(max(len(self.bolts) - 1, 0)))
        for i, bolt in enumerate(self.bolts):
            marker = '*' if sel.index == i else ' '
            suffix = ' done' if bolt.is_complete() else ''
            lines.append(f'{i:>{width}}{marker}|{bolt.pretty()}|{suffix}')
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f'Board({self.state_key()!r}, moves={self.move_count})'
