from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Selection:
    """Interaction overlay: which bolt is selected and how many top nuts glow.

    Owned by the host-facing state machine. Never part of equality, snapshots,
    state keys or undo history.
    """
    index: Optional[int] = None
    highlighted: int = 0

    @property
    def idle(self) -> bool:
        return self.index is None


IDLE = Selection()


@dataclass(frozen=True)
class InteractionResult:
    """Public outcome of one click on a bolt."""
    selected: Optional[int]
    highlighted: int
    move_count: int
    moved: bool
    won: bool
    stars: Optional[int] = None
