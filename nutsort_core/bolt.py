from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from .errors import BoltFullError, ConsistencyError
from .nut import Colour, Nut


@dataclass
class Bolt:
    """A capacity-bounded stack of nuts. nuts[0] is the top of the stack."""
    capacity: int
    nuts: List[Nut] = field(default_factory=list)

    @classmethod
    def from_colours(cls, capacity: int, colours: Iterable[Colour]) -> 'Bolt':
        """Builds a bolt from colours listed top to bottom."""
        bolt = cls(capacity)
        for colour in reversed(list(colours)):
            bolt.push(colour)
        return bolt

    def push(self, colour: Colour) -> None:
        if len(self.nuts) >= self.capacity:
            raise BoltFullError(f'bolt {self} has no room for {colour!r}')
        self.nuts.insert(0, Nut(colour))

    def is_empty(self) -> bool:
        return not self.nuts

    def is_full(self) -> bool:
        return len(self.nuts) == self.capacity

    def is_complete(self) -> bool:
        if self.is_empty():
            return False
        top = self.nuts[0].colour
        return self.is_full() and all(nut.colour == top for nut in self.nuts)

    def is_homogeneous(self) -> bool:
        return all(nut.colour == self.nuts[0].colour for nut in self.nuts)

    def top_colour(self) -> Optional[Colour]:
        return self.nuts[0].colour if self.nuts else None

    def top_run_length(self) -> int:
        """Length of the run of nuts sharing the top nut's colour (0 when empty)."""
        if not self.nuts:
            return 0
        top = self.nuts[0].colour
        run = 0
        for nut in self.nuts:
            if nut.colour != top:
                break
            run += 1
        return run

    def free_space(self) -> int:
        return self.capacity - len(self.nuts)

    def colours(self) -> Tuple[Colour, ...]:
        return tuple(nut.colour for nut in self.nuts)

    def clone(self) -> 'Bolt':
        # Nuts are frozen, so sharing them between clones is safe.
        return Bolt(self.capacity, list(self.nuts))

    def restore(self, snapshot: 'Bolt') -> None:
        """Replaces this bolt's contents with a copy of snapshot's nuts."""
        if snapshot.capacity != self.capacity:
            raise ConsistencyError(
                f'cannot restore a {snapshot.capacity}h snapshot into a {self.capacity}h bolt'
            )
        self.nuts = list(snapshot.nuts)

    def pretty(self) -> str:
        """Bottom-to-top rendering padded with '.' for free slots, e.g. 'rgg.'."""
        return ''.join(reversed(self.colours())) + '.' * self.free_space()

    def __str__(self) -> str:
        return f"{{{self.capacity}h, {','.join(self.colours())}}}"


def can_move(src: Bolt, dest: Bolt, strict: bool = False) -> bool:
    """Whether the top of src may go onto dest.

    The non-strict rules are the game rules. strict additionally rejects moves
    the solver never needs: shifting a finished bolt into an empty one, and
    splitting a top run that does not fit in dest.
    """
    if src is dest:
        return False
    if src.is_empty():
        return False
    if dest.is_full():
        return False
    src_top = src.nuts[0].colour
    if dest.nuts and dest.nuts[0].colour != src_top:
        return False
    if strict:
        if dest.is_empty() and src.is_full() and src.is_homogeneous():
            return False
        if src.top_run_length() > dest.free_space():
            return False
    return True


def move(src: Bolt, dest: Bolt) -> bool:
    """Moves the largest matching top run of src onto dest.

    Returns True when at least one nut moved.
    """
    moved = False
    # Bounded by dest.capacity: each pass fills one slot.
    while can_move(src, dest, strict=False):
        dest.nuts.insert(0, src.nuts.pop(0))
        moved = True
    return moved
