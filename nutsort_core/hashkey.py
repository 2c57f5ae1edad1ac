from __future__ import annotations

from typing import List, Sequence

from .bolt import Bolt
from .errors import ConfigError
from .nut import PALETTE

BOLT_SEPARATOR = ','


def state_key(bolts: Sequence[Bolt]) -> str:
    """Canonical key: each bolt's colours top to bottom, bolts joined by ','.

    Bolt order is significant; two boards that differ only by a permutation of
    bolts get different keys.
    """
    return BOLT_SEPARATOR.join(''.join(bolt.colours()) for bolt in bolts)


def bolts_from_key(key: str, capacity: int) -> List[Bolt]:
    """Parses a state key back into bolts of the given capacity."""
    if capacity <= 0:
        raise ConfigError('capacity must be a positive integer')
    bolts: List[Bolt] = []
    for part in key.strip().split(BOLT_SEPARATOR):
        part = part.strip()
        unknown = [ch for ch in part if ch not in PALETTE]
        if unknown:
            raise ConfigError(f'unknown colour(s) {unknown} in key part {part!r}')
        if len(part) > capacity:
            raise ConfigError(f'key part {part!r} does not fit in capacity {capacity}')
        bolts.append(Bolt.from_colours(capacity, part))
    return bolts
