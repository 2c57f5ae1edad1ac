from __future__ import annotations

import logging
import random
from typing import List, Optional

from .board import Board
from .bolt import Bolt
from .config import GameConfig
from .errors import ConsistencyError
from .nut import PALETTE

logger = logging.getLogger(__name__)


def create_board(
    num_bolts: int = 7,
    bolt_height: int = 4,
    num_colours: int = 5,
    rng: Optional[random.Random] = None,
) -> Board:
    """Deals bolt_height nuts of each of num_colours colours over the first num_colours bolts.

    Each nut goes to a random bolt, or the next one along (wrapping) with room.
    The remaining bolts start empty. Solvability is not checked.
    """
    # Validates up front so placement can never run out of room.
    GameConfig(num_bolts=num_bolts, bolt_height=bolt_height, num_colours=num_colours)
    rng = rng if rng is not None else random.Random()
    bolts: List[Bolt] = [Bolt(bolt_height) for _ in range(num_bolts)]
    colours = PALETTE[:num_colours]
    for _ in range(bolt_height):
        for colour in colours:
            start = rng.randrange(num_colours)
            for offset in range(num_colours):
                bolt = bolts[(start + offset) % num_colours]
                if not bolt.is_full():
                    bolt.push(colour)
                    break
            else:
                raise ConsistencyError(f'no room left for a {colour!r} nut')
    board = Board(bolts)
    logger.info(
        'New board: %d bolts, height %d, %d colours: %s',
        num_bolts, bolt_height, num_colours, board.state_key(),
    )
    return board


def deal_board(config: Optional[GameConfig] = None, seed: Optional[int] = None) -> Board:
    """Deals a board for config using a private random source seeded with seed."""
    cfg = config or GameConfig()
    return create_board(cfg.num_bolts, cfg.bolt_height, cfg.num_colours, random.Random(seed))
