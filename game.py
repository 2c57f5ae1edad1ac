from __future__ import annotations

# Facade module that re-exports NutSort core functionality.
# The Flask app, tools and tests import from here.
# Single-responsibility modules live under nutsort_core/*.

# Works both as part of a package and imported directly from the repo root.
try:
    from .nutsort_core.errors import (  # type: ignore
        NutSortError,
        ConfigError,
        BoltFullError,
        InvalidBoltError,
        ConsistencyError,
        SolveCancelled,
    )
    from .nutsort_core.nut import Colour, Nut, PALETTE, COLOUR_RGB  # type: ignore
    from .nutsort_core.bolt import Bolt, can_move, move  # type: ignore
    from .nutsort_core.board import Board, Move, is_solved, clone_bolts, colour_counts  # type: ignore
    from .nutsort_core.state import Selection, IDLE, InteractionResult  # type: ignore
    from .nutsort_core.moves import iter_moves, legal_moves, handle_bolt_interaction, undo  # type: ignore
    from .nutsort_core.deal import create_board, deal_board  # type: ignore
    from .nutsort_core.config import GameConfig  # type: ignore
    from .nutsort_core.hashkey import state_key, bolts_from_key  # type: ignore
    from .nutsort_core.scoring import MIN_MOVES, star_rating  # type: ignore
    from .nutsort_core.solver import SolveResult, solve, solveable, apply_solution  # type: ignore
except ImportError:
    from nutsort_core.errors import (  # type: ignore
        NutSortError,
        ConfigError,
        BoltFullError,
        InvalidBoltError,
        ConsistencyError,
        SolveCancelled,
    )
    from nutsort_core.nut import Colour, Nut, PALETTE, COLOUR_RGB  # type: ignore
    from nutsort_core.bolt import Bolt, can_move, move  # type: ignore
    from nutsort_core.board import Board, Move, is_solved, clone_bolts, colour_counts  # type: ignore
    from nutsort_core.state import Selection, IDLE, InteractionResult  # type: ignore
    from nutsort_core.moves import iter_moves, legal_moves, handle_bolt_interaction, undo  # type: ignore
    from nutsort_core.deal import create_board, deal_board  # type: ignore
    from nutsort_core.config import GameConfig  # type: ignore
    from nutsort_core.hashkey import state_key, bolts_from_key  # type: ignore
    from nutsort_core.scoring import MIN_MOVES, star_rating  # type: ignore
    from nutsort_core.solver import SolveResult, solve, solveable, apply_solution  # type: ignore


def new_game(config: GameConfig | None = None, seed: int | None = None) -> Board:
    """Deals a fresh board; the previous board and its undo history are simply dropped."""
    return deal_board(config or GameConfig.from_env(), seed=seed)


def main() -> None:
    # CLI driver delegated to nutsort_core.cli
    try:
        from .nutsort_core.cli import main as _main  # type: ignore
    except ImportError:
        from nutsort_core.cli import main as _main  # type: ignore
    _main()


if __name__ == '__main__':
    main()
