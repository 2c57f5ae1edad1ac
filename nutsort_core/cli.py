from __future__ import annotations

import argparse
import logging
from typing import Callable, List, Optional

from .board import Board
from .config import GameConfig, debug_enabled
from .deal import deal_board
from .errors import ConsistencyError, NutSortError
from .hashkey import bolts_from_key
from .moves import handle_bolt_interaction, legal_moves, undo
from .scoring import star_rating
from .solver import apply_solution, solve
from .state import IDLE


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose or debug_enabled() else logging.WARNING
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')


def _build_board(args: argparse.Namespace, config: GameConfig) -> Board:
    if args.key is not None:
        return Board(bolts_from_key(args.key, config.bolt_height))
    return deal_board(config, seed=args.seed)


def _print_solution(board: Board, out: Callable[[str], None]) -> None:
    res = solve(board)
    if not res.solvable:
        out(f'Unsolvable ({res.states_explored} states explored, {res.elapsed_ms} ms).')
        return
    if not apply_solution(board.bolts, res.moves):
        raise ConsistencyError(f'solver returned moves that do not solve the board: {list(res.moves)}')
    out(f'Solvable in {len(res.moves)} moves ({res.states_explored} states explored, {res.elapsed_ms} ms):')
    out(' '.join(f'{i}>{j}' for i, j in res.moves) or '(already solved)')


def play(board: Board, config: GameConfig, read: Callable[[str], str] = input,
         out: Callable[[str], None] = print) -> int:
    """Interactive loop. Returns the stars earned (0 when the player quits)."""
    out(board.pretty())
    while True:
        try:
            text = read('Move "i j", u=undo, s=hint, q=quit: ').strip().lower()
        except EOFError:
            return 0
        if text in ('q', 'quit'):
            return 0
        if text in ('u', 'undo'):
            if not undo(board):
                out('Nothing to undo.')
            out(board.pretty())
            continue
        if text in ('s', 'hint'):
            res = solve(board)
            if res.solvable and res.moves:
                i, j = res.moves[0]
                out(f'Try {i} {j} ({len(res.moves)} moves to go).')
            elif res.solvable:
                out('Already solved.')
            else:
                out('No solution from here; try undo.')
            continue
        parts: List[str] = text.replace(',', ' ').split()
        try:
            src, dest = (int(p) for p in parts)
        except ValueError:
            out('Could not parse. Try again.')
            continue
        try:
            first = handle_bolt_interaction(board, src, star_rating, config.min_moves)
            if first.selected != src:
                out(f'Bolt {src} has nothing to pick up.')
                continue
            result = handle_bolt_interaction(board, dest, star_rating, config.min_moves)
        except NutSortError as e:
            board.selection = IDLE
            out(f'error: {e}')
            continue
        if not result.moved:
            out('Illegal move. Try again.')
            continue
        out(board.pretty())
        out(f'Moves taken: {result.move_count}')
        if result.won:
            out(f'You are winner! {result.stars} star(s).')
            return result.stars or 0


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Nut and bolt sorting puzzle: deal, solve, play')
    parser.add_argument('--bolts', type=int, default=None, help='Number of bolts')
    parser.add_argument('--height', type=int, default=None, help='Nuts per bolt (capacity)')
    parser.add_argument('--colours', type=int, default=None, help='Number of nut colours')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the deal')
    parser.add_argument('--key', default=None, help='Load a board from a state key, e.g. "rgr,ggg,"')
    parser.add_argument('--solve', action='store_true', help='Run the solver and print a solution')
    parser.add_argument('--play', action='store_true', help='Play interactively')
    parser.add_argument('--legal', action='store_true', help='List legal moves')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    base = GameConfig.from_env()
    try:
        config = GameConfig(
            num_bolts=args.bolts if args.bolts is not None else base.num_bolts,
            bolt_height=args.height if args.height is not None else base.bolt_height,
            num_colours=args.colours if args.colours is not None else base.num_colours,
            min_moves=base.min_moves,
        )
        board = _build_board(args, config)
    except NutSortError as e:
        parser.error(str(e))

    if args.play:
        stars = play(board, config)
        print(f'Stars earned: {stars}')
        return

    print('Initial board:')
    print(board.pretty())
    print(f'Key: {board.state_key()}')
    if args.legal:
        print('Legal moves:', legal_moves(board.bolts))
    if args.solve:
        _print_solution(board, print)


if __name__ == '__main__':
    main()
