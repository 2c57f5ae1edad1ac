import unittest

from game import (
    Board,
    GameConfig,
    SolveCancelled,
    apply_solution,
    deal_board,
    handle_bolt_interaction,
    iter_moves,
    legal_moves,
    solve,
    solveable,
)


class TestSolver(unittest.TestCase):
    def test_given_already_won_board_when_solving_then_zero_move_solution(self):
        board = Board.from_colours(2, ["rr", ""])
        self.assertTrue(board.is_won())
        res = solve(board)
        self.assertTrue(res.solvable)
        self.assertEqual(res.moves, ())
        self.assertEqual(res.states_explored, 1)
        self.assertTrue(solveable(board))

    def test_given_two_swapped_colours_when_solving_then_three_move_solution(self):
        # r over g, g over r, one spare bolt: no two-move solution exists.
        board = Board.from_colours(2, ["rg", "gr", ""])
        res = solve(board)
        self.assertTrue(res.solvable)
        self.assertEqual(len(res.moves), 3)
        self.assertTrue(apply_solution(board.bolts, res.moves))

    def test_given_no_legal_moves_when_solving_then_unsolvable(self):
        board = Board.from_colours(2, ["rg", "bb", "yy"])
        self.assertEqual(legal_moves(board.bolts), [])
        res = solve(board)
        self.assertFalse(res.solvable)
        self.assertEqual(res.moves, ())
        self.assertEqual(res.states_explored, 1)
        self.assertFalse(solveable(board))

    def test_given_only_cyclic_moves_when_solving_then_terminates_unsolvable(self):
        # Two r nuts can shuttle between bolts forever but never fill a 3h bolt.
        board = Board.from_colours(3, ["rr", "", "ggg"])
        res = solve(board)
        self.assertFalse(res.solvable)
        self.assertGreaterEqual(res.states_explored, 2)

    def test_given_live_board_when_solving_then_board_and_selection_untouched(self):
        board = Board.from_colours(2, ["rg", "gr", ""])
        handle_bolt_interaction(board, 0)
        before = board.snapshot()
        selection = board.selection
        solve(board)
        self.assertEqual(board.snapshot(), before)
        self.assertEqual(board.selection, selection)
        self.assertEqual(board.move_count, 0)
        self.assertEqual(board.undo_history, [])

    def test_given_repeated_runs_when_solving_then_results_independent(self):
        board = Board.from_colours(3, ["rgb", "bgr", "gbr", "", ""])
        first = solve(board)
        second = solve(board)
        self.assertEqual(first.solvable, second.solvable)
        self.assertEqual(first.moves, second.moves)
        self.assertEqual(first.states_explored, second.states_explored)
        if first.solvable:
            self.assertTrue(apply_solution(board.bolts, first.moves))

    def test_given_small_deals_when_solving_then_solutions_replay(self):
        cfg = GameConfig(num_bolts=4, bolt_height=3, num_colours=2)
        for seed in range(5):
            board = deal_board(cfg, seed=seed)
            res = solve(board)
            if res.solvable:
                self.assertTrue(apply_solution(board.bolts, res.moves), f"seed {seed}")

    def test_given_stop_hook_when_it_fires_then_search_cancelled(self):
        board = deal_board(GameConfig(), seed=1)
        calls = []

        def should_stop():
            calls.append(1)
            return True

        with self.assertRaises(SolveCancelled):
            solve(board, should_stop=should_stop)
        self.assertEqual(len(calls), 1)

    def test_given_board_when_listing_strict_moves_then_generator_matches_list(self):
        board = Board.from_colours(3, ["rrg", "g", "", "bbb"])
        lazy = iter_moves(board.bolts, strict=True)
        self.assertEqual(next(lazy), (0, 2))
        self.assertEqual([(0, 2)] + list(lazy), legal_moves(board.bolts, strict=True))
        self.assertEqual(legal_moves(board.bolts, strict=True), [(0, 2), (1, 2)])

    def test_given_bogus_moves_when_replaying_then_not_a_solution(self):
        board = Board.from_colours(2, ["rg", "gr", ""])
        self.assertFalse(apply_solution(board.bolts, [(2, 0)]))
        self.assertFalse(apply_solution(board.bolts, [(0, 2)]))
        self.assertEqual(board.snapshot(), Board.from_colours(2, ["rg", "gr", ""]).snapshot())


if __name__ == "__main__":
    unittest.main(verbosity=2)
