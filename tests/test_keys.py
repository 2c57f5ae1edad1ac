import unittest

from game import (
    Board,
    ConfigError,
    bolts_from_key,
    handle_bolt_interaction,
    state_key,
)


class TestStateKeys(unittest.TestCase):
    def test_given_board_when_keying_then_colours_top_first_joined_by_comma(self):
        board = Board.from_colours(3, ["rgr", "ggg", ""])
        self.assertEqual(board.state_key(), "rgr,ggg,")
        self.assertEqual(state_key(board.bolts), "rgr,ggg,")

    def test_given_key_when_parsing_then_same_bolts(self):
        bolts = bolts_from_key("rgr,ggg,", 3)
        self.assertEqual(len(bolts), 3)
        self.assertEqual(bolts[0].colours(), ("r", "g", "r"))
        self.assertTrue(bolts[2].is_empty())
        self.assertEqual(Board(bolts), Board.from_colours(3, ["rgr", "ggg", ""]))

    def test_given_permuted_bolts_when_keying_then_keys_differ(self):
        a = Board.from_colours(3, ["rgr", "ggg", ""])
        b = Board.from_colours(3, ["ggg", "rgr", ""])
        self.assertNotEqual(a.state_key(), b.state_key())

    def test_given_selection_or_moves_when_keying_then_key_unchanged(self):
        board = Board.from_colours(3, ["rgr", "ggg", ""])
        key = board.state_key()
        handle_bolt_interaction(board, 0)
        board.move_count = 5
        self.assertEqual(board.state_key(), key)
        self.assertEqual(board.snapshot(), ((3, ("r", "g", "r")), (3, ("g", "g", "g")), (3, ())))

    def test_given_bad_keys_when_parsing_then_config_error(self):
        with self.assertRaises(ConfigError):
            bolts_from_key("rz,", 2)
        with self.assertRaises(ConfigError):
            bolts_from_key("rrr,", 2)
        with self.assertRaises(ConfigError):
            bolts_from_key("r", 0)


if __name__ == "__main__":
    unittest.main(verbosity=2)
