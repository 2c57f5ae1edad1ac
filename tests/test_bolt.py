import unittest

from game import (
    Bolt,
    BoltFullError,
    ConsistencyError,
    can_move,
    move,
)


def mk(capacity, colours):
    """Bolt from a top-to-bottom colour string."""
    return Bolt.from_colours(capacity, colours)


class TestBoltBasics(unittest.TestCase):
    def test_given_colours_when_building_then_index_zero_is_top(self):
        b = mk(3, "rgb")
        self.assertEqual(b.colours(), ("r", "g", "b"))
        self.assertEqual(b.top_colour(), "r")
        self.assertEqual(b.free_space(), 0)
        self.assertTrue(b.is_full())

    def test_given_full_bolt_when_pushing_then_capacity_error(self):
        b = mk(2, "")
        b.push("r")
        b.push("g")
        self.assertEqual(b.colours(), ("g", "r"))
        with self.assertRaises(BoltFullError):
            b.push("b")
        self.assertEqual(len(b.nuts), 2)

    def test_given_various_stacks_when_checking_complete_then_only_full_single_colour(self):
        self.assertFalse(mk(2, "").is_complete())
        self.assertTrue(mk(2, "").is_empty())
        self.assertTrue(mk(2, "rr").is_complete())
        self.assertFalse(mk(3, "rr").is_complete())
        self.assertFalse(mk(2, "rg").is_complete())

    def test_given_stack_when_measuring_top_run_then_counts_leading_colour(self):
        self.assertEqual(mk(4, "rrg").top_run_length(), 2)
        self.assertEqual(mk(4, "grr").top_run_length(), 1)
        self.assertEqual(mk(4, "bbbb").top_run_length(), 4)
        self.assertEqual(mk(4, "").top_run_length(), 0)
        self.assertIsNone(mk(4, "").top_colour())

    def test_given_clone_when_mutating_then_original_untouched(self):
        b = mk(3, "rg")
        c = b.clone()
        self.assertEqual(b, c)
        c.push("b")
        self.assertEqual(b.colours(), ("r", "g"))
        self.assertNotEqual(b, c)

    def test_given_snapshot_when_restoring_then_contents_copied(self):
        b = mk(3, "rg")
        snap = mk(3, "bbb")
        b.restore(snap)
        self.assertEqual(b.colours(), ("b", "b", "b"))
        b.nuts.pop(0)
        self.assertEqual(snap.colours(), ("b", "b", "b"))
        with self.assertRaises(ConsistencyError):
            b.restore(mk(4, "r"))

    def test_given_bolt_when_pretty_then_bottom_first_with_free_slots(self):
        self.assertEqual(mk(4, "rg").pretty(), "gr..")


class TestCanMove(unittest.TestCase):
    def test_given_same_bolt_when_checking_then_never_legal(self):
        b = mk(4, "rg")
        self.assertFalse(can_move(b, b, False))
        self.assertFalse(can_move(b, b, True))

    def test_given_basic_rules_when_checking_then_empty_full_and_colour_rejected(self):
        self.assertFalse(can_move(mk(2, ""), mk(2, ""), False))   # empty source
        self.assertFalse(can_move(mk(2, "r"), mk(2, "rr"), False))  # full destination
        self.assertFalse(can_move(mk(2, "r"), mk(2, "g"), False))  # colour mismatch
        self.assertTrue(can_move(mk(2, "r"), mk(2, "r"), False))
        self.assertTrue(can_move(mk(2, "g"), mk(2, ""), False))

    def test_given_run_longer_than_space_when_strict_then_rejected(self):
        a = mk(4, "rrg")
        dest = mk(2, "r")
        self.assertEqual(dest.free_space(), 1)
        self.assertFalse(can_move(a, dest, True))
        self.assertTrue(can_move(a, dest, False))
        # Non-strict ignores run length but still checks colour.
        self.assertFalse(can_move(a, mk(2, "g"), False))

    def test_given_finished_bolt_and_empty_dest_when_strict_then_useless_move_rejected(self):
        full = mk(2, "rr")
        self.assertFalse(can_move(full, mk(2, ""), True))
        self.assertTrue(can_move(full, mk(2, ""), False))
        # A homogeneous but partly filled bolt is not a useless move.
        self.assertTrue(can_move(mk(3, "rr"), mk(3, ""), True))


class TestMove(unittest.TestCase):
    def test_given_illegal_move_when_moving_then_nothing_changes(self):
        src = mk(2, "r")
        dest = mk(2, "g")
        self.assertFalse(can_move(src, dest, False))
        self.assertFalse(move(src, dest))
        self.assertEqual(src.colours(), ("r",))
        self.assertEqual(dest.colours(), ("g",))

    def test_given_scenario_board_when_moving_to_empty_then_top_run_transferred(self):
        b0 = mk(3, "rgr")
        b1 = mk(3, "ggg")
        b2 = mk(3, "")
        self.assertTrue(can_move(b0, b2, False))
        self.assertTrue(move(b0, b2))
        self.assertEqual(b0.colours(), ("g", "r"))
        self.assertEqual(b2.colours(), ("r",))
        self.assertTrue(b1.is_complete())

    def test_given_run_when_moving_then_whole_run_goes_until_colour_changes(self):
        src = mk(4, "rrg")
        dest = mk(4, "")
        self.assertTrue(move(src, dest))
        self.assertEqual(src.colours(), ("g",))
        self.assertEqual(dest.colours(), ("r", "r"))

    def test_given_small_destination_when_moving_then_stops_when_full(self):
        src = mk(4, "rrrg")
        dest = mk(3, "rb")
        self.assertTrue(move(src, dest))
        self.assertEqual(src.colours(), ("r", "r", "g"))
        self.assertEqual(dest.colours(), ("r", "r", "b"))
        self.assertTrue(dest.is_full())


if __name__ == "__main__":
    unittest.main(verbosity=2)
