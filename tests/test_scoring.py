import unittest

from game import MIN_MOVES, star_rating


class TestStarRating(unittest.TestCase):
    def test_given_default_target_when_rating_then_thresholds_applied(self):
        self.assertEqual(MIN_MOVES, 18)
        self.assertEqual(star_rating(0), 3)
        self.assertEqual(star_rating(18), 3)
        self.assertEqual(star_rating(19), 2)
        self.assertEqual(star_rating(27), 2)
        self.assertEqual(star_rating(28), 1)
        self.assertEqual(star_rating(36), 1)
        self.assertEqual(star_rating(37), 0)

    def test_given_custom_target_when_rating_then_scaled(self):
        self.assertEqual(star_rating(2, 2), 3)
        self.assertEqual(star_rating(3, 2), 2)
        self.assertEqual(star_rating(4, 2), 1)
        self.assertEqual(star_rating(5, 2), 0)


if __name__ == "__main__":
    unittest.main(verbosity=2)
