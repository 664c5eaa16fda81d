"""
Tests for score accumulation.
"""

from unittest import TestCase, main

import numpy as np

from board2048.core.scoring import ScoringPolicy, update_score

BOARD = np.array([[4, 2, 0, 0], [0, 0, 0, 0], [0, 0, 8, 0], [0, 0, 0, 0]])


class TestReferenceScoring(TestCase):
    """Tiles larger than the previous score are added to it."""

    def test_from_zero(self):
        self.assertEqual(update_score(BOARD, 0), 14)

    def test_only_larger_tiles_count(self):
        self.assertEqual(update_score(BOARD, 2), 2 + 4 + 8)
        self.assertEqual(update_score(BOARD, 4), 4 + 8)

    def test_no_larger_tile(self):
        self.assertEqual(update_score(BOARD, 100), 100)

    def test_returns_python_int(self):
        self.assertIsInstance(update_score(BOARD, 0), int)


class TestMergeScoring(TestCase):
    def test_adds_merge_gain(self):
        self.assertEqual(update_score(BOARD, 10, policy=ScoringPolicy.MERGE, merge_gain=8), 18)

    def test_policy_by_value(self):
        self.assertEqual(update_score(BOARD, 10, policy="merge", merge_gain=0), 10)


if __name__ == "__main__":
    main()
