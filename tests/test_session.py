"""
Tests for the game session lifecycle.
"""

from unittest import TestCase, main

import numpy as np

from board2048.game.config import GameConfig
from board2048.game.session import GameSession, SessionStatus


class TestGameSession(TestCase):
    def setUp(self):
        self.session = GameSession(GameConfig(seed=1))

    def test_starts_uninitialized(self):
        self.assertIs(self.session.status, SessionStatus.UNINITIALIZED)
        self.assertIsNone(self.session.state)

    def test_keys_ignored_before_start(self):
        self.assertIsNone(self.session.handle_key("ArrowLeft"))
        self.assertIs(self.session.status, SessionStatus.UNINITIALIZED)

    def test_start(self):
        state = self.session.start()
        self.assertIs(self.session.status, SessionStatus.READY)
        self.assertEqual(np.count_nonzero(state.board), 2)
        self.assertEqual(state.score, 0)

    def test_start_only_once(self):
        first = self.session.start()
        self.session.handle_key("ArrowUp")
        current = self.session.state
        self.assertIs(self.session.start(), current)
        self.assertIsNot(current, first)

    def test_arrow_replaces_state(self):
        first = self.session.start()
        second = self.session.handle_key("ArrowLeft")
        self.assertIs(self.session.state, second)
        self.assertIsNot(second, first)

    def test_other_keys_ignored(self):
        state = self.session.start()
        self.assertIs(self.session.handle_key("Enter"), state)
        self.assertIs(self.session.state, state)

    def test_seeded_sessions_replay(self):
        other = GameSession(GameConfig(seed=1))
        self.session.start()
        other.start()
        for key in ["ArrowLeft", "ArrowDown", "ArrowRight", "ArrowUp"] * 5:
            self.assertEqual(self.session.handle_key(key), other.handle_key(key))


if __name__ == "__main__":
    main()
