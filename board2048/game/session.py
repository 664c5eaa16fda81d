"""
Game session: owns the current state and turns key presses into moves.
"""

import logging
from enum import Enum

from board2048.game.config import GameConfig
from board2048.game.state import GameState, move, new_game

logger = logging.getLogger(__name__)


class SessionStatus(str, Enum):
    """Lifecycle of a session."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"


class GameSession:
    """
    A single game, from its first board until the window is closed.

    The session starts ``UNINITIALIZED`` and ignores every key. ``start`` creates the initial
    board once and moves it to ``READY``; from then on each arrow key replaces the state with the
    result of the move. There is no terminal state.
    """

    def __init__(self, config: GameConfig | None = None):
        """
        Initialize the session.

        Parameters
        ----------
        config : GameConfig, optional
            Game settings, defaults if not given.
        """
        self.config = config or GameConfig()
        self._generator = self.config.make_generator()
        self._state: GameState | None = None

    @property
    def status(self) -> SessionStatus:
        """Current lifecycle status."""
        return SessionStatus.UNINITIALIZED if self._state is None else SessionStatus.READY

    @property
    def state(self) -> GameState | None:
        """Current state, None until the session is started."""
        return self._state

    def start(self) -> GameState:
        """
        Create the initial board. Calling it again keeps the current game.

        Returns
        -------
        GameState
            The current state.
        """
        if self._state is None:
            self._state = new_game(rng=self._generator, config=self.config)
            logger.info("New game started (scoring=%s)", self.config.scoring.value)
        return self._state

    def handle_key(self, key: object) -> GameState | None:
        """
        Apply a key press.

        Parameters
        ----------
        key : object
            Key identifier; only the four arrows change the state.

        Returns
        -------
        GameState or None
            The state after the key, None while the session is not started.
        """
        if self._state is None:
            logger.debug("Session not ready, ignored key %r", key)
            return None

        self._state = move(self._state, key, rng=self._generator, config=self.config)
        return self._state
