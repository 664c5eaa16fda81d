# -*- coding: utf-8 -*-
"""
Play 2048 Game
"""
import logging
from typing import Any

from board2048.game import GameConfig, GameSession
from board2048.utils import WindowBoard

logger = logging.getLogger(__name__)


def redraw(session: GameSession, window: WindowBoard):
    """
    Redraw the window from the session state.

    Parameters
    ----------
    session: GameSession
        The game session

    window: WindowBoard
        Class to draw the game board
    """
    state = session.state
    if state is None:
        window.show_loading()
    else:
        window.show_board(state.board, state.score)


def key_handler(session: GameSession, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    session: GameSession
        The game session

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    if event.key == "escape":
        window.close()
        return None

    previous = session.state
    if session.handle_key(event.key) is not previous:
        redraw(session, window)
    return None


def play(config: GameConfig | None = None):
    """
    Open a window and play until it is closed.

    Parameters
    ----------
    config: GameConfig, optional
        Game settings, defaults if not given.
    """
    config = config or GameConfig()
    session = GameSession(config)

    window = WindowBoard(title=config.title)
    window.show_loading()

    session.start()
    redraw(session, window)

    with window.subscribe(lambda event: key_handler(session, window, event)):
        # Blocking event loop
        window.show()
    logger.info("Game ended with score %d", session.state.score)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    play()


if __name__ == "__main__":
    main()
