# -*- coding: utf-8 -*-
"""
Graphical User Interface for the 2048 Game

This module provides functionality to create and manage a graphical window for displaying the
2048 game board and its score. It utilizes Matplotlib for rendering and for delivering key presses,
so the game can be played with the arrow keys.
"""
import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event
from numpy import ndarray

from board2048.core.board import BOARD_SIZE

logger = logging.getLogger(__name__)


class WindowBoard:
    """
    A class for rendering the 2048 game board and score using Matplotlib.

    Methods
    -------
    show_loading()
        Display the loading placeholder instead of the tiles.
    show_board(board: np.ndarray, score: int)
        Update the display with the current board and score.
    subscribe(key_handler: Callable)
        Context manager attaching a keyboard handler for its duration.
    show()
        Display the game window and run the event loop.
    close()
        Close the game window.

    Notes
    -----
    - Values 2 to 2048 each have their own color; any other value uses the default appearance.
    - Keyboard handlers are detached when their subscription ends, so a new session never
      receives the keys of a previous one.
    """

    # ##: Colors mapping for tile values (background, text).
    COLORS = {
        2: ("#EEE4DA", "#776E65"),
        4: ("#ECE0C8", "#776E65"),
        8: ("#ECB280", "#F9F6F2"),
        16: ("#EC8D53", "#F9F6F2"),
        32: ("#F57C5F", "#F9F6F2"),
        64: ("#E95937", "#F9F6F2"),
        128: ("#F3D96B", "#F9F6F2"),
        256: ("#F2D04A", "#F9F6F2"),
        512: ("#E5BF2E", "#F9F6F2"),
        1024: ("#E2B814", "#F9F6F2"),
        2048: ("#EBC502", "#F9F6F2"),
    }
    DEFAULT_COLOR = ("#CCC0B3", "#776E65")

    LOADING = "Loading game..."

    def __init__(self, title: str):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window, also drawn above the board.
        """
        self.fig, self.axe = plt.subplots()
        self.fig.canvas.manager.set_window_title(title)
        self.title = self.fig.suptitle(title, fontsize="xx-large", fontweight="bold")
        self._setup_axes()
        self.score_text = self.fig.text(0.5, 0.04, "", ha="center", va="center", fontsize="x-large")
        self.loading_text = self.fig.text(0.5, 0.5, self.LOADING, ha="center", va="center", fontsize="x-large")
        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _setup_axes(self):
        """
        Set up the axes for the game board.

        This method creates one cell per tile, leaving room for the title above and the score below.
        """
        self.fig.subplots_adjust(left=0.02, bottom=0.1, right=0.98, top=0.88, wspace=0.05, hspace=0.05)
        self.axe.set_facecolor("#BBADA0")
        self.axe.set_xticks([])
        self.axe.set_yticks([])

        self.texts = []
        self.axes = [
            self.fig.add_subplot(BOARD_SIZE, BOARD_SIZE, r * BOARD_SIZE + c + 1)
            for r in range(BOARD_SIZE)
            for c in range(BOARD_SIZE)
        ]
        for ax in self.axes:
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="demibold")
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

    def _close_handler(self, event: Optional[Event] = None):
        """
        Handle the window close event.

        Parameters
        ----------
        event : Optional[Event]
            The close event (not used but required for event handling).
        """
        logger.info("Window closed")
        self.closed = True

    def _redraw(self):
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

    def _set_grid_visible(self, visible: bool):
        self.axe.set_visible(visible)
        for ax in self.axes:
            ax.set_visible(visible)

    def show_loading(self):
        """
        Show the loading placeholder instead of the board: no cells, no score.
        """
        self._set_grid_visible(False)

        self.loading_text.set_visible(True)
        self.score_text.set_text("")
        self._redraw()

    def show_board(self, board: ndarray, score: int):
        """
        Show or update the game board and the score.

        Parameters
        ----------
        board : ndarray
            The current state of the game board to be displayed.
        score : int
            The current score, displayed below the board.
        """
        self._set_grid_visible(True)
        for ax, text, value in zip(self.axes, self.texts, board.flat):
            value = int(value)
            background, foreground = self.COLORS.get(value, self.DEFAULT_COLOR)
            text.set_text(str(value) if value != 0 else "")
            text.set_color(foreground)
            ax.set_facecolor(background)

        self.loading_text.set_visible(False)
        self.score_text.set_text(f"Score: {score}")
        self._redraw()

    @contextmanager
    def subscribe(self, key_handler: Callable) -> Iterator[int]:
        """
        Attach a keyboard handler for the duration of a ``with`` block.

        Parameters
        ----------
        key_handler : Callable
            A function called with every key press event of the window.

        Yields
        ------
        int
            The Matplotlib connection id of the handler.
        """
        cid = self.fig.canvas.mpl_connect("key_press_event", key_handler)
        logger.debug("Key handler %d attached", cid)
        try:
            yield cid
        finally:
            self.fig.canvas.mpl_disconnect(cid)
            logger.debug("Key handler %d detached", cid)

    @classmethod
    def show(cls):
        """
        Show the window and run the Matplotlib event loop until the window is closed.
        """
        plt.show()

    def close(self):
        """
        Close the window.
        """
        plt.close(self.fig)
        self.closed = True
