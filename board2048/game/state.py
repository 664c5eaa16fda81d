"""
Immutable game state and the move pipeline.
"""

import logging
from dataclasses import dataclass

from numpy import asarray, int64, ndarray
from numpy.random import Generator

from board2048.core.board import add_random_tile, create_initial_board, validate_board
from board2048.core.reducer import reduce_board
from board2048.core.scoring import update_score
from board2048.core.transform import Direction, rotate_from_canonical, rotate_to_canonical
from board2048.game.config import GameConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class GameState:
    """
    Snapshot of a game: the board and the score.

    The board is stored as a read-only copy, so a state can be shared freely and is only ever
    replaced as a whole.
    """

    board: ndarray
    score: int = 0

    def __post_init__(self):
        board = validate_board(asarray(self.board)).astype(int64)
        board.flags.writeable = False
        object.__setattr__(self, "board", board)

        if self.score < 0:
            raise ValueError(f"score must be non-negative, got {self.score}")
        object.__setattr__(self, "score", int(self.score))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self.score == other.score and bool((self.board == other.board).all())


def new_game(rng: Generator | None = None, config: GameConfig | None = None) -> GameState:
    """
    Start a game: a board with two random tiles and a score of zero.

    Parameters
    ----------
    rng : Generator, optional
        Random number generator, built from the configuration if not given.
    config : GameConfig, optional
        Game settings, defaults if not given.

    Returns
    -------
    GameState
        The initial state.
    """
    config = config or GameConfig()
    rng = rng if rng is not None else config.make_generator()
    return GameState(board=create_initial_board(rng=rng, four_probability=config.four_probability), score=0)


def move(state: GameState, key: object, rng: Generator | None = None, config: GameConfig | None = None) -> GameState:
    """
    Play one move.

    Parameters
    ----------
    state : GameState
        The current state.
    key : object
        A ``Direction`` or a key name (``ArrowLeft``, ``left``...).
    rng : Generator, optional
        Random number generator, built from the configuration if not given.
    config : GameConfig, optional
        Game settings, defaults if not given.

    Returns
    -------
    GameState
        The next state, or ``state`` itself when the key is not a direction.

    Notes
    -----
    - The board is rotated so the move becomes a left slide, every row is reduced, then the
      board is rotated back.
    - A new tile is spawned after every recognized move, even if no tile moved.
    """
    direction = Direction.from_key(key)
    if direction is None:
        logger.debug("Ignored key %r", key)
        return state

    config = config or GameConfig()
    rng = rng if rng is not None else config.make_generator()

    # ##: Slide and merge in canonical orientation.
    gain, reduced = reduce_board(rotate_to_canonical(state.board, direction))
    board = rotate_from_canonical(reduced, direction)

    # ##: Spawn a tile, then score the resulting board.
    board = add_random_tile(board, rng=rng, four_probability=config.four_probability)
    score = update_score(board, state.score, policy=config.scoring, merge_gain=gain)

    logger.debug("Move %s: merge gain %d, score %d -> %d", direction.value, gain, state.score, score)
    return GameState(board=board, score=score)
