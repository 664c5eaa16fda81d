"""
Board creation, validation and random tile spawning for the 2048 game.
"""

from numpy import argwhere, int64, ndarray, zeros
from numpy.random import PCG64DXSM, Generator, default_rng

# ##>: The board is always 4x4.
BOARD_SIZE = 4

# ##>: Probability of spawning a 4 instead of a 2.
FOUR_PROBABILITY = 0.5

# ##>: Module-level generator for performance (avoids repeated initialization).
_GENERATOR = default_rng(PCG64DXSM())


def validate_board(board: ndarray) -> ndarray:
    """
    Check that a board is a well-formed 4x4 grid of tiles.

    Parameters
    ----------
    board : ndarray
        The board to check.

    Returns
    -------
    ndarray
        The same board, for chaining.

    Raises
    ------
    ValueError
        If the board is not 4x4, or holds a cell that is neither 0 nor a positive integer power of two.
    """
    if board.shape != (BOARD_SIZE, BOARD_SIZE):
        raise ValueError(f'board must have shape ({BOARD_SIZE}, {BOARD_SIZE}), got {board.shape}')

    tiles = board[board != 0]
    if (tiles < 0).any():
        raise ValueError(f'board holds negative values: {tiles[tiles < 0].tolist()}')

    integral = tiles.astype(int64)
    if (tiles != integral).any():
        raise ValueError(f'board holds non-integer values: {tiles[tiles != integral].tolist()}')

    # ##: A power of two has a single bit set.
    tiles = integral
    invalid = tiles[(tiles & (tiles - 1)) != 0]
    if invalid.size:
        raise ValueError(f'board holds values that are not powers of two: {invalid.tolist()}')
    return board


def add_random_tile(
    board: ndarray, rng: Generator | None = None, four_probability: float = FOUR_PROBABILITY
) -> ndarray:
    """
    Place one new tile (2 or 4) in a random empty cell.

    Parameters
    ----------
    board : ndarray
        The current board. It is not modified.
    rng : Generator, optional
        Random number generator, the module-level one if not given.
    four_probability : float, optional
        Probability that the new tile is a 4 (default is 0.5).

    Returns
    -------
    ndarray
        A copy of the board with the new tile added.

    Notes
    -----
    - Every empty cell is equally likely to receive the tile.
    - A full board is returned unchanged (as a copy): there is nowhere to spawn.
    """
    rng = rng if rng is not None else _GENERATOR
    new_board = board.copy()

    available_cells = argwhere(new_board == 0)
    if len(available_cells) == 0:
        return new_board

    row, col = available_cells[rng.integers(len(available_cells))]
    new_board[row, col] = 4 if rng.random() < four_probability else 2
    return new_board


def create_initial_board(rng: Generator | None = None, four_probability: float = FOUR_PROBABILITY) -> ndarray:
    """
    Create an empty 4x4 board seeded with two random tiles.

    Parameters
    ----------
    rng : Generator, optional
        Random number generator, the module-level one if not given.
    four_probability : float, optional
        Probability that each starting tile is a 4 (default is 0.5).

    Returns
    -------
    ndarray
        A new board with exactly two tiles.
    """
    board = zeros((BOARD_SIZE, BOARD_SIZE), dtype=int64)
    board = add_random_tile(board, rng=rng, four_probability=four_probability)
    return add_random_tile(board, rng=rng, four_probability=four_probability)
