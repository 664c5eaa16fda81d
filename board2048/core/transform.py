"""
Map each move direction onto the canonical leftward orientation and back.

Every move is processed as a slide towards column 0: the board is rotated so that the
requested direction points left, rows are reduced, then the board is rotated back.
"""

from enum import Enum
from typing import Callable

from numpy import ascontiguousarray, ndarray, rot90


class Direction(str, Enum):
    """Direction of a move."""

    LEFT = 'left'
    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'

    @classmethod
    def from_key(cls, key: object) -> 'Direction | None':
        """
        Translate a key identifier into a direction.

        Parameters
        ----------
        key : object
            A ``Direction``, a browser key name (``ArrowLeft``...) or a Matplotlib key name (``left``...).

        Returns
        -------
        Direction or None
            The matching direction, None for any other key.
        """
        if isinstance(key, cls):
            return key
        if not isinstance(key, str):
            return None
        return _KEYS.get(key)


_KEYS = {
    'ArrowLeft': Direction.LEFT,
    'ArrowUp': Direction.UP,
    'ArrowRight': Direction.RIGHT,
    'ArrowDown': Direction.DOWN,
    'left': Direction.LEFT,
    'up': Direction.UP,
    'right': Direction.RIGHT,
    'down': Direction.DOWN,
}


def _identity(board: ndarray) -> ndarray:
    return board


def _reverse_rows(board: ndarray) -> ndarray:
    return board[:, ::-1]


def _transpose(board: ndarray) -> ndarray:
    return board.T


def _columns_bottom_up(board: ndarray) -> ndarray:
    # ##: Column c becomes row c, read from the last row to the first.
    return rot90(board, k=-1)


def _columns_bottom_up_back(board: ndarray) -> ndarray:
    return rot90(board, k=1)


# ##>: (to canonical, from canonical) for each direction.
_TRANSFORMS: dict[Direction, tuple[Callable[[ndarray], ndarray], Callable[[ndarray], ndarray]]] = {
    Direction.LEFT: (_identity, _identity),
    Direction.RIGHT: (_reverse_rows, _reverse_rows),
    Direction.UP: (_transpose, _transpose),
    Direction.DOWN: (_columns_bottom_up, _columns_bottom_up_back),
}


def rotate_to_canonical(board: ndarray, direction: object) -> ndarray:
    """
    Orient the board so that a move in ``direction`` becomes a move to the left.

    Parameters
    ----------
    board : ndarray
        The game board.
    direction : object
        The move direction; anything unrecognized leaves the board as is.

    Returns
    -------
    ndarray
        A new array holding the canonical board.
    """
    forward, _ = _TRANSFORMS.get(Direction.from_key(direction), (_identity, _identity))
    return ascontiguousarray(forward(board)).copy()


def rotate_from_canonical(board: ndarray, direction: object) -> ndarray:
    """
    Undo ``rotate_to_canonical`` for the same direction.

    Parameters
    ----------
    board : ndarray
        A board in canonical orientation.
    direction : object
        The move direction; anything unrecognized leaves the board as is.

    Returns
    -------
    ndarray
        A new array holding the board in its original orientation.
    """
    _, backward = _TRANSFORMS.get(Direction.from_key(direction), (_identity, _identity))
    return ascontiguousarray(backward(board)).copy()
