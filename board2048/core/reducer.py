"""
Row reduction for the 2048 game: compress, merge, compress.

All functions work on a row in canonical orientation, i.e. tiles slide towards index 0.
"""

from numpy import ndarray, zeros_like


def compress(row: ndarray) -> ndarray:
    """
    Slide every tile of a row towards index 0.

    Parameters
    ----------
    row : ndarray
        A 1D row of the board.

    Returns
    -------
    ndarray
        A new row with the non-zero values in their original order, followed by zeros.
    """
    non_zero = row[row != 0]
    result = zeros_like(row)
    result[: len(non_zero)] = non_zero
    return result


def _merge(row: ndarray) -> tuple[int, ndarray]:
    result = row.copy()
    gain = 0
    for i in range(len(result) - 1):
        # ##: A cell zeroed by the previous merge never matches a non-zero neighbour.
        if result[i] != 0 and result[i] == result[i + 1]:
            result[i] *= 2
            result[i + 1] = 0
            gain += int(result[i])
    return gain, result


def merge_adjacent(row: ndarray) -> ndarray:
    """
    Merge equal neighbours of a row, scanning from index 0.

    Parameters
    ----------
    row : ndarray
        A 1D row of the board, usually compressed first.

    Returns
    -------
    ndarray
        A new row where each merged pair holds the doubled value on the left and 0 on the right.

    Notes
    -----
    Each cell takes part in at most one merge per call: [2, 2, 2, 2] gives [4, 0, 4, 0].
    """
    _, result = _merge(row)
    return result


def reduce_row(row: ndarray) -> tuple[int, ndarray]:
    """
    Apply a full move to one row: compress, merge, then compress again.

    Parameters
    ----------
    row : ndarray
        A 1D row of the board.

    Returns
    -------
    gain : int
        Sum of the values created by merges.
    reduced_row : ndarray
        The row after the move.

    Example
    -------
    >>> from numpy import array
    >>> reduce_row(array([2, 0, 2, 2]))
    (4, array([4, 2, 0, 0]))
    """
    gain, merged = _merge(compress(row))
    return gain, compress(merged)


def reduce_board(board: ndarray) -> tuple[int, ndarray]:
    """
    Apply ``reduce_row`` to every row of a board in canonical orientation.

    Parameters
    ----------
    board : ndarray
        The canonical board.

    Returns
    -------
    gain : int
        Sum of the values created by merges on the whole board.
    reduced_board : ndarray
        A new board after the move.
    """
    result = zeros_like(board)
    gain = 0

    for i, row in enumerate(board):
        row_gain, result[i] = reduce_row(row)
        gain += row_gain

    return gain, result
