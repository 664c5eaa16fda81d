"""Score accumulation after a move."""

from enum import Enum

from numpy import ndarray


class ScoringPolicy(str, Enum):
    """
    How the score grows after a move.

    REFERENCE: add every tile of the new board that is larger than the previous score.
    MERGE: add the values created by merges during the move (conventional 2048 scoring).
    """

    REFERENCE = 'reference'
    MERGE = 'merge'


def update_score(
    new_board: ndarray, previous_score: int, policy: ScoringPolicy = ScoringPolicy.REFERENCE, merge_gain: int = 0
) -> int:
    """
    Compute the score after a move.

    Parameters
    ----------
    new_board : ndarray
        The board after the move.
    previous_score : int
        The score before the move.
    policy : ScoringPolicy, optional
        The scoring rule to apply (default is REFERENCE).
    merge_gain : int, optional
        Sum of the values created by merges, used by the MERGE policy.

    Returns
    -------
    int
        The new score, never lower than ``previous_score``.

    Notes
    -----
    With the REFERENCE policy an unchanged high tile is counted again on every move while it
    stays above the score.
    """
    if ScoringPolicy(policy) is ScoringPolicy.MERGE:
        return previous_score + int(merge_gain)
    return previous_score + int(new_board[new_board > previous_score].sum())
