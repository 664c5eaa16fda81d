# -*- coding: utf-8 -*-
"""
Board engine of the 2048 game.

It includes functions for creating the board, spawning tiles, orienting the board for a move,
reducing rows and updating the score.
"""

from .board import BOARD_SIZE, add_random_tile, create_initial_board, validate_board
from .reducer import compress, merge_adjacent, reduce_board, reduce_row
from .scoring import ScoringPolicy, update_score
from .transform import Direction, rotate_from_canonical, rotate_to_canonical

__all__ = [
    "BOARD_SIZE",
    "add_random_tile",
    "create_initial_board",
    "validate_board",
    "compress",
    "merge_adjacent",
    "reduce_row",
    "reduce_board",
    "ScoringPolicy",
    "update_score",
    "Direction",
    "rotate_to_canonical",
    "rotate_from_canonical",
]
