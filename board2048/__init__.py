# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game.

The board engine lives in ``board2048.core``, the game state and session in ``board2048.game`` and
the Matplotlib window in ``board2048.utils``.
"""

from .game import GameConfig, GameSession, GameState, move, new_game

__all__ = ["GameConfig", "GameSession", "GameState", "move", "new_game"]
