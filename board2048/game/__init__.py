# -*- coding: utf-8 -*-
"""
Game state, move pipeline and session lifecycle of the 2048 game.
"""

from .config import GameConfig
from .session import GameSession, SessionStatus
from .state import GameState, move, new_game

__all__ = ["GameConfig", "GameSession", "SessionStatus", "GameState", "move", "new_game"]
