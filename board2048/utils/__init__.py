# -*- coding: utf-8 -*-
"""
This module provides the Matplotlib window used to display and play the game.
"""

from .windows import WindowBoard

__all__ = ["WindowBoard"]
