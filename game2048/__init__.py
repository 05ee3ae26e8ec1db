# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 puzzle.

This package provides the pure board transition (`move`), the tile spawner (`add_random_tile`), the end of game
check (`has_moves`) and the `GameSession` controller driving a game from directional input.
"""

from .config import GameConfig
from .core import Direction, add_random_tile, has_moves, move
from .session import GameSession, GameSnapshot
from .share import share_message

__all__ = [
    "Direction",
    "GameConfig",
    "GameSession",
    "GameSnapshot",
    "add_random_tile",
    "has_moves",
    "move",
    "share_message",
]
