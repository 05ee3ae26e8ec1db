# -*- coding: utf-8 -*-
"""
Keyboard controls of the 2048 window.
"""
import logging
from typing import Any

from game2048.core import Direction
from game2048.session import GameSession

_logger = logging.getLogger(__name__)

# ##: Key names as reported by Matplotlib.
KEY_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}
NEW_GAME_KEYS = {"backspace", "n"}
QUIT_KEYS = {"escape"}


def key_handler(session: GameSession, window: Any, event: Any) -> bool:
    """
    Handle a key press.

    Parameters
    ----------
    session: GameSession
        The game session receiving the moves
    window: Any
        Window showing the game, closed on escape
    event: Any
        Key press event, only its ``key`` attribute is read

    Returns
    -------
    bool
        True if the key was bound to an action
    """
    _logger.debug("pressed %s", event.key)

    if event.key in QUIT_KEYS:
        window.close()
        return True

    if event.key in NEW_GAME_KEYS:
        session.new_game()
        return True

    if event.key in KEY_DIRECTIONS:
        session.handle_move(KEY_DIRECTIONS[event.key])
        return True

    return False
