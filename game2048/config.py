"""
Configuration of a 2048 game session and of its front end.
"""

from dataclasses import dataclass


@dataclass
class GameConfig:
    """
    Settings of a game session.

    The board size and the spawn probabilities are fixed by the game rules and are not settings.
    """

    # ##>: Session parameters.
    initial_tiles: int = 2  # Tiles spawned on a new game
    seed: int | None = None  # Seed of the session random generator, None for fresh entropy

    # ##>: Front end parameters.
    share_url: str = ''  # Appended to the share message
    window_title: str = '2048'
    log_level: str = 'INFO'

    def __post_init__(self):
        if self.initial_tiles < 0:
            raise ValueError(f'initial_tiles must be >= 0, got {self.initial_tiles}')
