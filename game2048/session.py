"""
Game session controller.

The session owns the board, the score and the game over flag. Views never touch that state directly:
they subscribe and receive read-only snapshots after every change.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from numpy import ndarray
from numpy.random import default_rng

from game2048.config import GameConfig
from game2048.core import Direction, check_board, empty_board, fill_cells, has_moves, move, same_board
from game2048.core.spawner import RandomSource, add_random_tile
from game2048.share import share_message

# ##>: Module logger.
_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameSnapshot:
    """
    Read-only view of a game session.

    Attributes
    ----------
    board : ndarray
        Copy of the board, marked as not writeable.
    score : int
        Accumulated score.
    game_over : bool
        Whether no move remains.
    moves : int
        Number of effective moves played.
    """

    board: ndarray
    score: int
    game_over: bool
    moves: int


class GameSession:
    """
    A single 2048 game, driven by directional input.

    Each input is handled to completion (move, spawn, end of game check) before the next one.
    """

    def __init__(self, config: GameConfig | None = None, rng: RandomSource | None = None):
        """
        Initialize a session and start a first game.

        Parameters
        ----------
        config : GameConfig, optional
            Session settings (defaults otherwise).
        rng : RandomSource, optional
            Source of randomness for spawns. A generator seeded with ``config.seed`` when omitted.
        """
        self.config = config or GameConfig()
        self._rng = rng if rng is not None else default_rng(self.config.seed)
        self._subscribers: list[Callable[[GameSnapshot], None]] = []

        self._board = empty_board()
        self._score = 0
        self._game_over = False
        self._moves = 0

        self.new_game()

    @property
    def board(self) -> ndarray:
        """Read-only copy of the current board."""
        board = self._board.copy()
        board.flags.writeable = False
        return board

    @property
    def score(self) -> int:
        return self._score

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def moves(self) -> int:
        return self._moves

    def snapshot(self) -> GameSnapshot:
        """Capture the current state."""
        return GameSnapshot(board=self.board, score=self._score, game_over=self._game_over, moves=self._moves)

    def subscribe(self, callback: Callable[[GameSnapshot], None]) -> Callable[[], None]:
        """
        Register a callback receiving every new snapshot.

        Parameters
        ----------
        callback : Callable[[GameSnapshot], None]
            Called after each new game and each effective move.

        Returns
        -------
        Callable[[], None]
            Function removing the callback.
        """
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> GameSnapshot:
        snapshot = self.snapshot()
        for callback in list(self._subscribers):
            callback(snapshot)
        return snapshot

    def new_game(self) -> GameSnapshot:
        """
        Reset the board with the initial tiles, the score and the game over flag.

        Returns
        -------
        GameSnapshot
            State of the new game.
        """
        self._board = fill_cells(empty_board(), self.config.initial_tiles, self._rng)
        self._score = 0
        self._game_over = False
        self._moves = 0

        _logger.info('New game started with %d tiles', self.config.initial_tiles)
        return self._notify()

    def handle_move(self, direction: Direction | str) -> bool:
        """
        Play a move.

        Parameters
        ----------
        direction : Direction or str
            The move direction.

        Returns
        -------
        bool
            True if the board changed, False if the game is over or the move had no effect.

        Raises
        ------
        ValueError
            If the direction is unknown.

        Notes
        -----
        - An ineffective move spawns no tile, adds no score and skips the end of game check.
        - After an effective move, the merge score is added, one tile is spawned and the end of game is checked.
        """
        direction = Direction(direction)
        if self._game_over:
            _logger.debug('Move %s ignored, game is over', direction.value)
            return False

        updated_board, score = move(self._board, direction)
        if same_board(updated_board, self._board):
            _logger.debug('Move %s ignored, board unchanged', direction.value)
            return False

        # ##: Commit the move then spawn a tile.
        self._score += score
        self._board = add_random_tile(updated_board, self._rng)
        self._moves += 1
        _logger.debug('Move %s scored %d (total %d)', direction.value, score, self._score)

        # ##: Check if game is finished.
        if not has_moves(self._board):
            self._game_over = True
            _logger.info('Game over after %d moves with score %d', self._moves, self._score)

        self._notify()
        return True

    def share_text(self) -> str:
        """Share message for the current score."""
        return share_message(self._score, self.config.share_url)

    def load(self, board: ndarray, score: int = 0) -> GameSnapshot:
        """
        Replace the current game with a given board.

        Parameters
        ----------
        board : ndarray
            Board to play from.
        score : int, optional
            Starting score.

        Returns
        -------
        GameSnapshot
            State of the loaded game.

        Raises
        ------
        ValueError
            If the board is malformed or the score negative.
        """
        if score < 0:
            raise ValueError(f'score must be >= 0, got {score}')
        self._board = check_board(board).copy()
        self._score = score
        self._game_over = not has_moves(self._board)
        self._moves = 0

        _logger.info('Board loaded with score %d%s', score, ', no move left' if self._game_over else '')
        return self._notify()
