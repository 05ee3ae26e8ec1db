"""
Tile spawning for the 2048 game.

The random source is injected so that callers (and tests) decide where entropy comes from.
"""

from typing import Protocol

from numpy import argwhere, ndarray
from numpy.random import PCG64DXSM, default_rng

from game2048.core.board import check_board

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Module-level generator used when no source is given.
_GENERATOR = default_rng(PCG64DXSM())


class RandomSource(Protocol):
    """
    Minimal random source needed by the spawner.

    ``numpy.random.Generator`` satisfies it.
    """

    def integers(self, high: int) -> int:
        """Draw an integer in ``[0, high)``."""

    def random(self) -> float:
        """Draw a float in ``[0, 1)``."""


def spawn_value(rng: RandomSource) -> int:
    """
    Draw the value of a new tile.

    Parameters
    ----------
    rng : RandomSource
        Source of randomness. Exactly one ``random()`` draw is consumed.

    Returns
    -------
    int
        2 with probability ``TILE_SPAWN_PROBS[2]``, else 4.
    """
    return 2 if rng.random() < TILE_SPAWN_PROBS[2] else 4


def add_random_tile(board: ndarray, rng: RandomSource | None = None) -> ndarray:
    """
    Add one tile (2 or 4) to a uniformly chosen empty cell.

    Parameters
    ----------
    board : ndarray
        The current game board. It is not modified.
    rng : RandomSource, optional
        Source of randomness; the module-level generator when omitted.

    Returns
    -------
    ndarray
        A new board with the added tile, or an unchanged copy when the board is full.

    Raises
    ------
    ValueError
        If the board is malformed.

    Notes
    -----
    - A cell index is drawn first, then the tile value.
    - A full board consumes no entropy; detecting the end of the game is left to ``has_moves``.
    """
    rng = _GENERATOR if rng is None else rng
    result = check_board(board).copy()

    empty_cells = argwhere(result == 0)
    if len(empty_cells) == 0:
        return result

    # ##: Pick the cell, then its value.
    cell = tuple(empty_cells[int(rng.integers(len(empty_cells)))])
    result[cell] = spawn_value(rng)
    return result


def fill_cells(board: ndarray, number_tile: int, rng: RandomSource | None = None) -> ndarray:
    """
    Add several tiles one after the other.

    Parameters
    ----------
    board : ndarray
        The current game board. It is not modified.
    number_tile : int
        Number of tiles to add. Fewer are added if the board fills up.
    rng : RandomSource, optional
        Source of randomness.

    Returns
    -------
    ndarray
        A new board with the added tiles.
    """
    for _ in range(number_tile):
        board = add_random_tile(board, rng)
    return board
