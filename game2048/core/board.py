"""
Board scaffolding for the 2048 game: size constant, creation, validation and comparison.
"""

from numpy import any as np_any
from numpy import array_equal, asarray, int64, integer, issubdtype, ndarray, zeros

# ##>: The board is always a 4x4 grid.
BOARD_SIZE = 4


def empty_board() -> ndarray:
    """
    Create an empty game board.

    Returns
    -------
    ndarray
        A (4, 4) int64 array filled with zeros.
    """
    return zeros((BOARD_SIZE, BOARD_SIZE), dtype=int64)


def check_board(board: ndarray) -> ndarray:
    """
    Validate a game board and return it as an int64 array.

    Parameters
    ----------
    board : ndarray
        Candidate board. Nested lists are accepted.

    Returns
    -------
    ndarray
        The board as an int64 array (a new array when a conversion was needed).

    Raises
    ------
    ValueError
        If the board is not an integer 4x4 grid, holds negative values, or holds values that are neither
        0 nor a power of two.
    """
    grid = asarray(board)
    if not issubdtype(grid.dtype, integer):
        raise ValueError(f'board values must be integers, got dtype {grid.dtype}')
    grid = grid.astype(int64, copy=False)
    if grid.shape != (BOARD_SIZE, BOARD_SIZE):
        raise ValueError(f'board must have shape ({BOARD_SIZE}, {BOARD_SIZE}), got {grid.shape}')
    if np_any(grid < 0):
        raise ValueError('board values must be non-negative')

    # ##: A positive power of two has a single bit set.
    if np_any(grid & (grid - 1)):
        raise ValueError('board values must be 0 or a power of two')
    return grid


def same_board(first: ndarray, second: ndarray) -> bool:
    """Tell whether two boards hold the same values cell by cell."""
    return bool(array_equal(first, second))


def count_empty(board: ndarray) -> int:
    """Number of empty cells on the board."""
    return int((board == 0).sum())
