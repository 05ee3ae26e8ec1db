"""
Orientation handling for the 2048 game.

Every direction is mapped onto the same "collapse left" primitive: the board is transposed and/or its rows
reversed, each row is reduced, and the inverse mapping puts the board back in place.
"""

from enum import Enum

from numpy import ndarray

from game2048.core.board import check_board
from game2048.core.reducer import slide_and_combine


class Direction(str, Enum):
    """
    Direction of a move.

    Values are the plain names, so ``Direction("up")`` converts user input.
    """

    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'


def transpose(board: ndarray) -> ndarray:
    """Swap rows and columns, returning a new array."""
    return board.T.copy()


def reverse_rows(board: ndarray) -> ndarray:
    """Reverse every row, returning a new array."""
    return board[:, ::-1].copy()


def to_canonical(board: ndarray, direction: Direction | str) -> ndarray:
    """
    Orient the board so that the requested move becomes a left collapse.

    Parameters
    ----------
    board : ndarray
        The game board.
    direction : Direction or str
        The move direction.

    Returns
    -------
    ndarray
        A new, re-oriented board.
    """
    direction = Direction(direction)
    if direction is Direction.RIGHT:
        return reverse_rows(board)
    if direction is Direction.UP:
        return transpose(board)
    if direction is Direction.DOWN:
        return reverse_rows(transpose(board))
    return board.copy()


def from_canonical(board: ndarray, direction: Direction | str) -> ndarray:
    """
    Undo :func:`to_canonical` for the same direction.

    Parameters
    ----------
    board : ndarray
        A board in canonical (collapse left) orientation.
    direction : Direction or str
        The move direction used to canonicalise it.

    Returns
    -------
    ndarray
        A new board in the original orientation.
    """
    direction = Direction(direction)
    if direction is Direction.RIGHT:
        return reverse_rows(board)
    if direction is Direction.UP:
        return transpose(board)
    if direction is Direction.DOWN:
        # ##: Inverse order of the forward mapping.
        return transpose(reverse_rows(board))
    return board.copy()


def move(board: ndarray, direction: Direction | str) -> tuple[ndarray, int]:
    """
    Apply a move to the board without spawning a tile.

    Parameters
    ----------
    board : ndarray
        The current game board. It is not modified.
    direction : Direction or str
        The move direction.

    Returns
    -------
    new_board : ndarray
        The board after sliding and merging.
    score : int
        Sum of the tiles created by merges during this move.

    Raises
    ------
    ValueError
        If the board is malformed or the direction unknown.

    Notes
    -----
    Callers detect a no-op move by comparing the returned board with the input.
    """
    board = check_board(board)
    rotated = to_canonical(board, direction)

    result = rotated.copy()
    score = 0
    for i, row in enumerate(rotated):
        result[i], row_score = slide_and_combine(row)
        score += row_score

    return from_canonical(result, direction), score
