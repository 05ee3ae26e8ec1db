"""
End of game detection and move legality for the 2048 game.
"""

from numpy import ndarray

from game2048.core.board import check_board, count_empty
from game2048.core.orientation import Direction


def has_moves(board: ndarray) -> bool:
    """
    Check whether at least one further move is possible.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    bool
        True if a cell is empty or two horizontally or vertically adjacent cells hold the same value.
        False only for a full board without adjacent equal pair, which ends the game.

    Raises
    ------
    ValueError
        If the board is malformed.
    """
    board = check_board(board)
    if count_empty(board) > 0:
        return True

    # ##>: Full board, so equal neighbours are necessarily non-zero.
    horizontal = board[:, :-1] == board[:, 1:]
    vertical = board[:-1, :] == board[1:, :]
    return bool(horizontal.any() or vertical.any())


def legal_directions(board: ndarray) -> list[Direction]:
    """
    List the directions whose move changes the board.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    list[Direction]
        Legal directions, in ``Direction`` declaration order.

    Notes
    -----
    A move is legal when a tile can slide into an empty cell in that direction, or when two adjacent
    tiles along that axis are equal.
    """
    board = check_board(board)
    left_cols, right_cols = board[:, :-1], board[:, 1:]
    top_rows, bottom_rows = board[:-1, :], board[1:, :]

    # ##>: Merges are symmetric along an axis.
    h_can_merge = ((left_cols != 0) & (left_cols == right_cols)).any()
    v_can_merge = ((top_rows != 0) & (top_rows == bottom_rows)).any()

    mask = {
        Direction.UP: v_can_merge or ((top_rows == 0) & (bottom_rows != 0)).any(),
        Direction.DOWN: v_can_merge or ((bottom_rows == 0) & (top_rows != 0)).any(),
        Direction.LEFT: h_can_merge or ((left_cols == 0) & (right_cols != 0)).any(),
        Direction.RIGHT: h_can_merge or ((right_cols == 0) & (left_cols != 0)).any(),
    }
    return [direction for direction in Direction if mask[direction]]
