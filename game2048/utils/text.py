"""Plain text rendering of a board."""

from numpy import ndarray


def format_board(board: ndarray) -> str:
    """
    Render a board as text, one line per row.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    str
        Cells separated by tabulations, empty cells shown as ``.``.
    """
    return "\n".join(" \t".join(str(value) if value else "." for value in row) for row in board.tolist())
