"""
Pure game logic for the 2048 puzzle.

It includes the row reducer, the orientation adapter mapping every direction onto a left collapse,
the tile spawner and the end of game check.
"""

from .board import BOARD_SIZE, check_board, count_empty, empty_board, same_board
from .orientation import Direction, from_canonical, move, reverse_rows, to_canonical, transpose
from .reducer import slide_and_combine
from .spawner import TILE_SPAWN_PROBS, RandomSource, add_random_tile, fill_cells
from .terminal import has_moves, legal_directions

__all__ = [
    "BOARD_SIZE",
    "TILE_SPAWN_PROBS",
    "Direction",
    "RandomSource",
    "add_random_tile",
    "check_board",
    "count_empty",
    "empty_board",
    "fill_cells",
    "from_canonical",
    "has_moves",
    "legal_directions",
    "move",
    "reverse_rows",
    "same_board",
    "slide_and_combine",
    "to_canonical",
    "transpose",
]
