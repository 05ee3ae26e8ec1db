"""
Tile colours of the game board.
"""

# ##: Background of empty cells and of the grid.
EMPTY_COLOR = "#CCC0B3"
GRID_COLOR = "#BBADA0"

# ##: Colour tiers, from the smallest tile upwards: (highest value of the tier, colour).
TIERS = [
    (4, "#FEF08A"),
    (8, "#FDE047"),
    (16, "#FACC15"),
    (32, "#EAB308"),
    (64, "#CA8A04"),
]
TOP_COLOR = "#A16207"

DARK_TEXT = "#776E65"
LIGHT_TEXT = "#F9F6F2"


def tile_color(value: int) -> str:
    """
    Background colour of a tile.

    Parameters
    ----------
    value : int
        Tile value, 0 for an empty cell.

    Returns
    -------
    str
        Hex colour.
    """
    if value == 0:
        return EMPTY_COLOR
    for highest, color in TIERS:
        if value <= highest:
            return color
    return TOP_COLOR


def text_color(value: int) -> str:
    """Colour of the digits drawn on a tile: dark on the pale tiers, light above 16."""
    return DARK_TEXT if value <= 16 else LIGHT_TEXT
