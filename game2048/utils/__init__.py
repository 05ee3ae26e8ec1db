# -*- coding: utf-8 -*-
"""
Presentation helpers: tile colours and text rendering.

The Matplotlib window lives in ``game2048.utils.windows`` and is imported on demand.
"""

from .palette import text_color, tile_color
from .text import format_board

__all__ = ["format_board", "text_color", "tile_color"]
