# -*- coding: utf-8 -*-
"""
Graphical User Interface for the 2048 game.

This module provides a Matplotlib window displaying the game board, the score and, once the game is over,
the share message. The window only reads snapshots; moves go through the session.
"""
from typing import Callable

from matplotlib import pyplot as plt

from game2048.session import GameSnapshot
from game2048.utils.palette import GRID_COLOR, text_color, tile_color


class WindowBoard:
    """
    A class for rendering the 2048 game board using Matplotlib.

    Methods
    -------
    show_snapshot(snapshot: GameSnapshot, share_text: str)
        Update the display with a session snapshot.
    register_key_handler(key_handler: Callable)
        Register a function to handle keyboard events.
    show(block: bool = True)
        Display the game window.
    close()
        Close the game window.
    """

    def __init__(self, title: str, size: int):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            The size of the game board (4 for a 4x4 board).
        """
        self.fig, self.axe = plt.subplots()
        self.fig.canvas.manager.set_window_title(title)
        self._setup_axes(size)

    def _setup_axes(self, size: int):
        """
        Create one cell per tile, plus room at the top for the score and at the bottom for the game over banner.
        """
        self.fig.subplots_adjust(left=0, bottom=0.1, right=1, top=0.9, wspace=0.05, hspace=0.05)
        self.axe.set_facecolor(GRID_COLOR)

        # ##: Remove all ticks and labels for a cleaner game board appearance.
        self.axe.tick_params(axis="both", which="both", length=0)
        self.axe.set_xticks([])
        self.axe.set_yticks([])

        self.texts = []
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        for ax in self.axes:
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="demibold")
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

        self.header = self.fig.suptitle("Score: 0", fontsize="large", fontweight="demibold")
        self.banner = self.fig.text(0.5, 0.03, "", ha="center", va="center", fontsize="medium")

    def show_snapshot(self, snapshot: GameSnapshot, share_text: str = ""):
        """
        Show or update the game board.

        Parameters
        ----------
        snapshot : GameSnapshot
            The state to display.
        share_text : str, optional
            Message displayed under the board once the game is over.
        """
        for ax, text, value in zip(self.axes, self.texts, snapshot.board.flat):
            value = int(value)
            text.set_text(str(value) if value != 0 else "")
            text.set_color(text_color(value))
            ax.set_facecolor(tile_color(value))

        self.header.set_text(f"Score: {snapshot.score}")
        self.banner.set_text(f"Game Over! {share_text}" if snapshot.game_over else "")

        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()
        plt.pause(0.001)

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            A function called with the Matplotlib key press event.
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """Close the game window."""
        plt.close(self.fig)
