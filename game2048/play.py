# -*- coding: utf-8 -*-
"""
Play 2048 Game
"""
import argparse
import logging

from numpy.random import default_rng

from game2048.config import GameConfig
from game2048.controls import key_handler
from game2048.core import BOARD_SIZE, legal_directions
from game2048.session import GameSession
from game2048.utils import format_board


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(description="Play the 2048 puzzle.")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the tile spawns")
    parser.add_argument("--share-url", default="", help="Link appended to the share message")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--autoplay", action="store_true", help="Play random moves without a window")
    return parser.parse_args(argv)


def autoplay(session: GameSession, seed: int | None = None) -> int:
    """
    Play random legal moves until the game is over.

    Parameters
    ----------
    session: GameSession
        The game session to play
    seed: int, optional
        Seed of the move choices

    Returns
    -------
    int
        Number of moves played
    """
    rng = default_rng(seed)

    print("New game:")
    print(format_board(session.board))
    print("Start ...")

    while not session.game_over:
        directions = legal_directions(session.board)
        if not directions:
            break
        direction = directions[int(rng.integers(len(directions)))]
        session.handle_move(direction)
        print(f'\nNext Action: "{direction.value}"\tScore: {session.score}')
        print(format_board(session.board))

    print(f"\nTotal Moves: {session.moves}")
    print(session.share_text())
    return session.moves


def play(session: GameSession):
    """
    Open the game window and block until it is closed.

    Parameters
    ----------
    session: GameSession
        The game session to display
    """
    from game2048.utils.windows import WindowBoard

    window = WindowBoard(title=session.config.window_title, size=BOARD_SIZE)
    session.subscribe(lambda snapshot: window.show_snapshot(snapshot, session.share_text()))
    window.register_key_handler(lambda event: key_handler(session, window, event))

    window.show_snapshot(session.snapshot(), session.share_text())

    # Blocking event loop
    window.show(block=True)


def main(argv: list[str] | None = None):
    """Entry point of the ``game2048`` command."""
    args = parse_args(argv)
    config = GameConfig(seed=args.seed, share_url=args.share_url, log_level=args.log_level)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    session = GameSession(config)
    if args.autoplay:
        autoplay(session, seed=config.seed)
    else:
        play(session)


if __name__ == "__main__":
    main()
