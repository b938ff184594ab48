"""
Command line entry point for playing Minesweeper in a terminal.

Usage:
    minesweeper [--verbose] [play] [--width W] [--height H] [--mines N] [--seed S]

With no subcommand, ``play`` runs with the default 9x9 board and 10 mines.
"""
import argparse
import logging
from typing import List, Optional

from .board import Board, BoardConfig
from .console import play
from .errors import ConfigError


logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 9
DEFAULT_HEIGHT = 9
DEFAULT_MINES = 10


def run_play(args: argparse.Namespace) -> int:
    """Play an interactive game in the terminal."""
    try:
        config = BoardConfig(
            width=args.width, height=args.height, num_mines=args.mines
        )
    except ConfigError as error:
        logger.error("Invalid board: %s", error)
        return 2

    print(
        f"Board: {config.width}x{config.height} with {config.num_mines} mines"
    )
    board = Board.from_config(config, seed=args.seed)
    status = play(board)
    logger.debug("Session ended with status %s", status.name)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Minesweeper - play in the terminal"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.set_defaults(
        command="play",
        width=DEFAULT_WIDTH,
        height=DEFAULT_HEIGHT,
        mines=DEFAULT_MINES,
        seed=None,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play a game (default)")
    play_parser.add_argument(
        "--width", type=int, default=DEFAULT_WIDTH, help="Number of columns"
    )
    play_parser.add_argument(
        "--height", type=int, default=DEFAULT_HEIGHT, help="Number of rows"
    )
    play_parser.add_argument(
        "--mines", type=int, default=DEFAULT_MINES, help="Number of mines"
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(
        logging.DEBUG if args.verbose else logging.INFO
    )

    if args.command == "play":
        return run_play(args)
    parser.print_help()
    return 0
