"""
Minesweeper game module.

Provides the board engine (mine placement, flood-fill reveal, flagging,
win/loss tracking) and a small text front end.
"""
from .cell import Cell, to_cell
from .board import Board, BoardConfig, GameStatus
from .errors import MinesweeperError, ConfigError, BoundsError
from .console import Command, CommandError, parse_command, play
from .cli import main

__all__ = [
    "Cell",
    "to_cell",
    "Board",
    "BoardConfig",
    "GameStatus",
    "MinesweeperError",
    "ConfigError",
    "BoundsError",
    "Command",
    "CommandError",
    "parse_command",
    "play",
    "main",
]
