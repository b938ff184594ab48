"""
Exceptions raised by the Minesweeper engine.
"""


class MinesweeperError(Exception):
    """Base class for all errors raised by this package."""


class ConfigError(MinesweeperError, ValueError):
    """Raised when a game cannot be set up with the given parameters."""


class BoundsError(MinesweeperError, IndexError):
    """Raised when an action targets a cell outside the board."""
