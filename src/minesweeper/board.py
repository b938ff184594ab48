"""
Board module for Minesweeper game.

Implements the game board with mine placement, cell opening with
flood fill, flagging, and game status tracking.
"""
import logging
import numbers
import operator
import random
import time
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Iterable, List, Optional, Set, Union

import numpy as np

from .cell import Cell, CellLike, to_cell
from .errors import BoundsError, ConfigError


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    VICTORY = auto()
    DEFEAT = auto()


MINE_SYMBOL = "*"
MARKED_SYMBOL = "?"
CLOSED_SYMBOL = "-"
EMPTY_SYMBOL = "."

# Observation values for closed, flagged and revealed-mine cells
OBS_CLOSED = -1
OBS_MARKED = -2
OBS_MINE = 9


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        _check_dimensions(self.width, self.height)
        _check_mine_count(self.width, self.height, self.num_mines)


def _check_dimensions(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ConfigError("Board dimensions cannot be negative")


def _check_mine_count(width: int, height: int, count: int) -> None:
    if count < 0:
        raise ConfigError("Number of mines cannot be negative")
    capacity = width * height
    if count > capacity:
        raise ConfigError(
            f"Too many mines: {count} for {width}x{height} board "
            f"(max {capacity})"
        )


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    Tracks mines, flags and closed cells as sets of coordinates, and
    drives the game status from NOT_STARTED through IN_PROGRESS to
    VICTORY or DEFEAT. Instances are not thread-safe.
    """

    def __init__(
        self,
        width: int,
        height: int,
        mines: Union[int, Iterable[CellLike]],
        seed: Optional[int] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Create a board and set up the first game.

        Args:
            width: Number of columns.
            height: Number of rows.
            mines: Either a mine count for random placement, or the
                exact cells holding mines.
            seed: Seed for random mine placement (None = OS entropy).
            clock: Wall-clock source in seconds, used for game timing.
        """
        self._rng = random.Random(seed)
        self._clock = clock

        self._width = 0
        self._height = 0
        self._mines: Set[Cell] = set()
        self._marked: Set[Cell] = set()
        self._closed: Set[Cell] = set()
        self._status = GameStatus.NOT_STARTED
        self._start_time = 0
        self._finish_time = 0

        self.new_game(width, height, mines)

    @classmethod
    def from_config(
        cls,
        config: BoardConfig,
        seed: Optional[int] = None,
        clock: Callable[[], float] = time.time,
    ) -> "Board":
        """Create a board with randomly placed mines from a config."""
        return cls(config.width, config.height, config.num_mines, seed, clock)

    # ========================================================================
    # Field Setup (Low-level)
    # ========================================================================

    def new_game(
        self,
        width: int,
        height: int,
        mines: Union[int, Iterable[CellLike]],
    ) -> None:
        """
        Reset the board for a new game.

        Validation runs before anything is cleared, so a failed call
        leaves the current game untouched.

        Args:
            width: Number of columns.
            height: Number of rows.
            mines: Mine count or explicit mine cells.

        Raises:
            ConfigError: If there are more mines than cells, or an
                explicit mine lies outside the new board.
        """
        _check_dimensions(width, height)
        if isinstance(mines, bool):
            raise ConfigError("Mine count must be an integer, not bool")
        if isinstance(mines, numbers.Integral):
            mines = operator.index(mines)
            _check_mine_count(width, height, mines)
            mine_cells = None
        else:
            mine_cells = [to_cell(cell) for cell in mines]
            _check_mine_count(width, height, len(mine_cells))
            for cell in mine_cells:
                if not _in_bounds(cell, width, height):
                    raise ConfigError(f"Incorrect mine position {cell}")

        self._reset_values()
        self._width = width
        self._height = height
        if mine_cells is None:
            self._fill_mines(mines)
        else:
            self._mines.update(mine_cells)
        self._fill_closed()
        logger.debug(
            "New game %dx%d with %d mines", width, height, len(self._mines)
        )

    def _reset_values(self) -> None:
        self._width = 0
        self._height = 0
        self._start_time = 0
        self._finish_time = 0
        self._status = GameStatus.NOT_STARTED
        self._mines.clear()
        self._marked.clear()
        self._closed.clear()

    def _all_cells(self) -> List[Cell]:
        """Every coordinate on the board in row-major order."""
        return [
            Cell(x, y)
            for y in range(self._height)
            for x in range(self._width)
        ]

    def _fill_mines(self, count: int) -> None:
        """Pick `count` distinct cells uniformly as mines."""
        if not count:
            return
        candidates = self._all_cells()
        self._rng.shuffle(candidates)
        self._mines.update(candidates[:count])

    def _fill_closed(self) -> None:
        self._closed.update(self._all_cells())

    # ========================================================================
    # Status Transitions
    # ========================================================================

    def _now(self) -> int:
        return int(self._clock())

    def _start_game(self) -> None:
        self._status = GameStatus.IN_PROGRESS
        self._start_time = self._now()

    def _defeat(self) -> None:
        self._status = GameStatus.DEFEAT
        self._finish_time = self._now()
        logger.info("Game lost after %d seconds", self.elapsed_time)

    def _victory_check(self) -> None:
        if len(self._closed) != len(self._mines):
            return
        self._status = GameStatus.VICTORY
        self._finish_time = self._now()
        logger.info("Game won after %d seconds", self.elapsed_time)

    # ========================================================================
    # Query Helpers
    # ========================================================================

    def is_valid_position(self, cell: CellLike) -> bool:
        """Check if a cell is within board bounds."""
        return _in_bounds(to_cell(cell), self._width, self._height)

    def is_mine(self, cell: CellLike) -> bool:
        return to_cell(cell) in self._mines

    def is_marked(self, cell: CellLike) -> bool:
        return to_cell(cell) in self._marked

    def is_closed(self, cell: CellLike) -> bool:
        return to_cell(cell) in self._closed

    def is_opened(self, cell: CellLike) -> bool:
        return not self.is_closed(cell)

    def count_adjacent_mines(self, cell: CellLike) -> int:
        """Count mines among the up to eight neighbors of a cell."""
        count = 0
        for neighbor in self._neighbors(to_cell(cell)):
            if neighbor in self._mines:
                count += 1
        return count

    def _neighbors(self, cell: Cell) -> Iterable[Cell]:
        """In-bounds neighbors of a cell."""
        return (
            neighbor for neighbor in cell.neighbors()
            if _in_bounds(neighbor, self._width, self._height)
        )

    def _require_in_bounds(self, cell: Cell) -> None:
        if not _in_bounds(cell, self._width, self._height):
            raise BoundsError(
                f"Cell {cell} is outside the "
                f"{self._width}x{self._height} board"
            )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def mark_cell(self, cell: CellLike) -> None:
        """
        Toggle the flag on a cell.

        Marking counts as the first move and starts the game clock.
        Does nothing once the game has finished.

        Raises:
            BoundsError: If the cell is outside the board.
        """
        cell = to_cell(cell)
        self._require_in_bounds(cell)
        if self.is_finished:
            return
        if self._status == GameStatus.NOT_STARTED:
            self._start_game()
        if cell in self._marked:
            self._marked.discard(cell)
        else:
            self._marked.add(cell)

    def open_cell(self, cell: CellLike) -> None:
        """
        Open a cell.

        Opening a mine loses the game. Opening a cell with no adjacent
        mines opens its neighbors breadth-first, stopping at numbered
        cells and skipping flagged ones. Flagged or already opened cells,
        and any cell after the game has finished, are left alone.

        Raises:
            BoundsError: If the cell is outside the board.
        """
        cell = to_cell(cell)
        self._require_in_bounds(cell)
        if self.is_finished or cell in self._marked or cell not in self._closed:
            return
        if self._status == GameStatus.NOT_STARTED:
            self._start_game()
        if cell in self._mines:
            self._defeat()
            return

        self._flood_open(cell)
        self._victory_check()

    def _flood_open(self, start: Cell) -> None:
        """Breadth-first reveal from a safe cell."""
        queue = deque([start])
        self._closed.discard(start)
        while queue:
            current = queue.popleft()
            if self.count_adjacent_mines(current):
                continue
            for neighbor in self._neighbors(current):
                if neighbor in self._closed and neighbor not in self._marked:
                    # Removing on enqueue keeps each cell queued at most once
                    self._closed.discard(neighbor)
                    queue.append(neighbor)

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def num_mines(self) -> int:
        return len(self._mines)

    @property
    def num_flags(self) -> int:
        return len(self._marked)

    @property
    def num_closed(self) -> int:
        return len(self._closed)

    @property
    def status(self) -> GameStatus:
        """Get current game status."""
        return self._status

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._status == GameStatus.IN_PROGRESS

    @property
    def is_finished(self) -> bool:
        """Check if game ended in victory or defeat."""
        return self._status in (GameStatus.VICTORY, GameStatus.DEFEAT)

    @property
    def elapsed_time(self) -> int:
        """
        Game duration in whole seconds.

        Zero before the first move, running while in progress, and
        frozen at the finish time once the game has ended.
        """
        if self._status == GameStatus.NOT_STARTED:
            return 0
        if self._status == GameStatus.IN_PROGRESS:
            return self._now() - self._start_time
        return self._finish_time - self._start_time

    def render_field(self) -> List[str]:
        """
        Render the board as one string per row, top to bottom.

        Symbols:
            * = mine (only after a defeat, even if flagged)
            ? = flagged cell
            - = closed cell
            . = opened cell with no adjacent mines
            1-8 = opened cell with adjacent mine count
        """
        rows = []
        for y in range(self._height):
            row = []
            for x in range(self._width):
                row.append(self._render_cell(Cell(x, y)))
            rows.append("".join(row))
        return rows

    def _render_cell(self, cell: Cell) -> str:
        if cell in self._mines and self._status == GameStatus.DEFEAT:
            return MINE_SYMBOL
        if cell in self._marked:
            return MARKED_SYMBOL
        if cell in self._closed:
            return CLOSED_SYMBOL
        count = self.count_adjacent_mines(cell)
        return str(count) if count else EMPTY_SYMBOL

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array indexed [y, x].

        Returns:
            2D int8 array where:
                -1 = closed
                -2 = flagged
                0-8 = opened with adjacent count
                9 = mine (only after a defeat)
        """
        obs = np.zeros((self._height, self._width), dtype=np.int8)
        for y in range(self._height):
            for x in range(self._width):
                obs[y, x] = self._observe_cell(Cell(x, y))
        return obs

    def _observe_cell(self, cell: Cell) -> int:
        if cell in self._mines and self._status == GameStatus.DEFEAT:
            return OBS_MINE
        if cell in self._marked:
            return OBS_MARKED
        if cell in self._closed:
            return OBS_CLOSED
        return self.count_adjacent_mines(cell)

    def get_valid_actions(self) -> List[Cell]:
        """
        Get closed, unflagged cells that can still be opened.

        Returns:
            Cells in row-major order; empty once the game has finished.
        """
        if self.is_finished:
            return []
        return [
            cell for cell in self._all_cells()
            if cell in self._closed and cell not in self._marked
        ]

    def __str__(self) -> str:
        return "\n".join(self.render_field())


def _in_bounds(cell: Cell, width: int, height: int) -> bool:
    return 0 <= cell.x < width and 0 <= cell.y < height
