"""
Cell module for Minesweeper game.

A cell is a plain grid coordinate. It carries no state of its own: the
board tracks mines, flags and closed cells as sets of these values.
"""
import operator
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple, Union


# ============================================================================
# Constants
# ============================================================================

NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(frozen=True, order=True)
class Cell:
    """
    A single (x, y) coordinate on the Minesweeper grid.

    Attributes:
        x: Column index, growing to the right.
        y: Row index, growing downwards.
    """

    x: int
    y: int

    def neighbors(self) -> Iterator["Cell"]:
        """
        Yield the eight surrounding coordinates.

        No bounds filtering happens here, so coordinates may be negative
        or past the board edge.
        """
        for delta_x, delta_y in NEIGHBOR_OFFSETS:
            yield Cell(self.x + delta_x, self.y + delta_y)


CellLike = Union[Cell, Sequence[int]]


def to_cell(value: CellLike) -> Cell:
    """
    Normalize a Cell or an (x, y) pair to a Cell.

    Raises:
        TypeError: If a coordinate is not an integer.
    """
    if isinstance(value, Cell):
        return value
    x, y = value
    return Cell(operator.index(x), operator.index(y))
