"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell


# ============================================================================
# Clock Fixtures
# ============================================================================

class FakeClock:
    """Manually advanced clock returning seconds."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock starting at t=1000s."""
    return FakeClock()


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 random mines."""
    return Board.from_config(BoardConfig(), seed=1234)


@pytest.fixture
def center_mine_board(clock: FakeClock) -> Board:
    """Create a 3x3 board with a single mine in the middle."""
    return Board(3, 3, [Cell(1, 1)], clock=clock)


@pytest.fixture
def corner_mine_board(clock: FakeClock) -> Board:
    """Create a 2x2 board with a mine at (0, 0)."""
    return Board(2, 2, [(0, 0)], clock=clock)


@pytest.fixture
def empty_board(clock: FakeClock) -> Board:
    """Create a 5x5 board with no mines for cascade testing."""
    return Board(5, 5, 0, clock=clock)


@pytest.fixture
def wall_board(clock: FakeClock) -> Board:
    """Create a 5x3 board with a column of mines at x=2 splitting it in two."""
    return Board(5, 3, [(2, 0), (2, 1), (2, 2)], clock=clock)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
