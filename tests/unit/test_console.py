"""
Unit tests for the text front end.

Drives the play loop with scripted input and captures its output.
"""
from typing import Callable, List

import pytest
from minesweeper import Board, Cell, CommandError, GameStatus, parse_command, play
from minesweeper.console import MARK, NEW, OPEN, QUIT, format_board


def scripted(lines: List[str]) -> Callable[[str], str]:
    """Build a read function that replays lines, then signals EOF."""
    remaining = iter(lines)

    def read(prompt: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    return read


# ============================================================================
# Command Parsing Tests
# ============================================================================

class TestParseCommand:
    """Test parsing of player input."""

    @pytest.mark.parametrize("line", ["open 1 2", "o 1 2", "  O   1 2  "])
    def test_open_forms(self, line: str) -> None:
        command = parse_command(line)
        assert command.action == OPEN
        assert command.cell == Cell(1, 2)

    @pytest.mark.parametrize("line", ["mark 0 3", "m 0 3", "flag 0 3"])
    def test_mark_forms(self, line: str) -> None:
        command = parse_command(line)
        assert command.action == MARK
        assert command.cell == Cell(0, 3)

    def test_new_and_quit(self) -> None:
        assert parse_command("new").action == NEW
        assert parse_command("q").action == QUIT
        assert parse_command("quit").cell is None

    @pytest.mark.parametrize(
        "line, message",
        [
            ("", "Empty command"),
            ("dig 1 1", "Unknown command"),
            ("open 1", "needs two coordinates"),
            ("open a b", "must be integers"),
            ("open -1 0", "cannot be negative"),
            ("quit now", "takes no arguments"),
        ],
    )
    def test_invalid_input_raises(self, line: str, message: str) -> None:
        with pytest.raises(CommandError, match=message):
            parse_command(line)


# ============================================================================
# Play Loop Tests
# ============================================================================

class TestPlay:
    """Test the interactive loop."""

    def test_format_board_has_headers(self, corner_mine_board: Board) -> None:
        assert format_board(corner_mine_board) == "  01\n0 --\n1 --"

    def test_loss_is_announced(self, corner_mine_board: Board) -> None:
        output: List[str] = []
        status = play(
            corner_mine_board, scripted(["o 1 1", "o 0 0"]), output.append
        )
        assert status == GameStatus.DEFEAT
        assert any("LOST" in line for line in output)
        assert "  01\n0 *-\n1 -1" in output

    def test_win_is_announced(self, empty_board: Board) -> None:
        output: List[str] = []
        status = play(empty_board, scripted(["open 0 0"]), output.append)
        assert status == GameStatus.VICTORY
        assert any("WIN" in line for line in output)

    def test_quit_stops_reading(self, corner_mine_board: Board) -> None:
        output: List[str] = []
        status = play(
            corner_mine_board, scripted(["m 1 0", "q", "o 0 0"]), output.append
        )
        assert status == GameStatus.IN_PROGRESS
        assert corner_mine_board.is_marked((1, 0))

    def test_errors_are_reported_and_play_continues(
        self, corner_mine_board: Board
    ) -> None:
        output: List[str] = []
        play(
            corner_mine_board,
            scripted(["dig", "o 5 5", "o 1 1"]),
            output.append,
        )
        errors = [line for line in output if line.startswith("Error:")]
        assert len(errors) == 2
        assert "outside" in errors[1]
        assert corner_mine_board.is_opened((1, 1))

    def test_new_starts_fresh_game(self, corner_mine_board: Board) -> None:
        output: List[str] = []
        status = play(
            corner_mine_board, scripted(["o 0 0", "new"]), output.append
        )
        assert status == GameStatus.NOT_STARTED
        assert corner_mine_board.num_mines == 1
        assert corner_mine_board.num_closed == 4
