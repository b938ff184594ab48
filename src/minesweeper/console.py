"""
Text front end for playing Minesweeper in a terminal.

Reads commands such as ``open 3 4`` or ``mark 0 0`` and prints the
rendered field after every move.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .board import Board, GameStatus
from .cell import Cell
from .errors import MinesweeperError


logger = logging.getLogger(__name__)


# ============================================================================
# Commands
# ============================================================================

OPEN = "open"
MARK = "mark"
NEW = "new"
QUIT = "quit"

_ALIASES = {
    "o": OPEN,
    "open": OPEN,
    "m": MARK,
    "mark": MARK,
    "f": MARK,
    "flag": MARK,
    "n": NEW,
    "new": NEW,
    "q": QUIT,
    "quit": QUIT,
    "exit": QUIT,
}

HELP_TEXT = (
    "Commands: open X Y (o), mark X Y (m), new (n), quit (q). "
    "X is the column, Y is the row, both from 0."
)


class CommandError(MinesweeperError):
    """Raised for input that is not a valid command."""


@dataclass(frozen=True)
class Command:
    """A parsed player command."""

    action: str
    cell: Optional[Cell] = None


def parse_command(line: str) -> Command:
    """
    Parse one line of player input.

    Args:
        line: Raw input, e.g. "o 2 3".

    Returns:
        The parsed command.

    Raises:
        CommandError: If the verb is unknown or coordinates are missing
            or not integers.
    """
    parts = line.split()
    if not parts:
        raise CommandError("Empty command")

    action = _ALIASES.get(parts[0].lower())
    if action is None:
        raise CommandError(f"Unknown command: {parts[0]}")

    if action in (NEW, QUIT):
        if len(parts) != 1:
            raise CommandError(f"'{action}' takes no arguments")
        return Command(action)

    if len(parts) != 3:
        raise CommandError(f"'{action}' needs two coordinates: X Y")
    try:
        x, y = int(parts[1]), int(parts[2])
    except ValueError:
        raise CommandError(
            f"Coordinates must be integers: {parts[1]} {parts[2]}"
        ) from None
    if x < 0 or y < 0:
        raise CommandError("Coordinates cannot be negative")
    return Command(action, Cell(x, y))


# ============================================================================
# Rendering
# ============================================================================

def format_board(board: Board) -> str:
    """Render the field with column and row headers."""
    width = board.width
    label_width = len(str(max(board.height - 1, 0)))
    header = " " * (label_width + 1) + "".join(
        str(x % 10) for x in range(width)
    )
    lines = [header]
    for y, row in enumerate(board.render_field()):
        lines.append(f"{y:>{label_width}} {row}")
    return "\n".join(lines)


def format_status(board: Board) -> str:
    return (
        f"Status: {board.status.name} | "
        f"Flags: {board.num_flags}/{board.num_mines} | "
        f"Time: {board.elapsed_time}s"
    )


# ============================================================================
# Play Loop
# ============================================================================

def play(
    board: Board,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> GameStatus:
    """
    Run an interactive game until the player quits or input ends.

    Args:
        board: Board to play on; `new` reuses its dimensions and mine count.
        read: Prompt-and-read function (default: input).
        write: Output function (default: print).

    Returns:
        Status of the board when the loop ended.
    """
    write(HELP_TEXT)
    write(format_board(board))

    while True:
        try:
            line = read("> ")
        except EOFError:
            break

        try:
            command = parse_command(line)
            if command.action == QUIT:
                break
            _apply(board, command)
        except MinesweeperError as error:
            write(f"Error: {error}")
            continue

        write(format_board(board))
        write(format_status(board))
        if command.action != NEW:
            _announce_result(board, write)

    return board.status


def _apply(board: Board, command: Command) -> None:
    if command.action == OPEN:
        board.open_cell(command.cell)
    elif command.action == MARK:
        board.mark_cell(command.cell)
    elif command.action == NEW:
        board.new_game(board.width, board.height, board.num_mines)
        logger.debug("Player started a new game")


def _announce_result(board: Board, write: Callable[[str], None]) -> None:
    if board.status == GameStatus.VICTORY:
        write(f"*** WIN in {board.elapsed_time}s! *** (type 'new' to play again)")
    elif board.status == GameStatus.DEFEAT:
        write("*** LOST (hit mine) *** (type 'new' to play again)")
