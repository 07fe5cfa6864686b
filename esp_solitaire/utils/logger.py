"""Logging utilities and board display."""

import logging
import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from esp_solitaire.models.pile import PileSet

BOARD_HEADER = "0   | 1   | 2   | 3   | 4   | DEP | DEP"
BOARD_RULE = "-" * len(BOARD_HEADER)
CELL_WIDTH = 3
FACE_DOWN = "X"

HELP_TEXT = (
    "possible command:\n"
    " - move <color> <value> to <stacknumber>\n"
    " - help\n"
    " - exit"
)


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def render_board(piles: "PileSet", min_rows: int = 16) -> list[str]:
    """Render the piles as board lines.

    Args:
        piles: Piles to draw
        min_rows: Number of card rows drawn even when piles are shorter

    Returns:
        Header lines followed by one line per depth level.
    """
    lines = [BOARD_HEADER, BOARD_RULE]
    for depth in range(max(min_rows, piles.max_depth())):
        cells = []
        for pile in piles:
            if depth >= len(pile):
                cell = ""
            elif pile.is_face_down(depth):
                cell = FACE_DOWN
            else:
                cell = str(pile.cards()[depth])
            cells.append(cell.ljust(CELL_WIDTH))
        lines.append(" | ".join(cells))
    return lines


class GameDisplay:
    """Display game output to the console."""

    def __init__(
        self,
        out: TextIO | None = None,
        prompt: str = "esp> ",
        board_rows: int = 16,
    ):
        """Initialize display.

        Args:
            out: Output stream (stdout if not provided)
            prompt: Text shown before each command
            board_rows: Minimum number of card rows on the board
        """
        self.out = out or sys.stdout
        self.prompt = prompt
        self.board_rows = board_rows

    def _print(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.out)

    def print_board(self, piles: "PileSet") -> None:
        """Print the board."""
        for line in render_board(piles, self.board_rows):
            self._print(line)

    def print_prompt(self) -> None:
        """Print the command prompt without a newline."""
        self._print(self.prompt, end="")
        self.out.flush()

    def print_help(self) -> None:
        """Print the command summary."""
        self._print(HELP_TEXT)

    def print_invalid_command(self) -> None:
        """Print the malformed command notice."""
        self._print("[INFO] Invalid command!")

    def print_invalid_move(self) -> None:
        """Print the rejected move notice."""
        self._print("[INFO] Invalid move command!")

    def print_error(self, message: str) -> None:
        """Print a fatal error."""
        self._print(f"[ERR] {message}")
