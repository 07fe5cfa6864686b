"""Game engine: applies moves and runs the command loop."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Callable, TextIO

from esp_solitaire.errors import InvalidMove, ResourceExhaustion
from esp_solitaire.models.card import Card
from esp_solitaire.models.game_state import GameResult, GameState
from esp_solitaire.utils.logger import GameDisplay

from .commands import Command, CommandType, parse_command
from .validator import MoveValidator

if TYPE_CHECKING:
    from esp_solitaire.logging import GameLogger
    from esp_solitaire.models.pile import PileSet
    from .validator import ValidationResult

logger = logging.getLogger(__name__)


class GameEngine:
    """Main game engine."""

    def __init__(
        self,
        state: GameState,
        display: GameDisplay | None = None,
        game_logger: GameLogger | None = None,
    ):
        """Initialize game engine.

        Args:
            state: Dealt game state
            display: Console display (prints to stdout if not provided)
            game_logger: GameLogger instance for move logging
        """
        self.state = state
        self.display = display or GameDisplay()
        self.game_logger = game_logger
        self.validator = MoveValidator()

        self._on_move: Callable[[int, list[Card]], None] | None = None

    @property
    def piles(self) -> PileSet:
        """Get the piles of the current state."""
        return self.state.piles

    def set_callbacks(
        self,
        on_move: Callable[[int, list[Card]], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_move: Called after each accepted move (move_number, run)
        """
        self._on_move = on_move

    def attempt_move(self, card: Card, destination: int) -> list[Card]:
        """Move card and the run below it to destination.

        All rules are checked before any pile changes.

        Args:
            card: Card to move
            destination: Target pile index

        Returns:
            The cards that moved, top first.

        Raises:
            InvalidMove: If the move breaks a rule.
        """
        validation: ValidationResult = self.validator.validate(
            self.piles, card, destination
        )
        if not validation.is_valid:
            if self.game_logger:
                self.game_logger.log_rejected(card, destination, validation.error_message)
            raise InvalidMove(validation.error_message)

        run = self.piles.detach_run(card)
        self.piles.append_run(destination, run)
        self.state.move_count += 1

        logger.info(
            f"Move {self.state.move_count}: {card} ({len(run)} cards) "
            f"pile {validation.source} -> pile {destination}"
        )
        if self.game_logger:
            self.game_logger.log_move(
                self.state.move_count,
                validation.source,
                destination,
                run,
                self.piles,
            )
        if self._on_move:
            self._on_move(self.state.move_count, run)
        return run

    def handle(self, command: Command) -> bool:
        """Handle one parsed command.

        Args:
            command: Parsed user command

        Returns:
            False if the session should end, True otherwise.
        """
        if command.type == CommandType.EXIT:
            self.state.result = GameResult.EXIT
            return False

        if command.type == CommandType.HELP:
            self.display.print_help()
        elif command.type == CommandType.MALFORMED:
            logger.debug(f"Malformed command: {command.reason}")
            self.display.print_invalid_command()
        else:
            move = command.move
            try:
                self.attempt_move(move.card, move.destination)
            except InvalidMove as e:
                logger.debug(f"Rejected {move}: {e}")
                self.display.print_invalid_move()
            else:
                self.display.print_board(self.piles)
        return True

    def read_command(self, stream: TextIO) -> Command:
        """Prompt for and parse one line from stream."""
        self.display.print_prompt()
        line = stream.readline()
        return parse_command(line if line else None)

    def run(self, stream: TextIO | None = None) -> GameResult:
        """Run the session until it is won, exited or input ends.

        Args:
            stream: Command input (stdin if not provided)

        Returns:
            How the session ended.

        Raises:
            ResourceExhaustion: If memory runs out during the session.
        """
        stream = stream or sys.stdin
        try:
            self.display.print_board(self.piles)
            while True:
                if self.state.is_won():
                    self.state.result = GameResult.WON
                    logger.info(f"Game won in {self.state.move_count} moves")
                    break
                if not self.handle(self.read_command(stream)):
                    break
        except MemoryError as e:
            raise ResourceExhaustion("Out of memory") from e

        if self.game_logger:
            self.game_logger.log_session_end(self.state.result, self.state.move_count)
        return self.state.result
