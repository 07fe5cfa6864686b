"""Main entry point for ESP Solitaire."""

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

import yaml
from pydantic import ValidationError

from esp_solitaire.config import Config, load_config
from esp_solitaire.errors import ConfigurationError, ResourceExhaustion, UsageError
from esp_solitaire.game.deal import load_deal
from esp_solitaire.game.engine import GameEngine
from esp_solitaire.logging import GameLogConfig, GameLogger
from esp_solitaire.models.game_state import GameState
from esp_solitaire.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_OUT_OF_MEMORY = 2
EXIT_INVALID_FILE = 3


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises UsageError instead of exiting."""

    def error(self, message: str) -> None:
        raise UsageError(message)


def build_parser(prog: str | None = None) -> ArgumentParser:
    """Create the command-line parser."""
    parser = ArgumentParser(
        prog=prog,
        description="ESP Solitaire: a console card game with a fixed deal",
    )
    parser.add_argument(
        "file",
        type=Path,
        help="Deal file with 26 '<COLOR> <RANK>' lines",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to settings file (YAML)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Write a JSONL move log to this file",
    )
    return parser


def build_config(args: argparse.Namespace) -> Config:
    """Load settings and apply command-line overrides.

    Raises:
        UsageError: If the settings file cannot be used.
    """
    try:
        config = load_config(args.config)
    except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
        raise UsageError(f"Bad settings file {args.config}: {e}") from e

    if args.verbose:
        config.logging.level = "DEBUG"
    if args.game_log:
        config.game_log = GameLogConfig(enabled=True, output_path=str(args.game_log))
    return config


def play(
    args: argparse.Namespace,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Load the deal and run one session.

    Returns:
        Exit code (0 for success)

    Raises:
        UsageError: If the settings file or the game log cannot be used.
        ConfigurationError: If the deal file is invalid.
        ResourceExhaustion: If memory runs out during the session.
    """
    config = build_config(args)
    setup_logging(config.logging.level)

    state = GameState(piles=load_deal(args.file))
    display = GameDisplay(
        out=stdout,
        prompt=config.display.prompt,
        board_rows=config.display.board_rows,
    )

    game_logger = GameLogger(config.game_log)
    try:
        game_logger.open()
    except OSError as e:
        raise UsageError(f"Cannot write game log {config.game_log.output_path}: {e}") from e

    with game_logger:
        game_logger.log_session_start(state.piles, source=str(args.file))
        engine = GameEngine(state, display, game_logger)
        result = engine.run(stdin)

    logger.info(f"Session ended: {result.value} after {state.move_count} moves")
    return EXIT_OK


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    prog = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "esp-solitaire"
    display = GameDisplay(out=stdout)
    parser = build_parser(prog)

    try:
        args = parser.parse_args(argv)
        return play(args, stdin=stdin, stdout=stdout)
    except UsageError as e:
        logger.debug(f"Usage error: {e}")
        display.print_error(f"Usage: {prog} [file-name]")
        return EXIT_USAGE
    except ConfigurationError as e:
        logger.debug(f"Invalid deal file: {e}")
        display.print_error("Invalid file!")
        return EXIT_INVALID_FILE
    except (ResourceExhaustion, MemoryError):
        display.print_error("Out of memory")
        return EXIT_OUT_OF_MEMORY
    except KeyboardInterrupt:
        print(file=display.out)
        return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
