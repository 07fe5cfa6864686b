"""Game logger for move-by-move replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Sequence, TextIO

from pydantic import BaseModel

from esp_solitaire.models.card import Card
from esp_solitaire.models.game_state import GameResult
from esp_solitaire.models.pile import PileSet

from .formatters import format_card, format_cards, format_piles


class GameLogConfig(BaseModel):
    """Configuration for game logging."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class GameLogger:
    """Logger for game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of a session.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def open(self) -> None:
        """Open the log file if logging is enabled.

        Does nothing when the file is already open.

        Raises:
            OSError: If the file cannot be created or opened.
        """
        if self._file is None and self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        self.open()
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_session_start(self, piles: PileSet, source: str = "") -> None:
        """Log session start with the dealt layout.

        Args:
            piles: Piles right after the deal.
            source: Deal file the layout came from.
        """
        self._write({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(),
            "source": source,
            "piles": format_piles(piles),
        })

    def log_move(
        self,
        move_num: int,
        source: int,
        destination: int,
        run: Sequence[Card],
        piles: PileSet,
    ) -> None:
        """Log an accepted move.

        Args:
            move_num: Number of the move within the session.
            source: Pile the run came from.
            destination: Pile the run went to.
            run: Cards moved, top first.
            piles: Piles after the move.
        """
        self._write({
            "type": "move",
            "move": move_num,
            "card": format_card(run[0]),
            "from": source,
            "to": destination,
            "cards": format_cards(run),
            "count": len(run),
            "piles": format_piles(piles),
        })

    def log_rejected(self, card: Card, destination: int, reason: str) -> None:
        """Log a move that broke the rules."""
        self._write({
            "type": "rejected",
            "card": format_card(card),
            "to": destination,
            "reason": reason,
        })

    def log_session_end(self, result: GameResult, total_moves: int) -> None:
        """Log session end.

        Args:
            result: How the session ended.
            total_moves: Number of accepted moves.
        """
        self._write({
            "type": "session_end",
            "timestamp": datetime.now().isoformat(),
            "result": result.value,
            "total_moves": total_moves,
        })
