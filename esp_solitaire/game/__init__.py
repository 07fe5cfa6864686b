"""Game logic."""

from .commands import Command, CommandType, MoveRequest, parse_command
from .deal import DEAL_LAYOUT, deal, load_deal, read_cards
from .engine import GameEngine
from .validator import MoveValidator, ValidationResult

__all__ = [
    "Command",
    "CommandType",
    "MoveRequest",
    "parse_command",
    "DEAL_LAYOUT",
    "deal",
    "load_deal",
    "read_cards",
    "GameEngine",
    "MoveValidator",
    "ValidationResult",
]
