"""Game models."""

from .card import Card, CardSet, Color, Rank, create_full_deck
from .game_state import GameResult, GameState
from .pile import Pile, PileKind, PileSet

__all__ = [
    "Card",
    "CardSet",
    "Color",
    "Rank",
    "create_full_deck",
    "GameResult",
    "GameState",
    "Pile",
    "PileKind",
    "PileSet",
]
