"""Game state models."""

from enum import Enum

from pydantic import BaseModel, Field

from .card import CardSet, create_full_deck
from .pile import PileSet


class GameResult(str, Enum):
    """How a session ended."""

    WON = "won"
    EXIT = "exit"


class GameState(BaseModel):
    """Overall game state."""

    model_config = {"arbitrary_types_allowed": True}

    piles: PileSet = Field(default_factory=PileSet)
    move_count: int = 0  # Accepted moves so far
    result: GameResult | None = None

    def is_won(self) -> bool:
        """Check if every tableau pile has been cleared.

        Deposit piles are not examined.
        """
        return self.piles.tableau_empty()

    def check_invariant(self, deck: CardSet | None = None) -> bool:
        """Check that the deck is partitioned across the piles."""
        return self.piles.is_partition_of(deck or create_full_deck())

    def __str__(self) -> str:
        status = f" [{self.result.value.upper()}]" if self.result else ""
        return f"Move {self.move_count}{status}\n{self.piles}"
