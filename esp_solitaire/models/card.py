"""Card and CardSet models."""

from enum import Enum, IntEnum
from typing import Iterable, Iterator

from pydantic import BaseModel

from esp_solitaire.errors import DuplicateCard, InvalidColor, InvalidRank


class Color(str, Enum):
    """Card color (value is the letter shown on the board)."""

    RED = "R"
    BLACK = "B"


class Rank(IntEnum):
    """Card rank, Ace low."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


# Map rank to display string
RANK_NAMES = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

# Tokens accepted in deal files and commands
RANK_TOKENS = {name: rank for rank, name in RANK_NAMES.items()}

COLOR_TOKENS = {
    "RED": Color.RED,
    "BLACK": Color.BLACK,
}

DECK_SIZE = len(Color) * len(Rank)


class Card(BaseModel, frozen=True):
    """Single card representation."""

    color: Color
    rank: Rank

    def is_opposite_color(self, other: "Card") -> bool:
        """Check if the other card has the other color."""
        return self.color != other.color

    def __str__(self) -> str:
        return f"{self.color.value}{RANK_NAMES[self.rank]}"

    def __repr__(self) -> str:
        return str(self)


def parse_color(token: str) -> Color:
    """Parse a color token.

    Args:
        token: "RED" or "BLACK". Callers upper-case user input beforehand.

    Returns:
        The matching Color.

    Raises:
        InvalidColor: If the token names no color.
    """
    try:
        return COLOR_TOKENS[token]
    except KeyError:
        raise InvalidColor(f"Unknown color: {token!r}") from None


def parse_rank(token: str) -> Rank:
    """Parse a rank token ("A", "2".."10", "J", "Q", "K").

    Raises:
        InvalidRank: If the token names no rank.
    """
    try:
        return RANK_TOKENS[token]
    except KeyError:
        raise InvalidRank(f"Unknown rank: {token!r}") from None


def parse_card(color_token: str, rank_token: str) -> Card:
    """Build a card from its two tokens."""
    return Card(color=parse_color(color_token), rank=parse_rank(rank_token))


def assert_unique(cards: Iterable[Card], new_card: Card) -> None:
    """Fail if new_card is already among cards.

    Raises:
        DuplicateCard: If a card with the same color and rank exists.
    """
    if new_card in cards:
        raise DuplicateCard(f"Duplicate card: {new_card}")


class CardSet:
    """Unordered set of cards."""

    def __init__(self, cards: Iterable[Card] | None = None):
        """Initialize card set.

        Args:
            cards: Initial cards.
        """
        self._cards: set[Card] = set(cards) if cards else set()

    def add(self, card: Card) -> None:
        """Add a card to the set."""
        self._cards.add(card)

    def to_list(self) -> list[Card]:
        """Get cards as a sorted list."""
        return sorted(self._cards, key=lambda c: (c.color != Color.RED, c.rank))

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: Card) -> bool:
        return card in self._cards

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CardSet):
            return NotImplemented
        return self._cards == other._cards

    def __str__(self) -> str:
        if not self._cards:
            return "[]"
        return "[" + ", ".join(str(c) for c in self.to_list()) + "]"

    def __repr__(self) -> str:
        return f"CardSet({self._cards!r})"


def create_full_deck() -> CardSet:
    """Create the full 26-card deck (13 red, 13 black)."""
    cards = CardSet()
    for color in Color:
        for rank in Rank:
            cards.add(Card(color=color, rank=rank))
    return cards
