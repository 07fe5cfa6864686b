"""Formatters for game log output."""

from typing import Iterable

from esp_solitaire.models.card import Card
from esp_solitaire.models.pile import PileSet


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "RA" for Red Ace, "B10" for Black 10).
    """
    return str(card)


def format_cards(cards: Iterable[Card]) -> str:
    """Format cards to a comma-separated string, keeping their order.

    Returns:
        Comma-separated card strings (e.g., "B8,R7,B6").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_piles(piles: PileSet) -> dict[str, str]:
    """Format all piles to dict.

    Args:
        piles: Piles to format.

    Returns:
        Dict mapping pile index (as string) to its cards, top first.
    """
    return {str(pile.index): format_cards(pile) for pile in piles}
