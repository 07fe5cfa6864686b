"""Deal file loading and the fixed initial layout."""

import logging
from pathlib import Path
from typing import Iterable

from esp_solitaire.errors import CardError, ConfigurationError
from esp_solitaire.models.card import DECK_SIZE, Card, assert_unique, parse_card
from esp_solitaire.models.pile import PileSet

logger = logging.getLogger(__name__)

# File index of each card per pile, top first. Pile 0 is the concealed
# pile; piles 5 and 6 (deposit) start empty. This table is fixed and is
# not derived from the deck size.
DEAL_LAYOUT: tuple[tuple[int, ...], ...] = (
    tuple(range(16)),
    (25,),
    (24, 21),
    (23, 20, 18),
    (22, 19, 17, 16),
    (),
    (),
)


def is_blank(line: str) -> bool:
    """Check if a line holds nothing but whitespace."""
    return not line.strip()


def parse_card_line(line: str) -> Card:
    """Parse one deal file line into a card.

    The line is "<COLOR> <RANK>" with an optional trailing token that must
    be empty. Tokens are case-sensitive.

    Raises:
        ConfigurationError: If the line is malformed.
    """
    tokens = line.split()
    if len(tokens) != 2:
        raise ConfigurationError(f"Expected '<COLOR> <RANK>', got {line.rstrip()!r}")
    try:
        return parse_card(tokens[0], tokens[1])
    except CardError as e:
        raise ConfigurationError(str(e)) from e


def read_cards(lines: Iterable[str]) -> list[Card]:
    """Read the deck from deal file lines.

    Blank lines are skipped. Reading stops after DECK_SIZE cards; anything
    after that is ignored.

    Args:
        lines: Lines of the deal file.

    Returns:
        Cards in file order.

    Raises:
        ConfigurationError: On a malformed line, a duplicate card or too
            few cards.
    """
    cards: list[Card] = []
    for line_number, line in enumerate(lines, 1):
        if is_blank(line):
            continue
        try:
            card = parse_card_line(line)
            assert_unique(cards, card)
        except (ConfigurationError, CardError) as e:
            raise ConfigurationError(f"Line {line_number}: {e}") from e
        cards.append(card)
        if len(cards) == DECK_SIZE:
            break
    if len(cards) != DECK_SIZE:
        raise ConfigurationError(f"Expected {DECK_SIZE} cards, found {len(cards)}")
    return cards


def deal(cards: list[Card]) -> PileSet:
    """Lay the deck out into the seven piles.

    Args:
        cards: DECK_SIZE cards in file order.

    Returns:
        The initial PileSet.
    """
    if len(cards) != DECK_SIZE:
        raise ConfigurationError(f"Expected {DECK_SIZE} cards, got {len(cards)}")
    return PileSet([[cards[i] for i in indices] for indices in DEAL_LAYOUT])


def load_deal(path: Path | str) -> PileSet:
    """Load a deal file and lay it out.

    Args:
        path: Path to the deal file.

    Returns:
        The initial PileSet.

    Raises:
        ConfigurationError: If the file cannot be read or is invalid.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            cards = read_cards(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    logger.debug(f"Loaded {len(cards)} cards from {path}")
    return deal(cards)
