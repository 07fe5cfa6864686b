"""Pile models.

A pile is an ordered sequence of cards. Index 0 is the top of the pile and
the last element is the bottom, the end where runs are attached and
detached.
"""

from enum import Enum
from typing import Iterable, Iterator, Sequence

from .card import Card, CardSet

NUM_PILES = 7
TABLEAU_PILES = (0, 1, 2, 3, 4)
DEPOSIT_PILES = (5, 6)

# Only the bottom card of the concealed pile is face up
CONCEALED_PILE = 0


class PileKind(str, Enum):
    """Role of a pile on the table."""

    TABLEAU = "tableau"
    DEPOSIT = "deposit"


def pile_kind(index: int) -> PileKind:
    """Get the kind of the pile at index."""
    if index in DEPOSIT_PILES:
        return PileKind.DEPOSIT
    if index in TABLEAU_PILES:
        return PileKind.TABLEAU
    raise IndexError(f"No pile {index}")


class Pile:
    """One ordered stack of cards."""

    def __init__(self, index: int, cards: Iterable[Card] | None = None):
        """Initialize pile.

        Args:
            index: Position of the pile on the table (0-6).
            cards: Initial cards, top first.
        """
        self.index = index
        self.kind = pile_kind(index)
        self._cards: list[Card] = list(cards) if cards else []

    @property
    def is_deposit(self) -> bool:
        return self.kind == PileKind.DEPOSIT

    @property
    def is_concealed(self) -> bool:
        return self.index == CONCEALED_PILE

    def top(self) -> Card | None:
        """Get the top card, or None if the pile is empty."""
        return self._cards[0] if self._cards else None

    def bottom(self) -> Card | None:
        """Get the bottom card, or None if the pile is empty."""
        return self._cards[-1] if self._cards else None

    def is_empty(self) -> bool:
        """Check if pile is empty."""
        return not self._cards

    def depth_of(self, card: Card) -> int:
        """Get the position of card counted from the top.

        Raises:
            ValueError: If the card is not in this pile.
        """
        return self._cards.index(card)

    def is_exposed(self, card: Card) -> bool:
        """Check if nothing rests below card."""
        return self.bottom() == card

    def is_face_down(self, depth: int) -> bool:
        """Check if the card at depth is hidden from the player."""
        return self.is_concealed and depth < len(self._cards) - 1

    def run_below(self, card: Card) -> list[Card]:
        """Get the cards from card down to the bottom, inclusive."""
        return self._cards[self.depth_of(card):]

    def detach_run(self, card: Card) -> list[Card]:
        """Remove card and everything below it.

        Returns:
            The removed run, top first.
        """
        depth = self.depth_of(card)
        run = self._cards[depth:]
        del self._cards[depth:]
        return run

    def append_run(self, run: Sequence[Card]) -> None:
        """Attach a run below the current bottom card."""
        self._cards.extend(run)

    def cards(self) -> tuple[Card, ...]:
        """Get a read-only view of the cards, top first."""
        return tuple(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: Card) -> bool:
        return card in self._cards

    def __str__(self) -> str:
        return f"Pile {self.index}: [" + ", ".join(str(c) for c in self._cards) + "]"

    def __repr__(self) -> str:
        return f"Pile({self.index}, {self._cards!r})"


class PileSet:
    """The seven piles of one game.

    Piles 0-4 are tableau piles, piles 5 and 6 are deposit piles. Every
    card belongs to exactly one pile.
    """

    def __init__(self, piles: Sequence[Iterable[Card]] | None = None):
        """Initialize pile set.

        Args:
            piles: Card sequences (top first) for piles 0-6. Missing piles
                start empty.
        """
        piles = list(piles) if piles else []
        if len(piles) > NUM_PILES:
            raise ValueError(f"Expected at most {NUM_PILES} piles, got {len(piles)}")
        piles.extend([] for _ in range(NUM_PILES - len(piles)))
        self._piles = [Pile(i, cards) for i, cards in enumerate(piles)]

    def __getitem__(self, index: int) -> Pile:
        if not 0 <= index < NUM_PILES:
            raise IndexError(f"No pile {index}")
        return self._piles[index]

    def __iter__(self) -> Iterator[Pile]:
        return iter(self._piles)

    def __len__(self) -> int:
        return NUM_PILES

    def top(self, index: int) -> Card | None:
        """Get the top card of a pile."""
        return self[index].top()

    def bottom(self, index: int) -> Card | None:
        """Get the bottom card of a pile."""
        return self[index].bottom()

    def locate(self, card: Card) -> int:
        """Find the pile that holds card.

        Raises:
            ValueError: If no pile holds the card.
        """
        for pile in self._piles:
            if card in pile:
                return pile.index
        raise ValueError(f"{card} is not on the table")

    def run_below(self, card: Card) -> list[Card]:
        """Get the run from card down to the bottom of its pile."""
        return self._piles[self.locate(card)].run_below(card)

    def detach_run(self, card: Card) -> list[Card]:
        """Remove the run starting at card from its pile."""
        return self._piles[self.locate(card)].detach_run(card)

    def append_run(self, index: int, run: Sequence[Card]) -> None:
        """Attach a run to the bottom of a pile."""
        self[index].append_run(run)

    def tableau_empty(self) -> bool:
        """Check if all tableau piles are empty."""
        return all(self._piles[i].is_empty() for i in TABLEAU_PILES)

    def all_cards(self) -> CardSet:
        """Get every card on the table."""
        return CardSet(card for pile in self._piles for card in pile)

    def card_count(self) -> int:
        """Get the number of cards across all piles, duplicates included."""
        return sum(len(pile) for pile in self._piles)

    def is_partition_of(self, deck: CardSet) -> bool:
        """Check that each card of deck sits in exactly one pile."""
        return self.card_count() == len(deck) and self.all_cards() == deck

    def view(self) -> tuple[tuple[Card, ...], ...]:
        """Get a read-only snapshot of all piles, top first."""
        return tuple(pile.cards() for pile in self._piles)

    def max_depth(self) -> int:
        """Get the height of the tallest pile."""
        return max(len(pile) for pile in self._piles)

    def __str__(self) -> str:
        return "\n".join(str(pile) for pile in self._piles)
