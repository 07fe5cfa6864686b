"""Move validation against the game rules."""

from dataclasses import dataclass, field

from esp_solitaire.models.card import Card, Rank
from esp_solitaire.models.pile import CONCEALED_PILE, NUM_PILES, PileSet


@dataclass
class ValidationResult:
    """Result of move validation."""

    is_valid: bool
    error_message: str = ""
    source: int = -1  # Pile the card currently sits in
    run: list[Card] = field(default_factory=list)  # Cards that would move


def is_descending_run(run: list[Card]) -> bool:
    """Check that each card is followed by the other color, one rank lower."""
    if len(run) < 2:
        return True
    upper, lower = run[0], run[1]
    if not upper.is_opposite_color(lower) or lower.rank != upper.rank - 1:
        return False
    return is_descending_run(run[1:])


class MoveValidator:
    """Validates move requests without touching the piles."""

    def validate(
        self,
        piles: PileSet,
        card: Card,
        destination: int,
    ) -> ValidationResult:
        """Validate moving card (and the run below it) to destination.

        Args:
            piles: Current piles
            card: Card the player wants to move
            destination: Target pile index

        Returns:
            ValidationResult
        """
        if not 0 <= destination < NUM_PILES:
            return ValidationResult(
                is_valid=False,
                error_message=f"No pile {destination}",
            )

        source = piles.locate(card)
        if source == destination:
            return ValidationResult(
                is_valid=False,
                error_message=f"{card} is already in pile {destination}",
                source=source,
            )

        source_pile = piles[source]
        if source_pile.is_deposit:
            return ValidationResult(
                is_valid=False,
                error_message="Cards never leave a deposit pile",
                source=source,
            )
        if source_pile.is_concealed and not source_pile.is_exposed(card):
            return ValidationResult(
                is_valid=False,
                error_message=f"{card} is face down",
                source=source,
            )

        if destination == CONCEALED_PILE:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cannot move cards onto pile {CONCEALED_PILE}",
                source=source,
            )

        if piles[destination].is_deposit:
            result = self.validate_deposit_move(piles, card, destination)
        else:
            result = self.validate_tableau_move(piles, card, destination)
        result.source = source
        return result

    def validate_tableau_move(
        self,
        piles: PileSet,
        card: Card,
        destination: int,
    ) -> ValidationResult:
        """Check the general rule for a move onto a tableau pile.

        The run from card to the bottom of its pile must alternate colors
        and descend by one. An empty pile takes only a King; otherwise the
        destination bottom must be the other color and one rank higher.
        """
        target = piles[destination]
        if target.is_deposit or target.is_concealed:
            return ValidationResult(
                is_valid=False,
                error_message=f"Pile {destination} does not take runs",
            )

        run = piles.run_below(card)
        if not is_descending_run(run):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cards below {card} are not a descending run",
            )

        bottom = target.bottom()
        if bottom is None:
            if card.rank != Rank.KING:
                return ValidationResult(
                    is_valid=False,
                    error_message="Only a King can start an empty pile",
                )
        elif not bottom.is_opposite_color(card) or bottom.rank != card.rank + 1:
            return ValidationResult(
                is_valid=False,
                error_message=f"{card} does not fit below {bottom}",
            )

        return ValidationResult(is_valid=True, run=run)

    def validate_deposit_move(
        self,
        piles: PileSet,
        card: Card,
        destination: int,
    ) -> ValidationResult:
        """Check the rule for a move onto a deposit pile.

        Only a single exposed card may move. An empty deposit takes only an
        Ace; otherwise the deposit bottom must be the same color and one
        rank lower.
        """
        target = piles[destination]
        if not target.is_deposit:
            return ValidationResult(
                is_valid=False,
                error_message=f"Pile {destination} is not a deposit pile",
            )

        if not piles[piles.locate(card)].is_exposed(card):
            return ValidationResult(
                is_valid=False,
                error_message=f"{card} is covered by other cards",
            )

        bottom = target.bottom()
        if bottom is None:
            if card.rank != Rank.ACE:
                return ValidationResult(
                    is_valid=False,
                    error_message="Only an Ace can start a deposit pile",
                )
        elif bottom.color != card.color or card.rank != bottom.rank + 1:
            return ValidationResult(
                is_valid=False,
                error_message=f"{card} does not follow {bottom}",
            )

        return ValidationResult(is_valid=True, run=[card])
