"""Parsing of user command lines."""

from enum import Enum

from pydantic import BaseModel

from esp_solitaire.errors import CardError, InvalidCommand
from esp_solitaire.models.card import Card, parse_card
from esp_solitaire.models.pile import NUM_PILES

# Exact pile tokens; "00" or "+1" are not pile numbers
PILE_TOKENS = {str(i): i for i in range(NUM_PILES)}


class CommandType(str, Enum):
    """Kind of command entered by the user."""

    HELP = "help"
    EXIT = "exit"
    MOVE = "move"
    MALFORMED = "malformed"


class MoveRequest(BaseModel, frozen=True):
    """Request to move a card (and the run below it) to a pile."""

    card: Card
    destination: int

    def __str__(self) -> str:
        return f"{self.card} -> {self.destination}"


class Command(BaseModel, frozen=True):
    """One parsed command line."""

    type: CommandType
    move: MoveRequest | None = None
    reason: str = ""  # Why a line was malformed

    @property
    def is_move(self) -> bool:
        return self.type == CommandType.MOVE


def parse_move(tokens: list[str]) -> MoveRequest:
    """Parse upper-cased MOVE tokens.

    Args:
        tokens: ["MOVE", color, rank, "TO", pile]

    Raises:
        InvalidCommand: If the tokens do not form a move.
    """
    if len(tokens) != 5:
        raise InvalidCommand("Usage: move <color> <value> to <stacknumber>")
    keyword, color_token, rank_token, to_token, pile_token = tokens
    if keyword != "MOVE" or to_token != "TO":
        raise InvalidCommand("Usage: move <color> <value> to <stacknumber>")

    try:
        card = parse_card(color_token, rank_token)
    except CardError as e:
        raise InvalidCommand(str(e)) from e

    if pile_token not in PILE_TOKENS:
        raise InvalidCommand(f"Unknown pile: {pile_token!r}")

    return MoveRequest(card=card, destination=PILE_TOKENS[pile_token])


def parse_command(line: str | None) -> Command:
    """Parse one line of user input.

    Args:
        line: The raw line, or None at end of input.

    Returns:
        The parsed Command. Unparseable lines give a MALFORMED command.
    """
    if line is None:
        return Command(type=CommandType.EXIT)

    tokens = line.upper().split()
    if tokens == ["HELP"]:
        return Command(type=CommandType.HELP)
    if tokens == ["EXIT"]:
        return Command(type=CommandType.EXIT)
    if not tokens or tokens[0] != "MOVE":
        return Command(type=CommandType.MALFORMED, reason="Unknown command")

    try:
        move = parse_move(tokens)
    except InvalidCommand as e:
        return Command(type=CommandType.MALFORMED, reason=str(e))
    return Command(type=CommandType.MOVE, move=move)
