"""Exception hierarchy for the game."""


class SolitaireError(Exception):
    """Base class for all game errors."""


class UsageError(SolitaireError):
    """Program was invoked with the wrong arguments."""


class ConfigurationError(SolitaireError):
    """Deal file is missing, unreadable or malformed."""


class InvalidCommand(SolitaireError):
    """User line could not be parsed into a command."""


class InvalidMove(SolitaireError):
    """Well-formed move that breaks the game rules."""


class ResourceExhaustion(SolitaireError):
    """Memory ran out while the session was running."""


class CardError(SolitaireError):
    """Card token or card identity problem."""


class InvalidColor(CardError):
    """Token is not a known card color."""


class InvalidRank(CardError):
    """Token is not a known card rank."""


class DuplicateCard(CardError):
    """Same card appears twice in one deck."""
