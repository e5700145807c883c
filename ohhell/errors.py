"""Error categories raised by the rules engine."""

from __future__ import annotations


class EngineError(RuntimeError):
    """Base class for every rule violation reported by the engine."""


class SetupError(EngineError, ValueError):
    """Raised when a round or game cannot be created with the given arguments."""


class InvalidPlayerCount(SetupError):
    """Raised when the table has too few (or too many) distinct players."""


class InvalidCardsPerPlayer(SetupError):
    """Raised when a round is asked to deal fewer than one card per player."""


class DeckExhausted(EngineError):
    """Raised when a card is drawn from an empty deck."""


class WrongPhase(EngineError):
    """Raised when an operation is attempted outside the phase that allows it."""


class OutOfTurn(EngineError):
    """Raised when a player acts while another player is expected."""


class UnknownPlayer(EngineError, ValueError):
    """Raised when a player id is not seated at the table."""


class BiddingError(EngineError, ValueError):
    """Base class for bid validation errors."""


class DuplicateBid(BiddingError):
    """Raised when a player bids twice in one round."""


class InvalidBidValue(BiddingError):
    """Raised when a bid lies outside ``0..cards_per_player``."""


class DealerForbiddenSum(BiddingError):
    """Raised when the dealer's bid would make the bid total equal the trick count."""


class InvalidPlay(EngineError):
    """Base class for card play violations."""


class CardNotInHand(InvalidPlay):
    """Raised when the played card is not held by the player."""


class IllegalPlay(InvalidPlay):
    """Raised when a held card breaks the follow-suit or must-trump rule."""


class ScoringError(EngineError):
    """Base class for scoring issues."""


class MissingBid(ScoringError):
    """Raised when a round reaches scoring without a bid for every player."""
