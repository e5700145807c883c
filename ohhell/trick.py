"""Trick representation and resolution.

A trick moves through three shapes: ``EmptyTrick`` before the lead,
``TrickInProgress`` once the lead suit is known, and ``CompletedTrick``
once every seat has played and a winner is fixed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from .cards import Card, Suit, beats
from .errors import EngineError


class TrickError(EngineError):
    """Raised when trick play breaks ordering constraints."""


@dataclass(frozen=True)
class PlayedCard:
    player_id: str
    card: Card


@dataclass(frozen=True)
class EmptyTrick:
    leader_id: str

    @property
    def plays(self) -> Tuple[PlayedCard, ...]:
        return ()

    @property
    def lead_suit(self) -> None:
        return None


@dataclass(frozen=True)
class TrickInProgress:
    leader_id: str
    plays: Tuple[PlayedCard, ...]
    lead_suit: Suit


@dataclass(frozen=True)
class CompletedTrick:
    leader_id: str
    plays: Tuple[PlayedCard, ...]
    lead_suit: Suit
    winner_id: str

    @property
    def winning_card(self) -> Card:
        for play in self.plays:
            if play.player_id == self.winner_id:
                return play.card
        raise TrickError("Winner did not play in this trick.")


Trick = Union[EmptyTrick, TrickInProgress, CompletedTrick]


def add_play(trick: Trick, player_id: str, card: Card) -> TrickInProgress:
    """Return the trick extended by one play."""
    if isinstance(trick, CompletedTrick):
        raise TrickError("Trick already complete.")
    if isinstance(trick, EmptyTrick):
        if player_id != trick.leader_id:
            raise TrickError("Only the leader can start the trick.")
        return TrickInProgress(trick.leader_id, (PlayedCard(player_id, card),), card.suit)
    if any(play.player_id == player_id for play in trick.plays):
        raise TrickError("A player cannot play twice in the same trick.")
    return TrickInProgress(trick.leader_id, trick.plays + (PlayedCard(player_id, card),), trick.lead_suit)


def winning_play(plays: Sequence[PlayedCard], lead_suit: Suit, trump: Optional[Suit]) -> PlayedCard:
    if not plays:
        raise TrickError("Cannot determine winner on empty trick.")
    best = plays[0]
    for play in plays[1:]:
        if beats(play.card, best.card, lead_suit, trump):
            best = play
    return best


def complete(trick: TrickInProgress, trump: Optional[Suit]) -> CompletedTrick:
    winner = winning_play(trick.plays, trick.lead_suit, trump)
    return CompletedTrick(trick.leader_id, trick.plays, trick.lead_suit, winner.player_id)
