"""Deck creation and dealing utilities for the 36-card deck."""

from __future__ import annotations

from dataclasses import dataclass
from random import Random
from typing import List, Optional, Sequence, Tuple

from .cards import RANK_ORDER, SUIT_ORDER, Card
from .errors import DeckExhausted

DECK_SIZE = 36


def build_deck() -> List[Card]:
    """Return the ordered 36-card deck."""
    return [Card(rank, suit) for suit in SUIT_ORDER for rank in RANK_ORDER]


def shuffled_deck(rng: Optional[Random] = None) -> Tuple[Card, ...]:
    """Return a fresh uniformly shuffled permutation of the full deck."""
    cards = build_deck()
    if rng is None:
        rng = Random()
    rng.shuffle(cards)
    return tuple(cards)


def validate_stacked_deck(deck: Sequence[Card]) -> Tuple[Card, ...]:
    """Check that a pre-arranged deck is a permutation of the full deck."""
    cards = tuple(deck)
    if len(cards) != DECK_SIZE:
        raise ValueError(f"Deck must contain exactly {DECK_SIZE} cards.")
    if set(cards) != set(build_deck()):
        raise ValueError("Deck must contain every card exactly once.")
    return cards


@dataclass(frozen=True)
class DeckCursor:
    """Read position over an immutable card sequence.

    Drawing never changes the cursor it is called on; it returns the card
    together with the cursor that points past it.
    """

    cards: Tuple[Card, ...]
    position: int = 0

    def remaining(self) -> int:
        return len(self.cards) - self.position

    def is_empty(self) -> bool:
        return self.position >= len(self.cards)

    def draw(self) -> Tuple[Card, "DeckCursor"]:
        if self.is_empty():
            raise DeckExhausted("No cards left to draw.")
        return self.cards[self.position], DeckCursor(self.cards, self.position + 1)


def open_deck(
    *,
    rng: Optional[Random] = None,
    deck: Optional[Sequence[Card]] = None,
) -> DeckCursor:
    """Return a cursor over a stacked deck when given, else over a fresh shuffle."""
    if deck is not None:
        return DeckCursor(validate_stacked_deck(deck))
    return DeckCursor(shuffled_deck(rng))


def deal_round(
    cursor: DeckCursor,
    num_players: int,
    leader_index: int,
    cards_per_player: int,
) -> Tuple[List[List[Card]], Card, DeckCursor]:
    """Deal one card at a time clockwise from the leader.

    Returns the hands indexed by seat, the last card dealt and the cursor
    positioned on the first undealt card.
    """
    hands: List[List[Card]] = [[] for _ in range(num_players)]
    last_dealt: Optional[Card] = None
    for _ in range(cards_per_player):
        for offset in range(num_players):
            seat = (leader_index + offset) % num_players
            card, cursor = cursor.draw()
            hands[seat].append(card)
            last_dealt = card
    if last_dealt is None:
        raise DeckExhausted("No card was dealt.")
    return hands, last_dealt, cursor
