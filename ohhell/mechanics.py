"""Legal move generation."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .cards import Card, Suit
from .trick import EmptyTrick, Trick


def legal_moves(hand: Iterable[Card], trick: Trick, trump: Optional[Suit]) -> List[Card]:
    """Return the subset of cards that are legal to play given the current trick.

    The result keeps the order of ``hand``.
    """
    cards = list(hand)
    if isinstance(trick, EmptyTrick):
        return cards

    led = trick.lead_suit
    in_led = [card for card in cards if card.suit is led]
    if in_led:
        return in_led

    if trump is not None:
        trump_cards = [card for card in cards if card.suit is trump]
        if trump_cards:
            return trump_cards

    return cards


def is_legal_play(hand: Iterable[Card], trick: Trick, trump: Optional[Suit], card: Card) -> bool:
    cards = list(hand)
    if card not in cards:
        return False
    return card in legal_moves(cards, trick, trump)
