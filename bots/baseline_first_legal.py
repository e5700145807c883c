"""Deterministic baseline bot: simple bids, first legal card."""

from __future__ import annotations

from ohhell.bidding import forbidden_dealer_bid
from ohhell.cards import Card
from ohhell.round_state import RoundState, legal_cards

from .base import BotStrategy


class FirstLegalBot(BotStrategy):
    name = "FirstLegal"

    def choose_bid(self, round_state: RoundState, player: str) -> int:
        cards = round_state.cards_per_player
        bid = 0 if cards == 1 else 1
        if player == round_state.dealer_id:
            forbidden = forbidden_dealer_bid(round_state.bids, cards)
            if bid == forbidden:
                bid = (bid + 1) % (cards + 1)
        return bid

    def choose_card(self, round_state: RoundState, player: str) -> Card:
        return legal_cards(round_state, player)[0]
