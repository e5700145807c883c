"""Random baseline bot."""

from __future__ import annotations

import random
from typing import Optional

from ohhell.bidding import legal_bids
from ohhell.cards import Card
from ohhell.round_state import RoundState, legal_cards

from .base import BotStrategy


class RandomBot(BotStrategy):
    name = "Random"

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def choose_bid(self, round_state: RoundState, player: str) -> int:
        options = legal_bids(
            player,
            player_order=round_state.player_order,
            dealer_index=round_state.dealer_index,
            cards_per_player=round_state.cards_per_player,
            bids=round_state.bids,
        )
        if not options:
            raise RuntimeError("No legal bids available for bot.")
        return self._rng.choice(options)

    def choose_card(self, round_state: RoundState, player: str) -> Card:
        legal = legal_cards(round_state, player)
        if not legal:
            raise RuntimeError("No legal plays available for bot.")
        return self._rng.choice(legal)
