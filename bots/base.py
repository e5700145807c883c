"""Common bot strategy interfaces."""

from __future__ import annotations

from ohhell.bidding import legal_bids
from ohhell.cards import Card
from ohhell.round_state import RoundState, legal_cards


class BotStrategy:
    """Base class for bot policies."""

    name: str = "BaseBot"

    def on_round_start(self, round_state: RoundState) -> None:
        """Optional hook invoked after each deal."""
        return None

    def choose_bid(self, round_state: RoundState, player: str) -> int:
        """Return the number of tricks ``player`` commits to."""
        options = legal_bids(
            player,
            player_order=round_state.player_order,
            dealer_index=round_state.dealer_index,
            cards_per_player=round_state.cards_per_player,
            bids=round_state.bids,
        )
        if not options:
            raise RuntimeError("No legal bids available for bot.")
        return options[0]

    def choose_card(self, round_state: RoundState, player: str) -> Card:
        legal = legal_cards(round_state, player)
        if not legal:
            raise RuntimeError("No legal plays available for bot.")
        return legal[0]
