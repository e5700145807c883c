"""Convenience service layer for UI and agents."""

from __future__ import annotations

from dataclasses import dataclass
from random import Random
from typing import Optional, Sequence

from .bidding import Bid, expected_bidder, legal_bids
from .cards import Card, card_label, deserialize_card, serialize_card
from .game import GameState, create_game, finish_round_and_start_next, with_round
from .round_state import RoundPhase, expected_player, legal_cards, play_card, submit_bid
from .rules_schema import RuleSet
from .trick import CompletedTrick


@dataclass
class TrickPlayView:
    player: str
    card: dict
    label: str


@dataclass
class TrickView:
    leader: str
    plays: list[TrickPlayView]
    winner: Optional[str]


@dataclass
class RoundView:
    round_index: int
    phase: str
    dealer: str
    cards_per_player: int
    trump: str
    current_player: Optional[str]
    hand: list[dict]
    hand_labels: list[str]
    legal_moves: list[dict]
    legal_move_labels: list[str]
    legal_bids: list[int]
    bids: list[dict]
    tricks_won: dict[str, int]
    remaining_cards: dict[str, int]
    trick: Optional[TrickView]
    trick_history: list[TrickView]


@dataclass
class GameView:
    players: list[str]
    schedule: list[int]
    round_index: int
    scores: dict[str, int]
    is_over: bool
    round: Optional[RoundView]


def _trick_view(trick) -> TrickView:
    return TrickView(
        leader=trick.leader_id,
        plays=[
            TrickPlayView(player=play.player_id, card=serialize_card(play.card), label=card_label(play.card))
            for play in trick.plays
        ],
        winner=trick.winner_id if isinstance(trick, CompletedTrick) else None,
    )


class GameService:
    """Facade around GameState for UI consumers."""

    def __init__(
        self,
        player_order: Sequence[str],
        *,
        dealer_index: int = 0,
        seed: Optional[int] = None,
        rules: Optional[RuleSet] = None,
    ) -> None:
        self.rng = Random(seed)
        self.game: GameState = create_game(player_order, dealer_index, rng=self.rng, rules=rules)

    # Actions -----------------------------------------------------------

    def place_bid(self, player: str, tricks: int) -> RoundView:
        updated = submit_bid(self.game.round, Bid(player, tricks))
        self.game = with_round(self.game, updated)
        return self.get_round_view(player)

    def play_card(self, player: str, card_payload: dict) -> RoundView:
        card = deserialize_card(card_payload)
        updated = play_card(self.game.round, player, card)
        self.game = with_round(self.game, updated)
        return self.get_round_view(player)

    def finish_round(self) -> GameView:
        self.game = finish_round_and_start_next(self.game, rng=self.rng)
        return self.get_game_view()

    # Views -------------------------------------------------------------

    def get_game_view(self, perspective: Optional[str] = None) -> GameView:
        game = self.game
        return GameView(
            players=list(game.player_order),
            schedule=list(game.schedule),
            round_index=game.round_index,
            scores=game.scores_by_player(),
            is_over=game.is_over,
            round=None if game.is_over else self.get_round_view(perspective),
        )

    def get_round_view(self, perspective: Optional[str] = None) -> RoundView:
        round_state = self.game.round
        current_player = self._current_player()
        if perspective is None:
            perspective = current_player or round_state.leader_id

        visible_hand: list[Card] = list(round_state.hand(perspective))
        moves: list[Card] = []
        bid_options: list[int] = []
        if current_player == perspective and round_state.phase is RoundPhase.PLAYING:
            moves = legal_cards(round_state, perspective)
        if round_state.phase is RoundPhase.BIDDING:
            bid_options = legal_bids(
                perspective,
                player_order=round_state.player_order,
                dealer_index=round_state.dealer_index,
                cards_per_player=round_state.cards_per_player,
                bids=round_state.bids,
            )

        trick = round_state.current_trick
        return RoundView(
            round_index=round_state.round_index,
            phase=round_state.phase.name.lower(),
            dealer=round_state.dealer_id,
            cards_per_player=round_state.cards_per_player,
            trump=str(round_state.trump_suit),
            current_player=current_player,
            hand=[serialize_card(card) for card in visible_hand],
            hand_labels=[card_label(card) for card in visible_hand],
            legal_moves=[serialize_card(card) for card in moves],
            legal_move_labels=[card_label(card) for card in moves],
            legal_bids=bid_options,
            bids=[{"player": bid.player_id, "tricks": bid.tricks} for bid in round_state.bids],
            tricks_won=round_state.tricks_won_by_player(),
            remaining_cards={player: len(hand) for player, hand in round_state.hands_by_player().items()},
            trick=_trick_view(trick) if trick.plays else None,
            trick_history=[_trick_view(done) for done in round_state.completed_tricks],
        )

    # Helpers -----------------------------------------------------------

    def _current_player(self) -> Optional[str]:
        round_state = self.game.round
        if round_state.phase is RoundPhase.BIDDING:
            return expected_bidder(round_state.player_order, round_state.dealer_index, len(round_state.bids))
        if round_state.phase is RoundPhase.PLAYING:
            return expected_player(round_state)
        return None
