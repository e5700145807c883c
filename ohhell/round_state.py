"""Round lifecycle: dealing, bidding and trick play.

Every operation takes a ``RoundState`` snapshot and returns a new one; a
snapshot is never modified after it has been handed out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum, auto
from random import Random
from typing import Dict, List, Optional, Sequence, Tuple

from .bidding import Bid, leader_index, validate_bid
from .cards import Card, Suit
from .deck import deal_round, open_deck
from .errors import (
    CardNotInHand,
    IllegalPlay,
    InvalidCardsPerPlayer,
    InvalidPlayerCount,
    OutOfTurn,
    SetupError,
    UnknownPlayer,
    WrongPhase,
)
from .mechanics import legal_moves
from .trick import CompletedTrick, EmptyTrick, Trick, TrickInProgress, add_play, complete

logger = logging.getLogger(__name__)

MIN_PLAYERS = 3


class RoundPhase(Enum):
    BIDDING = auto()
    PLAYING = auto()
    SCORING = auto()
    DONE = auto()


@dataclass(frozen=True)
class RoundState:
    round_index: int
    phase: RoundPhase
    player_order: Tuple[str, ...]
    dealer_index: int
    cards_per_player: int
    trump_suit: Suit
    hands: Tuple[Tuple[Card, ...], ...]
    bids: Tuple[Bid, ...]
    current_trick: Trick
    tricks_won: Tuple[int, ...]
    completed_tricks: Tuple[CompletedTrick, ...] = ()

    @property
    def num_players(self) -> int:
        return len(self.player_order)

    @property
    def dealer_id(self) -> str:
        return self.player_order[self.dealer_index]

    @property
    def leader_id(self) -> str:
        """Player left of the dealer, who bids first and leads the first trick."""
        return self.player_order[leader_index(self.dealer_index, self.num_players)]

    def seat_of(self, player_id: str) -> int:
        try:
            return self.player_order.index(player_id)
        except ValueError as exc:
            raise UnknownPlayer(f"Player {player_id!r} is not seated at this table.") from exc

    def hand(self, player_id: str) -> Tuple[Card, ...]:
        return self.hands[self.seat_of(player_id)]

    def tricks_won_by(self, player_id: str) -> int:
        return self.tricks_won[self.seat_of(player_id)]

    def bid_of(self, player_id: str) -> Optional[int]:
        for bid in self.bids:
            if bid.player_id == player_id:
                return bid.tricks
        return None

    def hands_by_player(self) -> Dict[str, Tuple[Card, ...]]:
        return dict(zip(self.player_order, self.hands))

    def tricks_won_by_player(self) -> Dict[str, int]:
        return dict(zip(self.player_order, self.tricks_won))

    def tricks_resolved(self) -> int:
        return sum(self.tricks_won)


def _validate_table(player_order: Sequence[str]) -> Tuple[str, ...]:
    order = tuple(player_order)
    if len(order) < MIN_PLAYERS:
        raise InvalidPlayerCount(f"Need at least {MIN_PLAYERS} players, got {len(order)}.")
    if len(set(order)) != len(order):
        raise InvalidPlayerCount("Player ids must be distinct.")
    return order


def create_round(
    round_index: int,
    player_order: Sequence[str],
    dealer_index: int,
    cards_per_player: int,
    *,
    rng: Optional[Random] = None,
    deck: Optional[Sequence[Card]] = None,
) -> RoundState:
    """Shuffle, deal and fix trump for a new round.

    Cards are dealt one at a time clockwise from the player after the dealer.
    Trump is the suit of the first undealt card, or of the last card dealt
    when nothing is left. ``len(player_order) * cards_per_player`` must not
    exceed the deck size; otherwise dealing raises ``DeckExhausted``.
    """
    order = _validate_table(player_order)
    if cards_per_player < 1:
        raise InvalidCardsPerPlayer(f"cards_per_player must be >= 1, got {cards_per_player}.")

    n = len(order)
    if not 0 <= dealer_index < n:
        raise SetupError(f"dealer_index {dealer_index} is out of range for {n} players.")
    lead = leader_index(dealer_index, n)
    cursor = open_deck(rng=rng, deck=deck)
    hands, last_dealt, cursor = deal_round(cursor, n, lead, cards_per_player)

    if cursor.is_empty():
        trump_card = last_dealt
    else:
        trump_card, cursor = cursor.draw()

    logger.debug(
        "round %d: dealt %d cards to %d players, dealer=%s trump=%s",
        round_index,
        cards_per_player,
        n,
        order[dealer_index],
        trump_card.suit,
    )

    return RoundState(
        round_index=round_index,
        phase=RoundPhase.BIDDING,
        player_order=order,
        dealer_index=dealer_index,
        cards_per_player=cards_per_player,
        trump_suit=trump_card.suit,
        hands=tuple(tuple(hand) for hand in hands),
        bids=(),
        current_trick=EmptyTrick(order[lead]),
        tricks_won=(0,) * n,
    )


def _ensure_phase(round_state: RoundState, expected: RoundPhase) -> None:
    if round_state.phase is not expected:
        raise WrongPhase(f"Action not allowed in phase {round_state.phase.name}. Expected {expected.name}.")


def submit_bid(round_state: RoundState, bid: Bid) -> RoundState:
    _ensure_phase(round_state, RoundPhase.BIDDING)
    validate_bid(
        bid,
        player_order=round_state.player_order,
        dealer_index=round_state.dealer_index,
        cards_per_player=round_state.cards_per_player,
        bids=round_state.bids,
    )

    bids = round_state.bids + (bid,)
    phase = RoundPhase.PLAYING if len(bids) == round_state.num_players else RoundPhase.BIDDING
    logger.debug("round %d: %s bids %d", round_state.round_index, bid.player_id, bid.tricks)
    return replace(round_state, bids=bids, phase=phase)


def expected_player(round_state: RoundState) -> str:
    trick = round_state.current_trick
    n = round_state.num_players
    leader = round_state.seat_of(trick.leader_id)
    return round_state.player_order[(leader + len(trick.plays)) % n]


def legal_cards(round_state: RoundState, player_id: str) -> List[Card]:
    return legal_moves(round_state.hand(player_id), round_state.current_trick, round_state.trump_suit)


def is_legal_play(round_state: RoundState, player_id: str, card: Card) -> bool:
    hand = round_state.hand(player_id)
    if card not in hand:
        return False
    return card in legal_moves(hand, round_state.current_trick, round_state.trump_suit)


def play_card(round_state: RoundState, player_id: str, card: Card) -> RoundState:
    _ensure_phase(round_state, RoundPhase.PLAYING)

    expected = expected_player(round_state)
    if player_id != expected:
        raise OutOfTurn(f"Player {expected!r} is due to play, not {player_id!r}.")

    seat = round_state.seat_of(player_id)
    hand = round_state.hands[seat]
    if card not in hand:
        raise CardNotInHand(f"{card} is not in {player_id!r}'s hand.")
    if not is_legal_play(round_state, player_id, card):
        raise IllegalPlay(f"{card} is not legal in this context.")

    remaining = tuple(held for held in hand if held != card)
    hands = round_state.hands[:seat] + (remaining,) + round_state.hands[seat + 1 :]
    trick = add_play(round_state.current_trick, player_id, card)
    logger.debug("round %d: %s plays %s", round_state.round_index, player_id, card)

    if len(trick.plays) < round_state.num_players:
        return replace(round_state, hands=hands, current_trick=trick)

    return _resolve_trick(round_state, hands, trick)


def _resolve_trick(
    round_state: RoundState,
    hands: Tuple[Tuple[Card, ...], ...],
    trick: TrickInProgress,
) -> RoundState:
    finished = complete(trick, round_state.trump_suit)
    winner_seat = round_state.seat_of(finished.winner_id)
    tricks_won = list(round_state.tricks_won)
    tricks_won[winner_seat] += 1
    completed_tricks = round_state.completed_tricks + (finished,)
    logger.debug(
        "round %d: trick %d won by %s",
        round_state.round_index,
        len(completed_tricks),
        finished.winner_id,
    )

    if sum(tricks_won) == round_state.cards_per_player:
        return replace(
            round_state,
            hands=hands,
            tricks_won=tuple(tricks_won),
            completed_tricks=completed_tricks,
            current_trick=finished,
            phase=RoundPhase.SCORING,
        )

    return replace(
        round_state,
        hands=hands,
        tricks_won=tuple(tricks_won),
        completed_tricks=completed_tricks,
        current_trick=EmptyTrick(finished.winner_id),
    )


def finish_round(round_state: RoundState) -> RoundState:
    """Mark a scored round as done."""
    _ensure_phase(round_state, RoundPhase.SCORING)
    return replace(round_state, phase=RoundPhase.DONE)
