"""Bidding rules: turn order, value range and the dealer restriction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .errors import DealerForbiddenSum, DuplicateBid, InvalidBidValue, OutOfTurn, UnknownPlayer


@dataclass(frozen=True)
class Bid:
    player_id: str
    tricks: int


def leader_index(dealer_index: int, num_players: int) -> int:
    """Seat of the player immediately clockwise of the dealer."""
    return (dealer_index + 1) % num_players


def expected_bidder(player_order: Sequence[str], dealer_index: int, bids_made: int) -> str:
    n = len(player_order)
    return player_order[(leader_index(dealer_index, n) + bids_made) % n]


def bid_total(bids: Sequence[Bid]) -> int:
    return sum(bid.tricks for bid in bids)


def forbidden_dealer_bid(bids: Sequence[Bid], cards_per_player: int) -> Optional[int]:
    """Return the one value the dealer may not bid, if it lies in range.

    The dealer cannot make the bid total equal ``cards_per_player``; when the
    other players already bid more than that, no value is forbidden.
    """
    forbidden = cards_per_player - bid_total(bids)
    if forbidden < 0 or forbidden > cards_per_player:
        return None
    return forbidden


def validate_bid(
    bid: Bid,
    *,
    player_order: Sequence[str],
    dealer_index: int,
    cards_per_player: int,
    bids: Sequence[Bid],
) -> None:
    """Validate a bid against the table state.

    Raises:
        UnknownPlayer: the bidder is not seated at the table.
        DuplicateBid: the bidder already bid this round.
        OutOfTurn: another player is due to bid.
        InvalidBidValue: the bid lies outside ``0..cards_per_player``.
        DealerForbiddenSum: the dealer's bid would make the total equal the
            number of tricks available.
    """
    if bid.player_id not in player_order:
        raise UnknownPlayer(f"Player {bid.player_id!r} is not seated at this table.")
    if any(existing.player_id == bid.player_id for existing in bids):
        raise DuplicateBid(f"Player {bid.player_id!r} already bid this round.")

    expected = expected_bidder(player_order, dealer_index, len(bids))
    if bid.player_id != expected:
        raise OutOfTurn(f"Player {expected!r} is due to bid, not {bid.player_id!r}.")

    if isinstance(bid.tricks, bool) or not isinstance(bid.tricks, int):
        raise InvalidBidValue(f"Bid must be an integer, got {bid.tricks!r}.")
    if bid.tricks < 0 or bid.tricks > cards_per_player:
        raise InvalidBidValue(f"Bid {bid.tricks} must lie between 0 and {cards_per_player}.")

    # Only the dealer's own bid is restricted, whichever position it takes.
    if bid.player_id == player_order[dealer_index]:
        if bid_total(bids) + bid.tricks == cards_per_player:
            raise DealerForbiddenSum(
                f"Dealer cannot bid {bid.tricks}: total bids would equal {cards_per_player} tricks."
            )


def legal_bids(
    player_id: str,
    *,
    player_order: Sequence[str],
    dealer_index: int,
    cards_per_player: int,
    bids: Sequence[Bid],
) -> List[int]:
    """Return every bid value ``player_id`` may submit right now."""
    if len(bids) >= len(player_order):
        return []
    if player_id != expected_bidder(player_order, dealer_index, len(bids)):
        return []
    values = list(range(cards_per_player + 1))
    if player_id == player_order[dealer_index]:
        forbidden = forbidden_dealer_bid(bids, cards_per_player)
        values = [value for value in values if value != forbidden]
    return values
