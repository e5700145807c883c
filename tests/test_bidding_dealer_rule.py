import pytest

from ohhell.bidding import Bid, expected_bidder, forbidden_dealer_bid, legal_bids
from ohhell.deck import build_deck
from ohhell.errors import (
    DealerForbiddenSum,
    DuplicateBid,
    InvalidBidValue,
    OutOfTurn,
    UnknownPlayer,
    WrongPhase,
)
from ohhell.round_state import RoundPhase, create_round, submit_bid

PLAYERS = ["P1", "P2", "P3", "P4"]


def new_round(cards_per_player=3, dealer_index=0):
    return create_round(0, PLAYERS, dealer_index, cards_per_player, deck=build_deck())


def test_bidding_starts_left_of_dealer_and_ends_with_dealer():
    assert expected_bidder(PLAYERS, 0, 0) == "P2"
    assert expected_bidder(PLAYERS, 0, 3) == "P1"
    assert expected_bidder(PLAYERS, 2, 0) == "P4"
    assert expected_bidder(PLAYERS, 2, 1) == "P1"
    assert expected_bidder(PLAYERS, 2, 3) == "P3"


def test_full_bidding_moves_to_playing():
    round_state = new_round()
    for player, tricks in [("P2", 1), ("P3", 0), ("P4", 1), ("P1", 0)]:
        round_state = submit_bid(round_state, Bid(player, tricks))
    assert round_state.phase is RoundPhase.PLAYING
    assert [bid.player_id for bid in round_state.bids] == ["P2", "P3", "P4", "P1"]
    assert round_state.bid_of("P4") == 1


def test_dealer_cannot_make_total_match_tricks():
    round_state = new_round(cards_per_player=3)
    for player, tricks in [("P2", 1), ("P3", 1), ("P4", 0)]:
        round_state = submit_bid(round_state, Bid(player, tricks))

    assert forbidden_dealer_bid(round_state.bids, 3) == 1
    with pytest.raises(DealerForbiddenSum):
        submit_bid(round_state, Bid("P1", 1))
    assert round_state.phase is RoundPhase.BIDDING
    assert len(round_state.bids) == 3

    others = sum(bid.tricks for bid in round_state.bids)
    done = submit_bid(round_state, Bid("P1", 2))
    assert sum(bid.tricks for bid in done.bids) == others + 2 == 4
    assert done.phase is RoundPhase.PLAYING


def test_no_forbidden_value_when_others_overbid():
    round_state = new_round(cards_per_player=2)
    for player, tricks in [("P2", 2), ("P3", 2), ("P4", 2)]:
        round_state = submit_bid(round_state, Bid(player, tricks))
    assert forbidden_dealer_bid(round_state.bids, 2) is None
    assert legal_bids(
        "P1",
        player_order=round_state.player_order,
        dealer_index=0,
        cards_per_player=2,
        bids=round_state.bids,
    ) == [0, 1, 2]


def test_legal_bids_excludes_forbidden_value_for_dealer_only():
    round_state = new_round(cards_per_player=2)
    kwargs = dict(player_order=round_state.player_order, dealer_index=0, cards_per_player=2)
    assert legal_bids("P2", bids=round_state.bids, **kwargs) == [0, 1, 2]
    assert legal_bids("P3", bids=round_state.bids, **kwargs) == []

    for player in ["P2", "P3", "P4"]:
        round_state = submit_bid(round_state, Bid(player, 0))
    assert legal_bids("P1", bids=round_state.bids, **kwargs) == [0, 1]


def test_out_of_turn_bid_leaves_round_unchanged():
    round_state = new_round()
    before = (round_state.bids, round_state.phase)
    with pytest.raises(OutOfTurn):
        submit_bid(round_state, Bid("P3", 1))
    assert (round_state.bids, round_state.phase) == before


def test_duplicate_bid_rejected():
    round_state = submit_bid(new_round(), Bid("P2", 1))
    with pytest.raises(DuplicateBid):
        submit_bid(round_state, Bid("P2", 0))
    assert len(round_state.bids) == 1


def test_unknown_player_rejected():
    with pytest.raises(UnknownPlayer):
        submit_bid(new_round(), Bid("P9", 0))


@pytest.mark.parametrize("tricks", [-1, 4])
def test_bid_value_out_of_range(tricks):
    with pytest.raises(InvalidBidValue):
        submit_bid(new_round(cards_per_player=3), Bid("P2", tricks))


def test_bid_after_bidding_closed_is_wrong_phase():
    round_state = new_round()
    for player, tricks in [("P2", 1), ("P3", 0), ("P4", 1), ("P1", 0)]:
        round_state = submit_bid(round_state, Bid(player, tricks))
    with pytest.raises(WrongPhase):
        submit_bid(round_state, Bid("P2", 1))
