from random import Random

import pytest

from ohhell.cards import Card, Rank, Suit, card_label, deserialize_card, serialize_card, short_label
from ohhell.deck import DECK_SIZE, DeckCursor, build_deck, deal_round, open_deck, shuffled_deck
from ohhell.errors import DeckExhausted


def test_build_deck_has_one_of_each_card():
    deck = build_deck()
    assert len(deck) == DECK_SIZE == 36
    assert len(set(deck)) == 36
    assert {card.suit for card in deck} == set(Suit)
    assert {card.rank for card in deck} == set(Rank)


def test_shuffle_is_a_permutation_and_reproducible():
    first = shuffled_deck(Random(7))
    second = shuffled_deck(Random(7))
    assert first == second
    assert len(first) == 36
    assert set(first) == set(build_deck())
    assert shuffled_deck(Random(8)) != first


def test_cursor_draw_does_not_mutate():
    cursor = DeckCursor(tuple(build_deck()))
    card, advanced = cursor.draw()
    assert card == Card(Rank.SIX, Suit.CLUBS)
    assert cursor.position == 0
    assert advanced.position == 1
    assert advanced.remaining() == 35


def test_cursor_raises_when_exhausted():
    cursor = DeckCursor((Card(Rank.ACE, Suit.SPADES),))
    _, empty = cursor.draw()
    assert empty.is_empty()
    with pytest.raises(DeckExhausted):
        empty.draw()


def test_stacked_deck_must_be_full_permutation():
    deck = build_deck()
    with pytest.raises(ValueError):
        open_deck(deck=deck[:-1])
    with pytest.raises(ValueError):
        open_deck(deck=deck[:-1] + [deck[0]])
    assert open_deck(deck=deck).remaining() == 36


def test_deal_round_goes_clockwise_from_leader():
    cursor = DeckCursor(tuple(build_deck()))
    hands, last, cursor = deal_round(cursor, num_players=3, leader_index=1, cards_per_player=2)
    deck = build_deck()
    assert hands[1] == [deck[0], deck[3]]
    assert hands[2] == [deck[1], deck[4]]
    assert hands[0] == [deck[2], deck[5]]
    assert last == deck[5]
    assert cursor.position == 6


def test_full_deal_consumes_distinct_cards():
    cursor = open_deck(rng=Random(3))
    hands, _, cursor = deal_round(cursor, num_players=4, leader_index=0, cards_per_player=9)
    dealt = [card for hand in hands for card in hand]
    assert len(dealt) == 36
    assert len(set(dealt)) == 36
    assert cursor.is_empty()


def test_card_serialization_and_labels():
    card = Card(Rank.QUEEN, Suit.HEARTS)
    payload = serialize_card(card)
    assert payload == {"rank": "queen", "suit": "hearts"}
    assert deserialize_card(payload) == card
    assert card_label(card) == "Queen of Hearts"
    assert short_label(card) == "Q♥"
    assert short_label(Card(Rank.TEN, Suit.CLUBS)) == "10♣"
    assert short_label(Card(Rank.SIX, Suit.SPADES)) == "6♠"
