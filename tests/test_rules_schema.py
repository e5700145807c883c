import pytest
from pydantic import ValidationError

from ohhell.errors import InvalidPlayerCount
from ohhell.rules_schema import DEFAULT_RULES, RuleSet, load_rules


def test_defaults_match_standard_rules():
    assert DEFAULT_RULES.min_players == 3
    assert DEFAULT_RULES.exact_bid_bonus == 5
    assert DEFAULT_RULES.max_cards_for(3) == 12
    assert DEFAULT_RULES.max_cards_for(4) == 9
    assert DEFAULT_RULES.max_cards_for(6) == 6


def test_load_rules_from_mapping():
    rules = load_rules({"exact_bid_bonus": 10, "max_cards_overrides": {"5": 6}})
    assert rules.exact_bid_bonus == 10
    assert rules.max_cards_for(5) == 6
    assert rules.max_cards_for(3) == 12


@pytest.mark.parametrize(
    "payload",
    [
        {"min_players": 2},
        {"exact_bid_bonus": -1},
        {"max_cards_overrides": {3: 13}},
        {"max_cards_overrides": {4: 0}},
        {"max_cards_overrides": {2: 5}},
    ],
)
def test_invalid_rules_rejected(payload):
    with pytest.raises(ValidationError):
        load_rules(payload)


def test_rules_are_frozen():
    rules = RuleSet()
    with pytest.raises(ValidationError):
        rules.exact_bid_bonus = 3


def test_deck_size_must_match_suits_and_ranks():
    assert DEFAULT_RULES.deck_size == 36
    assert RuleSet(deck_size=36).max_cards_for(5) == 7
    with pytest.raises(ValidationError):
        RuleSet(deck_size=52)


@pytest.mark.parametrize("players", [0, -2])
def test_max_cards_for_empty_table_rejected(players):
    with pytest.raises(InvalidPlayerCount):
        DEFAULT_RULES.max_cards_for(players)
