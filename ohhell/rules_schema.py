"""Validation schema for tunable rule constants."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from .cards import Rank, Suit
from .deck import DECK_SIZE
from .errors import InvalidPlayerCount


class RuleSet(BaseModel):
    deck_size: int = Field(DECK_SIZE, description="Cards in the deck; one of each suit and rank.")
    min_players: int = Field(3, ge=3, description="Smallest table the engine will deal to.")
    exact_bid_bonus: int = Field(5, ge=0, description="Bonus added when tricks won equal the bid.")
    max_cards_overrides: dict[int, int] = Field(
        default_factory=lambda: {3: 12, 4: 9},
        description="Largest hand size per player count; other tables use deck size // players.",
    )

    model_config = {"frozen": True}

    @field_validator("deck_size")
    @classmethod
    def validate_deck_size(cls, value: int) -> int:
        expected = len(Suit) * len(Rank)
        if value != expected:
            raise ValueError(f"Deck size must be {expected} ({len(Suit)} suits x {len(Rank)} ranks), got {value}.")
        return value

    @field_validator("max_cards_overrides")
    @classmethod
    def validate_overrides(cls, value: dict[int, int], info: ValidationInfo) -> dict[int, int]:
        deck_size = info.data.get("deck_size", DECK_SIZE)
        for players, cards in value.items():
            if players < 3:
                raise ValueError(f"Override for {players} players is below the minimum table size.")
            if cards < 1:
                raise ValueError(f"Override for {players} players must deal at least one card.")
            if players * cards > deck_size:
                raise ValueError(
                    f"Cannot deal {cards} cards to {players} players from a {deck_size}-card deck."
                )
        return value

    def max_cards_for(self, num_players: int) -> int:
        if num_players < 1:
            raise InvalidPlayerCount(f"Cannot size hands for {num_players} players.")
        if num_players in self.max_cards_overrides:
            return self.max_cards_overrides[num_players]
        return self.deck_size // num_players


DEFAULT_RULES = RuleSet()


def load_rules(payload: Mapping[str, Any]) -> RuleSet:
    """Validate a plain mapping (for example parsed JSON) into a ``RuleSet``."""
    return RuleSet.model_validate(dict(payload))
