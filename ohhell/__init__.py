"""Core rules engine for the 36-card Oh Hell variant."""

__all__ = [
    "cards",
    "deck",
    "errors",
    "bidding",
    "trick",
    "mechanics",
    "round_state",
    "scoring",
    "game",
    "rules_schema",
    "service",
]
