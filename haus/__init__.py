"""Core rules engine package for Haus."""

__all__ = [
    "cards",
    "deck",
    "seats",
    "ranking",
    "bidding",
    "exchange",
    "trick",
    "mechanics",
    "state",
    "scoring",
    "events",
    "errors",
    "game",
    "commands",
    "rules_schema",
    "service",
]
