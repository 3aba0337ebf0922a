"""Validation schema for Haus rules configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RulesError(ValueError):
    """Raised when a rules file cannot be read."""


class HausRules(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    win_threshold: int = Field(64, gt=0, description="Cumulative score that ends the game.")
    stuck_dealer_bid: int = Field(4, description="Numeric bid forced on the dealer when all four seats pass.")
    haus_points: int = Field(16, gt=0, description="Points won or lost on a Haus contract.")
    double_haus_points: int = Field(32, gt=0, description="Points won or lost on a Double Haus contract.")
    ace_haus_points: int = Field(12, gt=0, description="Points won or lost on an Ace Haus contract.")
    implicit_passes: bool = Field(
        True,
        description="Record a pass automatically for a bidder whose only legal bid is Pass.",
    )
    first_dealer: int = Field(0, description="Dealer seat for the first round.")

    @field_validator("stuck_dealer_bid")
    @classmethod
    def validate_stuck_dealer_bid(cls, value: int) -> int:
        if value not in (4, 5, 6, 7):
            raise ValueError(f"Stuck dealer bid must be a numeric bid 4..7, got {value}.")
        return value

    @field_validator("first_dealer")
    @classmethod
    def validate_first_dealer(cls, value: int) -> int:
        if value not in range(4):
            raise ValueError(f"First dealer must be a seat 0..3, got {value}.")
        return value


DEFAULT_RULES = HausRules()


def load_rules(path: Optional[Union[str, Path]] = None) -> HausRules:
    """Return the default rules, or the rules stored as JSON at ``path``."""
    if path is None:
        return DEFAULT_RULES
    rules_path = Path(path)
    try:
        payload = json.loads(rules_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise RulesError(f"Cannot read rules from {rules_path}: {exc}") from exc
    return HausRules.model_validate(payload)
