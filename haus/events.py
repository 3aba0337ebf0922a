"""Outward signals produced by accepted commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from .bidding import Contract
from .cards import Suit
from .scoring import RoundScore
from .seats import Team


@dataclass(frozen=True)
class PhaseChanged:
    phase: str


@dataclass(frozen=True)
class RoundStarted:
    round_number: int
    dealer: int


@dataclass(frozen=True)
class ContractEstablished:
    contract: Contract


@dataclass(frozen=True)
class TrumpSelected:
    seat: int
    trump: Suit


@dataclass(frozen=True)
class ExchangeCompleted:
    winner_seat: int
    sitting_out: int


@dataclass(frozen=True)
class TrickCompleted:
    trick_number: int
    winner_seat: int
    winner_team: Team


@dataclass(frozen=True)
class RoundReadyToScore:
    tricks_won: Tuple[int, int]


@dataclass(frozen=True)
class RoundScored:
    result: RoundScore
    scores: Tuple[int, int]


@dataclass(frozen=True)
class GameOver:
    winning_team: Team
    scores: Tuple[int, int]


Event = Union[
    PhaseChanged,
    RoundStarted,
    ContractEstablished,
    TrumpSelected,
    ExchangeCompleted,
    TrickCompleted,
    RoundReadyToScore,
    RoundScored,
    GameOver,
]
