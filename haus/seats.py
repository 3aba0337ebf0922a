"""Seat and team helpers.

Seats 0..3 sit clockwise. Partners sit across from each other, so seats 0/2
form team 1 and seats 1/3 form team 2.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, List, Optional

from .errors import UnknownSeat

NUM_SEATS = 4
SEATS = tuple(range(NUM_SEATS))


class Team(IntEnum):
    ONE = 1
    TWO = 2

    @property
    def index(self) -> int:
        """Position of the team in a ``[team1, team2]`` score list."""
        return self.value - 1

    def opponent(self) -> "Team":
        return Team.TWO if self is Team.ONE else Team.ONE


def validate_seat(seat: object) -> int:
    if isinstance(seat, bool) or not isinstance(seat, int) or seat not in SEATS:
        raise UnknownSeat(f"Seat must be one of {list(SEATS)}, got {seat!r}.")
    return seat


def team_of(seat: int) -> Team:
    return Team.ONE if seat % 2 == 0 else Team.TWO


def partner_of(seat: int) -> int:
    return (seat + 2) % NUM_SEATS


def next_seat(seat: int) -> int:
    """Seat to the left (clockwise)."""
    return (seat + 1) % NUM_SEATS


def active_seats(sitting_out: Optional[int]) -> List[int]:
    return [seat for seat in SEATS if seat != sitting_out]


def next_active_seat(seat: int, sitting_out: Optional[int]) -> int:
    candidate = next_seat(seat)
    if candidate == sitting_out:
        candidate = next_seat(candidate)
    return candidate


def count_by_team(winners: Iterable[int]) -> List[int]:
    """Return ``[team1, team2]`` counts for an iterable of winning seats."""
    counts = [0, 0]
    for seat in winners:
        counts[team_of(seat).index] += 1
    return counts
