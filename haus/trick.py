"""Trick representation and resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .cards import Card, Suit
from .ranking import beats
from .seats import Team, team_of


class TrickError(RuntimeError):
    """Raised when trick play breaks ordering constraints."""


@dataclass
class Trick:
    leader: int
    size: int = 4
    plays: List[Tuple[int, Card]] = field(default_factory=list)
    winner: Optional[int] = None

    def is_empty(self) -> bool:
        return not self.plays

    def add_play(self, seat: int, card: Card) -> None:
        if self.is_full():
            raise TrickError("Trick already complete.")
        if not self.plays and seat != self.leader:
            raise TrickError("Only the leader can start the trick.")
        if any(played_by == seat for played_by, _ in self.plays):
            raise TrickError(f"Seat {seat} has already played to this trick.")
        self.plays.append((seat, card))

    def led_suit(self) -> Optional[Suit]:
        return self.plays[0][1].suit if self.plays else None

    def is_full(self) -> bool:
        return len(self.plays) >= self.size

    def winning_play(self, trump: Optional[Suit]) -> Tuple[int, Card]:
        """Return the winning (seat, card); on equal power the earlier play wins."""
        if not self.plays:
            raise TrickError("Cannot determine winner on empty trick.")
        led = self.led_suit()
        assert led is not None
        winning_seat, winning_card = self.plays[0]
        for seat, card in self.plays[1:]:
            if beats(card, winning_card, trump, led):
                winning_seat, winning_card = seat, card
        return winning_seat, winning_card

    def resolve(self, trump: Optional[Suit]) -> int:
        if not self.is_full():
            raise TrickError("Cannot resolve an unfinished trick.")
        self.winner, _ = self.winning_play(trump)
        return self.winner

    @property
    def winner_team(self) -> Optional[Team]:
        return team_of(self.winner) if self.winner is not None else None

    def cards(self) -> List[Card]:
        return [card for _, card in self.plays]
