"""Trick-play state for one Haus round."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .cards import Card, Suit
from .deck import HAND_SIZE
from .errors import IllegalCard, InvalidPhase, NotYourTurn
from .mechanics import legal_moves
from .seats import active_seats, count_by_team, next_active_seat, validate_seat
from .trick import Trick, TrickError


@dataclass
class PlayState:
    """Sequence the tricks of a round among the active seats.

    ``hands`` is shared with the owner, not copied: cards leave it as they
    are played. The sitting-out seat keeps its hand and is skipped entirely.
    """

    hands: List[List[Card]]
    leader: int
    trump: Optional[Suit] = None
    sitting_out: Optional[int] = None
    total_tricks: int = HAND_SIZE
    current_player: int = field(init=False)
    current_trick: Trick = field(init=False)
    tricks: List[Trick] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.hands) != 4:
            raise ValueError("PlayState requires exactly four hands.")
        if self.leader == self.sitting_out:
            raise ValueError("The sitting-out seat cannot lead.")
        self.current_player = self.leader
        self.current_trick = self._new_trick(self.leader)

    @property
    def active_seats(self) -> List[int]:
        return active_seats(self.sitting_out)

    def led_suit(self) -> Optional[Suit]:
        return self.current_trick.led_suit()

    def available_moves(self, seat: int) -> List[Card]:
        validate_seat(seat)
        self._ensure_turn(seat)
        return legal_moves(self.hands[seat], self.led_suit(), self.trump)

    def play_card(self, seat: int, card: Card) -> Optional[Trick]:
        """Play ``card`` for ``seat``; return the trick if this play completed it."""
        validate_seat(seat)
        self._ensure_turn(seat)
        if card not in self.hands[seat]:
            raise IllegalCard(f"{card} is not in seat {seat}'s hand.")
        if card not in legal_moves(self.hands[seat], self.led_suit(), self.trump):
            raise IllegalCard(f"{card} does not follow the led suit.")

        try:
            self.current_trick.add_play(seat, card)
        except TrickError as exc:
            raise IllegalCard(str(exc)) from exc
        self.hands[seat].remove(card)

        if not self.current_trick.is_full():
            self.current_player = next_active_seat(seat, self.sitting_out)
            return None
        return self._complete_trick()

    def _complete_trick(self) -> Trick:
        trick = self.current_trick
        winner = trick.resolve(self.trump)
        self.tricks.append(trick)
        self.current_player = winner
        self.current_trick = self._new_trick(winner)
        return trick

    def _new_trick(self, leader: int) -> Trick:
        return Trick(leader=leader, size=len(self.active_seats))

    def _ensure_turn(self, seat: int) -> None:
        if self.is_finished():
            raise InvalidPhase("All tricks of the round have been played.")
        if seat == self.sitting_out:
            raise NotYourTurn(f"Seat {seat} is sitting out this round.")
        if seat != self.current_player:
            raise NotYourTurn(f"Seat {self.current_player} is to play, not seat {seat}.")

    def is_finished(self) -> bool:
        return len(self.tricks) >= self.total_tricks

    def tricks_won(self) -> List[int]:
        """Return ``[team1, team2]`` trick counts so far."""
        return count_by_team(trick.winner for trick in self.tricks if trick.winner is not None)

    def played_cards(self) -> List[Card]:
        cards = [card for trick in self.tricks for card in trick.cards()]
        cards.extend(self.current_trick.cards())
        return cards
