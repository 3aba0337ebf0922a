"""Two-card swap between the bidding winner and partner on special contracts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from .cards import Card, sort_hand
from .errors import DuplicateSubmission, IllegalCard, InvalidExchangeSize, NotYourTurn
from .seats import partner_of, validate_seat

EXCHANGE_SIZE = 2


@dataclass
class CardExchange:
    """Buffer both submissions and swap them in one step once both are in.

    After the swap the partner sits out trick play for the rest of the round.
    """

    winner_seat: int
    submissions: Dict[int, Tuple[Card, ...]] = field(default_factory=dict)
    completed: bool = False

    @property
    def partner_seat(self) -> int:
        return partner_of(self.winner_seat)

    @property
    def participants(self) -> tuple[int, int]:
        return self.winner_seat, self.partner_seat

    def is_ready(self, seat: int) -> bool:
        return seat in self.submissions

    def both_ready(self) -> bool:
        return all(seat in self.submissions for seat in self.participants)

    def validate(self, seat: int, cards: Sequence[Card], hand: Sequence[Card]) -> Tuple[Card, ...]:
        """Check a submission without recording it."""
        validate_seat(seat)
        if self.completed:
            raise DuplicateSubmission("The exchange has already completed.")
        if seat not in self.participants:
            raise NotYourTurn(f"Seat {seat} does not take part in the exchange.")
        if seat in self.submissions:
            raise DuplicateSubmission(f"Seat {seat} has already submitted exchange cards.")
        chosen = tuple(cards)
        if len(chosen) != EXCHANGE_SIZE:
            raise InvalidExchangeSize(f"Exactly {EXCHANGE_SIZE} cards must be exchanged, got {len(chosen)}.")
        if len(set(chosen)) != len(chosen):
            raise IllegalCard("The same card cannot be submitted twice.")
        missing = [card for card in chosen if card not in hand]
        if missing:
            raise IllegalCard(f"Exchange cards must come from the hand: {', '.join(map(str, missing))}")
        return chosen

    def submit(self, seat: int, cards: Sequence[Card], hand: Sequence[Card]) -> None:
        self.submissions[seat] = self.validate(seat, cards, hand)

    def apply(self, hands: List[List[Card]]) -> int:
        """Swap the buffered cards in ``hands`` and return the sitting-out seat."""
        if not self.both_ready():
            raise RuntimeError("Both participants must submit before the swap.")
        winner, partner = self.participants
        to_partner = self.submissions[winner]
        to_winner = self.submissions[partner]

        winner_hand = [card for card in hands[winner] if card not in to_partner]
        partner_hand = [card for card in hands[partner] if card not in to_winner]
        hands[winner] = sort_hand(winner_hand + list(to_winner))
        hands[partner] = sort_hand(partner_hand + list(to_partner))

        self.completed = True
        return partner
