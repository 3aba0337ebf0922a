"""Deck creation and dealing for Haus."""

from __future__ import annotations

from random import Random
from typing import List, Optional, Sequence

from .cards import COPIES_PER_CARD, Card, Rank, Suit, sort_hand
from .seats import NUM_SEATS, next_seat

DECK_SIZE = 32
HAND_SIZE = 8


def build_deck() -> List[Card]:
    """Return the ordered 32-card double deck."""
    return [
        Card(suit, rank, copy)
        for copy in range(COPIES_PER_CARD)
        for suit in Suit
        for rank in Rank
    ]


def deal_four_player(
    dealer: int,
    *,
    rng: Optional[Random] = None,
    deck: Optional[Sequence[Card]] = None,
) -> List[List[Card]]:
    """Deal eight cards to every seat, one at a time, starting left of the dealer.

    When ``deck`` is given it is dealt in order without shuffling. Hands are
    returned sorted for display.
    """
    if deck is not None:
        cards = list(deck)
    else:
        cards = build_deck()
        if rng is None:
            rng = Random()
        rng.shuffle(cards)
    if len(cards) != DECK_SIZE or len(set(cards)) != DECK_SIZE:
        raise ValueError("Deck must contain the 32 distinct cards of the double deck.")

    hands: List[List[Card]] = [[] for _ in range(NUM_SEATS)]
    seat = next_seat(dealer)
    for card in cards:
        hands[seat].append(card)
        seat = next_seat(seat)

    return [sort_hand(hand) for hand in hands]
