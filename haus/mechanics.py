"""Legal move generation for Haus."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .cards import Card, Suit
from .ranking import is_trump_card


def follows(card: Card, led_suit: Suit, trump: Optional[Suit]) -> bool:
    """Return True if ``card`` counts as following ``led_suit``.

    When trump is led the Left Bar follows along with the trump-suit cards.
    """
    if trump is not None and led_suit is trump:
        return is_trump_card(card, trump)
    return card.suit is led_suit


def legal_moves(hand: Iterable[Card], led_suit: Optional[Suit], trump: Optional[Suit]) -> List[Card]:
    """Return the subset of ``hand`` that may be played, in hand order."""
    cards = list(hand)
    if led_suit is None:
        return cards

    following = [card for card in cards if follows(card, led_suit, trump)]
    return following if following else cards
