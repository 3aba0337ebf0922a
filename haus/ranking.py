"""Card power under a trump suit, including the two bars.

The Right Bar (Jack of trump) and the Left Bar (Jack of the trump's
same-color suit) outrank every other card, the trump ace included. With no
trump (Ace Haus) only the led suit can win.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .cards import RANK_VALUE, Card, Rank, Suit, color_partner, RED_SUITS

RIGHT_BAR_POWER = 1000
LEFT_BAR_POWER = 900
TRUMP_BAND = 100
LED_BAND = 0


@dataclass(frozen=True)
class TrumpInfo:
    trump: Suit
    right_bar_suit: Suit
    left_bar_suit: Suit

    def color_description(self) -> str:
        if self.trump in RED_SUITS:
            return "Red (Hearts/Diamonds)"
        return "Black (Clubs/Spades)"

    def describe(self) -> str:
        return (
            f"Right Bar: Jack of {self.right_bar_suit.name.title()}\n"
            f"Left Bar: Jack of {self.left_bar_suit.name.title()}"
        )


def trump_info(trump: Suit) -> TrumpInfo:
    return TrumpInfo(trump=trump, right_bar_suit=trump, left_bar_suit=color_partner(trump))


def is_right_bar(card: Card, trump: Optional[Suit]) -> bool:
    return trump is not None and card.rank is Rank.JACK and card.suit is trump


def is_left_bar(card: Card, trump: Optional[Suit]) -> bool:
    return trump is not None and card.rank is Rank.JACK and card.suit is color_partner(trump)


def is_trump_card(card: Card, trump: Optional[Suit]) -> bool:
    """Trump-suit cards plus the Left Bar."""
    if trump is None:
        return False
    return card.suit is trump or is_left_bar(card, trump)


def card_power(card: Card, trump: Optional[Suit], led_suit: Optional[Suit]) -> int:
    """Return the comparative power of ``card``; higher wins, 0 cannot win.

    The copy index never influences the result, so both copies of a card
    always have equal power.
    """
    if trump is not None:
        if is_right_bar(card, trump):
            return RIGHT_BAR_POWER
        if is_left_bar(card, trump):
            return LEFT_BAR_POWER
        if card.suit is trump:
            return TRUMP_BAND + RANK_VALUE[card.rank]
    if led_suit is not None and card.suit is led_suit:
        return LED_BAND + RANK_VALUE[card.rank]
    return 0


def beats(candidate: Card, current: Card, trump: Optional[Suit], led_suit: Suit) -> bool:
    """Return True if ``candidate`` played after ``current`` takes the lead.

    Equal power never takes the lead: the earlier play wins ties.
    """
    return card_power(candidate, trump, led_suit) > card_power(current, trump, led_suit)
