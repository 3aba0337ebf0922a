"""Common bot strategy interfaces."""

from __future__ import annotations

from typing import Sequence

from haus.bidding import Bid
from haus.cards import Card, Suit
from haus.game import RoundEngine


class BotStrategy:
    """Base class for bot policies.

    Every hook receives the live round and the seat the bot is playing; the
    defaults pick the most conservative legal option.
    """

    name: str = "BaseBot"

    def choose_bid(self, round_: RoundEngine, seat: int) -> Bid:
        return Bid.PASS

    def choose_trump(self, round_: RoundEngine, seat: int) -> Suit:
        return round_.hands[seat][0].suit

    def choose_exchange(self, round_: RoundEngine, seat: int) -> Sequence[Card]:
        """Return exactly two cards from the seat's hand."""
        return list(round_.hands[seat][-2:])

    def play_card(self, round_: RoundEngine, seat: int) -> Card:
        play = round_.play
        assert play is not None
        legal = play.available_moves(seat)
        if not legal:
            raise RuntimeError("No legal plays available for bot.")
        return legal[0]
