"""Random baseline bot."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from haus.bidding import Bid
from haus.cards import Card, Suit
from haus.game import RoundEngine

from .base import BotStrategy


class RandomBot(BotStrategy):
    name = "Random"

    def __init__(self, seed: Optional[int] = None, bid_rate: float = 0.3) -> None:
        self._rng = random.Random(seed)
        self.bid_rate = bid_rate

    def choose_bid(self, round_: RoundEngine, seat: int) -> Bid:
        auction = round_.auction
        assert auction is not None
        raises = [bid for bid in auction.legal_bids_for(seat) if not bid.is_pass]
        if not raises or self._rng.random() >= self.bid_rate:
            return Bid.PASS
        return self._rng.choice(raises)

    def choose_trump(self, round_: RoundEngine, seat: int) -> Suit:
        return self._rng.choice(list(Suit))

    def choose_exchange(self, round_: RoundEngine, seat: int) -> Sequence[Card]:
        cards = list(round_.hands[seat])
        self._rng.shuffle(cards)
        return cards[:2]

    def play_card(self, round_: RoundEngine, seat: int) -> Card:
        play = round_.play
        assert play is not None
        legal = list(play.available_moves(seat))
        if not legal:
            raise RuntimeError("No legal plays available for bot.")
        return self._rng.choice(legal)
