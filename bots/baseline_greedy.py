"""Baseline greedy bot."""

from __future__ import annotations

from typing import List, Optional, Sequence

from haus.bidding import Bid
from haus.cards import Card, Rank, Suit
from haus.game import RoundEngine
from haus.ranking import beats, card_power, is_left_bar, is_right_bar
from haus.seats import team_of

from .base import BotStrategy


def _strength(card: Card, trump: Optional[Suit]) -> int:
    """Power of ``card`` as if it were led, so off-suit cards keep their rank."""
    return card_power(card, trump, card.suit)


def estimate_tricks(hand: Sequence[Card], trump: Suit) -> float:
    """Rough count of tricks a hand should take with ``trump``."""
    estimate = 0.0
    for card in hand:
        if is_right_bar(card, trump) or is_left_bar(card, trump):
            estimate += 1.0
        elif card.suit is trump:
            estimate += 1.0 if card.rank is Rank.ACE else 0.5
        elif card.rank is Rank.ACE:
            estimate += 0.5
    return estimate


def best_trump(hand: Sequence[Card]) -> Suit:
    return max(Suit, key=lambda suit: estimate_tricks(hand, suit))


class GreedyBot(BotStrategy):
    name = "Greedy"

    def choose_bid(self, round_: RoundEngine, seat: int) -> Bid:
        auction = round_.auction
        assert auction is not None
        hand = round_.hands[seat]
        target = int(estimate_tricks(hand, best_trump(hand)))
        numeric = [bid for bid in auction.legal_bids_for(seat) if bid.tricks is not None and bid.tricks <= target]
        if not numeric:
            return Bid.PASS
        return max(numeric)

    def choose_trump(self, round_: RoundEngine, seat: int) -> Suit:
        return best_trump(round_.hands[seat])

    def choose_exchange(self, round_: RoundEngine, seat: int) -> Sequence[Card]:
        trump = round_.trump
        cards = sorted(round_.hands[seat], key=lambda card: _strength(card, trump))
        contract = round_.contract
        assert contract is not None
        # The bidder sheds its weakest cards; the partner hands over its best.
        if seat == contract.winning_seat:
            return cards[:2]
        return cards[-2:]

    def play_card(self, round_: RoundEngine, seat: int) -> Card:
        play = round_.play
        assert play is not None
        legal: List[Card] = list(play.available_moves(seat))
        trump = play.trump
        trick = play.current_trick

        if trick.is_empty():
            return max(legal, key=lambda card: _strength(card, trump))

        led = trick.led_suit()
        winning_seat, winning_card = trick.winning_play(trump)
        lowest = min(legal, key=lambda card: card_power(card, trump, led))
        if team_of(winning_seat) is team_of(seat):
            return lowest
        winners = [card for card in legal if beats(card, winning_card, trump, led)]
        if not winners:
            return lowest
        return min(winners, key=lambda card: card_power(card, trump, led))
