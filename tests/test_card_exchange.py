import pytest

from haus.cards import Card, Rank, Suit
from haus.errors import DuplicateSubmission, IllegalCard, InvalidExchangeSize, NotYourTurn
from haus.exchange import CardExchange


def suit_hand(suit, copy=0):
    return [Card(suit, rank, copy) for rank in (Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK)]


def make_hands():
    return [
        suit_hand(Suit.SPADES),
        suit_hand(Suit.HEARTS),
        suit_hand(Suit.CLUBS),
        suit_hand(Suit.DIAMONDS),
    ]


def test_exchange_swaps_and_partner_sits_out():
    hands = make_hands()
    exchange = CardExchange(winner_seat=1)
    assert exchange.participants == (1, 3)

    give = [Card(Suit.HEARTS, Rank.JACK), Card(Suit.HEARTS, Rank.QUEEN)]
    take = [Card(Suit.DIAMONDS, Rank.ACE), Card(Suit.DIAMONDS, Rank.KING)]
    exchange.submit(1, give, hands[1])
    assert exchange.is_ready(1)
    assert not exchange.both_ready()
    exchange.submit(3, take, hands[3])

    sitting_out = exchange.apply(hands)
    assert sitting_out == 3
    assert exchange.completed
    assert [str(card) for card in hands[1]] == ["AH#0", "KH#0", "AD#0", "KD#0"]
    assert set(hands[3]) == {Card(Suit.DIAMONDS, Rank.QUEEN), Card(Suit.DIAMONDS, Rank.JACK)} | set(give)
    assert all(len(hand) == 4 for hand in hands)


def test_exchange_validation_errors():
    hands = make_hands()
    exchange = CardExchange(winner_seat=0)
    with pytest.raises(NotYourTurn):
        exchange.submit(1, hands[1][:2], hands[1])
    with pytest.raises(InvalidExchangeSize):
        exchange.submit(0, hands[0][:3], hands[0])
    with pytest.raises(InvalidExchangeSize):
        exchange.submit(0, hands[0][:1], hands[0])
    with pytest.raises(IllegalCard):
        exchange.submit(0, [hands[0][0], hands[0][0]], hands[0])
    with pytest.raises(IllegalCard):
        exchange.submit(0, [hands[0][0], Card(Suit.SPADES, Rank.ACE, 1)], hands[0])
    assert exchange.submissions == {}

    exchange.submit(0, hands[0][:2], hands[0])
    with pytest.raises(DuplicateSubmission):
        exchange.submit(0, hands[0][2:], hands[0])


def test_exchange_requires_both_submissions():
    hands = make_hands()
    exchange = CardExchange(winner_seat=2)
    exchange.submit(0, hands[0][:2], hands[0])
    with pytest.raises(RuntimeError):
        exchange.apply(hands)
    exchange.submit(2, hands[2][:2], hands[2])
    assert exchange.apply(hands) == 0
    with pytest.raises(DuplicateSubmission):
        exchange.submit(2, hands[2][:2], hands[2])
