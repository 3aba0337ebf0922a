from haus.cards import Card, Rank, Suit
from haus.mechanics import legal_moves
from haus.trick import Trick


def hand(*specs):
    return [Card(suit, rank, copy) for suit, rank, copy in specs]


def test_leader_may_play_anything():
    cards = hand((Suit.HEARTS, Rank.ACE, 0), (Suit.SPADES, Rank.JACK, 0))
    assert legal_moves(cards, None, Suit.CLUBS) == cards


def test_must_follow_printed_suit():
    cards = hand((Suit.HEARTS, Rank.ACE, 0), (Suit.HEARTS, Rank.JACK, 1), (Suit.SPADES, Rank.KING, 0))
    assert legal_moves(cards, Suit.HEARTS, Suit.SPADES) == cards[:2]


def test_void_seat_may_play_anything():
    cards = hand((Suit.CLUBS, Rank.ACE, 0), (Suit.SPADES, Rank.KING, 0))
    assert legal_moves(cards, Suit.HEARTS, Suit.SPADES) == cards


def test_no_trump_follows_led_suit():
    cards = hand((Suit.DIAMONDS, Rank.QUEEN, 0), (Suit.HEARTS, Rank.JACK, 0))
    assert legal_moves(cards, Suit.DIAMONDS, None) == cards[:1]


def test_left_bar_follows_trump_lead():
    cards = hand((Suit.CLUBS, Rank.JACK, 0), (Suit.HEARTS, Rank.ACE, 0), (Suit.DIAMONDS, Rank.KING, 0))
    assert legal_moves(cards, Suit.SPADES, Suit.SPADES) == cards[:1]


def test_left_bar_ranks_second_in_trump_trick():
    trick = Trick(leader=0)
    trick.add_play(0, Card(Suit.SPADES, Rank.ACE, 0))
    trick.add_play(1, Card(Suit.CLUBS, Rank.JACK, 0))
    trick.add_play(2, Card(Suit.SPADES, Rank.KING, 0))
    trick.add_play(3, Card(Suit.SPADES, Rank.JACK, 0))
    assert trick.resolve(Suit.SPADES) == 3

    trick = Trick(leader=0)
    trick.add_play(0, Card(Suit.SPADES, Rank.ACE, 0))
    trick.add_play(1, Card(Suit.CLUBS, Rank.JACK, 0))
    trick.add_play(2, Card(Suit.SPADES, Rank.KING, 0))
    trick.add_play(3, Card(Suit.SPADES, Rank.QUEEN, 0))
    assert trick.resolve(Suit.SPADES) == 1


def test_holding_trump_does_not_force_trumping():
    cards = hand((Suit.SPADES, Rank.ACE, 0), (Suit.DIAMONDS, Rank.KING, 0))
    assert legal_moves(cards, Suit.HEARTS, Suit.SPADES) == cards


def test_left_bar_alone_must_be_played_to_a_trump_lead():
    cards = hand((Suit.HEARTS, Rank.QUEEN, 0), (Suit.DIAMONDS, Rank.JACK, 1), (Suit.CLUBS, Rank.ACE, 0))
    assert legal_moves(cards, Suit.HEARTS, Suit.HEARTS) == [Card(Suit.HEARTS, Rank.QUEEN, 0), Card(Suit.DIAMONDS, Rank.JACK, 1)]
    assert legal_moves(cards, Suit.DIAMONDS, Suit.HEARTS) == [Card(Suit.DIAMONDS, Rank.JACK, 1)]
