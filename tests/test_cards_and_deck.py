from collections import Counter
from random import Random

import pytest

from haus.cards import Card, Rank, Suit, card_label, deserialize_card, serialize_card, sort_hand
from haus.deck import DECK_SIZE, HAND_SIZE, build_deck, deal_four_player


def test_double_deck_has_two_copies_of_each_face():
    deck = build_deck()
    assert len(deck) == DECK_SIZE
    assert len(set(deck)) == DECK_SIZE
    faces = Counter((card.suit, card.rank) for card in deck)
    assert len(faces) == 16
    assert set(faces.values()) == {2}


def test_copies_are_distinct_cards_with_the_same_face():
    first = Card(Suit.SPADES, Rank.JACK, 0)
    second = Card(Suit.SPADES, Rank.JACK, 1)
    assert first != second
    assert (first.suit, first.rank) == (second.suit, second.rank)


def test_card_copy_index_is_validated():
    with pytest.raises(ValueError):
        Card(Suit.HEARTS, Rank.ACE, 2)


def test_seeded_deal_is_reproducible_and_complete():
    hands = deal_four_player(0, rng=Random(11))
    again = deal_four_player(0, rng=Random(11))
    assert hands == again
    assert [len(hand) for hand in hands] == [HAND_SIZE] * 4
    dealt = [card for hand in hands for card in hand]
    assert sorted(dealt, key=str) == sorted(build_deck(), key=str)


def test_explicit_deck_starts_left_of_dealer():
    deck = build_deck()
    hands = deal_four_player(2, deck=deck)
    assert deck[0] in hands[3]
    assert deck[1] in hands[0]
    assert deck[2] in hands[1]
    assert deck[3] in hands[2]


def test_deal_rejects_incomplete_deck():
    with pytest.raises(ValueError):
        deal_four_player(0, deck=build_deck()[:-1])


def test_sorted_hand_order():
    cards = [
        Card(Suit.DIAMONDS, Rank.ACE),
        Card(Suit.SPADES, Rank.JACK),
        Card(Suit.HEARTS, Rank.KING),
        Card(Suit.SPADES, Rank.ACE),
        Card(Suit.CLUBS, Rank.QUEEN),
    ]
    ordered = sort_hand(cards)
    assert [str(card) for card in ordered] == ["AS#0", "JS#0", "QC#0", "KH#0", "AD#0"]


def test_card_wire_format():
    card = Card(Suit.CLUBS, Rank.QUEEN, 1)
    payload = serialize_card(card)
    assert payload == {"suit": "clubs", "rank": "queen", "copy": 1}
    assert deserialize_card(payload) == card
    assert card_label(card) == "Queen of Clubs"
