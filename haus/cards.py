"""Card-related data structures and helpers for Haus."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, List, Mapping


class Suit(Enum):
    HEARTS = auto()
    DIAMONDS = auto()
    CLUBS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        return self.name.lower()


class Rank(Enum):
    JACK = auto()
    QUEEN = auto()
    KING = auto()
    ACE = auto()

    def __str__(self) -> str:
        return self.name.lower()


# Two physical copies of every suit/rank pair.
COPIES_PER_CARD = 2

# Rank value within a suit, used by the power bands.
RANK_VALUE: dict[Rank, int] = {
    Rank.JACK: 1,
    Rank.QUEEN: 2,
    Rank.KING: 3,
    Rank.ACE: 4,
}

# Same-color partner suit; the Jack of the partner suit is the Left Bar.
COLOR_PARTNER: dict[Suit, Suit] = {
    Suit.HEARTS: Suit.DIAMONDS,
    Suit.DIAMONDS: Suit.HEARTS,
    Suit.CLUBS: Suit.SPADES,
    Suit.SPADES: Suit.CLUBS,
}

RED_SUITS = frozenset({Suit.HEARTS, Suit.DIAMONDS})

# Display order for a sorted hand.
SUIT_ORDER: dict[Suit, int] = {
    Suit.SPADES: 0,
    Suit.CLUBS: 1,
    Suit.HEARTS: 2,
    Suit.DIAMONDS: 3,
}

RANK_SHORT: dict[Rank, str] = {
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}


@dataclass(frozen=True)
class Card:
    """Immutable representation of one physical card of the double deck.

    ``copy`` distinguishes the two otherwise identical cards. It is part of
    the identity (ownership, removal) but never of the ranking power.
    """

    suit: Suit
    rank: Rank
    copy: int = 0

    def __post_init__(self) -> None:
        if self.copy not in range(COPIES_PER_CARD):
            raise ValueError(f"Card copy index must be 0 or 1, got {self.copy}.")

    def __str__(self) -> str:
        return f"{RANK_SHORT[self.rank]}{self.suit.name[0]}#{self.copy}"


def color_partner(suit: Suit) -> Suit:
    return COLOR_PARTNER[suit]


def hand_sort_key(card: Card) -> tuple[int, int, int]:
    return SUIT_ORDER[card.suit], -RANK_VALUE[card.rank], card.copy


def sort_hand(cards: Iterable[Card]) -> List[Card]:
    """Return the cards in display order: spades, clubs, hearts, diamonds; A to J."""
    return sorted(cards, key=hand_sort_key)


def serialize_card(card: Card) -> dict[str, object]:
    return {"suit": card.suit.name.lower(), "rank": card.rank.name.lower(), "copy": card.copy}


def deserialize_card(payload: Mapping[str, object]) -> Card:
    suit_name = str(payload["suit"]).upper()
    rank_name = str(payload["rank"]).upper()
    copy = int(payload.get("copy", 0))  # type: ignore[arg-type]
    return Card(Suit[suit_name], Rank[rank_name], copy)


def card_label(card: Card) -> str:
    return f"{card.rank.name.title()} of {card.suit.name.title()}"
