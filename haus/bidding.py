"""Bidding rules, contract resolution and the four-seat auction."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import List, Optional, Union

from .errors import IllegalBid, InvalidPhase, NotYourTurn
from .seats import NUM_SEATS, Team, next_seat, partner_of, team_of, validate_seat


class Bid(IntEnum):
    """Bids in ascending order; the integer value is the bid hierarchy."""

    PASS = 0
    FOUR = 1
    FIVE = 2
    SIX = 3
    SEVEN = 4
    ACE_HAUS = 5
    HAUS = 6
    DOUBLE_HAUS = 7

    @property
    def is_pass(self) -> bool:
        return self is Bid.PASS

    @property
    def tricks(self) -> Optional[int]:
        """Trick target of a numeric bid, None otherwise."""
        return _NUMERIC_TRICKS.get(self)

    @property
    def wire(self) -> str:
        return _WIRE_LABELS[self]

    @property
    def label(self) -> str:
        return _DISPLAY_TEXT[self]

    @property
    def announcement(self) -> str:
        if self is Bid.PASS:
            return "I'm passing"
        return f"I went {self.label}"

    @classmethod
    def numeric(cls, tricks: int) -> "Bid":
        for bid, target in _NUMERIC_TRICKS.items():
            if target == tricks:
                return bid
        raise IllegalBid(f"No numeric bid for {tricks} tricks.")

    @classmethod
    def parse(cls, value: Union["Bid", int, str]) -> "Bid":
        """Accept a Bid, a trick count 4..7, or a wire label such as ``"ace-haus"``."""
        if isinstance(value, Bid):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.numeric(value)
        if isinstance(value, str):
            for bid, wire in _WIRE_LABELS.items():
                if wire == value.strip().lower():
                    return bid
        raise IllegalBid(f"Unknown bid {value!r}.")


_NUMERIC_TRICKS = {Bid.FOUR: 4, Bid.FIVE: 5, Bid.SIX: 6, Bid.SEVEN: 7}

_WIRE_LABELS = {
    Bid.PASS: "pass",
    Bid.FOUR: "4",
    Bid.FIVE: "5",
    Bid.SIX: "6",
    Bid.SEVEN: "7",
    Bid.ACE_HAUS: "ace-haus",
    Bid.HAUS: "haus",
    Bid.DOUBLE_HAUS: "double-haus",
}

_DISPLAY_TEXT = {
    Bid.PASS: "Pass",
    Bid.FOUR: "4",
    Bid.FIVE: "5",
    Bid.SIX: "6",
    Bid.SEVEN: "7",
    Bid.ACE_HAUS: "Aces",
    Bid.HAUS: "Haus",
    Bid.DOUBLE_HAUS: "D-Haus",
}

BASE_BIDS = (Bid.PASS, Bid.FOUR, Bid.FIVE, Bid.SIX, Bid.SEVEN, Bid.ACE_HAUS, Bid.HAUS)


def legal_bids(current_highest: Optional[Bid], is_dealer: bool, haus_already_bid: bool) -> List[Bid]:
    """Return the legal bids in ascending order.

    Pass is always legal. Double Haus is open only to the dealer, and only
    once Haus has been bid.
    """
    candidates = list(BASE_BIDS)
    if is_dealer and haus_already_bid:
        candidates.append(Bid.DOUBLE_HAUS)
    if current_highest is None or current_highest.is_pass:
        return candidates
    return [bid for bid in candidates if bid.is_pass or bid > current_highest]


class ContractKind(Enum):
    NUMBER = auto()
    ACE_HAUS = auto()
    HAUS = auto()
    DOUBLE_HAUS = auto()


_KIND_BY_BID = {
    Bid.ACE_HAUS: ContractKind.ACE_HAUS,
    Bid.HAUS: ContractKind.HAUS,
    Bid.DOUBLE_HAUS: ContractKind.DOUBLE_HAUS,
}

SPECIAL_KINDS = frozenset({ContractKind.ACE_HAUS, ContractKind.HAUS, ContractKind.DOUBLE_HAUS})


@dataclass(frozen=True)
class Contract:
    """The outcome of bidding; fixed for the rest of the round."""

    bid: Bid
    winning_seat: int
    forced: bool = False

    def __post_init__(self) -> None:
        if self.bid.is_pass:
            raise ValueError("A contract cannot be a pass.")

    @property
    def kind(self) -> ContractKind:
        return _KIND_BY_BID.get(self.bid, ContractKind.NUMBER)

    @property
    def number(self) -> Optional[int]:
        return self.bid.tricks

    @property
    def bidding_team(self) -> Team:
        return team_of(self.winning_seat)

    @property
    def partner_seat(self) -> int:
        return partner_of(self.winning_seat)

    @property
    def is_special(self) -> bool:
        return self.kind in SPECIAL_KINDS

    @property
    def requires_trump(self) -> bool:
        return self.kind is not ContractKind.ACE_HAUS

    @property
    def requires_exchange(self) -> bool:
        return self.is_special


class AuctionPhase(Enum):
    ACTIVE = auto()
    COMPLETE = auto()


@dataclass(frozen=True)
class BidRecord:
    seat: int
    bid: Bid
    implicit: bool = False


@dataclass
class Auction:
    """Four-seat, single-lap auction starting left of the dealer."""

    dealer: int
    implicit_passes: bool = True
    stuck_dealer_bid: Bid = Bid.FOUR
    phase: AuctionPhase = AuctionPhase.ACTIVE
    current_seat: Optional[int] = field(init=False)
    history: List[BidRecord] = field(default_factory=list)
    contract: Optional[Contract] = None

    def __post_init__(self) -> None:
        if self.stuck_dealer_bid.tricks is None:
            raise ValueError("The stuck dealer bid must be numeric.")
        self.current_seat = next_seat(self.dealer)

    @property
    def highest_bid(self) -> Optional[Bid]:
        record = self._highest_record()
        return record.bid if record else None

    @property
    def haus_bid(self) -> bool:
        return any(record.bid in (Bid.HAUS, Bid.DOUBLE_HAUS) for record in self.history)

    def legal_bids_for(self, seat: int) -> List[Bid]:
        return legal_bids(self.highest_bid, seat == self.dealer, self.haus_bid)

    def place(self, seat: int, bid: Bid) -> None:
        validate_seat(seat)
        self._ensure_active(seat)
        if bid not in self.legal_bids_for(seat):
            raise IllegalBid(f"{bid.label} is not a legal bid for seat {seat}.")

        self.history.append(BidRecord(seat, bid))
        self._advance()

    def is_complete(self) -> bool:
        return self.phase is AuctionPhase.COMPLETE

    def result(self) -> Contract:
        if self.contract is None:
            raise InvalidPhase("Auction not yet complete.")
        return self.contract

    def _advance(self) -> None:
        assert self.current_seat is not None
        seat = self.current_seat
        while True:
            if len(self.history) >= NUM_SEATS:
                self._finish()
                return
            seat = next_seat(seat)
            if self.implicit_passes and self.legal_bids_for(seat) == [Bid.PASS]:
                self.history.append(BidRecord(seat, Bid.PASS, implicit=True))
                continue
            self.current_seat = seat
            return

    def _finish(self) -> None:
        winner = self._highest_record()
        if winner is None:
            # Stuck dealer: everybody passed.
            self.contract = Contract(self.stuck_dealer_bid, self.dealer, forced=True)
        else:
            self.contract = Contract(winner.bid, winner.seat)
        self.phase = AuctionPhase.COMPLETE
        self.current_seat = None

    def _highest_record(self) -> Optional[BidRecord]:
        best: Optional[BidRecord] = None
        for record in self.history:
            if record.bid.is_pass:
                continue
            if best is None or record.bid > best.bid:
                best = record
        return best

    def _ensure_active(self, seat: int) -> None:
        if self.phase is AuctionPhase.COMPLETE:
            raise InvalidPhase("Auction already complete.")
        if seat != self.current_seat:
            raise NotYourTurn(f"Seat {self.current_seat} is to bid, not seat {seat}.")
