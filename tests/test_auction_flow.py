import pytest

from haus.bidding import BASE_BIDS, Auction, Bid, Contract, ContractKind, legal_bids
from haus.errors import IllegalBid, InvalidPhase, NotYourTurn, UnknownSeat


def test_opening_legal_bids():
    assert legal_bids(None, False, False) == list(BASE_BIDS)
    assert legal_bids(Bid.SIX, False, False) == [Bid.PASS, Bid.SEVEN, Bid.ACE_HAUS, Bid.HAUS]


def test_double_haus_only_for_dealer_after_haus():
    for highest in [None] + list(Bid):
        for is_dealer in (True, False):
            for haus_bid in (True, False):
                bids = legal_bids(highest, is_dealer, haus_bid)
                assert Bid.PASS in bids
                if Bid.DOUBLE_HAUS in bids:
                    assert is_dealer and haus_bid


def test_basic_auction_flow():
    auction = Auction(dealer=0)
    assert auction.current_seat == 1

    auction.place(1, Bid.FOUR)
    auction.place(2, Bid.FIVE)
    auction.place(3, Bid.PASS)
    assert not auction.is_complete()
    auction.place(0, Bid.SIX)

    assert auction.is_complete()
    contract = auction.result()
    assert contract == Contract(Bid.SIX, 0)
    assert contract.kind is ContractKind.NUMBER
    assert contract.number == 6
    assert auction.current_seat is None


def test_out_of_turn_and_illegal_bids_are_rejected():
    auction = Auction(dealer=0)
    with pytest.raises(NotYourTurn):
        auction.place(2, Bid.FOUR)
    with pytest.raises(UnknownSeat):
        auction.place(4, Bid.FOUR)
    auction.place(1, Bid.FIVE)
    with pytest.raises(IllegalBid):
        auction.place(2, Bid.FOUR)
    with pytest.raises(IllegalBid):
        auction.place(2, Bid.DOUBLE_HAUS)
    assert len(auction.history) == 1
    assert auction.current_seat == 2


def test_haus_leaves_only_pass_or_double_haus():
    auction = Auction(dealer=0)
    auction.place(1, Bid.HAUS)
    # Seats 2 and 3 can only pass, so their passes are recorded for them.
    assert [record.implicit for record in auction.history] == [False, True, True]
    assert auction.current_seat == 0
    assert auction.legal_bids_for(0) == [Bid.PASS, Bid.DOUBLE_HAUS]

    auction.place(0, Bid.DOUBLE_HAUS)
    contract = auction.result()
    assert contract.bid is Bid.DOUBLE_HAUS
    assert contract.winning_seat == 0
    assert contract.requires_exchange


def test_explicit_passes_when_implicit_passes_disabled():
    auction = Auction(dealer=0, implicit_passes=False)
    auction.place(1, Bid.HAUS)
    assert auction.current_seat == 2
    assert auction.legal_bids_for(2) == [Bid.PASS]
    auction.place(2, Bid.PASS)
    auction.place(3, Bid.PASS)
    auction.place(0, Bid.PASS)
    assert auction.result() == Contract(Bid.HAUS, 1)


def test_haus_overcalls_ace_haus():
    auction = Auction(dealer=3)
    auction.place(0, Bid.ACE_HAUS)
    auction.place(1, Bid.HAUS)
    assert auction.current_seat == 3
    auction.place(3, Bid.PASS)
    contract = auction.result()
    assert contract.winning_seat == 1
    assert contract.kind is ContractKind.HAUS


def test_stuck_dealer_takes_forced_four():
    auction = Auction(dealer=2)
    for seat in (3, 0, 1, 2):
        auction.place(seat, Bid.PASS)
    contract = auction.result()
    assert contract.bid is Bid.FOUR
    assert contract.winning_seat == 2
    assert contract.forced
    assert contract.requires_trump
    assert not contract.requires_exchange

    with pytest.raises(InvalidPhase):
        auction.place(3, Bid.PASS)


def test_incomplete_auction_has_no_result():
    auction = Auction(dealer=1)
    with pytest.raises(InvalidPhase):
        auction.result()


def test_bid_parsing_and_text():
    assert Bid.parse("ace-haus") is Bid.ACE_HAUS
    assert Bid.parse(" Double-Haus ") is Bid.DOUBLE_HAUS
    assert Bid.parse(5) is Bid.FIVE
    assert Bid.parse("pass") is Bid.PASS
    for bad in ("bogus", 8, 3, True):
        with pytest.raises(IllegalBid):
            Bid.parse(bad)
    assert Bid.HAUS.announcement == "I went Haus"
    assert Bid.PASS.announcement == "I'm passing"
    assert Bid.ACE_HAUS.label == "Aces"
