"""Convenience service layer for transports, UIs and agents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence, Union

from .bidding import Bid
from .cards import Card, Suit, card_label, deserialize_card, serialize_card
from .commands import AdvanceRound, Command, PlaceBid, PlayCard, SelectTrump, SubmitExchange, apply_command
from .errors import IllegalBid, IllegalCard
from .events import Event
from .game import GameState, RoundPhase
from .ranking import trump_info
from .rules_schema import HausRules
from .seats import SEATS, validate_seat
from .trick import Trick


@dataclass
class TrickPlayView:
    seat: int
    card: dict
    label: str


@dataclass
class TrickView:
    leader: int
    led_suit: Optional[str]
    plays: list[TrickPlayView]
    winner: Optional[int] = None
    winner_team: Optional[int] = None


@dataclass
class GameView:
    phase: str
    round_number: int
    dealer: Optional[int]
    current_seat: Optional[int]
    scores: list[int]
    hand_sizes: list[int]
    hand: list[dict]
    hand_labels: list[str]
    legal_bids: list[str]
    legal_moves: list[dict]
    auction_history: list[dict]
    contract: Optional[dict]
    trump: Optional[str]
    right_bar: Optional[str]
    left_bar: Optional[str]
    trump_color: Optional[str]
    trump_description: Optional[str]
    exchange: Optional[dict]
    sitting_out: Optional[int]
    trick: Optional[TrickView]
    trick_history: list[TrickView]
    tricks_won: list[int]
    round_result: Optional[dict]
    winning_team: Optional[int]
    events: list[dict] = field(default_factory=list)


def parse_suit(value: Union[Suit, str]) -> Suit:
    if isinstance(value, Suit):
        return value
    try:
        return Suit[str(value).strip().upper()]
    except KeyError as exc:
        raise IllegalBid(f"Unknown suit {value!r}.") from exc


def parse_card(payload: Union[Card, Mapping[str, Any]]) -> Card:
    if isinstance(payload, Card):
        return payload
    try:
        return deserialize_card(payload)
    except (KeyError, ValueError, TypeError) as exc:
        raise IllegalCard(f"Malformed card {payload!r}.") from exc


def describe_event(event: Event) -> dict:
    payload: dict[str, Any] = {"type": type(event).__name__}
    for name, value in vars(event).items():
        payload[name] = _plain(value)
    return payload


def _plain(value: Any) -> Any:
    if isinstance(value, Suit):
        return str(value)
    if isinstance(value, Bid):
        return value.wire
    if isinstance(value, Card):
        return serialize_card(value)
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if hasattr(value, "__dataclass_fields__"):
        return {name: _plain(getattr(value, name)) for name in value.__dataclass_fields__}
    if hasattr(value, "value") and hasattr(value, "name"):
        return value.value
    return value


class GameService:
    """Facade around GameState for transport and UI consumers."""

    def __init__(self, state: Optional[GameState] = None) -> None:
        self.state = state or GameState.new()
        self.last_events: List[Event] = []

    @classmethod
    def new_game(cls, *, seed: Optional[int] = None, rules: Optional[HausRules] = None) -> "GameService":
        return cls(GameState.new(seed=seed, rules=rules))

    # Actions -----------------------------------------------------------

    def place_bid(self, seat: int, bid: Union[Bid, int, str]) -> GameView:
        return self._run(PlaceBid(seat=seat, bid=Bid.parse(bid)), seat)

    def select_trump(self, seat: int, suit: Union[Suit, str]) -> GameView:
        return self._run(SelectTrump(seat=seat, suit=parse_suit(suit)), seat)

    def submit_exchange(self, seat: int, cards: Sequence[Union[Card, Mapping[str, Any]]]) -> GameView:
        parsed = tuple(parse_card(card) for card in cards)
        return self._run(SubmitExchange(seat=seat, cards=parsed), seat)

    def play_card(self, seat: int, card: Union[Card, Mapping[str, Any]]) -> GameView:
        return self._run(PlayCard(seat=seat, card=parse_card(card)), seat)

    def advance_round(self) -> GameView:
        return self._run(AdvanceRound(), None)

    # Views -------------------------------------------------------------

    def get_game_view(self, perspective: Optional[int] = None) -> GameView:
        """Snapshot of the game; only ``perspective``'s own hand is revealed."""
        if perspective is not None:
            validate_seat(perspective)
        game = self.state
        current = game.current_round

        hand: list[Card] = []
        legal_bids: list[Bid] = []
        legal_moves: list[Card] = []
        auction_history: list[dict] = []
        contract_view = None
        exchange_view = None
        trick_view = None
        trick_history: list[TrickView] = []
        tricks_won = [0, 0]
        round_result = None
        hand_sizes = [0, 0, 0, 0]
        trump = right_bar = left_bar = trump_color = trump_description = None
        current_seat = None
        sitting_out = None

        if current is not None:
            hand_sizes = [len(current.hands[seat]) for seat in SEATS]
            if perspective is not None:
                hand = list(current.hands[perspective])
            if not game.is_over:
                current_seat = current.current_seat

            auction = current.auction
            if auction is not None:
                auction_history = [
                    {
                        "seat": record.seat,
                        "bid": record.bid.wire,
                        "label": record.bid.label,
                        "announcement": record.bid.announcement,
                        "implicit": record.implicit,
                    }
                    for record in auction.history
                ]
                if perspective is not None and perspective == auction.current_seat:
                    legal_bids = auction.legal_bids_for(perspective)

            contract = current.contract
            if contract is not None:
                contract_view = {
                    "bid": contract.bid.wire,
                    "label": contract.bid.label,
                    "kind": contract.kind.name.lower(),
                    "winning_seat": contract.winning_seat,
                    "bidding_team": contract.bidding_team.value,
                    "forced": contract.forced,
                }

            if current.trump is not None:
                info = trump_info(current.trump)
                trump = str(info.trump)
                right_bar = str(info.right_bar_suit)
                left_bar = str(info.left_bar_suit)
                trump_color = info.color_description()
                trump_description = info.describe()

            exchange = current.exchange
            if exchange is not None:
                exchange_view = {
                    "participants": list(exchange.participants),
                    "ready": {str(seat): exchange.is_ready(seat) for seat in exchange.participants},
                }

            play = current.play
            if play is not None:
                sitting_out = play.sitting_out
                tricks_won = play.tricks_won()
                trick_history = [self._trick_view(trick) for trick in play.tricks]
                if not play.current_trick.is_empty():
                    trick_view = self._trick_view(play.current_trick)
                if (
                    current.phase is RoundPhase.TRICK_PLAYING
                    and not game.is_over
                    and perspective is not None
                    and perspective == play.current_player
                ):
                    legal_moves = play.available_moves(perspective)

            result = current.result
            if result is not None:
                round_result = {
                    "points": list(result.points),
                    "tricks_won": list(result.tricks_won),
                    "contract_made": result.contract_made,
                    "round_winner": result.round_winner.value,
                }

        return GameView(
            phase=game.phase.value,
            round_number=game.round_number,
            dealer=game.dealer,
            current_seat=current_seat,
            scores=list(game.scores),
            hand_sizes=hand_sizes,
            hand=[serialize_card(card) for card in hand],
            hand_labels=[card_label(card) for card in hand],
            legal_bids=[bid.wire for bid in legal_bids],
            legal_moves=[serialize_card(card) for card in legal_moves],
            auction_history=auction_history,
            contract=contract_view,
            trump=trump,
            right_bar=right_bar,
            left_bar=left_bar,
            trump_color=trump_color,
            trump_description=trump_description,
            exchange=exchange_view,
            sitting_out=sitting_out,
            trick=trick_view,
            trick_history=trick_history,
            tricks_won=tricks_won,
            round_result=round_result,
            winning_team=game.winning_team.value if game.winning_team is not None else None,
            events=[describe_event(event) for event in self.last_events],
        )

    # Helpers -----------------------------------------------------------

    def _run(self, command: Command, perspective: Optional[int]) -> GameView:
        result = apply_command(self.state, command)
        self.last_events = result.events
        return self.get_game_view(perspective)

    @staticmethod
    def _trick_view(trick: Trick) -> TrickView:
        led = trick.led_suit()
        return TrickView(
            leader=trick.leader,
            led_suit=str(led) if led is not None else None,
            plays=[TrickPlayView(seat=seat, card=serialize_card(card), label=card_label(card)) for seat, card in trick.plays],
            winner=trick.winner,
            winner_team=trick.winner_team.value if trick.winner_team is not None else None,
        )
