"""High-level round and game orchestration for Haus."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from random import Random
from typing import ClassVar, List, Optional, Sequence, Type, TypeVar, Union

from .bidding import Auction, Bid, BidRecord, Contract
from .cards import Card, Suit
from .deck import deal_four_player
from .errors import IllegalBid, InvalidPhase, NotYourTurn
from .events import (
    ContractEstablished,
    Event,
    ExchangeCompleted,
    GameOver,
    PhaseChanged,
    RoundReadyToScore,
    RoundScored,
    RoundStarted,
    TrickCompleted,
    TrumpSelected,
)
from .exchange import CardExchange
from .rules_schema import HausRules, load_rules
from .scoring import RoundScore, apply_round_score, game_winner, score_round
from .seats import Team, next_seat, validate_seat
from .state import PlayState
from .trick import Trick

log = logging.getLogger(__name__)


class RoundPhase(Enum):
    DEALING = "dealing"
    BIDDING = "bidding"
    TRUMP_SELECTION = "trump-selection"
    EXCHANGE = "card-exchange"
    TRICK_PLAYING = "trick-playing"
    SCORING = "scoring"
    GAME_OVER = "game-over"


@dataclass
class BiddingPhaseState:
    phase: ClassVar[RoundPhase] = RoundPhase.BIDDING

    auction: Auction


@dataclass
class TrumpPhaseState:
    phase: ClassVar[RoundPhase] = RoundPhase.TRUMP_SELECTION

    contract: Contract


@dataclass
class ExchangePhaseState:
    phase: ClassVar[RoundPhase] = RoundPhase.EXCHANGE

    contract: Contract
    trump: Optional[Suit]
    exchange: CardExchange


@dataclass
class TrickPhaseState:
    phase: ClassVar[RoundPhase] = RoundPhase.TRICK_PLAYING

    contract: Contract
    trump: Optional[Suit]
    play: PlayState


@dataclass
class ScoringPhaseState:
    phase: ClassVar[RoundPhase] = RoundPhase.SCORING

    contract: Contract
    trump: Optional[Suit]
    play: PlayState
    score: RoundScore


PhaseState = Union[
    BiddingPhaseState,
    TrumpPhaseState,
    ExchangePhaseState,
    TrickPhaseState,
    ScoringPhaseState,
]

_S = TypeVar("_S", BiddingPhaseState, TrumpPhaseState, ExchangePhaseState, TrickPhaseState, ScoringPhaseState)


@dataclass
class RoundEngine:
    """Manage a single Haus round from the deal to its score."""

    dealer: int
    rules: HausRules = field(default_factory=load_rules)
    rng: Optional[Random] = field(default=None, compare=False, repr=False)
    deck: Optional[Sequence[Card]] = field(default=None, compare=False, repr=False)

    hands: List[List[Card]] = field(init=False)
    phase_state: PhaseState = field(init=False)

    def __post_init__(self) -> None:
        validate_seat(self.dealer)
        self.hands = deal_four_player(self.dealer, rng=self.rng, deck=self.deck)
        self.deck = None
        auction = Auction(
            dealer=self.dealer,
            implicit_passes=self.rules.implicit_passes,
            stuck_dealer_bid=Bid.numeric(self.rules.stuck_dealer_bid),
        )
        self.phase_state = BiddingPhaseState(auction=auction)

    # Read access -------------------------------------------------------

    @property
    def phase(self) -> RoundPhase:
        return self.phase_state.phase

    @property
    def auction(self) -> Optional[Auction]:
        state = self.phase_state
        return state.auction if isinstance(state, BiddingPhaseState) else None

    @property
    def contract(self) -> Optional[Contract]:
        state = self.phase_state
        return None if isinstance(state, BiddingPhaseState) else state.contract

    @property
    def trump(self) -> Optional[Suit]:
        state = self.phase_state
        if isinstance(state, (ExchangePhaseState, TrickPhaseState, ScoringPhaseState)):
            return state.trump
        return None

    @property
    def exchange(self) -> Optional[CardExchange]:
        state = self.phase_state
        return state.exchange if isinstance(state, ExchangePhaseState) else None

    @property
    def play(self) -> Optional[PlayState]:
        state = self.phase_state
        if isinstance(state, (TrickPhaseState, ScoringPhaseState)):
            return state.play
        return None

    @property
    def sitting_out(self) -> Optional[int]:
        play = self.play
        return play.sitting_out if play is not None else None

    @property
    def result(self) -> Optional[RoundScore]:
        state = self.phase_state
        return state.score if isinstance(state, ScoringPhaseState) else None

    @property
    def current_seat(self) -> Optional[int]:
        """Seat expected to act next, or None when several (or none) may act."""
        state = self.phase_state
        if isinstance(state, BiddingPhaseState):
            return state.auction.current_seat
        if isinstance(state, TrumpPhaseState):
            return state.contract.winning_seat
        if isinstance(state, TrickPhaseState):
            return state.play.current_player
        return None

    @property
    def tricks(self) -> List[Trick]:
        play = self.play
        return list(play.tricks) if play is not None else []

    def all_cards(self) -> List[Card]:
        """Every card of the round: hands plus played cards."""
        cards = [card for hand in self.hands for card in hand]
        play = self.play
        if play is not None:
            cards.extend(play.played_cards())
        return cards

    # Commands ------------------------------------------------------------

    def place_bid(self, seat: int, bid: Bid) -> List[Event]:
        state = self._expect(BiddingPhaseState)
        auction = state.auction
        auction.place(seat, bid)
        if not auction.is_complete():
            return []

        contract = auction.result()
        events: List[Event] = [ContractEstablished(contract)]
        if contract.requires_trump:
            self.phase_state = TrumpPhaseState(contract=contract)
        else:
            self.phase_state = ExchangePhaseState(
                contract=contract,
                trump=None,
                exchange=CardExchange(winner_seat=contract.winning_seat),
            )
        events.append(PhaseChanged(self.phase.value))
        return events

    def select_trump(self, seat: int, suit: Suit) -> List[Event]:
        state = self._expect(TrumpPhaseState)
        validate_seat(seat)
        contract = state.contract
        if seat != contract.winning_seat:
            raise NotYourTurn(f"Only seat {contract.winning_seat} may select trump.")
        if not isinstance(suit, Suit):
            raise IllegalBid(f"Unknown trump suit {suit!r}.")

        events: List[Event] = [TrumpSelected(seat=seat, trump=suit)]
        if contract.requires_exchange:
            self.phase_state = ExchangePhaseState(
                contract=contract,
                trump=suit,
                exchange=CardExchange(winner_seat=contract.winning_seat),
            )
        else:
            self._start_play(contract, suit, sitting_out=None)
        events.append(PhaseChanged(self.phase.value))
        return events

    def submit_exchange(self, seat: int, cards: Sequence[Card]) -> List[Event]:
        state = self._expect(ExchangePhaseState)
        validate_seat(seat)
        exchange = state.exchange
        exchange.submit(seat, cards, self.hands[seat])
        if not exchange.both_ready():
            return []

        sitting_out = exchange.apply(self.hands)
        self._start_play(state.contract, state.trump, sitting_out=sitting_out)
        return [
            ExchangeCompleted(winner_seat=exchange.winner_seat, sitting_out=sitting_out),
            PhaseChanged(self.phase.value),
        ]

    def play_card(self, seat: int, card: Card) -> List[Event]:
        state = self._expect(TrickPhaseState)
        play = state.play
        trick = play.play_card(seat, card)
        if trick is None:
            return []

        assert trick.winner is not None
        events: List[Event] = [
            TrickCompleted(trick_number=len(play.tricks), winner_seat=trick.winner, winner_team=trick.winner_team)
        ]
        if play.is_finished():
            tricks_won = play.tricks_won()
            score = score_round(state.contract, tricks_won, self.rules)
            self.phase_state = ScoringPhaseState(
                contract=state.contract,
                trump=state.trump,
                play=play,
                score=score,
            )
            events.append(RoundReadyToScore(tricks_won=(tricks_won[0], tricks_won[1])))
            events.append(PhaseChanged(self.phase.value))
        return events

    # Helpers -------------------------------------------------------------

    def _start_play(self, contract: Contract, trump: Optional[Suit], *, sitting_out: Optional[int]) -> None:
        play = PlayState(
            hands=self.hands,
            leader=contract.winning_seat,
            trump=trump,
            sitting_out=sitting_out,
        )
        self.phase_state = TrickPhaseState(contract=contract, trump=trump, play=play)

    def _expect(self, expected: Type[_S]) -> _S:
        state = self.phase_state
        if not isinstance(state, expected):
            raise InvalidPhase(f"Action not allowed in phase {self.phase.value}. Expected {expected.phase.value}.")
        return state


@dataclass
class GameState:
    """Authoritative state of one game: cumulative scores and the current round."""

    rules: HausRules = field(default_factory=load_rules)
    seed: Optional[int] = None
    scores: List[int] = field(default_factory=lambda: [0, 0])
    dealer: Optional[int] = None
    round_number: int = 0
    current_round: Optional[RoundEngine] = None
    round_history: List[RoundScore] = field(default_factory=list)
    winning_team: Optional[Team] = None
    rng: Random = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        self.rng = Random(self.seed)
        if self.dealer is None:
            self.dealer = self.rules.first_dealer
        validate_seat(self.dealer)

    @classmethod
    def new(cls, *, seed: Optional[int] = None, rules: Optional[HausRules] = None) -> "GameState":
        """Create a game and deal its first round."""
        game = cls(rules=rules or load_rules(), seed=seed)
        game.start_round()
        return game

    @property
    def phase(self) -> RoundPhase:
        if self.winning_team is not None:
            return RoundPhase.GAME_OVER
        if self.current_round is None:
            return RoundPhase.DEALING
        return self.current_round.phase

    @property
    def is_over(self) -> bool:
        return self.winning_team is not None

    # Lifecycle -----------------------------------------------------------

    def start_round(self, deck: Optional[Sequence[Card]] = None) -> List[Event]:
        """Deal a round for the current dealer. Only valid before the first round."""
        if self.is_over:
            raise InvalidPhase("The game is over.")
        if self.current_round is not None:
            raise InvalidPhase("A round is already in progress.")
        return self._deal(deck)

    def advance_round(self, deck: Optional[Sequence[Card]] = None) -> List[Event]:
        """Rotate the dealer and deal the next round once the current one is scored."""
        if self.is_over:
            raise InvalidPhase("The game is over.")
        if self.current_round is None or self.current_round.phase is not RoundPhase.SCORING:
            raise InvalidPhase("The current round has not been scored yet.")
        assert self.dealer is not None
        self.dealer = next_seat(self.dealer)
        return self._deal(deck)

    # Commands ------------------------------------------------------------

    def place_bid(self, seat: int, bid: Bid) -> List[Event]:
        events = self._active_round().place_bid(seat, bid)
        log.debug("Seat %s bid %s", seat, bid.label)
        for event in events:
            if isinstance(event, ContractEstablished):
                contract = event.contract
                log.info(
                    "Contract %s for seat %s%s",
                    contract.bid.label,
                    contract.winning_seat,
                    " (stuck dealer)" if contract.forced else "",
                )
        return events

    def select_trump(self, seat: int, suit: Suit) -> List[Event]:
        events = self._active_round().select_trump(seat, suit)
        log.debug("Seat %s selected %s as trump", seat, suit)
        return events

    def submit_exchange(self, seat: int, cards: Sequence[Card]) -> List[Event]:
        events = self._active_round().submit_exchange(seat, cards)
        log.debug("Seat %s submitted exchange cards", seat)
        return events

    def play_card(self, seat: int, card: Card) -> List[Event]:
        current = self._active_round()
        events = current.play_card(seat, card)
        log.debug("Seat %s played %s", seat, card)
        if current.phase is RoundPhase.SCORING:
            events.extend(self._record_round(current))
        return events

    # Helpers -------------------------------------------------------------

    def _deal(self, deck: Optional[Sequence[Card]]) -> List[Event]:
        assert self.dealer is not None
        self.current_round = RoundEngine(dealer=self.dealer, rules=self.rules, rng=self.rng, deck=deck)
        self.round_number += 1
        log.debug("Round %s dealt by seat %s", self.round_number, self.dealer)
        return [
            RoundStarted(round_number=self.round_number, dealer=self.dealer),
            PhaseChanged(RoundPhase.BIDDING.value),
        ]

    def _record_round(self, finished: RoundEngine) -> List[Event]:
        result = finished.result
        assert result is not None
        new_scores = apply_round_score(self.scores, result)
        self.scores = list(new_scores)
        self.round_history.append(result)
        log.info(
            "Round %s scored %s, totals %s (contract %s %s)",
            self.round_number,
            list(result.points),
            self.scores,
            result.contract.bid.label,
            "made" if result.contract_made else "failed",
        )
        events: List[Event] = [RoundScored(result=result, scores=new_scores)]

        winner = game_winner(self.scores, self.rules)
        if winner is not None:
            self.winning_team = winner
            log.info("Team %s wins the game with %s", winner.value, self.scores)
            events.append(GameOver(winning_team=winner, scores=new_scores))
            events.append(PhaseChanged(RoundPhase.GAME_OVER.value))
        return events

    def _active_round(self) -> RoundEngine:
        if self.is_over:
            raise InvalidPhase("The game is over.")
        if self.current_round is None:
            raise InvalidPhase("No round has been dealt.")
        return self.current_round
