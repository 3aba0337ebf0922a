"""Transport-agnostic command surface.

A collaborator delivers commands for one game in a single ordered stream and
hands each one to :func:`apply_command` together with that game's state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Tuple, Type, Union

from .bidding import Bid
from .cards import Card, Suit
from .errors import HausError
from .events import Event
from .game import GameState

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlaceBid:
    seat: int
    bid: Bid


@dataclass(frozen=True)
class SelectTrump:
    seat: int
    suit: Suit


@dataclass(frozen=True)
class SubmitExchange:
    seat: int
    cards: Tuple[Card, ...]


@dataclass(frozen=True)
class PlayCard:
    seat: int
    card: Card


@dataclass(frozen=True)
class AdvanceRound:
    pass


Command = Union[PlaceBid, SelectTrump, SubmitExchange, PlayCard, AdvanceRound]


@dataclass
class CommandResult:
    state: GameState
    events: List[Event] = field(default_factory=list)


def _place_bid(state: GameState, command: PlaceBid) -> List[Event]:
    return state.place_bid(command.seat, command.bid)


def _select_trump(state: GameState, command: SelectTrump) -> List[Event]:
    return state.select_trump(command.seat, command.suit)


def _submit_exchange(state: GameState, command: SubmitExchange) -> List[Event]:
    return state.submit_exchange(command.seat, list(command.cards))


def _play_card(state: GameState, command: PlayCard) -> List[Event]:
    return state.play_card(command.seat, command.card)


def _advance_round(state: GameState, command: AdvanceRound) -> List[Event]:
    return state.advance_round()


HANDLERS: Dict[Type, Callable[[GameState, object], List[Event]]] = {
    PlaceBid: _place_bid,  # type: ignore[dict-item]
    SelectTrump: _select_trump,  # type: ignore[dict-item]
    SubmitExchange: _submit_exchange,  # type: ignore[dict-item]
    PlayCard: _play_card,  # type: ignore[dict-item]
    AdvanceRound: _advance_round,  # type: ignore[dict-item]
}


def apply_command(state: GameState, command: Command) -> CommandResult:
    """Apply ``command`` to ``state`` and return the updated state with its events.

    Raises a :class:`~haus.errors.HausError` if the command is rejected; the
    state is then left unchanged.
    """
    handler = HANDLERS.get(type(command))
    if handler is None:
        raise TypeError(f"Unsupported command {command!r}.")
    try:
        events = handler(state, command)
    except HausError as exc:
        log.debug("Rejected %s: %s (%s)", type(command).__name__, exc, exc.code)
        raise
    return CommandResult(state=state, events=events)
