"""REST service exposing Haus games to remote seats."""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Union

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from haus.errors import DuplicateSubmission, HausError, InvalidPhase, NotYourTurn
from haus.rules_schema import HausRules
from haus.service import GameService, GameView

log = logging.getLogger(__name__)

CONFLICT_ERRORS = (InvalidPhase, NotYourTurn, DuplicateSubmission)


class CardPayload(BaseModel):
    suit: str
    rank: str
    copy_index: int = Field(0, alias="copy")

    def to_dict(self) -> Dict[str, Any]:
        return {"suit": self.suit, "rank": self.rank, "copy": self.copy_index}


class StartRequest(BaseModel):
    seed: Optional[int] = None
    rules: Optional[HausRules] = None


class BidRequest(BaseModel):
    seat: int
    bid: Union[int, str]


class TrumpRequest(BaseModel):
    seat: int
    suit: str


class ExchangeRequest(BaseModel):
    seat: int
    cards: List[CardPayload]


class PlayRequest(BaseModel):
    seat: int
    card: CardPayload


class GameSlot:
    """One hosted game plus the lock that serializes its commands."""

    def __init__(self, service: GameService) -> None:
        self.service = service
        self.lock = threading.Lock()


games: Dict[str, GameSlot] = {}


app = FastAPI(title="Haus Play Service")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def ensure_game(game_id: str) -> GameSlot:
    slot = games.get(game_id)
    if slot is None:
        raise HTTPException(status_code=404, detail={"code": "unknown_game", "detail": "Game not found"})
    return slot


def serialize_view(view: GameView) -> Dict[str, Any]:
    return asdict(view)


def rejection(exc: HausError) -> HTTPException:
    status = 409 if isinstance(exc, CONFLICT_ERRORS) else 400
    return HTTPException(status_code=status, detail={"code": exc.code, "detail": str(exc)})


def run_command(game_id: str, action, seat: Optional[int]) -> Dict[str, Any]:
    slot = ensure_game(game_id)
    with slot.lock:
        try:
            view = action(slot.service)
        except HausError as exc:
            log.info("Game %s rejected command from seat %s: %s", game_id, seat, exc)
            raise rejection(exc) from exc
    return {"state": serialize_view(view)}


@app.post("/games")
def start_game(request: StartRequest) -> Dict[str, object]:
    service = GameService.new_game(seed=request.seed, rules=request.rules)
    game_id = uuid.uuid4().hex
    games[game_id] = GameSlot(service)
    log.info("Started game %s", game_id)
    return {"game_id": game_id, "state": serialize_view(service.get_game_view())}


@app.get("/games/{game_id}")
def game_state(game_id: str, seat: Optional[int] = None) -> Dict[str, object]:
    slot = ensure_game(game_id)
    with slot.lock:
        try:
            view = slot.service.get_game_view(seat)
        except HausError as exc:
            raise rejection(exc) from exc
    return {"state": serialize_view(view)}


@app.post("/games/{game_id}/bid")
def place_bid(game_id: str, request: BidRequest) -> Dict[str, object]:
    return run_command(game_id, lambda service: service.place_bid(request.seat, request.bid), request.seat)


@app.post("/games/{game_id}/trump")
def select_trump(game_id: str, request: TrumpRequest) -> Dict[str, object]:
    return run_command(game_id, lambda service: service.select_trump(request.seat, request.suit), request.seat)


@app.post("/games/{game_id}/exchange")
def submit_exchange(game_id: str, request: ExchangeRequest) -> Dict[str, object]:
    cards = [card.to_dict() for card in request.cards]
    return run_command(game_id, lambda service: service.submit_exchange(request.seat, cards), request.seat)


@app.post("/games/{game_id}/play")
def play_card(game_id: str, request: PlayRequest) -> Dict[str, object]:
    card = request.card.to_dict()
    return run_command(game_id, lambda service: service.play_card(request.seat, card), request.seat)


@app.post("/games/{game_id}/advance")
def advance_round(game_id: str) -> Dict[str, object]:
    return run_command(game_id, lambda service: service.advance_round(), None)


def main() -> None:
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    uvicorn.run(app, host="127.0.0.1", port=8000)


if __name__ == "__main__":
    main()
