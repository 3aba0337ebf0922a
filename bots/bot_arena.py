"""Simple bot arena for Haus."""

from __future__ import annotations

import argparse
import logging
from typing import Dict, Iterable, List, Optional, Sequence

from haus.commands import AdvanceRound, PlaceBid, PlayCard, SelectTrump, SubmitExchange, apply_command
from haus.events import Event
from haus.game import GameState, RoundEngine, RoundPhase
from haus.rules_schema import HausRules

from .base import BotStrategy
from .baseline_greedy import GreedyBot
from .random_bot import RandomBot

log = logging.getLogger(__name__)

BOT_REGISTRY: Dict[str, type[BotStrategy]] = {
    "greedy": GreedyBot,
    "random": RandomBot,
}


def _active_round(game: GameState) -> RoundEngine:
    current = game.current_round
    if current is None:
        raise RuntimeError("No round has been dealt.")
    return current


def _resolve_auction(game: GameState, bots: Sequence[BotStrategy]) -> List[Event]:
    events: List[Event] = []
    while game.phase is RoundPhase.BIDDING:
        current = _active_round(game)
        seat = current.current_seat
        assert seat is not None
        bid = bots[seat].choose_bid(current, seat)
        events.extend(apply_command(game, PlaceBid(seat=seat, bid=bid)).events)
    return events


def _resolve_trump(game: GameState, bots: Sequence[BotStrategy]) -> List[Event]:
    if game.phase is not RoundPhase.TRUMP_SELECTION:
        return []
    current = _active_round(game)
    seat = current.current_seat
    assert seat is not None
    suit = bots[seat].choose_trump(current, seat)
    return apply_command(game, SelectTrump(seat=seat, suit=suit)).events


def _resolve_exchange(game: GameState, bots: Sequence[BotStrategy]) -> List[Event]:
    if game.phase is not RoundPhase.EXCHANGE:
        return []
    current = _active_round(game)
    exchange = current.exchange
    assert exchange is not None
    events: List[Event] = []
    for seat in exchange.participants:
        cards = tuple(bots[seat].choose_exchange(current, seat))
        if len(cards) != 2:
            raise ValueError("Bots must exchange exactly two cards.")
        events.extend(apply_command(game, SubmitExchange(seat=seat, cards=cards)).events)
    return events


def _play_out(game: GameState, bots: Sequence[BotStrategy]) -> List[Event]:
    events: List[Event] = []
    while game.phase is RoundPhase.TRICK_PLAYING:
        current = _active_round(game)
        seat = current.current_seat
        assert seat is not None
        card = bots[seat].play_card(current, seat)
        events.extend(apply_command(game, PlayCard(seat=seat, card=card)).events)
    return events


def play_round(game: GameState, bots: Sequence[BotStrategy]) -> List[Event]:
    """Drive the dealt round to its score and return the events it produced."""
    if len(bots) != 4:
        raise ValueError("One bot per seat is required.")
    events = _resolve_auction(game, bots)
    events.extend(_resolve_trump(game, bots))
    events.extend(_resolve_exchange(game, bots))
    events.extend(_play_out(game, bots))
    return events


def play_game(
    bots: Sequence[BotStrategy],
    *,
    seed: Optional[int] = None,
    rules: Optional[HausRules] = None,
    max_rounds: int = 200,
) -> GameState:
    """Play rounds until a team wins or ``max_rounds`` have been scored."""
    game = GameState.new(seed=seed, rules=rules)
    while True:
        play_round(game, bots)
        if game.is_over or game.round_number >= max_rounds:
            return game
        apply_command(game, AdvanceRound())


def run_match(
    bot_a: BotStrategy,
    bot_b: BotStrategy,
    *,
    n_games: int = 10,
    seed: Optional[int] = None,
    max_rounds: int = 200,
) -> dict:
    """Seat ``bot_a`` as team 1 (seats 0/2) and ``bot_b`` as team 2 (seats 1/3)."""
    bots = [bot_a, bot_b, bot_a, bot_b]
    wins = [0, 0]
    history = []
    for idx in range(n_games):
        game_seed = None if seed is None else seed + idx
        game = play_game(bots, seed=game_seed, max_rounds=max_rounds)
        if game.winning_team is not None:
            wins[game.winning_team.index] += 1
        history.append(
            {
                "scores": list(game.scores),
                "rounds": game.round_number,
                "winning_team": game.winning_team.value if game.winning_team is not None else None,
                "contracts_made": sum(1 for result in game.round_history if result.contract_made),
            }
        )
        log.debug("Game %s finished %s after %s rounds", idx, game.scores, game.round_number)
    return {"wins": wins, "history": history}


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run a bot match.")
    parser.add_argument("--bot-a", default="greedy", choices=BOT_REGISTRY.keys())
    parser.add_argument("--bot-b", default="random", choices=BOT_REGISTRY.keys())
    parser.add_argument("--n", type=int, default=10, help="Number of games to play.")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    bot_a = BOT_REGISTRY[args.bot_a]()
    bot_b = BOT_REGISTRY[args.bot_b]()
    results = run_match(bot_a, bot_b, n_games=args.n, seed=args.seed)

    print(f"Wins after {args.n} games: team 1 ({bot_a.name}) {results['wins'][0]}, team 2 ({bot_b.name}) {results['wins'][1]}")
    rounds = sum(entry["rounds"] for entry in results["history"])
    made = sum(entry["contracts_made"] for entry in results["history"])
    print(f"Contracts made: {made}/{rounds}")


if __name__ == "__main__":
    main()
