"""Round scoring helpers for Haus."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .bidding import Contract, ContractKind
from .deck import HAND_SIZE
from .rules_schema import DEFAULT_RULES, HausRules
from .seats import Team


class ScoringError(ValueError):
    """Raised when round data cannot be scored."""


@dataclass(frozen=True)
class RoundScore:
    contract: Contract
    tricks_won: Tuple[int, int]
    points: Tuple[int, int]
    contract_made: bool
    round_winner: Team

    @property
    def bidding_team(self) -> Team:
        return self.contract.bidding_team

    def points_for(self, team: Team) -> int:
        return self.points[team.index]

    def tricks_for(self, team: Team) -> int:
        return self.tricks_won[team.index]


def special_contract_points(kind: ContractKind, rules: HausRules = DEFAULT_RULES) -> int:
    if kind is ContractKind.HAUS:
        return rules.haus_points
    if kind is ContractKind.DOUBLE_HAUS:
        return rules.double_haus_points
    if kind is ContractKind.ACE_HAUS:
        return rules.ace_haus_points
    raise ScoringError(f"{kind.name} is not a special contract.")


def score_round(
    contract: Contract,
    tricks_won: Sequence[int],
    rules: HausRules = DEFAULT_RULES,
) -> RoundScore:
    """Score a finished round from the ``[team1, team2]`` trick counts.

    A numeric contract that is made scores the tricks actually taken, and a
    failed one costs the bid. Special contracts are all-or-nothing. The other
    team always scores the tricks it took. The round goes to the higher
    total; equal totals go to the bidding team.
    """
    if len(tricks_won) != 2:
        raise ScoringError("Trick counts must be given for exactly two teams.")
    if any(count < 0 for count in tricks_won) or sum(tricks_won) != HAND_SIZE:
        raise ScoringError(f"Trick counts must add up to {HAND_SIZE}, got {list(tricks_won)}.")

    bidding_team = contract.bidding_team
    other_team = bidding_team.opponent()
    bidding_tricks = tricks_won[bidding_team.index]
    other_tricks = tricks_won[other_team.index]

    if contract.kind is ContractKind.NUMBER:
        target = contract.number
        assert target is not None
        made = bidding_tricks >= target
        bidding_points = bidding_tricks if made else -target
    else:
        made = bidding_tricks == HAND_SIZE
        value = special_contract_points(contract.kind, rules)
        bidding_points = value if made else -value

    points = [0, 0]
    points[bidding_team.index] = bidding_points
    points[other_team.index] = other_tricks

    if bidding_points >= other_tricks:
        round_winner = bidding_team
    else:
        round_winner = other_team

    return RoundScore(
        contract=contract,
        tricks_won=(tricks_won[0], tricks_won[1]),
        points=(points[0], points[1]),
        contract_made=made,
        round_winner=round_winner,
    )


def apply_round_score(prior_scores: Sequence[int], result: RoundScore) -> Tuple[int, int]:
    if len(prior_scores) != 2:
        raise ScoringError("Exactly two team scores are supported.")
    return prior_scores[0] + result.points[0], prior_scores[1] + result.points[1]


def game_winner(scores: Sequence[int], rules: HausRules = DEFAULT_RULES) -> Optional[Team]:
    """Return the team that has reached the win threshold, if any.

    Team 1 is checked first, so it takes the game when both teams reach the
    threshold in the same round.
    """
    if scores[Team.ONE.index] >= rules.win_threshold:
        return Team.ONE
    if scores[Team.TWO.index] >= rules.win_threshold:
        return Team.TWO
    return None
