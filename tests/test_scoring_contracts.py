import pytest

from haus.bidding import Bid, Contract, ContractKind
from haus.rules_schema import HausRules
from haus.scoring import ScoringError, apply_round_score, game_winner, score_round, special_contract_points
from haus.seats import Team


def test_haus_all_tricks_and_one_short():
    contract = Contract(Bid.HAUS, 0)
    made = score_round(contract, [8, 0])
    assert made.points == (16, 0)
    assert made.contract_made
    assert made.round_winner is Team.ONE

    failed = score_round(contract, [7, 1])
    assert failed.points == (-16, 1)
    assert not failed.contract_made
    assert failed.round_winner is Team.TWO


def test_numeric_contract_scores_actual_tricks():
    result = score_round(Contract(Bid.FIVE, 2), [6, 2])
    assert result.points == (6, 2)
    assert result.contract_made
    assert result.points_for(Team.ONE) == 6
    assert result.tricks_for(Team.TWO) == 2


def test_numeric_contract_failure_costs_the_bid():
    result = score_round(Contract(Bid.SEVEN, 1), [3, 5])
    assert result.points == (3, -7)
    assert result.bidding_team is Team.TWO
    assert result.round_winner is Team.ONE


def test_special_contract_values():
    assert score_round(Contract(Bid.ACE_HAUS, 3), [0, 8]).points == (0, 12)
    assert score_round(Contract(Bid.ACE_HAUS, 3), [2, 6]).points == (2, -12)
    assert score_round(Contract(Bid.DOUBLE_HAUS, 0), [8, 0]).points == (32, 0)
    assert score_round(Contract(Bid.DOUBLE_HAUS, 0), [5, 3]).points == (-32, 3)


def test_equal_round_points_go_to_bidding_team():
    result = score_round(Contract(Bid.FOUR, 1), [4, 4])
    assert result.points == (4, 4)
    assert result.round_winner is Team.TWO


def test_rules_change_special_values():
    rules = HausRules(haus_points=20)
    assert special_contract_points(ContractKind.HAUS, rules) == 20
    assert score_round(Contract(Bid.HAUS, 1), [0, 8], rules).points == (0, 20)
    with pytest.raises(ScoringError):
        special_contract_points(ContractKind.NUMBER)


def test_trick_counts_must_cover_the_round():
    with pytest.raises(ScoringError):
        score_round(Contract(Bid.FOUR, 0), [4, 3])
    with pytest.raises(ScoringError):
        score_round(Contract(Bid.FOUR, 0), [9, -1])


def test_cumulative_scores_and_threshold():
    result = score_round(Contract(Bid.SIX, 0), [2, 6])
    assert apply_round_score([10, 60], result) == (4, 66)

    assert game_winner([63, 0]) is None
    assert game_winner([64, -5]) is Team.ONE
    assert game_winner([20, 70]) is Team.TWO
    assert game_winner([10, 30], rules=HausRules(win_threshold=30)) is Team.TWO


def test_team_one_wins_when_both_teams_reach_threshold():
    result = score_round(Contract(Bid.FOUR, 0), [4, 4])
    scores = apply_round_score([60, 62], result)
    assert scores == (64, 66)
    assert result.round_winner is Team.ONE
    assert game_winner(scores) is Team.ONE
    assert game_winner([66, 70]) is Team.ONE
    assert game_winner([65, 65]) is Team.ONE
