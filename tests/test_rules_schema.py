import json

import pytest
from pydantic import ValidationError

from haus.rules_schema import DEFAULT_RULES, HausRules, RulesError, load_rules


def test_default_rules():
    rules = load_rules()
    assert rules is DEFAULT_RULES
    assert rules.win_threshold == 64
    assert rules.stuck_dealer_bid == 4
    assert (rules.haus_points, rules.double_haus_points, rules.ace_haus_points) == (16, 32, 12)
    assert rules.implicit_passes
    assert rules.first_dealer == 0


def test_load_rules_from_json(tmp_path):
    path = tmp_path / "rules.json"
    path.write_text(json.dumps({"win_threshold": 32, "first_dealer": 3}), encoding="utf-8")
    rules = load_rules(path)
    assert rules.win_threshold == 32
    assert rules.first_dealer == 3
    assert rules.haus_points == 16


def test_invalid_rules_are_rejected():
    with pytest.raises(ValidationError):
        HausRules(stuck_dealer_bid=8)
    with pytest.raises(ValidationError):
        HausRules(first_dealer=4)
    with pytest.raises(ValidationError):
        HausRules(win_threshold=0)
    with pytest.raises(ValidationError):
        HausRules(tricks_per_round=9)


def test_unreadable_rules_file(tmp_path):
    with pytest.raises(RulesError):
        load_rules(tmp_path / "missing.json")
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(RulesError):
        load_rules(broken)


def test_rules_are_immutable():
    with pytest.raises(ValidationError):
        DEFAULT_RULES.win_threshold = 10
