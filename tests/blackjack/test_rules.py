"""Tests for RuleSet validation."""

import pytest

from blackjack.rules import RuleSet


def test_default_rules():
    rules = RuleSet()
    assert rules.bust_limit == 21
    assert rules.dealer_stands_on == 17


def test_rules_are_frozen():
    rules = RuleSet()
    with pytest.raises(AttributeError):
        rules.bust_limit = 30


@pytest.mark.parametrize(
    "kwargs",
    [
        {"bust_limit": 11},
        {"dealer_stands_on": 1},
        {"dealer_stands_on": 22},
        {"bust_limit": 15, "dealer_stands_on": 17},
    ],
)
def test_invalid_rules_raise(kwargs):
    with pytest.raises(ValueError):
        RuleSet(**kwargs)
