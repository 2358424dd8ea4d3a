"""Tests for configuration classes."""

import os
from unittest.mock import patch

import pytest

from blackjack.rules import RuleSet
from config import AppConfig, GameConfig, _parse_seed


class TestGameConfig:
    """Tests for GameConfig class."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            game = GameConfig()

        assert game.bust_limit == 21
        assert game.dealer_stands_on == 17
        assert game.to_ruleset() == RuleSet()

    def test_env_overrides(self):
        env = {"BLACKJACK_BUST_LIMIT": "31", "BLACKJACK_DEALER_STANDS_ON": "27"}
        with patch.dict(os.environ, env):
            rules = GameConfig().to_ruleset()

        assert rules.bust_limit == 31
        assert rules.dealer_stands_on == 27

    def test_invalid_rules_rejected(self):
        with patch.dict(os.environ, {"BLACKJACK_DEALER_STANDS_ON": "30"}):
            game = GameConfig()

        with pytest.raises(ValueError):
            game.to_ruleset()


class TestAppConfig:
    """Tests for AppConfig class."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = AppConfig()

        assert config.debug is False
        assert config.log_level == "WARNING"
        assert config.seed is None

    def test_debug_from_env(self):
        with patch.dict(os.environ, {"DEBUG": "True", "LOG_LEVEL": "info"}):
            config = AppConfig()

        assert config.debug is True
        assert config.log_level == "INFO"

    def test_seed_from_env(self):
        with patch.dict(os.environ, {"BLACKJACK_SEED": "1234"}):
            assert _parse_seed() == 1234
            assert AppConfig().seed == 1234

    def test_blank_seed_means_random(self):
        with patch.dict(os.environ, {"BLACKJACK_SEED": "  "}):
            assert _parse_seed() is None
