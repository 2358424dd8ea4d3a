"""Tests for game states and the engine's state machine."""

import pytest
from transitions import MachineError

from blackjack.game import BlackjackGame, GameState


class TestGameState:
    """Tests for GameState transitions."""

    def test_machine_states_match_enum(self):
        assert [s.upper() for s in BlackjackGame.STATES] == [s.name for s in GameState]

    @pytest.mark.parametrize(
        "trigger,source,dest",
        [
            ("deal_initial", GameState.SETUP, GameState.PLAYER_TURN),
            ("player_done", GameState.PLAYER_TURN, GameState.DEALER_TURN),
            ("player_busts", GameState.PLAYER_TURN, GameState.RESOLVED),
            ("dealer_plays", GameState.DEALER_TURN, GameState.RESOLVED),
        ],
    )
    def test_valid_transitions(self, game, trigger, source, dest):
        game._machine_state = source.name.lower()
        getattr(game, trigger)()
        assert game.state == dest

    @pytest.mark.parametrize(
        "trigger,source",
        [
            ("player_done", GameState.SETUP),
            ("dealer_plays", GameState.SETUP),
            ("deal_initial", GameState.DEALER_TURN),
            ("deal_initial", GameState.RESOLVED),
        ],
    )
    def test_invalid_transitions(self, game, trigger, source):
        game._machine_state = source.name.lower()
        with pytest.raises(MachineError):
            getattr(game, trigger)()
        assert game.state == source

    def test_resolved_is_terminal(self, game):
        game._machine_state = "resolved"
        for transition in BlackjackGame.TRANSITIONS:
            with pytest.raises(MachineError):
                getattr(game, transition["trigger"])()

    def test_str(self):
        assert str(GameState.PLAYER_TURN) == "Player Turn"
