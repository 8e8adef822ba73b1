"""
Neon Pig - Base Classes Tests

Tests for dataclasses, enums, and validation utilities.
"""

from dataclasses import FrozenInstanceError

import pytest
from neon_pig.engine.base import DiceRoll, DiceType, GameState, GameStatus, Player
from neon_pig.engine.validators import validate_die_value, validate_score


class TestPlayer:
    """Tests for Player enum."""

    def test_values(self):
        assert Player.USER.value == "USER"
        assert Player.AI.value == "AI"

    def test_opponent(self):
        assert Player.USER.opponent is Player.AI
        assert Player.AI.opponent is Player.USER

    def test_display_names(self):
        assert Player.USER.display_name == "You"
        assert Player.AI.display_name == "Gemini"


class TestDiceRoll:
    """Tests for DiceRoll dataclass."""

    def test_create_valid_roll(self):
        roll = DiceRoll(values=(4,), dice_type=DiceType.D6)
        assert roll.values == (4,)

    def test_invalid_value_raises(self):
        with pytest.raises(ValueError, match="Invalid die value 7"):
            DiceRoll(values=(7,))

    def test_zero_value_raises(self):
        with pytest.raises(ValueError, match="Invalid die value 0"):
            DiceRoll(values=(0,))


class TestGameState:
    """Tests for GameState dataclass."""

    def test_defaults(self):
        state = GameState()
        assert dict(state.scores) == {Player.USER: 0, Player.AI: 0}
        assert state.current_turn_score == 0
        assert state.active_player is Player.USER
        assert state.status is GameStatus.IDLE
        assert state.winner is None
        assert state.last_roll == 1

    def test_is_frozen(self):
        state = GameState()
        with pytest.raises(FrozenInstanceError):
            state.current_turn_score = 5

    def test_scores_are_read_only(self):
        state = GameState()
        with pytest.raises(TypeError):
            state.scores[Player.USER] = 50

    def test_scores_copied_from_input(self):
        scores = {Player.USER: 3, Player.AI: 4}
        state = GameState(scores=scores)
        scores[Player.USER] = 99
        assert state.scores[Player.USER] == 3

    def test_banked_and_opponent_totals(self, make_state):
        state = make_state(user=12, ai=40, active_player=Player.AI)
        assert state.banked_total == 40
        assert state.opponent_total == 12

    def test_with_scores(self, make_state):
        state = make_state(user=5)
        new = state.with_scores(Player.USER, 9, current_turn_score=0)
        assert new.scores[Player.USER] == 9
        assert state.scores[Player.USER] == 5

    def test_missing_player_raises(self):
        with pytest.raises(ValueError, match="one entry per player"):
            GameState(scores={Player.USER: 0})

    def test_negative_score_raises(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            GameState(scores={Player.USER: -1, Player.AI: 0})

    def test_negative_turn_score_raises(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            GameState(current_turn_score=-3)

    def test_bad_last_roll_raises(self):
        with pytest.raises(ValueError, match="between 1 and 6"):
            GameState(last_roll=7)

    def test_finished_requires_winner(self):
        with pytest.raises(ValueError, match="finished if and only if"):
            GameState(status=GameStatus.FINISHED)

    def test_winner_requires_finished(self):
        with pytest.raises(ValueError, match="finished if and only if"):
            GameState(winner=Player.AI)


class TestValidators:
    """Tests for engine validators."""

    def test_validate_score_ok(self):
        assert validate_score(42) == 42

    def test_validate_score_negative_allowed(self):
        assert validate_score(-5, allow_negative=True) == -5

    def test_validate_score_rejects_float(self):
        with pytest.raises(ValueError, match="must be an integer"):
            validate_score(1.5)

    def test_validate_score_rejects_bool(self):
        with pytest.raises(ValueError, match="must be an integer"):
            validate_score(True)

    @pytest.mark.parametrize("value", [1, 2, 3, 4, 5, 6])
    def test_validate_die_value_ok(self, value):
        assert validate_die_value(value) == value

    @pytest.mark.parametrize("value", [0, 7, -1])
    def test_validate_die_value_out_of_range(self, value):
        with pytest.raises(ValueError, match="between 1 and 6"):
            validate_die_value(value)
