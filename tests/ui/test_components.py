"""Tests for the HTML-building UI helpers."""

import pytest

from neon_pig.engine.base import GameStatus, Player
from neon_pig.ui.components.die import die_html, pip_positions
from neon_pig.ui.components.player_panel import player_panel_html
from neon_pig.ui.themes.animations import (
    THINKING_MESSAGE,
    reasoning_html,
    status_html,
    status_text,
)


class TestDie:
    @pytest.mark.parametrize("value", [1, 2, 3, 4, 5, 6])
    def test_pip_count_matches_face(self, value):
        assert len(pip_positions(value)) == value

    def test_invalid_face_has_no_pips(self):
        assert pip_positions(0) == ()

    def test_rolling_class(self):
        assert "rolling" in die_html(3, True, Player.USER)
        assert "rolling" not in die_html(3, False, Player.USER)

    def test_tinted_by_player(self):
        assert "die-user" in die_html(2, False, Player.USER)
        assert "die-ai" in die_html(2, False, Player.AI)


class TestPlayerPanel:
    def test_active_shows_turn_score(self):
        html = player_panel_html(Player.USER, 40, 12, is_active=True, is_winner=False)
        assert "You" in html
        assert ">40<" in html
        assert ">12<" in html
        assert "active" in html

    def test_inactive_hides_turn_score(self):
        html = player_panel_html(Player.AI, 40, 12, is_active=False, is_winner=False)
        assert "Gemini AI" in html
        assert ">-<" in html
        assert ">12<" not in html

    def test_winner_badge(self):
        html = player_panel_html(Player.AI, 101, 6, is_active=True, is_winner=True)
        assert "WINNER!" in html


class TestStatus:
    def test_shows_log_message(self, make_state):
        assert status_text(make_state(), False, "You rolled a 1! Turn lost.") == "You rolled a 1! Turn lost."

    def test_thinking_overrides_message(self, make_state):
        assert status_text(make_state(), True, "old") == THINKING_MESSAGE

    def test_winner_banners(self, make_state):
        user_won = make_state(user=100, status=GameStatus.FINISHED, winner=Player.USER)
        ai_won = make_state(ai=100, status=GameStatus.FINISHED, winner=Player.AI)
        assert status_text(user_won, True, "x") == "🎉 You crushed the AI!"
        assert status_text(ai_won, False, "x") == "💀 The AI dominated."

    def test_html_escapes_message(self, make_state):
        assert "<b>" not in status_html(make_state(), False, "<b>bold</b>")

    def test_reasoning_bubble(self):
        assert "reasoning-bubble" not in reasoning_html("")
        html = reasoning_html("Fortune favours the bold")
        assert "Gemini:" in html
        assert "Fortune favours the bold" in html
