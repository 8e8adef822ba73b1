"""Game page: player panels, die, controls and the computer's turn."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any

import streamlit as st

from neon_pig.ai import get_decision_provider
from neon_pig.config.settings import get_settings
from neon_pig.engine.base import WINNING_SCORE, Player
from neon_pig.game.events import EventPayload
from neon_pig.game.orchestrator import TurnOrchestrator
from neon_pig.game.session import PigGame, SessionView
from neon_pig.ui.components.die import die_html
from neon_pig.ui.components.player_panel import player_panel_html
from neon_pig.ui.components.turn_controls import render_turn_controls
from neon_pig.ui.themes.animations import reasoning_html, status_html


@dataclass
class _Slots:
    """Placeholders repainted while the script is waiting on a delay."""

    user: Any
    ai: Any
    status: Any
    die: Any
    reasoning: Any


def _get_session() -> tuple[PigGame, TurnOrchestrator]:
    """One game and orchestrator per browser session."""
    ss = st.session_state
    if "pig_game" not in ss:
        settings = get_settings()
        game = PigGame(roll_delay=settings.roll_delay)
        ss["pig_game"] = game
        ss["orchestrator"] = TurnOrchestrator(
            game,
            get_decision_provider(settings),
            thinking_delay=settings.thinking_delay,
            decision_delay=settings.decision_delay,
        )
    return ss["pig_game"], ss["orchestrator"]


def render_game_page() -> None:
    """Render the game page and run any pending action."""
    game, orchestrator = _get_session()

    title_col, button_col = st.columns([5, 1])
    with title_col:
        st.markdown(
            '<div class="app-title">Neon Pig <span class="edition">AI EDITION</span></div>',
            unsafe_allow_html=True,
        )
    with button_col:
        if st.button("New Game", key="btn_new_game", use_container_width=True):
            orchestrator.cancel()
            game.reset()
            st.rerun()

    view = game.view
    user_col, center_col, ai_col = st.columns([2, 1.4, 2])
    with user_col:
        user_slot = st.empty()
    with center_col:
        status_slot = st.empty()
        die_slot = st.empty()
        reasoning_slot = st.empty()
        action = render_turn_controls(view)
    with ai_col:
        ai_slot = st.empty()

    slots = _Slots(user=user_slot, ai=ai_slot, status=status_slot, die=die_slot, reasoning=reasoning_slot)
    _paint(slots, view)

    st.markdown(
        '<div class="rules-footer">'
        f"<p>Goal: {WINNING_SCORE} points. Roll 1 and lose your turn score. Hold to bank.</p>"
        "<p>Powered by Google Gemini</p>"
        "</div>",
        unsafe_allow_html=True,
    )

    def repaint(_payload: EventPayload) -> None:
        _paint(slots, game.view)

    if action == "roll" and view.can_roll:
        _run_with_repaint(game, repaint, game.animated_roll())
        st.rerun()
    elif action == "hold" and view.can_hold:
        game.hold()
        st.rerun()

    if orchestrator.should_act():
        _run_with_repaint(game, repaint, orchestrator.play_computer_turn())
        st.rerun()


def _run_with_repaint(game: PigGame, repaint, coro) -> Any:
    """Run a coroutine to completion, repainting on every game update."""
    game.subscribe(repaint)
    try:
        return asyncio.run(coro)
    finally:
        game.unsubscribe(repaint)


def _paint(slots: _Slots, view: SessionView) -> None:
    state = view.state
    for player, slot in ((Player.USER, slots.user), (Player.AI, slots.ai)):
        slot.markdown(
            player_panel_html(
                player=player,
                score=state.score_of(player),
                current_turn_score=state.current_turn_score,
                is_active=state.active_player is player,
                is_winner=state.winner is player,
            ),
            unsafe_allow_html=True,
        )
    slots.status.markdown(status_html(state, view.ai_thinking, view.message), unsafe_allow_html=True)
    slots.die.markdown(die_html(state.last_roll, view.is_rolling, state.active_player), unsafe_allow_html=True)
    slots.reasoning.markdown(reasoning_html(view.ai_reasoning), unsafe_allow_html=True)
