"""CSS injection and HTML helpers for the neon theme."""

from html import escape
from pathlib import Path

import streamlit as st

from neon_pig.engine.base import GameState, Player

THINKING_MESSAGE = "Gemini is thinking..."


def load_css() -> None:
    """Inject the neon CSS theme into the Streamlit app."""
    css_path = Path(__file__).parent / "neon.css"
    css_text = css_path.read_text(encoding="utf-8")
    st.markdown(f"<style>{css_text}</style>", unsafe_allow_html=True)


def status_text(state: GameState, ai_thinking: bool, message: str) -> str:
    """Text for the status line: winner banner, thinking, or the game log."""
    if state.winner is Player.USER:
        return "🎉 You crushed the AI!"
    if state.winner is Player.AI:
        return "💀 The AI dominated."
    if ai_thinking:
        return THINKING_MESSAGE
    return message


def status_html(state: GameState, ai_thinking: bool, message: str) -> str:
    classes = "status-line winner" if state.winner else "status-line"
    text = escape(status_text(state, ai_thinking, message))
    return f'<div class="{classes}">{text or "&nbsp;"}</div>'


def reasoning_html(reasoning: str) -> str:
    """Speech bubble with the computer's last reasoning (blank when none)."""
    if not reasoning:
        return '<div class="reasoning-slot"></div>'
    return (
        '<div class="reasoning-slot">'
        '<div class="reasoning-bubble">'
        '<span class="reasoning-label">Gemini:</span>'
        f"&ldquo;{escape(reasoning)}&rdquo;"
        "</div></div>"
    )
