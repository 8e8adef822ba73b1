"""Turn control buttons — Roll and Hold."""

from __future__ import annotations

import streamlit as st

from neon_pig.game.session import SessionView


def render_turn_controls(view: SessionView) -> str | None:
    """Render the human's action buttons.

    Returns:
        ``"roll"``, ``"hold"``, or ``None`` if no action taken.
    """
    if st.button(
        "🎲 ROLL",
        key="btn_roll",
        use_container_width=True,
        disabled=not view.can_roll,
        type="primary",
    ):
        return "roll"

    if st.button(
        "📥 HOLD",
        key="btn_hold",
        use_container_width=True,
        disabled=not view.can_hold,
    ):
        return "hold"

    return None
