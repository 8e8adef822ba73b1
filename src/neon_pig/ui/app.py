"""Neon Pig — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st


_RULES = """\
**Goal:** First to **100 points** wins!

**Each turn:**
- Roll the die — **2-6** adds to your turn score
- Roll a **1** and you lose the turn score, turn passes
- **Hold** to bank your turn score into your total

You play first. Gemini plays the other seat.
"""


def _render_sidebar_rules() -> None:
    """Show the rules in the sidebar."""
    with st.sidebar:
        st.markdown("### Pig Rules")
        st.markdown(_RULES)


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Neon Pig",
        page_icon="🎲",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    from neon_pig.config.settings import configure_logging, get_settings
    from neon_pig.ui.themes import load_css

    configure_logging(get_settings())
    load_css()
    _render_sidebar_rules()

    from neon_pig.ui.views.game import render_game_page
    render_game_page()


if __name__ == "__main__":
    main()
