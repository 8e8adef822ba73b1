"""UI components for Neon Pig."""

from neon_pig.ui.components.die import die_html
from neon_pig.ui.components.player_panel import player_panel_html
from neon_pig.ui.components.turn_controls import render_turn_controls

__all__ = [
    "die_html",
    "player_panel_html",
    "render_turn_controls",
]
