"""Page renderers for Neon Pig."""

from neon_pig.ui.views.game import render_game_page

__all__ = ["render_game_page"]
