"""Neon theme for Neon Pig."""

from neon_pig.ui.themes.animations import (
    load_css,
    reasoning_html,
    status_html,
    status_text,
)

__all__ = [
    "load_css",
    "reasoning_html",
    "status_html",
    "status_text",
]
