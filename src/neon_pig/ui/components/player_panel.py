"""Player panel component: banked score, turn score and winner badge."""

from __future__ import annotations

from neon_pig.engine.base import Player

_TITLES = {
    Player.USER: "You",
    Player.AI: "Gemini AI",
}


def player_panel_html(
    player: Player,
    score: int,
    current_turn_score: int,
    is_active: bool,
    is_winner: bool,
) -> str:
    """Build the HTML for one player's panel.

    Args:
        player: Whose panel this is.
        score: Banked total.
        current_turn_score: Points at risk this turn (shown only when active).
        is_active: Whether it is this player's turn.
        is_winner: Whether this player has won.
    """
    side = "user" if player is Player.USER else "ai"
    classes = ["player-panel", f"panel-{side}"]
    if is_active:
        classes.append("active")
    if is_winner:
        classes.append("winner")

    turn_display = str(current_turn_score) if is_active else "-"
    badge = '<div class="winner-badge">&#127942; WINNER!</div>' if is_winner else ""

    return (
        f'<div class="{" ".join(classes)}">'
        f'<h2 class="panel-title">{_TITLES[player]}</h2>'
        f'<div class="panel-score">{score}</div>'
        '<div class="turn-box">'
        '<span class="turn-label">Current Turn</span>'
        f'<span class="turn-score">{turn_display}</span>'
        "</div>"
        f"{badge}"
        "</div>"
    )
