"""Die component: a single D6 drawn with pips on a 3x3 grid."""

from __future__ import annotations

from neon_pig.engine.base import Player

# (row, column) cells on a 3x3 grid, 1-based
_PIPS: dict[int, tuple[tuple[int, int], ...]] = {
    1: ((2, 2),),
    2: ((1, 1), (3, 3)),
    3: ((1, 1), (2, 2), (3, 3)),
    4: ((1, 1), (1, 3), (3, 1), (3, 3)),
    5: ((1, 1), (1, 3), (2, 2), (3, 1), (3, 3)),
    6: ((1, 1), (1, 3), (2, 1), (2, 3), (3, 1), (3, 3)),
}


def pip_positions(value: int) -> tuple[tuple[int, int], ...]:
    """Grid cells holding a pip for the given face (empty for invalid faces)."""
    return _PIPS.get(value, ())


def die_html(value: int, is_rolling: bool, active_player: Player) -> str:
    """Build the HTML for the die, tinted for whoever is rolling."""
    classes = ["die", "die-user" if active_player is Player.USER else "die-ai"]
    if is_rolling:
        classes.append("rolling")

    pips = "".join(
        f'<span class="pip" style="grid-row:{row};grid-column:{col};"></span>'
        for row, col in pip_positions(value)
    )
    return (
        '<div class="die-wrap">'
        f'<div class="{" ".join(classes)}"><div class="pip-grid">{pips}</div></div>'
        "</div>"
    )
