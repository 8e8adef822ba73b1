"""Prompt text sent to Gemini for a roll/hold decision."""

from neon_pig.engine.base import WINNING_SCORE, GameState

_DECISION_TEMPLATE = """\
You are playing the dice game 'Pig'.
Goal: First to {target} points wins.

Current State:
- Your Total Score: {own_total}
- Opponent's Total Score: {opponent_total}
- Your Current Turn Score (at risk): {turn_score}

Rules:
- If you roll a 1, you lose your turn score ({turn_score}) and your turn ends.
- If you roll 2-6, it adds to your turn score.
- You can 'hold' to bank your turn score into your total score.

Decide whether to 'roll' or 'hold'.
Be strategic. If you are close to {target}, play safe. If you are behind, take risks.
Provide a very short, witty reasoning (max 10 words).
"""


def build_decision_prompt(state: GameState) -> str:
    """Render the prompt from the active player's point of view."""
    return _DECISION_TEMPLATE.format(
        target=WINNING_SCORE,
        own_total=state.banked_total,
        opponent_total=state.opponent_total,
        turn_score=state.current_turn_score,
    )
