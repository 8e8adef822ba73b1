"""Deterministic fallback strategy used when no Gemini key is configured."""

from neon_pig.ai.base import SAFE_PLAY_REASONING, Decision, DecisionProvider
from neon_pig.engine.base import WINNING_SCORE, GameState

HOLD_AT = 20


def choose_action(banked_total: int, turn_score: int) -> str:
    """Hold at 20 points at risk, or whenever holding would win."""
    if turn_score >= HOLD_AT or banked_total + turn_score >= WINNING_SCORE:
        return "hold"
    return "roll"


class RulesDecisionProvider(DecisionProvider):
    async def decide(self, state: GameState) -> Decision:
        action = choose_action(state.banked_total, state.current_turn_score)
        return Decision(action=action, reasoning=SAFE_PLAY_REASONING)
