"""
Neon Pig - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from typing import Callable

import pytest

from neon_pig.ai.base import Decision, DecisionProvider
from neon_pig.engine.base import GameState, GameStatus, Player


# =============================================================================
# GAME STATE FIXTURES
# =============================================================================

@pytest.fixture
def make_state() -> Callable[..., GameState]:
    """
    Factory for game states with chosen totals.

    Returns:
        Callable taking user/ai totals plus any other GameState field
    """
    def _make(user: int = 0, ai: int = 0, **fields) -> GameState:
        fields.setdefault("status", GameStatus.PLAYING)
        return GameState(scores={Player.USER: user, Player.AI: ai}, **fields)

    return _make


@pytest.fixture
def initial_state() -> GameState:
    """The documented starting record."""
    return GameState(
        scores={Player.USER: 0, Player.AI: 0},
        current_turn_score=0,
        active_player=Player.USER,
        status=GameStatus.IDLE,
        winner=None,
        last_roll=1,
    )


# =============================================================================
# ASYNC HELPERS
# =============================================================================

class SleepRecorder:
    """Stand-in for asyncio.sleep that records delays and returns at once.

    An optional hook runs on each call, so tests can act "during" a delay.
    """

    def __init__(self) -> None:
        self.delays: list[float] = []
        self.hook: Callable[[int], None] | None = None

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)
        if self.hook is not None:
            self.hook(len(self.delays))


@pytest.fixture
def sleep() -> SleepRecorder:
    return SleepRecorder()


class ScriptedProvider(DecisionProvider):
    """Returns queued decisions in order and records the states it saw."""

    def __init__(self, *actions: str) -> None:
        self.actions = list(actions)
        self.seen: list[GameState] = []

    async def decide(self, state: GameState) -> Decision:
        self.seen.append(state)
        action = self.actions.pop(0) if self.actions else "hold"
        return Decision(action=action, reasoning=f"scripted {action}")


@pytest.fixture
def scripted_provider() -> Callable[..., ScriptedProvider]:
    return ScriptedProvider
