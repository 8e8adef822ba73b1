"""Decision provider base interfaces and models."""

from abc import ABC, abstractmethod
from typing import Literal

from pydantic import BaseModel

from neon_pig.engine.base import GameState

Action = Literal["roll", "hold"]

CONFUSED_REASONING = "I'm confused, so I'll hold."
FAILURE_REASONING = "My brain hurts. I hold."
SAFE_PLAY_REASONING = "I'm playing it safe using basic logic."


class Decision(BaseModel):
    """What the computer does next, and why."""

    action: Action
    reasoning: str

    model_config = {"frozen": True}


CONFUSED_DECISION = Decision(action="hold", reasoning=CONFUSED_REASONING)
FAILURE_DECISION = Decision(action="hold", reasoning=FAILURE_REASONING)


class DecisionProvider(ABC):
    """Chooses roll or hold for the active player.

    Implementations must not raise: every failure maps to a fixed
    fallback decision.
    """

    @abstractmethod
    async def decide(self, state: GameState) -> Decision:  # pragma: no cover
        raise NotImplementedError
