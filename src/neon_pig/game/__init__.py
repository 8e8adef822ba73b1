"""
Neon Pig Game Session.

State ownership, change notifications and the computer's turn loop.
"""

from neon_pig.game.events import EventPayload, GameEvent
from neon_pig.game.orchestrator import TurnOrchestrator
from neon_pig.game.session import PigGame, SessionView

__all__ = [
    "EventPayload",
    "GameEvent",
    "PigGame",
    "SessionView",
    "TurnOrchestrator",
]
