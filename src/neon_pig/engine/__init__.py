"""
Neon Pig Game Engine.

Pure Python game logic with zero UI/network dependencies.
Handles dice rolling, turn scoring, busts and win detection.
"""

from neon_pig.engine.base import (
    WINNING_SCORE,
    DiceRoll,
    DiceType,
    GameState,
    GameStatus,
    Player,
)
from neon_pig.engine.pig import PigEngine

__all__ = [
    # Constants
    "WINNING_SCORE",
    # Data Classes
    "DiceRoll",
    "GameState",
    # Enums
    "DiceType",
    "GameStatus",
    "Player",
    # Engines
    "PigEngine",
]
