"""
Neon Pig - Game Event Definitions

Event types and payloads broadcast to observers on every state change.
"""

from dataclasses import dataclass
from enum import Enum, auto

from neon_pig.engine.base import GameState


class GameEvent(Enum):
    """Events that can occur during a game."""

    DICE_ROLLED = auto()
    PLAYER_BUST = auto()
    TURN_BANKED = auto()
    GAME_WON = auto()
    GAME_RESET = auto()
    STATE_UPDATED = auto()


@dataclass(frozen=True)
class EventPayload:
    """A transition from one state record to the next."""

    event: GameEvent
    previous: GameState
    state: GameState
    epoch: int


def classify_roll(previous: GameState, current: GameState) -> GameEvent:
    """Determine the game event produced by a roll."""
    if current is previous:
        return GameEvent.STATE_UPDATED
    if current.active_player is not previous.active_player:
        return GameEvent.PLAYER_BUST
    return GameEvent.DICE_ROLLED


def classify_hold(previous: GameState, current: GameState) -> GameEvent:
    """Determine the game event produced by a hold."""
    if current is previous:
        return GameEvent.STATE_UPDATED
    if current.is_finished:
        return GameEvent.GAME_WON
    return GameEvent.TURN_BANKED
