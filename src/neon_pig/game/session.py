"""
Neon Pig - Game Session

PigGame is the single owner of the current GameState. Every roll, hold
or reset swaps in a new immutable record and notifies subscribers, so
observers only ever see whole states.

Delayed work (the roll animation, the computer's turn) is tied to an
epoch. reset() bumps the epoch and anything scheduled under the old one
discards itself when it wakes.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable

from neon_pig.engine.base import DiceRoll, GameState, Player
from neon_pig.engine.pig import PigEngine
from neon_pig.game.events import EventPayload, GameEvent, classify_hold, classify_roll

logger = logging.getLogger(__name__)

Subscriber = Callable[[EventPayload], None]
Sleep = Callable[[float], Awaitable[None]]

WELCOME_MESSAGE = "Welcome to Neon Pig! Roll to start."
NEW_GAME_MESSAGE = "New Game Started. Good Luck!"


@dataclass(frozen=True)
class SessionView:
    """Read model for the UI: the game state plus transient display flags."""

    state: GameState
    is_rolling: bool = False
    ai_thinking: bool = False
    message: str = ""
    ai_reasoning: str = ""

    @property
    def can_roll(self) -> bool:
        return PigEngine.can_roll(self.state, self.is_rolling)

    @property
    def can_hold(self) -> bool:
        return PigEngine.can_hold(self.state, self.is_rolling)


class PigGame:
    """Owns one game of Pig between the human and the computer."""

    def __init__(self, *, roll_delay: float = 0.6, sleep: Sleep = asyncio.sleep) -> None:
        self._state = PigEngine.initial_state()
        self._epoch = 0
        self._subscribers: list[Subscriber] = []
        self._roll_delay = roll_delay
        self._sleep = sleep

        self.is_rolling = False
        self.ai_thinking = False
        self.message = WELCOME_MESSAGE
        self.ai_reasoning = ""

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def view(self) -> SessionView:
        return SessionView(
            state=self._state,
            is_rolling=self.is_rolling,
            ai_thinking=self.ai_thinking,
            message=self.message,
            ai_reasoning=self.ai_reasoning,
        )

    # -- Observers -------------------------------------------------------

    def subscribe(self, callback: Subscriber) -> None:
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def _publish(self, event: GameEvent, previous: GameState) -> None:
        payload = EventPayload(
            event=event,
            previous=previous,
            state=self._state,
            epoch=self._epoch,
        )
        for callback in list(self._subscribers):
            try:
                callback(payload)
            except Exception:
                logger.exception("Subscriber failed handling %s", event.name)

    def _touch(self) -> None:
        """Broadcast a display-flag change without a state transition."""
        self._publish(GameEvent.STATE_UPDATED, self._state)

    # -- Transitions -----------------------------------------------------

    def roll(self, value: int | None = None) -> GameState:
        """Roll the die for the active player.

        Args:
            value: Optional fixed face value (for testing)
        """
        previous = self._state
        roll = DiceRoll(values=(value,)) if value is not None else None
        self._state = PigEngine.roll(previous, roll)

        event = classify_roll(previous, self._state)
        if event is GameEvent.PLAYER_BUST:
            self.message = f"{previous.active_player.display_name} rolled a 1! Turn lost."
            self.ai_reasoning = ""
        elif event is GameEvent.DICE_ROLLED:
            self.message = ""

        logger.debug("%s rolled %d (%s)", previous.active_player.value, self._state.last_roll, event.name)
        self._publish(event, previous)
        return self._state

    def hold(self) -> GameState:
        """Bank the active player's turn score."""
        previous = self._state
        self._state = PigEngine.hold(previous)

        event = classify_hold(previous, self._state)
        name = previous.active_player.display_name
        if event is GameEvent.GAME_WON:
            self.message = "GAME OVER! You win!" if previous.active_player is Player.USER else "GAME OVER! Gemini wins!"
            logger.info("Game won by %s", previous.active_player.value)
        elif event is GameEvent.TURN_BANKED:
            self.message = f"{name} held and banked {previous.current_turn_score} points."
        self.ai_reasoning = ""

        self._publish(event, previous)
        return self._state

    def reset(self) -> GameState:
        """Start a new game and invalidate any pending delayed work."""
        previous = self._state
        self._epoch += 1
        self._state = PigEngine.initial_state()
        self.is_rolling = False
        self.ai_thinking = False
        self.message = NEW_GAME_MESSAGE
        self.ai_reasoning = ""

        logger.info("New game started (epoch %d)", self._epoch)
        self._publish(GameEvent.GAME_RESET, previous)
        return self._state

    async def animated_roll(self, value: int | None = None) -> GameState | None:
        """Show the rolling die for the animation delay, then roll.

        Returns None when nothing was rolled: the game is over, a roll is
        already animating, or a new game started while the die was spinning.
        """
        if self._state.is_finished or self.is_rolling:
            return None

        epoch = self._epoch
        self.is_rolling = True
        try:
            self.message = ""
            self._touch()
            await self._sleep(self._roll_delay)
        finally:
            if self._epoch == epoch:
                self.is_rolling = False

        if self._epoch != epoch:
            logger.debug("Discarding roll from stale epoch %d", epoch)
            return None
        return self.roll(value)

    # -- Computer display flags ------------------------------------------

    def set_thinking(self, thinking: bool) -> None:
        self.ai_thinking = thinking
        self._touch()

    def show_reasoning(self, reasoning: str) -> None:
        self.ai_thinking = False
        self.ai_reasoning = reasoning
        self._touch()
