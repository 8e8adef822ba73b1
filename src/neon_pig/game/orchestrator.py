"""
Neon Pig - Turn Orchestrator

Plays the computer's turns. Each step shows a "thinking" state, asks the
decision provider, shows the reasoning, then rolls or holds after a short
pause. A step started under one epoch never touches a game that has
since been reset.
"""

from __future__ import annotations

import asyncio
import logging

from neon_pig.ai.base import Decision, DecisionProvider
from neon_pig.engine.base import Player
from neon_pig.game.events import EventPayload
from neon_pig.game.session import PigGame, Sleep

logger = logging.getLogger(__name__)


class TurnOrchestrator:
    """Drives the computer player against a PigGame.

    Only one decision cycle runs at a time. Use play_computer_turn()
    directly, or attach on_event as a subscriber inside a running event
    loop to have turns scheduled automatically.
    """

    def __init__(
        self,
        game: PigGame,
        provider: DecisionProvider,
        *,
        thinking_delay: float = 0.8,
        decision_delay: float = 1.5,
        sleep: Sleep = asyncio.sleep,
        computer: Player = Player.AI,
    ) -> None:
        self._game = game
        self._provider = provider
        self._thinking_delay = thinking_delay
        self._decision_delay = decision_delay
        self._sleep = sleep
        self._computer = computer
        self._in_flight = False
        self._task: asyncio.Task | None = None

    @property
    def busy(self) -> bool:
        """True while a decision cycle is running."""
        return self._in_flight

    def should_act(self) -> bool:
        """Whether a new decision cycle may start now."""
        state = self._game.state
        return (
            state.active_player is self._computer
            and not state.is_finished
            and not self._game.is_rolling
            and not self._in_flight
        )

    async def run_cycle(self) -> Decision | None:
        """Run one think-decide-act step for the computer.

        Returns:
            The decision that was applied, or None if the cycle did not
            start or was abandoned because a new game began.
        """
        if not self.should_act():
            return None

        game = self._game
        epoch = game.epoch
        self._in_flight = True
        try:
            game.set_thinking(True)
            await self._sleep(self._thinking_delay)
            if game.epoch != epoch:
                return None

            decision = await self._provider.decide(game.state)
            if game.epoch != epoch:
                logger.debug("Dropping decision from stale epoch %d", epoch)
                return None

            logger.info("Computer chose %s: %s", decision.action, decision.reasoning)
            game.show_reasoning(decision.reasoning)

            await self._sleep(self._decision_delay)
            if game.epoch != epoch:
                return None

            if decision.action == "roll":
                await game.animated_roll()
            else:
                game.hold()
            return decision
        finally:
            self._in_flight = False
            if game.epoch == epoch and game.ai_thinking:
                game.set_thinking(False)

    async def play_computer_turn(self) -> list[Decision]:
        """Run cycles until the human is up, the game ends, or it is reset."""
        decisions: list[Decision] = []
        while self.should_act():
            decision = await self.run_cycle()
            if decision is None:
                break
            decisions.append(decision)
        return decisions

    def on_event(self, payload: EventPayload) -> None:
        """PigGame subscriber: start the computer's turn when it comes up."""
        if self._task is not None and not self._task.done():
            return
        if not self.should_act():
            return

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop; computer turn not scheduled")
            return

        self._task = loop.create_task(self.play_computer_turn())

    def cancel(self) -> None:
        """Cancel a scheduled computer turn, if any."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
