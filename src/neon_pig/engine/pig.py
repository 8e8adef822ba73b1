"""
Neon Pig - Pig Engine

Simple single-die push-your-luck game. Roll a D6: 2-6 adds face value
to turn score, rolling 1 = bust (lose all turn points, turn passes).
Hold to bank the turn score. First to 100 wins.

All methods are stateless class methods operating on immutable data.
"""

import logging
import random

from neon_pig.engine.base import (
    WINNING_SCORE,
    DiceRoll,
    DiceType,
    GameState,
    GameStatus,
    Player,
)

logger = logging.getLogger(__name__)


class PigEngine:
    """
    Stateless engine for the Pig game.

    All methods are class methods operating on immutable data.
    State is passed in and returned, never stored.
    """

    DICE_TYPE = DiceType.D6
    FIRST_PLAYER = Player.USER

    @classmethod
    def roll_dice(cls) -> DiceRoll:
        """Roll a single D6.

        Returns:
            DiceRoll with one random value (1-6)
        """
        value = random.randint(1, 6)
        return DiceRoll(values=(value,), dice_type=cls.DICE_TYPE)

    @classmethod
    def is_bust(cls, dice: DiceRoll | tuple[int, ...]) -> bool:
        """Check if a roll is a bust (rolled a 1).

        Args:
            dice: A DiceRoll or tuple of dice values

        Returns:
            True if the die shows 1
        """
        values = dice.values if isinstance(dice, DiceRoll) else dice
        return values[0] == 1

    @classmethod
    def process_roll(
        cls,
        turn_score: int,
        roll: DiceRoll | None = None,
    ) -> tuple[int, DiceRoll, bool]:
        """Process a complete roll: roll dice, check bust, update turn score.

        Args:
            turn_score: Current accumulated turn score
            roll: Optional pre-determined roll (for testing)

        Returns:
            Tuple of (new_turn_score, dice_roll, is_bust)
        """
        if roll is None:
            roll = cls.roll_dice()

        if cls.is_bust(roll):
            return (0, roll, True)

        new_score = turn_score + roll.values[0]
        return (new_score, roll, False)

    @classmethod
    def initial_state(cls) -> GameState:
        """Fresh game: both totals 0, first player to act, nothing rolled."""
        return GameState(active_player=cls.FIRST_PLAYER)

    @classmethod
    def roll(cls, state: GameState, roll: DiceRoll | None = None) -> GameState:
        """Roll for the active player.

        A 1 wipes the turn score and passes the turn. 2-6 adds to the
        turn score. A roll never wins the game on its own.

        Args:
            state: Current game state
            roll: Optional pre-determined roll (for testing)

        Returns:
            The new game state (the same object if the game is finished)
        """
        if state.is_finished:
            logger.debug("Ignoring roll on a finished game")
            return state

        new_turn_score, roll, is_bust = cls.process_roll(state.current_turn_score, roll)
        value = roll.values[0]

        if is_bust:
            return GameState(
                scores=state.scores,
                current_turn_score=0,
                active_player=state.active_player.opponent,
                status=state.status,
                last_roll=value,
            )

        return GameState(
            scores=state.scores,
            current_turn_score=new_turn_score,
            active_player=state.active_player,
            status=GameStatus.PLAYING,
            last_roll=value,
        )

    @classmethod
    def hold(cls, state: GameState) -> GameState:
        """Bank the turn score for the active player.

        Reaching WINNING_SCORE finishes the game with the active player as
        winner; the turn score is left as it was and the turn does not pass.
        Otherwise the turn score resets and the other player is up. Holding
        with nothing at risk banks zero.

        Args:
            state: Current game state

        Returns:
            The new game state (the same object if the game is finished)
        """
        if state.is_finished:
            logger.debug("Ignoring hold on a finished game")
            return state

        player = state.active_player
        new_total = state.banked_total + state.current_turn_score

        if cls.is_winning_total(new_total):
            return state.with_scores(
                player,
                new_total,
                status=GameStatus.FINISHED,
                winner=player,
            )

        return state.with_scores(
            player,
            new_total,
            current_turn_score=0,
            active_player=player.opponent,
        )

    @classmethod
    def is_winning_total(cls, total: int) -> bool:
        return total >= WINNING_SCORE

    @classmethod
    def can_roll(cls, state: GameState, is_rolling: bool = False) -> bool:
        """Whether the human may press Roll right now."""
        return (
            state.active_player is Player.USER
            and not is_rolling
            and not state.is_finished
        )

    @classmethod
    def can_hold(cls, state: GameState, is_rolling: bool = False) -> bool:
        """Whether the human may press Hold right now (needs points at risk)."""
        return cls.can_roll(state, is_rolling) and state.current_turn_score > 0
