"""
Neon Pig - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. All classes are immutable (frozen dataclasses) so every
transition replaces the whole record and observers never see a partial update.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from neon_pig.engine.validators import validate_die_value, validate_score

WINNING_SCORE = 100


class DiceType(Enum):
    """Type of dice used in the game."""
    D6 = 6


class Player(Enum):
    """The two seats at the table."""
    USER = "USER"
    AI = "AI"

    @property
    def opponent(self) -> "Player":
        """The other player."""
        return Player.AI if self is Player.USER else Player.USER

    @property
    def display_name(self) -> str:
        """Name used in game log messages."""
        return "You" if self is Player.USER else "Gemini"


class GameStatus(Enum):
    """Lifecycle of a single game."""
    IDLE = "IDLE"          # no roll yet this game
    PLAYING = "PLAYING"    # at least one roll made
    FINISHED = "FINISHED"  # a player reached the winning score


@dataclass(frozen=True)
class DiceRoll:
    """
    Immutable representation of a dice roll.

    Attributes:
        values: Tuple of dice face values
        dice_type: Type of dice
    """
    values: tuple[int, ...]
    dice_type: DiceType = DiceType.D6

    def __post_init__(self) -> None:
        """Validate dice values are within valid range."""
        max_value = self.dice_type.value
        for value in self.values:
            if not (1 <= value <= max_value):
                raise ValueError(
                    f"Invalid die value {value} for {self.dice_type.name}. "
                    f"Must be between 1 and {max_value}."
                )


def _zero_scores() -> Mapping[Player, int]:
    return MappingProxyType({player: 0 for player in Player})


@dataclass(frozen=True)
class GameState:
    """
    Complete state of a game of Pig.

    Attributes:
        scores: Banked total per player
        current_turn_score: Points accumulated this turn (not yet banked)
        active_player: Whose turn it is
        status: Idle, playing or finished
        winner: Player who reached the winning score, if any
        last_roll: Most recent die value (1 before any roll)
    """
    scores: Mapping[Player, int] = field(default_factory=_zero_scores)
    current_turn_score: int = 0
    active_player: Player = Player.USER
    status: GameStatus = GameStatus.IDLE
    winner: Player | None = None
    last_roll: int = 1

    def __post_init__(self) -> None:
        """Validate the record and freeze the scores mapping."""
        if set(self.scores) != set(Player):
            raise ValueError(
                f"Scores must have exactly one entry per player, got {sorted(p.value for p in self.scores)}."
            )
        for score in self.scores.values():
            validate_score(score)
        validate_score(self.current_turn_score)
        validate_die_value(self.last_roll)

        if (self.status is GameStatus.FINISHED) != (self.winner is not None):
            raise ValueError("A game is finished if and only if it has a winner.")

        if not isinstance(self.scores, MappingProxyType):
            object.__setattr__(self, "scores", MappingProxyType(dict(self.scores)))

    @property
    def is_finished(self) -> bool:
        """Returns True once a player has won."""
        return self.status is GameStatus.FINISHED

    @property
    def banked_total(self) -> int:
        """Banked score of the active player."""
        return self.scores[self.active_player]

    @property
    def opponent_total(self) -> int:
        """Banked score of the player waiting for their turn."""
        return self.scores[self.active_player.opponent]

    def score_of(self, player: Player) -> int:
        return self.scores[player]

    def with_scores(self, player: Player, score: int, **changes) -> "GameState":
        """Return a copy with one player's banked score replaced."""
        scores = dict(self.scores)
        scores[player] = score
        return replace(self, scores=scores, **changes)
