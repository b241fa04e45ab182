"""
Wire game enumerations.

Closed string sets shared by the level generator, the state machine and
the collaborators (input, rendering, score submission).
"""

from enum import Enum

from games.common.game_state import GameState


class Direction(str, Enum):
    """Axis-aligned heading of the character.

    An unset heading is represented by None, not by a member.
    """
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Difficulty(str, Enum):
    """Difficulty tags. The string values are exact and part of the
    contract with the score-submission collaborator."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    SUPER_HARD = "super-hard"


class CollisionPolicy(str, Enum):
    """Boundary collision strategy.

    Attributes:
        RECTANGLE: Explicit wall blocks offset from the path plus an outer fence
        CORRIDOR: Distance from the nearest path point against the local half-width
    """
    RECTANGLE = "rectangle"
    CORRIDOR = "corridor"


class RunOutcome(str, Enum):
    """How a run ended."""
    GAMEOVER = "gameover"
    VICTORY = "victory"


class EffectKind(str, Enum):
    """Terminal animation the presentation layer should play."""
    COLLISION = "collision"
    GOAL = "goal"


__all__ = [
    "GameState",
    "Direction",
    "Difficulty",
    "CollisionPolicy",
    "RunOutcome",
    "EffectKind",
]
