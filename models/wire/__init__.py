"""Wire game models."""

from .enums import (
    GameState,
    Direction,
    Difficulty,
    CollisionPolicy,
    RunOutcome,
    EffectKind,
)
from .models import (
    PathPoint,
    Level,
    EffectTrigger,
    RunResult,
)

__all__ = [
    "GameState",
    "Direction",
    "Difficulty",
    "CollisionPolicy",
    "RunOutcome",
    "EffectKind",
    "PathPoint",
    "Level",
    "EffectTrigger",
    "RunResult",
]
