"""
Models library for the wire game.

This package provides the Pydantic data models used across the system:
- Primitives: Basic geometric and color types (Point2D, Rectangle, Resolution, Color)
- Wire: Game-specific models (Level, PathPoint, RunResult, ...)

Usage:
    >>> from models import Point2D, Rectangle
    >>> from models.wire import Level, Difficulty
"""

from .primitives import (
    Point2D,
    Resolution,
    Color,
    Rectangle,
)

from .wire import (
    GameState,
    Direction,
    Difficulty,
    CollisionPolicy,
    RunOutcome,
    EffectKind,
    PathPoint,
    Level,
    EffectTrigger,
    RunResult,
)

__all__ = [
    # Primitives
    "Point2D",
    "Resolution",
    "Color",
    "Rectangle",
    # Wire game
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
