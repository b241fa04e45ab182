"""
Wire game data models.

A Level is produced once by the generator and never mutated afterwards.
RunResult and EffectTrigger are what the state machine hands to the
score-submission and animation collaborators.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..primitives import Point2D, Rectangle, Resolution
from .enums import CollisionPolicy, Difficulty, EffectKind, RunOutcome


class PathPoint(BaseModel):
    """A sampled corridor centre with its local corridor width.

    Attributes:
        x: Centre X in canvas coordinates
        y: Centre Y in canvas coordinates
        width: Full corridor width at this sample (must be positive)
    """
    x: float
    y: float
    width: float = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def point(self) -> Point2D:
        return Point2D(x=self.x, y=self.y)


class Level(BaseModel):
    """Immutable generated level.

    Attributes:
        canvas: Canvas the level was generated for
        difficulty: Difficulty tag used for generation
        policy: Collision policy the boundary geometry was built for
        waypoints: Generation anchors; first is start, last is goal
        path: Sampled corridor centre line (never empty)
        boundaries: Wall rectangles (never empty; contains at least the fence)
        start: Character start point (first waypoint)
        goal: Goal point (last waypoint)
        corridor_width: Corridor width for the difficulty
        speed: Character speed in pixels per tick for the difficulty

    Examples:
        >>> level = LevelGenerator().generate(800, 600, "medium")
        >>> level.corridor_width, level.speed
        (60.0, 3.0)
    """
    canvas: Resolution
    difficulty: Difficulty
    policy: CollisionPolicy
    waypoints: Tuple[Point2D, ...]
    path: Tuple[PathPoint, ...]
    boundaries: Tuple[Rectangle, ...]
    start: Point2D
    goal: Point2D
    corridor_width: float = Field(..., gt=0)
    speed: float = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    @field_validator('waypoints')
    @classmethod
    def validate_waypoints(cls, v: Tuple[Point2D, ...]) -> Tuple[Point2D, ...]:
        """A level needs at least a start and a goal waypoint."""
        if len(v) < 2:
            raise ValueError(f'Level needs at least 2 waypoints, got {len(v)}')
        return v

    @field_validator('path', 'boundaries')
    @classmethod
    def validate_not_empty(cls, v: tuple) -> tuple:
        """An empty corridor or wall list is never a valid level."""
        if not v:
            raise ValueError('Level geometry must not be empty')
        return v

    def __str__(self) -> str:
        return (f"Level({self.difficulty.value}, {len(self.waypoints)} waypoints, "
                f"{len(self.path)} path points, {len(self.boundaries)} walls)")


class EffectTrigger(BaseModel):
    """Animation trigger emitted on a terminal transition.

    Attributes:
        kind: COLLISION (explosion) or GOAL (victory)
        point: Where the effect should play
    """
    kind: EffectKind
    point: Point2D

    model_config = ConfigDict(frozen=True)


class RunResult(BaseModel):
    """Final result of a run.

    Attributes:
        outcome: GAMEOVER or VICTORY
        score_ms: Elapsed time at the terminal transition, in integer milliseconds
        difficulty: Difficulty tag of the run
        collision_point: Character centre at the collision (GAMEOVER only)
    """
    outcome: RunOutcome
    score_ms: int = Field(..., ge=0)
    difficulty: Difficulty
    collision_point: Optional[Point2D] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_victory(self) -> bool:
        return self.outcome == RunOutcome.VICTORY

    def to_record(self) -> dict:
        """JSON-serializable form for structured log sinks."""
        return self.model_dump(mode='json')
