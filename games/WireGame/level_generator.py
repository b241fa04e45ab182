"""
Procedural level generation for the wire game.

A level is built in four passes:

1. Waypoints: start near the left edge at mid-height, 3-5 jittered
   interior anchors spread across the canvas, goal near the right edge.
2. Path: each consecutive waypoint pair is joined by a quadratic Bezier
   curve through a randomly jittered midpoint, sampled every
   SAMPLE_SPACING pixels of straight-line distance.

       P(t) = (1-t)^2 * P0 + 2*(1-t)*t * C + t^2 * P1

3. Boundaries: wall blocks offset perpendicular to the path tangent
   (rectangle policy) plus a canvas-edge fence (both policies).
4. Start/goal: exactly the first/last waypoint.

Examples:
    >>> import random
    >>> generator = LevelGenerator(rng=random.Random(42))
    >>> level = generator.generate(800, 600, "hard")
    >>> level.corridor_width
    40.0
"""

import math
import random
from typing import List, Optional, Protocol, Tuple, Union

from models import Point2D, Rectangle, Resolution
from models.wire import CollisionPolicy, Difficulty, Level, PathPoint
from games.WireGame import config
from games.WireGame.config import resolve_difficulty
from iraira.logging import get_logger

log = get_logger('level_generator')

# Float slack when a block face sits exactly on the corridor edge
_CLEARANCE_EPSILON = 1e-6


class PathGenerator(Protocol):
    """Interface for level generators.

    The state machine only depends on this protocol, so tests can inject
    a generator that returns a hand-built Level.
    """

    def generate(
        self,
        canvas_width: int,
        canvas_height: int,
        difficulty: Union[str, Difficulty],
    ) -> Level:
        """Generate a fresh level.

        Raises:
            InvalidDifficultyError: If difficulty is not a known tag
        """
        ...


def quadratic_bezier(p0: Point2D, control: Point2D, p1: Point2D, t: float) -> Point2D:
    """Point at parameter t on the quadratic Bezier curve p0 -> p1."""
    u = 1.0 - t
    return Point2D(
        x=u * u * p0.x + 2 * u * t * control.x + t * t * p1.x,
        y=u * u * p0.y + 2 * u * t * control.y + t * t * p1.y,
    )


class LevelGenerator:
    """Default PathGenerator.

    Args:
        rng: Random source; inject a seeded random.Random for reproducible levels
        policy: Collision policy the boundary geometry is built for
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        policy: CollisionPolicy = config.COLLISION_POLICY,
    ):
        self._rng = rng if rng is not None else random.Random()
        self._policy = CollisionPolicy(policy)

    @property
    def policy(self) -> CollisionPolicy:
        return self._policy

    def generate(
        self,
        canvas_width: int,
        canvas_height: int,
        difficulty: Union[str, Difficulty],
    ) -> Level:
        """Generate a new random level.

        Args:
            canvas_width: Canvas width in pixels
            canvas_height: Canvas height in pixels
            difficulty: One of 'easy', 'medium', 'hard', 'super-hard'

        Returns:
            Immutable Level

        Raises:
            InvalidDifficultyError: Unknown difficulty tag (checked first)
            ValueError: Canvas smaller than MIN_CANVAS_WIDTH x MIN_CANVAS_HEIGHT
        """
        tag = resolve_difficulty(difficulty)
        setting = config.DIFFICULTY_SETTINGS[tag]

        if canvas_width < config.MIN_CANVAS_WIDTH or canvas_height < config.MIN_CANVAS_HEIGHT:
            raise ValueError(
                f"Canvas {canvas_width}x{canvas_height} is smaller than "
                f"{config.MIN_CANVAS_WIDTH}x{config.MIN_CANVAS_HEIGHT}"
            )

        width = float(canvas_width)
        height = float(canvas_height)

        waypoints = self._generate_waypoints(width, height)
        path = self._generate_path(waypoints, setting.corridor_width, width, height)

        boundaries: List[Rectangle] = []
        if self._policy == CollisionPolicy.RECTANGLE:
            boundaries.extend(self._generate_walls(path, width, height))
            boundaries.extend(self._generate_fence(width, height, config.FENCE_THICKNESS))
        else:
            boundaries.extend(self._generate_fence(width, height, config.EDGE_MARGIN))

        level = Level(
            canvas=Resolution(width=canvas_width, height=canvas_height),
            difficulty=tag,
            policy=self._policy,
            waypoints=tuple(waypoints),
            path=tuple(path),
            boundaries=tuple(boundaries),
            start=waypoints[0],
            goal=waypoints[-1],
            corridor_width=setting.corridor_width,
            speed=setting.speed,
        )
        log.info("Generated %s", level)
        return level

    # =========================================================================
    # Generation passes
    # =========================================================================

    def _band_y(self, height: float) -> float:
        """Random y inside the inset vertical band."""
        return config.VERTICAL_INSET + self._rng.random() * (height - 2 * config.VERTICAL_INSET)

    def _generate_waypoints(self, width: float, height: float) -> List[Point2D]:
        start = Point2D(x=config.START_MARGIN_X, y=height / 2)
        goal_x = width - config.GOAL_MARGIN_X

        count = self._rng.randint(config.MIN_WAYPOINTS, config.MAX_WAYPOINTS)
        segment_width = (goal_x - start.x) / (count + 1)

        waypoints = [start]
        for i in range(1, count + 1):
            jitter = (self._rng.random() - 0.5) * config.WAYPOINT_JITTER_X
            x = min(max(start.x + segment_width * i + jitter, start.x), goal_x)
            waypoints.append(Point2D(x=x, y=self._band_y(height)))

        waypoints.append(Point2D(x=goal_x, y=self._band_y(height)))
        log.debug("Waypoints: %d interior", count)
        return waypoints

    def _generate_path(
        self,
        waypoints: List[Point2D],
        corridor_width: float,
        width: float,
        height: float,
    ) -> List[PathPoint]:
        path: List[PathPoint] = []

        for i in range(len(waypoints) - 1):
            p0 = waypoints[i]
            p1 = waypoints[i + 1]
            steps = max(1, int(p0.distance_to(p1) // config.SAMPLE_SPACING))

            # One control point per segment keeps the curve smooth
            control = Point2D(
                x=(p0.x + p1.x) / 2 + (self._rng.random() - 0.5) * config.CURVE_JITTER,
                y=(p0.y + p1.y) / 2 + (self._rng.random() - 0.5) * config.CURVE_JITTER,
            )

            # Segments after the first skip t=0, it repeats the previous end
            first_step = 0 if i == 0 else 1
            for step in range(first_step, steps + 1):
                sample = quadratic_bezier(p0, control, p1, step / steps)
                path.append(PathPoint(
                    x=min(max(sample.x, 0.0), width),
                    y=min(max(sample.y, 0.0), height),
                    width=corridor_width,
                ))

        return path

    def _generate_walls(self, path: List[PathPoint], width: float, height: float) -> List[Rectangle]:
        """Wall blocks on both sides of every path sample.

        Blocks that reach into the corridor of any sample (at sharp
        joins, a neighbouring segment's) are dropped.
        """
        walls: List[Rectangle] = []
        thickness = config.WALL_THICKNESS
        dropped = 0

        for i, current in enumerate(path):
            normal = self._normal_at(path, i)
            if normal is None:
                continue
            nx, ny = normal
            # Block extent along the normal, so the near face clears the corridor
            offset = current.half_width + thickness * (abs(nx) + abs(ny)) / 2

            for side in (1.0, -1.0):
                cx = current.x + side * nx * offset
                cy = current.y + side * ny * offset
                wall = self._clip(cx - thickness / 2, cy - thickness / 2, thickness, thickness,
                                  width, height)
                if wall is None:
                    continue
                if self._intrudes(wall, path):
                    dropped += 1
                    continue
                walls.append(wall)

        log.debug("Walls: %d kept, %d dropped inside the corridor", len(walls), dropped)
        return walls

    @staticmethod
    def _intrudes(wall: Rectangle, path: List[PathPoint]) -> bool:
        """True if the wall comes closer than the half-width to any sample."""
        for sample in path:
            reach = sample.half_width
            # Cheap reject before the exact distance
            if (sample.x < wall.left - reach or sample.x > wall.right + reach or
                    sample.y < wall.top - reach or sample.y > wall.bottom + reach):
                continue
            if wall.distance_to_point(sample.point) < reach - _CLEARANCE_EPSILON:
                return True
        return False

    @staticmethod
    def _normal_at(path: List[PathPoint], i: int) -> Optional[Tuple[float, float]]:
        """Unit normal to the local tangent, or None for a zero-length step."""
        if i < len(path) - 1:
            a, b = path[i], path[i + 1]
        elif i > 0:
            a, b = path[i - 1], path[i]
        else:
            return None

        dx = b.x - a.x
        dy = b.y - a.y
        length = math.hypot(dx, dy)
        if length == 0:
            return None
        return (-dy / length, dx / length)

    @staticmethod
    def _clip(x: float, y: float, w: float, h: float,
              width: float, height: float) -> Optional[Rectangle]:
        """Clip a rectangle to the canvas; None if nothing is left."""
        left = max(x, 0.0)
        top = max(y, 0.0)
        right = min(x + w, width)
        bottom = min(y + h, height)
        if right <= left or bottom <= top:
            return None
        return Rectangle(x=left, y=top, width=right - left, height=bottom - top)

    @staticmethod
    def _generate_fence(width: float, height: float, thickness: float) -> List[Rectangle]:
        """Four rectangles along the canvas edges."""
        return [
            Rectangle(x=0, y=0, width=width, height=thickness),                   # top
            Rectangle(x=0, y=height - thickness, width=width, height=thickness),  # bottom
            Rectangle(x=0, y=0, width=thickness, height=height),                  # left
            Rectangle(x=width - thickness, y=0, width=thickness, height=height),  # right
        ]
