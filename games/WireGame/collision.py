"""Collision detection for the wire game.

Two interchangeable boundary policies:

- RectangleCollisionTester: AABB overlap against every boundary
  rectangle of the level; the first overlap wins. Wall blocks are
  discrete, so the corridor can have gaps.
- CorridorCollisionTester: the character centre must stay within the
  local half-width (minus half the character size) of the nearest path
  sample, and away from the canvas edges. A strict tube.

Both share the goal test: AABB overlap with a GOAL_SIZE square centred
on the level's goal point.

The level is always passed in; testers hold no reference to it between
calls.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple, TYPE_CHECKING

from models import Point2D, Rectangle
from models.wire import CollisionPolicy, Level, PathPoint
from games.WireGame import config
from iraira.logging import get_logger

if TYPE_CHECKING:
    from games.WireGame.character import KinematicBody

log = get_logger('collision')


def goal_bounds(level: Level, size: float = config.GOAL_SIZE) -> Rectangle:
    """Goal hit-box for a level."""
    return Rectangle.centered_on(level.goal, size)


def nearest_path_point(level: Level, point: Point2D) -> Tuple[PathPoint, float]:
    """Nearest path sample to a point and its distance."""
    best = level.path[0]
    best_sq = float('inf')
    for sample in level.path:
        dx = point.x - sample.x
        dy = point.y - sample.y
        dist_sq = dx * dx + dy * dy
        if dist_sq < best_sq:
            best_sq = dist_sq
            best = sample
    return best, best_sq ** 0.5


class CollisionTester(ABC):
    """Boundary and goal tests against an explicit level."""

    def __init__(self):
        self._last_collision_point: Optional[Point2D] = None

    @property
    @abstractmethod
    def policy(self) -> CollisionPolicy:
        """Which boundary policy this tester implements."""

    @abstractmethod
    def _hits_boundary(self, body: 'KinematicBody', level: Level) -> bool:
        """Policy-specific boundary test."""

    def test_boundary(self, body: 'KinematicBody', level: Level) -> bool:
        """Check if the body touches a boundary.

        On a hit, records the body's centre as the last collision point.
        A miss leaves the previous point untouched.
        """
        if not self._hits_boundary(body, level):
            return False
        self._last_collision_point = body.bounds().center
        log.debug("Boundary hit at %s", self._last_collision_point)
        return True

    def test_goal(self, body: 'KinematicBody', level: Level) -> bool:
        """Check if the body overlaps the goal hit-box."""
        return body.bounds().intersects(goal_bounds(level))

    def last_collision_point(self) -> Optional[Point2D]:
        """Centre of the body at the most recent boundary hit."""
        return self._last_collision_point

    def reset(self) -> None:
        """Forget the last collision point. Call between sessions."""
        self._last_collision_point = None


class RectangleCollisionTester(CollisionTester):
    """AABB test against every boundary rectangle. O(walls) per tick."""

    @property
    def policy(self) -> CollisionPolicy:
        return CollisionPolicy.RECTANGLE

    def _hits_boundary(self, body: 'KinematicBody', level: Level) -> bool:
        bounds = body.bounds()
        for wall in level.boundaries:
            if bounds.intersects(wall):
                return True
        return False


class CorridorCollisionTester(CollisionTester):
    """Distance from the nearest path sample against the local half-width.

    Args:
        edge_margin: The body centre must stay more than this far inside
            every canvas edge, whatever the corridor says
    """

    def __init__(self, edge_margin: float = config.EDGE_MARGIN):
        super().__init__()
        self._edge_margin = edge_margin

    @property
    def policy(self) -> CollisionPolicy:
        return CollisionPolicy.CORRIDOR

    def _hits_boundary(self, body: 'KinematicBody', level: Level) -> bool:
        bounds = body.bounds()
        centre = bounds.center

        nearest, distance = nearest_path_point(level, centre)
        if distance > nearest.half_width - bounds.width / 2:
            return True

        margin = self._edge_margin
        return (centre.x < margin or centre.x > level.canvas.width - margin or
                centre.y < margin or centre.y > level.canvas.height - margin)


def create_collision_tester(policy: CollisionPolicy = config.COLLISION_POLICY) -> CollisionTester:
    """Build the tester for a policy."""
    policy = CollisionPolicy(policy)
    if policy == CollisionPolicy.RECTANGLE:
        return RectangleCollisionTester()
    return CorridorCollisionTester()
