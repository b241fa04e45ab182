"""
Tests for boundary and goal collision.

Uses hand-built straight levels: the corridor centre line runs along
y=300 from x=50 to x=750 and the goal sits at (750, 300).
"""

import pytest

from models import Point2D, Rectangle
from models.wire import CollisionPolicy
from games.WireGame import config
from games.WireGame.character import Character
from games.WireGame.collision import (
    CorridorCollisionTester,
    RectangleCollisionTester,
    create_collision_tester,
    goal_bounds,
    nearest_path_point,
)


def body_centred_at(x, y, size=10.0):
    return Character(Point2D(x=x - size / 2, y=y - size / 2), size)


class TestFactory:
    """Test create_collision_tester."""

    def test_corridor(self):
        tester = create_collision_tester(CollisionPolicy.CORRIDOR)
        assert isinstance(tester, CorridorCollisionTester)
        assert tester.policy == CollisionPolicy.CORRIDOR

    def test_rectangle_from_tag(self):
        tester = create_collision_tester('rectangle')
        assert isinstance(tester, RectangleCollisionTester)
        assert tester.policy == CollisionPolicy.RECTANGLE

    def test_unknown_policy_raises(self):
        with pytest.raises(ValueError):
            create_collision_tester('circle')


class TestNearestPathPoint:
    """Test the nearest-sample search."""

    def test_finds_nearest(self, level_factory):
        level = level_factory()
        sample, distance = nearest_path_point(level, Point2D(x=101.0, y=310.0))
        assert (sample.x, sample.y) == (100.0, 300.0)
        assert distance == pytest.approx((1 + 100) ** 0.5)


class TestCorridorPolicy:
    """Centre distance against the local half-width."""

    def test_centre_on_path_is_safe(self, level_factory):
        level = level_factory('super-hard')
        assert not CorridorCollisionTester().test_boundary(body_centred_at(200, 300), level)

    def test_threshold_is_half_width_minus_half_size(self, level_factory):
        """Medium: half-width 30, body half-size 5, so 25 px is the limit."""
        level = level_factory('medium')
        tester = CorridorCollisionTester()
        assert not tester.test_boundary(body_centred_at(200, 325), level)
        assert tester.test_boundary(body_centred_at(200, 326), level)
        assert tester.test_boundary(body_centred_at(200, 274), level)

    def test_wider_corridor_tolerates_more(self, level_factory):
        body = body_centred_at(200, 340)
        tester = CorridorCollisionTester()
        assert tester.test_boundary(body, level_factory('medium'))
        assert not tester.test_boundary(body, level_factory('easy'))

    def test_canvas_edge_margin(self, level_factory):
        """Centre inside the edge margin collides even within the corridor."""
        level = level_factory('easy', y=40.0)
        tester = CorridorCollisionTester()
        assert not tester.test_boundary(body_centred_at(200, config.EDGE_MARGIN + 1), level)
        assert tester.test_boundary(body_centred_at(200, config.EDGE_MARGIN - 1), level)

    def test_custom_edge_margin(self, level_factory):
        level = level_factory('easy', y=40.0)
        assert not CorridorCollisionTester(edge_margin=0).test_boundary(
            body_centred_at(200, 10), level)


class TestRectanglePolicy:
    """AABB overlap against boundary rectangles."""

    @pytest.fixture
    def walled_level(self, level_factory):
        wall = Rectangle(x=100, y=100, width=20, height=20)
        return level_factory(policy=CollisionPolicy.RECTANGLE, boundaries=[wall])

    def test_overlap_collides(self, walled_level):
        body = Character(Point2D(x=95, y=95), 10)
        assert RectangleCollisionTester().test_boundary(body, walled_level)

    def test_touching_edge_does_not_collide(self, walled_level):
        tester = RectangleCollisionTester()
        assert not tester.test_boundary(Character(Point2D(x=90, y=105), 10), walled_level)
        assert not tester.test_boundary(Character(Point2D(x=120, y=105), 10), walled_level)
        assert not tester.test_boundary(Character(Point2D(x=105, y=90), 10), walled_level)

    def test_clear_of_walls(self, walled_level):
        assert not RectangleCollisionTester().test_boundary(
            Character(Point2D(x=300, y=300), 10), walled_level)

    def test_fast_body_can_skip_thin_wall(self, level_factory):
        """Collision is tested at the post-move position only."""
        thin = Rectangle(x=100, y=280, width=2, height=50)
        level = level_factory(policy=CollisionPolicy.RECTANGLE, boundaries=[thin])
        tester = RectangleCollisionTester()

        body = Character(Point2D(x=85, y=300), 10)
        body.set_heading('right')
        body.tick(20)
        assert body.position.x == 105
        assert not tester.test_boundary(body, level)

        slow = Character(Point2D(x=85, y=300), 10)
        slow.set_heading('right')
        slow.tick(6)
        assert tester.test_boundary(slow, level)


class TestLastCollisionPoint:
    """The last collision point is the body centre at the hit."""

    def test_initially_none(self):
        assert CorridorCollisionTester().last_collision_point() is None

    def test_recorded_on_hit(self, level_factory):
        tester = CorridorCollisionTester()
        tester.test_boundary(body_centred_at(200, 350), level_factory('medium'))
        assert tester.last_collision_point() == Point2D(x=200, y=350)

    def test_persists_across_misses(self, level_factory):
        level = level_factory('medium')
        tester = CorridorCollisionTester()
        tester.test_boundary(body_centred_at(200, 350), level)
        tester.test_boundary(body_centred_at(200, 300), level)
        assert tester.last_collision_point() == Point2D(x=200, y=350)

    def test_reset_clears(self, level_factory):
        tester = CorridorCollisionTester()
        tester.test_boundary(body_centred_at(200, 350), level_factory('medium'))
        tester.reset()
        assert tester.last_collision_point() is None


class TestGoal:
    """Goal hit-box is a fixed-size square around the goal point."""

    def test_goal_bounds(self, level_factory):
        level = level_factory()
        box = goal_bounds(level)
        assert box.as_tuple() == (735, 285, 30, 30)

    @pytest.mark.parametrize("difficulty", ["easy", "super-hard"])
    def test_goal_size_independent_of_difficulty(self, level_factory, difficulty):
        assert goal_bounds(level_factory(difficulty)).width == config.GOAL_SIZE

    def test_overlap_reaches_goal(self, level_factory):
        level = level_factory()
        body = Character(Point2D(x=728, y=300), 10)
        assert CorridorCollisionTester().test_goal(body, level)

    def test_touching_goal_edge_is_not_enough(self, level_factory):
        level = level_factory()
        body = Character(Point2D(x=725, y=300), 10)
        assert not CorridorCollisionTester().test_goal(body, level)

    def test_goal_test_ignores_walls(self, level_factory):
        level = level_factory(policy=CollisionPolicy.RECTANGLE)
        body = Character(Point2D(x=745, y=295), 10)
        assert RectangleCollisionTester().test_goal(body, level)
