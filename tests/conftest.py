"""Shared fixtures for wire game tests.

Most state machine tests run on a hand-built straight corridor so that
positions and tick counts are exact; generator tests use a seeded RNG.
"""
import os
import random
from typing import List, Optional, Sequence

import pytest

# Headless pygame for renderer and input tests
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

from models import Point2D, Rectangle, Resolution
from models.wire import CollisionPolicy, Difficulty, Level, PathPoint
from games.WireGame import config
from games.WireGame.config import resolve_difficulty
from games.WireGame.game_mode import WireGameMode
from iraira.logging import disable_logging


disable_logging()


class FakeClock:
    """Manually advanced monotonic clock, in whole milliseconds."""

    def __init__(self, start_ms: int = 10_000):
        self.ms = start_ms

    def __call__(self) -> float:
        return self.ms / 1000.0

    def advance(self, ms: int) -> None:
        self.ms += ms


def build_straight_level(
    difficulty=Difficulty.MEDIUM,
    canvas=(800, 600),
    policy: CollisionPolicy = CollisionPolicy.CORRIDOR,
    boundaries: Optional[Sequence[Rectangle]] = None,
    y: float = 300.0,
) -> Level:
    """Horizontal corridor at height y from x=50 to x=width-50."""
    tag = resolve_difficulty(difficulty)
    setting = config.DIFFICULTY_SETTINGS[tag]
    width, height = canvas
    start = Point2D(x=50.0, y=y)
    goal = Point2D(x=width - 50.0, y=y)

    path = [
        PathPoint(x=float(x), y=y, width=setting.corridor_width)
        for x in range(50, width - 50 + 1, 5)
    ]
    if boundaries is None:
        m = config.EDGE_MARGIN
        boundaries = [
            Rectangle(x=0, y=0, width=width, height=m),
            Rectangle(x=0, y=height - m, width=width, height=m),
            Rectangle(x=0, y=0, width=m, height=height),
            Rectangle(x=width - m, y=0, width=m, height=height),
        ]

    return Level(
        canvas=Resolution(width=width, height=height),
        difficulty=tag,
        policy=policy,
        waypoints=(start, goal),
        path=tuple(path),
        boundaries=tuple(boundaries),
        start=start,
        goal=goal,
        corridor_width=setting.corridor_width,
        speed=setting.speed,
    )


class StraightLevelGenerator:
    """Generator returning a new straight level on every call."""

    def __init__(self):
        self.calls: List[tuple] = []

    def generate(self, canvas_width, canvas_height, difficulty) -> Level:
        tag = resolve_difficulty(difficulty)
        self.calls.append((canvas_width, canvas_height, tag))
        return build_straight_level(tag, canvas=(canvas_width, canvas_height))


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def level_factory():
    """Factory for hand-built straight levels."""
    return build_straight_level


@pytest.fixture
def straight_generator():
    return StraightLevelGenerator()


@pytest.fixture
def game(clock, straight_generator):
    """Medium difficulty game on an 800x600 straight corridor."""
    return WireGameMode(
        canvas_width=800,
        canvas_height=600,
        difficulty='medium',
        policy='corridor',
        generator=straight_generator,
        time_source=clock,
    )


@pytest.fixture
def playing_game(game):
    """Game already started at medium difficulty."""
    game.start()
    return game


def run_ticks(game, clock, count: int, step_ms: int = 16) -> None:
    """Advance the clock and tick the game `count` times."""
    for _ in range(count):
        clock.advance(step_ms)
        game.tick()


@pytest.fixture
def ticker(clock):
    """Bound run_ticks helper: ticker(game, count, step_ms=16)."""
    def _tick(game, count, step_ms=16):
        run_ticks(game, clock, count, step_ms)
    return _tick
