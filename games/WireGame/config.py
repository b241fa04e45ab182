"""Configuration for the wire game.

Contains screen dimensions, level generation constants, collision and
effect constants, colors and the difficulty table.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Union

from dotenv import load_dotenv

from models import Color
from models.wire import CollisionPolicy, Difficulty
from games.WireGame.errors import InvalidDifficultyError

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


def _get_str(key: str, default: str) -> str:
    """Get string from environment."""
    return os.getenv(key, default)


# Display settings
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 800)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 600)
FPS = _get_int('FPS', 60)

# Character
CHARACTER_SIZE = _get_float('CHARACTER_SIZE', 10.0)

# Default collision policy: 'corridor' (strict tube) or 'rectangle' (wall blocks)
COLLISION_POLICY = CollisionPolicy(_get_str('COLLISION_POLICY', 'corridor'))

# Level generation (pixels)
START_MARGIN_X = 50.0       # Start waypoint distance from left edge
GOAL_MARGIN_X = 50.0        # Goal waypoint distance from right edge
VERTICAL_INSET = 100.0      # Waypoints stay this far from top/bottom
MIN_WAYPOINTS = 3           # Interior waypoints, inclusive range
MAX_WAYPOINTS = 5
WAYPOINT_JITTER_X = 50.0    # Total horizontal jitter range per waypoint
CURVE_JITTER = 30.0         # Total jitter range of the curve control point
SAMPLE_SPACING = 5.0        # One path sample per this many pixels of segment length
WALL_THICKNESS = 20.0       # Side of each wall block (rectangle policy)
FENCE_THICKNESS = 50.0      # Canvas-edge fence (rectangle policy)
MIN_CANVAS_WIDTH = 300
MIN_CANVAS_HEIGHT = 300

# Collision
GOAL_SIZE = 30.0            # Goal hit-box side, independent of difficulty
EDGE_MARGIN = 20.0          # Corridor policy: centre must stay this far inside the canvas

# Terminal effects (milliseconds)
EXPLOSION_DURATION_MS = 1500
VICTORY_DURATION_MS = 2500

# Colors
BACKGROUND_COLOR = Color(r=20, g=20, b=30)
CORRIDOR_COLOR = Color(r=50, g=60, b=90)
WALL_COLOR = Color(r=200, g=70, b=70)
GOAL_COLOR = Color(r=255, g=215, b=0)
CHARACTER_COLOR = Color(r=100, g=220, b=255)
HUD_COLOR = Color(r=220, g=220, b=220)
EXPLOSION_COLORS: List[Color] = [
    Color(r=255, g=80, b=40),
    Color(r=255, g=160, b=40),
    Color(r=255, g=230, b=120),
]
CONFETTI_COLORS: List[Color] = [
    Color(r=255, g=100, b=100),
    Color(r=100, g=255, b=100),
    Color(r=100, g=150, b=255),
    Color(r=255, g=230, b=80),
]


@dataclass(frozen=True)
class DifficultySetting:
    """Corridor width and character speed for one difficulty tag.

    Values are part of the contract with the leaderboard and must not
    change.
    """

    corridor_width: float   # Full corridor width in pixels
    speed: float            # Character speed in pixels per tick


DIFFICULTY_SETTINGS: Dict[Difficulty, DifficultySetting] = {
    Difficulty.EASY: DifficultySetting(corridor_width=100, speed=2),
    Difficulty.MEDIUM: DifficultySetting(corridor_width=60, speed=3),
    Difficulty.HARD: DifficultySetting(corridor_width=40, speed=4),
    Difficulty.SUPER_HARD: DifficultySetting(corridor_width=30, speed=6),
}


def resolve_difficulty(value: Union[str, Difficulty]) -> Difficulty:
    """Map an exact difficulty tag to its enum member.

    Raises:
        InvalidDifficultyError: If value is not one of the four tags
    """
    if isinstance(value, Difficulty):
        return value
    if not isinstance(value, str):
        raise InvalidDifficultyError(value)
    try:
        return Difficulty(value)
    except ValueError:
        raise InvalidDifficultyError(value) from None


def get_difficulty_setting(value: Union[str, Difficulty]) -> DifficultySetting:
    """Get the difficulty setting by tag. Unknown tags raise, no fallback."""
    return DIFFICULTY_SETTINGS[resolve_difficulty(value)]
