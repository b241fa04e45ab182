"""Common GameState enum.

The state tag is what the rendering and score-submission collaborators
read once per frame, so its string values are stable.
"""
from enum import Enum


class GameState(str, Enum):
    """Top-level game states.

    States:
        MENU: Difficulty selection; no run in progress (initial state)
        PLAYING: Active run; timer running, input enabled
        PAUSED: Run suspended; timer excludes the paused interval
        GAME_OVER: Run ended by touching a boundary (terminal)
        VICTORY: Run ended by reaching the goal (terminal)
    """
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "gameover"
    VICTORY = "victory"

    @property
    def is_terminal(self) -> bool:
        """True for GAME_OVER and VICTORY; both need restart() to play again."""
        return self in (GameState.GAME_OVER, GameState.VICTORY)
