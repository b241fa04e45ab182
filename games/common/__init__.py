"""Shared game types."""

from games.common.game_state import GameState
from games.common.base_game import BaseGame

__all__ = [
    'GameState',
    'BaseGame',
]
