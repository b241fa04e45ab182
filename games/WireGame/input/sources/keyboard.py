"""
Keyboard Input Source - arrow keys and WASD to directions.
"""
from typing import Dict, Optional

import pygame

from models.wire import Direction
from games.WireGame.input.sources.base import InputSource

KEY_DIRECTIONS: Dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}


def direction_for_key(key: int) -> Optional[Direction]:
    """Direction for a pygame key code, or None for unmapped keys."""
    return KEY_DIRECTIONS.get(key)


class KeyboardDirectionSource(InputSource):
    """Collects directions from pygame KEYDOWN events.

    Non-direction events are left for the main loop.
    """

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type != pygame.KEYDOWN:
            return False
        direction = direction_for_key(event.key)
        if direction is None:
            return False
        self._queue.append(direction)
        return True
