"""Pygame renderer for the wire game.

Reads the game's query surface once per frame and draws it. Never feeds
anything back into the game.
"""
import math
from typing import Optional

import pygame

from models.wire import CollisionPolicy, EffectKind, GameState
from games.WireGame import config
from games.WireGame.collision import goal_bounds
from games.WireGame.effects import PendingEffect
from games.WireGame.errors import StaleStateError
from games.WireGame.game_mode import WireGameMode

_BURST_SPOKES = 24
_BURST_RADIUS = 80.0


def format_time(ms: int) -> str:
    """Format milliseconds as M:SS.mmm."""
    minutes, rem = divmod(max(0, ms), 60_000)
    seconds, millis = divmod(rem, 1000)
    return f"{minutes}:{seconds:02d}.{millis:03d}"


class WireRenderer:
    """Draws level, character, HUD and terminal effects."""

    def __init__(self, font_size: int = 24):
        if not pygame.font.get_init():
            pygame.font.init()
        self._font = pygame.font.Font(None, font_size)

    def render(self, screen: pygame.Surface, game: WireGameMode) -> None:
        """Draw one frame of the game onto a surface."""
        screen.fill(config.BACKGROUND_COLOR.as_rgb_tuple)

        self._render_level(screen, game)

        self._render_hud(screen, game)

        effect = game.pending_effect
        if effect is not None:
            self._render_effect(screen, effect, game.now_ms())

    def _render_level(self, screen: pygame.Surface, game: WireGameMode) -> None:
        try:
            level = game.level
            character = game.character
        except StaleStateError:
            return

        for sample in level.path:
            pygame.draw.circle(
                screen, config.CORRIDOR_COLOR.as_rgb_tuple,
                (int(sample.x), int(sample.y)), max(1, int(sample.half_width)),
            )

        if level.policy == CollisionPolicy.RECTANGLE:
            for wall in level.boundaries:
                pygame.draw.rect(screen, config.WALL_COLOR.as_rgb_tuple,
                                 pygame.Rect(*wall.as_tuple()))

        pygame.draw.rect(screen, config.GOAL_COLOR.as_rgb_tuple,
                         pygame.Rect(*goal_bounds(level).as_tuple()), 2)
        pygame.draw.rect(screen, config.CHARACTER_COLOR.as_rgb_tuple,
                         pygame.Rect(*character.bounds().as_tuple()))

    def _render_hud(self, screen: pygame.Surface, game: WireGameMode) -> None:
        lines = [
            f"Time {format_time(game.get_score())}",
            f"{game.difficulty.value}  [{game.state.value}]",
        ]
        hint = self._hint_for(game.state)
        if hint:
            lines.append(hint)

        y = 8
        for line in lines:
            text = self._font.render(line, True, config.HUD_COLOR.as_rgb_tuple)
            screen.blit(text, (8, y))
            y += text.get_height() + 2

    @staticmethod
    def _hint_for(state: GameState) -> Optional[str]:
        if state == GameState.MENU:
            return "SPACE to start, 1-4 difficulty"
        if state == GameState.PAUSED:
            return "Paused - P to resume"
        if state.is_terminal:
            return "R to return to menu"
        return None

    def _render_effect(self, screen: pygame.Surface, effect: PendingEffect, now_ms: int) -> None:
        """Radial burst that grows and fades over the effect's duration."""
        progress = effect.progress(now_ms)
        colors = (config.EXPLOSION_COLORS if effect.kind == EffectKind.COLLISION
                  else config.CONFETTI_COLORS)
        origin = effect.trigger.point
        radius = _BURST_RADIUS * progress
        size = max(1, int(6 * (1.0 - progress)))

        for i in range(_BURST_SPOKES):
            angle = 2 * math.pi * i / _BURST_SPOKES
            x = origin.x + math.cos(angle) * radius
            y = origin.y + math.sin(angle) * radius
            pygame.draw.circle(screen, colors[i % len(colors)].as_rgb_tuple, (int(x), int(y)), size)
