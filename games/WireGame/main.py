#!/usr/bin/env python3
"""Wire Game - Standalone entry point.

Controls:
    Arrow keys / WASD   change heading
    SPACE / ENTER       start a run
    1-4                 pick difficulty (menu)
    P                   pause / resume
    R                   back to menu
    ESC                 quit
"""

import argparse
import os
import sys

import pygame

# Add project root to path
_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _root not in sys.path:
    sys.path.insert(0, _root)

from models.wire import Difficulty, GameState, RunResult
from games.WireGame import config, game_info
from games.WireGame.input.sources import KeyboardDirectionSource
from games.WireGame.renderer import WireRenderer
from iraira.logging import FileSink, close_all_sinks, get_logger, register_sink

log = get_logger('main')

DIFFICULTY_KEYS = {
    pygame.K_1: Difficulty.EASY,
    pygame.K_2: Difficulty.MEDIUM,
    pygame.K_3: Difficulty.HARD,
    pygame.K_4: Difficulty.SUPER_HARD,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=game_info.DESCRIPTION)
    for arg_def in game_info.ARGUMENTS:
        kwargs = {k: arg_def[k] for k in ('type', 'default', 'help', 'choices') if k in arg_def}
        parser.add_argument(arg_def['name'], **kwargs)
    parser.add_argument('--width', type=int, default=config.SCREEN_WIDTH)
    parser.add_argument('--height', type=int, default=config.SCREEN_HEIGHT)
    parser.add_argument('--log-runs', action='store_true',
                        help='Write one JSON line per finished run to the log directory')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.log_runs:
        register_sink('runs', FileSink())

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption(game_info.NAME)

    game = game_info.get_game_mode(
        difficulty=args.difficulty,
        policy=args.policy,
        width=args.width,
        height=args.height,
        auto_finish_effects=True,
    )
    game.add_result_listener(_announce_result)

    keyboard = KeyboardDirectionSource()
    renderer = WireRenderer()
    clock = pygame.time.Clock()
    selected = game.difficulty

    running = True
    while running:
        clock.tick(config.FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif keyboard.handle_event(event):
                continue
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in (pygame.K_SPACE, pygame.K_RETURN):
                    if game.state == GameState.MENU:
                        game.start(selected)
                elif event.key in DIFFICULTY_KEYS and game.state == GameState.MENU:
                    selected = DIFFICULTY_KEYS[event.key]
                    log.info("Difficulty: %s", selected.value)
                elif event.key == pygame.K_p:
                    if game.state == GameState.PLAYING:
                        game.pause()
                    elif game.state == GameState.PAUSED:
                        game.resume()
                elif event.key == pygame.K_r:
                    game.restart()

        game.handle_input(keyboard.poll_events())
        game.tick()
        renderer.render(screen, game)
        pygame.display.flip()

    game.destroy()
    close_all_sinks()
    pygame.quit()
    return 0


def _announce_result(result: RunResult) -> None:
    if result.is_victory:
        log.info("Goal reached in %d ms (%s)", result.score_ms, result.difficulty.value)
    else:
        log.info("Crashed after %d ms (%s)", result.score_ms, result.difficulty.value)


if __name__ == "__main__":
    sys.exit(main())
