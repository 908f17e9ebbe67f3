from __future__ import annotations

import argparse
import logging
from typing import Dict

import pygame

from falling_blocks.game import Action, FallingBlockGame, GameConfig
from .renderer import Renderer


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_UP: Action.ROTATE,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_SPACE: Action.HARD_DROP,
}

START_KEYS = (pygame.K_RETURN, pygame.K_r)


def handle_key(game: FallingBlockGame, key: int) -> None:
    """Forward one key press to the engine."""
    if key in START_KEYS:
        if not game.running and not game.paused:
            game.start()
        elif key == pygame.K_r:
            game.start()
        return
    if key == pygame.K_p:
        if game.paused:
            game.resume()
        else:
            game.pause()
        return
    action = KEY_TO_ACTION.get(key)
    if action is not None and game.running:
        game.step(action)


def run(seed: int | None = None, fps: int = 60) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = FallingBlockGame(GameConfig(random_seed=seed))
        renderer = Renderer()
        screen = pygame.display.set_mode(renderer.window_size(game))
        pygame.display.set_caption("Falling Blocks")

        running = True
        while running:
            delta_ms = clock.tick(fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        handle_key(game, event.key)

            if game.running:
                game.advance(delta_ms)
            renderer.draw(screen, game)
    finally:
        pygame.quit()


def main() -> None:
    p = argparse.ArgumentParser(description="Play Falling Blocks with the keyboard")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--fps", type=int, default=60)
    args = p.parse_args()
    logging.basicConfig(level=logging.INFO, format="[FALLING_BLOCKS] %(asctime)s - %(message)s")
    run(seed=args.seed, fps=args.fps)


if __name__ == "__main__":  # pragma: no cover
    main()
