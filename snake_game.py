#!/usr/bin/env python3
"""
Obstacle Snake Game
A grid snake game where every meal drops obstacles onto the board

Features:
- Snake moves on its own, arrow keys turn and step at once
- Obstacles chain onto each other as the snake keeps eating
- Automatic restart one second after a crash

Run with: python snake_game.py
For headless testing: SDL_VIDEODRIVER=dummy python snake_game.py --headless
"""

import argparse
import logging
import os
import random
import sys
from typing import List, Optional

import pygame

from drawing import to_coord
from game import Game

# Constants
GRID_WIDTH = 20
GRID_HEIGHT = 20
WINDOW_WIDTH = to_coord(GRID_WIDTH)
WINDOW_HEIGHT = to_coord(GRID_HEIGHT)
FPS = 60
HEADLESS_FRAMES = 300

BACK_COLOR = (52, 73, 94)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Obstacle snake game")
    parser.add_argument("--headless", action="store_true",
                        help="Simulate a fixed number of frames without a window")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food and obstacle placement")
    parser.add_argument("--verbose", action="store_true",
                        help="Log every game event")
    return parser.parse_args(argv)


def is_headless(args: argparse.Namespace) -> bool:
    return args.headless or os.environ.get('SDL_VIDEODRIVER') == 'dummy'


def handle_events(game: Game) -> bool:
    """Forward key presses to the game, return False to quit"""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            game.key_pressed(event.key)

    return True


def draw_frame(game: Game, screen: pygame.Surface):
    screen.fill(BACK_COLOR)
    game.draw(screen)
    pygame.display.flip()


def run(game: Game, screen: pygame.Surface, clock: pygame.time.Clock):
    """Main game loop"""
    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0

        running = handle_events(game)
        game.update(dt)
        draw_frame(game, screen)


def run_headless(game: Game, screen: pygame.Surface, frames: int = HEADLESS_FRAMES) -> Game:
    """Run a fixed number of frames at a steady frame time"""
    dt = 1.0 / FPS
    for _ in range(frames):
        handle_events(game)
        game.update(dt)
        draw_frame(game, screen)
    return game


def main(argv: Optional[List[str]] = None) -> Game:
    """Entry point"""
    args = parse_args(argv)
    headless = is_headless(args)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    # SDL drivers must be picked before pygame init
    if headless:
        os.environ['SDL_VIDEODRIVER'] = 'dummy'
        os.environ['SDL_AUDIODRIVER'] = 'dummy'

    pygame.init()
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption("Snake")

    rng = random.Random(args.seed)
    game = Game(GRID_WIDTH, GRID_HEIGHT, rng)

    try:
        if headless:
            print("Running in headless mode for testing...")
            run_headless(game, screen)
            print(f"Headless test complete. Length: {len(game.snake.body)}, "
                  f"obstacles: {len(game.obstacles)}")
        else:
            run(game, screen, pygame.time.Clock())
    finally:
        pygame.quit()

    return game


if __name__ == "__main__":
    main(sys.argv[1:])
