"""
Game state and tick logic for the obstacle snake game

The snake moves on its own every MOVING_PERIOD seconds and immediately on an
arrow key. Every food eaten grows the snake and drops an obstacle; obstacles
tend to chain onto the previous one, and the chance of chaining grows with
each meal until three obstacles fall per meal.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional

import pygame

from drawing import draw_block, draw_rectangle
from snake import Direction, Snake

logger = logging.getLogger(__name__)

# Colors
FOOD_COLOR = (230, 125, 33)
OBSTACLE_COLOR = (0, 0, 0)
BORDER_COLOR = (189, 195, 199)
GAMEOVER_COLOR = (232, 77, 61, 128)

# Timing, in seconds
MOVING_PERIOD = 0.08
RESTART_TIME = 1.0

# Obstacle growth
INITIAL_ATTACH_CHANCE = 0.60
ATTACH_CHANCE_STEP = 0.02
BONUS_OBSTACLE_THRESHOLD = 0.99

SNAKE_START = (2, 2)
FOOD_START = (5, 3)

ATTACH_OFFSETS = [(-1, 0), (1, 0), (0, -1), (0, 1)]

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


@dataclass(frozen=True)
class Obstacle:
    """Blocked grid cell"""
    x: int
    y: int


class Game:
    """
    Owns the snake, the food, the obstacles and the game-over timer.

    waiting_time counts seconds since the last move while playing, and
    seconds since death while the game is over.
    """

    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None):
        if width < 3 or height < 3:
            raise ValueError(f"Board {width}x{height} has no interior cells")

        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()

        self.snake = Snake(*SNAKE_START)
        self.food_exist = True
        self.food_x, self.food_y = FOOD_START
        self.is_game_over = False
        self.waiting_time = 0.0
        self.obstacles: List[Obstacle] = []
        self.attach_chance = INITIAL_ATTACH_CHANCE

    def key_pressed(self, key: int):
        """Turn and move at once on an arrow key"""
        if self.is_game_over:
            return

        direction = KEY_DIRECTIONS.get(key)
        if direction is None:
            return

        if direction == self.snake.head_direction().opposite():
            return

        self.update_snake(direction)

    def draw(self, surface: pygame.Surface):
        self.snake.draw(surface)

        if self.food_exist:
            draw_block(FOOD_COLOR, self.food_x, self.food_y, surface)

        for obstacle in self.obstacles:
            draw_block(OBSTACLE_COLOR, obstacle.x, obstacle.y, surface)

        # Border
        draw_rectangle(BORDER_COLOR, 0, 0, self.width, 1, surface)
        draw_rectangle(BORDER_COLOR, 0, self.height - 1, self.width, 1, surface)
        draw_rectangle(BORDER_COLOR, 0, 0, 1, self.height, surface)
        draw_rectangle(BORDER_COLOR, self.width - 1, 0, 1, self.height, surface)

        if self.is_game_over:
            draw_rectangle(GAMEOVER_COLOR, 0, 0, self.width, self.height, surface)

    def update(self, delta_time: float):
        """Advance the game clock by delta_time seconds"""
        self.waiting_time += delta_time

        if self.is_game_over:
            if self.waiting_time > RESTART_TIME:
                self.restart()
            return

        if not self.food_exist:
            self.add_food()

        if self.waiting_time > MOVING_PERIOD:
            self.update_snake(None)

    def random_interior_cell(self):
        return (
            self.rng.randrange(1, self.width - 1),
            self.rng.randrange(1, self.height - 1),
        )

    def add_obstacle(self):
        if self.rng.random() < self.attach_chance and self.obstacles:
            # Chain onto the latest obstacle
            last_obstacle = self.obstacles[-1]
            dx, dy = ATTACH_OFFSETS[self.rng.randrange(4)]
            new_x, new_y = last_obstacle.x + dx, last_obstacle.y + dy
        else:
            new_x, new_y = self.random_interior_cell()

        while (self.snake.is_overlap_except_tail(new_x, new_y)
               or (self.food_exist and self.food_x == new_x and self.food_y == new_y)):
            new_x, new_y = self.random_interior_cell()

        self.obstacles.append(Obstacle(new_x, new_y))
        logger.debug("Obstacle placed at (%d, %d), %d on board",
                     new_x, new_y, len(self.obstacles))

    def check_eating(self):
        head_x, head_y = self.snake.head_position()
        if self.food_exist and self.food_x == head_x and self.food_y == head_y:
            self.food_exist = False
            self.snake.restore_last_removed()
            logger.debug("Food eaten at (%d, %d), length %d",
                         head_x, head_y, len(self.snake.body))

            self.add_obstacle()
            if self.attach_chance < 1.0:
                self.attach_chance += ATTACH_CHANCE_STEP
            if self.attach_chance > BONUS_OBSTACLE_THRESHOLD:
                self.add_obstacle()
                self.add_obstacle()

    def check_if_the_snake_alive(self, direction: Optional[Direction] = None) -> bool:
        next_x, next_y = self.snake.next_head_position(direction)

        if self.snake.is_overlap_except_tail(next_x, next_y):
            logger.debug("Snake ran into itself at (%d, %d)", next_x, next_y)
            return False

        for obstacle in self.obstacles:
            if next_x == obstacle.x and next_y == obstacle.y:
                logger.debug("Snake hit an obstacle at (%d, %d)", next_x, next_y)
                return False

        inside = 0 < next_x < self.width - 1 and 0 < next_y < self.height - 1
        if not inside:
            logger.debug("Snake hit the border at (%d, %d)", next_x, next_y)
        return inside

    def add_food(self):
        new_x, new_y = self.random_interior_cell()
        while self.snake.is_overlap_except_tail(new_x, new_y):
            new_x, new_y = self.random_interior_cell()

        self.food_x = new_x
        self.food_y = new_y
        self.food_exist = True

    def update_snake(self, direction: Optional[Direction]):
        """Single move path for both key presses and the move timer"""
        if self.check_if_the_snake_alive(direction):
            self.snake.move_forward(direction)
            self.check_eating()
        else:
            self.is_game_over = True
            logger.info("Game over: length %d, %d obstacles",
                        len(self.snake.body), len(self.obstacles))
        self.waiting_time = 0.0

    def restart(self):
        self.snake = Snake(*SNAKE_START)
        self.waiting_time = 0.0
        self.food_exist = True
        self.food_x, self.food_y = FOOD_START
        self.is_game_over = False
        self.obstacles.clear()
        self.attach_chance = INITIAL_ATTACH_CHANCE
        logger.debug("Game restarted")
