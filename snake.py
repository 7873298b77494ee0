"""
Snake body and movement on the game grid
"""

from collections import deque
from enum import Enum
from itertools import islice
from typing import Optional, Tuple

import pygame

from drawing import draw_block

SNAKE_COLOR = (46, 204, 112)


class Direction(Enum):
    """Grid step (dx, dy) for each heading, y grows downward"""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def opposite(self) -> 'Direction':
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """
    Snake made of grid cells.

    body: deque of (x, y) from head at index 0 to tail at the end
    direction: current heading
    tail: the cell removed by the last move, kept so eating can put it back
    """

    def __init__(self, x: int, y: int):
        self.body: deque = deque([(x, y), (x - 1, y), (x - 2, y)])
        self.direction = Direction.RIGHT
        self.tail: Optional[Tuple[int, int]] = None

    def head_direction(self) -> Direction:
        return self.direction

    def head_position(self) -> Tuple[int, int]:
        return self.body[0]

    def next_head_position(self, direction: Optional[Direction] = None) -> Tuple[int, int]:
        """Where the head lands on the next move, without moving"""
        if direction is None:
            direction = self.direction
        head_x, head_y = self.body[0]
        dx, dy = direction.value
        return (head_x + dx, head_y + dy)

    def move_forward(self, direction: Optional[Direction] = None):
        """Advance one cell, turning first if a direction is given"""
        if direction is not None:
            self.direction = direction

        self.body.appendleft(self.next_head_position())
        self.tail = self.body.pop()

    def restore_last_removed(self):
        """
        Grow by one segment by re-attaching the tail dropped by the last move.

        Only valid once, right after move_forward.
        """
        if self.tail is None:
            return
        self.body.append(self.tail)
        self.tail = None

    def is_overlap_except_tail(self, x: int, y: int) -> bool:
        # The tail cell is vacated on the same tick the head moves
        return (x, y) in islice(self.body, len(self.body) - 1)

    def draw(self, surface: pygame.Surface):
        for x, y in self.body:
            draw_block(SNAKE_COLOR, x, y, surface)
