"""
Drawing primitives in grid units on top of pygame surfaces
"""

from typing import Tuple, Union

import pygame

Color = Union[Tuple[int, int, int], Tuple[int, int, int, int]]

# Pixels per grid cell
BLOCK_SIZE = 25


def to_coord(game_coord: int) -> int:
    """Convert a grid coordinate to screen pixels"""
    return game_coord * BLOCK_SIZE


def draw_block(color: Color, x: int, y: int, surface: pygame.Surface):
    """Fill a single grid cell"""
    rect = pygame.Rect(to_coord(x), to_coord(y), BLOCK_SIZE, BLOCK_SIZE)
    pygame.draw.rect(surface, color, rect)


def draw_rectangle(color: Color, x: int, y: int, width: int, height: int,
                   surface: pygame.Surface):
    """Fill a rectangle given in grid cells, blending translucent colors"""
    rect = pygame.Rect(to_coord(x), to_coord(y), to_coord(width), to_coord(height))

    if len(color) == 4 and color[3] < 255:
        overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        overlay.fill(color)
        surface.blit(overlay, rect.topleft)
    else:
        pygame.draw.rect(surface, color, rect)
