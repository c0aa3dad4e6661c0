# src/glmaze/render/palette.py
from __future__ import annotations

from functools import lru_cache

import pygame

from .colors import COLORS, cell_kind


class CellPalette:
    """
    Cached solid-colour cell surfaces for the pygame viewer:
      - one surface per cell kind (wall, floor, start, exit, hole)
      - returns pygame.Surface of exactly (cell_size, cell_size)
    """
    def __init__(self, cell_size: int):
        self.cell_size = cell_size

    @lru_cache(maxsize=16)
    def get(self, kind: str) -> pygame.Surface:
        img = pygame.Surface((self.cell_size, self.cell_size), pygame.SRCALPHA)
        img.fill(COLORS[kind])
        return img

    def for_cell(self, result, x: int, y: int) -> pygame.Surface:
        return self.get(cell_kind(result, x, y))

    def blit_maze(self, screen: pygame.Surface, result, offset=(0, 0)) -> None:
        ox, oy = offset
        cs = self.cell_size
        for y in range(result.size):
            for x in range(result.size):
                screen.blit(self.for_cell(result, x, y), (ox + x * cs, oy + y * cs))
