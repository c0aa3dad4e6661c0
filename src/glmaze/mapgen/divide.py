# src/glmaze/mapgen/divide.py
# Recursive division. Works on a coarse chamber grid: chamber c sits on array
# index 2c+1, walls go on the even indices between chambers.

import logging
from dataclasses import dataclass
from typing import List, Tuple

from ..grid import Grid, OPEN, WALL
from ..rng import PcgRandom

logger = logging.getLogger(__name__)

HORIZONTAL = "horizontal"
VERTICAL = "vertical"


@dataclass(frozen=True)
class Chamber:
    # Inclusive chamber coordinates
    start_x: int
    start_y: int
    end_x: int
    end_y: int

    @property
    def width(self) -> int:
        return self.end_x - self.start_x

    @property
    def height(self) -> int:
        return self.end_y - self.start_y

    def is_divisible(self) -> bool:
        return self.width >= 1 and self.height >= 1


def chamber_count(size: int) -> int:
    return (size - 1) // 2


def get_orientation(chamber: Chamber, rng: PcgRandom) -> str:
    """Cut across the longer side; a square chamber gets a coin flip."""
    if chamber.width > chamber.height:
        return VERTICAL
    if chamber.width < chamber.height:
        return HORIZONTAL
    return HORIZONTAL if rng.below(2) == 0 else VERTICAL


def _split_horizontal(grid: Grid, c: Chamber, rng: PcgRandom) -> Tuple[Chamber, Chamber]:
    wall_field = rng.between(c.start_y, c.end_y - 1)
    row = wall_field * 2 + 2  # wall goes just below the chosen chamber row

    for col in range(c.start_x * 2 + 1, c.end_x * 2 + 3):
        grid.set(col, row, WALL)

    passage = rng.between(c.start_x, c.end_x)
    grid.set(passage * 2 + 1, row, OPEN)

    return (
        Chamber(c.start_x, c.start_y, c.end_x, wall_field),
        Chamber(c.start_x, wall_field + 1, c.end_x, c.end_y),
    )


def _split_vertical(grid: Grid, c: Chamber, rng: PcgRandom) -> Tuple[Chamber, Chamber]:
    wall_field = rng.between(c.start_x, c.end_x - 1)
    col = wall_field * 2 + 2

    for row in range(c.start_y * 2 + 1, c.end_y * 2 + 3):
        grid.set(col, row, WALL)

    passage = rng.between(c.start_y, c.end_y)
    grid.set(col, passage * 2 + 1, OPEN)

    return (
        Chamber(c.start_x, c.start_y, wall_field, c.end_y),
        Chamber(wall_field + 1, c.start_y, c.end_x, c.end_y),
    )


def divide_maze(size: int, rng: PcgRandom) -> Grid:
    if size % 2 == 0:
        raise ValueError(f"recursive division needs an odd size, got {size}")

    grid = Grid.filled(size, OPEN)
    grid.draw_border()

    fields = chamber_count(size)
    root = Chamber(0, 0, fields - 1, fields - 1)

    # Stack of (chamber, orientation). Both halves get their orientation
    # before either is divided, and the first half is finished before the
    # second, matching the recursive formulation draw for draw.
    pending: List[Tuple[Chamber, str]] = [(root, get_orientation(root, rng))]
    walls = 0
    while pending:
        chamber, orientation = pending.pop()
        if not chamber.is_divisible():
            continue

        if orientation == HORIZONTAL:
            first, second = _split_horizontal(grid, chamber, rng)
        else:
            first, second = _split_vertical(grid, chamber, rng)
        walls += 1

        first_orientation = get_orientation(first, rng)
        second_orientation = get_orientation(second, rng)
        pending.append((second, second_orientation))
        pending.append((first, first_orientation))

    logger.debug("RD drew %d walls over %dx%d chambers", walls, fields, fields)
    return grid
