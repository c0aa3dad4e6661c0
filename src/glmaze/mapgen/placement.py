# src/glmaze/mapgen/placement.py
# Start and exit placement by rejection sampling. Both loops are unbounded:
# both generators leave at least one open cell just inside each border,
# so a hit always exists.

import logging
from typing import Tuple

from ..geometry import Direction, Point, random_direction
from ..grid import Grid, OPEN
from ..rng import PcgRandom

logger = logging.getLogger(__name__)


def place_start(grid: Grid, rng: PcgRandom) -> Point:
    """Sample interior points (x, then y) until one is open."""
    hi = grid.size - 2
    attempts = 0
    while True:
        attempts += 1
        x = rng.between(1, hi)
        y = rng.between(1, hi)
        if grid.is_open(x, y):
            logger.debug("start (%d, %d) after %d attempts", x, y, attempts)
            return Point(x, y)


def exit_cells(size: int, border: Direction, index: int) -> Tuple[Point, Point]:
    """Return (interior cell, border hole) for `index` along `border`."""
    last = size - 1
    if border is Direction.TOP:
        return Point(index, 1), Point(index, 0)
    if border is Direction.BOTTOM:
        return Point(index, last - 1), Point(index, last)
    if border is Direction.LEFT:
        return Point(1, index), Point(0, index)
    return Point(last - 1, index), Point(last, index)


def place_exit(grid: Grid, rng: PcgRandom) -> Tuple[Point, Direction]:
    """
    Sample (index, border) until the cell just inside that border is open,
    then pierce the ring next to it. This is the only write to the grid after
    the generator returns.
    """
    hi = grid.size - 2
    attempts = 0
    while True:
        attempts += 1
        index = rng.between(1, hi)
        border = random_direction(rng)
        inner, hole = exit_cells(grid.size, border, index)
        if grid.is_open(inner.x, inner.y):
            grid.set(hole.x, hole.y, OPEN)
            logger.debug("exit (%d, %d) through %s after %d attempts",
                         inner.x, inner.y, border.value, attempts)
            return inner, border
