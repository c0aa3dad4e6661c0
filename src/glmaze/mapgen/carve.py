# src/glmaze/mapgen/carve.py
# Randomized depth-first carver. Starts from a solid grid and opens a
# spanning tree of corridors.

import logging
from typing import List, Tuple

from ..geometry import DIRECTIONS, random_direction
from ..grid import Grid, OPEN, WALL
from ..rng import PcgRandom

logger = logging.getLogger(__name__)

# Seed cell keeps this many cells between itself and every border.
SEED_MARGIN = 3


def can_carve(grid: Grid, x: int, y: int) -> bool:
    """
    A wall cell joins the carved region only if it stays inside the border
    and touches at most one open cell. That single-attachment rule is what
    keeps the open cells a tree.
    """
    if not grid.in_interior(x, y):
        return False
    if grid.is_open(x, y):
        return False
    return grid.open_neighbour_count(x, y) <= 1


def carve_maze(size: int, rng: PcgRandom) -> Grid:
    grid = Grid.filled(size, WALL)

    x = rng.between(SEED_MARGIN, size - 1 - SEED_MARGIN)
    y = rng.between(SEED_MARGIN, size - 1 - SEED_MARGIN)
    grid.set(x, y, OPEN)

    dx, dy = random_direction(rng).step
    carved = 1

    # Worklist of candidate cells. Popping from the end visits candidates in
    # the same order as the recursive backtracker, so shuffles are drawn in
    # the same sequence.
    pending: List[Tuple[int, int]] = [(x + dx, y + dy)]
    while pending:
        cx, cy = pending.pop()
        if not can_carve(grid, cx, cy):
            continue
        grid.set(cx, cy, OPEN)
        carved += 1

        order = rng.shuffled(DIRECTIONS)
        for d in reversed(order):
            sx, sy = d.step
            pending.append((cx + sx, cy + sy))

    logger.debug("DFS carved %d cells from seed (%d, %d) in %dx%d grid", carved, x, y, size, size)
    return grid
