# src/glmaze/geometry.py
from enum import Enum
from typing import NamedTuple, Tuple


class Direction(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @property
    def step(self) -> Tuple[int, int]:
        return _STEPS[self]


_STEPS = {
    Direction.TOP: (0, -1),
    Direction.BOTTOM: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

# Fixed order: random picks and shuffles index into this tuple.
DIRECTIONS = (Direction.TOP, Direction.BOTTOM, Direction.LEFT, Direction.RIGHT)


class Point(NamedTuple):
    x: int  # column
    y: int  # row

    def moved(self, direction: Direction) -> "Point":
        dx, dy = direction.step
        return Point(self.x + dx, self.y + dy)


def random_direction(rng) -> Direction:
    return DIRECTIONS[rng.below(len(DIRECTIONS))]
