from dataclasses import dataclass
from typing import List, Tuple

from .geometry import DIRECTIONS

WALL = True
OPEN = False


@dataclass
class Grid:
    """Square row-major cell buffer. True is wall, False is open."""

    cells: List[bool]
    size: int

    @classmethod
    def filled(cls, size: int, value: bool) -> "Grid":
        if size < 1:
            raise ValueError(f"grid size must be positive, got {size}")
        return cls(cells=[value] * (size * size), size=size)

    def idx(self, x: int, y: int) -> int:
        return y * self.size + x

    def get(self, x: int, y: int) -> bool:
        return self.cells[self.idx(x, y)]

    def set(self, x: int, y: int, v: bool) -> None:
        self.cells[self.idx(x, y)] = v

    def is_open(self, x: int, y: int) -> bool:
        return not self.cells[self.idx(x, y)]

    def in_interior(self, x: int, y: int) -> bool:
        return 1 <= x <= self.size - 2 and 1 <= y <= self.size - 2

    def open_neighbour_count(self, x: int, y: int) -> int:
        # Caller guarantees (x, y) is interior, so all four neighbours exist.
        count = 0
        for d in DIRECTIONS:
            dx, dy = d.step
            if self.is_open(x + dx, y + dy):
                count += 1
        return count

    def draw_border(self) -> None:
        last = self.size - 1
        for n in range(self.size):
            self.set(n, 0, WALL)
            self.set(n, last, WALL)
            self.set(0, n, WALL)
            self.set(last, n, WALL)

    def frozen(self) -> Tuple[bool, ...]:
        return tuple(self.cells)
