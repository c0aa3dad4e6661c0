# src/glmaze/mapgen/generator.py
# Maze orchestrator: picks the algorithm, normalizes the size, then places
# start and exit on the finished grid.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple, Union

from ..config import MIN_SIZE, GeneratorKind, MazeConfig, MazeSizeError
from ..geometry import Direction, Point
from ..grid import Grid
from ..rng import PcgRandom
from .carve import carve_maze
from .divide import divide_maze
from .placement import place_exit, place_start

logger = logging.getLogger(__name__)

GENERATORS: Dict[GeneratorKind, Callable[[int, PcgRandom], Grid]] = {
    GeneratorKind.DFS: carve_maze,
    GeneratorKind.RD: divide_maze,
}


@dataclass(frozen=True)
class GeneratorResult:
    kind: GeneratorKind
    size: int
    start: Point
    exit: Point
    exit_border: Direction
    cells: Tuple[bool, ...]

    def is_wall(self, x: int, y: int) -> bool:
        return self.cells[y * self.size + x]


def effective_size(kind: GeneratorKind, size: int) -> int:
    # Recursive division needs interior cells on odd indices.
    if kind is GeneratorKind.RD and size % 2 == 0:
        return size + 1
    return size


class MazeGenerator:
    """
    Build once, call generate() once, then read through the accessors.

    The seed is expanded only inside generate(), so construction has no side
    effects. Identical (kind, size, seed) always yields the same result.
    """

    def __init__(self, kind: Union[GeneratorKind, str], size: int, seed: str):
        if isinstance(kind, str):
            kind = GeneratorKind.parse(kind)
        if kind not in GENERATORS:
            raise ValueError(f"unknown generator kind: {kind!r}")
        self.kind = kind
        self.requested_size = size
        self.seed = seed
        self._result: Optional[GeneratorResult] = None

    @classmethod
    def from_config(cls, config: MazeConfig) -> "MazeGenerator":
        return cls(config.kind, config.size, config.seed)

    def generate(self) -> GeneratorResult:
        if self._result is not None:
            raise RuntimeError("maze already generated")

        size = effective_size(self.kind, self.requested_size)
        minimum = MIN_SIZE[self.kind]
        if size < minimum:
            raise MazeSizeError(f"{self.kind.value} needs size >= {minimum}, got {size}")

        logger.info("Generating %s maze %dx%d", self.kind.label, size, size)
        rng = PcgRandom.from_seed(self.seed)

        grid = GENERATORS[self.kind](size, rng)
        # Fixed order: start, then exit.
        start = place_start(grid, rng)
        exit_point, border = place_exit(grid, rng)

        self._result = GeneratorResult(
            kind=self.kind,
            size=size,
            start=start,
            exit=exit_point,
            exit_border=border,
            cells=grid.frozen(),
        )
        return self._result

    @property
    def result(self) -> GeneratorResult:
        if self._result is None:
            raise RuntimeError("generate() has not been called")
        return self._result

    # ------------- accessors used by renderer/physics -------------
    def get_maze_array(self) -> Tuple[bool, ...]:
        return self.result.cells

    def get_maze_size(self) -> int:
        return self.result.size

    def get_start_position(self) -> Point:
        return self.result.start

    def get_exit(self) -> Point:
        return self.result.exit

    def get_end_border(self) -> Direction:
        return self.result.exit_border


def generate_maze(kind: Union[GeneratorKind, str], size: int, seed: str) -> GeneratorResult:
    return MazeGenerator(kind, size, seed).generate()
