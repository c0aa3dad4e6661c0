# src/glmaze/mapgen/analysis.py
# Read-only checks over a finished cell buffer: flood fill, edge counting,
# border openings. Used by the tests and by tools/mazetool.py.

from collections import deque
from typing import List, Sequence, Set

from ..geometry import DIRECTIONS, Point


def _open(cells: Sequence[bool], size: int, x: int, y: int) -> bool:
    return 0 <= x < size and 0 <= y < size and not cells[y * size + x]


def open_cells(cells: Sequence[bool], size: int) -> Set[Point]:
    return {Point(i % size, i // size) for i, wall in enumerate(cells) if not wall}


def flood_fill(cells: Sequence[bool], size: int, start: Point) -> Set[Point]:
    """Every open cell reachable from `start` through 4-adjacency."""
    if not _open(cells, size, start.x, start.y):
        return set()
    seen = {start}
    queue = deque([start])
    while queue:
        p = queue.popleft()
        for d in DIRECTIONS:
            q = p.moved(d)
            if q not in seen and _open(cells, size, q.x, q.y):
                seen.add(q)
                queue.append(q)
    return seen


def count_open_edges(cells: Sequence[bool], size: int) -> int:
    # Count each adjacency once: right and down neighbours only.
    edges = 0
    for y in range(size):
        for x in range(size):
            if cells[y * size + x]:
                continue
            if _open(cells, size, x + 1, y):
                edges += 1
            if _open(cells, size, x, y + 1):
                edges += 1
    return edges


def border_openings(cells: Sequence[bool], size: int) -> List[Point]:
    last = size - 1
    out = []
    for y in range(size):
        for x in range(size):
            on_ring = x in (0, last) or y in (0, last)
            if on_ring and not cells[y * size + x]:
                out.append(Point(x, y))
    return out


def is_perfect(cells: Sequence[bool], size: int) -> bool:
    """True when the open cells form a tree: connected, edges == cells - 1."""
    opened = open_cells(cells, size)
    if not opened:
        return False
    if count_open_edges(cells, size) != len(opened) - 1:
        return False
    first = min(opened)
    return len(flood_fill(cells, size, first)) == len(opened)
