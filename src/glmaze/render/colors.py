from typing import Dict, Tuple

RGBA = Tuple[int, int, int, int]

WALL = "wall"
FLOOR = "floor"
START = "start"
EXIT = "exit"
HOLE = "hole"

COLORS: Dict[str, RGBA] = {
    WALL:  ( 80,  80,  80, 255),
    FLOOR: (220, 220, 220, 255),
    START: (  0, 220,   0, 255),
    EXIT:  (255, 220,   0, 255),
    HOLE:  (200, 200, 255, 255),
}


def cell_kind(result, x: int, y: int) -> str:
    """Classify one cell of a GeneratorResult for drawing."""
    if (x, y) == result.start:
        return START
    if (x, y) == result.exit:
        return EXIT
    if result.is_wall(x, y):
        return WALL
    last = result.size - 1
    if x in (0, last) or y in (0, last):
        return HOLE
    return FLOOR
