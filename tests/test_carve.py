from glmaze.grid import Grid, OPEN, WALL
from glmaze.mapgen.analysis import border_openings, is_perfect, open_cells
from glmaze.mapgen.carve import can_carve, carve_maze
from glmaze.rng import PcgRandom

CASES = [(7, "tiny"), (11, "abc"), (12, "even"), (21, "seed-21"), (40, "forty"), (75, "big")]

def carve(size, seed):
    return carve_maze(size, PcgRandom.from_seed(seed))

def test_open_cells_form_a_tree():
    for size, seed in CASES:
        g = carve(size, seed)
        assert is_perfect(g.cells, size), f"cycle or split region for size={size} seed={seed}"

def test_border_stays_solid():
    for size, seed in CASES:
        g = carve(size, seed)
        assert border_openings(g.cells, size) == [], f"border carved for size={size} seed={seed}"

def test_reaches_every_side():
    # placement relies on an open cell just inside each border
    for size, seed in CASES:
        g = carve(size, seed)
        last = size - 2
        assert any(g.is_open(x, 1) for x in range(1, last + 1))
        assert any(g.is_open(x, last) for x in range(1, last + 1))
        assert any(g.is_open(1, y) for y in range(1, last + 1))
        assert any(g.is_open(last, y) for y in range(1, last + 1))

def test_no_open_two_by_two_blocks():
    for size, seed in CASES:
        g = carve(size, seed)
        for y in range(size - 1):
            for x in range(size - 1):
                block = [g.is_open(x, y), g.is_open(x + 1, y), g.is_open(x, y + 1), g.is_open(x + 1, y + 1)]
                assert not all(block), f"open 2x2 at ({x},{y}) size={size} seed={seed}"

def test_same_seed_same_grid():
    assert carve(31, "repeat").cells == carve(31, "repeat").cells
    assert carve(31, "repeat").cells != carve(31, "other").cells

def test_large_grid_does_not_hit_recursion_limit():
    g = carve(301, "deep")
    assert len(open_cells(g.cells, 301)) > 301 * 301 // 4

def test_can_carve_rules():
    g = Grid.filled(7, WALL)
    g.set(3, 3, OPEN)
    assert not can_carve(g, 0, 3)      # border
    assert not can_carve(g, 3, 6)      # border
    assert not can_carve(g, 3, 3)      # already open
    assert can_carve(g, 3, 2)          # one open neighbour
    assert can_carve(g, 1, 1)          # isolated wall is allowed
    g.set(2, 2, OPEN)
    assert not can_carve(g, 3, 2)      # (2,2) and (3,3) both touch it
