import pytest

from glmaze.config import GeneratorKind, MazeConfig, MazeSizeError
from glmaze.geometry import Point
from glmaze.mapgen.analysis import border_openings, flood_fill, is_perfect, open_cells
from glmaze.mapgen.generator import MazeGenerator, generate_maze

DFS, RD = GeneratorKind.DFS, GeneratorKind.RD
CASES = [
    (DFS, 11, "abc"), (DFS, 20, "glmaze"), (DFS, 33, "x"),
    (RD, 10, "x"), (RD, 25, "test"), (RD, 40, "forty"),
]

def built(kind, size, seed):
    gen = MazeGenerator(kind, size, seed)
    gen.generate()
    return gen

def test_dfs_same_inputs_same_maze():
    a = built(DFS, 11, "abc")
    b = built(DFS, 11, "abc")
    assert a.get_maze_array() == b.get_maze_array()
    assert a.get_start_position() == b.get_start_position()
    assert a.get_exit() == b.get_exit()
    assert a.get_end_border() == b.get_end_border()

def test_determinism_all_cases():
    for kind, size, seed in CASES:
        assert generate_maze(kind, size, seed) == generate_maze(kind, size, seed), f"{kind} {size} {seed}"

def test_rd_even_size_bumped():
    gen = built(RD, 10, "x")
    assert gen.get_maze_size() == 11
    assert len(gen.get_maze_array()) == 121

def test_dfs_keeps_even_size():
    assert built(DFS, 10, "x").get_maze_size() == 10

def test_border_has_single_exit_hole():
    for kind, size, seed in CASES:
        r = generate_maze(kind, size, seed)
        hole = r.exit.moved(r.exit_border)
        assert border_openings(r.cells, r.size) == [hole], f"{kind} {size} {seed}"
        assert not r.is_wall(*r.exit)

def test_start_is_open_interior():
    for kind, size, seed in CASES:
        r = generate_maze(kind, size, seed)
        assert 1 <= r.start.x <= r.size - 2 and 1 <= r.start.y <= r.size - 2
        assert not r.is_wall(*r.start)

def test_dfs_is_perfect_with_exit():
    for kind, size, seed in CASES:
        if kind is DFS:
            r = generate_maze(kind, size, seed)
            assert is_perfect(r.cells, r.size), f"{size} {seed}"

def test_rd_flood_fill_covers_everything():
    r = generate_maze(RD, 25, "test")
    reached = flood_fill(r.cells, r.size, r.start)
    assert reached == open_cells(r.cells, r.size)
    assert r.exit in reached

def test_exit_reachable_from_start():
    for kind, size, seed in CASES:
        r = generate_maze(kind, size, seed)
        assert r.exit in flood_fill(r.cells, r.size, r.start)

def test_string_kind_and_config():
    a = MazeGenerator("dfs", 15, "cfg").generate()
    b = MazeGenerator.from_config(MazeConfig(DFS, 15, "cfg")).generate()
    assert a == b and a.kind is DFS

def test_result_is_immutable():
    gen = built(RD, 11, "frozen")
    with pytest.raises(TypeError):
        gen.get_maze_array()[0] = False
    with pytest.raises(AttributeError):
        gen.result.size = 3

def test_accessors_before_generate():
    gen = MazeGenerator(RD, 11, "early")
    with pytest.raises(RuntimeError):
        gen.get_maze_array()
    with pytest.raises(RuntimeError):
        gen.get_exit()

def test_generate_only_once():
    gen = built(DFS, 11, "once")
    with pytest.raises(RuntimeError):
        gen.generate()

def test_size_precondition():
    with pytest.raises(MazeSizeError):
        MazeGenerator(DFS, 6, "small").generate()
    with pytest.raises(MazeSizeError):
        MazeGenerator(RD, 3, "small").generate()
    assert generate_maze(DFS, 7, "small").size == 7
    assert generate_maze(RD, 4, "small").size == 5

def test_empty_seed_rejected():
    with pytest.raises(ValueError):
        MazeGenerator(RD, 11, "").generate()

def test_start_and_exit_are_points():
    r = generate_maze(DFS, 11, "abc")
    assert isinstance(r.start, Point) and isinstance(r.exit, Point)

def test_unknown_kind_rejected():
    with pytest.raises(ValueError):
        MazeGenerator(3, 11, "x")
    with pytest.raises(ValueError):
        MazeGenerator(None, 11, "x")
