"""Greedy best-first search over obstacle grids."""

from random import Random

from grid_route.core.cells import BLOCKED, PASSABLE, is_passable
from grid_route.core.coordinate import Coordinate, neighbors
from grid_route.core.grid import Grid
from grid_route.systems.pathfinding import FOUND, NO_PATH, path_between
from grid_route.utils.generation.map_gen import generate_grid


def _grid(rows: list[str]) -> Grid[str]:
    return Grid([c for row in rows for c in row], len(rows[0]), len(rows))


def _assert_valid_route(path, start, goal, grid):
    assert path[0] == goal
    assert path[-1] == start
    for a, b in zip(path, path[1:]):
        assert b in neighbors(a)
    for c in path[1:-1]:
        assert is_passable(grid.get(c))


def test_straight_line_route():
    grid = _grid(["..."])
    result = path_between(Coordinate(0, 0), Coordinate(2, 0), grid)
    assert result.status == FOUND
    assert result.found
    assert list(result.path) == [Coordinate(2, 0), Coordinate(1, 0), Coordinate(0, 0)]
    assert result.start_to_goal() == (Coordinate(0, 0), Coordinate(1, 0), Coordinate(2, 0))


def test_blocked_middle_has_no_route():
    grid = _grid([".$."])
    result = path_between(Coordinate(0, 0), Coordinate(2, 0), grid)
    assert result.status == NO_PATH
    assert not result.found
    assert result.path == ()
    assert result.expanded == 1


def test_start_equals_goal_returns_single_step():
    grid = _grid(["$$", "$$"])
    start = Coordinate(1, 1)
    result = path_between(start, start, grid)
    assert result.found
    assert result.path == (start,)
    assert result.expanded == 0


def test_all_blocked_except_endpoints():
    grid = Grid.filled(5, 5, BLOCKED)
    start, goal = Coordinate(0, 0), Coordinate(4, 4)
    grid.set(start, PASSABLE)
    grid.set(goal, PASSABLE)
    result = path_between(start, goal, grid)
    assert result.status == NO_PATH


def test_routes_around_wall():
    grid = _grid([
        ".....",
        ".$$$.",
        ".$...",
        ".$.$.",
        ".....",
    ])
    start, goal = Coordinate(0, 0), Coordinate(2, 2)
    result = path_between(start, goal, grid)
    assert result.found
    _assert_valid_route(result.path, start, goal, grid)
    assert Coordinate(1, 1) not in result.path


def test_routes_through_winding_corridor():
    grid = _grid([
        "......",
        ".$$$$.",
        ".....$",
        "$$$$..",
    ])
    start, goal = Coordinate(0, 0), Coordinate(5, 3)
    result = path_between(start, goal, grid)
    assert result.found
    _assert_valid_route(result.path, start, goal, grid)


def test_tie_break_prefers_first_discovered():
    # (1, 0) and (0, 1) are both at distance 1 from (1, 1); +x is discovered first.
    grid = _grid(["..", ".."])
    result = path_between(Coordinate(0, 0), Coordinate(1, 1), grid)
    assert list(result.path) == [Coordinate(1, 1), Coordinate(1, 0), Coordinate(0, 0)]


def test_path_marker_cells_are_not_passable():
    grid = _grid([".#."])
    result = path_between(Coordinate(0, 0), Coordinate(2, 0), grid)
    assert result.status == NO_PATH


def test_custom_passable_predicate():
    grid = Grid([0, 1, 0], 3, 1)
    result = path_between(Coordinate(0, 0), Coordinate(2, 0), grid, passable=lambda v: v in (0, 1))
    assert result.found
    assert len(result.path) == 3


def test_search_does_not_mutate_grid():
    grid = _grid(["....", ".$$.", "...."])
    before = Grid(list(c for row in grid.rows() for c in row), grid.width, grid.height)
    path_between(Coordinate(0, 0), Coordinate(3, 2), grid)
    assert grid == before


def test_search_is_idempotent():
    grid = generate_grid(18, 9, Random(1234))
    goal = Coordinate(17, 8)
    grid.set(goal, PASSABLE)
    first = path_between(Coordinate(0, 0), goal, grid)
    second = path_between(Coordinate(0, 0), goal, grid)
    assert first == second


def test_random_grids_yield_valid_routes_or_no_path():
    rng = Random(99)
    for _ in range(50):
        grid = generate_grid(12, 8, rng)
        start = Coordinate(0, 0)
        goal = Coordinate(rng.randrange(12), rng.randrange(8))
        grid.set(goal, PASSABLE)
        result = path_between(start, goal, grid)
        if result.found:
            _assert_valid_route(result.path, start, goal, grid)
            assert len(set(result.path)) == len(result.path)
        else:
            assert result.path == ()
        assert result.expanded <= grid.width * grid.height


def test_first_discoverer_keeps_predecessor():
    # (0, 1) is found from (0, 0) and found again from (1, 1); the route must
    # keep the first link rather than detour through (1, 1) and (1, 0).
    grid = _grid([
        "..$..",
        "..$..",
        ".$...",
        ".....",
    ])
    result = path_between(Coordinate(0, 0), Coordinate(3, 2), grid)
    assert list(result.path) == [
        Coordinate(3, 2),
        Coordinate(3, 3),
        Coordinate(2, 3),
        Coordinate(1, 3),
        Coordinate(0, 3),
        Coordinate(0, 2),
        Coordinate(0, 1),
        Coordinate(0, 0),
    ]
    assert Coordinate(1, 1) not in result.path
