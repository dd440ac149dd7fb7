from grid_route.core.coordinate import Coordinate
from grid_route.systems.pathfinding.frontier import Frontier


def test_pops_nearest_to_goal_first():
    frontier = Frontier(Coordinate(0, 0))
    frontier.push(Coordinate(5, 5))
    frontier.push(Coordinate(1, 0))
    frontier.push(Coordinate(3, 0))
    assert frontier.pop() == Coordinate(1, 0)
    assert frontier.pop() == Coordinate(3, 0)
    assert frontier.pop() == Coordinate(5, 5)
    assert not frontier


def test_ties_pop_in_insertion_order():
    frontier = Frontier(Coordinate(2, 2))
    order = [Coordinate(2, 3), Coordinate(3, 2), Coordinate(1, 2), Coordinate(2, 1)]
    for c in order:
        frontier.push(c)
    assert [frontier.pop() for _ in order] == order


def test_duplicate_push_ignored():
    frontier = Frontier(Coordinate(0, 0))
    assert frontier.push(Coordinate(1, 1))
    assert not frontier.push(Coordinate(1, 1))
    assert len(frontier) == 1
    assert Coordinate(1, 1) in frontier
    frontier.pop()
    assert Coordinate(1, 1) not in frontier
    assert frontier.push(Coordinate(1, 1))
