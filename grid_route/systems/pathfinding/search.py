"""Greedy best-first route search over a :class:`Grid`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Set, Tuple

from ...core.cells import is_passable
from ...core.coordinate import Coordinate, neighbors
from ...core.grid import Grid
from .frontier import Frontier
from .reconstruct import reconstruct_path


FOUND = "found"
NO_PATH = "no_path"


@dataclass(frozen=True)
class SearchResult:
    """Outcome of :func:`path_between`.

    ``path`` runs from the goal back to the start and is empty when
    ``status`` is :data:`NO_PATH`.
    """

    status: str
    path: Tuple[Coordinate, ...] = ()
    expanded: int = 0

    @property
    def found(self) -> bool:
        return self.status == FOUND

    def start_to_goal(self) -> Tuple[Coordinate, ...]:
        return tuple(reversed(self.path))


def path_between(
    start: Coordinate,
    goal: Coordinate,
    grid: Grid[Any],
    passable: Callable[[Any], bool] = is_passable,
) -> SearchResult:
    """Return a route from ``start`` to ``goal`` through passable cells.

    The frontier member nearest the goal by :func:`distance` is always
    expanded next, ignoring the length of the route so far, so the result is
    not guaranteed to be the shortest route. Distance ties go to the
    coordinate discovered first. ``grid`` is not modified, and the passability
    of ``start`` itself is never checked.
    """

    if start == goal:
        return SearchResult(FOUND, (start,), 0)

    frontier = Frontier(goal)
    frontier.push(start)
    closed: Set[Coordinate] = set()
    came_from: Dict[Coordinate, Coordinate] = {}

    while frontier:
        current = frontier.pop()
        closed.add(current)

        if current == goal:
            path = reconstruct_path(came_from, current)
            return SearchResult(FOUND, tuple(path), len(closed))

        for n in neighbors(current):
            if n in closed or not grid.in_bounds(n) or not passable(grid.get(n)):
                continue
            # First discoverer wins; overwriting could make the chain cycle.
            came_from.setdefault(n, current)
            frontier.push(n)

    return SearchResult(NO_PATH, (), len(closed))


__all__ = ["FOUND", "NO_PATH", "SearchResult", "path_between"]
