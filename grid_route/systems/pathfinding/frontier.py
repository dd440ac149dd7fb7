"""Open set for greedy best-first search."""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Iterator, List, Set, Tuple

from ...core.coordinate import Coordinate, distance


class Frontier:
    """Discovered coordinates ordered by distance to ``goal``.

    Entries are heap-ordered on ``(distance, insertion order)`` so ties pop
    first-inserted first. A coordinate already queued is not queued again.
    """

    def __init__(self, goal: Coordinate) -> None:
        self.goal = goal
        self._heap: List[Tuple[int, int, Coordinate]] = []
        self._queued: Set[Coordinate] = set()
        self._counter: Iterator[int] = count()

    def push(self, coord: Coordinate) -> bool:
        """Queue ``coord``; return ``False`` if it was already queued."""

        if coord in self._queued:
            return False
        heappush(self._heap, (distance(coord, self.goal), next(self._counter), coord))
        self._queued.add(coord)
        return True

    def pop(self) -> Coordinate:
        """Remove and return the queued coordinate closest to the goal."""

        _, _, coord = heappop(self._heap)
        self._queued.discard(coord)
        return coord

    def __contains__(self, coord: object) -> bool:
        return coord in self._queued

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


__all__ = ["Frontier"]
