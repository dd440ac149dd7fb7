"""Turn a predecessor map into an ordered route."""

from __future__ import annotations

from typing import Dict, List, Set

from ...core.coordinate import Coordinate
from ...core.errors import PredecessorLoopError


def reconstruct_path(
    came_from: Dict[Coordinate, Coordinate], goal: Coordinate
) -> List[Coordinate]:
    """Walk ``came_from`` back from ``goal`` and return the visited chain.

    The result is in goal-to-start order; reverse it for travel order. The
    walk stops at the first coordinate without a predecessor. Raises
    :class:`PredecessorLoopError` if a coordinate is its own predecessor or
    the chain revisits a coordinate.
    """

    path = [goal]
    seen: Set[Coordinate] = {goal}
    current = goal
    while current in came_from:
        previous = came_from[current]
        if previous in seen:
            raise PredecessorLoopError(previous)
        path.append(previous)
        seen.add(previous)
        current = previous
    return path


__all__ = ["reconstruct_path"]
