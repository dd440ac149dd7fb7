"""Immutable grid coordinate and its distance/adjacency helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Coordinate:
    """Non-negative 2D integer point, hashable by value."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Coordinate axes must be non-negative: ({self.x}, {self.y})")

    def distance(self, other: Coordinate) -> int:
        return distance(self, other)

    def neighbors(self) -> List[Coordinate]:
        return neighbors(self)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def distance(a: Coordinate, b: Coordinate) -> int:
    """Return the straight-line distance between ``a`` and ``b``.

    The square root is truncated toward zero, so ``(0, 0)`` and ``(1, 1)`` are
    at distance ``1`` and ``(0, 0)`` and ``(2, 3)`` at distance ``3``. Search
    tie-breaking depends on this exact value.
    """

    dx = abs(a.x - b.x)
    dy = abs(a.y - b.y)
    return int(math.sqrt(dx * dx + dy * dy))


def neighbors(c: Coordinate) -> List[Coordinate]:
    """Return the cardinal neighbours of ``c`` in ``+x, -x, +y, -y`` order.

    Neighbours that would need a negative axis value are omitted.
    """

    result = [Coordinate(c.x + 1, c.y)]
    if c.x > 0:
        result.append(Coordinate(c.x - 1, c.y))
    result.append(Coordinate(c.x, c.y + 1))
    if c.y > 0:
        result.append(Coordinate(c.x, c.y - 1))
    return result


__all__ = ["Coordinate", "distance", "neighbors"]
