"""Random obstacle grids for route searches."""

from __future__ import annotations

from random import Random
from typing import List

from ...core.cells import BLOCKED, PASSABLE
from ...core.coordinate import Coordinate
from ...core.grid import Grid


DEFAULT_BLOCKED_RATIO = 0.2


def _check_ratio(blocked_ratio: float) -> None:
    if not 0.0 <= blocked_ratio <= 1.0:
        raise ValueError(f"blocked_ratio must be within [0, 1], got {blocked_ratio}")


def random_cell_value(rng: Random, blocked_ratio: float = DEFAULT_BLOCKED_RATIO) -> str:
    """Return :data:`BLOCKED` with probability ``blocked_ratio``."""

    _check_ratio(blocked_ratio)
    return BLOCKED if rng.random() < blocked_ratio else PASSABLE


def generate_tiles(
    width: int,
    height: int,
    rng: Random,
    blocked_ratio: float = DEFAULT_BLOCKED_RATIO,
) -> List[str]:
    """Return a flat row-major list of ``width * height`` cell symbols."""

    return [random_cell_value(rng, blocked_ratio) for _ in range(width * height)]


def generate_grid(
    width: int,
    height: int,
    rng: Random,
    blocked_ratio: float = DEFAULT_BLOCKED_RATIO,
) -> Grid[str]:
    """Return a new :class:`Grid` of random passable and blocked cells."""

    return Grid(generate_tiles(width, height, rng, blocked_ratio), width, height)


def random_coordinate(grid: Grid, rng: Random) -> Coordinate:
    """Return a uniformly chosen in-bounds coordinate of ``grid``."""

    return Coordinate(rng.randrange(grid.width), rng.randrange(grid.height))


__all__ = [
    "DEFAULT_BLOCKED_RATIO",
    "random_cell_value",
    "generate_tiles",
    "generate_grid",
    "random_coordinate",
]
