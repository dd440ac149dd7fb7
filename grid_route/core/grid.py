"""Fixed-size 2D tile container addressed by :class:`Coordinate`."""

from __future__ import annotations

from random import Random
from typing import Generic, Iterator, List, Optional, Sequence, TypeVar

from .coordinate import Coordinate


T = TypeVar("T")


class Grid(Generic[T]):
    """Row-major tile storage of ``width`` × ``height`` cells.

    Cell ``(x, y)`` lives at flat index ``y * width + x``. The grid is never
    resized after construction; callers read and write through the accessor
    methods only.
    """

    def __init__(self, tiles: Sequence[T], width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        if len(tiles) != width * height:
            raise ValueError(
                f"Expected {width * height} tiles for a {width}x{height} grid, got {len(tiles)}"
            )
        self._tiles: List[T] = list(tiles)
        self.width = width
        self.height = height

    @classmethod
    def filled(cls, width: int, height: int, value: T) -> Grid[T]:
        """Return a grid with every cell set to ``value``."""

        return cls([value] * (width * height), width, height)

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    def in_bounds(self, coord: Coordinate) -> bool:
        return coord.x < self.width and coord.y < self.height

    def get(self, coord: Coordinate) -> Optional[T]:
        """Return the value at ``coord`` or ``None`` when out of bounds."""

        if self.in_bounds(coord):
            return self._tiles[coord.y * self.width + coord.x]
        return None

    def set(self, coord: Coordinate, value: T) -> None:
        """Overwrite the cell at ``coord``.

        ``coord`` must be in bounds. No check is made here; an out of range
        ``x`` silently lands on the next row.
        """

        self._tiles[coord.y * self.width + coord.x] = value

    def random_cell(self, rng: Random) -> T:
        """Return a uniformly chosen cell value drawn from ``rng``."""

        return self._tiles[rng.randrange(len(self._tiles))]

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------
    def rows(self) -> Iterator[List[T]]:
        for y in range(self.height):
            start = y * self.width
            yield self._tiles[start : start + self.width]

    def __len__(self) -> int:
        return len(self._tiles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self._tiles == other._tiles
        )

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"


__all__ = ["Grid"]
