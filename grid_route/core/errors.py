"""Exception types raised by grid_route."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .coordinate import Coordinate


class GridRouteError(RuntimeError):
    """Base class for internal routing faults."""


class PredecessorLoopError(GridRouteError):
    """A predecessor map walked back onto a coordinate it already visited."""

    def __init__(self, coord: "Coordinate") -> None:
        super().__init__(f"Predecessor map loops at {coord}")
        self.coord = coord


__all__ = ["GridRouteError", "PredecessorLoopError"]
