"""Random obstacle grids and greedy best-first routing."""

from .core.coordinate import Coordinate, distance, neighbors
from .core.grid import Grid
from .systems.pathfinding import NO_PATH, FOUND, SearchResult, path_between, reconstruct_path

__all__ = [
    "Coordinate",
    "Grid",
    "SearchResult",
    "FOUND",
    "NO_PATH",
    "distance",
    "neighbors",
    "path_between",
    "reconstruct_path",
]
