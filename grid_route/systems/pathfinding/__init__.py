"""pathfinding package."""

from .reconstruct import reconstruct_path
from .search import FOUND, NO_PATH, SearchResult, path_between

__all__ = ["FOUND", "NO_PATH", "SearchResult", "path_between", "reconstruct_path"]
