"""Cell symbols used on route grids."""

from __future__ import annotations

from typing import Any


PASSABLE = "."
BLOCKED = "$"
# Display only; the search treats marked cells as not passable.
PATH_MARKER = "#"


def is_passable(value: Any) -> bool:
    """Return ``True`` if a path may traverse a cell holding ``value``."""

    return value == PASSABLE


__all__ = ["PASSABLE", "BLOCKED", "PATH_MARKER", "is_passable"]
