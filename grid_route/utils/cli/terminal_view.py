"""ASCII terminal renderer for route grids."""

from __future__ import annotations

import sys
from typing import Any, Iterable, TextIO

from ...core.cells import BLOCKED, PASSABLE, PATH_MARKER
from ...core.coordinate import Coordinate
from ...core.grid import Grid


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "reset": "\x1b[0m",
}

_SYMBOL_COLOURS = {
    PASSABLE: "reset",
    BLOCKED: "red",
    PATH_MARKER: "green",
}

CLEAR_SCREEN = "\x1b[2J"
HOME_AND_CLEAR = "\x1b[H\x1b[2J"


class TerminalView:
    """Print a :class:`Grid` of single-character cells, optionally coloured."""

    def __init__(
        self,
        colour: bool = True,
        clear: bool = True,
        stream: TextIO | None = None,
    ) -> None:
        self.colour = colour
        self.clear = clear
        self.stream = stream

    @property
    def out(self) -> TextIO:
        return self.stream if self.stream is not None else sys.stdout

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def render_lines(self, grid: Grid[Any]) -> list[str]:
        lines: list[str] = []
        for row in grid.rows():
            if not self.colour:
                lines.append("".join(_glyph(tile) for tile in row))
                continue
            cells = [
                f"{_COLOURS[_SYMBOL_COLOURS.get(_glyph(tile), 'reset')]}{_glyph(tile)}"
                for tile in row
            ]
            cells.append(_COLOURS["reset"])
            lines.append("".join(cells))
        return lines

    def render(self, grid: Grid[Any]) -> None:
        """Draw ``grid`` to the output stream, one row per line."""

        out = self.out
        if self.clear:
            out.write(HOME_AND_CLEAR)
        out.write("\n".join(self.render_lines(grid)) + "\n")
        out.flush()

    def clear_screen(self) -> None:
        self.out.write(CLEAR_SCREEN)
        self.out.flush()


# ----------------------------------------------------------------------
# Helper functions
# ----------------------------------------------------------------------


def _glyph(tile: Any) -> str:
    if tile is None:
        return PASSABLE
    glyph = str(tile)
    return glyph[:1] if glyph else PASSABLE


def overlay_path(
    grid: Grid[Any], path: Iterable[Coordinate], marker: Any = PATH_MARKER
) -> None:
    """Write ``marker`` into ``grid`` at every coordinate of ``path``."""

    for coord in path:
        grid.set(coord, marker)


__all__ = ["TerminalView", "overlay_path", "CLEAR_SCREEN", "HOME_AND_CLEAR"]
