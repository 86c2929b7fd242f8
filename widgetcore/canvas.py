"""A widget to place styled characters at positions."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from widgetcore.constraints import Constraints
from widgetcore.geometry import LocalPos, Size
from widgetcore.paint import PaintCtx, Style

Cell = Tuple[str, Style]


class Canvas:
    """Characters with a style placed at local positions.

    A canvas created without both a width and a height is unsized: it
    ignores drawing until layout sizes it to fill the constraints.
    """

    def __init__(self, width: Optional[int] = None, height: Optional[int] = None) -> None:
        self.needs_layout = True
        self.needs_paint = True
        self.size: Optional[Size] = (
            Size(width, height) if width is not None and height is not None else None
        )
        self._cells: Dict[Tuple[int, int], Cell] = {}

    def _inside(self, pos: LocalPos) -> bool:
        return (
            self.size is not None
            and pos.x < self.size.width
            and pos.y < self.size.height
        )

    def put(self, char: str, style: Style, pos: LocalPos) -> None:
        """Put a character on the canvas; ignored outside it or when unsized."""
        if not self._inside(pos):
            return
        self._cells[(pos.x, pos.y)] = (char, style)
        self.needs_paint = True

    def clear(self, pos: LocalPos) -> None:
        """Remove the character at ``pos``, if any."""
        if not self._inside(pos):
            return
        self._cells.pop((pos.x, pos.y), None)

    def get(self, pos: LocalPos) -> Optional[Cell]:
        """The character and style at ``pos``, or None."""
        return self._cells.get((pos.x, pos.y))

    def layout(self, constraints: Constraints) -> Size:
        """Size an unsized canvas to the maximum constraints; return the size."""
        self.needs_layout = False
        if self.size is None:
            self.size = Size(constraints.max_width, constraints.max_height)
        return self.size

    def paint(self, ctx: PaintCtx) -> None:
        """Paint every character, row by row, through a sized paint context."""
        if self.size is None:
            return
        self.needs_paint = False
        for (x, y), (char, style) in sorted(self._cells.items(), key=lambda item: (item[0][1], item[0][0])):
            ctx.put(char, style, LocalPos(x, y))