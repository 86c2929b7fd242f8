"""Screens and the contexts used to lay out, position and paint widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional, Tuple

from wcwidth import wcwidth

from widgetcore.constraints import Constraints
from widgetcore.geometry import Align, LocalPos, Pos, Region, ScreenPos, Size

Cell = Tuple[str, "Style"]


@dataclass(frozen=True)
class Style:
    """Foreground and background colour plus text attributes such as ``"bold"``."""

    fg: Optional[Any] = None
    bg: Optional[Any] = None
    attributes: FrozenSet[str] = frozenset()


class Screen:
    """A grid of cells, each holding a character and its style."""

    def __init__(self, size: Size) -> None:
        self.size = size
        self._cells: Dict[Tuple[int, int], Cell] = {}

    def _in_bounds(self, pos: ScreenPos) -> bool:
        return pos.x < self.size.width and pos.y < self.size.height

    def put(self, char: str, style: Style, pos: ScreenPos) -> None:
        """Place a character; raises IndexError outside the screen."""
        if not self._in_bounds(pos):
            raise IndexError(f"position ({pos.x}, {pos.y}) is outside the screen")
        self._cells[(pos.x, pos.y)] = (char, style)

    def get(self, pos: ScreenPos) -> Optional[Cell]:
        """The character and style at ``pos``, or None if the cell is empty."""
        return self._cells.get((pos.x, pos.y))

    def rendered(self) -> str:
        """The screen as text, one line per row, empty cells as spaces."""
        return "\n".join(
            "".join(
                self._cells.get((x, y), (" ", None))[0] for x in range(self.size.width)
            )
            for y in range(self.size.height)
        )


@dataclass
class LayoutCtx:
    constraints: Constraints


@dataclass
class PositionCtx:
    pos: Pos
    inner_size: Size
    alignment: Optional[Align] = None


def _char_width(char: str) -> int:
    return max(wcwidth(char), 0)


@dataclass
class PaintCtx:
    """Paints in local coordinates, translated to the screen.

    A context is unsized until ``into_sized`` gives it a size and a
    global position; only a sized context can paint.
    """

    screen: Screen
    clip: Optional[Region] = None
    local_size: Optional[Size] = field(default=None)
    global_pos: Optional[Pos] = field(default=None)

    @property
    def is_sized(self) -> bool:
        return self.local_size is not None and self.global_pos is not None

    def _sized(self) -> Tuple[Size, Pos]:
        if self.local_size is None or self.global_pos is None:
            raise RuntimeError("paint context has no size")
        return self.local_size, self.global_pos

    def into_sized(self, size: Size, global_pos: Pos) -> PaintCtx:
        """A sized context at ``global_pos`` sharing this screen and clip."""
        return PaintCtx(self.screen, self.clip, size, global_pos)

    def to_unsized(self) -> PaintCtx:
        """An unsized context sharing this screen and clip."""
        return PaintCtx(self.screen, self.clip)

    def set_region(self, region: Region) -> None:
        self.clip = region

    def update(self, size: Size, pos: Pos) -> None:
        self.local_size = size
        self.global_pos = pos

    def create_region(self) -> Region:
        """The global region covered by this context, limited by the clip."""
        size, gpos = self._sized()
        region = Region(gpos, Pos(gpos.x + size.width - 1, gpos.y + size.height - 1))
        if self.clip is not None:
            region.constrain(self.clip)
        return region

    def _translate_to_screen(self, local: LocalPos, gpos: Pos) -> Optional[ScreenPos]:
        x = local.x + gpos.x
        y = local.y + gpos.y
        if x < 0 or y < 0 or x >= self.screen.size.width or y >= self.screen.size.height:
            return None
        return ScreenPos(x, y)

    def _newline(self, pos: LocalPos, size: Size) -> Optional[LocalPos]:
        y = pos.y + 1
        if y >= size.height:
            return None
        return LocalPos(0, y)

    def print(self, text: str, style: Style, pos: LocalPos) -> Optional[LocalPos]:
        """Print each character in turn; None once the text no longer fits."""
        for char in text:
            next_pos = self.put(char, style, pos)
            if next_pos is None:
                return None
            pos = next_pos
        return pos

    def put(self, char: str, style: Style, pos: LocalPos) -> Optional[LocalPos]:
        """Place a character and return the next cursor position in local space.

        Returns None when the character does not fit in the local region.
        Characters outside the clip or off the screen are skipped.
        """
        size, gpos = self._sized()
        width = _char_width(char)
        next_pos = LocalPos(pos.x + width, pos.y)

        if self.clip is not None and not self.clip.contains(gpos + pos):
            return next_pos

        if char == "\n":
            return self._newline(pos, size)

        if not (pos.x + width <= size.width and pos.y < size.height):
            return None

        screen_pos = self._translate_to_screen(pos, gpos)
        if screen_pos is None:
            return next_pos
        self.screen.put(char, style, screen_pos)

        if pos.x >= size.width:
            return self._newline(pos, size)
        return next_pos