"""Sizes, positions, regions and the small layout enums."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

_U16_MAX = 0xFFFF


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class Size:
    """A width and a height in cells."""

    width: int
    height: int

    ZERO: ClassVar[Size]


Size.ZERO = Size(0, 0)


@dataclass(frozen=True)
class ScreenPos:
    """A position on the screen, both coordinates in the range of an unsigned 16-bit int."""

    x: int
    y: int

    def __post_init__(self) -> None:
        for value in (self.x, self.y):
            if not 0 <= value <= _U16_MAX:
                raise ValueError(f"screen coordinate out of range: {value}")


@dataclass(frozen=True)
class Pos:
    """A position in global space."""

    x: int
    y: int

    ZERO: ClassVar[Pos]

    def __add__(self, other: Union[Pos, LocalPos]) -> Pos:
        if isinstance(other, (Pos, LocalPos)):
            return Pos(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: Pos) -> Pos:
        if isinstance(other, Pos):
            return Pos(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, factor: float) -> Pos:
        if isinstance(factor, (int, float)):
            return Pos(_round_half_away(self.x * factor), _round_half_away(self.y * factor))
        return NotImplemented


Pos.ZERO = Pos(0, 0)


@dataclass(frozen=True)
class LocalPos:
    """A position in a widget's local space; coordinates are never negative."""

    x: int
    y: int

    ZERO: ClassVar[LocalPos]

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"local position cannot be negative: ({self.x}, {self.y})")

    def __add__(self, other: Union[LocalPos, Pos, ScreenPos]) -> LocalPos:
        if isinstance(other, (LocalPos, Pos, ScreenPos)):
            return LocalPos(self.x + other.x, self.y + other.y)
        return NotImplemented

    def to_screen(self) -> ScreenPos:
        """Convert to a screen position; raises ValueError if it does not fit."""
        return ScreenPos(self.x, self.y)


LocalPos.ZERO = LocalPos(0, 0)


@dataclass
class Region:
    """An inclusive region in global space."""

    start: Pos
    end: Pos

    ZERO: ClassVar[Region]

    def intersects(self, other: Region) -> bool:
        if other.end.x < self.start.x or other.start.x >= self.end.x:
            return False
        if other.end.y < self.start.y or other.start.y >= self.end.y:
            return False
        return True

    def contains(self, pos: Pos) -> bool:
        return self.start.x <= pos.x <= self.end.x and self.start.y <= pos.y <= self.end.y

    def constrain(self, other: Region) -> None:
        """Shrink this region to fit inside ``other``."""
        self.start = Pos(max(self.start.x, other.start.x), max(self.start.y, other.start.y))
        self.end = Pos(min(self.end.x, other.end.x), min(self.end.y, other.end.y))


Region.ZERO = Region(Pos.ZERO, Pos.ZERO)


class Align(Enum):
    """Alignment of a widget inside its parent."""

    TOP_LEFT = "top-left"
    TOP = "top"
    TOP_RIGHT = "top-right"
    RIGHT = "right"
    BOTTOM_RIGHT = "bottom-right"
    BOTTOM = "bottom"
    BOTTOM_LEFT = "bottom-left"
    LEFT = "left"
    CENTRE = "centre"

    @classmethod
    def parse(cls, value: object) -> Align:
        """Parse an alignment; anything unknown becomes ``TOP``."""
        if value == "center":
            return cls.CENTRE
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        return cls.TOP

    def __str__(self) -> str:
        return self.value


class Display(Enum):
    """How a widget is displayed and laid out."""

    SHOW = "show"
    HIDE = "hide"
    EXCLUDE = "exclude"

    @classmethod
    def parse(cls, value: object) -> Display:
        """Parse a display mode; anything unknown becomes ``SHOW``."""
        if value == "hide":
            return cls.HIDE
        if value == "exclude":
            return cls.EXCLUDE
        return cls.SHOW


class Axis(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def parse(cls, value: object) -> Axis:
        if value in ("horz", "horizontal"):
            return cls.HORIZONTAL
        if value in ("vert", "vertical"):
            return cls.VERTICAL
        raise ValueError(f"invalid axis: {value!r}")


class Direction(Enum):
    FORWARDS = "forwards"
    BACKWARDS = "backwards"

    @classmethod
    def parse(cls, value: object) -> Direction:
        if value in ("fwd", "forwards", "forward"):
            return cls.FORWARDS
        if value in ("bck", "backwards", "backward"):
            return cls.BACKWARDS
        raise ValueError(f"invalid direction: {value!r}")

    def reverse(self) -> Direction:
        return Direction.BACKWARDS if self is Direction.FORWARDS else Direction.FORWARDS