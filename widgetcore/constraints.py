"""Layout constraints bounding the size a widget may take."""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Optional

from widgetcore.geometry import Size

UNBOUNDED = sys.maxsize


@dataclass
class Constraints:
    """Minimum and maximum width and height.

    A ``None`` maximum is unbounded. Equal minimum and maximum make a
    dimension tight.
    """

    max_width: Optional[int] = None
    max_height: Optional[int] = None
    min_width: int = 0
    min_height: int = 0

    def __post_init__(self) -> None:
        if self.max_width is None:
            self.max_width = UNBOUNDED
        if self.max_height is None:
            self.max_height = UNBOUNDED

    @classmethod
    def unbounded(cls) -> Constraints:
        return cls(UNBOUNDED, UNBOUNDED)

    def unbound_height(self) -> None:
        self.max_height = UNBOUNDED

    def unbound_width(self) -> None:
        self.max_width = UNBOUNDED

    def is_unbounded(self) -> bool:
        return self.is_width_unbounded() and self.is_height_unbounded()

    def is_width_unbounded(self) -> bool:
        return self.max_width == UNBOUNDED

    def is_height_unbounded(self) -> bool:
        return self.max_height == UNBOUNDED

    def is_width_tight(self) -> bool:
        return self.max_width == self.min_width

    def is_height_tight(self) -> bool:
        return self.max_height == self.min_height

    def make_width_tight(self, width: int) -> None:
        self.max_width = min(self.max_width, width)
        self.min_width = self.max_width

    def make_height_tight(self, height: int) -> None:
        self.max_height = min(self.max_height, height)
        self.min_height = self.max_height

    def expand_horz(self, size: Size) -> Size:
        return replace(size, width=self.max_width)

    def expand_vert(self, size: Size) -> Size:
        return replace(size, height=self.max_height)

    def expand_all(self, size: Size) -> Size:
        return self.expand_vert(self.expand_horz(size))