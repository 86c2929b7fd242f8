"""Padding around the content of a widget."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable

from widgetcore.geometry import Size


@dataclass
class Padding:
    """Padding on each of the four sides of a widget."""

    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    ZERO: ClassVar[Padding]

    @classmethod
    def uniform(cls, value: int) -> Padding:
        """The same padding on all four sides."""
        return cls(value, value, value, value)

    @classmethod
    def from_iter(cls, values: Iterable[int]) -> Padding:
        """Build padding from one to four values, in CSS order.

        One value pads all sides. Two give top/bottom and right/left.
        Three give top, right/left and bottom. Four give every side.
        No values give no padding.
        """
        it = iter(values)

        first = next(it, None)
        if first is None:
            return cls()
        padding = cls.uniform(first)

        right = next(it, None)
        if right is None:
            return padding
        padding.right = right

        bottom = next(it, None)
        if bottom is None:
            padding.bottom = padding.top
            padding.left = padding.right
            return padding
        padding.bottom = bottom

        left = next(it, None)
        if left is None:
            padding.left = padding.right
            return padding
        padding.left = left
        return padding

    def take(self) -> Padding:
        """Return the current padding and reset this one to zero."""
        taken = Padding(self.top, self.right, self.bottom, self.left)
        self.top = self.right = self.bottom = self.left = 0
        return taken

    def size(self) -> Size:
        """The space the padding takes up, horizontally and vertically."""
        return Size(self.left + self.right, self.top + self.bottom)


Padding.ZERO = Padding()