"""Text fragments: literal strings or paths into a data context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Fragment:
    """Either a literal string (``text``) or a path to a value (``path``)."""

    text: Optional[str] = None
    path: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.text is None) == (self.path is None):
            raise ValueError("a fragment holds exactly one of text or path")

    def is_string(self) -> bool:
        return self.text is not None


@dataclass(frozen=True)
class TextPath:
    """Either a plain string or a sequence of fragments making one string."""

    text: Optional[str] = None
    fragments: Optional[Tuple[Fragment, ...]] = None

    def __post_init__(self) -> None:
        if (self.text is None) == (self.fragments is None):
            raise ValueError("a text path holds exactly one of text or fragments")
        if self.fragments is not None and not isinstance(self.fragments, tuple):
            object.__setattr__(self, "fragments", tuple(self.fragments))

    @classmethod
    def from_string(cls, text: str) -> TextPath:
        return cls(text=str(text))

    @classmethod
    def fragment(cls, key: str) -> TextPath:
        """A text path made of a single lookup of ``key``."""
        return cls(fragments=(Fragment(path=key),))