"""Terminal input events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import Optional


class KeyModifiers(Flag):
    """Modifier keys held during a key or mouse event."""

    NONE = 0
    SHIFT = 0b0000_0001
    CONTROL = 0b0000_0010
    ALT = 0b0000_0100
    SUPER = 0b0000_1000
    HYPER = 0b0001_0000
    META = 0b0010_0000


class MouseButton(Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class EventKind(Enum):
    NOOP = auto()
    QUIT = auto()
    BLUR = auto()
    FOCUS = auto()
    CTRL_C = auto()
    KEY_PRESS = auto()
    KEY_RELEASE = auto()
    KEY_REPEAT = auto()
    MOUSE_DOWN = auto()
    MOUSE_DRAG = auto()
    MOUSE_MOVE = auto()
    MOUSE_SCROLL_DOWN = auto()
    MOUSE_SCROLL_MOVED = auto()
    MOUSE_SCROLL_UP = auto()
    MOUSE_SCROLL_LEFT = auto()
    MOUSE_SCROLL_RIGHT = auto()
    MOUSE_UP = auto()
    RESIZE = auto()


@dataclass(frozen=True)
class Event:
    """An input event.

    Key events carry ``code``: a single character for character keys,
    otherwise the name of the key. Mouse events carry ``x``/``y`` and,
    for button events, ``button``. Resize events carry ``width``/``height``.
    """

    kind: EventKind
    code: Optional[str] = None
    modifiers: KeyModifiers = KeyModifiers.NONE
    x: Optional[int] = None
    y: Optional[int] = None
    button: Optional[MouseButton] = None
    width: Optional[int] = None
    height: Optional[int] = None

    def get_char(self) -> Optional[str]:
        """The character of a character key press, or None."""
        if self.kind is EventKind.KEY_PRESS and self.code is not None and len(self.code) == 1:
            return self.code
        return None


_KEY_KINDS = {
    "press": EventKind.KEY_PRESS,
    "release": EventKind.KEY_RELEASE,
    "repeat": EventKind.KEY_REPEAT,
}

_BUTTON_KINDS = {
    "down": EventKind.MOUSE_DOWN,
    "up": EventKind.MOUSE_UP,
    "drag": EventKind.MOUSE_DRAG,
}

_MOTION_KINDS = {
    "moved": EventKind.MOUSE_MOVE,
    "scroll_down": EventKind.MOUSE_SCROLL_DOWN,
    "scroll_up": EventKind.MOUSE_SCROLL_UP,
    "scroll_left": EventKind.MOUSE_SCROLL_LEFT,
    "scroll_right": EventKind.MOUSE_SCROLL_RIGHT,
}


def key_event(kind: str, code: str, modifiers: KeyModifiers = KeyModifiers.NONE) -> Event:
    """Build an event from a raw key event.

    ``kind`` is one of ``"press"``, ``"release"`` or ``"repeat"``.
    Pressing ``c`` with only Control held becomes ``CTRL_C``.
    """
    try:
        event_kind = _KEY_KINDS[kind]
    except KeyError:
        raise ValueError(f"invalid key event kind: {kind!r}") from None

    if event_kind is EventKind.KEY_PRESS and code == "c" and modifiers == KeyModifiers.CONTROL:
        return Event(EventKind.CTRL_C)
    return Event(event_kind, code=code, modifiers=modifiers)


def mouse_event(
    kind: str,
    column: int,
    row: int,
    modifiers: KeyModifiers = KeyModifiers.NONE,
    button: Optional[MouseButton] = None,
) -> Event:
    """Build an event from a raw mouse event.

    ``kind`` is ``"down"``, ``"up"`` or ``"drag"`` (which need a button),
    or ``"moved"``, ``"scroll_down"``, ``"scroll_up"``, ``"scroll_left"``
    or ``"scroll_right"``.
    """
    if kind in _BUTTON_KINDS:
        if button is None:
            raise ValueError(f"mouse event {kind!r} needs a button")
        return Event(_BUTTON_KINDS[kind], modifiers=modifiers, x=column, y=row, button=button)
    if kind in _MOTION_KINDS:
        return Event(_MOTION_KINDS[kind], modifiers=modifiers, x=column, y=row)
    raise ValueError(f"invalid mouse event kind: {kind!r}")