"""Errors raised by the widget core."""

from __future__ import annotations

from typing import Any


class WidgetError(Exception):
    """Base class of every error raised by the widget core."""


class IdNotFoundError(WidgetError, LookupError):
    """A path could not be looked up."""

    def __init__(self, path: Any) -> None:
        super().__init__("failed to lookup path")
        self.path = path


class UnregisteredWidgetError(WidgetError, LookupError):
    """No widget factory is registered under the name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unregistered widget: {name}")
        self.name = name


class ReservedNameError(WidgetError, ValueError):
    """The name is reserved and cannot be used for a widget."""

    def __init__(self, name: str) -> None:
        super().__init__(f"reserved name: {name}")
        self.name = name


class ExistingNameError(WidgetError, ValueError):
    """A widget factory is already registered under the name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"existing name: {name} is already registered")
        self.name = name


class InsufficientSpaceError(WidgetError):
    """There is not enough space to lay out a widget."""

    def __init__(self) -> None:
        super().__init__("insufficient layout space available")


class ViewNotFoundError(WidgetError, LookupError):
    """No view is registered under the key."""

    def __init__(self) -> None:
        super().__init__("unregistered view")


class ViewConsumedError(WidgetError):
    """A single-instance view was already taken."""

    def __init__(self) -> None:
        super().__init__("this view has already been consumed")