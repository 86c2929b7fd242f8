"""Views: stateful parts of the widget tree that receive events."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, Mapping, Optional, Tuple, Union

from widgetcore.errors import ViewConsumedError, ViewNotFoundError

NodeId = Tuple[int, ...]


class View:
    """Base class for views.

    The default hooks only keep track of what happened to the view:
    the last event it saw, how many ticks it received and whether it
    currently has focus. Subclasses override them to react.
    """

    last_event: Any = None
    ticks: int = 0
    focused: bool = False

    def on_event(self, event: Any, nodes: Any) -> None:
        """Handle an input event; by default only remember it."""
        self.last_event = event

    def state(self) -> Mapping[str, Any]:
        """The view's internal state; it always takes precedence over external state.

        By default a view has no state of its own, so this is empty.
        """
        return {}

    def tick(self) -> None:
        """Called once per frame; by default counts the frames."""
        self.ticks += 1

    def focus(self) -> None:
        """Called when the view gains focus."""
        self.focused = True

    def blur(self) -> None:
        """Called when the view loses focus."""
        self.focused = False


@dataclass
class _SingleView:
    view: Optional[View]


@dataclass
class _Prototype:
    factory: Callable[[], View]


class RegisteredViews:
    """Process-wide registry of views by key."""

    _views: ClassVar[Dict[int, Union[_SingleView, _Prototype]]] = {}
    _lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def add_view(cls, key: int, view: View) -> None:
        """Register a single view instance; it can be taken only once."""
        with cls._lock:
            cls._views[key] = _SingleView(view)

    @classmethod
    def add_prototype(cls, key: int, factory: Callable[[], View]) -> None:
        """Register a callable that makes a new view each time one is asked for."""
        with cls._lock:
            cls._views[key] = _Prototype(factory)

    @classmethod
    def get(cls, key: int) -> View:
        """Take the view registered under ``key``."""
        with cls._lock:
            entry = cls._views.get(key)
            if entry is None:
                raise ViewNotFoundError()
            if isinstance(entry, _SingleView):
                if entry.view is None:
                    raise ViewConsumedError()
                view, entry.view = entry.view, None
                return view
        return entry.factory()

    @classmethod
    def clear(cls) -> None:
        with cls._lock:
            cls._views.clear()


class Views:
    """Node ids of the views in this thread and their tab indices."""

    _local: ClassVar[threading.local] = threading.local()

    @classmethod
    def _map(cls) -> Dict[NodeId, Optional[int]]:
        views = getattr(cls._local, "views", None)
        if views is None:
            views = {}
            cls._local.views = views
        return views

    @classmethod
    def insert(cls, node_id: NodeId, tabindex: Optional[int]) -> None:
        cls._map()[tuple(node_id)] = tabindex

    @classmethod
    def update(cls, node_id: NodeId, tabindex: Optional[int]) -> None:
        """Change the tab index of a known view; unknown ids are ignored."""
        views = cls._map()
        key = tuple(node_id)
        if key in views:
            views[key] = tabindex

    @classmethod
    def for_each(cls, func: Callable[[NodeId, Optional[int]], Any]) -> None:
        """Call ``func(node_id, tabindex)`` for every view, in node id order."""
        for node_id, tabindex in sorted(cls._map().items()):
            func(node_id, tabindex)

    @classmethod
    def all(cls, func: Callable[[Dict[NodeId, Optional[int]]], Optional[NodeId]]) -> Optional[NodeId]:
        """Give ``func`` the mutable mapping of views and return what it returns."""
        return func(cls._map())

    @classmethod
    def clear(cls) -> None:
        cls._map().clear()