"""The registry of widget factories."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple

from widgetcore.errors import ExistingNameError, ReservedNameError, UnregisteredWidgetError

RESERVED_NAMES = frozenset({"if", "for", "else", "with", "view"})


@dataclass
class FactoryContext:
    """What a factory is given to build a widget."""

    ident: str
    attributes: Mapping[str, Any] = field(default_factory=dict)
    node_id: Tuple[int, ...] = ()
    text: Optional[str] = None

    def get(self, name: str, default: Any = None) -> Any:
        """The value of the attribute ``name``, or ``default`` if it is not set."""
        return self.attributes.get(name, default)


class WidgetFactory(ABC):
    """Builds a widget from a factory context."""

    @abstractmethod
    def make(self, context: FactoryContext) -> Any:
        """Create a widget."""


class Factory:
    """Process-wide registry mapping widget names to their factories."""

    _factories: ClassVar[Dict[str, WidgetFactory]] = {}
    _lock: ClassVar[threading.RLock] = threading.RLock()

    @classmethod
    def register(cls, ident: str, factory: WidgetFactory) -> None:
        """Register ``factory`` under ``ident``.

        Raises ReservedNameError for reserved words and ExistingNameError
        if the name is taken.
        """
        if ident in RESERVED_NAMES:
            raise ReservedNameError(ident)
        with cls._lock:
            if ident in cls._factories:
                raise ExistingNameError(ident)
            cls._factories[ident] = factory

    @classmethod
    def exec(cls, context: FactoryContext) -> Any:
        """Build a widget with the factory registered for ``context.ident``."""
        with cls._lock:
            factory = cls._factories.get(context.ident)
        if factory is None:
            raise UnregisteredWidgetError(context.ident)
        return factory.make(context)

    @classmethod
    def clear(cls) -> None:
        """Remove every registered factory."""
        with cls._lock:
            cls._factories.clear()