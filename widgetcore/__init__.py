"""Building blocks for terminal user interface widgets: geometry, constraints,
padding, paint contexts, a canvas, text fragments, widget factories, views and
input events."""

__version__ = "0.1.0"

__all__ = [
    "canvas",
    "constraints",
    "errors",
    "events",
    "factory",
    "fragment",
    "geometry",
    "padding",
    "paint",
    "views",
]