# widgetcore

Building blocks for terminal user interface widgets, all in memory:

- `widgetcore.geometry`: `Size`, `Pos` (global space), `LocalPos` (widget-local
  space, never negative), `ScreenPos` (unsigned 16-bit coordinates), inclusive
  `Region`s, and the `Align`, `Display`, `Axis` and `Direction` enums, each with
  a `parse` classmethod for attribute strings.
- `widgetcore.constraints`: `Constraints`, the minimum and maximum width and
  height a widget may take during layout. A `None` maximum is unbounded.
- `widgetcore.padding`: `Padding`, with CSS-like shorthand through
  `Padding.from_iter`.
- `widgetcore.paint`: an in-memory `Screen`, `Style`, `LayoutCtx`,
  `PositionCtx`, and `PaintCtx`, which paints in local coordinates, translates
  them to the screen and respects a clipping region.
- `widgetcore.canvas`: `Canvas`, a grid of styled characters that can lay
  itself out and paint through a `PaintCtx`.
- `widgetcore.fragment`: `Fragment` and `TextPath`, literal text or paths to
  values.
- `widgetcore.factory`: a registry of named `WidgetFactory` objects and the
  `FactoryContext` they are given.
- `widgetcore.views`: `View`, the `RegisteredViews` registry and the `Views`
  tab-index table.
- `widgetcore.events`: `Event`, `EventKind`, `KeyModifiers`, `MouseButton`,
  and the `key_event` and `mouse_event` constructors.
- `widgetcore.errors`: the `WidgetError` hierarchy.

## Install

```
pip install widgetcore
```

## Painting

```python
from widgetcore.geometry import LocalPos, Pos, Size
from widgetcore.paint import PaintCtx, Screen, Style

screen = Screen(Size(10, 5))
ctx = PaintCtx(screen).into_sized(Size(4, 2), Pos(3, 2))
ctx.print("hi", Style(), LocalPos(0, 0))
print(screen.rendered())
```

`PaintCtx.put` places a character in local space, relative to the context's
global position, and returns the next cursor position. It returns `None` when
the character does not fit in the local area; characters outside the clipping
region or off the screen are skipped. A context must be sized with
`into_sized` before it paints, otherwise `RuntimeError` is raised.
`Screen.put` itself raises `IndexError` for a position outside the screen.

## Canvas

```python
from widgetcore.canvas import Canvas
from widgetcore.constraints import Constraints
from widgetcore.geometry import LocalPos
from widgetcore.paint import Style

canvas = Canvas()                       # unsized: drawing is ignored
canvas.layout(Constraints(8, 3))        # now 8 x 3
canvas.put("x", Style(), LocalPos(2, 1))
canvas.get(LocalPos(2, 1))              # ("x", Style())
```

## Layout constraints

```python
from widgetcore.constraints import Constraints
from widgetcore.geometry import Size

constraints = Constraints(10, 5)
constraints.make_width_tight(4)
constraints.expand_vert(Size(4, 1))     # Size(4, 5)
Constraints.unbounded().is_unbounded()  # True
```

## Widget factories

```python
from widgetcore.factory import Factory, FactoryContext, WidgetFactory

class TextFactory(WidgetFactory):
    def make(self, context):
        return context.text

Factory.register("text", TextFactory())
Factory.exec(FactoryContext("text", text="hello"))  # "hello"
```

The names `if`, `for`, `else`, `with` and `view` are reserved and raise
`ReservedNameError`; registering a name twice raises `ExistingNameError`, and
executing an unknown name raises `UnregisteredWidgetError`.

## Views

`RegisteredViews.add_view` stores a single instance that can be taken once
(a second `get` raises `ViewConsumedError`); `RegisteredViews.add_prototype`
stores a callable that builds a fresh view on every `get`. An unknown key
raises `ViewNotFoundError`. `Views` keeps, per thread, the node ids of views
and their tab indices.

## Events

```python
from widgetcore.events import KeyModifiers, key_event

key_event("press", "a").get_char()                  # "a"
key_event("press", "c", KeyModifiers.CONTROL).kind  # EventKind.CTRL_C
```

## What it does not do

The package does not read from or write to a real terminal: there is no event
polling and no output to the console, only the in-memory `Screen`. It has no
widget tree, template evaluation or layout of nested widgets; it provides the
pieces such a toolkit is built from.

## Tests

```
pip install -e ".[test]"
pytest
```