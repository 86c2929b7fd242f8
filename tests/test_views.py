import threading

import pytest

from widgetcore.errors import ViewConsumedError, ViewNotFoundError
from widgetcore.views import RegisteredViews, View, Views


class AView(View):
    pass


class CountingView(View):
    def __init__(self):
        self.events = []
        self.ticks = 0

    def on_event(self, event, nodes):
        self.events.append(event)

    def state(self):
        return {"count": len(self.events)}

    def tick(self):
        self.ticks += 1


@pytest.fixture(autouse=True)
def clean():
    RegisteredViews.clear()
    Views.clear()
    yield
    RegisteredViews.clear()
    Views.clear()


def test_eval_missing_view():
    with pytest.raises(ViewNotFoundError):
        RegisteredViews.get(12345)


def test_prototype_view_makes_new_instances():
    RegisteredViews.add_prototype(0, AView)
    first = RegisteredViews.get(0)
    second = RegisteredViews.get(0)
    assert isinstance(first, AView)
    assert first is not second


def test_consume_view_twice():
    view = AView()
    RegisteredViews.add_view(0, view)
    assert RegisteredViews.get(0) is view
    with pytest.raises(ViewConsumedError):
        RegisteredViews.get(0)


def test_view_hooks_overridden():
    RegisteredViews.add_view(1, CountingView())
    view = RegisteredViews.get(1)
    view.on_event("e", None)
    view.tick()
    assert view.state() == {"count": 1}
    assert view.ticks == 1


def test_views_insert_and_for_each_in_order():
    Views.insert((0, 2), 3)
    Views.insert((0, 1), None)
    seen = []
    Views.for_each(lambda node_id, tab: seen.append((node_id, tab)))
    assert seen == [((0, 1), None), ((0, 2), 3)]


def test_views_update_existing_only():
    Views.insert((0,), 1)
    Views.update((0,), 5)
    Views.update((9,), 7)
    assert Views.all(lambda views: dict(views)) == {(0,): 5}


def test_views_all_returns_func_result():
    Views.insert((0,), 1)
    Views.insert((1,), 2)
    found = Views.all(lambda views: next(k for k, v in views.items() if v == 2))
    assert found == (1,)


def test_views_clear():
    Views.insert((0,), 1)
    Views.clear()
    assert Views.all(len) == 0


def test_views_are_per_thread():
    Views.insert((0,), 1)
    result = []
    thread = threading.Thread(target=lambda: result.append(Views.all(len)))
    thread.start()
    thread.join()
    assert result == [0]
    assert Views.all(len) == 1