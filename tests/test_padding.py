import pytest

from widgetcore.geometry import Size
from widgetcore.padding import Padding


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1], Padding(top=1, right=1, bottom=1, left=1)),
        ([1, 2], Padding(top=1, right=2, bottom=1, left=2)),
        ([1, 2, 3], Padding(top=1, right=2, bottom=3, left=2)),
        ([1, 2, 3, 4], Padding(top=1, right=2, bottom=3, left=4)),
    ],
)
def test_padding_from_iter(values, expected):
    assert Padding.from_iter(values) == expected


def test_from_iter_empty_is_zero():
    assert Padding.from_iter([]) == Padding.ZERO


def test_from_iter_accepts_generator():
    assert Padding.from_iter(n for n in [1, 2, 3, 4]) == Padding(1, 2, 3, 4)


def test_uniform_matches_single_value():
    assert Padding.uniform(2) == Padding.from_iter([2])
    assert Padding.uniform(2) == Padding(2, 2, 2, 2)


def test_take_returns_old_and_resets():
    padding = Padding(1, 2, 3, 4)
    taken = padding.take()
    assert taken == Padding(1, 2, 3, 4)
    assert padding == Padding.ZERO


def test_size_of_uniform_padding():
    assert Padding.uniform(2).size() == Size(4, 4)


def test_size_of_zero():
    assert Padding.ZERO.size() == Size.ZERO


def test_size_is_sum_of_opposite_sides_symmetry():
    a = Padding(1, 2, 3, 4).size()
    b = Padding(3, 4, 1, 2).size()
    assert a == b