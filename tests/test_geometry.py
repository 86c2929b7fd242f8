import pytest

from widgetcore.geometry import (
    Align,
    Axis,
    Direction,
    Display,
    LocalPos,
    Pos,
    Region,
    ScreenPos,
    Size,
)


def test_region_intersect():
    a = Region(Pos.ZERO, Pos(10, 10))
    b = Region(Pos(5, 5), Pos(8, 8))
    assert a.intersects(b)
    assert b.intersects(a)


def test_region_contains_is_inclusive():
    a = Region(Pos.ZERO, Pos(10, 10))
    assert a.contains(Pos.ZERO)
    assert a.contains(Pos(10, 10))
    assert not a.contains(Pos(11, 10))
    assert not a.contains(Pos(-1, 0))


def test_region_disjoint_does_not_intersect():
    a = Region(Pos.ZERO, Pos(3, 3))
    b = Region(Pos(20, 20), Pos(30, 30))
    assert not a.intersects(b)
    assert not b.intersects(a)


def test_region_constrain_stays_inside_other():
    region = Region(Pos(-5, 1), Pos(50, 50))
    other = Region(Pos(0, 0), Pos(10, 10))
    region.constrain(other)
    assert region.start == Pos(0, 1)
    assert region.end == Pos(10, 10)


def test_pos_add_sub_roundtrip():
    a = Pos(7, -3)
    b = Pos(-2, 9)
    assert (a + b) - b == a
    assert a - a == Pos.ZERO


def test_pos_plus_local_pos():
    p = Pos(-4, 2)
    assert p + LocalPos.ZERO == p
    assert (p + LocalPos(3, 5)) - p == Pos(3, 5)


def test_pos_mul_identity_and_zero():
    p = Pos(12, -7)
    assert p * 1.0 == p
    assert p * 0.0 == Pos.ZERO


def test_pos_mul_rounds_half_away_from_zero():
    assert Pos(5, -5) * 0.5 == Pos(3, -3)


def test_local_pos_add():
    a = LocalPos(1, 2)
    assert a + LocalPos.ZERO == a
    assert a + Pos.ZERO == a
    assert a + ScreenPos(0, 0) == a
    assert a + ScreenPos(4, 4) == LocalPos(5, 6)


def test_local_pos_negative_rejected():
    with pytest.raises(ValueError):
        LocalPos(-1, 0)


def test_local_pos_to_screen():
    assert LocalPos(3, 4).to_screen() == ScreenPos(3, 4)
    with pytest.raises(ValueError):
        LocalPos(70000, 0).to_screen()


def test_size_zero():
    assert Size.ZERO == Size(0, 0)


@pytest.mark.parametrize("align", list(Align))
def test_align_str_parse_roundtrip(align):
    assert Align.parse(str(align)) is align


def test_align_parse_special_cases():
    assert Align.parse("center") is Align.CENTRE
    assert Align.parse("nonsense") is Align.TOP
    assert Align.parse(42) is Align.TOP
    assert str(Align.TOP_LEFT) == "top-left"


def test_display_parse():
    assert Display.parse("hide") is Display.HIDE
    assert Display.parse("exclude") is Display.EXCLUDE
    assert Display.parse("show") is Display.SHOW
    assert Display.parse(None) is Display.SHOW


@pytest.mark.parametrize(
    "text,expected",
    [
        ("horz", Axis.HORIZONTAL),
        ("horizontal", Axis.HORIZONTAL),
        ("vert", Axis.VERTICAL),
        ("vertical", Axis.VERTICAL),
    ],
)
def test_axis_parse(text, expected):
    assert Axis.parse(text) is expected


def test_axis_parse_invalid():
    with pytest.raises(ValueError):
        Axis.parse("diagonal")


@pytest.mark.parametrize(
    "text,expected",
    [
        ("fwd", Direction.FORWARDS),
        ("forwards", Direction.FORWARDS),
        ("forward", Direction.FORWARDS),
        ("bck", Direction.BACKWARDS),
        ("backwards", Direction.BACKWARDS),
        ("backward", Direction.BACKWARDS),
    ],
)
def test_direction_parse(text, expected):
    assert Direction.parse(text) is expected


def test_direction_parse_invalid():
    with pytest.raises(ValueError):
        Direction.parse("sideways")


def test_direction_reverse():
    assert Direction.FORWARDS.reverse() is Direction.BACKWARDS
    assert Direction.BACKWARDS.reverse() is Direction.FORWARDS


def test_direction_reverse_twice():
    assert Direction.FORWARDS.reverse().reverse() is Direction.FORWARDS
    assert Direction.BACKWARDS.reverse().reverse() is Direction.BACKWARDS