import pytest

from bytechess.point import Point


def test_default_is_origin():
    assert Point() == Point(0, 0)


def test_origin_is_h1():
    assert str(Point(0, 0)) == "H1"


def test_a8_is_far_corner():
    assert Point.from_string("A8") == Point(7, 7)


@pytest.mark.parametrize("x", range(8))
@pytest.mark.parametrize("y", range(8))
def test_round_trip(x, y):
    point = Point(x, y)
    assert Point.from_string(str(point)) == point


def test_only_first_two_characters_count():
    assert Point.from_string("C5xyz") == Point.from_string("C5")


def test_out_of_range_characters_leave_zero():
    assert Point.from_string("Z1") == Point.from_string("H1")
    assert Point.from_string("A9") == Point.from_string("A1")


@pytest.mark.parametrize("text", ["", "A", "\u00e92"])
def test_too_short_raises(text):
    with pytest.raises(ValueError):
        Point.from_string(text)


def test_add_identity_and_commutativity():
    a = Point(2, 5)
    b = Point(-1, 3)
    assert a + Point() == a
    assert a + b == b + a
    assert (a + b).x == a.x + b.x
    assert (a + b).y == a.y + b.y


def test_points_are_hashable():
    assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2