"""Tests for psshapes/composition.py folds and placement policies."""
import pytest
from psshapes import (
    Circle, Rectangle, Spacer,
    CompoundShape, LayeredShape, VerticalShape, HorizontalShape,
    LAYERED, VERTICAL,
)


# --- dimension reducers ---

def test_layered_width_reduces_over_heights(tall, wide):
    layered = LayeredShape(tall, wide)
    assert layered.get_height() == 4
    # max of heights (4, 2), not of widths (2, 6)
    assert layered.get_width() == 4


def test_vertical_height_is_last_child():
    v = VerticalShape(Rectangle(1, 4), Rectangle(1, 6))
    assert v.get_height() == 6
    v2 = VerticalShape(Rectangle(1, 6), Rectangle(1, 4))
    assert v2.get_height() == 4


def test_vertical_width_reduces_over_heights(tall, wide):
    assert VerticalShape(tall, wide).get_width() == 4


def test_horizontal_dimensions(tall, wide):
    h = HorizontalShape(tall, wide)
    assert h.get_height() == 4
    # last child's height
    assert h.get_width() == 2


def test_empty_compound_is_zero_sized():
    for cls in (LayeredShape, VerticalShape, HorizontalShape):
        shape = cls()
        assert shape.get_height() == 0
        assert shape.get_width() == 0
        assert shape.get_postscript() == "gsave\ngrestore\n"


# --- placements ---

def test_layered_placements_are_zero(tall, wide):
    assert LayeredShape(tall, wide).placements() == [(0, 0), (0, 0)]


def test_vertical_placements():
    v = VerticalShape(Rectangle(1, 4), Rectangle(1, 6))
    # first: 4/2 - 6/2; second: 6/2 + 4/2
    assert v.placements() == [(0, -1.0), (0, 5.0)]


def test_horizontal_placements(tall, wide):
    h = HorizontalShape(tall, wide)
    # total width is 2 (last child's height)
    assert h.placements() == [(0.0, 0), (4.0, 0)]


def test_three_child_vertical_moves_are_relative():
    a, b, c = Circle(1), Circle(2), Circle(3)
    v = VerticalShape(a, b, c)
    dys = [dy for _, dy in v.placements()]
    assert dys == [1.0 - 3.0, 2.0 + 1.0, 3.0 + 2.0]


# --- rendering ---

def test_layered_postscript(tall, wide):
    assert LayeredShape(tall, wide).get_postscript() == (
        "gsave\n"
        "0 0 rmoveto\n" + tall.get_postscript()
        + "0 0 rmoveto\n" + wide.get_postscript()
        + "grestore\n"
    )


def test_vertical_postscript():
    a, b = Rectangle(1, 4), Rectangle(1, 6)
    assert VerticalShape(a, b).get_postscript() == (
        "gsave\n"
        "0 -1.000000 rmoveto\n" + a.get_postscript()
        + "0 5.000000 rmoveto\n" + b.get_postscript()
        + "grestore\n"
    )


def test_horizontal_postscript(tall, wide):
    assert HorizontalShape(tall, wide).get_postscript() == (
        "gsave\n"
        "0.000000 0 rmoveto\n" + tall.get_postscript()
        + "4.000000 0 rmoveto\n" + wide.get_postscript()
        + "grestore\n"
    )


def test_spacer_takes_room_but_draws_nothing():
    c = Circle(1)
    h = HorizontalShape(c, Spacer(10, 10), c)
    ps = h.get_postscript()
    assert ps.count("arc") == 2
    assert ps.count("rmoveto") == 3
    # spacer height participates in the fold
    assert h.get_height() == 10


def test_nested_postscript_is_repeatable(tall, wide):
    tree = VerticalShape(HorizontalShape(tall, wide), LayeredShape(wide, Circle(2)))
    assert tree.get_postscript() == tree.get_postscript()


# --- construction ---

def test_accepts_iterable_of_children(tall, wide):
    assert LayeredShape([tall, wide]).shapes == (tall, wide)


def test_children_are_shared(tall):
    a = VerticalShape(tall, tall)
    b = LayeredShape(tall)
    assert a.shapes[0] is a.shapes[1] is b.shapes[0]


def test_children_are_read_only(tall):
    v = VerticalShape(tall)
    with pytest.raises(AttributeError):
        v.shapes = ()


def test_custom_policy(tall, wide):
    shape = CompoundShape(tall, wide, policy=VERTICAL)
    assert shape.get_postscript() == VerticalShape(tall, wide).get_postscript()


def test_base_compound_requires_policy(tall):
    with pytest.raises(TypeError):
        CompoundShape(tall)


def test_subclasses_bind_policies():
    assert LayeredShape.policy is LAYERED
    assert VerticalShape().policy.name == "vertical"
