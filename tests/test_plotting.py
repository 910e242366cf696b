"""Tests for the shapely/matplotlib preview."""
import math
import pytest
from PIL import Image
from psshapes import (
    Circle, Rectangle, Spacer, Polygon, Square, Triangle, ScaledShape, RotatedShape, Rotation,
    LayeredShape, VerticalShape, HorizontalShape,
)
from plotting import shape_to_outlines, save_shape_as_svg, save_shape_as_png, render_to_file, PreviewConfig


def test_rectangle_outline_centered():
    (g,) = shape_to_outlines(Rectangle(4, 2), origin=(10, 20))
    assert g.bounds == pytest.approx((8, 19, 12, 21))


def test_square_outline():
    (g,) = shape_to_outlines(Square(2))
    assert g.bounds == pytest.approx((-1, -1, 1, 1), abs=1e-9)


def test_triangle_outline_matches_dimensions():
    t = Triangle(2)
    (g,) = shape_to_outlines(t)
    minx, miny, maxx, maxy = g.bounds
    assert maxx - minx == pytest.approx(t.get_width())
    assert maxy - miny == pytest.approx(t.get_height())
    assert miny == pytest.approx(-math.sqrt(3) / 2)


def test_vertical_running_origin():
    v = VerticalShape(Circle(1), Circle(2))
    lower, upper = shape_to_outlines(v)
    # total height is 4 (last child): first child moves 1 - 2, second 2 + 1
    assert lower.bounds == pytest.approx((-1, -2, 1, 0), abs=1e-6)
    assert upper.bounds == pytest.approx((-2, 0, 2, 4), abs=1e-6)


def test_horizontal_running_origin(tall, wide):
    left, right = shape_to_outlines(HorizontalShape(tall, wide))
    assert left.centroid.x == pytest.approx(0.0)
    assert right.centroid.x == pytest.approx(4.0)


def test_rotated_outline_swaps_extent(wide):
    (g,) = shape_to_outlines(RotatedShape(wide, Rotation.R90))
    assert g.bounds == pytest.approx((-1, -3, 1, 3), abs=1e-9)


def test_invisible_shapes_have_no_outline(tall):
    assert shape_to_outlines(Spacer(3, 3)) == []
    assert shape_to_outlines(ScaledShape(tall, 2, 2)) == []
    assert len(shape_to_outlines(LayeredShape(tall, Spacer(1, 1), tall))) == 2


def test_save_svg(tmp_path, tall, wide):
    path = tmp_path / "preview" / "shape.svg"
    save_shape_as_svg(VerticalShape(tall, wide), str(path))
    assert "<svg" in path.read_text()


def test_png_in_memory(tall):
    img = save_shape_as_png(tall, config=PreviewConfig(figsize=(2.0, 2.0), dpi=50))
    assert isinstance(img, Image.Image)
    assert img.size == (100, 100)


def test_png_for_empty_drawing(tmp_path):
    path = tmp_path / "empty.png"
    assert save_shape_as_png(Spacer(1, 1), str(path)) is None
    assert path.exists()


def test_render_to_file_by_extension(tmp_path, tall):
    assert render_to_file(tall, str(tmp_path / "a.png")).endswith("a.png")
    with pytest.raises(ValueError, match="unsupported preview format"):
        render_to_file(tall, str(tmp_path / "a.ps"))


@pytest.mark.parametrize("n", [0, 1, 2])
def test_polygon_with_too_few_sides_has_no_outline(n):
    assert shape_to_outlines(Polygon(n, 1)) == []


def test_too_few_sides_skipped_inside_compound(tall):
    outlines = shape_to_outlines(LayeredShape(tall, Polygon(2, 1)))
    assert len(outlines) == 1
