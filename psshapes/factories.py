from __future__ import annotations

from typing import Iterable, Union

from .geometry import (
    Shape,
    Circle,
    Rectangle,
    Spacer,
    Polygon,
    Triangle,
    Square,
    ScaledShape,
    RotatedShape,
    Rotation,
)
from .composition import LayeredShape, VerticalShape, HorizontalShape

ShapeArgs = Union[Shape, Iterable[Shape]]


def make_circle(radius: float) -> Shape:
    return Circle(radius)


def make_rectangle(width: float, height: float) -> Shape:
    return Rectangle(width, height)


def make_spacer(width: float, height: float) -> Shape:
    return Spacer(width, height)


def make_polygon(num_sides: int, side_length: float) -> Shape:
    return Polygon(num_sides, side_length)


def make_triangle(side_length: float) -> Shape:
    return Triangle(side_length)


def make_square(side_length: float) -> Shape:
    return Square(side_length)


def make_scaled_shape(shape: Shape, x_scale: float, y_scale: float) -> Shape:
    return ScaledShape(shape, x_scale, y_scale)


def make_rotated_shape(shape: Shape, rotation: Union[Rotation, int]) -> Shape:
    return RotatedShape(shape, rotation)


def make_layered_shape(*shapes: ShapeArgs) -> Shape:
    return LayeredShape(*shapes)


def make_vertical_shape(*shapes: ShapeArgs) -> Shape:
    return VerticalShape(*shapes)


def make_horizontal_shape(*shapes: ShapeArgs) -> Shape:
    return HorizontalShape(*shapes)
