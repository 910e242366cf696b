from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union
import math
import numpy as np

from .postscript import fmt_num


class InvalidGeometry(ValueError):
    """Raised when shape parameters cannot describe a drawable shape."""


class Shape:
    def get_height(self) -> float:
        raise NotImplementedError

    def get_width(self) -> float:
        raise NotImplementedError

    def get_postscript(self) -> str:
        raise NotImplementedError

    # ---- Transform helpers ----
    def scaled(self, x_scale: float, y_scale: float | None = None) -> "ScaledShape":
        if y_scale is None:
            y_scale = x_scale
        return ScaledShape(self, x_scale, y_scale)

    def rotated(self, rotation: Union["Rotation", int]) -> "RotatedShape":
        return RotatedShape(self, rotation)


@dataclass(frozen=True)
class Circle(Shape):
    """
    Circle centered at the current point.
    """
    radius: float

    def __post_init__(self):
        object.__setattr__(self, "radius", float(self.radius))

    def get_height(self) -> float:
        return 2 * self.radius

    def get_width(self) -> float:
        return 2 * self.radius

    def get_postscript(self) -> str:
        return f"gsave currentpoint translate newpath 0 0 {fmt_num(self.radius)} 0 360 arc closepath stroke grestore\n"


@dataclass(frozen=True)
class Rectangle(Shape):
    width: float
    height: float

    def __post_init__(self):
        object.__setattr__(self, "width", float(self.width))
        object.__setattr__(self, "height", float(self.height))

    def get_height(self) -> float:
        return self.height

    def get_width(self) -> float:
        return self.width

    def get_postscript(self) -> str:
        # Drawing starts at the center of the bounding box: move to the
        # bottom-left corner, then walk the edges with relative lines.
        w, h = self.get_width(), self.get_height()
        output = "gsave\n"
        output += f"{fmt_num(-w / 2)} {fmt_num(-h / 2)} rmoveto\n"
        output += f"{fmt_num(w)} 0 rlineto\n"
        output += f"0 {fmt_num(h)} rlineto\n"
        output += f"{fmt_num(-w)} 0 rlineto\n"
        output += "closepath\nstroke\ngrestore\n"
        return output


@dataclass(frozen=True)
class Spacer(Shape):
    """
    Invisible box: takes up room in a layout, draws nothing.
    """
    width: float
    height: float

    def __post_init__(self):
        object.__setattr__(self, "width", float(self.width))
        object.__setattr__(self, "height", float(self.height))

    def get_height(self) -> float:
        return self.height

    def get_width(self) -> float:
        return self.width

    def get_postscript(self) -> str:
        return ""


@dataclass(frozen=True)
class Polygon(Shape):
    """
    Regular polygon with a flat bottom edge.

    For an even number of sides the polygon rests on an edge and has an edge
    at the top; for an odd number a vertex sits on the vertical axis at the
    top. Sides divisible by four also have vertical left/right edges, so the
    width equals the height.
    """
    num_sides: int
    side_length: float

    def __post_init__(self):
        object.__setattr__(self, "num_sides", int(self.num_sides))
        object.__setattr__(self, "side_length", float(self.side_length))

    def get_height(self) -> float:
        n, s = self.num_sides, self.side_length
        if n % 2 == 0:
            return s * math.cos(math.pi / n) / math.sin(math.pi / n)
        return s * (1 + math.cos(math.pi / n)) / (2 * math.sin(math.pi / n))

    def get_width(self) -> float:
        n, s = self.num_sides, self.side_length
        if n % 4 == 0:
            return s * math.cos(math.pi / n) / math.sin(math.pi / n)
        if n % 2 == 0:
            return s / math.sin(math.pi / n)
        return s * math.sin(math.pi * (n - 1) / (2 * n)) / math.sin(math.pi / n)

    def start_offset(self) -> tuple[float, float]:
        """
        Offset from the center to the bottom-left vertex.
        """
        return -self.side_length / 2, -self.get_height() / 2

    def edge_vectors(self) -> np.ndarray:
        """
        Edge i points in direction i*2*pi/n (counter-clockwise, first edge
        horizontal along the bottom). Shape (n, 2).
        """
        n = self.num_sides
        directions = np.arange(n) * 2 * math.pi / n
        return self.side_length * np.stack([np.cos(directions), np.sin(directions)], axis=1)

    def get_postscript(self) -> str:
        dx, dy = self.start_offset()
        output = "gsave\n"
        output += f"{fmt_num(dx)} {fmt_num(dy)} rmoveto\n"
        # closepath draws the last edge
        for next_x, next_y in self.edge_vectors()[: self.num_sides - 1]:
            output += f"{fmt_num(next_x)} {fmt_num(next_y)} rlineto\n"
        output += "closepath\nstroke\ngrestore\n"
        return output


class Square(Polygon):
    def __init__(self, side_length: float):
        super().__init__(4, side_length)


class Triangle(Polygon):
    def __init__(self, side_length: float):
        super().__init__(3, side_length)


@dataclass(frozen=True)
class ScaledShape(Shape):
    shape: Shape
    x_scale: float
    y_scale: float

    def __post_init__(self):
        object.__setattr__(self, "x_scale", float(self.x_scale))
        object.__setattr__(self, "y_scale", float(self.y_scale))

    def get_height(self) -> float:
        return self.y_scale * self.shape.get_height()

    def get_width(self) -> float:
        return self.x_scale * self.shape.get_width()

    def get_postscript(self) -> str:
        # Scaling only affects layout; nothing is drawn for the child.
        return ""


class Rotation(IntEnum):
    R90 = 90
    R180 = 180
    R270 = 270

    @classmethod
    def coerce(cls, value: Union["Rotation", int]) -> "Rotation":
        try:
            return cls(value)
        except ValueError:
            raise InvalidGeometry(f"unsupported rotation: {value!r} (expected 90, 180 or 270)") from None


@dataclass(frozen=True)
class RotatedShape(Shape):
    shape: Shape
    rotation: Rotation

    def __post_init__(self):
        object.__setattr__(self, "rotation", Rotation.coerce(self.rotation))

    def get_height(self) -> float:
        if self.rotation == Rotation.R180:
            return self.shape.get_height()
        return self.shape.get_width()

    def get_width(self) -> float:
        if self.rotation == Rotation.R180:
            return self.shape.get_width()
        return self.shape.get_height()

    def get_postscript(self) -> str:
        output = "gsave\n"
        output += f"{int(self.rotation)} rotate\n"
        output += self.shape.get_postscript()
        output += "grestore\n"
        return output
