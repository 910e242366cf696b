from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Tuple, Union

from .geometry import Shape
from .postscript import fmt_num

Offset = Tuple[Union[int, float], Union[int, float]]


@dataclass(frozen=True)
class CompositionPolicy:
    """
    How a compound shape combines its children.

    combined_height / combined_width are reducers folded over the children
    (starting from 0.0); placement_offset gives the relative move that takes
    the current point to the center of child i.
    """
    name: str
    combined_height: Callable[[float, Shape], float]
    combined_width: Callable[[float, Shape], float]
    placement_offset: Callable[["CompoundShape", int], Offset]


def _layered_offset(compound: "CompoundShape", i: int) -> Offset:
    return 0, 0


def _vertical_offset(compound: "CompoundShape", i: int) -> Offset:
    shapes = compound.shapes
    if i == 0:
        return 0, shapes[0].get_height() / 2 - compound.get_height() / 2
    return 0, shapes[i].get_height() / 2 + shapes[i - 1].get_height() / 2


def _horizontal_offset(compound: "CompoundShape", i: int) -> Offset:
    shapes = compound.shapes
    if i == 0:
        return shapes[0].get_width() / 2 - compound.get_width() / 2, 0
    return shapes[i].get_width() / 2 + shapes[i - 1].get_width() / 2, 0


# Width reducers fold over child heights, and the stacking axis keeps the
# last child's value instead of a sum. Existing layouts depend on both.
LAYERED = CompositionPolicy(
    name="layered",
    combined_height=lambda acc, shape: max(acc, shape.get_height()),
    combined_width=lambda acc, shape: max(acc, shape.get_height()),
    placement_offset=_layered_offset,
)

VERTICAL = CompositionPolicy(
    name="vertical",
    combined_height=lambda acc, shape: shape.get_height(),
    combined_width=lambda acc, shape: max(acc, shape.get_height()),
    placement_offset=_vertical_offset,
)

HORIZONTAL = CompositionPolicy(
    name="horizontal",
    combined_height=lambda acc, shape: max(acc, shape.get_height()),
    combined_width=lambda acc, shape: shape.get_height(),
    placement_offset=_horizontal_offset,
)


class CompoundShape(Shape):
    policy: CompositionPolicy

    def __init__(self, *shapes: Shape, policy: CompositionPolicy | None = None):
        # accept a single iterable as well as positional children
        if len(shapes) == 1 and not isinstance(shapes[0], Shape):
            shapes = tuple(shapes[0])
        if policy is not None:
            self.policy = policy
        elif not hasattr(self, "policy"):
            raise TypeError("CompoundShape requires a composition policy")
        self._shapes: Tuple[Shape, ...] = tuple(shapes)

    @property
    def shapes(self) -> Tuple[Shape, ...]:
        return self._shapes

    def __repr__(self) -> str:
        inner = ", ".join(repr(s) for s in self._shapes)
        return f"{type(self).__name__}({inner})"

    def get_height(self) -> float:
        height = 0.0
        for shape in self._shapes:
            height = self.policy.combined_height(height, shape)
        return height

    def get_width(self) -> float:
        width = 0.0
        for shape in self._shapes:
            width = self.policy.combined_width(width, shape)
        return width

    def placements(self) -> List[Offset]:
        """
        Relative moves, one per child, applied in order before drawing it.
        """
        return [self.policy.placement_offset(self, i) for i in range(len(self._shapes))]

    def get_postscript(self) -> str:
        ps = "gsave\n"
        for (dx, dy), shape in zip(self.placements(), self._shapes):
            ps += f"{fmt_num(dx)} {fmt_num(dy)} rmoveto\n"
            ps += shape.get_postscript()
        ps += "grestore\n"
        return ps


class LayeredShape(CompoundShape):
    """
    Children drawn on top of each other, all centered at the same point.
    """
    policy = LAYERED


class VerticalShape(CompoundShape):
    """
    Children stacked bottom-up along the vertical axis.
    """
    policy = VERTICAL


class HorizontalShape(CompoundShape):
    """
    Children stacked left-to-right along the horizontal axis.
    """
    policy = HORIZONTAL
