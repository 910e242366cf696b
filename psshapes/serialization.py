"""
JSON composition format.

A node is a dict with a "kind" key plus that kind's parameters, e.g.

    {"kind": "vertical", "children": [
        {"kind": "circle", "radius": 20},
        {"kind": "rotated", "rotation": 90,
         "shape": {"kind": "rectangle", "width": 40, "height": 10}}
    ]}

A file may hold a bare node or {"composition": node}.
"""
from __future__ import annotations

from typing import Any, Callable, Dict
import json
import logging
import math
import os

from .geometry import (
    Shape,
    InvalidGeometry,
    Circle,
    Rectangle,
    Spacer,
    Polygon,
    Triangle,
    Square,
    ScaledShape,
    RotatedShape,
)
from .composition import CompoundShape, LayeredShape, VerticalShape, HorizontalShape

logger = logging.getLogger(__name__)


def _number(node: dict, key: str) -> float:
    if key not in node:
        raise InvalidGeometry(f"{node.get('kind')} node missing '{key}'")
    value = node[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidGeometry(f"{node.get('kind')} '{key}' must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidGeometry(f"{node.get('kind')} '{key}' must be finite, got {value!r}")
    return float(value)


def _integer(node: dict, key: str) -> int:
    value = _number(node, key)
    if not value.is_integer():
        raise InvalidGeometry(f"{node.get('kind')} '{key}' must be an integer, got {node[key]!r}")
    return int(value)


def _sides(node: dict) -> int:
    n = _integer(node, "num_sides")
    if n < 3:
        raise InvalidGeometry(f"polygon needs at least 3 sides, got {n}")
    return n


def _child(node: dict, key: str = "shape") -> Shape:
    if key not in node:
        raise InvalidGeometry(f"{node.get('kind')} node missing '{key}'")
    return shape_from_dict(node[key])


def _children(node: dict) -> list:
    children = node.get("children")
    if not isinstance(children, list):
        raise InvalidGeometry(f"{node.get('kind')} node needs a 'children' list")
    return [shape_from_dict(ch) for ch in children]


_BUILDERS: Dict[str, Callable[[dict], Shape]] = {
    "circle": lambda n: Circle(_number(n, "radius")),
    "rectangle": lambda n: Rectangle(_number(n, "width"), _number(n, "height")),
    "spacer": lambda n: Spacer(_number(n, "width"), _number(n, "height")),
    "polygon": lambda n: Polygon(_sides(n), _number(n, "side_length")),
    "square": lambda n: Square(_number(n, "side_length")),
    "triangle": lambda n: Triangle(_number(n, "side_length")),
    "scaled": lambda n: ScaledShape(_child(n), _number(n, "x_scale"), _number(n, "y_scale")),
    "rotated": lambda n: RotatedShape(_child(n), _integer(n, "rotation")),
    "layered": lambda n: LayeredShape(_children(n)),
    "vertical": lambda n: VerticalShape(_children(n)),
    "horizontal": lambda n: HorizontalShape(_children(n)),
}


def shape_from_dict(node: Any) -> Shape:
    if not isinstance(node, dict):
        raise InvalidGeometry(f"shape node must be an object, got {type(node).__name__}")
    kind = node.get("kind")
    builder = _BUILDERS.get(kind)
    if builder is None:
        raise InvalidGeometry(f"unknown shape kind: {kind!r}")
    return builder(node)


def shape_to_dict(shape: Shape) -> dict:
    # subclasses first: Square/Triangle are Polygons
    if isinstance(shape, Square):
        return {"kind": "square", "side_length": shape.side_length}
    if isinstance(shape, Triangle):
        return {"kind": "triangle", "side_length": shape.side_length}
    if isinstance(shape, Polygon):
        return {"kind": "polygon", "num_sides": shape.num_sides, "side_length": shape.side_length}
    if isinstance(shape, Circle):
        return {"kind": "circle", "radius": shape.radius}
    if isinstance(shape, Rectangle):
        return {"kind": "rectangle", "width": shape.width, "height": shape.height}
    if isinstance(shape, Spacer):
        return {"kind": "spacer", "width": shape.width, "height": shape.height}
    if isinstance(shape, ScaledShape):
        return {
            "kind": "scaled",
            "x_scale": shape.x_scale,
            "y_scale": shape.y_scale,
            "shape": shape_to_dict(shape.shape),
        }
    if isinstance(shape, RotatedShape):
        return {"kind": "rotated", "rotation": int(shape.rotation), "shape": shape_to_dict(shape.shape)}
    if isinstance(shape, CompoundShape):
        return {"kind": shape.policy.name, "children": [shape_to_dict(s) for s in shape.shapes]}
    raise TypeError(f"cannot serialize {type(shape).__name__}")


def load_composition(path: str) -> Shape:
    with open(path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidGeometry(f"{path}: not valid JSON ({e})") from e
    if isinstance(data, dict) and "composition" in data:
        data = data["composition"]
    shape = shape_from_dict(data)
    logger.debug("loaded %s from %s", type(shape).__name__, path)
    return shape


def save_composition(shape: Shape, path: str) -> str:
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(path, "w") as f:
        json.dump({"composition": shape_to_dict(shape)}, f, indent=2)
    return path
