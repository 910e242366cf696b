from __future__ import annotations

from typing import Any, List, Tuple
import numpy as np
import matplotlib.pyplot as plt
from shapely.geometry import Polygon as ShapelyPolygon, Point, box
from shapely import affinity
import shapely.ops

from psshapes import (
    Shape,
    Circle,
    Rectangle,
    Polygon,
    RotatedShape,
    CompoundShape,
)


def _polygon_outline(shape: Polygon, x: float, y: float) -> Any:
    dx, dy = shape.start_offset()
    edges = shape.edge_vectors()
    # vertex k is the start plus the first k edges
    steps = np.vstack([np.zeros((1, 2)), np.cumsum(edges[:-1], axis=0)])
    verts = steps + np.array([x + dx, y + dy])
    return ShapelyPolygon(verts)


def shape_to_outlines(
    shape: Shape,
    origin: Tuple[float, float] = (0.0, 0.0),
) -> List[Any]:
    """
    Place every visible primitive of a shape tree, drawn from the current
    point `origin`, following the same relative moves as its PostScript.
    Spacers and scaled shapes draw nothing, so they contribute no outline.
    """
    x, y = float(origin[0]), float(origin[1])

    if isinstance(shape, Circle):
        return [Point(x, y).buffer(shape.radius, resolution=64)]

    if isinstance(shape, Rectangle):
        w, h = shape.width, shape.height
        return [box(x - w / 2, y - h / 2, x + w / 2, y + h / 2)]

    if isinstance(shape, Polygon):
        if shape.num_sides < 3:
            return []
        return [_polygon_outline(shape, x, y)]

    if isinstance(shape, RotatedShape):
        inner = shape_to_outlines(shape.shape, (x, y))
        return [affinity.rotate(g, int(shape.rotation), origin=(x, y)) for g in inner]

    if isinstance(shape, CompoundShape):
        out: List[Any] = []
        cx, cy = x, y
        for (dx, dy), child in zip(shape.placements(), shape.shapes):
            cx += dx
            cy += dy
            out.extend(shape_to_outlines(child, (cx, cy)))
        return out

    return []


def draw_shape_on_axis(
    ax: plt.Axes,
    shape: Shape,
    edge_color: str = "black",
    line_width: float = 1.0,
    margin: float = 0.05,
) -> None:
    """
    Stroke the outlines of a shape tree onto a Matplotlib axis, with equal
    aspect and limits fitted to the drawn geometry.
    """
    outlines = [g for g in shape_to_outlines(shape) if not g.is_empty]

    ax.set_aspect("equal")
    ax.axis("off")
    if not outlines:
        return

    minx, miny, maxx, maxy = shapely.ops.unary_union(outlines).bounds
    pad = margin * max(maxx - minx, maxy - miny, 1e-9)
    ax.set_xlim(minx - pad, maxx + pad)
    ax.set_ylim(miny - pad, maxy + pad)

    for geom in outlines:
        x, y = geom.exterior.xy
        ax.plot(x, y, color=edge_color, linewidth=line_width, solid_joinstyle="miter")
