from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import TYPE_CHECKING, Optional, Tuple
import logging
import math
import os

if TYPE_CHECKING:
    from .geometry import Shape

logger = logging.getLogger(__name__)


def fmt_num(value: float) -> str:
    """
    Format a number for PostScript output.

    Integer literals print as-is; everything else uses fixed six-decimal
    notation so output is stable across platforms.
    """
    if isinstance(value, Integral):
        return str(int(value))
    return "%f" % value


@dataclass(frozen=True)
class DocumentConfig:
    # center of a US Letter page, in points
    origin: Tuple[float, float] = (306.0, 396.0)
    line_width: Optional[float] = None
    show_page: bool = True


def bounding_box(shape: "Shape", origin: Tuple[float, float]) -> Tuple[int, int, int, int]:
    w = shape.get_width()
    h = shape.get_height()
    x, y = origin
    # infinite or NaN extents collapse to the origin point
    if not (math.isfinite(w) and math.isfinite(h)):
        w = h = 0.0
    return (
        math.floor(x - w / 2),
        math.floor(y - h / 2),
        math.ceil(x + w / 2),
        math.ceil(y + h / 2),
    )


def to_document(shape: "Shape", config: DocumentConfig = DocumentConfig()) -> str:
    """
    Wrap a shape's drawing commands into a one-page PostScript document,
    with the shape centered on config.origin.
    """
    llx, lly, urx, ury = bounding_box(shape, config.origin)
    out = "%!PS-Adobe-3.0\n"
    out += f"%%BoundingBox: {llx} {lly} {urx} {ury}\n"
    out += "%%Pages: 1\n"
    out += "%%EndComments\n"
    if config.line_width is not None:
        out += f"{fmt_num(float(config.line_width))} setlinewidth\n"
    out += f"{fmt_num(float(config.origin[0]))} {fmt_num(float(config.origin[1]))} moveto\n"
    out += shape.get_postscript()
    if config.show_page:
        out += "showpage\n"
    out += "%%EOF\n"
    return out


def write_postscript(shape: "Shape", path: str, config: DocumentConfig = DocumentConfig()) -> str:
    text = to_document(shape, config)
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(path, "w") as f:
        f.write(text)
    logger.debug("wrote %d bytes of PostScript to %s", len(text), path)
    return path
