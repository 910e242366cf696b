from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple
import io
import logging
import os
import matplotlib.pyplot as plt
from PIL import Image

from psshapes import Shape

from plotting.vectorizer import draw_shape_on_axis

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreviewConfig:
    figsize: Tuple[float, float] = (6.0, 6.0)
    dpi: int = 150
    edge_color: str = "black"
    line_width: float = 1.0
    margin: float = 0.05


def _figure_for(shape: Shape, config: PreviewConfig):
    fig, ax = plt.subplots(figsize=config.figsize)
    draw_shape_on_axis(
        ax,
        shape,
        edge_color=config.edge_color,
        line_width=config.line_width,
        margin=config.margin,
    )
    return fig


def _ensure_parent(filename: str) -> None:
    out_dir = os.path.dirname(filename)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)


def save_shape_as_svg(
    shape: Shape,
    filename: str,
    config: PreviewConfig = PreviewConfig(),
) -> None:
    fig = _figure_for(shape, config)
    _ensure_parent(filename)
    fig.savefig(filename, format="svg", bbox_inches="tight", pad_inches=0)
    plt.close(fig)
    logger.debug("wrote SVG preview to %s", filename)


def save_shape_as_png(
    shape: Shape,
    filename: Optional[str] = None,
    config: PreviewConfig = PreviewConfig(),
) -> Optional[Image.Image]:
    """
    Saves a PNG preview of the shape, or returns the PIL Image if filename
    is None (in-memory rendering).
    """
    fig = _figure_for(shape, config)
    if filename is None:
        buffer = io.BytesIO()
        fig.savefig(buffer, format="png", dpi=config.dpi, facecolor="white")
        plt.close(fig)
        buffer.seek(0)
        return Image.open(buffer)
    _ensure_parent(filename)
    fig.savefig(filename, format="png", dpi=config.dpi, facecolor="white")
    plt.close(fig)
    logger.debug("wrote PNG preview to %s", filename)
    return None


def render_to_file(
    shape: Shape,
    out_path: str,
    config: PreviewConfig = PreviewConfig(),
) -> str:
    """
    Write a preview, picking SVG or PNG from the file extension.
    """
    ext = os.path.splitext(out_path)[1].lower()
    if ext == ".svg":
        save_shape_as_svg(shape, out_path, config)
    elif ext == ".png":
        save_shape_as_png(shape, out_path, config)
    else:
        raise ValueError(f"unsupported preview format: {ext or out_path!r} (use .png or .svg)")
    return out_path
