from .vectorizer import shape_to_outlines, draw_shape_on_axis
from .renderer import PreviewConfig, save_shape_as_svg, save_shape_as_png, render_to_file
