# Re-export core shape API for convenience
from .geometry import (
    Shape,
    InvalidGeometry,
    Circle,
    Rectangle,
    Spacer,
    Polygon,
    Square,
    Triangle,
    ScaledShape,
    Rotation,
    RotatedShape,
)
from .composition import (
    CompositionPolicy,
    CompoundShape,
    LayeredShape,
    VerticalShape,
    HorizontalShape,
    LAYERED,
    VERTICAL,
    HORIZONTAL,
)
from .factories import (
    make_circle,
    make_rectangle,
    make_spacer,
    make_polygon,
    make_triangle,
    make_square,
    make_scaled_shape,
    make_rotated_shape,
    make_layered_shape,
    make_vertical_shape,
    make_horizontal_shape,
)
from .postscript import DocumentConfig, fmt_num, to_document, write_postscript
from .serialization import shape_from_dict, shape_to_dict, load_composition, save_composition
