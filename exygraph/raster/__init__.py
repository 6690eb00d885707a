from .canvas import blend_mask, composite, new_canvas
from .draw_fill import fill_linear_gradient, fill_polygon
from .draw_lines import dash_polyline, draw_polyline
from .draw_text import draw_text, text_size
from .surface import RasterSurface

__all__ = [
    "RasterSurface",
    "blend_mask",
    "composite",
    "dash_polyline",
    "draw_polyline",
    "draw_text",
    "fill_linear_gradient",
    "fill_polygon",
    "new_canvas",
    "text_size",
]
