from __future__ import annotations

import math

from exygraph.layout import Layout


CATEGORY_LABEL_STRIDE = 4


def category_label_indices(count: int, stride: int = CATEGORY_LABEL_STRIDE) -> range:
    return range(0, max(0, int(count)), stride)


def format_scale_value(value: float) -> str:
    if not math.isfinite(value):
        return str(value)
    return str(int(value))


# Text origins below are lower-left corners in bottom-up (flipped) space.


def category_label_origin(layout: Layout, x: float, text_w: float, text_h: float) -> tuple[float, float]:
    return (x - text_w / 2.0, layout.bottom - text_h)


def x_title_origin(layout: Layout, text_w: float) -> tuple[float, float]:
    return (layout.left + layout.x_axis_length / 2.0 - text_w / 2.0, 0.0)


def upper_scale_origin(layout: Layout, text_w: float, text_h: float) -> tuple[float, float]:
    return (layout.width - layout.right - text_w, layout.height - layout.top - text_h)


def lower_scale_origin(layout: Layout, text_w: float, text_h: float) -> tuple[float, float]:
    return (layout.width - layout.right - text_w, layout.bottom + text_h / 2.0)
