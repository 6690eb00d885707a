from __future__ import annotations

import numpy as np

from exygraph.chart import RGBA
from exygraph.raster.canvas import (
    blend_mask,
    composite,
    downsample_mask,
    mask_bounds,
    supersampled_canvas,
    to_supersampled,
)


def fill_polygon(dst: np.ndarray, xs: np.ndarray, ys: np.ndarray, color: RGBA) -> None:
    if xs.size < 3:
        return
    bounds = mask_bounds(dst, xs, ys, margin=1.0)
    if bounds is None:
        return
    x0, y0, x1, y1 = bounds
    image, draw = supersampled_canvas(x1 - x0, y1 - y0)
    draw.polygon(to_supersampled(xs, ys, x0, y0), fill=255)
    blend_mask(dst, x0, y0, downsample_mask(image, x1 - x0, y1 - y0), color)


def fill_linear_gradient(
    dst: np.ndarray,
    start: tuple[float, float],
    end: tuple[float, float],
    start_color: RGBA,
    end_color: RGBA,
) -> None:
    """Two-stop gradient along ``start -> end``; pixels outside the band are untouched."""
    h, w = dst.shape[:2]
    dx = float(end[0]) - float(start[0])
    dy = float(end[1]) - float(start[1])
    denom = dx * dx + dy * dy
    if h <= 0 or w <= 0 or denom <= 0:
        return

    yy, xx = np.mgrid[0:h, 0:w].astype(np.float32)
    t = ((xx + 0.5 - float(start[0])) * dx + (yy + 0.5 - float(start[1])) * dy) / denom
    inside = (t >= 0.0) & (t <= 1.0)
    t = np.clip(t, 0.0, 1.0)[:, :, None]

    c0 = np.asarray(start_color, dtype=np.float32).reshape(1, 1, 4)
    c1 = np.asarray(end_color, dtype=np.float32).reshape(1, 1, 4)
    colors = c0 + (c1 - c0) * t
    alpha = np.where(inside, colors[:, :, 3] / 255.0, 0.0).astype(np.float32)
    composite(dst, 0, 0, colors[:, :, :3], alpha)
