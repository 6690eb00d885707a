from __future__ import annotations

from typing import Sequence

import numpy as np

from exygraph.chart import RGBA
from exygraph.raster.canvas import (
    SUPERSAMPLE,
    blend_mask,
    downsample_mask,
    draw_pixel,
    mask_bounds,
    supersampled_canvas,
    to_supersampled,
)


def draw_polyline(
    dst: np.ndarray,
    xs: np.ndarray,
    ys: np.ndarray,
    color: RGBA,
    width: float = 1.0,
    *,
    antialias: bool = True,
) -> None:
    if xs.size < 2 or width <= 0:
        return
    if antialias:
        _draw_polyline_aa(dst, xs, ys, color=color, width=width)
        return
    brush = max(1, int(round(width)))
    for i in range(xs.size - 1):
        _draw_line_segment(
            dst,
            int(round(float(xs[i]))),
            int(round(float(ys[i]))),
            int(round(float(xs[i + 1]))),
            int(round(float(ys[i + 1]))),
            color=color,
            width=brush,
        )


def dash_polyline(points: np.ndarray, pattern: Sequence[float], phase: float = 0.0) -> list[np.ndarray]:
    """Split an ``(n, 2)`` polyline into the "on" pieces of a dash pattern."""
    lengths = [max(0.0, float(v)) for v in pattern]
    total = sum(lengths)
    if not lengths or total <= 0 or points.shape[0] < 2:
        return [points]
    if len(lengths) % 2 == 1:
        lengths = lengths * 2
        total *= 2

    idx = 0
    offset = float(phase) % total
    while offset >= lengths[idx]:
        offset -= lengths[idx]
        idx = (idx + 1) % len(lengths)
    remaining = lengths[idx] - offset
    on = idx % 2 == 0

    pieces: list[np.ndarray] = []
    # An empty list means the pen is up.
    current: list[np.ndarray] = [points[0]] if on else []
    for a, b in zip(points[:-1], points[1:], strict=True):
        seg_len = float(np.hypot(*(b - a)))
        pos = 0.0
        while seg_len - pos > remaining:
            pos += remaining
            p = a + (b - a) * (pos / seg_len)
            if on:
                current.append(p)
                pieces.append(np.asarray(current, dtype=np.float64))
                current = []
            else:
                current = [p]
            on = not on
            idx = (idx + 1) % len(lengths)
            remaining = lengths[idx]
        remaining -= seg_len - pos
        if on:
            current.append(b)
    if on and len(current) >= 2:
        pieces.append(np.asarray(current, dtype=np.float64))
    return pieces


def _draw_polyline_aa(dst: np.ndarray, xs: np.ndarray, ys: np.ndarray, color: RGBA, width: float) -> None:
    bounds = mask_bounds(dst, xs, ys, margin=width / 2.0 + 1.0)
    if bounds is None:
        return
    x0, y0, x1, y1 = bounds
    image, draw = supersampled_canvas(x1 - x0, y1 - y0)
    line_w = max(1, int(round(width * SUPERSAMPLE)))
    draw.line(to_supersampled(xs, ys, x0, y0), fill=255, width=line_w, joint="curve")
    blend_mask(dst, x0, y0, downsample_mask(image, x1 - x0, y1 - y0), color)


def _draw_line_segment(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA, width: int) -> None:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        _draw_square_brush(dst, x0, y0, color=color, width=width)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _draw_square_brush(dst: np.ndarray, x: int, y: int, color: RGBA, width: int) -> None:
    radius = max(0, width // 2)
    for yy in range(y - radius, y + radius + 1):
        for xx in range(x - radius, x + radius + 1):
            draw_pixel(dst, xx, yy, color)
