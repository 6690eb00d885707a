from __future__ import annotations

import numpy as np
from PIL import Image, ImageDraw

from exygraph.chart import RGBA


SUPERSAMPLE = 4


def new_canvas(width: int, height: int, color: RGBA = (0, 0, 0, 0)) -> np.ndarray:
    canvas = np.zeros((max(0, int(height)), max(0, int(width)), 4), dtype=np.uint8)
    canvas[:, :, 0] = color[0]
    canvas[:, :, 1] = color[1]
    canvas[:, :, 2] = color[2]
    canvas[:, :, 3] = color[3]
    return canvas


def draw_pixel(dst: np.ndarray, x: int, y: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0] or x < 0 or x >= dst.shape[1]:
        return
    cov = np.ones((1, 1), dtype=np.float32)
    composite(dst, x, y, np.asarray(color[:3], dtype=np.float32).reshape(1, 1, 3), cov * (color[3] / 255.0))


def composite(dst: np.ndarray, x: int, y: int, src_rgb: np.ndarray, src_alpha: np.ndarray) -> None:
    """Source-over blend of a ``(h, w)`` alpha patch placed at ``(x, y)``."""
    h, w = src_alpha.shape
    if h <= 0 or w <= 0:
        return

    x0 = max(0, x)
    y0 = max(0, y)
    x1 = min(dst.shape[1], x + w)
    y1 = min(dst.shape[0], y + h)
    if x1 <= x0 or y1 <= y0:
        return

    sx0 = x0 - x
    sy0 = y0 - y
    sx1 = sx0 + (x1 - x0)
    sy1 = sy0 + (y1 - y0)

    a = src_alpha[sy0:sy1, sx0:sx1].astype(np.float32)
    if not np.any(a > 0):
        return
    rgb = src_rgb
    if rgb.shape[0] != 1 or rgb.shape[1] != 1:
        rgb = rgb[sy0:sy1, sx0:sx1]

    patch = dst[y0:y1, x0:x1]
    dst_rgb = patch[:, :, :3].astype(np.float32)
    dst_alpha = patch[:, :, 3].astype(np.float32) / 255.0

    out_alpha = a + dst_alpha * (1.0 - a)
    out_rgb_num = rgb * a[:, :, None] + dst_rgb * dst_alpha[:, :, None] * (1.0 - a[:, :, None])
    safe_alpha = np.where(out_alpha > 1e-6, out_alpha, 1.0)
    out_rgb = out_rgb_num / safe_alpha[:, :, None]

    patch[:, :, :3] = np.clip(np.rint(out_rgb), 0, 255).astype(np.uint8)
    patch[:, :, 3] = np.clip(np.rint(out_alpha * 255.0), 0, 255).astype(np.uint8)


def blend_mask(dst: np.ndarray, x: int, y: int, mask: np.ndarray, color: RGBA) -> None:
    cov = mask.astype(np.float32) / 255.0
    src_rgb = np.asarray(color[:3], dtype=np.float32).reshape(1, 1, 3)
    composite(dst, x, y, src_rgb, cov * (color[3] / 255.0))


def mask_bounds(
    dst: np.ndarray,
    xs: np.ndarray,
    ys: np.ndarray,
    margin: float,
) -> tuple[int, int, int, int] | None:
    """Clipped integer box ``(x0, y0, x1, y1)`` around points plus margin."""
    if xs.size == 0:
        return None
    x0 = max(0, int(np.floor(float(np.min(xs)) - margin)))
    y0 = max(0, int(np.floor(float(np.min(ys)) - margin)))
    x1 = min(dst.shape[1], int(np.ceil(float(np.max(xs)) + margin)) + 1)
    y1 = min(dst.shape[0], int(np.ceil(float(np.max(ys)) + margin)) + 1)
    if x1 <= x0 or y1 <= y0:
        return None
    return (x0, y0, x1, y1)


def supersampled_canvas(width: int, height: int) -> tuple[Image.Image, ImageDraw.ImageDraw]:
    image = Image.new("L", (width * SUPERSAMPLE, height * SUPERSAMPLE), 0)
    return image, ImageDraw.Draw(image)


def downsample_mask(image: Image.Image, width: int, height: int) -> np.ndarray:
    return np.asarray(image.resize((width, height), Image.Resampling.BOX), dtype=np.uint8)


def to_supersampled(xs: np.ndarray, ys: np.ndarray, x0: int, y0: int) -> list[tuple[float, float]]:
    lx = (xs - x0) * SUPERSAMPLE
    ly = (ys - y0) * SUPERSAMPLE
    return list(zip(lx.tolist(), ly.tolist(), strict=True))
