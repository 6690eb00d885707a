from __future__ import annotations

from dataclasses import dataclass, field
import math

import numpy as np

from exygraph.chart import RGBA
from exygraph.raster.canvas import new_canvas
from exygraph.raster.draw_fill import fill_linear_gradient, fill_polygon
from exygraph.raster.draw_lines import dash_polyline, draw_polyline
from exygraph.raster.draw_text import DEFAULT_FONT_FAMILY, draw_text, text_size
from exygraph.surface import StrokeStyle


MAX_ARC_STEPS = 256


@dataclass(frozen=True)
class _Transform:
    sx: float = 1.0
    sy: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return (x * self.sx + self.tx, y * self.sy + self.ty)


@dataclass
class RasterSurface:
    """``DrawingSurface`` that paints into an ``(H, W, 4)`` uint8 RGBA canvas."""

    width: int
    height: int
    background: RGBA = (0, 0, 0, 0)
    font_family: str = DEFAULT_FONT_FAMILY
    canvas: np.ndarray = field(init=False)
    _transform: _Transform = field(default_factory=_Transform)
    _stack: list[_Transform] = field(default_factory=list)
    _subpaths: list[list[tuple[float, float]]] = field(default_factory=list)
    _current: list[tuple[float, float]] | None = None

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("width and height must be >= 0")
        self.canvas = new_canvas(self.width, self.height, color=self.background)

    def to_rgba(self) -> np.ndarray:
        return self.canvas.copy()

    def save_state(self) -> None:
        self._stack.append(self._transform)

    def restore_state(self) -> None:
        if not self._stack:
            raise RuntimeError("restore_state without matching save_state")
        self._transform = self._stack.pop()

    def translate(self, tx: float, ty: float) -> None:
        t = self._transform
        self._transform = _Transform(sx=t.sx, sy=t.sy, tx=t.tx + t.sx * tx, ty=t.ty + t.sy * ty)

    def scale(self, sx: float, sy: float) -> None:
        t = self._transform
        self._transform = _Transform(sx=t.sx * sx, sy=t.sy * sy, tx=t.tx, ty=t.ty)

    def begin_path(self) -> None:
        self._subpaths = []
        self._current = None

    def move_to(self, x: float, y: float) -> None:
        if not (math.isfinite(x) and math.isfinite(y)):
            self._current = None
            return
        self._current = [self._transform.apply(x, y)]
        self._subpaths.append(self._current)

    def line_to(self, x: float, y: float) -> None:
        if self._current is None:
            self.move_to(x, y)
            return
        if not (math.isfinite(x) and math.isfinite(y)):
            self._current = None
            return
        self._current.append(self._transform.apply(x, y))

    def add_arc(self, cx: float, cy: float, radius: float, start_angle: float, end_angle: float) -> None:
        if radius <= 0 or not (math.isfinite(cx) and math.isfinite(cy) and math.isfinite(radius)):
            return
        sweep = end_angle - start_angle
        steps = int(min(MAX_ARC_STEPS, max(8, math.ceil(abs(sweep) * radius))))
        for i in range(steps + 1):
            angle = start_angle + sweep * (i / steps)
            x = cx + radius * math.cos(angle)
            y = cy + radius * math.sin(angle)
            if i == 0 and self._current is None:
                self.move_to(x, y)
            else:
                self.line_to(x, y)

    def stroke_path(self, style: StrokeStyle) -> None:
        if style.width <= 0:
            return
        for pts in self._path_arrays(min_points=2):
            pieces = dash_polyline(pts, style.dash, style.dash_phase) if style.dash else [pts]
            for piece in pieces:
                draw_polyline(
                    self.canvas,
                    piece[:, 0],
                    piece[:, 1],
                    color=style.color,
                    width=style.width,
                    antialias=style.antialias,
                )

    def fill_path(self, color: RGBA) -> None:
        for pts in self._path_arrays(min_points=3):
            fill_polygon(self.canvas, pts[:, 0], pts[:, 1], color)

    def fill_linear_gradient(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        start_color: RGBA,
        end_color: RGBA,
    ) -> None:
        fill_linear_gradient(
            self.canvas,
            self._transform.apply(*start),
            self._transform.apply(*end),
            start_color,
            end_color,
        )

    def text_size(self, text: str, font_size_px: float) -> tuple[float, float]:
        w, h = text_size(text, font_family=self.font_family, font_size_px=font_size_px)
        return (float(w), float(h))

    def draw_text(self, x: float, y: float, text: str, color: RGBA, font_size_px: float) -> None:
        if not text or not (math.isfinite(x) and math.isfinite(y)):
            return
        _, h = text_size(text, font_family=self.font_family, font_size_px=font_size_px)
        dx, dy = self._transform.apply(x, y)
        draw_text(
            self.canvas,
            int(round(dx)),
            int(round(dy - h)),
            text,
            color,
            font_family=self.font_family,
            font_size_px=font_size_px,
        )

    def _path_arrays(self, *, min_points: int) -> list[np.ndarray]:
        return [np.asarray(sub, dtype=np.float64) for sub in self._subpaths if len(sub) >= min_points]
