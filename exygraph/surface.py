from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Protocol

from exygraph.chart import RGBA


@dataclass(frozen=True)
class StrokeStyle:
    color: RGBA
    width: float = 1.0
    dash: tuple[float, ...] | None = None
    dash_phase: float = 0.0
    antialias: bool = True


class DrawingSurface(Protocol):
    """Immediate-mode 2-D drawing capability consumed by the renderer.

    Painting (``stroke_path``/``fill_path``) leaves the current path in place;
    ``begin_path`` discards it. Text origins are the lower-left corner of the
    text box in user space, and glyphs are always drawn upright.
    """

    def save_state(self) -> None: ...

    def restore_state(self) -> None: ...

    def translate(self, tx: float, ty: float) -> None: ...

    def scale(self, sx: float, sy: float) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def add_arc(self, cx: float, cy: float, radius: float, start_angle: float, end_angle: float) -> None: ...

    def stroke_path(self, style: StrokeStyle) -> None: ...

    def fill_path(self, color: RGBA) -> None: ...

    def fill_linear_gradient(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        start_color: RGBA,
        end_color: RGBA,
    ) -> None: ...

    def text_size(self, text: str, font_size_px: float) -> tuple[float, float]: ...

    def draw_text(self, x: float, y: float, text: str, color: RGBA, font_size_px: float) -> None: ...


@contextmanager
def saved_state(surface: DrawingSurface) -> Iterator[DrawingSurface]:
    surface.save_state()
    try:
        yield surface
    finally:
        surface.restore_state()


@contextmanager
def flipped_text_space(surface: DrawingSurface, height: float) -> Iterator[DrawingSurface]:
    """Scope in which y grows upward from the bottom edge of the bounds."""
    with saved_state(surface):
        surface.translate(0.0, height)
        surface.scale(1.0, -1.0)
        yield surface
