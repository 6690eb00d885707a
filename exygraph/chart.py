from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Iterable


if TYPE_CHECKING:
    from exygraph.series import Series


RGBA = tuple[int, int, int, int]


def coerce_color(color: tuple[int, int, int] | tuple[int, int, int, int], alpha: float = 1.0) -> RGBA:
    if len(color) == 3:
        r, g, b = color
        a = int(max(0.0, min(1.0, alpha)) * 255)
        return (int(r), int(g), int(b), a)
    r, g, b, a = color
    out_a = int(max(0.0, min(1.0, alpha)) * a)
    return (int(r), int(g), int(b), out_a)


@dataclass(frozen=True)
class AxisRange:
    min: float = 0.0
    max: float = 100.0

    @property
    def span(self) -> float:
        return float(self.max) - float(self.min)

    @property
    def is_degenerate(self) -> bool:
        return self.span == 0.0


@dataclass(frozen=True)
class Padding:
    top: float = 10.0
    bottom: float = 10.0
    left: float = 10.0
    right: float = 10.0

    def clamped(self) -> "Padding":
        return Padding(
            top=max(0.0, float(self.top)),
            bottom=max(0.0, float(self.bottom)),
            left=max(0.0, float(self.left)),
            right=max(0.0, float(self.right)),
        )


@dataclass(frozen=True)
class ChartColors:
    top: RGBA = (0, 0, 255, 255)
    bottom: RGBA = (0, 0, 255, 255)
    axis: RGBA = (0, 255, 0, 255)
    text: RGBA = (255, 255, 255, 255)


@dataclass(frozen=True, kw_only=True)
class Chart:
    """Immutable description of one chart; the render pass only reads it."""

    y_mid_reference: float
    series: tuple["Series", ...] = ()
    x_range: AxisRange = field(default_factory=AxisRange)
    """Carried for the host; x projection uses equal slots and ignores it."""
    y_range: AxisRange = field(default_factory=AxisRange)
    padding: Padding = field(default_factory=Padding)
    axis_width: float = 1.0
    """Carried for the host; axes and the midline are always stroked at 1."""
    colors: ChartColors = field(default_factory=ChartColors)
    x_axis_title: str = ""
    y_axis_title: str = ""
    category_font_px: float = 17.0
    title_font_px: float = 17.0
    scale_font_px: float = 11.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "series", tuple(self.series))
        object.__setattr__(self, "y_mid_reference", float(self.y_mid_reference))

    def with_series(self, *series: "Series") -> "Chart":
        return replace(self, series=tuple(series))

    def add_series(self, series: "Series") -> "Chart":
        return replace(self, series=self.series + (series,))

    def extend_series(self, series: Iterable["Series"]) -> "Chart":
        return replace(self, series=self.series + tuple(series))
