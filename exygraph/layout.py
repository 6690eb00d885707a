from __future__ import annotations

from dataclasses import dataclass

from exygraph.chart import Padding


@dataclass(frozen=True)
class Layout:
    width: float
    height: float
    top: float
    bottom: float
    left: float
    right: float
    x_axis_length: float
    y_axis_length: float

    @property
    def drawable_rect(self) -> tuple[float, float, float, float]:
        return (self.left, self.top, self.x_axis_length, self.y_axis_length)

    @property
    def right_edge(self) -> float:
        return self.left + self.x_axis_length

    @property
    def bottom_edge(self) -> float:
        return self.top + self.y_axis_length

    @property
    def has_area(self) -> bool:
        return self.x_axis_length > 0.0 and self.y_axis_length > 0.0


def compute_layout(width: float, height: float, padding: Padding) -> Layout:
    pad = padding.clamped()
    w = max(0.0, float(width))
    h = max(0.0, float(height))
    return Layout(
        width=w,
        height=h,
        top=pad.top,
        bottom=pad.bottom,
        left=pad.left,
        right=pad.right,
        x_axis_length=max(0.0, w - pad.left - pad.right),
        y_axis_length=max(0.0, h - pad.top - pad.bottom),
    )
