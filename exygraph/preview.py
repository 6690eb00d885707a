from __future__ import annotations

from exygraph.chart import AxisRange, Chart
from exygraph.series import Point, Series


def preview_series(count: int = 2, step: float = 50.0) -> Series:
    """Placeholder series for previews: white line, no markers."""
    points = tuple(Point(category=i % 12, value=i * step) for i in range(max(0, count)))
    return Series(
        points=points,
        stroke_color=(255, 255, 255, 255),
        stroke_width=2.0,
        point_radius=0.0,
    )


def preview_chart(count: int = 12, step: float = 8.0) -> Chart:
    series = preview_series(count=count, step=step)
    top = max([100.0] + [p.value for p in series.points])
    return Chart(
        y_mid_reference=top / 2.0,
        series=(series,),
        y_range=AxisRange(0.0, top),
        x_axis_title="Month",
        y_axis_title="Value",
    )
