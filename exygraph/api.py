from __future__ import annotations

import numpy as np

from exygraph.categories import CategoryLabeler, month_abbreviation
from exygraph.chart import RGBA, Chart
from exygraph.raster import RasterSurface
from exygraph.recording import DrawCommand, RecordingSurface, TextMeasure, monospace_measure
from exygraph.renderer import render_chart


def record_chart(
    chart: Chart,
    width: float,
    height: float,
    *,
    category_label: CategoryLabeler = month_abbreviation,
    measure: TextMeasure = monospace_measure,
) -> tuple[DrawCommand, ...]:
    surface = RecordingSurface(measure=measure)
    render_chart(surface, width, height, chart, category_label=category_label)
    return tuple(surface.commands)


def render_rgba(
    chart: Chart,
    width: int,
    height: int,
    *,
    category_label: CategoryLabeler = month_abbreviation,
    background: RGBA = (0, 0, 0, 0),
) -> np.ndarray:
    if width < 0 or height < 0:
        raise ValueError("width and height must be >= 0")
    surface = RasterSurface(width=int(width), height=int(height), background=background)
    render_chart(surface, width, height, chart, category_label=category_label)
    return surface.to_rgba()
