from __future__ import annotations

import logging
import math

import numpy as np

from exygraph.categories import CategoryLabeler, month_abbreviation
from exygraph.chart import Chart, ChartColors
from exygraph.labels import (
    category_label_indices,
    category_label_origin,
    format_scale_value,
    lower_scale_origin,
    upper_scale_origin,
    x_title_origin,
)
from exygraph.layout import Layout, compute_layout
from exygraph.projection import project_points, project_value
from exygraph.series import Series
from exygraph.surface import DrawingSurface, StrokeStyle, flipped_text_space, saved_state


LOGGER = logging.getLogger(__name__)

MIDLINE_DASH = (8.0, 4.0)
AXIS_STROKE_WIDTH = 1.0
MARKER_STROKE_WIDTH = 1.0


def render_chart(
    surface: DrawingSurface,
    width: float,
    height: float,
    chart: Chart,
    *,
    category_label: CategoryLabeler = month_abbreviation,
) -> Layout:
    """Issue one full redraw of ``chart`` into ``surface`` for the given bounds.

    The pass reads ``chart`` only and keeps no state between calls, so the
    same inputs always produce the same drawing calls. Errors raised by
    ``category_label`` propagate after the surface state is restored.
    """
    layout = compute_layout(width, height, chart.padding)
    with saved_state(surface):
        _draw_background(surface, layout, chart.colors)
        if layout.has_area:
            _draw_axes(surface, layout, chart)
            for series in chart.series:
                _draw_series(surface, layout, chart, series, category_label)
        else:
            LOGGER.debug("zero-length axis for bounds %sx%s; skipping geometry", width, height)
        _draw_axis_title(surface, layout, chart)
        _draw_scale_labels(surface, layout, chart)
    return layout


def _draw_background(surface: DrawingSurface, layout: Layout, colors: ChartColors) -> None:
    with saved_state(surface):
        surface.fill_linear_gradient((0.0, 0.0), (0.0, layout.height), colors.top, colors.bottom)


def _draw_axes(surface: DrawingSurface, layout: Layout, chart: Chart) -> None:
    x0 = layout.left
    x1 = layout.width - layout.right
    with saved_state(surface):
        surface.begin_path()
        surface.move_to(x0, layout.top)
        surface.line_to(x1, layout.top)
        surface.move_to(x0, layout.bottom_edge)
        surface.line_to(x1, layout.bottom_edge)
        surface.stroke_path(StrokeStyle(color=chart.colors.axis, width=AXIS_STROKE_WIDTH, antialias=False))

    if chart.y_range.is_degenerate:
        LOGGER.debug("zero value range %s; midline drawn at vertical centre", chart.y_range)
    mid_y = project_value(
        chart.y_mid_reference,
        y_axis_length=layout.y_axis_length,
        top=layout.top,
        y_min=chart.y_range.min,
        y_max=chart.y_range.max,
    )
    with saved_state(surface):
        surface.begin_path()
        surface.move_to(x0, mid_y)
        surface.line_to(x1, mid_y)
        surface.stroke_path(
            StrokeStyle(color=chart.colors.axis, width=AXIS_STROKE_WIDTH, dash=MIDLINE_DASH, dash_phase=0.0, antialias=False)
        )


def _draw_series(
    surface: DrawingSurface,
    layout: Layout,
    chart: Chart,
    series: Series,
    category_label: CategoryLabeler,
) -> None:
    if len(series) == 0:
        return
    xs, ys = project_points(series, layout, chart.y_range)
    _draw_markers(surface, series, xs, ys)
    _draw_line(surface, series, xs, ys)
    _draw_category_labels(surface, layout, chart, series, xs, category_label)


def _draw_markers(surface: DrawingSurface, series: Series, xs: np.ndarray, ys: np.ndarray) -> None:
    radius = max(0.0, float(series.point_radius))
    with saved_state(surface):
        for x, y in zip(xs.tolist(), ys.tolist(), strict=True):
            surface.begin_path()
            surface.add_arc(x, y, radius, 0.0, 2.0 * math.pi)
            surface.fill_path(series.stroke_color)
            surface.stroke_path(StrokeStyle(color=series.stroke_color, width=MARKER_STROKE_WIDTH, antialias=True))


def _draw_line(surface: DrawingSurface, series: Series, xs: np.ndarray, ys: np.ndarray) -> None:
    if xs.size < 2:
        LOGGER.debug("series with %d point(s) has no connecting line", xs.size)
        return
    with saved_state(surface):
        surface.begin_path()
        surface.move_to(float(xs[0]), float(ys[0]))
        for x, y in zip(xs[1:].tolist(), ys[1:].tolist(), strict=True):
            surface.line_to(x, y)
        surface.stroke_path(
            StrokeStyle(color=series.stroke_color, width=max(0.0, float(series.stroke_width)), antialias=True)
        )


def _draw_category_labels(
    surface: DrawingSurface,
    layout: Layout,
    chart: Chart,
    series: Series,
    xs: np.ndarray,
    category_label: CategoryLabeler,
) -> None:
    font_px = chart.category_font_px
    with flipped_text_space(surface, layout.height):
        for idx in category_label_indices(len(series)):
            text = category_label(series.points[idx].category)
            tw, th = surface.text_size(text, font_px)
            x, y = category_label_origin(layout, float(xs[idx]), tw, th)
            surface.draw_text(x, y, text, chart.colors.text, font_px)


def _draw_axis_title(surface: DrawingSurface, layout: Layout, chart: Chart) -> None:
    if not chart.x_axis_title:
        return
    with flipped_text_space(surface, layout.height):
        tw, _ = surface.text_size(chart.x_axis_title, chart.title_font_px)
        x, y = x_title_origin(layout, tw)
        surface.draw_text(x, y, chart.x_axis_title, chart.colors.text, chart.title_font_px)


def _draw_scale_labels(surface: DrawingSurface, layout: Layout, chart: Chart) -> None:
    font_px = chart.scale_font_px
    upper = format_scale_value(chart.y_range.max)
    lower = format_scale_value(chart.y_range.min)
    with flipped_text_space(surface, layout.height):
        tw, th = surface.text_size(upper, font_px)
        x, y = upper_scale_origin(layout, tw, th)
        surface.draw_text(x, y, upper, chart.colors.text, font_px)
    with flipped_text_space(surface, layout.height):
        tw, th = surface.text_size(lower, font_px)
        x, y = lower_scale_origin(layout, tw, th)
        surface.draw_text(x, y, lower, chart.colors.text, font_px)
