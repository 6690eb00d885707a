from __future__ import annotations

from typing import Sequence

import numpy as np

from exygraph.chart import AxisRange
from exygraph.layout import Layout
from exygraph.series import Series


def project_values(
    values: Sequence[float] | np.ndarray,
    *,
    x_axis_length: float,
    y_axis_length: float,
    left: float,
    top: float,
    y_min: float,
    y_max: float,
) -> tuple[np.ndarray, np.ndarray]:
    """Map ordered values to pixel centres of equal-width slots.

    Point ``i`` lands at ``left + i * L/N + L/(2N)``; values grow upward so
    ``y_max`` maps to ``top`` and ``y_min`` to ``top + y_axis_length``. A zero
    value range puts every point on the vertical midline.
    """
    vals = np.asarray(values, dtype=np.float64).reshape(-1)
    n = vals.size
    if n == 0:
        empty = np.zeros(0, dtype=np.float64)
        return empty, empty.copy()

    x_increment = float(x_axis_length) / float(n)
    x_offset = x_increment / 2.0
    xs = float(left) + x_increment * np.arange(n, dtype=np.float64) + x_offset
    ys = _project_y(vals, y_axis_length=y_axis_length, top=top, y_min=y_min, y_max=y_max)
    return xs, ys


def project_value(value: float, *, y_axis_length: float, top: float, y_min: float, y_max: float) -> float:
    ys = _project_y(np.asarray([value], dtype=np.float64), y_axis_length=y_axis_length, top=top, y_min=y_min, y_max=y_max)
    return float(ys[0])


def project_points(series: Series, layout: Layout, y_range: AxisRange) -> tuple[np.ndarray, np.ndarray]:
    return project_values(
        series.values(),
        x_axis_length=layout.x_axis_length,
        y_axis_length=layout.y_axis_length,
        left=layout.left,
        top=layout.top,
        y_min=y_range.min,
        y_max=y_range.max,
    )


def _project_y(vals: np.ndarray, *, y_axis_length: float, top: float, y_min: float, y_max: float) -> np.ndarray:
    length = float(y_axis_length)
    span = float(y_max) - float(y_min)
    if span == 0.0:
        return np.full(vals.shape, float(top) + length / 2.0, dtype=np.float64)
    fraction = (vals - float(y_min)) / span
    return float(top) + (length - fraction * length)
