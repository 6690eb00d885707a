from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from exygraph.chart import coerce_color
from exygraph.errors import GraphError
from exygraph.series import Point, Series


try:
    import pandas as pd
except ImportError:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except ImportError:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def series_from_values(
    values: Any,
    *,
    categories: Sequence[Any] | None = None,
    stroke_color: tuple[int, int, int] | tuple[int, int, int, int] = (0, 0, 0, 255),
    alpha: float = 1.0,
    stroke_width: float = 1.0,
    point_radius: float = 2.0,
    horizontal_extent: float = 100.0,
    label: str | None = None,
) -> Series:
    """Build a ``Series`` from 1-D numeric data.

    Categories default to positional indices. ``None`` entries become NaN.
    """
    arr = _coerce_1d_numeric(_resolve_column(values), label="values")
    if categories is None:
        cats: list[Any] = list(range(arr.size))
    else:
        cats = list(categories)
        if len(cats) != arr.size:
            raise GraphError(f"values and categories length mismatch: {arr.size} != {len(cats)}")
    points = tuple(Point(category=c, value=v) for c, v in zip(cats, arr.tolist(), strict=True))
    return Series(
        points=points,
        stroke_color=coerce_color(stroke_color, alpha),
        stroke_width=float(stroke_width),
        point_radius=float(point_radius),
        horizontal_extent=float(horizontal_extent),
        label=label,
    )


def _resolve_column(values: Any) -> Any:
    if pd is not None and isinstance(values, pd.DataFrame):
        numeric_cols = [c for c in values.columns if pd.api.types.is_numeric_dtype(values[c])]
        if len(numeric_cols) != 1:
            raise GraphError("DataFrame input must contain exactly one numeric column")
        return values[numeric_cols[0]]
    return values


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise GraphError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise GraphError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        arr = np.asarray(list(value), dtype=object)
        if arr.ndim != 1:
            raise GraphError(f"{label} must be 1-D")
        return _coerce_ndarray(arr, label=label)

    raise GraphError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        try:
            out[i] = np.nan if raw is None else float(raw)
        except (TypeError, ValueError) as exc:
            raise GraphError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
