from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from exygraph.chart import RGBA


@dataclass(frozen=True)
class Point:
    category: Any
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True)
class Series:
    points: tuple[Point, ...] = ()
    stroke_color: RGBA = (0, 0, 0, 255)
    stroke_width: float = 1.0
    point_radius: float = 2.0
    horizontal_extent: float = 100.0
    label: str | None = field(default=None, compare=False)
    """Carried for the host; nothing in the render pass draws it."""

    def __post_init__(self) -> None:
        # Accept any iterable of points but keep insertion order.
        object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def values(self) -> np.ndarray:
        return np.asarray([p.value for p in self.points], dtype=np.float64)

    def categories(self) -> tuple[Any, ...]:
        return tuple(p.category for p in self.points)

    def logical_segments(self) -> tuple[tuple[tuple[float, float], tuple[float, float]], ...]:
        """Connecting segments in data space.

        Point ``i`` sits at ``x = i * horizontal_extent / N``. Fewer than two
        points have no segments.
        """
        n = len(self.points)
        if n < 2:
            return ()
        step = float(self.horizontal_extent) / float(n)
        segments = []
        for i in range(n - 1):
            a = (step * i, self.points[i].value)
            b = (step * (i + 1), self.points[i + 1].value)
            segments.append((a, b))
        return tuple(segments)
