from __future__ import annotations

import argparse
import logging
from pathlib import Path

import numpy as np
from PIL import Image

from exygraph import AxisRange, Chart, ChartColors, Padding, render_rgba
from exygraph.adapters import series_from_values


def build_chart() -> Chart:
    months = np.arange(12)
    rainfall = np.asarray([78, 61, 55, 49, 52, 47, 38, 44, 58, 74, 86, 91], dtype=np.float64)
    temperature = 10.0 + 12.0 * np.sin((months - 3) / 12.0 * 2.0 * np.pi) + 40.0
    return Chart(
        y_mid_reference=50.0,
        series=(
            series_from_values(rainfall, categories=months.tolist(), stroke_color=(255, 255, 255), stroke_width=2.0, point_radius=3.0),
            series_from_values(temperature, categories=months.tolist(), stroke_color=(255, 196, 90), stroke_width=1.5, point_radius=0.0),
        ),
        y_range=AxisRange(0.0, 100.0),
        padding=Padding(top=16, bottom=48, left=16, right=16),
        colors=ChartColors(top=(38, 86, 178, 255), bottom=(12, 24, 58, 255), axis=(150, 220, 160, 255)),
        x_axis_title="Month",
        y_axis_title="mm",
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a sample monthly line chart to PNG")
    parser.add_argument("--out", type=Path, default=Path("monthly_chart.png"))
    parser.add_argument("--width", type=int, default=640)
    parser.add_argument("--height", type=int, default=360)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    frame = render_rgba(build_chart(), args.width, args.height)
    Image.fromarray(frame).save(args.out)
    logging.getLogger("monthly_chart").info("wrote %s (%dx%d)", args.out, args.width, args.height)


if __name__ == "__main__":
    main()
