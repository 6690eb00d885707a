from exygraph.api import record_chart, render_rgba
from exygraph.categories import MONTH_ABBREVIATIONS, month_abbreviation, table_labeler
from exygraph.chart import AxisRange, Chart, ChartColors, Padding
from exygraph.errors import CategoryLabelError, GraphError
from exygraph.layout import Layout, compute_layout
from exygraph.projection import project_points, project_value, project_values
from exygraph.renderer import render_chart
from exygraph.series import Point, Series

__all__ = [
    "AxisRange",
    "CategoryLabelError",
    "Chart",
    "ChartColors",
    "GraphError",
    "Layout",
    "MONTH_ABBREVIATIONS",
    "Padding",
    "Point",
    "Series",
    "compute_layout",
    "month_abbreviation",
    "project_points",
    "project_value",
    "project_values",
    "record_chart",
    "render_chart",
    "render_rgba",
    "table_labeler",
]
