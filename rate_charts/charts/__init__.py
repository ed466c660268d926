"""Series transformation and chart rendering."""

from .chrome import DEFAULT_CHROME, ChartChrome
from .render import render_chart, render_charts
from .transform import (
    CHART_COLORS,
    PlotSeries,
    drain_and_transform,
    legend_suffix,
    transform,
)

__all__ = [
    "CHART_COLORS",
    "ChartChrome",
    "DEFAULT_CHROME",
    "PlotSeries",
    "drain_and_transform",
    "legend_suffix",
    "render_chart",
    "render_charts",
    "transform",
]
