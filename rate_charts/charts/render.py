"""Draw plot series onto matplotlib axes."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Sequence

from rate_charts.charts.chrome import DEFAULT_CHROME, ChartChrome
from rate_charts.charts.transform import CHART_COLORS, PlotSeries, drain_and_transform
from rate_charts.telemetry.buffer import MetricsBuffer

logger = logging.getLogger(__name__)


def to_datetime(timestamp_ms: int) -> datetime:
    return datetime.fromtimestamp(timestamp_ms / 1000.0, tz=timezone.utc)


def render_chart(ax: Any, series: Sequence[PlotSeries], chrome: ChartChrome = DEFAULT_CHROME) -> List[Any]:
    """Replace the contents of ``ax`` with ``series`` and return the drawn lines."""
    ax.clear()
    lines = []
    for item in series:
        xs = [to_datetime(x) for x in item.xs] if chrome.x_time_mode else item.xs
        linestyle = "-" if chrome.show_lines else "none"
        line = ax.plot(xs, item.ys, color=item.color, linestyle=linestyle, label=item.name + item.legend_suffix)[0]
        lines.append(line)
    chrome.apply(ax)
    return lines


def render_charts(
    buffer: MetricsBuffer,
    axes_by_chart: Mapping[str, Any],
    rate_modes: Mapping[str, bool],
    chrome: ChartChrome = DEFAULT_CHROME,
    palette: Sequence[str] = CHART_COLORS,
    absolute_unit: Optional[str] = None,
    rate_unit: Optional[str] = None,
) -> Dict[str, List[PlotSeries]]:
    """Drain and draw every chart in ``axes_by_chart``; charts default to absolute mode."""
    units = {}
    if absolute_unit is not None:
        units["absolute_unit"] = absolute_unit
    if rate_unit is not None:
        units["rate_unit"] = rate_unit

    rendered: Dict[str, List[PlotSeries]] = {}
    for chart_id, ax in axes_by_chart.items():
        rate_mode = rate_modes.get(chart_id, False)
        series = drain_and_transform(buffer, chart_id, rate_mode, palette, **units)
        render_chart(ax, series, chrome)
        logger.debug("rendered chart %s (%s mode, %d series)", chart_id, "rate" if rate_mode else "absolute", len(series))
        rendered[chart_id] = series
    return rendered
