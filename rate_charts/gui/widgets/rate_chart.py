"""Rate chart widget embedded in Qt."""

from __future__ import annotations

from typing import List, Optional, Sequence

from PySide6.QtWidgets import QSizePolicy, QVBoxLayout, QWidget
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure

from rate_charts.charts import DEFAULT_CHROME, ChartChrome, PlotSeries, drain_and_transform, render_chart
from rate_charts.charts.transform import ABSOLUTE_UNIT, CHART_COLORS, RATE_UNIT
from rate_charts.telemetry import MetricsBuffer

FIGURE_SIZES = {
    "small": (6, 2.5),
    "medium": (8, 3.5),
    "large": (10, 5),
}


class RateChartWidget(QWidget):
    """Embeds a Matplotlib plot showing one chart's series in absolute or rate mode."""

    def __init__(
        self,
        chart_id: str,
        buffer: MetricsBuffer,
        rate_mode: bool = False,
        size: str = "small",
        chrome: ChartChrome = DEFAULT_CHROME,
        palette: Sequence[str] = CHART_COLORS,
        absolute_unit: str = ABSOLUTE_UNIT,
        rate_unit: str = RATE_UNIT,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.chart_id = chart_id
        self.rate_mode = rate_mode
        self._buffer = buffer
        self._chrome = chrome
        self._palette = palette
        self._absolute_unit = absolute_unit
        self._rate_unit = rate_unit
        self._last_series: List[PlotSeries] = []

        self._figure = Figure(figsize=FIGURE_SIZES.get(size, FIGURE_SIZES["small"]))
        self._canvas = FigureCanvas(self._figure)
        self._canvas.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

        layout = QVBoxLayout()
        layout.addWidget(self._canvas)
        self.setLayout(layout)

        self._ax = self._figure.add_subplot(111)
        self._figure.tight_layout()

    @property
    def last_series(self) -> List[PlotSeries]:
        return list(self._last_series)

    def set_rate_mode(self, rate_mode: bool) -> None:
        self.rate_mode = rate_mode
        self.refresh()

    def refresh(self) -> None:
        self._last_series = drain_and_transform(
            self._buffer,
            self.chart_id,
            self.rate_mode,
            self._palette,
            self._absolute_unit,
            self._rate_unit,
        )
        render_chart(self._ax, self._last_series, self._chrome)
        self._canvas.draw_idle()
