"""Qt main window showing one rate chart per configured chart id."""

from __future__ import annotations

import html
import logging
from typing import Callable, Dict, Mapping, Optional

from PySide6.QtCore import QTimer, Signal
from PySide6.QtWidgets import (
    QApplication,
    QComboBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from rate_charts.gui.widgets import RateChartWidget
from rate_charts.io import ChartSettings, resolve_display_mode
from rate_charts.telemetry import MetricsBuffer

logger = logging.getLogger(__name__)

WINDOW_DEFAULT_SIZE = (1000, 800)

MODE_ABSOLUTE_LABEL = "Absolute"
MODE_RATE_LABEL = "Rate"


class ChartPane(QGroupBox):
    """A chart with its display-mode selector and a legend outside the plot."""

    mode_changed = Signal(str, bool)

    def __init__(self, chart: RateChartWidget, collect: Optional[Callable[[], object]] = None) -> None:
        super().__init__(chart.chart_id)
        self.chart = chart
        self._collect = collect

        self.mode_combo = QComboBox()
        self.mode_combo.addItems([MODE_ABSOLUTE_LABEL, MODE_RATE_LABEL])
        self.mode_combo.setCurrentIndex(1 if chart.rate_mode else 0)
        self.legend_label = QLabel()

        header = QHBoxLayout()
        header.addWidget(QLabel("Mode:"))
        header.addWidget(self.mode_combo)
        header.addStretch()

        layout = QVBoxLayout()
        layout.addLayout(header)
        layout.addWidget(chart)
        layout.addWidget(self.legend_label)
        self.setLayout(layout)

        self.mode_combo.currentIndexChanged.connect(self._on_mode_changed)

    def _on_mode_changed(self, index: int) -> None:
        rate_mode = index == 1
        # The last tick already drained the chart; fetch a fresh window first.
        if self._collect is not None:
            self._collect()
        self.chart.set_rate_mode(rate_mode)
        self.update_legend()
        self.mode_changed.emit(self.chart.chart_id, rate_mode)

    def refresh(self) -> None:
        self.chart.refresh()
        self.update_legend()

    def update_legend(self) -> None:
        entries = [
            f'<span style="color:{item.color}">&#9632;</span> {html.escape(item.name + item.legend_suffix)}'
            for item in self.chart.last_series
        ]
        self.legend_label.setText("&nbsp;&nbsp;".join(entries))


class ChartsWindow(QMainWindow):
    """Stacks one :class:`ChartPane` per chart id."""

    def __init__(
        self,
        buffer: MetricsBuffer,
        settings: ChartSettings,
        prefs: Optional[Mapping[str, str]] = None,
        collect: Optional[Callable[[], object]] = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Queue Charts")
        self.resize(*WINDOW_DEFAULT_SIZE)
        self.panes: Dict[str, ChartPane] = {}

        prefs = prefs or {}
        container = QWidget()
        layout = QVBoxLayout()
        for chart_id in settings.ids:
            mode = resolve_display_mode(prefs, chart_id, settings.default_size)
            chart = RateChartWidget(
                chart_id,
                buffer,
                rate_mode=mode.rate_mode,
                size=mode.size,
                palette=settings.palette,
                absolute_unit=settings.absolute_unit,
                rate_unit=settings.rate_unit,
            )
            pane = ChartPane(chart, collect)
            pane.mode_changed.connect(
                lambda chart_id, rate_mode: logger.info("chart %s switched to %s mode", chart_id, "rate" if rate_mode else "absolute")
            )
            self.panes[chart_id] = pane
            layout.addWidget(pane)
        container.setLayout(layout)
        self.setCentralWidget(container)

    def refresh(self) -> None:
        for pane in self.panes.values():
            pane.refresh()


def run_gui(
    collect: Callable[[], object],
    buffer: MetricsBuffer,
    settings: ChartSettings,
    prefs: Optional[Mapping[str, str]] = None,
    refresh_interval_ms: Optional[int] = None,
) -> None:
    """Launch the window; every tick calls ``collect`` and then redraws all charts."""
    app = QApplication.instance() or QApplication([])
    window = ChartsWindow(buffer, settings, prefs, collect)

    def refresh() -> None:
        collect()
        window.refresh()

    timer = QTimer()
    timer.timeout.connect(refresh)
    timer.start(refresh_interval_ms or settings.refresh_interval_ms)

    window.show()
    refresh()
    app.exec()
