"""Mock data providers for the chart window."""

from __future__ import annotations

import math
import random
import time
from typing import Callable, Dict, Optional

from rate_charts.telemetry import MetricsBuffer, Sample, SeriesBuffer

QUEUE_TOTALS_CHART = "queue-totals"
QUEUE_RATES_CHART = "queue-rates"


class MockCollector:
    """Feeds synthetic queue depths and message counters into a :class:`MetricsBuffer`.

    Like a poller of the broker's management API, every :meth:`tick` hands
    over the last ``history`` samples of each series, not just the newest one,
    so a chart drained on every refresh still has points to draw.
    """

    def __init__(
        self,
        buffer: MetricsBuffer,
        history: int = 60,
        totals_chart: str = QUEUE_TOTALS_CHART,
        rates_chart: str = QUEUE_RATES_CHART,
        clock: Callable[[], float] = time.time,
        seed: Optional[int] = None,
    ) -> None:
        self.buffer = buffer
        self.history = history
        self.totals_chart = totals_chart
        self.rates_chart = rates_chart
        self._clock = clock
        self._random = random.Random(seed)
        self._counter = 0
        self._published = 0.0
        self._delivered = 0.0
        self._series: Dict[str, Dict[str, SeriesBuffer]] = {totals_chart: {}, rates_chart: {}}

    def _record(self, chart_id: str, name: str, sample: Sample) -> None:
        series = self._series[chart_id].setdefault(name, SeriesBuffer(max_samples=self.history))
        previous = series.latest()
        series.append(sample)
        if previous is not None and sample.timestamp != previous.timestamp:
            series.rate = round(
                (sample.sample - previous.sample) * 1000 / (sample.timestamp - previous.timestamp), 1
            )

    def tick(self) -> int:
        """Record one sample per series, publish the windows and return the timestamp used."""
        counter = self._counter
        self._counter += 1
        now = int(self._clock() * 1000)

        ready = max(0, int(120 + 80 * math.sin(counter / 6.0) + self._random.uniform(-5, 5)))
        unacked = max(0, int(15 + 10 * math.sin(counter / 3.0 + 0.5)))
        for name, value in (("ready", ready), ("unacked", unacked), ("total", ready + unacked)):
            self._record(self.totals_chart, name, Sample(timestamp=now, sample=value))

        self._published += 50 + 20 * math.sin(counter / 4.0)
        self._delivered += 45 + 20 * math.sin(counter / 4.0 + 1.0)
        for name, value in (("publish", self._published), ("deliver", self._delivered)):
            self._record(self.rates_chart, name, Sample(timestamp=now, sample=round(value)))

        for chart_id, series in self._series.items():
            self.buffer.load(chart_id, {name: buffer.to_dict() for name, buffer in series.items()})
        return now
