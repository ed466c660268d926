"""Process-wide store of sample buffers keyed by chart id and series name."""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Mapping, Optional

from rate_charts.telemetry.series import Sample, SeriesBuffer

logger = logging.getLogger(__name__)

SeriesMap = Dict[str, SeriesBuffer]


class MetricsBuffer:
    """Collects samples between renders and hands them over exactly once.

    Collectors call :meth:`append`, :meth:`set_rate` or :meth:`load`; the
    renderer calls :meth:`drain`, which swaps the chart's mapping for an empty
    one. One lock guards every operation so a drain never observes half of an
    append.
    """

    def __init__(self, max_samples: Optional[int] = None) -> None:
        self.max_samples = max_samples
        self._charts: Dict[str, SeriesMap] = {}
        self._lock = threading.Lock()

    def _series(self, chart_id: str, series_name: str) -> SeriesBuffer:
        chart = self._charts.setdefault(chart_id, {})
        buffer = chart.get(series_name)
        if buffer is None:
            buffer = SeriesBuffer(max_samples=self.max_samples)
            chart[series_name] = buffer
        return buffer

    def append(self, chart_id: str, series_name: str, sample: Sample) -> None:
        with self._lock:
            self._series(chart_id, series_name).append(sample)

    def set_rate(self, chart_id: str, series_name: str, rate: float) -> None:
        with self._lock:
            self._series(chart_id, series_name).rate = rate

    def load(self, chart_id: str, payload: Mapping[str, Mapping[str, Any]]) -> None:
        """Store a ``{series_name: {"samples": [...], "rate": r}}`` payload for a chart.

        Each named series is replaced by the payload's window; series not named
        keep whatever they hold.
        """
        buffers = {
            series_name: SeriesBuffer.from_dict(data, max_samples=self.max_samples)
            for series_name, data in payload.items()
        }
        with self._lock:
            self._charts.setdefault(chart_id, {}).update(buffers)

    def drain(self, chart_id: str) -> SeriesMap:
        """Return the chart's series and leave an empty mapping behind."""
        with self._lock:
            drained = self._charts.get(chart_id)
            if drained is None:
                return {}
            self._charts[chart_id] = {}
        logger.debug("drained %d series from chart %s", len(drained), chart_id)
        return drained

    def chart_ids(self) -> List[str]:
        with self._lock:
            return list(self._charts)

    def series_names(self, chart_id: str) -> List[str]:
        with self._lock:
            return list(self._charts.get(chart_id, {}))
