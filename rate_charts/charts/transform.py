"""Turn drained sample buffers into plot-ready, colour-tagged series."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Mapping, Sequence, Tuple

from rate_charts.telemetry.buffer import MetricsBuffer
from rate_charts.telemetry.series import Sample, SeriesBuffer

logger = logging.getLogger(__name__)

CHART_COLORS: Tuple[str, ...] = ("#edc240", "#afd8f8", "#cb4b4b", "#4da74d", "#9440ed")
ABSOLUTE_UNIT = "msg"
RATE_UNIT = "msg/s"

Point = Tuple[int, float]


@dataclass
class PlotSeries:
    """One line handed to the plotting widget."""

    name: str
    color: str
    points: List[Point] = field(default_factory=list)
    legend_suffix: str = ""

    @property
    def xs(self) -> List[int]:
        return [x for x, _ in self.points]

    @property
    def ys(self) -> List[float]:
        return [y for _, y in self.points]


def _divide(numerator: float, denominator: float) -> float:
    # IEEE semantics: x/0 is +-inf, 0/0 is nan.
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)


def format_number(value: float) -> str:
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    if isinstance(value, float) and math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def rate_points(samples: Sequence[Sample]) -> List[Point]:
    """First differences scaled to per-second, ``(earlier - later) / (t_earlier - t_later)``."""
    points: List[Point] = []
    for previous, current in zip(samples, samples[1:]):
        y = _divide(
            (previous.sample - current.sample) * 1000,
            previous.timestamp - current.timestamp,
        )
        points.append((current.timestamp, y))
    return points


def absolute_points(samples: Sequence[Sample]) -> List[Point]:
    """Raw counter values, skipping the first sample as a baseline."""
    return [(sample.timestamp, sample.sample) for sample in samples[1:]]


def legend_suffix(
    buffer: SeriesBuffer,
    rate_mode: bool,
    absolute_unit: str = ABSOLUTE_UNIT,
    rate_unit: str = RATE_UNIT,
) -> str:
    if rate_mode:
        return f" ({format_number(buffer.rate)} {rate_unit})"
    first = next(iter(buffer), None)
    if first is None:
        return ""
    return f" ({format_number(first.sample)} {absolute_unit})"


def transform(
    series_map: Mapping[str, SeriesBuffer],
    rate_mode: bool,
    palette: Sequence[str] = CHART_COLORS,
    absolute_unit: str = ABSOLUTE_UNIT,
    rate_unit: str = RATE_UNIT,
) -> List[PlotSeries]:
    """Build one :class:`PlotSeries` per series, in insertion order.

    Colours are ``palette[index % len(palette)]``. Rates computed from two
    samples with the same timestamp come out as ``inf``/``nan`` and are kept.
    """
    out: List[PlotSeries] = []
    for index, (name, buffer) in enumerate(series_map.items()):
        samples = buffer.samples
        points = rate_points(samples) if rate_mode else absolute_points(samples)
        if rate_mode and not all(math.isfinite(y) for _, y in points):
            logger.warning("series %r has duplicate timestamps; rate contains non-finite values", name)
        out.append(
            PlotSeries(
                name=name,
                color=palette[index % len(palette)],
                points=points,
                legend_suffix=legend_suffix(buffer, rate_mode, absolute_unit, rate_unit),
            )
        )
    return out


def drain_and_transform(
    buffer: MetricsBuffer,
    chart_id: str,
    rate_mode: bool,
    palette: Sequence[str] = CHART_COLORS,
    absolute_unit: str = ABSOLUTE_UNIT,
    rate_unit: str = RATE_UNIT,
) -> List[PlotSeries]:
    """Consume the chart's buffered samples and return its plot series."""
    series_map = buffer.drain(chart_id)
    return transform(series_map, rate_mode, palette, absolute_unit, rate_unit)
