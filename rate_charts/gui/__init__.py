"""Graphical user interface components for the chart dashboard."""

from __future__ import annotations

from .mock import QUEUE_RATES_CHART, QUEUE_TOTALS_CHART, MockCollector

__all__ = [
    "MockCollector",
    "QUEUE_RATES_CHART",
    "QUEUE_TOTALS_CHART",
]
