"""Reusable Qt widgets."""

from .rate_chart import RateChartWidget

__all__ = ["RateChartWidget"]
