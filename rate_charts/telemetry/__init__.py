"""Sample buffers fed by collectors and drained by the chart renderer."""

from .buffer import MetricsBuffer
from .series import Sample, SampleOrderError, SeriesBuffer

__all__ = [
    "MetricsBuffer",
    "Sample",
    "SampleOrderError",
    "SeriesBuffer",
]
