"""Queue and message-rate charting built on in-memory sample buffers."""

__all__ = ["telemetry", "charts", "io", "gui"]
__version__ = "0.1.0"
