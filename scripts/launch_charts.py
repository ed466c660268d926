#!/usr/bin/env python3
"""Launch the queue chart window fed by mock data."""

from __future__ import annotations

import argparse
import logging

from rate_charts.gui.main_window import run_gui
from rate_charts.gui.mock import MockCollector
from rate_charts.io import load_chart_settings, rate_mode_key
from rate_charts.telemetry import MetricsBuffer


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--settings",
        default=None,
        help="Path to settings.yml (default: config/settings.yml under the project root).",
    )
    parser.add_argument(
        "--interval",
        type=int,
        default=None,
        help="Refresh interval in milliseconds (default: charts.refresh_interval_ms).",
    )
    parser.add_argument(
        "--rate",
        action="append",
        default=[],
        metavar="CHART_ID",
        help="Start CHART_ID in rate mode (repeatable).",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    settings = load_chart_settings(args.settings)
    buffer = MetricsBuffer(max_samples=settings.max_samples)
    collector = MockCollector(buffer)
    prefs = {rate_mode_key(chart_id): "rate" for chart_id in args.rate}

    run_gui(collector.tick, buffer, settings, prefs=prefs, refresh_interval_ms=args.interval)


if __name__ == "__main__":
    main()
