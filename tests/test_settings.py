from pathlib import Path

import pytest
import yaml

from rate_charts.charts import CHART_COLORS
from rate_charts.io import (
    ChartSettings,
    SettingsError,
    chart_size_key,
    load_chart_settings,
    load_settings,
    parse_chart_settings,
    rate_mode_key,
    resolve_display_mode,
)


def test_default_settings_structure():
    data = load_settings()
    assert "charts" in data
    charts = data["charts"]
    assert charts["refresh_interval_ms"] > 0
    assert len(charts["palette"]) == 5
    assert "absolute" in charts["units"] and "rate" in charts["units"]


def test_default_chart_settings():
    settings = load_chart_settings()
    assert settings.palette == CHART_COLORS
    assert settings.absolute_unit == "msg"
    assert settings.rate_unit == "msg/s"
    assert settings.ids


def test_load_chart_settings_from_project_root(tmp_path: Path, monkeypatch):
    (tmp_path / "config").mkdir()
    sample = {
        "charts": {
            "refresh_interval_ms": 1000,
            "palette": ["red", "green"],
            "units": {"rate": "ops/s"},
            "ids": ["overview"],
        }
    }
    (tmp_path / "config" / "settings.yml").write_text(yaml.safe_dump(sample))
    monkeypatch.setattr("rate_charts.io.settings.find_project_root", lambda: tmp_path)

    settings = load_chart_settings()

    assert settings.refresh_interval_ms == 1000
    assert settings.palette == ("red", "green")
    assert settings.rate_unit == "ops/s"
    assert settings.absolute_unit == "msg"
    assert settings.max_samples is None
    assert settings.ids == ["overview"]


def test_missing_settings_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "nope.yml")


def test_invalid_yaml_raises_settings_error(tmp_path: Path):
    path = tmp_path / "settings.yml"
    path.write_text("charts: [unclosed\n")
    with pytest.raises(SettingsError):
        load_settings(path)


def test_empty_palette_rejected():
    with pytest.raises(SettingsError):
        parse_chart_settings({"charts": {"palette": []}})
    with pytest.raises(SettingsError):
        parse_chart_settings({"charts": {"refresh_interval_ms": "soon"}})


def test_empty_section_uses_defaults():
    assert parse_chart_settings({}) == ChartSettings()


def test_preference_keys():
    assert rate_mode_key("queue-rates") == "rate-mode-queue-rates"
    assert chart_size_key("queue-rates") == "chart-size-queue-rates"


def test_resolve_display_mode():
    prefs = {"rate-mode-a": "rate", "chart-size-a": "large", "rate-mode-b": "chart"}

    mode_a = resolve_display_mode(prefs, "a")
    mode_b = resolve_display_mode(prefs, "b", default_size="medium")
    mode_c = resolve_display_mode({}, "c")

    assert mode_a.rate_mode is True and mode_a.size == "large"
    assert mode_b.rate_mode is False and mode_b.size == "medium"
    assert mode_c.rate_mode is False and mode_c.size == "small"
