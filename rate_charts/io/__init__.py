"""I/O utilities (configuration and display preferences)."""

from .settings import (
    DEFAULT_SETTINGS_PATH,
    ChartSettings,
    DisplayMode,
    SettingsError,
    chart_size_key,
    find_project_root,
    load_chart_settings,
    load_settings,
    parse_chart_settings,
    rate_mode_key,
    resolve_display_mode,
)

__all__ = [
    "DEFAULT_SETTINGS_PATH",
    "ChartSettings",
    "DisplayMode",
    "SettingsError",
    "chart_size_key",
    "find_project_root",
    "load_chart_settings",
    "load_settings",
    "parse_chart_settings",
    "rate_mode_key",
    "resolve_display_mode",
]
