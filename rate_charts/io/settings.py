"""Chart configuration from ``config/settings.yml`` and the display-preference key contract."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

import yaml

from rate_charts.charts.transform import ABSOLUTE_UNIT, CHART_COLORS, RATE_UNIT

PROJECT_MARKERS: Iterable[str] = (".git", "pyproject.toml", "config")
DEFAULT_SETTINGS_PATH = Path("config/settings.yml")

RATE_MODE_PREFIX = "rate-mode-"
CHART_SIZE_PREFIX = "chart-size-"
RATE_MODE_VALUE = "rate"

PathLike = Union[str, os.PathLike]


class SettingsError(RuntimeError):
    """Raised when the settings file is unreadable or malformed."""


@dataclass
class ChartSettings:
    """The ``charts`` section of ``settings.yml``."""

    refresh_interval_ms: int = 5000
    max_samples: Optional[int] = None
    palette: Tuple[str, ...] = CHART_COLORS
    absolute_unit: str = ABSOLUTE_UNIT
    rate_unit: str = RATE_UNIT
    default_size: str = "small"
    ids: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class DisplayMode:
    rate_mode: bool
    size: str


def find_project_root(markers: Iterable[str] = PROJECT_MARKERS) -> Path:
    """Return the first directory above this package holding one of ``markers``, else the package directory."""
    start = Path(__file__).resolve().parent
    for candidate in [start] + list(start.parents):
        for marker in markers:
            if (candidate / marker).exists():
                return candidate
    return start


def _resolve(path: PathLike, project_root: Path) -> Path:
    target = Path(path)
    if not target.is_absolute():
        target = project_root / target
    return target


def _load_yaml(target: Path) -> Dict[str, Any]:
    if not target.exists():
        raise FileNotFoundError(f"settings file not found: {target}")
    try:
        with open(target, "r", encoding="utf-8") as handle:
            return yaml.safe_load(handle) or {}
    except OSError as exc:
        raise SettingsError(f"Failed to read settings file {target}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise SettingsError(f"Invalid YAML in settings file {target}: {exc}") from exc


def load_settings(path: Optional[PathLike] = None) -> Dict[str, Any]:
    """Read the raw settings mapping; relative paths resolve against :func:`find_project_root`."""
    project_root = find_project_root()
    target = _resolve(path or DEFAULT_SETTINGS_PATH, project_root)
    return _load_yaml(target)


def parse_chart_settings(data: Mapping[str, Any]) -> ChartSettings:
    section = data.get("charts", {}) or {}
    if not isinstance(section, dict):
        raise SettingsError("charts must be a mapping")

    defaults = ChartSettings()
    palette = section.get("palette", list(defaults.palette))
    if not isinstance(palette, list) or not palette:
        raise SettingsError("charts.palette must be a non-empty list of colours")

    units = section.get("units", {}) or {}
    max_samples = section.get("max_samples")
    ids = section.get("ids", [])
    if not isinstance(ids, list):
        raise SettingsError("charts.ids must be a list")

    try:
        return ChartSettings(
            refresh_interval_ms=int(section.get("refresh_interval_ms", defaults.refresh_interval_ms)),
            max_samples=int(max_samples) if max_samples is not None else None,
            palette=tuple(str(color) for color in palette),
            absolute_unit=str(units.get("absolute", defaults.absolute_unit)),
            rate_unit=str(units.get("rate", defaults.rate_unit)),
            default_size=str(section.get("default_size", defaults.default_size)),
            ids=[str(chart_id) for chart_id in ids],
        )
    except (TypeError, ValueError) as exc:
        raise SettingsError(f"Invalid charts section: {exc}") from exc


def load_chart_settings(path: Optional[PathLike] = None) -> ChartSettings:
    """Load and validate the ``charts`` section of the settings file."""
    return parse_chart_settings(load_settings(path))


def rate_mode_key(chart_id: str) -> str:
    return RATE_MODE_PREFIX + chart_id


def chart_size_key(chart_id: str) -> str:
    return CHART_SIZE_PREFIX + chart_id


def resolve_display_mode(prefs: Mapping[str, Any], chart_id: str, default_size: str = "small") -> DisplayMode:
    """Read a chart's display mode from caller-held preferences.

    Only the value ``"rate"`` under ``rate-mode-<chart_id>`` selects rate mode;
    a missing or other value means absolute counts.
    """
    rate_mode = prefs.get(rate_mode_key(chart_id)) == RATE_MODE_VALUE
    size = prefs.get(chart_size_key(chart_id)) or default_size
    return DisplayMode(rate_mode=rate_mode, size=str(size))
