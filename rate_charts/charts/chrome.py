"""Plot styling shared by every chart."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import matplotlib.dates as mdates


@dataclass(frozen=True)
class ChartChrome:
    """Widget configuration: lines only, bordered grid, time x-axis, y-axis floored at zero."""

    show_lines: bool = True
    border_width: float = 2.0
    border_color: str = "#aaa"
    x_tick_color: str = "#fff"
    x_time_mode: bool = True
    y_tick_color: str = "#eee"
    y_min: float = 0.0
    show_legend: bool = False

    def apply(self, ax: Any) -> None:
        for spine in ax.spines.values():
            spine.set_linewidth(self.border_width)
            spine.set_edgecolor(self.border_color)

        ax.xaxis.grid(True, color=self.x_tick_color)
        ax.yaxis.grid(True, color=self.y_tick_color)

        if self.x_time_mode:
            locator = mdates.AutoDateLocator()
            ax.xaxis.set_major_locator(locator)
            ax.xaxis.set_major_formatter(mdates.ConciseDateFormatter(locator))

        _, top = ax.get_ylim()
        if not top > self.y_min:
            top = self.y_min + 1.0
        ax.set_ylim(self.y_min, top)

        legend = ax.get_legend()
        if self.show_legend:
            ax.legend(loc="upper right")
        elif legend is not None:
            legend.remove()


DEFAULT_CHROME = ChartChrome()
