from __future__ import annotations

from typing import List

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import TIERS, ScheduledSlice

TIER_COLORS = {"high": "red", "medium": "yellow", "low": "blue"}


def _legend() -> Text:
    legend = Text()
    for tier in TIERS:
        legend.append("  ", style=f"on {TIER_COLORS[tier.name]}")
        legend.append(f" {tier.name} (q={tier.quantum})  ")
    return legend


def build_rich_gantt(slices: List[ScheduledSlice]) -> tuple[Panel, str]:
    """
    Build a Rich Panel with one colored bar per executed slice and a string of
    time marks at slice boundaries.

    Bars are colored by tier. A slice that finished its process is labelled
    with the pid; a slice cut short by the quantum is labelled with the pid in
    dim italics. Idle time before a late arrival is left blank.
    """
    if not slices:
        return Panel("No execution", title="Gantt Chart"), ""

    bars = Text()
    labels = Text()
    marks = ["0"]
    now = 0

    for sl in sorted(slices, key=lambda s: (s.start_time, s.end_time)):
        width = sl.end_time - sl.start_time
        if width <= 0:
            # empty bursts take no CPU time
            continue

        if sl.start_time > now:
            gap = sl.start_time - now
            bars.append(" " * gap)
            labels.append(" " * gap)
            marks.append(str(sl.start_time))

        bars.append(" " * width, style=f"on {TIER_COLORS.get(sl.tier, 'magenta')}")
        labels.append(str(sl.pid)[:width].ljust(width), style="bold" if sl.completed else "dim italic")
        marks.append(str(sl.end_time))
        now = sl.end_time

    grid = Table.grid(padding=(0, 0))
    grid.add_row(bars)
    grid.add_row(labels)
    grid.add_row(_legend())

    return Panel.fit(grid, title="Gantt Chart"), " ".join(marks)
