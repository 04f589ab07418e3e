"""
Terminal renderer built on rich.

Draws one column per value, scaled to the largest value, and a status line
with counters and log progress.
"""

import math
from typing import Optional

from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ..interfaces import Frame, Renderer

STYLE_DEFAULT = "bright_blue"
STYLE_SORTED = "green"
STYLE_PIVOT = "magenta"
STYLE_COMPARE = "yellow"
STYLE_SWAP = "red"

STATUS_STYLES = {
    "Idle": "dim",
    "Running": "cyan",
    "Paused": "yellow",
    "Stepping": "blue",
    "Done": "bold green",
}


def bar_style(index: int, frame: Frame) -> str:
    """Later rules win: sorted < pivot < compare < swap."""
    hl = frame.highlight
    style = STYLE_DEFAULT
    if index in hl.sorted:
        style = STYLE_SORTED
    if hl.pivot == index:
        style = STYLE_PIVOT
    if index in hl.compare:
        style = STYLE_COMPARE
    if index in hl.swap:
        style = STYLE_SWAP
    return style


class RichRenderer(Renderer):
    """
    Renders frames as coloured columns.

    Attach a rich Live with attach() to animate in place; without one the
    latest renderable is only kept on `last`.
    """

    def __init__(self, console: Optional[Console] = None, height: int = 16, bar: str = "█") -> None:
        self.console = console or Console()
        self.height = height
        self.bar = bar
        self.live: Optional[Live] = None
        self.last: Optional[Panel] = None
        self.frames = 0

    def attach(self, live: Live) -> None:
        self.live = live

    def build(self, frame: Frame) -> Panel:
        values = frame.values
        peak = max(list(values) + [1])
        heights = [max(1, math.ceil(v / peak * self.height)) if v > 0 else 0 for v in values]

        chart = Text()
        for row in range(self.height, 0, -1):
            for idx, h in enumerate(heights):
                chart.append(self.bar if h >= row else " ", style=bar_style(idx, frame))
            chart.append("\n")

        status = Text()
        status.append(frame.label, style=STATUS_STYLES.get(frame.label, ""))
        status.append(f"  comparisons {frame.comparisons}", style="yellow")
        status.append(f"  writes {frame.writes}", style="red")
        status.append(f"  events {frame.progress}", style="dim")

        return Panel(Group(chart, status), title=frame.algorithm or "sort", expand=False)

    def render(self, frame: Frame) -> None:
        self.last = self.build(frame)
        self.frames += 1
        if self.live is not None:
            self.live.update(self.last)
