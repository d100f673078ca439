"""Completion summaries for a list of to-do items.

:func:`summarize` counts how many items are done and derives a completion
percentage; :func:`progress_bar` renders that percentage as a fixed-width
text bar for the command line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .domain import TodoItem


@dataclass
class Summary:
    total: int
    done: int

    @property
    def percent(self) -> float:
        if not self.total:
            return 0.0
        return 100.0 * self.done / self.total


def summarize(items: Iterable[TodoItem]) -> Summary:
    total = done = 0
    for item in items:
        total += 1
        if item.done:
            done += 1
    return Summary(total=total, done=done)


def progress_bar(percent: float, width: int = 20) -> str:
    """Return ``percent`` as a bar such as ``[#####...............]``."""
    percent = min(max(percent, 0.0), 100.0)
    filled = int(round(width * percent / 100.0))
    return "[" + "#" * filled + "." * (width - filled) + "]"


def render_summary(items: Iterable[TodoItem]) -> str:
    s = summarize(items)
    return f"{s.total} items, {s.done} done {progress_bar(s.percent)} {s.percent:.0f}%"
