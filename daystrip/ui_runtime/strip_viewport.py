"""Horizontal strip viewport geometry over variable-width cells."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class VisibleWindow:
    """Half-open cell index window ``[start, stop)``."""

    start: int
    stop: int

    def __len__(self) -> int:
        return max(0, self.stop - self.start)


def cell_left_edges(widths: np.ndarray) -> np.ndarray:
    """Return the content x position of each cell's left edge."""
    edges = np.zeros(len(widths), dtype=np.float64)
    if len(widths) > 1:
        edges[1:] = np.cumsum(widths[:-1])
    return edges


def max_scroll_offset(total_width: float, viewport_width: float) -> float:
    """Return the largest offset that keeps the viewport inside the content."""
    return max(0.0, float(total_width) - float(viewport_width))


def clamp_offset(offset: float, total_width: float, viewport_width: float) -> float:
    """Clamp scroll offset to valid strip viewport bounds."""
    return max(0.0, min(float(offset), max_scroll_offset(total_width, viewport_width)))


def centering_offset(widths: np.ndarray, index: int, viewport_width: float) -> float:
    """Return the clamped offset that centers cell ``index`` in the viewport."""
    running = np.cumsum(widths)
    total = float(running[-1])
    before = float(running[index])
    target = before - viewport_width / 2 - float(widths[index]) / 2
    return clamp_offset(target, total, viewport_width)


def visible_window(widths: np.ndarray, offset: float, viewport_width: float) -> VisibleWindow:
    """Return the cells overlapping the viewport at ``offset``.

    The first cell whose left edge is at or past ``offset`` opens the window,
    widened by one cell on the left for the partially visible leading cell.
    The first cell whose left edge is at or past the viewport's right edge
    closes it. Without such a cell the window runs to the last cell.
    """
    count = len(widths)
    if count == 0:
        return VisibleWindow(0, 0)
    edges = cell_left_edges(widths)
    first = int(np.searchsorted(edges, offset, side="left"))
    start = count - 1 if first >= count else max(0, first - 1)
    stop = int(np.searchsorted(edges, offset + viewport_width, side="left"))
    return VisibleWindow(start=start, stop=max(start, stop))
