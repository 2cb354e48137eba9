"""Strip viewport geometry helpers."""

from daystrip.ui_runtime.strip_viewport import (
    VisibleWindow,
    cell_left_edges,
    centering_offset,
    clamp_offset,
    max_scroll_offset,
    visible_window,
)

__all__ = [
    "VisibleWindow",
    "cell_left_edges",
    "centering_offset",
    "clamp_offset",
    "max_scroll_offset",
    "visible_window",
]
