"""Day strip state: measurement, selection, scrolling and header label."""

from __future__ import annotations

import logging
import math
from numbers import Integral, Real

from daystrip.api.day import Day
from daystrip.api.strip import (
    LabelCallback,
    ScrollToCallback,
    SelectDateCallback,
    StripConfig,
    StripPhase,
)
from daystrip.runtime.day_range import build_day_range
from daystrip.runtime.errors import IndexOutOfRangeError, InvalidMeasurementError, NotReadyError
from daystrip.runtime.range_label import RangeLabelFormatter
from daystrip.runtime.width_map import WidthMap
from daystrip.ui_runtime.strip_viewport import centering_offset, visible_window

logger = logging.getLogger(__name__)


class DayStrip:
    """Horizontally scrolling row of day cells with one selected day.

    The host reports cell widths, scroll offsets, viewport width and taps.
    Layout results (centering, visible range) are only produced once every
    cell width is known; before that the strip records state and waits.
    """

    def __init__(
        self,
        config: StripConfig,
        *,
        viewport_width: float = 0.0,
        on_select_date: SelectDateCallback | None = None,
        scroll_to: ScrollToCallback | None = None,
        on_label_change: LabelCallback | None = None,
    ) -> None:
        self._days = build_day_range(config)
        self._widths = WidthMap(len(self._days))
        self._viewport_width = _require_viewport(viewport_width)
        self._scroll_offset = 0.0
        self._selected_index = config.days_before
        self._on_select_date = on_select_date
        self._scroll_to = scroll_to
        self._on_label_change = on_label_change
        self._label = RangeLabelFormatter.fallback(self._days[0])

    @property
    def days(self) -> tuple[Day, ...]:
        return self._days

    @property
    def width_map(self) -> WidthMap:
        return self._widths

    @property
    def phase(self) -> StripPhase:
        measured = self._widths.size()
        if measured == 0:
            return StripPhase.UNMEASURED
        if self._widths.is_complete():
            return StripPhase.READY
        return StripPhase.MEASURING

    @property
    def is_ready(self) -> bool:
        return self._widths.is_complete()

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @property
    def selected_day(self) -> Day:
        return self._days[self._selected_index]

    @property
    def scroll_offset(self) -> float:
        return self._scroll_offset

    @property
    def viewport_width(self) -> float:
        return self._viewport_width

    def day_at(self, index: int) -> Day:
        return self._days[self._check_index(index)]

    def header_label(self) -> str:
        """Return the month/year text for the header."""
        return self._label

    def record_cell_width(self, index: int, width: float) -> None:
        """Store a measured cell width; completing the map centers and relabels."""
        completed = self._widths.record(index, width)
        if completed:
            logger.debug("day_strip_ready cells=%d", len(self._days))
            self._emit_centering_scroll()
            self._refresh_label()
        elif self.is_ready:
            self._refresh_label()

    def set_scroll_offset(self, x: float) -> None:
        """Record the host-reported scroll offset."""
        if isinstance(x, bool) or not isinstance(x, Real):
            raise TypeError(f"scroll offset must be a number, got {x!r}")
        self._scroll_offset = float(x)
        if self.is_ready:
            self._refresh_label()

    def set_viewport_width(self, width: float) -> None:
        """Record the host-reported visible strip width."""
        self._viewport_width = _require_viewport(width)
        if self.is_ready:
            self._refresh_label()

    def select_day(self, index: int) -> None:
        """Select the day at ``index``, notify the host and center it when measured."""
        self._selected_index = self._check_index(index)
        if self._on_select_date is not None:
            self._on_select_date(self._days[self._selected_index])
        if self.is_ready:
            self._emit_centering_scroll()

    def compute_centering_offset(self, index: int) -> float:
        """Return the scroll offset that centers ``index`` within content bounds."""
        index = self._check_index(index)
        if not self.is_ready:
            raise NotReadyError(
                f"centering needs all {len(self._days)} cell widths, have {self._widths.size()}"
            )
        return centering_offset(self._widths.widths(), index, self._viewport_width)

    def compute_visible_range(self) -> tuple[Day, ...] | None:
        """Return days overlapping the viewport, or ``None`` until measured."""
        if not self.is_ready:
            return None
        window = visible_window(self._widths.widths(), self._scroll_offset, self._viewport_width)
        return self._days[window.start : window.stop]

    def _emit_centering_scroll(self) -> None:
        target = self.compute_centering_offset(self._selected_index)
        logger.debug("day_strip_scroll_to index=%d x=%.1f", self._selected_index, target)
        if self._scroll_to is not None:
            self._scroll_to(target)

    def _refresh_label(self) -> None:
        visible = self.compute_visible_range()
        if visible:
            label = RangeLabelFormatter.format(visible)
        else:
            label = RangeLabelFormatter.fallback(self._days[0])
        if label == self._label:
            return
        self._label = label
        if self._on_label_change is not None:
            self._on_label_change(label)

    def _check_index(self, index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, Integral) or not 0 <= index < len(self._days):
            raise IndexOutOfRangeError(index, len(self._days))
        return int(index)


def _require_viewport(width: float) -> float:
    if isinstance(width, bool) or not isinstance(width, Real):
        raise InvalidMeasurementError(f"viewport width must be a number, got {width!r}")
    value = float(width)
    if not math.isfinite(value) or value < 0:
        raise InvalidMeasurementError(f"viewport width must be finite and >= 0, got {width!r}")
    return value
