"""Agenda controller wiring the day strip to the events panel."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from agenda.app.ui_state import AgendaUIState, DayCellView
from agenda.core.models import EventRecord, events_on
from daystrip.api import (
    Day,
    DaySelected,
    HeaderLabelChanged,
    ScrollRequested,
    ScrollSurface,
    StripConfig,
    StripEventBus,
    create_strip_event_bus,
)
from daystrip.runtime.day_strip import DayStrip

logger = logging.getLogger(__name__)


class AgendaController:
    """Host-facing adapter: forwards layout/scroll/tap input and projects UI state."""

    def __init__(
        self,
        events: Iterable[EventRecord],
        *,
        config: StripConfig,
        viewport_width: float = 0.0,
        surface: ScrollSurface | None = None,
    ) -> None:
        self._events = tuple(events)
        self._bus = create_strip_event_bus()
        self._surface = surface
        self._scroll_target: float | None = None
        self._strip = DayStrip(
            config,
            viewport_width=viewport_width,
            on_select_date=self._on_select_date,
            scroll_to=self._request_scroll,
            on_label_change=self._publish_label,
        )
        self._selected_events = events_on(self._strip.selected_day, self._events)

    @property
    def bus(self) -> StripEventBus:
        """Outbound notifications of this controller's strip."""
        return self._bus

    @property
    def strip(self) -> DayStrip:
        return self._strip

    def handle_cell_layout(self, index: int, width: float) -> None:
        self._strip.record_cell_width(index, width)

    def handle_scroll(self, x: float) -> None:
        self._strip.set_scroll_offset(x)

    def handle_viewport(self, width: float) -> None:
        self._strip.set_viewport_width(width)

    def handle_day_press(self, index: int) -> None:
        self._strip.select_day(index)

    def ui_state(self) -> AgendaUIState:
        """Return a view-ready snapshot of header, cells and events."""
        selected = self._strip.selected_index
        cells = tuple(
            DayCellView(
                index=index,
                weekday=day.weekday_abbr().upper(),
                day_number=day.day_number(),
                is_active=index == selected,
            )
            for index, day in enumerate(self._strip.days)
        )
        return AgendaUIState(
            header=self._strip.header_label(),
            cells=cells,
            selected_day=self._strip.selected_day,
            events=self._selected_events,
            phase=self._strip.phase,
            scroll_target=self._scroll_target,
        )

    def _on_select_date(self, day: Day) -> None:
        self._selected_events = events_on(day, self._events)
        logger.debug("agenda_day_selected day=%s events=%d", day.iso(), len(self._selected_events))
        self._bus.emit(DaySelected(day=day, index=self._strip.selected_index))

    def _request_scroll(self, x: float) -> None:
        self._scroll_target = x
        self._bus.emit(ScrollRequested(x=x))
        if self._surface is not None:
            self._surface.scroll_to(x)

    def _publish_label(self, label: str) -> None:
        self._bus.emit(HeaderLabelChanged(label=label))
