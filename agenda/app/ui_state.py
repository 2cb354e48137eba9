"""Typed UI state exposed by the agenda controller."""

from __future__ import annotations

from dataclasses import dataclass

from agenda.core.models import EventRecord
from daystrip.api import Day, StripPhase


@dataclass(frozen=True, slots=True)
class DayCellView:
    """One day cell in the strip."""

    index: int
    weekday: str
    day_number: str
    is_active: bool


@dataclass(frozen=True, slots=True)
class AgendaUIState:
    """View-ready state snapshot."""

    header: str
    cells: tuple[DayCellView, ...]
    selected_day: Day
    events: tuple[EventRecord, ...]
    phase: StripPhase
    scroll_target: float | None = None
