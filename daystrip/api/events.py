"""Notifications a day strip sends to the panels around it."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TypeVar

from daystrip.api.day import Day


@dataclass(frozen=True, slots=True)
class DaySelected:
    day: Day
    index: int


@dataclass(frozen=True, slots=True)
class HeaderLabelChanged:
    label: str


@dataclass(frozen=True, slots=True)
class ScrollRequested:
    x: float


StripEvent = DaySelected | HeaderLabelChanged | ScrollRequested
STRIP_EVENT_TYPES: tuple[type, ...] = (DaySelected, HeaderLabelChanged, ScrollRequested)

TStripEvent = TypeVar("TStripEvent", DaySelected, HeaderLabelChanged, ScrollRequested)
Detach = Callable[[], None]


class StripEventBus(Protocol):
    """Fan-out of one strip's notifications; never shared between strips."""

    def listen(self, event_type: type[TStripEvent], handler: Callable[[TStripEvent], None]) -> Detach:
        """Register handler for one strip event type; call the result to detach."""

    def emit(self, event: StripEvent) -> int:
        """Deliver event to its listeners and return how many ran."""


def create_strip_event_bus() -> StripEventBus:
    from daystrip.runtime.events import StripNotifier

    return StripNotifier()
