"""Agenda domain records."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from daystrip.api import Day


@dataclass(frozen=True, slots=True)
class EventRecord:
    """One calendar event shown under the strip."""

    date: Day
    title: str
    description: str = ""
    image: str = ""


def events_on(day: Day, events: Iterable[EventRecord]) -> tuple[EventRecord, ...]:
    """Return events falling on ``day``, preserving input order."""
    return tuple(event for event in events if event.date.same_day_as(day))
