from __future__ import annotations

import pytest

from agenda.app.controller import AgendaController
from agenda.core.models import EventRecord
from daystrip.api import Day, StripConfig


class FakeScrollSurface:
    def __init__(self) -> None:
        self.targets: list[float] = []

    def scroll_to(self, x: float) -> None:
        self.targets.append(x)


@pytest.fixture
def sample_events() -> tuple[EventRecord, ...]:
    return (
        EventRecord(Day.of("2024-06-15"), "Standup", "Daily sync", "https://example.com/a.png"),
        EventRecord(Day.of("2024-06-16"), "Hike", "Trail run"),
        EventRecord(Day.of("2024-06-15"), "Dinner", "With friends"),
    )


@pytest.fixture
def scroll_surface() -> FakeScrollSurface:
    return FakeScrollSurface()


@pytest.fixture
def controller_factory(sample_events, scroll_surface):
    def _make(current: str = "2024-06-15", viewport_width: float = 300.0) -> AgendaController:
        return AgendaController(
            sample_events,
            config=StripConfig.build(current, 5, 5),
            viewport_width=viewport_width,
            surface=scroll_surface,
        )

    return _make
