from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from daystrip.api import Day, StripConfig
from daystrip.runtime.day_strip import DayStrip


@dataclass(slots=True)
class StripRecorder:
    selected: list[Day] = field(default_factory=list)
    scrolls: list[float] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)


def _measure_all(strip: DayStrip, width: float = 60.0) -> None:
    for index in range(len(strip.days)):
        strip.record_cell_width(index, width)


@pytest.fixture
def measure_all():
    return _measure_all


@pytest.fixture
def strip_factory():
    def _make(
        current: str = "2024-06-15",
        days_before: int = 5,
        days_after: int = 5,
        viewport_width: float = 300.0,
    ) -> tuple[DayStrip, StripRecorder]:
        recorder = StripRecorder()
        strip = DayStrip(
            StripConfig.build(current, days_before, days_after),
            viewport_width=viewport_width,
            on_select_date=recorder.selected.append,
            scroll_to=recorder.scrolls.append,
            on_label_change=recorder.labels.append,
        )
        return strip, recorder

    return _make
