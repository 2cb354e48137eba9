"""Public day strip API contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Protocol

from daystrip.api.day import Day, DayInput
from daystrip.runtime.errors import InvalidRangeError

if TYPE_CHECKING:
    from daystrip.runtime.day_strip import DayStrip

DEFAULT_DAYS_BEFORE = 5
DEFAULT_DAYS_AFTER = 5

SelectDateCallback = Callable[[Day], None]
ScrollToCallback = Callable[[float], None]
LabelCallback = Callable[[str], None]


class StripPhase(Enum):
    """Measurement lifecycle of one strip instance."""

    UNMEASURED = auto()
    MEASURING = auto()
    READY = auto()


@dataclass(frozen=True, slots=True)
class StripConfig:
    """Validated strip construction parameters."""

    current_date: Day
    days_before: int = DEFAULT_DAYS_BEFORE
    days_after: int = DEFAULT_DAYS_AFTER

    def __post_init__(self) -> None:
        if not isinstance(self.current_date, Day):
            raise InvalidRangeError(f"current_date must be a Day, got {self.current_date!r}")
        _require_count("days_before", self.days_before)
        _require_count("days_after", self.days_after)

    @classmethod
    def build(
        cls,
        current_date: DayInput | None = None,
        days_before: int = DEFAULT_DAYS_BEFORE,
        days_after: int = DEFAULT_DAYS_AFTER,
    ) -> StripConfig:
        """Build config from loose inputs, defaulting the current date to today."""
        day = Day.today() if current_date is None else Day.of(current_date)
        return cls(current_date=day, days_before=days_before, days_after=days_after)

    @property
    def day_count(self) -> int:
        return self.days_before + self.days_after + 1


class ScrollSurface(Protocol):
    """Host scroll view surface the strip drives."""

    def scroll_to(self, x: float) -> None:
        """Scroll the strip content so ``x`` sits at the left edge."""


def create_day_strip(
    current_date: DayInput | None = None,
    days_before: int = DEFAULT_DAYS_BEFORE,
    days_after: int = DEFAULT_DAYS_AFTER,
    *,
    viewport_width: float = 0.0,
    on_select_date: SelectDateCallback | None = None,
    scroll_to: ScrollToCallback | None = None,
    on_label_change: LabelCallback | None = None,
) -> DayStrip:
    """Create default day strip implementation."""
    from daystrip.runtime.day_strip import DayStrip

    return DayStrip(
        StripConfig.build(current_date, days_before, days_after),
        viewport_width=viewport_width,
        on_select_date=on_select_date,
        scroll_to=scroll_to,
        on_label_change=on_label_change,
    )


def _require_count(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRangeError(f"{name} must be an int, got {value!r}")
    if value < 0:
        raise InvalidRangeError(f"{name} must be >= 0, got {value}")
