"""Day range generation for the strip."""

from __future__ import annotations

from daystrip.api.day import Day
from daystrip.api.strip import StripConfig


def build_day_range(config: StripConfig) -> tuple[Day, ...]:
    """Return consecutive days from ``current - before`` to ``current + after``."""
    start = config.current_date.add_days(-config.days_before)
    return tuple(start.add_days(offset) for offset in range(config.day_count))
