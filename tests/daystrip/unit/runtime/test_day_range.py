from __future__ import annotations

import pytest

from daystrip.api import Day, StripConfig
from daystrip.runtime.day_range import build_day_range


@pytest.mark.parametrize(("days_before", "days_after"), [(0, 0), (5, 5), (3, 0), (0, 7), (30, 2)])
def test_day_range_length_order_and_center(days_before: int, days_after: int) -> None:
    config = StripConfig.build("2024-06-15", days_before, days_after)
    days = build_day_range(config)

    assert len(days) == days_before + days_after + 1
    assert days[days_before] == Day.of("2024-06-15")
    for previous, current in zip(days, days[1:]):
        assert previous.add_days(1) == current
        assert previous < current


def test_day_range_defaults_to_today() -> None:
    days = build_day_range(StripConfig.build(days_before=2, days_after=2))
    assert days[2] == Day.today()


def test_day_range_spans_leap_day() -> None:
    days = build_day_range(StripConfig.build("2024-02-28", 0, 2))
    assert [day.iso() for day in days] == ["2024-02-28", "2024-02-29", "2024-03-01"]
