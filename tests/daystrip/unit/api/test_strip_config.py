from __future__ import annotations

import pytest

from daystrip.api import Day, InvalidRangeError, StripConfig, create_day_strip


def test_build_defaults_to_five_days_each_side() -> None:
    config = StripConfig.build("2024-06-15")
    assert config.days_before == 5
    assert config.days_after == 5
    assert config.day_count == 11
    assert config.current_date == Day.of("2024-06-15")


def test_build_without_date_uses_today() -> None:
    assert StripConfig.build().current_date == Day.today()


@pytest.mark.parametrize(
    ("days_before", "days_after"),
    [(-1, 5), (5, -1), (1.5, 5), (5, "3"), (True, 5), (5, None)],
)
def test_build_rejects_malformed_counts(days_before, days_after) -> None:
    with pytest.raises(InvalidRangeError):
        StripConfig.build("2024-06-15", days_before, days_after)


def test_config_requires_day_instance() -> None:
    with pytest.raises(InvalidRangeError):
        StripConfig(current_date="2024-06-15")  # type: ignore[arg-type]


def test_malformed_config_prevents_strip_construction() -> None:
    with pytest.raises(InvalidRangeError):
        create_day_strip("2024-06-15", days_before=-3)


def test_create_day_strip_starts_at_configured_day() -> None:
    strip = create_day_strip("2024-06-15", days_before=2, days_after=1, viewport_width=200.0)
    assert strip.selected_index == 2
    assert strip.selected_day == Day.of("2024-06-15")
    assert strip.viewport_width == 200.0
