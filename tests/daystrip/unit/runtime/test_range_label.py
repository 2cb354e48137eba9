from __future__ import annotations

import pytest

from daystrip.api import Day
from daystrip.runtime.range_label import RangeLabelFormatter


def _days(*isos: str) -> list[Day]:
    return [Day.of(iso) for iso in isos]


def test_single_month_label() -> None:
    assert RangeLabelFormatter.format(_days("2024-03-04")) == "March,  2024"
    assert RangeLabelFormatter.format(_days("2024-03-04", "2024-03-05", "2024-03-06")) == "March,  2024"


def test_two_months_same_year_label() -> None:
    assert RangeLabelFormatter.format(_days("2024-03-31", "2024-04-01")) == "March – April,  2024"


def test_three_months_same_year_label() -> None:
    days = _days("2024-01-31", "2024-02-01", "2024-02-29", "2024-03-01")
    assert RangeLabelFormatter.format(days) == "January – February – March,  2024"


def test_year_boundary_label_pairs_months_with_years() -> None:
    assert (
        RangeLabelFormatter.format(_days("2023-12-31", "2024-01-01"))
        == "December, 2023 – January, 2024"
    )


def test_multi_year_label_keeps_each_month_with_its_own_year() -> None:
    days = _days("2023-11-30", "2023-12-01", "2024-01-01")
    assert (
        RangeLabelFormatter.format(days)
        == "November, 2023 – December, 2023 – January, 2024"
    )


def test_empty_sequence_is_rejected() -> None:
    with pytest.raises(ValueError):
        RangeLabelFormatter.format([])


def test_fallback_uses_single_space() -> None:
    assert RangeLabelFormatter.fallback(Day.of("2024-06-10")) == "June, 2024"
