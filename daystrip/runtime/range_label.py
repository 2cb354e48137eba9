"""Header label for the days currently visible in the strip."""

from __future__ import annotations

from collections.abc import Sequence

from daystrip.api.day import Day

RANGE_SEPARATOR = " – "


class RangeLabelFormatter:
    """Month/year header text for a run of visible days."""

    @staticmethod
    def format(visible_days: Sequence[Day]) -> str:
        """Format visible days as ``March – April,  2024`` or per-year pairs."""
        if not visible_days:
            raise ValueError("visible_days must not be empty")
        months: list[str] = []
        years: list[str] = []
        pairs: list[tuple[str, str]] = []
        for day in visible_days:
            month = day.month_name()
            year = day.year()
            if month not in months:
                months.append(month)
            if year not in years:
                years.append(year)
            if (month, year) not in pairs:
                pairs.append((month, year))

        if len(years) == 1:
            return f"{RANGE_SEPARATOR.join(months)},  {years[0]}"
        # Each month keeps its own year. Zipping the distinct-month list with the
        # distinct-year list would drop or mismatch years once three months span
        # two years (Nov 2023, Dec 2023, Jan 2024).
        return RANGE_SEPARATOR.join(f"{month}, {year}" for month, year in pairs)

    @staticmethod
    def fallback(day: Day) -> str:
        """Label used before any visible range is known."""
        return f"{day.month_name()}, {day.year()}"
