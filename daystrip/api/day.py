"""Calendar day value used by the strip."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import TypeAlias

import pendulum

from daystrip.runtime.errors import InvalidRangeError

_LOCALE = "en"


@dataclass(frozen=True, slots=True, order=True)
class Day:
    """Immutable calendar date with the formatting the strip needs."""

    value: pendulum.Date

    @classmethod
    def of(cls, value: DayInput) -> Day:
        """Coerce a date-like value into a ``Day``."""
        if isinstance(value, Day):
            return value
        if isinstance(value, str):
            return cls(_parse_date(value))
        # datetime is a date subclass, so this also drops any time component.
        if isinstance(value, dt.date):
            return cls(pendulum.date(value.year, value.month, value.day))
        raise InvalidRangeError(f"unsupported date value: {value!r}")

    @classmethod
    def today(cls) -> Day:
        now = pendulum.today()
        return cls(pendulum.date(now.year, now.month, now.day))

    def add_days(self, count: int) -> Day:
        """Return the day ``count`` days after this one (negative goes back)."""
        return Day(self.value.add(days=count))

    def same_day_as(self, other: Day | dt.date) -> bool:
        """Return whether both values fall on the same calendar day."""
        other_value = other.value if isinstance(other, Day) else other
        return (self.value.year, self.value.month, self.value.day) == (
            other_value.year,
            other_value.month,
            other_value.day,
        )

    def weekday_abbr(self) -> str:
        return self.value.format("ddd", locale=_LOCALE)

    def day_number(self) -> str:
        return self.value.format("DD", locale=_LOCALE)

    def month_name(self) -> str:
        return self.value.format("MMMM", locale=_LOCALE)

    def year(self) -> str:
        return self.value.format("YYYY", locale=_LOCALE)

    def calendar_label(self) -> str:
        """Long human label, e.g. ``Sat, June 15, 2024``."""
        return self.value.format("ddd, MMMM D, YYYY", locale=_LOCALE)

    def iso(self) -> str:
        return self.value.isoformat()


DayInput: TypeAlias = Day | dt.date | str


def _parse_date(text: str) -> pendulum.Date:
    try:
        parsed = pendulum.parse(text.strip(), exact=True)
    except ValueError as exc:
        raise InvalidRangeError(f"cannot parse date: {text!r}") from exc
    if isinstance(parsed, dt.date):
        return pendulum.date(parsed.year, parsed.month, parsed.day)
    raise InvalidRangeError(f"not a calendar date: {text!r}")
