"""
DatePicker Core - Snapshot Module.

Immutable value types that capture a date or a month independently of any
live ``datetime.date`` object. Snapshots are compared and ordered by value
and are never mutated; every change produces a new snapshot.

Classes:
    MonthSnapshot: A (year, month) pair identifying a viewed month.
    DateSnapshot: A (year, month, day) triple identifying a selected day.

Functions:
    snapshot: Captures a DateSnapshot from a date.
    snapshot_month: Captures a MonthSnapshot from a date.
"""

import calendar
from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, order=True)
class MonthSnapshot:
    """
    A calendar month identified by year and 1-based month.

    Attributes:
        year: Four-digit year.
        month: Month number (1-12).
    """

    year: int
    month: int

    def as_date(self, day: int = 1) -> date:
        """
        Builds a date inside this month.

        Days past the end of the month are clamped to the last day,
        so ``MonthSnapshot(2023, 2).as_date(31)`` is 28 February.

        Args:
            day: Day of month. Defaults to the first.

        Returns:
            A date in this month.
        """
        last_day = calendar.monthrange(self.year, self.month)[1]
        return date(self.year, self.month, min(day, last_day))

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True, order=True)
class DateSnapshot:
    """
    A single calendar day.

    Field order makes the natural dataclass ordering chronological.

    Attributes:
        year: Four-digit year.
        month: Month number (1-12).
        day: Day of month (1-31).
    """

    year: int
    month: int
    day: int

    def as_date(self) -> date:
        """Converts the snapshot back into a date."""
        return date(self.year, self.month, self.day)

    def month_snapshot(self) -> MonthSnapshot:
        """Returns the month this day belongs to."""
        return MonthSnapshot(self.year, self.month)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


def snapshot(value: date) -> DateSnapshot:
    """
    Captures a DateSnapshot from a date.

    Example:
        >>> snapshot(date(1995, 7, 28))
        DateSnapshot(year=1995, month=7, day=28)
    """
    return DateSnapshot(value.year, value.month, value.day)


def snapshot_month(value: date) -> MonthSnapshot:
    """Captures the MonthSnapshot a date falls in."""
    return MonthSnapshot(value.year, value.month)
