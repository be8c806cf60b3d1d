"""
DatePicker Core - Date Logic Module.

This module provides the calendar arithmetic the picker relies on,
including leap year detection, days-in-month calculations, month
stepping and week numbering. All month numbers are 1-based, matching
``datetime.date``.

Classes:
    DateManager: Manages all calendar calculations for the picker.
"""

import calendar
from datetime import date
from typing import List


DAYS_IN_WEEK = 7


class DateManager:
    """
    Manages calendar calculations for month grids.

    Handles leap year logic, month lengths, month stepping across year
    boundaries and ISO week numbers. Month lengths always come from
    the ``calendar`` module and are never hardcoded.

    Example:
        >>> dm = DateManager()
        >>> dm.get_days_in_month(2024, 2)
        29
        >>> dm.add_months(date(2024, 12, 15), 1)
        datetime.date(2025, 1, 15)
    """

    def is_leap_year(self, year: int) -> bool:
        """
        Determines if the specified year is a leap year.

        A year is a leap year if it is divisible by 4, except for
        century years which must be divisible by 400.

        Args:
            year: Four-digit year to check.

        Returns:
            True if the year is a leap year, False otherwise.
        """
        return calendar.isleap(year)

    def get_days_in_month(self, year: int, month: int) -> int:
        """
        Returns the total number of days in the specified month.

        Correctly handles February in leap years (29 days) and
        non-leap years (28 days).

        Args:
            year: Four-digit year.
            month: Month number (1-12).

        Returns:
            Number of days in the specified month.

        Raises:
            ValueError: If month is not in range 1-12.
        """
        if not 1 <= month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got {month}")
        return calendar.monthrange(year, month)[1]

    def get_first_weekday(self, year: int, month: int) -> int:
        """
        Returns the weekday of the first day of the month.

        Args:
            year: Four-digit year.
            month: Month number (1-12).

        Returns:
            Weekday where Monday is 0 and Sunday is 6.

        Raises:
            ValueError: If month is not in range 1-12.
        """
        if not 1 <= month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got {month}")
        return calendar.monthrange(year, month)[0]

    def get_leading_blanks(self, year: int, month: int, first_day_of_week: int) -> int:
        """
        Counts the blank cells before day 1 in a week-aligned grid.

        Args:
            year: Four-digit year.
            month: Month number (1-12).
            first_day_of_week: Weekday shown in the first column (0-6).

        Returns:
            Number of blank cells, between 0 and 6.
        """
        first_weekday = self.get_first_weekday(year, month)
        return (first_weekday - first_day_of_week) % DAYS_IN_WEEK

    def get_ordered_weekdays(self, first_day_of_week: int) -> List[int]:
        """
        Returns the seven weekdays starting at ``first_day_of_week``.

        Example:
            >>> DateManager().get_ordered_weekdays(6)
            [6, 0, 1, 2, 3, 4, 5]
        """
        return [
            (first_day_of_week + offset) % DAYS_IN_WEEK
            for offset in range(DAYS_IN_WEEK)
        ]

    def add_months(self, reference_date: date, months: int) -> date:
        """
        Shifts a date by a number of months.

        The year rolls over in either direction. If the target month is
        shorter than the reference day, the day is clamped to the last
        day of the target month (31 January + 1 month is 28/29 February).

        Args:
            reference_date: Date to shift.
            months: Number of months, may be negative.

        Returns:
            The shifted date.
        """
        index = reference_date.year * 12 + (reference_date.month - 1) + months
        year, month_index = divmod(index, 12)
        month = month_index + 1

        day = min(reference_date.day, self.get_days_in_month(year, month))
        return date(year, month, day)

    def get_week_number(self, reference_date: date) -> int:
        """Returns the ISO 8601 week number of a date."""
        return reference_date.isocalendar()[1]
