"""
DatePicker Core - Date Bounds Module.

Minimum and maximum selectable date checks. Both limits are optional
and inclusive.

Classes:
    DateBounds: Inclusive min/max constraint on selectable days.
"""

from datetime import date
from typing import Optional

from date_picker.snapshot import DateSnapshot, MonthSnapshot, snapshot


class DateBounds:
    """
    Inclusive min/max constraint on selectable days.

    Example:
        >>> bounds = DateBounds(min_date=date(2024, 1, 10))
        >>> bounds.is_out_of_range(DateSnapshot(2024, 1, 9))
        True
        >>> bounds.can_go_back(MonthSnapshot(2024, 1))
        False
    """

    def __init__(
        self,
        min_date: Optional[date] = None,
        max_date: Optional[date] = None
    ):
        """
        Initialises the bounds.

        Args:
            min_date: Earliest selectable day, or None for no limit.
            max_date: Latest selectable day, or None for no limit.

        Raises:
            ValueError: If min_date falls after max_date.
        """
        if min_date is not None and max_date is not None and min_date > max_date:
            raise ValueError(
                f"min_date {min_date.isoformat()} is after max_date {max_date.isoformat()}"
            )
        self._min = snapshot(min_date) if min_date is not None else None
        self._max = snapshot(max_date) if max_date is not None else None

    def is_out_of_min_range(self, value: DateSnapshot) -> bool:
        return self._min is not None and value < self._min

    def is_out_of_max_range(self, value: DateSnapshot) -> bool:
        return self._max is not None and value > self._max

    def is_out_of_range(self, value: DateSnapshot) -> bool:
        """Returns True if the day is before the minimum or after the maximum."""
        return self.is_out_of_min_range(value) or self.is_out_of_max_range(value)

    def can_go_back(self, viewing_month: MonthSnapshot) -> bool:
        """
        Checks whether the month before ``viewing_month`` has selectable days.

        Args:
            viewing_month: Month currently shown.

        Returns:
            False if the minimum date lies in or after the viewing month.
        """
        if self._min is None:
            return True
        return self._min.month_snapshot() < viewing_month

    def can_go_forward(self, viewing_month: MonthSnapshot) -> bool:
        """
        Checks whether the month after ``viewing_month`` has selectable days.

        Args:
            viewing_month: Month currently shown.

        Returns:
            False if the maximum date lies in or before the viewing month.
        """
        if self._max is None:
            return True
        return self._max.month_snapshot() > viewing_month

    def contains_month(self, month: MonthSnapshot) -> bool:
        """Returns True if at least one day of ``month`` is selectable."""
        if self._min is not None and month < self._min.month_snapshot():
            return False
        if self._max is not None and month > self._max.month_snapshot():
            return False
        return True

    def clamp(self, value: date) -> date:
        """Moves a date inside the bounds."""
        value_snapshot = snapshot(value)
        if self.is_out_of_min_range(value_snapshot):
            return self._min.as_date()
        if self.is_out_of_max_range(value_snapshot):
            return self._max.as_date()
        return value
