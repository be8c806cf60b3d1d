"""
DatePicker Core - Month Graph Module.

This module turns a month into the ordered list of grid cells a renderer
draws: one header row, then week rows of day cells padded with blanks so
that every row is complete. With week numbers enabled each row gains a
leading column.

Classes:
    MonthGraph: Grid generator for a single month.

Functions:
    build: One-shot grid generation.
    weeks: Splits a cell list into week rows.
"""

from datetime import date
from typing import List, Optional

from date_picker.bounds import DateBounds
from date_picker.date_logic import DAYS_IN_WEEK, DateManager
from date_picker.schema import (
    DayOfMonth,
    DayOfWeek,
    MonthItem,
    Week,
    WeekHeader,
)
from date_picker.selection import SelectedDate
from date_picker.snapshot import DateSnapshot, MonthSnapshot, snapshot, snapshot_month


class MonthGraph:
    """
    Grid generator for the month containing a reference date.

    The graph is rebuilt whenever the viewed month changes and keeps no
    state beyond the month it was built for.

    Attributes:
        month: Month the graph was built for.
        days_in_month: Number of real day cells.
        ordered_week_days: Weekday columns, starting at the first day of week.

    Example:
        >>> graph = MonthGraph(date(2024, 2, 14), DayOfWeek.MONDAY)
        >>> items = graph.get_month_items()
        >>> len([i for i in items if isinstance(i, DayOfMonth) and not i.is_blank])
        29
    """

    def __init__(
        self,
        reference_date: date,
        first_day_of_week: DayOfWeek = DayOfWeek.SUNDAY,
        show_week_numbers: bool = False,
        bounds: Optional[DateBounds] = None,
        date_manager: Optional[DateManager] = None
    ):
        """
        Initialises the MonthGraph.

        Args:
            reference_date: Any date inside the month to build.
            first_day_of_week: Weekday of the first column.
            show_week_numbers: Adds the week-number column.
            bounds: Min/max constraint used to disable days.
            date_manager: Calendar helper. Defaults to a new DateManager.
        """
        self._date_manager = date_manager or DateManager()
        self._first_day_of_week = DayOfWeek(first_day_of_week)
        self._show_week_numbers = show_week_numbers
        self._bounds = bounds or DateBounds()

        self.month: MonthSnapshot = snapshot_month(reference_date)
        self.days_in_month = self._date_manager.get_days_in_month(
            self.month.year,
            self.month.month
        )
        self.ordered_week_days: List[DayOfWeek] = [
            DayOfWeek(day)
            for day in self._date_manager.get_ordered_weekdays(self._first_day_of_week)
        ]

    def get_month_items(
        self,
        selection: Optional[SelectedDate] = None,
        today: Optional[date] = None
    ) -> List[MonthItem]:
        """
        Builds the grid cells for the month.

        Args:
            selection: Current selection used for ``is_selected`` flags.
            today: Current date used for ``is_today`` flags.

        Returns:
            Header row followed by complete week rows.
        """
        today_snapshot = snapshot(today) if today is not None else None

        result: List[MonthItem] = []
        if self._show_week_numbers:
            result.append(WeekHeader(DayOfWeek.WEEK_NUMBER))
        result.extend(WeekHeader(day) for day in self.ordered_week_days)

        days: List[DayOfMonth] = []

        leading = self._date_manager.get_leading_blanks(
            self.month.year,
            self.month.month,
            self._first_day_of_week
        )
        for column in range(leading):
            days.append(self._blank(column))

        for day in range(1, self.days_in_month + 1):
            column = len(days) % DAYS_IN_WEEK
            day_snapshot = DateSnapshot(self.month.year, self.month.month, day)
            days.append(DayOfMonth(
                day_of_week=self.ordered_week_days[column],
                month=self.month,
                date=day,
                is_selected=selection is not None and selection.contains(day_snapshot),
                is_today=day_snapshot == today_snapshot,
                is_enabled=not self._bounds.is_out_of_range(day_snapshot)
            ))

        while len(days) % DAYS_IN_WEEK != 0:
            days.append(self._blank(len(days) % DAYS_IN_WEEK))

        for row_start in range(0, len(days), DAYS_IN_WEEK):
            row = days[row_start:row_start + DAYS_IN_WEEK]
            if self._show_week_numbers:
                result.append(Week(self._week_number(row)))
            result.extend(row)

        return result

    def _blank(self, column: int) -> DayOfMonth:
        """Creates an alignment cell for a column."""
        return DayOfMonth(
            day_of_week=self.ordered_week_days[column],
            month=self.month,
            is_enabled=False
        )

    def _week_number(self, row: List[DayOfMonth]) -> int:
        """ISO week number of the first real day in a row."""
        first_day = next(cell.date for cell in row if not cell.is_blank)
        return self._date_manager.get_week_number(
            date(self.month.year, self.month.month, first_day)
        )


def build(
    reference_date: date,
    first_day_of_week: DayOfWeek = DayOfWeek.SUNDAY,
    show_week_numbers: bool = False,
    selection: Optional[SelectedDate] = None,
    today: Optional[date] = None,
    bounds: Optional[DateBounds] = None
) -> List[MonthItem]:
    """Builds the grid cells for the month containing ``reference_date``."""
    graph = MonthGraph(reference_date, first_day_of_week, show_week_numbers, bounds)
    return graph.get_month_items(selection, today)


def weeks(items: List[MonthItem]) -> List[List[MonthItem]]:
    """
    Splits a cell list into rows, dropping the header row.

    Args:
        items: Output of ``MonthGraph.get_month_items``.

    Returns:
        Week rows, each including its Week cell when present.
    """
    body = [item for item in items if not isinstance(item, WeekHeader)]
    width = len(items) - len(body)
    return [body[start:start + width] for start in range(0, len(body), width)]
