"""
DatePicker Core - Data Schema Module.

This module defines the enumerations and the grid cell types shared by
the month graph, the selection state machine and the renderers.

Grid cells form a closed set of frozen dataclasses joined in the
``MonthItem`` union. Renderers dispatch on the concrete type.

Classes:
    SelectionMode: Single date or inclusive date range.
    DisplayMode: Which picker view is shown.
    DayOfWeek: Weekday columns plus the week-number column marker.
    WeekHeader: Column header cell.
    Week: Row-leading week number cell.
    DayOfMonth: Day cell, or an alignment blank carrying NO_DATE.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union

from date_picker.snapshot import MonthSnapshot


# Date value carried by blank alignment cells
NO_DATE = -1


class SelectionMode(Enum):
    """
    Selection behaviour of the picker.

    Attributes:
        SINGLE: One selected date.
        RANGE: Two endpoints of an inclusive range.
    """

    SINGLE = "SINGLE"
    RANGE = "RANGE"


class DisplayMode(Enum):
    """
    View currently presented by the picker.

    Attributes:
        CALENDAR: The month grid.
        YEAR_LIST: The year chooser.
        MONTH_LIST: The month chooser.
    """

    CALENDAR = "CALENDAR"
    YEAR_LIST = "YEAR_LIST"
    MONTH_LIST = "MONTH_LIST"


class DayOfWeek(IntEnum):
    """
    Grid column identifiers.

    Weekday values match ``datetime.date.weekday()``. WEEK_NUMBER marks
    the optional column that holds week numbers.
    """

    WEEK_NUMBER = -1
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


@dataclass(frozen=True)
class WeekHeader:
    """
    Column header cell.

    Attributes:
        day_of_week: Weekday of the column, or WEEK_NUMBER.
    """

    day_of_week: DayOfWeek


@dataclass(frozen=True)
class Week:
    """
    Row-leading cell holding the ISO week number of the row.

    Attributes:
        week_number: ISO 8601 week number (1-53).
    """

    week_number: int


@dataclass(frozen=True)
class DayOfMonth:
    """
    Day cell of the month grid.

    Blank cells that only align the grid carry ``date == NO_DATE`` and
    are never selected, today or enabled.

    Attributes:
        day_of_week: Weekday column of the cell.
        month: Month the grid was built for.
        date: Day of month (1-31), or NO_DATE for blanks.
        is_selected: True if the day is the selection or inside the range.
        is_today: True if the day is the current date.
        is_enabled: False for blanks and days outside the min/max bounds.
    """

    day_of_week: DayOfWeek
    month: MonthSnapshot
    date: int = NO_DATE
    is_selected: bool = False
    is_today: bool = False
    is_enabled: bool = True

    @property
    def is_blank(self) -> bool:
        """Returns True for alignment cells."""
        return self.date == NO_DATE


MonthItem = Union[WeekHeader, Week, DayOfMonth]
