"""
DatePicker Core - Configuration Module.

Plain options structure handed to the controller. Only the bounds,
selection mode, first day of week, week-number flag and formatter
affect picker logic; font and colour fields are passed through to
renderers untouched.

Classes:
    DatePickerConfig: Picker options.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Optional

from date_picker.bounds import DateBounds
from date_picker.formatter import DateFormatter
from date_picker.schema import DayOfWeek, DisplayMode, SelectionMode


@dataclass
class DatePickerConfig:
    """
    Picker options.

    Attributes:
        min_date: Earliest selectable day, or None.
        max_date: Latest selectable day, or None.
        current_mode: SINGLE or RANGE selection.
        first_day_of_week: Weekday shown in the first grid column.
        show_week_numbers: Adds a week-number column to the grid.
        date_formatter: Parses typed input and formats header text.
        vibrator: Optional haptic callback fired on selection/navigation.
        display_mode: View currently shown; navigation resets it to CALENDAR.
        normal_font: Renderer font, not used by picker logic.
        selection_color: Renderer colour, not used by picker logic.
        today_stroke_color: Renderer colour, not used by picker logic.
    """

    min_date: Optional[date] = None
    max_date: Optional[date] = None
    current_mode: SelectionMode = SelectionMode.SINGLE
    first_day_of_week: DayOfWeek = DayOfWeek.SUNDAY
    show_week_numbers: bool = False
    date_formatter: DateFormatter = field(default_factory=DateFormatter)
    vibrator: Optional[Callable[[], None]] = None
    display_mode: DisplayMode = DisplayMode.CALENDAR
    normal_font: Any = None
    selection_color: Any = None
    today_stroke_color: Any = None

    def __post_init__(self) -> None:
        if self.first_day_of_week == DayOfWeek.WEEK_NUMBER:
            raise ValueError("first_day_of_week must be a weekday")
        # DateBounds rejects min_date > max_date
        DateBounds(self.min_date, self.max_date)

    @property
    def bounds(self) -> DateBounds:
        """Min/max constraint built from the current limits."""
        return DateBounds(self.min_date, self.max_date)
