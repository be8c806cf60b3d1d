"""
DatePicker Core - Text Renderer Module.

Plain-text implementation of the render callbacks, used by the command
line tool. Selected days are wrapped in brackets, today is marked with
an asterisk and days outside the bounds are wrapped in parentheses.

Classes:
    TextRenderer: Renders headers and month grids to strings.
"""

from typing import List, Optional

from date_picker.formatter import DateFormatter
from date_picker.schema import DayOfMonth, DayOfWeek, MonthItem, Week, WeekHeader
from date_picker.snapshot import DateSnapshot, MonthSnapshot


class TextRenderer:
    """
    Renders headers and month grids to strings.

    ``render_headers`` and ``render_month_items`` match the controller's
    callback signatures and keep the latest output in ``lines``.

    Example:
        >>> renderer = TextRenderer()
        >>> controller = DatePickerController(
        ...     config, renderer.render_headers, renderer.render_month_items
        ... )
    """

    CELL_WIDTH = 4

    def __init__(self, formatter: Optional[DateFormatter] = None):
        self._formatter = formatter or DateFormatter()
        self.header: str = ""
        self.grid: List[str] = []

    @property
    def lines(self) -> List[str]:
        """Title line followed by the grid rows."""
        return [self.header] + self.grid

    def render_headers(
        self,
        viewing_month: MonthSnapshot,
        selected_date: Optional[DateSnapshot],
        from_user_edit_input: bool = False
    ) -> None:
        month_name = self._formatter.month_name(viewing_month.month)
        self.header = f"{month_name} {viewing_month.year}"

    def render_month_items(self, items: List[MonthItem]) -> None:
        headers = [item for item in items if isinstance(item, WeekHeader)]
        width = len(headers)

        cells = [self._render_cell(item) for item in items]
        self.grid = [
            "".join(cells[start:start + width]).rstrip()
            for start in range(0, len(cells), width)
        ]

    def render(self) -> str:
        return "\n".join(self.lines)

    def _render_cell(self, item: MonthItem) -> str:
        if isinstance(item, WeekHeader):
            text = self._formatter.weekday_abbreviation(item.day_of_week)
            if item.day_of_week == DayOfWeek.WEEK_NUMBER:
                text = "Wk"
        elif isinstance(item, Week):
            text = str(item.week_number)
        else:
            text = self._render_day(item)
        return text.rjust(self.CELL_WIDTH)

    def _render_day(self, day: DayOfMonth) -> str:
        if day.is_blank:
            return ""
        text = str(day.date)
        if not day.is_enabled:
            return f"({text})"
        if day.is_selected:
            text = f"[{text}]"
        if day.is_today:
            text = f"{text}*"
        return text
