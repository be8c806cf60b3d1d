"""
DatePicker Core - Excel Export Module.

This module writes a rendered month grid into an Excel workbook, one
sheet per month. Selected days are filled with the selection colour,
today gets a bold border and disabled days are greyed out.

Classes:
    ExcelMonthExporter: Collects grids through the render callbacks
        and saves them as a workbook.
"""

from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple, Union

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from date_picker.formatter import DateFormatter
from date_picker.logger import get_logger
from date_picker.month_graph import weeks
from date_picker.schema import DayOfMonth, DayOfWeek, MonthItem, Week, WeekHeader
from date_picker.snapshot import DateSnapshot, MonthSnapshot

logger = get_logger(__name__)


class ExcelMonthExporter:
    """
    Collects month grids and saves them as an Excel workbook.

    Pass ``render_headers`` and ``render_month_items`` to the controller;
    each rendered grid replaces the sheet for its month.

    Attributes:
        SELECTION_COLOR: Default fill colour for selected days.

    Example:
        >>> exporter = ExcelMonthExporter()
        >>> controller = DatePickerController(
        ...     config, exporter.render_headers, exporter.render_month_items
        ... )
        >>> controller.maybe_init()
        >>> exporter.save("calendar.xlsx")
    """

    SELECTION_COLOR = "2F5496"

    # Header styling
    HEADER_FONT = Font(bold=True, color="FFFFFF")
    HEADER_FILL = PatternFill(
        start_color="2F5496",
        end_color="2F5496",
        fill_type="solid"
    )
    WEEK_FONT = Font(italic=True, color="2F5496")
    DISABLED_FONT = Font(color="A6A6A6")
    CENTER = Alignment(horizontal="center", vertical="center")

    THIN_BORDER = Border(
        left=Side(style="thin"),
        right=Side(style="thin"),
        top=Side(style="thin"),
        bottom=Side(style="thin")
    )
    TODAY_BORDER = Border(
        left=Side(style="thick"),
        right=Side(style="thick"),
        top=Side(style="thick"),
        bottom=Side(style="thick")
    )

    # Grid starts below the title and selection rows
    GRID_START_ROW = 4

    def __init__(
        self,
        formatter: Optional[DateFormatter] = None,
        selection_color: Optional[str] = None
    ):
        """
        Initialises the exporter.

        Args:
            formatter: Supplies month names and weekday labels.
            selection_color: Hex RGB fill for selected days.
        """
        self._formatter = formatter or DateFormatter()
        color = selection_color or self.SELECTION_COLOR
        self._selection_fill = PatternFill(
            start_color=color,
            end_color=color,
            fill_type="solid"
        )
        self._workbook = Workbook()
        self._workbook.remove(self._workbook.active)
        self._current: Optional[Tuple[MonthSnapshot, Optional[DateSnapshot]]] = None

    @property
    def workbook(self) -> Workbook:
        return self._workbook

    def render_headers(
        self,
        viewing_month: MonthSnapshot,
        selected_date: Optional[DateSnapshot],
        from_user_edit_input: bool = False
    ) -> None:
        self._current = (viewing_month, selected_date)

    def render_month_items(self, items: List[MonthItem]) -> None:
        """
        Writes a grid into the sheet of the month last passed to
        ``render_headers``.

        Args:
            items: Grid cells from the month graph.
        """
        if self._current is None:
            logger.warning("Month items rendered before headers, skipping")
            return

        viewing_month, selected_date = self._current
        title = str(viewing_month)
        index = None
        if title in self._workbook.sheetnames:
            index = self._workbook.sheetnames.index(title)
            self._workbook.remove(self._workbook[title])
        ws = self._workbook.create_sheet(title, index)

        ws["A1"] = f"{self._formatter.month_name(viewing_month.month)} {viewing_month.year}"
        ws["A1"].font = Font(bold=True, size=16)
        ws["A2"] = "Selected:"
        ws["B2"] = str(selected_date) if selected_date is not None else ""

        headers = [item for item in items if isinstance(item, WeekHeader)]
        for col, header in enumerate(headers, start=1):
            cell = ws.cell(row=self.GRID_START_ROW, column=col)
            if header.day_of_week == DayOfWeek.WEEK_NUMBER:
                cell.value = "Wk"
            else:
                cell.value = self._formatter.weekday_abbreviation(header.day_of_week)
            cell.font = self.HEADER_FONT
            cell.fill = self.HEADER_FILL
            cell.alignment = self.CENTER
            cell.border = self.THIN_BORDER

        for row_idx, row in enumerate(weeks(items), start=self.GRID_START_ROW + 1):
            for col_idx, item in enumerate(row, start=1):
                cell = ws.cell(row=row_idx, column=col_idx)
                cell.alignment = self.CENTER
                cell.border = self.THIN_BORDER
                if isinstance(item, Week):
                    cell.value = item.week_number
                    cell.font = self.WEEK_FONT
                else:
                    self._write_day(cell, item)

        self._auto_adjust_columns(ws)
        logger.debug("Rendered sheet %s", title)

    def save(self, output_path: Union[str, Path]) -> Path:
        """
        Saves the collected sheets.

        Args:
            output_path: Path for the output .xlsx file.

        Returns:
            The resolved output path.

        Raises:
            ValueError: If nothing was rendered yet.
        """
        if not self._workbook.sheetnames:
            raise ValueError("No month grid has been rendered")

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        self._workbook.save(output_path)
        return output_path

    def _write_day(self, cell, day: DayOfMonth) -> None:
        """Writes a day cell with selection, today and disabled styling."""
        if day.is_blank:
            return
        cell.value = day.date
        if not day.is_enabled:
            cell.font = self.DISABLED_FONT
            return
        if day.is_selected:
            cell.fill = self._selection_fill
            cell.font = Font(bold=True, color="FFFFFF")
        if day.is_today:
            cell.border = self.TODAY_BORDER

    def _auto_adjust_columns(self, worksheet: Worksheet) -> None:
        """Gives grid columns a uniform width."""
        for col_idx in range(1, worksheet.max_column + 1):
            column_letter = get_column_letter(col_idx)
            worksheet.column_dimensions[column_letter].width = 6

    def generate_filename(self, prefix: str = "calendar") -> str:
        """
        Generates a timestamped filename for exports.

        Args:
            prefix: Filename prefix. Defaults to "calendar".

        Returns:
            Filename like "calendar_2024-12-18_143052.xlsx".
        """
        timestamp = datetime.now().strftime("%Y-%m-%d_%H%M%S")
        return f"{prefix}_{timestamp}.xlsx"
