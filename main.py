"""
DatePicker Core - Main Entry Point.

Prints the month grid for a date or a date range, optionally exporting
it to an Excel workbook.

Usage:
    python main.py [--date YYYY-MM-DD] [--range START END]
                   [--first-day mon] [--week-numbers]
                   [--xlsx] [--output-dir <dir>]

Example:
    python main.py --range 2024-12-18 2024-12-24 --first-day mon --week-numbers
"""

import argparse
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

from date_picker import __version__
from date_picker.config import DatePickerConfig
from date_picker.controller import DatePickerController
from date_picker.excel_export import ExcelMonthExporter
from date_picker.formatter import DateFormatter, DateParseError
from date_picker.logger import configure_logging
from date_picker.schema import DayOfWeek, SelectionMode
from date_picker.text_renderer import TextRenderer


FIRST_DAY_CHOICES = {
    "mon": DayOfWeek.MONDAY,
    "tue": DayOfWeek.TUESDAY,
    "wed": DayOfWeek.WEDNESDAY,
    "thu": DayOfWeek.THURSDAY,
    "fri": DayOfWeek.FRIDAY,
    "sat": DayOfWeek.SATURDAY,
    "sun": DayOfWeek.SUNDAY,
}


def print_header() -> None:
    """Prints the application header."""
    print("=" * 40)
    print("  DatePicker Core")
    print(f"  Version: {__version__}")
    print("=" * 40)
    print()


def run_picker(
    selected: Optional[date],
    date_range: Optional[List[date]],
    first_day_of_week: DayOfWeek,
    show_week_numbers: bool,
    output_dir: Optional[Path]
) -> int:
    """
    Builds a picker session, applies the selection and prints the grid.

    Args:
        selected: Date to select, or None for today.
        date_range: Range endpoints, in any order.
        first_day_of_week: Weekday of the first column.
        show_week_numbers: Adds the week-number column.
        output_dir: Directory for the workbook export, or None to
            skip the export.

    Returns:
        Exit code (0 for success).
    """
    config = DatePickerConfig(
        current_mode=SelectionMode.RANGE if date_range else SelectionMode.SINGLE,
        first_day_of_week=first_day_of_week,
        show_week_numbers=show_week_numbers,
    )

    text = TextRenderer(config.date_formatter)
    excel = ExcelMonthExporter(config.date_formatter)

    def render_headers(month, selected_date, from_user_edit_input):
        text.render_headers(month, selected_date, from_user_edit_input)
        excel.render_headers(month, selected_date, from_user_edit_input)

    def render_month_items(items):
        text.render_month_items(items)
        excel.render_month_items(items)

    controller = DatePickerController(config, render_headers, render_month_items)
    controller.add_date_changed_listener(
        lambda old, new: print(f"  Selected: {new.isoformat()}")
    )

    if date_range:
        start, end = date_range
        controller.set_date_range(start, end)
    elif selected is not None:
        controller.set_full_date(selected)
    else:
        controller.maybe_init()

    print(text.render())
    print()

    selected_range = controller.get_date_range()
    if selected_range is not None:
        start, end = selected_range
        print(f"  Range: {start.isoformat()} .. {end.isoformat()}")

    if output_dir is not None:
        excel_path = output_dir / excel.generate_filename("calendar")
        saved = excel.save(excel_path)
        print(f"  ✓ Excel export saved: {saved}")

    return 0


def main() -> int:
    """
    Main entry point.

    Returns:
        Exit code.
    """
    parser = argparse.ArgumentParser(
        description="DatePicker Core - month grid and date selection"
    )
    parser.add_argument(
        "--date",
        help="Date to select (default: today)"
    )
    parser.add_argument(
        "--range",
        nargs=2,
        metavar=("START", "END"),
        help="Select an inclusive date range"
    )
    parser.add_argument(
        "--first-day",
        choices=sorted(FIRST_DAY_CHOICES),
        default="sun",
        help="First day of the week (default: sun)"
    )
    parser.add_argument(
        "--week-numbers",
        action="store_true",
        help="Show ISO week numbers"
    )
    parser.add_argument(
        "--xlsx",
        action="store_true",
        help="Export the grid to an Excel workbook"
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("output"),
        help="Output directory for the workbook (default: output/)"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)"
    )

    args = parser.parse_args()
    configure_logging(args.log_level)

    print_header()

    formatter = DateFormatter()
    try:
        selected = formatter.parse(args.date) if args.date else None
        date_range = [formatter.parse(value) for value in args.range] if args.range else None
    except DateParseError as e:
        print(f"  ❌ ERROR: {e}")
        return 1

    return run_picker(
        selected,
        date_range,
        FIRST_DAY_CHOICES[args.first_day],
        args.week_numbers,
        args.output_dir if args.xlsx else None
    )


if __name__ == "__main__":
    sys.exit(main())
