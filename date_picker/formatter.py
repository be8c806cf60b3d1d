"""
DatePicker Core - Date Formatting Module.

This module provides the default formatter collaborator used by the
picker: it parses dates typed into the input field and supplies the
text shown in headers. Hosts can replace it with any object exposing
the same three methods.

Supported input formats:
    - "2024-12-18" (ISO)
    - "2024/12/18"
    - "18/12/2024" (day first)
    - "18 Dec 2024" / "18 December 2024"

Classes:
    DateParseError: Raised when typed input is not a date.
    DateFormatter: Parses input and formats header text.
"""

import calendar
import re
from datetime import date, datetime
from typing import List, Optional

from date_picker.schema import DayOfWeek


class DateParseError(ValueError):
    """
    Raised when a typed date cannot be parsed.

    Attributes:
        value: The text that failed to parse.
    """

    def __init__(self, value: str, message: Optional[str] = None):
        self.value = value
        super().__init__(message or f"Could not parse date from '{value}'")


class DateFormatter:
    """
    Parses typed dates and formats header text.

    Attributes:
        INPUT_FORMATS: ``strptime`` formats tried in order.

    Example:
        >>> formatter = DateFormatter()
        >>> formatter.parse("2024-12-18")
        datetime.date(2024, 12, 18)
        >>> formatter.weekday_abbreviation(DayOfWeek.MONDAY)
        'Mo'
    """

    INPUT_FORMATS = [
        "%Y-%m-%d",
        "%Y/%m/%d",
        "%d/%m/%Y",
        "%d %b %Y",
        "%d %B %Y",
    ]

    # Collapse runs of whitespace typed between date parts
    WHITESPACE_PATTERN = re.compile(r"\s+")

    def __init__(self, input_formats: Optional[List[str]] = None):
        """
        Initialises the DateFormatter.

        Args:
            input_formats: Formats to accept instead of INPUT_FORMATS.
        """
        self._input_formats = list(input_formats or self.INPUT_FORMATS)

    def parse(self, text: str) -> date:
        """
        Parses typed input into a date.

        Args:
            text: Raw text from the input field.

        Returns:
            The parsed date.

        Raises:
            DateParseError: If no accepted format matches.
        """
        cleaned = self.WHITESPACE_PATTERN.sub(" ", text or "").strip()
        if not cleaned:
            raise DateParseError(text, "Date input cannot be empty")

        for input_format in self._input_formats:
            try:
                return datetime.strptime(cleaned, input_format).date()
            except ValueError:
                continue

        raise DateParseError(text)

    def weekday_abbreviation(self, day_of_week: DayOfWeek) -> str:
        """Two-letter weekday label; empty for the week-number column."""
        if day_of_week == DayOfWeek.WEEK_NUMBER:
            return ""
        return calendar.day_abbr[int(day_of_week)][:2]

    def month_name(self, month: int) -> str:
        """Full month name for a 1-based month."""
        return calendar.month_name[month]

    def format_date(self, value: date) -> str:
        """Formats a date the way ``parse`` reads it back first."""
        return value.strftime(self._input_formats[0])
