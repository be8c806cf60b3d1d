"""
DatePicker Core - Selection Module.

This module holds the selection state machine. In SINGLE mode it keeps
one date. In RANGE mode successive writes alternate between the low and
the high endpoint, and endpoints written out of chronological order are
swapped so that the low endpoint never follows the high one.

Classes:
    SelectionSlot: The endpoint the next write goes to.
    SelectedDate: Selection state machine.
"""

from datetime import date
from enum import Enum
from typing import Optional, Tuple

from date_picker.logger import get_logger
from date_picker.schema import SelectionMode
from date_picker.snapshot import DateSnapshot

logger = get_logger(__name__)


class SelectionSlot(Enum):
    """Endpoint targeted by the next ``set()`` call."""

    LOW = "LOW"
    HIGH = "HIGH"


class SelectedDate:
    """
    Holds zero, one or two selected days under a selection mode.

    Example:
        >>> selected = SelectedDate(SelectionMode.RANGE)
        >>> selected.set(DateSnapshot(2024, 3, 10))
        >>> selected.get() is None
        True
        >>> selected.set(DateSnapshot(2024, 3, 4))
        >>> selected.get_range()
        (DateSnapshot(year=2024, month=3, day=4), DateSnapshot(year=2024, month=3, day=10))
    """

    def __init__(self, mode: SelectionMode = SelectionMode.SINGLE):
        """
        Initialises an empty selection.

        Args:
            mode: Initial selection mode. Defaults to SINGLE.
        """
        self._mode = mode
        self._current = SelectionSlot.LOW
        self._low: Optional[DateSnapshot] = None
        self._high: Optional[DateSnapshot] = None

    @property
    def mode(self) -> SelectionMode:
        return self._mode

    @mode.setter
    def mode(self, value: SelectionMode) -> None:
        self.set_mode(value)

    @property
    def current(self) -> SelectionSlot:
        """Endpoint the next write in RANGE mode goes to."""
        return self._current

    @property
    def low_snapshot(self) -> Optional[DateSnapshot]:
        return self._low

    @property
    def high_snapshot(self) -> Optional[DateSnapshot]:
        return self._high

    def set_mode(self, mode: SelectionMode) -> None:
        """
        Switches the selection mode.

        Switching to SINGLE drops the high endpoint and keeps the low
        one. Both switches point the next write at the low endpoint.

        Args:
            mode: New selection mode.
        """
        if mode == SelectionMode.SINGLE:
            self._high = None
        self._mode = mode
        self._current = SelectionSlot.LOW
        logger.debug("Selection mode set to %s", mode.value)

    def set(self, value: DateSnapshot) -> None:
        """
        Writes a day into the selection.

        SINGLE mode always replaces the low endpoint. RANGE mode writes
        the endpoint named by ``current`` and then flips ``current``.
        When the write leaves the endpoints out of order they are
        swapped.

        Args:
            value: Day to select.
        """
        if self._mode == SelectionMode.SINGLE:
            self._low = value
            self._current = SelectionSlot.LOW
            return

        if self._current == SelectionSlot.LOW:
            self._low = value
            self._current = SelectionSlot.HIGH
        else:
            self._high = value
            self._current = SelectionSlot.LOW

        if self._low is not None and self._high is not None and self._low > self._high:
            self._low, self._high = self._high, self._low
            logger.debug("Swapped range endpoints to %s..%s", self._low, self._high)

    def get(self) -> Optional[DateSnapshot]:
        """
        Returns the effective selected day.

        SINGLE mode returns the low endpoint. RANGE mode returns the low
        endpoint only once the range is complete, None while it is not.
        """
        if self._mode == SelectionMode.SINGLE:
            return self._low
        if self._high is None:
            return None
        return self._low

    def get_range(self) -> Optional[Tuple[DateSnapshot, DateSnapshot]]:
        """
        Returns the (low, high) endpoints of a complete range.

        Returns:
            The ordered endpoints in RANGE mode when both are set,
            otherwise None.
        """
        if self._mode != SelectionMode.RANGE:
            return None
        if self._low is None or self._high is None:
            return None
        return self._low, self._high

    def get_calendar(self) -> Optional[date]:
        """Returns ``get()`` as a date, or None."""
        selected = self.get()
        return selected.as_date() if selected is not None else None

    def contains(self, value: DateSnapshot) -> bool:
        """
        Checks whether a day is part of the selection.

        A lone RANGE endpoint counts as selected so that the first tap
        of a range is highlighted.

        Args:
            value: Day to test.

        Returns:
            True if the day equals a selected day or lies inside the
            closed range.
        """
        if self._mode == SelectionMode.RANGE and self._low is not None and self._high is not None:
            return self._low <= value <= self._high
        return value == self._low or value == self._high

    def clear(self) -> None:
        """Drops both endpoints and points the next write at LOW."""
        self._low = None
        self._high = None
        self._current = SelectionSlot.LOW
