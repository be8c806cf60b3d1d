"""
DatePicker Core - Controller Module.

This module orchestrates a picker session. The controller owns the
viewing month and the selection, rebuilds the month graph when the
viewing month changes, hands header and grid data to the render
callbacks, and notifies date-changed listeners.

All calls are expected from a single thread. Listeners are invoked
synchronously and must not re-enter the controller.

Classes:
    DatePickerController: Session-level orchestration of the picker.
"""

from datetime import date
from typing import Callable, List, Optional, Tuple

from date_picker.config import DatePickerConfig
from date_picker.date_logic import DateManager
from date_picker.formatter import DateParseError
from date_picker.logger import get_logger
from date_picker.month_graph import MonthGraph
from date_picker.schema import DisplayMode, MonthItem, SelectionMode
from date_picker.selection import SelectedDate
from date_picker.snapshot import DateSnapshot, MonthSnapshot, snapshot, snapshot_month

logger = get_logger(__name__)

OnDateChanged = Callable[[date, date], None]
RenderHeaders = Callable[[MonthSnapshot, Optional[DateSnapshot], bool], None]
RenderMonthItems = Callable[[List[MonthItem]], None]


class DatePickerController:
    """
    Session-level orchestration of the picker.

    Every state change is followed by a render pass that reads the
    state back; rendering never changes it. Listeners fire only for
    selection changes, never for month navigation.

    Attributes:
        did_init: True once the picker has a viewing month.
        viewing_month: Month shown in the grid.
        month_graph: Graph for the viewing month.

    Example:
        >>> controller = DatePickerController(
        ...     DatePickerConfig(),
        ...     render_headers=lambda month, selected, typed: None,
        ...     render_month_items=lambda items: None,
        ... )
        >>> controller.maybe_init()
        >>> controller.get_full_date() == date.today()
        True
    """

    def __init__(
        self,
        config: DatePickerConfig,
        render_headers: RenderHeaders,
        render_month_items: RenderMonthItems,
        get_now: Callable[[], date] = date.today
    ):
        """
        Initialises the controller.

        Args:
            config: Picker options.
            render_headers: Receives (viewing month, selected day,
                whether the change came from typed input).
            render_month_items: Receives the grid cells.
            get_now: Provider of the current date.
        """
        self._config = config
        self._render_headers = render_headers
        self._render_month_items = render_month_items
        self._get_now = get_now
        self._date_manager = DateManager()
        self._listeners: List[OnDateChanged] = []

        self.did_init = False
        self.viewing_month: Optional[MonthSnapshot] = None
        self.month_graph: Optional[MonthGraph] = None
        self.selection = SelectedDate(config.current_mode)

    @property
    def config(self) -> DatePickerConfig:
        return self._config

    @property
    def selected_date(self) -> Optional[DateSnapshot]:
        """Day shown as selected in the header: the low endpoint."""
        return self.selection.low_snapshot

    def maybe_init(self) -> None:
        """
        Shows today's month, clamped to the bounds, unless already shown.

        SINGLE mode also selects today. RANGE mode leaves both endpoints
        empty so that the first tap starts the range.
        """
        if self.did_init:
            return

        now = self._config.bounds.clamp(self._get_now())
        if self.selection.mode == SelectionMode.SINGLE:
            self.set_full_date(now, notify_listeners=False)
            return

        self.did_init = True
        self._update_current_month(now)
        self._render()

    def previous_month(self) -> None:
        """Shows the previous month unless the minimum date forbids it."""
        self.maybe_init()
        if not self.can_go_back():
            logger.debug("Cannot go back from %s", self.viewing_month)
            return

        self._config.display_mode = DisplayMode.CALENDAR
        month = self._date_manager.add_months(self.viewing_month.as_date(), -1)
        self._update_month_and_render(month)

    def next_month(self) -> None:
        """Shows the next month unless the maximum date forbids it."""
        self.maybe_init()
        if not self.can_go_forward():
            logger.debug("Cannot go forward from %s", self.viewing_month)
            return

        self._config.display_mode = DisplayMode.CALENDAR
        month = self._date_manager.add_months(self.viewing_month.as_date(), 1)
        self._update_month_and_render(month)

    def set_month(self, month: int) -> None:
        """
        Shows another month of the viewing year.

        Months without a selectable day are ignored.

        Args:
            month: Month number (1-12).
        """
        self.maybe_init()
        target = MonthSnapshot(self.viewing_month.year, month)
        if not self._config.bounds.contains_month(target):
            logger.debug("Cannot show %s outside the bounds", target)
            return

        self._config.display_mode = DisplayMode.CALENDAR
        self._update_month_and_render(target.as_date())

    def set_full_date(
        self,
        value: date,
        notify_listeners: bool = True,
        from_user_edit_input: bool = False
    ) -> None:
        """
        Selects a date and shows its month.

        Selecting the day that is already selected does nothing, so
        repeated calls notify listeners at most once. Use
        ``set_date_range`` to select a one-day range.

        Args:
            value: Date to select.
            notify_listeners: Fire date-changed listeners.
            from_user_edit_input: The date came from typed input.
        """
        new_snapshot = snapshot(value)
        if new_snapshot == self.selected_date:
            return

        old_selected = self._current_selected_or_now()
        self.did_init = True
        self.selection.set(new_snapshot)

        if notify_listeners:
            self._notify_listeners(old_selected, value)
        self._update_current_month(value)
        self._render(from_user_edit_input)

    def set_full_date_parts(
        self,
        month: int,
        year: Optional[int] = None,
        day: Optional[int] = None,
        notify_listeners: bool = True
    ) -> None:
        """
        Selects a date built from parts, filling gaps from today.

        A day past the end of the month is clamped to the last day.

        Args:
            month: Month number (1-12).
            year: Year, or None for the current year.
            day: Day of month, or None for today's day.
            notify_listeners: Fire date-changed listeners.
        """
        now = self._get_now()
        target = MonthSnapshot(year if year is not None else now.year, month)
        self.set_full_date(
            target.as_date(day if day is not None else now.day),
            notify_listeners=notify_listeners
        )

    def maybe_set_date_from_input(self, text: str) -> None:
        """
        Selects a typed date, ignoring input that does not parse.

        Args:
            text: Raw text from the input field.
        """
        if not text or not text.strip():
            return
        try:
            parsed = self._config.date_formatter.parse(text)
        except DateParseError as e:
            logger.debug("Ignoring date input: %s", e)
            return
        self.set_full_date(parsed, from_user_edit_input=True)

    def set_date_range(
        self,
        start: date,
        end: date,
        notify_listeners: bool = True
    ) -> None:
        """
        Selects both endpoints of a range at once.

        Switches to RANGE mode first if needed. The endpoints may come in
        either order and may be the same day. The month of the earlier
        endpoint is shown.

        Args:
            start: One endpoint.
            end: The other endpoint.
            notify_listeners: Fire date-changed listeners.
        """
        if self.selection.mode != SelectionMode.RANGE:
            self._config.current_mode = SelectionMode.RANGE
            self.selection.set_mode(SelectionMode.RANGE)

        old_selected = self._current_selected_or_now()
        self.did_init = True
        self.selection.clear()
        self.selection.set(snapshot(start))
        self.selection.set(snapshot(end))

        low = self.selection.low_snapshot.as_date()
        if notify_listeners:
            self._notify_listeners(old_selected, low)
        self._update_current_month(low)
        self._render()

    def get_full_date(self) -> Optional[date]:
        """
        Returns the selected date, or None.

        In RANGE mode this is the start of the range once both endpoints
        are set, and None while the range is incomplete.
        """
        return self.selection.get_calendar()

    def get_date_range(self) -> Optional[Tuple[date, date]]:
        """Returns the (start, end) of a complete range selection, or None."""
        selected_range = self.selection.get_range()
        if selected_range is None:
            return None
        low, high = selected_range
        return low.as_date(), high.as_date()

    def set_day_of_month(self, day: int) -> None:
        """
        Selects a day of the viewing month.

        Days outside the min/max bounds are ignored. Before any date was
        set the day is applied to the current month instead.

        Args:
            day: Day of month (1-31).
        """
        if not self.did_init:
            self.set_full_date(snapshot_month(self._get_now()).as_date(day))
            return

        value = self.viewing_month.as_date(day)
        new_snapshot = snapshot(value)
        if self._config.bounds.is_out_of_range(new_snapshot):
            logger.debug("Ignoring out of range day %s", new_snapshot)
            return

        old_selected = self._current_selected_or_now()
        self.selection.set(new_snapshot)
        self._vibrate()
        self._notify_listeners(old_selected, value)
        self._render()

    def set_year(self, year: int) -> None:
        """Moves the selection to another year, keeping month and day."""
        self.maybe_init()
        selected = self.selected_date
        self.set_full_date_parts(
            month=self.viewing_month.month,
            year=year,
            day=selected.day if selected is not None else None
        )
        self._config.display_mode = DisplayMode.CALENDAR

    def set_selection_mode(self, mode: SelectionMode) -> None:
        """
        Switches between single and range selection.

        Args:
            mode: New selection mode.
        """
        self._config.current_mode = mode
        self.selection.set_mode(mode)
        self._render()

    def can_go_back(self) -> bool:
        if self.viewing_month is None:
            return False
        return self._config.bounds.can_go_back(self.viewing_month)

    def can_go_forward(self) -> bool:
        if self.viewing_month is None:
            return False
        return self._config.bounds.can_go_forward(self.viewing_month)

    def add_date_changed_listener(self, listener: OnDateChanged) -> None:
        self._listeners.append(listener)

    def clear_date_changed_listeners(self) -> None:
        self._listeners.clear()

    def _update_month_and_render(self, month: date) -> None:
        self._update_current_month(month)
        self._render()
        self._vibrate()

    def _update_current_month(self, value: date) -> None:
        self.viewing_month = snapshot_month(value)
        self.month_graph = MonthGraph(
            value,
            first_day_of_week=self._config.first_day_of_week,
            show_week_numbers=self._config.show_week_numbers,
            bounds=self._config.bounds,
            date_manager=self._date_manager
        )
        logger.debug("Viewing month is now %s", self.viewing_month)

    def _render(self, from_user_edit_input: bool = False) -> None:
        if self.viewing_month is None:
            return
        self._render_headers(self.viewing_month, self.selected_date, from_user_edit_input)
        items = self.month_graph.get_month_items(self.selection, self._get_now())
        self._render_month_items(items)

    def _notify_listeners(self, old: date, new: date) -> None:
        for listener in self._listeners:
            listener(old, new)

    def _vibrate(self) -> None:
        if self._config.vibrator is not None:
            self._config.vibrator()

    def _current_selected_or_now(self) -> date:
        selected = self.selected_date
        if selected is not None:
            return selected.as_date()
        return self._get_now()
