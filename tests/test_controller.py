"""
DatePicker Core - Controller Tests.

Unit tests for DatePickerController: initialisation, navigation,
selection paths, listener notification, typed input handling and the
render callbacks.
"""

from datetime import date

import pytest

from date_picker.config import DatePickerConfig
from date_picker.controller import DatePickerController
from date_picker.schema import DayOfMonth, DisplayMode, SelectionMode
from date_picker.selection import SelectionSlot
from date_picker.snapshot import DateSnapshot, MonthSnapshot


NOW = date(2024, 12, 18)


class RecordingRenderer:
    """Captures render callback invocations."""

    def __init__(self):
        self.headers = []
        self.items = []

    def render_headers(self, viewing_month, selected_date, from_user_edit_input):
        self.headers.append((viewing_month, selected_date, from_user_edit_input))

    def render_month_items(self, items):
        self.items.append(items)

    @property
    def selected_days(self):
        return [
            cell.date for cell in self.items[-1]
            if isinstance(cell, DayOfMonth) and cell.is_selected
        ]


def create_controller(**config_kwargs):
    """Creates a controller with a fixed clock and a recording renderer."""
    renderer = RecordingRenderer()
    vibrations = []
    config = DatePickerConfig(vibrator=lambda: vibrations.append(True), **config_kwargs)
    controller = DatePickerController(
        config,
        renderer.render_headers,
        renderer.render_month_items,
        get_now=lambda: NOW
    )
    changes = []
    controller.add_date_changed_listener(lambda old, new: changes.append((old, new)))
    return controller, renderer, changes, vibrations


class TestControllerInit:
    """maybe_init behaviour."""

    def setup_method(self) -> None:
        self.controller, self.renderer, self.changes, _ = create_controller()

    def test_nothing_selected_before_init(self) -> None:
        assert self.controller.get_full_date() is None
        assert self.controller.get_date_range() is None
        assert self.controller.viewing_month is None

    def test_maybe_init_selects_now_silently(self) -> None:
        self.controller.maybe_init()

        assert self.controller.get_full_date() == NOW
        assert self.controller.viewing_month == MonthSnapshot(2024, 12)
        assert self.changes == []
        assert self.renderer.headers[-1] == (MonthSnapshot(2024, 12), DateSnapshot(2024, 12, 18), False)

    def test_maybe_init_is_idempotent(self) -> None:
        self.controller.maybe_init()
        self.controller.set_full_date(date(2024, 1, 5))
        self.controller.maybe_init()

        assert self.controller.get_full_date() == date(2024, 1, 5)

    def test_maybe_init_clamps_to_bounds(self) -> None:
        controller, _, _, _ = create_controller(min_date=date(2025, 3, 1))
        controller.maybe_init()

        assert controller.get_full_date() == date(2025, 3, 1)

    def test_maybe_init_in_range_mode_leaves_both_endpoints_free(self) -> None:
        controller, renderer, changes, _ = create_controller(current_mode=SelectionMode.RANGE)
        controller.maybe_init()

        assert controller.viewing_month == MonthSnapshot(2024, 12)
        assert controller.selection.low_snapshot is None
        assert controller.selection.current == SelectionSlot.LOW
        assert controller.get_full_date() is None
        assert renderer.headers[-1] == (MonthSnapshot(2024, 12), None, False)
        assert renderer.selected_days == []
        assert changes == []


class TestControllerNavigation:
    """Month navigation."""

    def setup_method(self) -> None:
        self.controller, self.renderer, self.changes, self.vibrations = create_controller()
        self.controller.maybe_init()

    def test_next_then_previous_restores_month(self) -> None:
        self.controller.next_month()
        self.controller.previous_month()

        assert self.controller.viewing_month == MonthSnapshot(2024, 12)

    def test_next_month_crosses_year(self) -> None:
        self.controller.next_month()

        assert self.controller.viewing_month == MonthSnapshot(2025, 1)
        assert self.renderer.headers[-1][0] == MonthSnapshot(2025, 1)

    def test_previous_month_crosses_year(self) -> None:
        self.controller.set_full_date(date(2025, 1, 31))
        self.controller.previous_month()

        assert self.controller.viewing_month == MonthSnapshot(2024, 12)

    def test_navigation_does_not_notify_or_select(self) -> None:
        self.controller.next_month()

        assert self.changes == []
        assert self.controller.get_full_date() == NOW
        assert self.vibrations == [True]

    def test_navigation_resets_display_mode(self) -> None:
        config = self.controller.config
        config.display_mode = DisplayMode.YEAR_LIST

        self.controller.previous_month()

        assert config.display_mode == DisplayMode.CALENDAR

    def test_set_month(self) -> None:
        self.controller.set_month(3)

        assert self.controller.viewing_month == MonthSnapshot(2024, 3)
        assert self.controller.get_full_date() == NOW

    def test_set_month_outside_bounds_is_ignored(self) -> None:
        controller, renderer, _, _ = create_controller(
            min_date=date(2024, 11, 15),
            max_date=date(2024, 12, 31)
        )
        controller.maybe_init()
        renders = len(renderer.headers)

        controller.set_month(3)
        assert controller.viewing_month == MonthSnapshot(2024, 12)
        assert len(renderer.headers) == renders

        controller.set_month(11)
        assert controller.viewing_month == MonthSnapshot(2024, 11)

    def test_bounds_stop_navigation(self) -> None:
        controller, _, _, _ = create_controller(
            min_date=date(2024, 12, 1),
            max_date=date(2025, 1, 31)
        )
        controller.maybe_init()

        assert controller.can_go_back() is False
        controller.previous_month()
        assert controller.viewing_month == MonthSnapshot(2024, 12)

        controller.next_month()
        assert controller.viewing_month == MonthSnapshot(2025, 1)
        assert controller.can_go_forward() is False
        controller.next_month()
        assert controller.viewing_month == MonthSnapshot(2025, 1)


class TestControllerSelection:
    """Selection paths and listener notification."""

    def setup_method(self) -> None:
        self.controller, self.renderer, self.changes, self.vibrations = create_controller()

    def test_set_full_date_notifies_with_old_and_new(self) -> None:
        self.controller.set_full_date(date(2024, 5, 1))

        assert self.changes == [(NOW, date(2024, 5, 1))]
        assert self.controller.viewing_month == MonthSnapshot(2024, 5)

    def test_set_full_date_twice_notifies_once(self) -> None:
        self.controller.set_full_date(date(2024, 5, 1))
        self.controller.set_full_date(date(2024, 5, 1))

        assert len(self.changes) == 1

    def test_set_full_date_without_notification(self) -> None:
        self.controller.set_full_date(date(2024, 5, 1), notify_listeners=False)

        assert self.changes == []
        assert self.controller.get_full_date() == date(2024, 5, 1)

    def test_set_full_date_parts_fills_from_now(self) -> None:
        self.controller.set_full_date_parts(month=2)
        assert self.controller.get_full_date() == date(2024, 2, 18)

    def test_set_full_date_parts_clamps_day(self) -> None:
        self.controller.set_full_date_parts(month=2, year=2023, day=31)
        assert self.controller.get_full_date() == date(2023, 2, 28)

    def test_set_day_of_month_before_init(self) -> None:
        self.controller.set_day_of_month(3)

        assert self.controller.get_full_date() == date(2024, 12, 3)
        assert self.changes == [(NOW, date(2024, 12, 3))]

    def test_set_day_of_month_uses_viewing_month(self) -> None:
        self.controller.maybe_init()
        self.controller.next_month()
        self.controller.set_day_of_month(9)

        assert self.controller.get_full_date() == date(2025, 1, 9)
        assert self.changes == [(NOW, date(2025, 1, 9))]
        assert self.renderer.selected_days == [9]
        assert len(self.vibrations) == 2

    def test_set_day_of_month_ignores_out_of_range(self) -> None:
        controller, _, changes, _ = create_controller(min_date=date(2024, 12, 10))
        controller.maybe_init()
        controller.set_day_of_month(5)

        assert controller.get_full_date() == NOW
        assert changes == []

    def test_set_year_keeps_month_and_day(self) -> None:
        self.controller.set_full_date(date(2024, 2, 29))
        self.controller.config.display_mode = DisplayMode.YEAR_LIST

        self.controller.set_year(2023)

        assert self.controller.get_full_date() == date(2023, 2, 28)
        assert self.controller.config.display_mode == DisplayMode.CALENDAR

    def test_set_year_before_init(self) -> None:
        self.controller.set_year(2023)

        assert self.controller.get_full_date() == date(2023, 12, 18)
        assert self.controller.viewing_month == MonthSnapshot(2023, 12)
        assert self.changes == [(NOW, date(2023, 12, 18))]

    def test_clear_listeners(self) -> None:
        self.controller.clear_date_changed_listeners()
        self.controller.set_full_date(date(2024, 5, 1))

        assert self.changes == []

    def test_listeners_fire_in_order(self) -> None:
        calls = []
        self.controller.clear_date_changed_listeners()
        self.controller.add_date_changed_listener(lambda old, new: calls.append("first"))
        self.controller.add_date_changed_listener(lambda old, new: calls.append("second"))

        self.controller.set_full_date(date(2024, 5, 1))

        assert calls == ["first", "second"]


class TestControllerTypedInput:
    """maybe_set_date_from_input behaviour."""

    def setup_method(self) -> None:
        self.controller, self.renderer, self.changes, _ = create_controller()
        self.controller.maybe_init()

    @pytest.mark.parametrize("text", ["not a date", "", "   ", "2024-13-45"])
    def test_malformed_input_is_ignored(self, text: str) -> None:
        renders = len(self.renderer.headers)

        self.controller.maybe_set_date_from_input(text)

        assert self.controller.get_full_date() == NOW
        assert self.controller.viewing_month == MonthSnapshot(2024, 12)
        assert self.changes == []
        assert len(self.renderer.headers) == renders

    def test_valid_input_selects_date(self) -> None:
        self.controller.maybe_set_date_from_input("2025-03-14")

        assert self.controller.get_full_date() == date(2025, 3, 14)
        assert self.changes == [(NOW, date(2025, 3, 14))]
        assert self.renderer.headers[-1] == (MonthSnapshot(2025, 3), DateSnapshot(2025, 3, 14), True)


class TestControllerRange:
    """RANGE mode through the controller."""

    def setup_method(self) -> None:
        self.controller, self.renderer, self.changes, _ = create_controller(
            current_mode=SelectionMode.RANGE
        )

    def test_two_taps_make_a_range(self) -> None:
        self.controller.set_full_date(date(2024, 12, 20))
        assert self.controller.get_date_range() is None

        self.controller.set_day_of_month(16)

        assert self.controller.get_date_range() == (date(2024, 12, 16), date(2024, 12, 20))
        assert self.renderer.selected_days == [16, 17, 18, 19, 20]

    def test_switch_to_single_drops_range(self) -> None:
        self.controller.set_full_date(date(2024, 12, 20))
        self.controller.set_day_of_month(16)

        self.controller.set_selection_mode(SelectionMode.SINGLE)

        assert self.controller.get_date_range() is None
        assert self.controller.selection.get() == DateSnapshot(2024, 12, 16)
        assert self.renderer.selected_days == [16]
        assert self.controller.get_full_date() == date(2024, 12, 16)
        assert self.renderer.headers[-1][1] == DateSnapshot(2024, 12, 16)

    def test_last_tap_is_selectable_after_switch_to_single(self) -> None:
        self.controller.set_full_date(date(2024, 12, 3))
        self.controller.set_day_of_month(10)
        self.controller.set_selection_mode(SelectionMode.SINGLE)

        self.controller.set_full_date(date(2024, 12, 10))

        assert self.controller.get_full_date() == date(2024, 12, 10)
        assert self.renderer.selected_days == [10]
        assert self.renderer.headers[-1][1] == DateSnapshot(2024, 12, 10)

    def test_full_date_is_range_start(self) -> None:
        self.controller.set_full_date(date(2024, 12, 3))
        assert self.controller.get_full_date() is None

        self.controller.set_day_of_month(10)
        assert self.controller.get_full_date() == date(2024, 12, 3)

        self.controller.set_day_of_month(1)
        assert self.controller.get_date_range() == (date(2024, 12, 1), date(2024, 12, 10))
        assert self.controller.get_full_date() == date(2024, 12, 1)

    def test_navigate_then_tap_starts_range(self) -> None:
        self.controller.next_month()
        self.controller.set_day_of_month(5)

        assert self.controller.selection.current == SelectionSlot.HIGH
        assert self.controller.get_date_range() is None
        assert self.renderer.selected_days == [5]

        self.controller.set_day_of_month(9)

        assert self.controller.get_date_range() == (date(2025, 1, 5), date(2025, 1, 9))
        assert self.controller.selection.current == SelectionSlot.LOW

    def test_set_date_range_with_same_day(self) -> None:
        self.controller.set_date_range(date(2024, 12, 24), date(2024, 12, 24))

        assert self.controller.get_date_range() == (date(2024, 12, 24), date(2024, 12, 24))
        assert self.renderer.selected_days == [24]
        assert self.changes == [(NOW, date(2024, 12, 24))]

    def test_set_date_range_across_months(self) -> None:
        self.controller.set_date_range(date(2025, 1, 3), date(2024, 12, 30))

        assert self.controller.get_date_range() == (date(2024, 12, 30), date(2025, 1, 3))
        assert self.controller.viewing_month == MonthSnapshot(2024, 12)
        assert self.renderer.selected_days == [30, 31]

    def test_set_date_range_replaces_previous_range(self) -> None:
        self.controller.set_full_date(date(2024, 12, 3))
        self.controller.set_day_of_month(10)

        self.controller.set_date_range(date(2024, 12, 20), date(2024, 12, 21))

        assert self.controller.get_date_range() == (date(2024, 12, 20), date(2024, 12, 21))
        assert self.controller.selection.current == SelectionSlot.LOW

    def test_set_date_range_switches_to_range_mode(self) -> None:
        controller, _, _, _ = create_controller()
        controller.set_full_date(date(2024, 12, 3))

        controller.set_date_range(date(2024, 12, 5), date(2024, 12, 7))

        assert controller.config.current_mode == SelectionMode.RANGE
        assert controller.get_date_range() == (date(2024, 12, 5), date(2024, 12, 7))


class TestControllerRender:
    """Render callbacks."""

    def test_items_rendered_with_today_and_selection(self) -> None:
        controller, renderer, _, _ = create_controller(show_week_numbers=True)
        controller.set_full_date(date(2024, 12, 5))

        cells = [cell for cell in renderer.items[-1] if isinstance(cell, DayOfMonth)]
        assert [cell.date for cell in cells if cell.is_today] == [18]
        assert [cell.date for cell in cells if cell.is_selected] == [5]
        assert len(renderer.items[-1]) % 8 == 0

    def test_invalid_bounds_rejected(self) -> None:
        with pytest.raises(ValueError):
            DatePickerConfig(min_date=date(2025, 1, 1), max_date=date(2024, 1, 1))
