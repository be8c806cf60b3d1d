"""
DatePicker Core - Command Line Tests.

Tests for run_picker: single dates, ranges and the workbook export.
"""

import tempfile
from datetime import date
from pathlib import Path

from date_picker.schema import DayOfWeek
from main import run_picker


class TestRunPicker:
    """run_picker output and exit codes."""

    def test_single_date(self, capsys) -> None:
        code = run_picker(date(2024, 12, 18), None, DayOfWeek.SUNDAY, False, None)
        out = capsys.readouterr().out

        assert code == 0
        assert "December 2024" in out
        assert "Selected: 2024-12-18" in out
        assert "Range:" not in out

    def test_range(self, capsys) -> None:
        run_picker(None, [date(2024, 12, 24), date(2024, 12, 18)], DayOfWeek.MONDAY, False, None)
        out = capsys.readouterr().out

        assert "Range: 2024-12-18 .. 2024-12-24" in out

    def test_one_day_range(self, capsys) -> None:
        run_picker(None, [date(2024, 12, 18), date(2024, 12, 18)], DayOfWeek.SUNDAY, False, None)
        out = capsys.readouterr().out

        assert "Range: 2024-12-18 .. 2024-12-18" in out

    def test_export_uses_generated_filename(self, capsys) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output_dir = Path(tmpdir) / "out"
            code = run_picker(date(2024, 12, 18), None, DayOfWeek.SUNDAY, True, output_dir)

            exported = list(output_dir.glob("calendar_*.xlsx"))

        assert code == 0
        assert len(exported) == 1
        assert "Excel export saved" in capsys.readouterr().out
