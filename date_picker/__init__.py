"""
DatePicker Core - Date calculation and selection engine for calendar pickers.

Computes month grids (weekday headers, week numbers, day cells) and tracks
single-date or date-range selections, notifying listeners when the
selection changes.

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "DatePicker Core Team"
