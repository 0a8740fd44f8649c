"""Utility functions for the timetable parser."""

from datetime import date, datetime, time

import pandas as pd


def cell_text(value) -> str:
    """Convert a raw spreadsheet value to its displayed text.

    Args:
        value: Value read from the sheet

    Returns:
        Cell text; empty string for blank cells
    """
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return str(value)
    if isinstance(value, datetime):
        if value.hour == value.minute == value.second == 0:
            return value.strftime("%d.%m.%Y")
        return value.strftime("%d.%m.%Y %H:%M")
    if isinstance(value, date):
        return value.strftime("%d.%m.%Y")
    if isinstance(value, time):
        return value.strftime("%H:%M")
    return str(value)


def collapse_spaces(text: str) -> str:
    """Replace newlines with spaces and collapse runs of spaces.

    Args:
        text: Raw text

    Returns:
        Text with single spaces only
    """
    text = text.replace("\n", " ")
    while "  " in text:
        text = text.replace("  ", " ")
    return text


def normalize_overflow_date(year: int, month: int, day: int) -> date:
    """Build a date, carrying a day past the month end into the next month.

    Args:
        year: Year
        month: Month (1-12)
        day: Day of month, may exceed the month length

    Returns:
        Normalized date
    """
    return date.fromordinal(date(year, month, 1).toordinal() + day - 1)
