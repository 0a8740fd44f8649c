"""Calendar anchor of a timetable: the date of the first week column."""

from datetime import date

from .constants import (
    ANCHOR_SEARCH_COLS,
    COL_FIRST_WEEK,
    MONTH_LABEL_OFFSET,
    MONTH_LABELS,
    ROLLBACK_DAY,
    ROLLBACK_MONTHS,
)
from .exceptions import NoAnchorDate, UnknownMonthLabel
from .grid import Grid
from .utils import normalize_overflow_date


def resolve_month(grid: Grid, first_row: int) -> int:
    """Read the month label above the week header.

    Args:
        grid: Timetable grid
        first_row: Row of the Monday label

    Returns:
        Month number (1-12)

    Raises:
        UnknownMonthLabel: If the label is not a known month name
    """
    label = grid.cell(first_row - MONTH_LABEL_OFFSET, COL_FIRST_WEEK)
    if label not in MONTH_LABELS:
        raise UnknownMonthLabel(label)
    return MONTH_LABELS[label]


def rollback_month(year: int, month: int, day: int) -> int:
    """Month of the labelled date moved back two months.

    The labelled date is normalized first, so a day past the end of the
    labelled month counts from the following month. Stepping back carries a
    day that does not exist in the target month forward as well.

    Args:
        year: Calendar year
        month: Labelled month (1-12)
        day: Day number of the first week

    Returns:
        Month number (1-12)
    """
    labelled = normalize_overflow_date(year, month, day)
    total = labelled.year * 12 + labelled.month - 1 - ROLLBACK_MONTHS
    shifted = normalize_overflow_date(total // 12, total % 12 + 1, labelled.day)
    return shifted.month


def resolve_anchor(grid: Grid, first_row: int, year: int | None = None) -> tuple[date, int]:
    """Find the date and column of the first week.

    The first week may start in column 2, 3 or 4 of the header row. A day
    number of 27 or more means the first week is the tail of a month two
    months before the labelled one; the day number is kept.

    Args:
        grid: Timetable grid
        first_row: Row of the Monday label
        year: Calendar year; defaults to the current year

    Returns:
        Tuple of (anchor date, first week column)

    Raises:
        UnknownMonthLabel: If the month label is not recognized
        NoAnchorDate: If no day number is found
    """
    month = resolve_month(grid, first_row)
    if year is None:
        year = date.today().year

    for col in ANCHOR_SEARCH_COLS:
        text = grid.cell(first_row, col)
        if text == "":
            continue

        try:
            day = int(text.strip())
        except ValueError:
            raise NoAnchorDate(first_row, f"'{text}' is not a day number") from None

        try:
            if day >= ROLLBACK_DAY:
                month = rollback_month(year, month, day)
            anchor = normalize_overflow_date(year, month, day)
        except (ValueError, OverflowError) as e:
            raise NoAnchorDate(first_row, str(e)) from e
        return anchor, col

    raise NoAnchorDate(first_row)
