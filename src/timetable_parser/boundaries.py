"""Location of the schedule region inside a timetable grid.

The schedule has no explicit bounds. It starts at the row labelled with the
first weekday and ends where a run of empty rows begins; week columns end at
a run of empty header cells. Counting runs instead of stopping at the first
blank absorbs spacer rows and merged cells inside the schedule.
"""

from .constants import (
    COL_FIRST_WEEK,
    COL_LABEL,
    COL_TIME,
    MAX_EMPTY_COLS,
    MAX_EMPTY_ROWS,
    WEEKDAY_LABELS,
)
from .grid import Grid
from .models import Weekday


def find_first_row(grid: Grid) -> int:
    """Find the row holding the Monday label.

    Args:
        grid: Timetable grid

    Returns:
        Row index, or ``grid.n_rows`` if there is no Monday label
    """
    for row in range(grid.n_rows):
        if grid.cell(row, COL_LABEL) == WEEKDAY_LABELS[Weekday.MONDAY.value]:
            return row
    return grid.n_rows


def find_last_row(grid: Grid, first_row: int) -> int:
    """Find the last row of the last class slot.

    A row counts as empty if its time column is blank, or if it has a time
    but no label. Scanning stops after six empty rows in a row.

    Args:
        grid: Timetable grid
        first_row: Row of the Monday label

    Returns:
        Index of the last schedule row
    """
    empty_rows = 0
    row = first_row
    while row < grid.n_rows and empty_rows < MAX_EMPTY_ROWS:
        if grid.is_blank(row, COL_TIME):
            empty_rows += 1
        elif not grid.is_blank(row, COL_LABEL):
            empty_rows = 0
        else:
            empty_rows += 1
        row += 1

    # row is one past the last examined row; the footer block that follows
    # the schedule is shorter when Saturday has no classes
    if grid.cell(row - 4, COL_LABEL) == WEEKDAY_LABELS[Weekday.SATURDAY.value]:
        return row - 3
    return row - 5


def find_last_col(grid: Grid, first_row: int) -> int:
    """Find the last week column.

    Args:
        grid: Timetable grid
        first_row: Header row holding the day numbers

    Returns:
        Index of the last non-empty header column
    """
    empty_cols = 0
    col = COL_FIRST_WEEK
    while col < grid.n_cols and empty_cols < MAX_EMPTY_COLS:
        if grid.is_blank(first_row, col):
            empty_cols += 1
        else:
            empty_cols = 0
        col += 1
    return col - 1 - empty_cols
