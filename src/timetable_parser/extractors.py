"""Class extraction from weekday bands.

Every class slot is a 3-row block. The label column holds the discipline,
professor and location on consecutive rows; each week column holds the class
type code on the first row and an optional comment on the other two. A slot
produces a class for every week column whose code cell is filled.
"""

from datetime import timedelta

from .constants import COL_LABEL, COL_TIME, SLOT_ROWS
from .grid import Grid
from .models import ClassEntry, Layout, Weekday
from .normalization import clean_class_type, is_known_class_type, normalize_class_type
from .reporting import Reporter


def build_class(grid: Grid, layout: Layout, weekday: Weekday, base_row: int, col: int) -> ClassEntry:
    """Build a class from a slot and a week column.

    Args:
        grid: Timetable grid
        layout: Detected layout
        weekday: Weekday of the slot
        base_row: First row of the slot
        col: Week column

    Returns:
        ClassEntry with a normalized class type
    """
    comment = grid.cell(base_row + 1, col).strip()
    continuation = grid.cell(base_row + 2, col)
    if continuation != "":
        comment = f"{comment} {continuation.strip()}".strip()

    return ClassEntry(
        discipline=grid.cell(base_row, COL_LABEL).strip(),
        class_type=normalize_class_type(clean_class_type(grid.cell(base_row, col))),
        date=layout.anchor_date
        + timedelta(days=7 * (col - layout.first_col) + weekday.value),
        time=grid.cell(base_row, COL_TIME).strip(),
        professor=grid.cell(base_row + 1, COL_LABEL).strip(),
        location=grid.cell(base_row + 2, COL_LABEL).strip(),
        comment=comment,
    )


def extract_classes(
    grid: Grid,
    layout: Layout,
    reporter: Reporter | None = None,
    file_name: str = "",
) -> list[ClassEntry]:
    """Extract all classes of a timetable.

    Order is weekday, then slot, then week column.

    Args:
        grid: Timetable grid
        layout: Detected layout
        reporter: Receives a warning for every unknown class type code
        file_name: Spreadsheet name used in reports

    Returns:
        List of classes
    """
    classes: list[ClassEntry] = []

    for band in layout.bands:
        if band.slots == 0:
            continue

        for slot in range(band.slots):
            base_row = band.start + slot * SLOT_ROWS
            for col in layout.week_columns:
                if grid.is_blank(base_row, col):
                    continue

                code = clean_class_type(grid.cell(base_row, col))
                if not is_known_class_type(code) and reporter is not None:
                    reporter.warning(file_name, f"Unknown class type: {code} [{col}:{base_row}]")

                classes.append(build_class(grid, layout, band.weekday, base_row, col))

    return classes
