"""Test fixtures for timetable parser tests."""

import pandas as pd
import pytest

from timetable_parser.grid import Grid

TIMES = ["08:30-10:00", "10:10-11:40", "12:10-13:40", "14:00-15:30"]

WEEKDAYS = ["ПОНЕДЕЛЬНИК", "ВТОРНИК", "СРЕДА", "ЧЕТВЕРГ", "ПЯТНИЦА", "СУББОТА"]

# (weekday, slot, week) -> (code, comment, comment continuation)
DEFAULT_ENTRIES = {
    (0, 0, 0): ("Л", "", ""),
    (0, 0, 1): ("ПЗ", "ауд. 305", ""),
    (0, 1, 2): ("Лаб", "", ""),
    (1, 0, 0): ("С", "", ""),
    (2, 0, 3): ("Л \n /ПЗ", "", ""),
    (3, 1, 0): ("ЭКЗ", "консультация накануне", "  корпус 2 "),
    (4, 0, 1): ("К", "", ""),
    (5, 0, 1): ("ВЛ", "", ""),
}


def build_timetable_rows(
    month="СЕНТЯБРЬ",
    days=("2", "9", "16", "23"),
    first_col=2,
    slots=(2, 2, 1, 2, 1, 1),
    saturday_label=True,
    thursday_blank_row=False,
    extra_rows=None,
    entries=None,
):
    """Build the rows of a timetable sheet.

    Layout: title on row 0, month label on row 2, Monday label and week day
    numbers on row 5, then weekday sections of 3-row slots, then a footer.
    With default arguments the Monday band starts on row 6 and the last
    schedule row is 37.
    """
    entries = DEFAULT_ENTRIES if entries is None else entries
    extra_rows = extra_rows or {}
    width = first_col + len(days) + 4

    def blank():
        return [""] * width

    rows = []

    title = blank()
    title[1] = "РАСПИСАНИЕ ЗАНЯТИЙ"
    rows.append(title)
    rows.append(blank())

    month_row = blank()
    month_row[2] = month
    rows.append(month_row)
    rows.append(blank())
    rows.append(blank())

    for weekday, label in enumerate(WEEKDAYS):
        if weekday == 5 and not saturday_label:
            continue

        label_row = blank()
        label_row[1] = label
        if weekday == 0:
            for week, day in enumerate(days):
                label_row[first_col + week] = day
        rows.append(label_row)

        if weekday == 3 and thursday_blank_row:
            rows.append(blank())

        for slot in range(slots[weekday]):
            base, professor, location = blank(), blank(), blank()
            base[0] = TIMES[slot]
            base[1] = f"Дисциплина {weekday}-{slot}"
            professor[1] = f"Преподаватель {weekday}-{slot}"
            location[1] = f"Ауд. {weekday}{slot}"
            for week in range(len(days)):
                code, comment, continuation = entries.get((weekday, slot, week), ("", "", ""))
                base[first_col + week] = code
                professor[first_col + week] = comment
                location[first_col + week] = continuation
            rows.extend([base, professor, location])

        for _ in range(extra_rows.get(weekday, 0)):
            rows.append(blank())

    for _ in range(4):
        rows.append(blank())
    footer = blank()
    footer[1] = "Начальник учебного отдела"
    rows.append(footer)

    return rows


def write_timetable_file(path, rows):
    """Write timetable rows to an .xlsx file, numbers as numbers."""

    def to_cell(text):
        if text == "":
            return None
        if text.isdigit():
            return int(text)
        return text

    df = pd.DataFrame([[to_cell(text) for text in row] for row in rows])
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name="Расписание", index=False, header=False)
    return path


@pytest.fixture
def build_rows():
    """Factory for timetable rows."""
    return build_timetable_rows


@pytest.fixture
def timetable_grid():
    """Grid of the default timetable."""
    return Grid(build_timetable_rows())


@pytest.fixture
def write_timetable(tmp_path):
    """Factory writing a timetable file into a temporary directory."""

    def _write(file_name="315бп-1,316б.xlsx", rows=None, directory=None):
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        return write_timetable_file(target_dir / file_name, rows or build_timetable_rows())

    return _write
