"""Constants for the timetable parser."""

# Column indices (0-based)
COL_TIME = 0
COL_LABEL = 1
COL_FIRST_WEEK = 2

# Day-of-month numbers are searched in columns 2..4 of the header row
ANCHOR_SEARCH_COLS = range(2, 5)

# Month label sits this many rows above the Monday header row
MONTH_LABEL_OFFSET = 3

# Each class slot spans three rows: discipline/time, professor, location
SLOT_ROWS = 3

# Boundary detection thresholds
MAX_EMPTY_ROWS = 6
MAX_EMPTY_COLS = 3

# Day numbers from this value on belong to the tail of an earlier month
ROLLBACK_DAY = 27
ROLLBACK_MONTHS = 2

# Weekday labels (Monday..Saturday)
WEEKDAY_LABELS = [
    "ПОНЕДЕЛЬНИК",
    "ВТОРНИК",
    "СРЕДА",
    "ЧЕТВЕРГ",
    "ПЯТНИЦА",
    "СУББОТА",
]

# Month labels
MONTH_LABELS = {
    "ЯНВАРЬ": 1,
    "ФЕВРАЛЬ": 2,
    "МАРТ": 3,
    "АПРЕЛЬ": 4,
    "МАЙ": 5,
    "ИЮНЬ": 6,
    "ИЮЛЬ": 7,
    "АВГУСТ": 8,
    "СЕНТЯБРЬ": 9,
    "ОКТЯБРЬ": 10,
    "НОЯБРЬ": 11,
    "ДЕКАБРЬ": 12,
}

# Class type codes
CLASS_TYPE_NAMES = {
    "Л": "Lecture",
    "С": "Seminar",
    "ПЗ": "Practical session",
    "ЗАЧ": "Pass/fail exam",
    "Л/ПЗ": "Lecture / Practical session",
    "Л/С": "Lecture / Seminar",
    "Лаб": "Laboratory work",
    "ЛАБ": "Laboratory work",
    "ДИФ.ЗАЧ": "Differentiated pass/fail exam",
    "ЗАЩ": "Defense",
    "С/Л": "Seminar / Lecture",
    "ПЗ/Л": "Practical session / Lecture",
    "Л/ЗАЧ": "Lecture / Pass-fail exam",
    "К": "Consultation",
    "ЭКЗ": "Exam",
    "ВЛ": "Video lecture",
}

# Regex patterns
GROUP_NAME_PATTERN = r"^\d{3}[А-Яа-я]{0,3}(-?\d)?$"

# File name artifacts that split a qualifier suffix in two
GROUP_NAME_REPLACEMENTS = [
    (", ", ","),
    ("б,п", "бп"),
    ("п,б", "пб"),
]

# Institutes by first digit of the group name
INSTITUTES = {
    "1": "Institute of Economics, Management and Finance",
    "2": "Law Institute",
    "3": "Institute of Business Technologies",
    "4": "Institute of Information Systems and Computer Engineering Technologies",
    "5": "Institute of Psychology and Pedagogy",
    "6": "Institute of Humanitarian Technologies",
}

# Study levels and forms
GRADUATE_MARKER = "м"
STUDY_LEVEL_GRADUATE = "Graduate"
STUDY_LEVEL_UNDERGRADUATE = "Undergraduate"
STUDY_FORM_IN_PERSON = "In-person"

# Spreadsheet files accepted by the ingestion layer
SPREADSHEET_SUFFIX = ".xlsx"

# Timestamp format for archive directories and report files
RUN_TIMESTAMP_FORMAT = "%Y-%m-%d-%H-%M-%S"
