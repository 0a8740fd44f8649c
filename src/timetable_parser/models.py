"""Data models for the timetable parser."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from .constants import SLOT_ROWS, WEEKDAY_LABELS


class Weekday(Enum):
    """Weekday band of the timetable, in grid order."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5

    @property
    def label(self) -> str:
        """Cyrillic section label used in the spreadsheet."""
        return WEEKDAY_LABELS[self.value]

    @classmethod
    def from_label(cls, label: str) -> "Weekday | None":
        """Return the weekday for a section label, or None."""
        try:
            return cls(WEEKDAY_LABELS.index(label))
        except ValueError:
            return None


@dataclass(frozen=True)
class ClassEntry:
    """A single scheduled class session.

    Attributes:
        discipline: Subject name
        class_type: Normalized session kind (lecture, seminar, ...)
        date: Calendar date of the session
        time: Time-slot label, e.g. "09:00-10:30"
        professor: Professor name
        location: Room or building
        comment: Free-text note from the week cell
        subgroup: Reserved, always 0
    """

    discipline: str
    class_type: str
    date: date
    time: str
    professor: str
    location: str
    comment: str
    subgroup: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "discipline": self.discipline,
            "classType": self.class_type,
            "date": f"{self.date.isoformat()}T00:00:00Z",
            "time": self.time,
            "professor": self.professor,
            "subgroup": self.subgroup,
            "location": self.location,
            "comment": self.comment,
        }


@dataclass(frozen=True)
class Group:
    """Schedule of one student group.

    Groups built from the same file share one ``classes`` tuple.

    Attributes:
        group_name: Group identifier, e.g. "315бп-1"
        last_update: Time of parsing
        institute: Institute name derived from the first digit
        study_level: Graduate or Undergraduate
        study_form: Always In-person
        classes: Classes of the source file
        number_of_subgroups: Not computed, always 0
    """

    group_name: str
    last_update: datetime
    institute: str
    study_level: str
    study_form: str
    classes: tuple[ClassEntry, ...]
    number_of_subgroups: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "groupName": self.group_name,
            "numberOfSubgroups": self.number_of_subgroups,
            "lastUpdate": self.last_update.isoformat(),
            "institute": self.institute,
            "studyLevel": self.study_level,
            "studyForm": self.study_form,
            "classes": [c.to_dict() for c in self.classes],
        }


@dataclass
class Band:
    """Row range of one weekday.

    Attributes:
        weekday: Weekday of the band
        start: First row of the band (None until its label is seen)
        end: Last row of the band (None until the next label is seen)
    """

    weekday: Weekday
    start: int | None = None
    end: int | None = None

    @property
    def span(self) -> int:
        """Number of rows in the band."""
        if self.start is None or self.end is None:
            return 0
        return self.end - self.start + 1

    @property
    def slots(self) -> int:
        """Number of 3-row class slots in the band."""
        return max(self.span, 0) // SLOT_ROWS

    def __str__(self) -> str:
        return f"{self.weekday.name[:3]} {self.start}-{self.end} ({self.slots})"


@dataclass
class Layout:
    """Detected structure of a timetable sheet.

    Attributes:
        first_row: Row of the Monday label (also the week header row)
        last_row: Last row of the last class slot
        last_col: Last week column
        anchor_date: Date of the first week column, Monday
        first_col: First week column
        bands: One band per weekday, Monday..Saturday
    """

    first_row: int
    last_row: int
    last_col: int
    anchor_date: date
    first_col: int
    bands: list[Band] = field(default_factory=list)

    @property
    def week_columns(self) -> range:
        """Columns holding one calendar week each."""
        return range(self.first_col, self.last_col + 1)

    @property
    def total_slots(self) -> int:
        """Class slots over all weekdays."""
        return sum(band.slots for band in self.bands)

    def summary(self) -> str:
        """One-line description for logs and reports."""
        return (
            f"FRI:{self.first_row} LRI:{self.last_row} LCI:{self.last_col} "
            f"FD:{self.anchor_date.isoformat()} FCI:{self.first_col} "
            f"WS:{[b.start for b in self.bands]} WE:{[b.end for b in self.bands]} "
            f"WD:{[b.slots for b in self.bands]}"
        )
