"""Custom exceptions for the timetable parser."""

from pathlib import Path


class TimetableError(Exception):
    """Base exception for timetable parser errors."""

    pass


class ParseError(TimetableError):
    """A single file could not be parsed. The rest of the batch continues."""

    pass


class UnopenableWorkbook(ParseError):
    """File is not a readable spreadsheet."""

    def __init__(self, path: str | Path, reason: str | None = None):
        self.path = str(path)
        self.reason = reason
        message = f"Could not open workbook '{Path(path).name}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class InvalidGroupName(ParseError):
    """A group token in the file name does not look like a group name."""

    def __init__(self, group_name: str, file_name: str | None = None):
        self.group_name = group_name
        self.file_name = file_name
        super().__init__(f"Invalid group name in file name: '{group_name}'")


class UnknownMonthLabel(ParseError):
    """Month label above the schedule is not a known month."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Unknown month label: '{label}'")


class NoAnchorDate(ParseError):
    """No day-of-month number for the first week column."""

    def __init__(self, row: int, reason: str | None = None):
        self.row = row
        message = f"No day-of-month number in columns 2-4 at row {row}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class LayoutDetectionFailure(ParseError):
    """Weekday bands could not be located or have an invalid size."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Layout detection failed: {reason}")


class RunAbortedError(TimetableError):
    """Error that stops the whole batch, not just one file.

    ``result`` holds the partial batch result when raised during a batch run.
    """

    result = None


class UnrecognizedInstituteDigit(RunAbortedError):
    """Group name starts with a digit that maps to no institute."""

    def __init__(self, group_name: str):
        self.group_name = group_name
        super().__init__(
            f"Unknown institute number '{group_name[:1]}' in group '{group_name}'"
        )


class DirectoryError(RunAbortedError):
    """Archive directory could not be created or a file could not be moved."""

    def __init__(self, path: str | Path, reason: str):
        self.path = str(path)
        super().__init__(f"Directory operation failed for '{path}': {reason}")


class ConfigError(TimetableError):
    """Configuration file is missing or malformed."""

    def __init__(self, path: str | Path, reason: str):
        self.path = str(path)
        super().__init__(f"Invalid configuration '{path}': {reason}")
