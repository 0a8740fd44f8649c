"""Per-file parse report.

The report is a plain-text file meant for the people who fix defective
spreadsheets: one line per event, prefixed with the spreadsheet name.
Every message is also sent to the log.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class ReportEntry:
    """A single report line.

    Attributes:
        level: Logging level name (INFO, WARNING, ERROR)
        file_name: Spreadsheet the message is about
        message: Message text
    """

    level: str
    file_name: str
    message: str

    def __str__(self) -> str:
        return f"[{self.file_name}]  {self.message}"


class Reporter:
    """Collects report entries, mirrors them to the log and the report file."""

    def __init__(self, report_path: str | Path | None = None):
        """Initialize reporter.

        Args:
            report_path: File to append report lines to. None keeps entries in memory only.
        """
        self.report_path = Path(report_path) if report_path else None
        self.entries: list[ReportEntry] = []

        if self.report_path:
            self.report_path.parent.mkdir(parents=True, exist_ok=True)

    def info(self, file_name: str, message: str) -> None:
        self._emit(logging.INFO, file_name, message)

    def warning(self, file_name: str, message: str) -> None:
        self._emit(logging.WARNING, file_name, message)

    def error(self, file_name: str, message: str) -> None:
        self._emit(logging.ERROR, file_name, message)

    def warnings_for(self, file_name: str) -> list[str]:
        """Warning messages reported for one file."""
        return [
            entry.message
            for entry in self.entries
            if entry.file_name == file_name and entry.level == "WARNING"
        ]

    def _emit(self, level: int, file_name: str, message: str) -> None:
        entry = ReportEntry(logging.getLevelName(level), file_name, message)
        self.entries.append(entry)
        logger.log(level, "[%s] %s", file_name, message)

        if self.report_path:
            with open(self.report_path, "a", encoding="utf-8") as f:
                f.write(f"{entry}\n")
