"""Batch processing of a downloads directory.

Each spreadsheet is parsed on its own. Parsed files are archived under
``parsed/<timestamp>/``, files that failed under ``defective/<timestamp>/``
with the reason written to the report. A defective file has to be fixed by
hand and put back into the downloads directory.
"""

import logging
import shutil
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from .constants import RUN_TIMESTAMP_FORMAT, SPREADSHEET_SUFFIX
from .exceptions import DirectoryError, ParseError, RunAbortedError
from .models import Group
from .parser import TimetableParser
from .reporting import Reporter

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Result of a batch run.

    Attributes:
        timestamp: Run timestamp, also the name of the archive directories
        groups: Groups from all parsed files
        parsed_files: Names of successfully parsed files
        defective_files: Failure reason by file name
    """

    timestamp: str
    groups: list[Group] = field(default_factory=list)
    parsed_files: list[str] = field(default_factory=list)
    defective_files: dict[str, str] = field(default_factory=dict)

    @property
    def total_files(self) -> int:
        return len(self.parsed_files) + len(self.defective_files)


class BatchProcessor:
    """Parses every spreadsheet of a directory and archives it."""

    def __init__(
        self,
        parser: TimetableParser,
        downloads_dir: str | Path,
        parsed_dir: str | Path,
        defective_dir: str | Path,
        reporter: Reporter | None = None,
    ):
        self.parser = parser
        self.downloads_dir = Path(downloads_dir)
        self.parsed_dir = Path(parsed_dir)
        self.defective_dir = Path(defective_dir)
        self.reporter = reporter or parser.reporter

    def run(self, timestamp: str | None = None) -> BatchResult:
        """Parse all spreadsheets of the downloads directory.

        Args:
            timestamp: Archive directory name; defaults to the current time

        Returns:
            BatchResult with groups and per-file verdicts

        Raises:
            DirectoryError: If archive directories cannot be created or a file cannot be moved
            UnrecognizedInstituteDigit: If a group maps to no institute

        Run-fatal errors carry the groups collected so far in ``result``.
        """
        timestamp = timestamp or datetime.now().strftime(RUN_TIMESTAMP_FORMAT)
        result = BatchResult(timestamp=timestamp)

        logger.info("Parsing downloaded files...")
        parsed_target = self._make_dir(self.parsed_dir / timestamp)
        defective_target = self._make_dir(self.defective_dir / timestamp)

        try:
            for file_path in self._list_spreadsheets():
                self._process_file(file_path, result, parsed_target, defective_target)
        except RunAbortedError as e:
            logger.error(
                "Parsing stopped after %d parsed, %d defective",
                len(result.parsed_files),
                len(result.defective_files),
            )
            e.result = result
            raise

        logger.info(
            "Parsing finished: %d parsed, %d defective",
            len(result.parsed_files),
            len(result.defective_files),
        )
        return result

    def _process_file(
        self,
        file_path: Path,
        result: BatchResult,
        parsed_target: Path,
        defective_target: Path,
    ) -> None:
        file_name = file_path.name
        try:
            groups = self.parser.parse(file_path)
        except ParseError as e:
            self.reporter.warning(file_name, f"Skipping table: {e}")
            self._move(file_path, defective_target)
            result.defective_files[file_name] = str(e)
            return

        result.groups.extend(groups)
        self._move(file_path, parsed_target)
        result.parsed_files.append(file_name)
        self.reporter.info(file_name, "Table parsed successfully")

    def _list_spreadsheets(self) -> list[Path]:
        if not self.downloads_dir.is_dir():
            raise DirectoryError(self.downloads_dir, "downloads directory does not exist")
        return sorted(
            path
            for path in self.downloads_dir.iterdir()
            if path.is_file() and path.suffix.lower() == SPREADSHEET_SUFFIX
        )

    def _make_dir(self, path: Path) -> Path:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Could not create directory %s: %s", path, e)
            raise DirectoryError(path, str(e)) from e
        return path

    def _move(self, file_path: Path, target_dir: Path) -> None:
        try:
            shutil.move(str(file_path), str(target_dir / file_path.name))
        except OSError as e:
            logger.error("Could not move table '%s', parsing stopped", file_path.name)
            raise DirectoryError(file_path, str(e)) from e
