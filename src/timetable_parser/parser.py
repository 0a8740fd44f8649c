"""Main timetable parser class."""

import logging
from collections import Counter
from datetime import datetime
from pathlib import Path

from .anchor import resolve_anchor
from .boundaries import find_first_row, find_last_col, find_last_row
from .constants import WEEKDAY_LABELS
from .exceptions import LayoutDetectionFailure, ParseError
from .extractors import extract_classes
from .grid import Grid
from .groups import build_groups, parse_group_names
from .models import ClassEntry, Group, Layout, Weekday
from .reporting import Reporter
from .weekdays import segment_weekdays

logger = logging.getLogger(__name__)


class TimetableParser:
    """Parser for weekly timetable spreadsheets."""

    def __init__(
        self,
        reporter: Reporter | None = None,
        use_active_sheet: bool = True,
        year: int | None = None,
    ):
        """Initialize parser.

        Args:
            reporter: Report sink; defaults to an in-memory reporter
            use_active_sheet: Read the active sheet instead of the first one
            year: Calendar year of the timetable; defaults to the current year
        """
        self.reporter = reporter or Reporter()
        self.use_active_sheet = use_active_sheet
        self.year = year

    def parse(self, file_path: str | Path) -> list[Group]:
        """Parse a timetable spreadsheet.

        Group names are taken from the file name and checked before the
        workbook is opened.

        Args:
            file_path: Path to the .xlsx file

        Returns:
            One group per group name in the file name

        Raises:
            ParseError: If the file cannot be parsed
            UnrecognizedInstituteDigit: If a group maps to no institute
        """
        file_path = Path(file_path)
        file_name = file_path.name
        logger.info("[%s] Parsing timetable...", file_name)

        group_names = parse_group_names(file_name)
        self.reporter.info(file_name, f"Found groups: {', '.join(group_names)}")

        grid = Grid.from_excel(file_path, use_active_sheet=self.use_active_sheet)
        classes = self.parse_grid(grid, file_name)

        return build_groups(group_names, classes)

    def parse_grid(self, grid: Grid, file_name: str = "") -> list[ClassEntry]:
        """Extract classes from an already loaded grid.

        Args:
            grid: Timetable grid
            file_name: Spreadsheet name used in reports

        Returns:
            List of classes

        Raises:
            ParseError: If the layout cannot be detected
        """
        layout = self.detect_layout(grid)
        logger.debug("[%s] %s", file_name, layout.summary())
        self.reporter.info(file_name, layout.summary())

        return extract_classes(grid, layout, self.reporter, file_name)

    def detect_layout(self, grid: Grid) -> Layout:
        """Locate the schedule region, its anchor date and weekday bands.

        Args:
            grid: Timetable grid

        Returns:
            Detected layout

        Raises:
            LayoutDetectionFailure: If there is no Monday label or bands are invalid
            UnknownMonthLabel: If the month label is not recognized
            NoAnchorDate: If the first day number is missing
        """
        first_row = find_first_row(grid)
        if first_row >= grid.n_rows:
            raise LayoutDetectionFailure(
                f"no '{WEEKDAY_LABELS[Weekday.MONDAY.value]}' label in column 1"
            )

        last_row = find_last_row(grid, first_row)
        anchor_date, first_col = resolve_anchor(grid, first_row, self.year)
        last_col = find_last_col(grid, first_row)
        bands = segment_weekdays(grid, first_row, last_row)

        return Layout(
            first_row=first_row,
            last_row=last_row,
            last_col=last_col,
            anchor_date=anchor_date,
            first_col=first_col,
            bands=bands,
        )

    def validate(self, file_path: str | Path) -> dict:
        """Validate a timetable file structure without extracting classes.

        Args:
            file_path: Path to the .xlsx file

        Returns:
            Dictionary with validation results
        """
        file_path = Path(file_path)
        validation = {
            "valid": True,
            "file_exists": False,
            "groups": [],
            "layout": None,
            "errors": [],
        }

        if not file_path.exists():
            validation["valid"] = False
            validation["errors"].append(f"File not found: {file_path}")
            return validation

        validation["file_exists"] = True

        try:
            validation["groups"] = parse_group_names(file_path.name)
            grid = Grid.from_excel(file_path, use_active_sheet=self.use_active_sheet)
            validation["layout"] = self.detect_layout(grid)
        except ParseError as e:
            validation["valid"] = False
            validation["errors"].append(str(e))

        return validation

    def get_stats(self, groups: list[Group]) -> dict:
        """Get statistics from parsed groups.

        Args:
            groups: Groups from one file

        Returns:
            Dictionary with statistics
        """
        classes = groups[0].classes if groups else ()

        by_weekday = Counter(c.date.strftime("%A") for c in classes)
        by_type = Counter(c.class_type for c in classes)

        return {
            "parse_date": datetime.now().isoformat(),
            "groups": [g.group_name for g in groups],
            "total_classes": len(classes),
            "disciplines_count": len({c.discipline for c in classes}),
            "professors_count": len({c.professor for c in classes if c.professor}),
            "first_date": min((c.date for c in classes), default=None),
            "last_date": max((c.date for c in classes), default=None),
            "classes_by_weekday": dict(by_weekday),
            "classes_by_type": dict(by_type),
        }
