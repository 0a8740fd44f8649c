"""Timetable Parser - extract per-group class lists from weekly timetable spreadsheets.

This module reads university timetable spreadsheets laid out as weekday
sections of 3-row class slots with one column per calendar week, and turns
them into a list of dated classes for every group named in the file name.

Example usage:
    from timetable_parser import TimetableParser

    parser = TimetableParser()
    groups = parser.parse("315бп-1,316б.xlsx")

    for group in groups:
        print(f"{group.group_name} | {group.institute} | {len(group.classes)} classes")

    # Export to JSON
    from timetable_parser.exporters import JSONExporter
    exporter = JSONExporter()
    exporter.export(groups, "output.json")
"""

from .client import CatalogClient, SubmitResponse
from .exceptions import (
    ConfigError,
    DirectoryError,
    InvalidGroupName,
    LayoutDetectionFailure,
    NoAnchorDate,
    ParseError,
    RunAbortedError,
    TimetableError,
    UnknownMonthLabel,
    UnopenableWorkbook,
    UnrecognizedInstituteDigit,
)
from .exporters import CSVExporter, ExcelExporter, JSONExporter, get_exporter
from .grid import Grid
from .ingest import BatchProcessor, BatchResult
from .models import Band, ClassEntry, Group, Layout, Weekday
from .parser import TimetableParser
from .reporting import Reporter

__version__ = "0.1.0"

__all__ = [
    # Main parser
    "TimetableParser",
    "Grid",
    # Models
    "ClassEntry",
    "Group",
    "Band",
    "Layout",
    "Weekday",
    # Batch processing and submission
    "BatchProcessor",
    "BatchResult",
    "CatalogClient",
    "SubmitResponse",
    "Reporter",
    # Exporters
    "JSONExporter",
    "CSVExporter",
    "ExcelExporter",
    "get_exporter",
    # Exceptions
    "TimetableError",
    "ParseError",
    "UnopenableWorkbook",
    "InvalidGroupName",
    "UnknownMonthLabel",
    "NoAnchorDate",
    "LayoutDetectionFailure",
    "RunAbortedError",
    "UnrecognizedInstituteDigit",
    "DirectoryError",
    "ConfigError",
]
