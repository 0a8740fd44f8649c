"""Export functionality for parsed timetables."""

import csv
import json
from abc import ABC, abstractmethod
from pathlib import Path

import pandas as pd

from .models import Group


class BaseExporter(ABC):
    """Base class for exporters."""

    @abstractmethod
    def export(self, groups: list[Group], output_path: str | Path) -> None:
        """Export groups to file.

        Args:
            groups: Groups to export
            output_path: Path to output file or directory
        """
        pass


def _group_rows(groups: list[Group]) -> list[dict]:
    return [
        {
            "group_name": group.group_name,
            "institute": group.institute,
            "study_level": group.study_level,
            "study_form": group.study_form,
            "number_of_subgroups": group.number_of_subgroups,
            "classes": len(group.classes),
            "last_update": group.last_update.isoformat(),
        }
        for group in groups
    ]


def _class_rows(groups: list[Group]) -> list[dict]:
    rows = []
    for group in groups:
        for entry in group.classes:
            rows.append(
                {
                    "group_name": group.group_name,
                    "date": entry.date.isoformat(),
                    "time": entry.time,
                    "discipline": entry.discipline,
                    "class_type": entry.class_type,
                    "professor": entry.professor,
                    "location": entry.location,
                    "comment": entry.comment,
                    "subgroup": entry.subgroup,
                }
            )
    return rows


class JSONExporter(BaseExporter):
    """Export to JSON format, in the shape sent to the catalog."""

    def __init__(self, indent: int = 2, ensure_ascii: bool = False):
        """Initialize exporter.

        Args:
            indent: JSON indentation level
            ensure_ascii: If False, allows non-ASCII characters
        """
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def export(self, groups: list[Group], output_path: str | Path) -> None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(
                [group.to_dict() for group in groups],
                f,
                indent=self.indent,
                ensure_ascii=self.ensure_ascii,
            )


class CSVExporter(BaseExporter):
    """Export to CSV format (multiple files)."""

    def export(self, groups: list[Group], output_path: str | Path) -> None:
        """Export groups to CSV files.

        Creates two files:
        - groups.csv: One row per group
        - classes.csv: One row per class and group

        Args:
            groups: Groups to export
            output_path: Path to output directory
        """
        output_dir = Path(output_path)
        output_dir.mkdir(parents=True, exist_ok=True)

        self._write_csv(output_dir / "groups.csv", _group_rows(groups))
        self._write_csv(output_dir / "classes.csv", _class_rows(groups))

    def _write_csv(self, output_path: Path, rows: list[dict]) -> None:
        """Write rows to CSV file."""
        if not rows:
            return

        with open(output_path, "w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=rows[0].keys())
            writer.writeheader()
            writer.writerows(rows)


class ExcelExporter(BaseExporter):
    """Export to Excel format (single workbook with two sheets)."""

    def export(self, groups: list[Group], output_path: str | Path) -> None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        groups_df = pd.DataFrame(_group_rows(groups))
        classes_df = pd.DataFrame(_class_rows(groups))

        with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
            groups_df.to_excel(writer, sheet_name="Groups", index=False)
            classes_df.to_excel(writer, sheet_name="Classes", index=False)


def get_exporter(format_type: str) -> BaseExporter:
    """Get appropriate exporter for format type.

    Args:
        format_type: Export format ('json', 'csv', 'excel')

    Returns:
        Exporter instance

    Raises:
        ValueError: If format type is not supported
    """
    exporters = {
        "json": JSONExporter,
        "csv": CSVExporter,
        "excel": ExcelExporter,
    }

    if format_type not in exporters:
        raise ValueError(
            f"Unsupported format: {format_type}. Supported: {', '.join(exporters.keys())}"
        )

    return exporters[format_type]()
