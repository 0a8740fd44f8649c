"""Plain-text view of a timetable sheet."""

from pathlib import Path

import pandas as pd
from openpyxl import load_workbook

from .exceptions import UnopenableWorkbook
from .utils import cell_text


class Grid:
    """Rectangular grid of cell text with row-major and column-major views."""

    def __init__(self, rows: list[list[str]]):
        """Initialize grid.

        Args:
            rows: Row-major cell text; ragged rows are padded with ""
        """
        width = max((len(row) for row in rows), default=0)
        self.rows: list[list[str]] = [list(row) + [""] * (width - len(row)) for row in rows]
        self.cols: list[list[str]] = [list(col) for col in zip(*self.rows)]

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    @property
    def n_cols(self) -> int:
        return len(self.cols)

    def cell(self, row: int, col: int) -> str:
        """Text at (row, col), or "" outside the grid."""
        if row < 0 or col < 0 or row >= self.n_rows or col >= self.n_cols:
            return ""
        return self.rows[row][col]

    def is_blank(self, row: int, col: int) -> bool:
        return self.cell(row, col) == ""

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> "Grid":
        """Build a grid from a sheet read with ``header=None``."""
        return cls([[cell_text(value) for value in row] for row in df.itertuples(index=False)])

    @classmethod
    def from_excel(cls, file_path: str | Path, use_active_sheet: bool = False) -> "Grid":
        """Read the first (or active) sheet of a workbook.

        Args:
            file_path: Path to the .xlsx file
            use_active_sheet: Read the sheet that was active when the file was saved

        Returns:
            Grid of the sheet

        Raises:
            UnopenableWorkbook: If the file cannot be read as a spreadsheet
        """
        file_path = Path(file_path)

        try:
            sheet_name: str | int = 0
            if use_active_sheet:
                sheet_name = _active_sheet_name(file_path)
            with pd.ExcelFile(file_path, engine="openpyxl") as excel_file:
                df = pd.read_excel(excel_file, sheet_name=sheet_name, header=None, dtype=object)
        except Exception as e:
            raise UnopenableWorkbook(file_path, str(e)) from e

        return cls.from_dataframe(df)


def _active_sheet_name(file_path: Path) -> str:
    """Name of the active sheet of a workbook."""
    workbook = load_workbook(file_path, read_only=True)
    try:
        return workbook.active.title
    finally:
        workbook.close()
