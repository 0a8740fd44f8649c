"""Tests for the grid accessor."""

from datetime import datetime

import pandas as pd
import pytest
from openpyxl import Workbook

from timetable_parser.exceptions import UnopenableWorkbook
from timetable_parser.grid import Grid


class TestGrid:
    """Tests for Grid views and cell access."""

    def test_ragged_rows_are_padded(self):
        """Test rows of different length become a rectangle."""
        grid = Grid([["a"], ["b", "c", "d"]])
        assert grid.n_rows == 2
        assert grid.n_cols == 3
        assert grid.rows[0] == ["a", "", ""]

    def test_column_view(self):
        """Test column-major view matches row-major view."""
        grid = Grid([["a", "b"], ["c", "d"]])
        assert grid.cols == [["a", "c"], ["b", "d"]]

    def test_cell_out_of_range(self):
        """Test cells outside the grid read as blank."""
        grid = Grid([["a", "b"]])
        assert grid.cell(0, 1) == "b"
        assert grid.cell(5, 0) == ""
        assert grid.cell(0, 5) == ""
        assert grid.cell(-1, 0) == ""
        assert grid.cell(0, -1) == ""

    def test_is_blank(self):
        """Test blank detection."""
        grid = Grid([["", " "]])
        assert grid.is_blank(0, 0) is True
        assert grid.is_blank(0, 1) is False

    def test_empty_grid(self):
        """Test grid with no rows."""
        grid = Grid([])
        assert grid.n_rows == 0
        assert grid.n_cols == 0
        assert grid.cell(0, 0) == ""


class TestGridFromDataFrame:
    """Tests for building a grid from a DataFrame."""

    def test_values_become_text(self):
        """Test numbers, blanks and dates are converted to text."""
        df = pd.DataFrame(
            [
                [None, "ПОНЕДЕЛЬНИК", 2.0, 9],
                [float("nan"), "Математика", datetime(2024, 9, 2), "ПЗ"],
            ]
        )
        grid = Grid.from_dataframe(df)

        assert grid.rows[0] == ["", "ПОНЕДЕЛЬНИК", "2", "9"]
        assert grid.rows[1] == ["", "Математика", "02.09.2024", "ПЗ"]


class TestGridFromExcel:
    """Tests for reading grids from workbooks."""

    def test_reads_timetable_file(self, write_timetable, build_rows):
        """Test a written timetable reads back with the same text."""
        rows = build_rows()
        file_path = write_timetable(rows=rows)

        grid = Grid.from_excel(file_path)

        assert grid.cell(5, 1) == "ПОНЕДЕЛЬНИК"
        assert grid.cell(5, 2) == "2"
        assert grid.cell(2, 2) == "СЕНТЯБРЬ"
        assert grid.cell(6, 0) == "08:30-10:00"
        assert grid.n_rows == len(rows)

    def test_garbage_file(self, tmp_path):
        """Test a non-spreadsheet file raises UnopenableWorkbook."""
        file_path = tmp_path / "101.xlsx"
        file_path.write_text("not a workbook", encoding="utf-8")

        with pytest.raises(UnopenableWorkbook):
            Grid.from_excel(file_path)

    def test_missing_file(self, tmp_path):
        """Test a missing file raises UnopenableWorkbook."""
        with pytest.raises(UnopenableWorkbook):
            Grid.from_excel(tmp_path / "missing.xlsx")

    def test_active_sheet(self, tmp_path):
        """Test the active sheet is read when requested."""
        file_path = tmp_path / "sheets.xlsx"
        workbook = Workbook()
        first = workbook.active
        first.title = "Старое"
        first["A1"] = "first"
        second = workbook.create_sheet("Новое")
        second["A1"] = "second"
        workbook.active = 1
        workbook.save(file_path)

        assert Grid.from_excel(file_path).cell(0, 0) == "first"
        assert Grid.from_excel(file_path, use_active_sheet=True).cell(0, 0) == "second"
