"""Tests for batch processing of a downloads directory."""

import pytest

from timetable_parser.exceptions import DirectoryError, UnrecognizedInstituteDigit
from timetable_parser.ingest import BatchProcessor
from timetable_parser.parser import TimetableParser
from timetable_parser.reporting import Reporter

TIMESTAMP = "2024-09-01-10-00-00"


@pytest.fixture
def dirs(tmp_path):
    downloads = tmp_path / "cache" / "downloads"
    downloads.mkdir(parents=True)
    return {
        "downloads": downloads,
        "parsed": tmp_path / "cache" / "parsed",
        "defective": tmp_path / "cache" / "defective",
        "report": tmp_path / "reports" / f"report-{TIMESTAMP}.txt",
    }


def _processor(dirs):
    reporter = Reporter(dirs["report"])
    parser = TimetableParser(reporter=reporter, year=2024)
    return BatchProcessor(parser, dirs["downloads"], dirs["parsed"], dirs["defective"])


class TestBatchProcessor:
    """Tests for BatchProcessor class."""

    def test_mixed_batch(self, dirs, build_rows, write_timetable):
        """Test good files are archived as parsed and bad ones as defective."""
        downloads = dirs["downloads"]
        write_timetable("315бп-1,316б.xlsx", directory=downloads)
        write_timetable("415м.xlsx", directory=downloads)
        write_timetable("расписание.xlsx", directory=downloads)
        no_monday = [["" if c == "ПОНЕДЕЛЬНИК" else c for c in row] for row in build_rows()]
        write_timetable("101.xlsx", rows=no_monday, directory=downloads)
        (downloads / "102.xlsx").write_bytes(b"not a workbook")
        (downloads / "notes.txt").write_text("ignored", encoding="utf-8")

        result = _processor(dirs).run(TIMESTAMP)

        assert result.timestamp == TIMESTAMP
        assert result.parsed_files == ["315бп-1,316б.xlsx", "415м.xlsx"]
        assert sorted(result.defective_files) == ["101.xlsx", "102.xlsx", "расписание.xlsx"]
        assert result.total_files == 5
        assert [g.group_name for g in result.groups] == ["315бп-1", "316б", "415м"]

        parsed = dirs["parsed"] / TIMESTAMP
        defective = dirs["defective"] / TIMESTAMP
        assert sorted(p.name for p in parsed.iterdir()) == ["315бп-1,316б.xlsx", "415м.xlsx"]
        assert sorted(p.name for p in defective.iterdir()) == [
            "101.xlsx",
            "102.xlsx",
            "расписание.xlsx",
        ]
        assert [p.name for p in downloads.iterdir()] == ["notes.txt"]

    def test_defective_reasons(self, dirs, write_timetable):
        """Test the failure reason of each defective file."""
        write_timetable("расписание.xlsx", directory=dirs["downloads"])
        (dirs["downloads"] / "102.xlsx").write_bytes(b"not a workbook")

        result = _processor(dirs).run(TIMESTAMP)

        assert "Invalid group name" in result.defective_files["расписание.xlsx"]
        assert "Could not open workbook" in result.defective_files["102.xlsx"]

    def test_report_file(self, dirs, write_timetable):
        """Test the report lists every step of every file."""
        write_timetable("315б.xlsx", directory=dirs["downloads"])
        write_timetable("расписание.xlsx", directory=dirs["downloads"])

        _processor(dirs).run(TIMESTAMP)

        lines = dirs["report"].read_text(encoding="utf-8").splitlines()
        assert "[315б.xlsx]  Found groups: 315б" in lines
        assert "[315б.xlsx]  Unknown class type: Л /ПЗ [5:20]" in lines
        assert "[315б.xlsx]  Table parsed successfully" in lines
        assert any(
            line.startswith("[расписание.xlsx]  Skipping table: Invalid group name")
            for line in lines
        )

    def test_empty_downloads(self, dirs):
        """Test an empty directory still creates the archive directories."""
        result = _processor(dirs).run(TIMESTAMP)

        assert result.total_files == 0
        assert result.groups == []
        assert (dirs["parsed"] / TIMESTAMP).is_dir()
        assert (dirs["defective"] / TIMESTAMP).is_dir()

    def test_default_timestamp(self, dirs):
        """Test a timestamp is generated when none is given."""
        result = _processor(dirs).run()
        assert (dirs["parsed"] / result.timestamp).is_dir()

    def test_unknown_institute_aborts(self, dirs, write_timetable):
        """Test an unknown institute digit stops the run and keeps earlier groups."""
        write_timetable("101.xlsx", directory=dirs["downloads"])
        write_timetable("915.xlsx", directory=dirs["downloads"])
        write_timetable("916.xlsx", directory=dirs["downloads"])

        with pytest.raises(UnrecognizedInstituteDigit) as exc_info:
            _processor(dirs).run(TIMESTAMP)

        partial = exc_info.value.result
        assert partial.timestamp == TIMESTAMP
        assert partial.parsed_files == ["101.xlsx"]
        assert [g.group_name for g in partial.groups] == ["101"]
        assert [p.name for p in (dirs["parsed"] / TIMESTAMP).iterdir()] == ["101.xlsx"]
        assert sorted(p.name for p in dirs["downloads"].iterdir()) == ["915.xlsx", "916.xlsx"]

    def test_missing_downloads_has_empty_result(self, dirs):
        """Test an abort before any file carries an empty result."""
        dirs["downloads"].rmdir()

        with pytest.raises(DirectoryError) as exc_info:
            _processor(dirs).run(TIMESTAMP)
        assert exc_info.value.result.groups == []

    def test_missing_downloads(self, dirs):
        """Test a missing downloads directory stops the run."""
        dirs["downloads"].rmdir()

        with pytest.raises(DirectoryError):
            _processor(dirs).run(TIMESTAMP)

    def test_archive_dir_not_creatable(self, dirs, tmp_path):
        """Test an archive path blocked by a file stops the run."""
        blocker = tmp_path / "blocked"
        blocker.write_text("", encoding="utf-8")
        dirs["parsed"] = blocker

        with pytest.raises(DirectoryError):
            _processor(dirs).run(TIMESTAMP)

    def test_uses_parser_reporter(self, dirs):
        """Test the parser reporter is used when none is given."""
        processor = _processor(dirs)
        assert processor.reporter is processor.parser.reporter
