"""CLI entry point for the timetable parser."""

import logging
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .client import CatalogClient
from .config import load_settings
from .constants import RUN_TIMESTAMP_FORMAT
from .exceptions import ConfigError, ParseError, RunAbortedError
from .exporters import get_exporter
from .ingest import BatchProcessor
from .parser import TimetableParser
from .reporting import Reporter

app = typer.Typer(
    name="timetable-parser",
    help="Parse weekly timetable spreadsheets into per-group class lists",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    """Output format options."""

    json = "json"
    csv = "csv"
    excel = "excel"


def setup_logging(log_file: Path | None = None, verbose: bool = False) -> None:
    """Log to the console and, if given, append to a log file."""
    handlers: list[logging.Handler] = [
        RichHandler(console=console, show_path=False, rich_tracebacks=True)
    ]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=handlers,
        force=True,
    )


def _export(groups, output: Path, format: OutputFormat) -> Path:
    exporter = get_exporter(format.value)

    if format == OutputFormat.csv:
        # CSV exports to directory
        output_path = output if output.is_dir() else output.parent / output.stem
    else:
        if not output.suffix:
            output = output.with_suffix(".xlsx" if format == OutputFormat.excel else ".json")
        output_path = output

    with console.status(f"[bold green]Exporting to {format.value}..."):
        exporter.export(groups, output_path)
    return output_path


@app.command()
def parse(
    input_file: Annotated[
        Path,
        typer.Argument(help="Path to the timetable Excel file", exists=True, readable=True),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("-o", "--output", help="Output file or directory path"),
    ] = None,
    format: Annotated[
        OutputFormat,
        typer.Option("-f", "--format", help="Output format"),
    ] = OutputFormat.json,
    first_sheet: Annotated[
        bool,
        typer.Option("--first-sheet", help="Read the first sheet instead of the active one"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show detailed output"),
    ] = False,
) -> None:
    """Parse one timetable file without moving it."""
    setup_logging(verbose=verbose)
    reporter = Reporter()
    parser = TimetableParser(reporter=reporter, use_active_sheet=not first_sheet)

    try:
        with console.status("[bold green]Parsing file..."):
            groups = parser.parse(input_file)
    except ParseError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)
    except RunAbortedError as e:
        console.print(f"[bold red]Fatal:[/bold red] {e}")
        raise typer.Exit(1)

    classes = groups[0].classes if groups else ()
    console.print(f"\n[bold]Parse Results for:[/bold] {input_file.name}")
    console.print(f"  Groups: {', '.join(g.group_name for g in groups)}")
    console.print(f"  Total classes: {len(classes)}")

    warnings = reporter.warnings_for(input_file.name)
    if warnings:
        console.print(f"\n[bold yellow]Warnings ({len(warnings)}):[/bold yellow]")
        for warning in warnings:
            console.print(f"  [yellow]• {warning}[/yellow]")

    if output:
        output_path = _export(groups, output, format)
        console.print(f"\n[bold green]✓[/bold green] Exported to: {output_path}")
    elif verbose:
        _show_classes(groups)


@app.command()
def validate(
    input_file: Annotated[
        Path,
        typer.Argument(help="Path to the timetable Excel file"),
    ],
    first_sheet: Annotated[
        bool,
        typer.Option("--first-sheet", help="Read the first sheet instead of the active one"),
    ] = False,
) -> None:
    """Detect the layout of a timetable file without extracting classes."""
    if not input_file.exists():
        console.print(f"[bold red]Error:[/bold red] File not found: {input_file}")
        raise typer.Exit(1)

    parser = TimetableParser(use_active_sheet=not first_sheet)

    with console.status("[bold green]Validating file..."):
        validation = parser.validate(input_file)

    console.print(f"\n[bold]Validation Results for:[/bold] {input_file.name}")

    if validation["valid"]:
        console.print("[bold green]✓ File is valid[/bold green]")
    else:
        console.print("[bold red]✗ File has issues[/bold red]")

    if validation["groups"]:
        console.print(f"\n  Groups: {', '.join(validation['groups'])}")

    layout = validation["layout"]
    if layout:
        console.print(f"  Rows: {layout.first_row}-{layout.last_row}")
        console.print(f"  Week columns: {layout.first_col}-{layout.last_col}")
        console.print(f"  First date: {layout.anchor_date.isoformat()}")

        band_table = Table(title="Weekday Bands")
        band_table.add_column("Weekday", style="cyan")
        band_table.add_column("Start", style="green")
        band_table.add_column("End", style="green")
        band_table.add_column("Slots", style="magenta")

        for band in layout.bands:
            band_table.add_row(
                band.weekday.name.capitalize(), str(band.start), str(band.end), str(band.slots)
            )

        console.print(band_table)

    if validation["errors"]:
        console.print(f"\n[bold red]Errors ({len(validation['errors'])}):[/bold red]")
        for error in validation["errors"]:
            console.print(f"  [red]• {error}[/red]")

    if not validation["valid"]:
        raise typer.Exit(1)


@app.command()
def stats(
    input_file: Annotated[
        Path,
        typer.Argument(help="Path to the timetable Excel file", exists=True, readable=True),
    ],
) -> None:
    """Show detailed statistics for a timetable file."""
    parser = TimetableParser()

    try:
        with console.status("[bold green]Analyzing file..."):
            groups = parser.parse(input_file)
            statistics = parser.get_stats(groups)
    except (ParseError, RunAbortedError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    console.print(f"\n[bold]Statistics for:[/bold] {input_file.name}")
    console.print(f"  Parse date: {statistics['parse_date']}")

    overview_table = Table(title="Overview", show_header=False)
    overview_table.add_column("Metric", style="cyan")
    overview_table.add_column("Value", style="green")

    overview_table.add_row("Groups", ", ".join(statistics["groups"]))
    overview_table.add_row("Total Classes", str(statistics["total_classes"]))
    overview_table.add_row("Disciplines", str(statistics["disciplines_count"]))
    overview_table.add_row("Professors", str(statistics["professors_count"]))
    overview_table.add_row("First Date", str(statistics["first_date"]))
    overview_table.add_row("Last Date", str(statistics["last_date"]))

    console.print(overview_table)

    if statistics["classes_by_weekday"]:
        weekday_table = Table(title="Classes by Weekday")
        weekday_table.add_column("Weekday", style="cyan")
        weekday_table.add_column("Count", style="green")

        for weekday, count in statistics["classes_by_weekday"].items():
            weekday_table.add_row(weekday, str(count))

        console.print(weekday_table)

    if statistics["classes_by_type"]:
        type_table = Table(title="Classes by Type")
        type_table.add_column("Type", style="cyan")
        type_table.add_column("Count", style="green")

        for class_type, count in statistics["classes_by_type"].items():
            type_table.add_row(class_type, str(count))

        console.print(type_table)


@app.command()
def run(
    config: Annotated[
        Optional[Path],
        typer.Option("-c", "--config", help="Path to config.json"),
    ] = None,
    downloads: Annotated[
        Optional[Path],
        typer.Option("--downloads", help="Directory with downloaded timetables"),
    ] = None,
    no_submit: Annotated[
        bool,
        typer.Option("--no-submit", help="Parse and archive without sending to the catalog"),
    ] = False,
    output: Annotated[
        Optional[Path],
        typer.Option("-o", "--output", help="Also export all groups to this JSON file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show detailed output"),
    ] = False,
) -> None:
    """Parse every downloaded timetable, archive it and submit the groups."""
    try:
        settings = load_settings(config)
    except ConfigError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    setup_logging(settings.log_file, verbose)

    if not no_submit and not settings.api_url:
        logger.critical("api_url is not configured; use --no-submit to only parse")
        raise typer.Exit(1)

    timestamp = datetime.now().strftime(RUN_TIMESTAMP_FORMAT)
    reporter = Reporter(settings.reports_dir / f"report-{timestamp}.txt")
    parser = TimetableParser(reporter=reporter, use_active_sheet=settings.use_active_sheet)
    processor = BatchProcessor(
        parser,
        downloads_dir=downloads or settings.downloads_dir,
        parsed_dir=settings.parsed_dir,
        defective_dir=settings.defective_dir,
        reporter=reporter,
    )

    aborted = False
    try:
        result = processor.run(timestamp)
    except RunAbortedError as e:
        logger.critical("Parsing stopped: %s", e)
        if e.result is None:
            raise typer.Exit(1)
        # Files parsed before the abort are already archived
        result = e.result
        aborted = True

    console.print(f"\n[bold]Run {result.timestamp}:[/bold]")
    console.print(f"  Parsed files: {len(result.parsed_files)}")
    console.print(f"  Defective files: {len(result.defective_files)}")
    console.print(f"  Groups: {len(result.groups)}")

    for file_name, reason in result.defective_files.items():
        console.print(f"  [yellow]• {file_name}: {reason}[/yellow]")

    if output:
        output_path = _export(result.groups, output, OutputFormat.json)
        console.print(f"\n[bold green]✓[/bold green] Exported to: {output_path}")

    if not no_submit:
        client = CatalogClient(settings.api_url, timeout=settings.request_timeout)
        responses = client.submit_all(result.groups)
        failed = [name for name, response in responses.items() if not response.successful]
        if failed:
            console.print(f"\n[bold yellow]Rejected by catalog ({len(failed)}):[/bold yellow] {', '.join(failed)}")

    if aborted:
        raise typer.Exit(1)


def _show_classes(groups) -> None:
    """Show extracted classes in a table."""
    if not groups or not groups[0].classes:
        return

    classes = groups[0].classes
    classes_table = Table(title="Classes")
    classes_table.add_column("Date", style="cyan")
    classes_table.add_column("Time", style="blue")
    classes_table.add_column("Discipline", style="green", max_width=40)
    classes_table.add_column("Type", style="magenta")
    classes_table.add_column("Professor", style="yellow")
    classes_table.add_column("Location", style="red")

    for entry in classes[:50]:  # Limit to first 50
        classes_table.add_row(
            entry.date.isoformat(),
            entry.time,
            entry.discipline[:40],
            entry.class_type,
            entry.professor,
            entry.location,
        )

    if len(classes) > 50:
        classes_table.add_row("...", "...", "...", "...", "...", "...")

    console.print(classes_table)


if __name__ == "__main__":
    app()
