# ABOUTME: The `shelfparse scan` command for previewing how a library tree is cataloged.
# ABOUTME: Parses every supported file under a directory and reports series and skipped files.

import json as json_lib
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shelfparse.cli.commands.parse_cmd import result_to_dict
from shelfparse.cli.options import json_option, library_type_option, no_metadata_option
from shelfparse.core.dispatch import FileParser
from shelfparse.core.scanner import ScanReport, scan_library
from shelfparse.parsing.tokens import is_loose_leaf
from shelfparse.parsing.types import LibraryType

console = Console()


@click.command("scan")
@click.argument(
    "path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@library_type_option
@no_metadata_option
@json_option
def scan(
    path: Path, library_type: LibraryType, no_metadata: bool, json_output: bool
) -> None:
    """Parse every supported file under a library folder."""
    report = scan_library(
        path, FileParser.default(), library_type, enable_metadata=not no_metadata
    )

    if json_output:
        _print_json(report)
        return

    _print_rich(report)


def _print_json(report: ScanReport) -> None:
    """Print the scan report as JSON."""
    data = {
        "scan_root": str(report.scan_root),
        "library_type": report.library_type.value,
        "total_parsed": report.total_parsed,
        "unsupported": report.unsupported,
        "series": [
            {
                "name": entry.name,
                "files": [result_to_dict(result) for result in entry.results],
            }
            for entry in report.series
        ],
        "skipped": [str(skipped) for skipped in report.skipped],
    }
    click.echo(json_lib.dumps(data, indent=2, ensure_ascii=False))


def _print_rich(report: ScanReport) -> None:
    """Print the scan report with Rich formatting."""
    if report.total_parsed == 0 and not report.skipped:
        console.print(f"[dim]0 file(s) parsed in {escape(str(report.scan_root))}[/dim]")
        return

    table = Table(title="Series")
    table.add_column("Series", style="bold")
    table.add_column("Files", justify="right")
    table.add_column("Volumes")
    table.add_column("Specials", justify="right")

    for entry in report.series:
        volumes = [v for v in entry.volumes if not is_loose_leaf(v)]
        table.add_row(
            escape(entry.name),
            str(len(entry.results)),
            escape(", ".join(volumes)) or "[dim]-[/dim]",
            str(entry.special_count),
        )

    console.print(table)
    console.print(
        f"\n[bold]{report.total_parsed} file(s) parsed, "
        f"{len(report.skipped)} skipped, {report.unsupported} unsupported.[/bold]"
    )

    if report.skipped:
        console.print("\n[yellow]Could not catalog:[/yellow]")
        for skipped in report.skipped:
            console.print(f"  {escape(str(skipped.relative_to(report.scan_root)))}")
