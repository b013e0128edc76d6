# ABOUTME: The `shelfparse parse` command for inspecting how one file is cataloged.
# ABOUTME: Runs the dispatching parser on a single file and shows the ParseResult.

import json as json_lib
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shelfparse.cli.options import json_option, library_type_option, no_metadata_option
from shelfparse.core.dispatch import FileParser
from shelfparse.parsing.tokens import is_default_chapter, is_loose_leaf
from shelfparse.parsing.types import LibraryType, ParseResult

console = Console()


def result_to_dict(result: ParseResult) -> dict:
    """JSON-friendly view of a ParseResult. Sentinel tokens are kept as-is."""
    sidecar = result.embedded_metadata
    return {
        "full_path": result.full_path,
        "filename": result.filename,
        "title": result.title,
        "series": result.series,
        "volumes": result.volumes,
        "chapters": result.chapters,
        "format": result.format.value,
        "is_special": result.is_special,
        "special_index": result.special_index,
        "edition": result.edition,
        "series_sort": result.series_sort,
        "embedded_metadata": (
            {
                "series": sidecar.series,
                "volume": sidecar.volume,
                "number": sidecar.number,
                "title": sidecar.title,
            }
            if sidecar is not None
            else None
        ),
    }


def _volume_label(token: str) -> str:
    return "[dim]loose-leaf[/dim]" if is_loose_leaf(token) else escape(token)


def _chapter_label(token: str) -> str:
    return "[dim]default[/dim]" if is_default_chapter(token) else escape(token)


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--root",
    "root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Library root folder (default: the file's parent folder).",
)
@library_type_option
@no_metadata_option
@json_option
def parse(
    path: Path,
    root: Path | None,
    library_type: LibraryType,
    no_metadata: bool,
    json_output: bool,
) -> None:
    """Show the series, volume and chapter derived for a single file."""
    parser = FileParser.default()
    if parser.select(str(path), library_type) is None:
        console.print(f"[red]Error:[/red] unsupported file type: {escape(path.name)}")
        raise SystemExit(1)

    root_path = root if root is not None else path.parent
    result = parser.parse(
        str(path), str(root_path), library_type, enable_metadata=not no_metadata
    )
    if result is None:
        console.print(f"[red]Error:[/red] could not catalog {escape(path.name)}")
        raise SystemExit(1)

    if json_output:
        click.echo(json_lib.dumps(result_to_dict(result), indent=2, ensure_ascii=False))
        return

    table = Table(title=escape(result.filename), show_header=False, pad_edge=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Series", escape(result.series))
    table.add_row("Title", escape(result.title))
    table.add_row("Volume", _volume_label(result.volumes))
    table.add_row("Chapter", _chapter_label(result.chapters))
    table.add_row("Format", result.format.value)
    table.add_row("Special", "yes" if result.is_special else "no")
    if result.special_index:
        table.add_row("Special Index", str(result.special_index))
    if result.edition:
        table.add_row("Edition", escape(result.edition))
    if result.embedded_metadata is not None:
        sidecar_series = escape(result.embedded_metadata.series)
        table.add_row("ComicInfo Series", sidecar_series or "[dim]none[/dim]")

    console.print(table)
