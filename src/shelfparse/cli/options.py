# ABOUTME: Shared Click options for shelfparse CLI commands.
# ABOUTME: Library type, metadata and output flags used by both parse and scan.

import click

from shelfparse.parsing.types import LibraryType

library_type_option = click.option(
    "--type",
    "library_type",
    type=click.Choice([t.value for t in LibraryType], case_sensitive=False),
    default=LibraryType.MANGA.value,
    show_default=True,
    callback=lambda ctx, param, value: LibraryType(value.lower()),
    help="Cataloging convention of the library the file belongs to.",
)

no_metadata_option = click.option(
    "--no-metadata",
    "no_metadata",
    is_flag=True,
    default=False,
    help="Ignore metadata embedded in EPUB and ComicInfo files.",
)

json_option = click.option(
    "--json",
    "json_output",
    is_flag=True,
    default=False,
    help="Output results as JSON.",
)
